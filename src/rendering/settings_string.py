"""
settings_string.py

Serializzazione canonica di un ParameterSet per copia/incolla e condivisione.

Formato (24 campi separati da virgola, ASCII, ordine fisso):
    wave_type (intero 0-8), 22 campi continui del generatore, master_volume

Ogni float è arrotondato a 4 decimali senza zeri superflui e senza lo zero
iniziale (0.5 → ".5", -0.25 → "-.25", 1.0 → "1"); un valore con modulo
sotto 1e-4 diventa un campo vuoto. Il punto decimale è sempre '.', a
prescindere dal locale.

Le estensioni BFXR (compression, overtones, bit crush) NON fanno parte del
record: decode() le lascia invariate.
"""

from typing import List

from parameters.parameter_definitions import SETTINGS_FIELD_COUNT, SETTINGS_ORDER
from parameters.sfx_params import SfxParams

# Sotto questa soglia (in modulo) un valore è serializzato come campo vuoto
SERIAL_EPSILON = 0.0001


class SettingsFormatError(ValueError):
    """Record con un numero di campi diverso da SETTINGS_FIELD_COUNT."""


class SettingsParseError(ValueError):
    """Sotto-campo non numerico in un record."""


# =============================================================================
# ENCODE
# =============================================================================

def format_4dp(value: float) -> str:
    """Numero a 4 decimali come stringa ('' se |value| < 1e-4)."""
    if -SERIAL_EPSILON < value < SERIAL_EPSILON:
        return ""

    text = f"{value:.4f}".rstrip('0').rstrip('.')

    if text.startswith('0.'):
        text = text[1:]
    elif text.startswith('-0.'):
        text = '-' + text[2:]

    return text


def encode(params: SfxParams) -> str:
    """
    Ritorna la settings string di params.

    Returns:
        Lista di 24 valori separati da virgola
    """
    fields = [str(int(params.wave_type))]
    fields.extend(format_4dp(params.get_field(name)) for name in SETTINGS_ORDER)
    return ",".join(fields)


# =============================================================================
# DECODE
# =============================================================================

def _parse_uint(token: str) -> int:
    token = token.strip()
    if not token:
        return 0
    try:
        value = int(token)
    except ValueError:
        raise SettingsParseError(f"Campo 0 (wave_type): '{token}' non è un intero") from None
    if value < 0:
        raise SettingsParseError(f"Campo 0 (wave_type): '{token}' è negativo")
    return value


def _parse_float(token: str, index: int, name: str) -> float:
    token = token.strip()
    if not token:
        return 0.0
    try:
        return float(token)
    except ValueError:
        raise SettingsParseError(
            f"Campo {index} ({name}): '{token}' non è un numero"
        ) from None


def decode(params: SfxParams, text: str) -> bool:
    """
    Carica una settings string in params.

    Tutti i campi vengono interpretati PRIMA di scrivere: se il record non è
    valido, params resta invariato.

    Args:
        params: ParameterSet di destinazione
        text: settings string

    Returns:
        False se il record non ha esattamente 24 campi, True altrimenti.

    Raises:
        SettingsParseError: se un campo non vuoto non è numerico
    """
    tokens = text.split(',')

    if len(tokens) != SETTINGS_FIELD_COUNT:
        return False

    wave = _parse_uint(tokens[0])
    values: List[float] = [
        _parse_float(token, index, name)
        for index, (token, name) in enumerate(zip(tokens[1:], SETTINGS_ORDER), start=1)
    ]

    params.set_field('wave_type', wave)
    for name, value in zip(SETTINGS_ORDER, values):
        params.set_field(name, value, value_type='settings')

    return True


def from_settings_string(text: str, owner_id: str = "unknown") -> SfxParams:
    """
    Crea un nuovo ParameterSet da una settings string.

    Raises:
        SettingsFormatError: numero di campi errato
        SettingsParseError: campo non numerico
    """
    params = SfxParams(owner_id=owner_id)
    if not decode(params, text):
        raise SettingsFormatError(
            f"Settings string con {len(text.split(','))} campi, "
            f"attesi {SETTINGS_FIELD_COUNT}"
        )
    return params
