"""
parameter_definitions.py

Questo modulo agisce come REGISTRY (Registro) centrale per le definizioni dei parametri
di un effetto sonoro procedurale (modello sfxr/bfxr).
Contiene i metadati e le regole di validazione (Bounds) per ogni campo del ParameterSet.

Design Pattern:
- Value Object: La classe FieldBounds è immutabile.
- Registry: Il dizionario SFX_PARAMETERS centralizza la configurazione.

Qui definiamo COSA sono i parametri, non COME vengono generati.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Tuple


class WaveType(IntEnum):
    """Forma d'onda dell'oscillatore. Il codice intero è quello serializzato."""
    SQUARE = 0
    SAWTOOTH = 1
    SINE = 2
    NOISE = 3
    TRIANGLE = 4
    PINK_NOISE = 5
    TAN = 6
    WHISTLE = 7
    BREAKER = 8


@dataclass(frozen=True)
class FieldBounds:
    """
    Definisce i limiti e il comportamento di un campo continuo.

    Attributes:
        min_val (float): Valore minimo consentito (Safety Clamp).
        max_val (float): Valore massimo consentito (Safety Clamp).
        default (float): Valore di baseline applicato da reset().
        mutable (bool): Se True il Mutator può perturbare il campo.
        serialized (bool): Se True il campo compare nella settings string.
    """
    min_val: float
    max_val: float
    default: float = 0.0
    mutable: bool = True
    serialized: bool = True

    @property
    def is_bipolar(self) -> bool:
        return self.min_val < 0.0


# =============================================================================
# SYSTEM CONSTANTS & DEFAULTS
# =============================================================================

# Volume iniziale di un ParameterSet nuovo. reset() NON lo modifica.
DEFAULT_MASTER_VOLUME = 0.5

# Ampiezza di default della mutazione (± valore).
DEFAULT_MUTATION = 0.05

# Numero di campi della settings string (wave type + 22 campi + master volume).
SETTINGS_FIELD_COUNT = 24


def _unit(default: float = 0.0, **kwargs) -> FieldBounds:
    return FieldBounds(min_val=0.0, max_val=1.0, default=default, **kwargs)


def _bipolar(default: float = 0.0, **kwargs) -> FieldBounds:
    return FieldBounds(min_val=-1.0, max_val=1.0, default=default, **kwargs)


# =============================================================================
# PARAMETER REGISTRY
# =============================================================================
# L'ordine di inserimento è anche l'ordine dei campi nella settings string.
# Se aggiungi un nuovo campo al renderer, devi aggiungerlo qui.

SFX_PARAMETERS: Dict[str, FieldBounds] = {

    # =========================================================================
    # ENVELOPE
    # =========================================================================
    'attack_time': _unit(),
    'sustain_time': _unit(default=0.3),
    'sustain_punch': _unit(),
    'decay_time': _unit(default=0.4),

    # =========================================================================
    # PITCH
    # =========================================================================
    'start_frequency': _unit(default=0.3),
    'min_frequency': _unit(),
    'slide': _bipolar(),
    'delta_slide': _bipolar(),
    'vibrato_depth': _unit(),
    'vibrato_speed': _unit(),
    'change_amount': _bipolar(),
    'change_speed': _unit(),

    # =========================================================================
    # TIMBRE
    # =========================================================================
    'square_duty': _unit(),
    'duty_sweep': _bipolar(),
    'repeat_speed': _unit(),
    'phaser_offset': _bipolar(),
    'phaser_sweep': _bipolar(),

    # =========================================================================
    # FILTRI
    # =========================================================================
    'lp_filter_cutoff': _unit(default=1.0),
    'lp_filter_cutoff_sweep': _bipolar(),
    'lp_filter_resonance': _unit(),
    'hp_filter_cutoff': _unit(),
    'hp_filter_cutoff_sweep': _bipolar(),

    # =========================================================================
    # OUTPUT
    # =========================================================================
    # Non mutato, non resettato: è una scelta dell'utente, non del preset.
    'master_volume': _unit(default=DEFAULT_MASTER_VOLUME, mutable=False),

    # =========================================================================
    # ESTENSIONI BFXR (fuori dalla settings string)
    # =========================================================================
    'compression_amount': _unit(default=0.3, serialized=False),
    'overtones': _unit(serialized=False),
    'overtone_falloff': _unit(serialized=False),
    'bit_crush': _unit(serialized=False),
    'bit_crush_sweep': _bipolar(serialized=False),
}


# =============================================================================
# ORDINAMENTI
# =============================================================================

# Campi continui della settings string: i 22 del generatore, poi master volume.
SETTINGS_ORDER: Tuple[str, ...] = tuple(
    name for name, bounds in SFX_PARAMETERS.items()
    if bounds.serialized and name != 'master_volume'
) + ('master_volume',)

# Ordine delle estrazioni del Mutator (fa parte del contratto di riproducibilità).
MUTATION_ORDER: Tuple[str, ...] = (
    'start_frequency', 'min_frequency', 'slide', 'delta_slide',
    'square_duty', 'duty_sweep', 'vibrato_depth', 'vibrato_speed',
    'attack_time', 'sustain_time', 'decay_time', 'sustain_punch',
    'lp_filter_cutoff', 'lp_filter_cutoff_sweep', 'lp_filter_resonance',
    'hp_filter_cutoff', 'hp_filter_cutoff_sweep',
    'phaser_offset', 'phaser_sweep', 'repeat_speed',
    'change_speed', 'change_amount',
    'compression_amount', 'overtones', 'overtone_falloff',
    'bit_crush', 'bit_crush_sweep',
)

# Campi riportati alla baseline da reset() (tutti tranne master volume).
RESET_FIELDS: Tuple[str, ...] = tuple(
    name for name in SFX_PARAMETERS if name != 'master_volume'
)


def get_parameter_definition(name: str) -> FieldBounds:
    """
    Recupera i bounds di un campo.

    Raises:
        KeyError: se il campo non esiste nel registry.
    """
    if name not in SFX_PARAMETERS:
        raise KeyError(
            f"Parametro '{name}' non definito in SFX_PARAMETERS. "
            f"Parametri validi: {list(SFX_PARAMETERS.keys())}"
        )
    return SFX_PARAMETERS[name]
