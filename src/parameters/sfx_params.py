"""
sfx_params.py

Definisce SfxParams, il Parameter Store di un effetto sonoro procedurale.

Ogni campo continuo è un BoundedField (data descriptor): la lettura è pura,
la scrittura passa SEMPRE da set_field(), che applica clamp ai bounds del
registry, arrotondamento a float32 e imposta il flag dirty.
Non esiste un'altra via di scrittura.

Il flag dirty significa "non ancora consumato dal renderer": lo azzera solo
il renderer esterno (mark_clean), mai questo modulo.
"""

import math
from typing import Dict, Optional, Union

from parameters.parameter_definitions import (
    SFX_PARAMETERS,
    RESET_FIELDS,
    FieldBounds,
    WaveType,
    get_parameter_definition,
)
from shared.utils import clamp, to_float32
from shared.logger import log_clip_warning, log_config_warning, log_wave_type_reset

WaveInput = Union[WaveType, int, float]


class BoundedField:
    """Descriptor per un campo continuo: delega la scrittura a set_field()."""

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        return obj._values[self.name]

    def __set__(self, obj, value):
        obj.set_field(self.name, value)


class SfxParams:
    """
    Bundle di wave type + campi continui che descrive un effetto sonoro.

    Alla creazione vale la baseline del registry (master volume 0.5) ed è
    dirty: non è mai stato renderizzato.
    """

    # ENVELOPE
    attack_time = BoundedField()
    sustain_time = BoundedField()
    sustain_punch = BoundedField()
    decay_time = BoundedField()

    # PITCH
    start_frequency = BoundedField()
    min_frequency = BoundedField()
    slide = BoundedField()
    delta_slide = BoundedField()
    vibrato_depth = BoundedField()
    vibrato_speed = BoundedField()
    change_amount = BoundedField()
    change_speed = BoundedField()

    # TIMBRE
    square_duty = BoundedField()
    duty_sweep = BoundedField()
    repeat_speed = BoundedField()
    phaser_offset = BoundedField()
    phaser_sweep = BoundedField()

    # FILTRI
    lp_filter_cutoff = BoundedField()
    lp_filter_cutoff_sweep = BoundedField()
    lp_filter_resonance = BoundedField()
    hp_filter_cutoff = BoundedField()
    hp_filter_cutoff_sweep = BoundedField()

    # OUTPUT
    master_volume = BoundedField()

    # BFXR
    compression_amount = BoundedField()
    overtones = BoundedField()
    overtone_falloff = BoundedField()
    bit_crush = BoundedField()
    bit_crush_sweep = BoundedField()

    def __init__(self, owner_id: str = "unknown"):
        self.owner_id = owner_id
        self._wave_type = WaveType.SQUARE
        self._values: Dict[str, float] = {
            name: to_float32(bounds.default)
            for name, bounds in SFX_PARAMETERS.items()
        }
        self.dirty = True

    # =========================================================================
    # WAVE TYPE
    # =========================================================================

    @property
    def wave_type(self) -> WaveType:
        return self._wave_type

    @wave_type.setter
    def wave_type(self, value: WaveInput):
        self._wave_type = self._coerce_wave_type(value)
        self.dirty = True

    def _coerce_wave_type(self, value: WaveInput) -> WaveType:
        """Codici fuori da 0..BREAKER tornano a SQUARE (nessuna eccezione, solo warning nel log)."""
        if isinstance(value, float) and not math.isfinite(value):
            log_wave_type_reset(self.owner_id, value)
            return WaveType.SQUARE
        code = int(value)
        if code < WaveType.SQUARE or code > WaveType.BREAKER:
            log_wave_type_reset(self.owner_id, value)
            return WaveType.SQUARE
        return WaveType(code)

    # =========================================================================
    # ACCESSO GENERICO
    # =========================================================================

    def set_field(self, name: str, value, value_type: Optional[str] = None) -> float:
        """
        Scrive un campo (unico punto di scrittura pubblico).

        Args:
            name: nome del campo (o 'wave_type')
            value: nuovo valore, clampato ai bounds
            value_type: se valorizzato ('settings', 'override') un eventuale
                clip è loggato come warning di configurazione

        Returns:
            Il valore effettivamente memorizzato.
        """
        if name == 'wave_type':
            self.wave_type = value
            return float(self._wave_type)

        stored = self._store(name, value, get_parameter_definition(name), value_type)
        self.dirty = True
        return stored

    def get_field(self, name: str):
        if name == 'wave_type':
            return self._wave_type
        get_parameter_definition(name)
        return self._values[name]

    def _store(self, name: str, value, bounds: FieldBounds,
               value_type: Optional[str] = None) -> float:
        """Clamp + float32. Non tocca il flag dirty."""
        raw = float(value)
        clamped = clamp(raw, bounds.min_val, bounds.max_val)

        if clamped != raw:
            if value_type is not None and raw == raw:
                log_config_warning(
                    owner_id=self.owner_id,
                    param_name=name,
                    raw_value=raw,
                    clipped_value=clamped,
                    min_val=bounds.min_val,
                    max_val=bounds.max_val,
                    value_type=value_type
                )
            else:
                log_clip_warning(
                    owner_id=self.owner_id,
                    param_name=name,
                    raw_value=raw,
                    clipped_value=clamped,
                    min_val=bounds.min_val,
                    max_val=bounds.max_val
                )

        self._values[name] = to_float32(clamped)
        return self._values[name]

    def as_dict(self) -> Dict[str, float]:
        """Snapshot dei valori (wave_type come intero)."""
        snapshot = {'wave_type': int(self._wave_type)}
        snapshot.update(self._values)
        return snapshot

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def reset(self):
        """Riporta tutti i campi alla baseline, tranne master volume."""
        self._wave_type = WaveType.SQUARE
        for name in RESET_FIELDS:
            self._store(name, SFX_PARAMETERS[name].default, SFX_PARAMETERS[name])
        self.dirty = True

    def mark_clean(self):
        """Riservato al renderer: segnala che il suono è stato renderizzato."""
        self.dirty = False

    # =========================================================================
    # CLONER
    # =========================================================================

    def clone(self) -> 'SfxParams':
        """Ritorna una copia indipendente con tutti i valori duplicati."""
        copy = SfxParams(owner_id=self.owner_id)
        copy.copy_from(self)
        return copy

    def copy_from(self, other: 'SfxParams', make_dirty: bool = False):
        """
        Copia tutti i valori da un'altra istanza.

        Il flag dirty della destinazione resta com'è, a meno di make_dirty=True.
        """
        self._wave_type = self._coerce_wave_type(other.wave_type)
        for name, bounds in SFX_PARAMETERS.items():
            self._store(name, other.get_field(name), bounds)

        if make_dirty:
            self.dirty = True

    # =========================================================================
    # DUNDER
    # =========================================================================

    def __eq__(self, other):
        if not isinstance(other, SfxParams):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    __hash__ = None

    def __repr__(self):
        return (
            f"<SfxParams '{self.owner_id}': {self._wave_type.name} "
            f"freq={self.start_frequency:.3f} slide={self.slide:+.3f} "
            f"dirty={self.dirty}>"
        )
