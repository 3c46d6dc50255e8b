"""
preset_generators.py

I sette generatori di categoria (pickup, laser, explosion, powerup, hit,
jump, blip). Ogni generatore:
1. riporta il ParameterSet alla baseline (reset, sempre dirty)
2. applica la sua "ricetta" di estrazioni pesate e rami condizionali.

Le formule e l'ORDINE delle estrazioni definiscono il suono della categoria:
con una sorgente scriptata lo stesso input produce lo stesso ParameterSet.
Ogni scrittura passa dai setter clampati di SfxParams.

Notazione nei commenti: U = rng.random(), B = rng.random_bool().
"""

from typing import Optional

from parameters.parameter_definitions import WaveType
from parameters.sfx_params import SfxParams
from shared.random_source import RandomSource


def _prepare(params: Optional[SfxParams]) -> SfxParams:
    """Crea un ParameterSet nuovo o resetta quello ricevuto."""
    if params is None:
        params = SfxParams()
    params.reset()
    return params


# =============================================================================
# PICKUP / COIN
# =============================================================================

def generate_pickup_coin(rng: RandomSource, params: Optional[SfxParams] = None) -> SfxParams:
    """Suono di raccolta moneta: nota acuta, breve, con salto di pitch opzionale."""
    p = _prepare(params)

    p.start_frequency = 0.4 + rng.random() * 0.5

    p.sustain_time = rng.random() * 0.1
    p.decay_time = 0.1 + rng.random() * 0.4
    p.sustain_punch = 0.3 + rng.random() * 0.3

    if rng.random_bool():
        p.change_speed = 0.5 + rng.random() * 0.2
        # Salto armonico: rapporto cnum/cden con cnum in [1, 7]
        cnum = int(rng.random() * 7) + 1
        cden = cnum + int(rng.random() * 7) + 2
        p.change_amount = cnum / cden

    return p


# =============================================================================
# LASER / SHOOT
# =============================================================================

def generate_laser_shoot(rng: RandomSource, params: Optional[SfxParams] = None) -> SfxParams:
    """Laser: slide discendente, con variante "zap" più aggressiva nel 33% dei casi."""
    p = _prepare(params)

    wave = int(rng.random() * 3)
    if wave == WaveType.SINE and rng.random_bool():
        wave = int(rng.random() * 2)
    p.wave_type = wave

    p.start_frequency = 0.5 + rng.random() * 0.5
    p.min_frequency = max(0.2, p.start_frequency - 0.2 - rng.random() * 0.6)

    p.slide = -0.15 - rng.random() * 0.2

    if rng.random() < 0.33:
        p.start_frequency = 0.3 + rng.random() * 0.6
        p.min_frequency = rng.random() * 0.1
        p.slide = -0.35 - rng.random() * 0.3

    if rng.random_bool():
        p.square_duty = rng.random() * 0.5
        p.duty_sweep = rng.random() * 0.2
    else:
        p.square_duty = 0.4 + rng.random() * 0.5
        p.duty_sweep = -rng.random() * 0.7

    p.sustain_time = 0.1 + rng.random() * 0.2
    p.decay_time = rng.random() * 0.4
    if rng.random_bool():
        p.sustain_punch = rng.random() * 0.3

    if rng.random() < 0.33:
        p.phaser_offset = rng.random() * 0.2
        p.phaser_sweep = -rng.random() * 0.2

    if rng.random_bool():
        p.hp_filter_cutoff = rng.random() * 0.3

    return p


# =============================================================================
# EXPLOSION
# =============================================================================

def generate_explosion(rng: RandomSource, params: Optional[SfxParams] = None) -> SfxParams:
    """Esplosione: rumore, frequenza al quadrato, repeat e phaser opzionali."""
    p = _prepare(params)

    p.wave_type = WaveType.NOISE

    if rng.random_bool():
        start = 0.1 + rng.random() * 0.4
        p.slide = -0.1 + rng.random() * 0.4
    else:
        start = 0.2 + rng.random() * 0.7
        p.slide = -0.2 - rng.random() * 0.2

    p.start_frequency = start * start

    if rng.random() < 0.2:
        p.slide = 0.0
    if rng.random() < 0.33:
        p.repeat_speed = 0.3 + rng.random() * 0.5

    p.sustain_time = 0.1 + rng.random() * 0.3
    p.decay_time = rng.random() * 0.5
    p.sustain_punch = 0.2 + rng.random() * 0.6

    if rng.random_bool():
        p.phaser_offset = -0.3 + rng.random() * 0.9
        p.phaser_sweep = -rng.random() * 0.3

    if rng.random() < 0.33:
        p.change_speed = 0.6 + rng.random() * 0.3
        p.change_amount = 0.8 - rng.random() * 1.6

    return p


# =============================================================================
# POWERUP
# =============================================================================

def generate_powerup(rng: RandomSource, params: Optional[SfxParams] = None) -> SfxParams:
    """Powerup: slide ascendente, con repeat oppure vibrato opzionale."""
    p = _prepare(params)

    if rng.random_bool():
        p.wave_type = WaveType.SAWTOOTH
    else:
        p.square_duty = rng.random() * 0.6

    if rng.random_bool():
        p.start_frequency = 0.2 + rng.random() * 0.3
        p.slide = 0.1 + rng.random() * 0.4
        p.repeat_speed = 0.4 + rng.random() * 0.4
    else:
        p.start_frequency = 0.2 + rng.random() * 0.3
        p.slide = 0.05 + rng.random() * 0.2

        if rng.random_bool():
            p.vibrato_depth = rng.random() * 0.7
            p.vibrato_speed = rng.random() * 0.6

    p.sustain_time = rng.random() * 0.4
    p.decay_time = 0.1 + rng.random() * 0.4

    return p


# =============================================================================
# HIT / HURT
# =============================================================================

def generate_hit_hurt(rng: RandomSource, params: Optional[SfxParams] = None) -> SfxParams:
    """Colpo: slide fortemente negativo, sustain e decay brevi."""
    p = _prepare(params)

    wave = int(rng.random() * 3)
    if wave == WaveType.SINE:
        wave = WaveType.NOISE
    elif wave == WaveType.SQUARE:
        p.square_duty = rng.random() * 0.6
    p.wave_type = wave

    p.start_frequency = 0.2 + rng.random() * 0.6
    p.slide = -0.3 - rng.random() * 0.4

    p.sustain_time = rng.random() * 0.1
    p.decay_time = 0.1 + rng.random() * 0.2

    if rng.random_bool():
        p.hp_filter_cutoff = rng.random() * 0.3

    return p


# =============================================================================
# JUMP
# =============================================================================

def generate_jump(rng: RandomSource, params: Optional[SfxParams] = None) -> SfxParams:
    """Salto: onda quadra, slide positivo, filtri opzionali."""
    p = _prepare(params)

    p.wave_type = WaveType.SQUARE
    p.square_duty = rng.random() * 0.6
    p.start_frequency = 0.3 + rng.random() * 0.3
    p.slide = 0.1 + rng.random() * 0.2

    p.sustain_time = 0.1 + rng.random() * 0.3
    p.decay_time = 0.1 + rng.random() * 0.2

    if rng.random_bool():
        p.hp_filter_cutoff = rng.random() * 0.3
    if rng.random_bool():
        p.lp_filter_cutoff = 1.0 - rng.random() * 0.6

    return p


# =============================================================================
# BLIP / SELECT
# =============================================================================

def generate_blip_select(rng: RandomSource, params: Optional[SfxParams] = None) -> SfxParams:
    """Blip di menu: quadra o dente di sega, breve, passa-alto fisso a 0.1."""
    p = _prepare(params)

    wave = int(rng.random() * 2)
    if wave == WaveType.SQUARE:
        p.square_duty = rng.random() * 0.6
    p.wave_type = wave

    p.start_frequency = 0.2 + rng.random() * 0.4

    p.sustain_time = 0.1 + rng.random() * 0.1
    p.decay_time = rng.random() * 0.2
    p.hp_filter_cutoff = 0.1

    return p
