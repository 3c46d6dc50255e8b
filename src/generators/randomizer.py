"""
randomizer.py - Randomizzazione completa di un ParameterSet.

Ignora i valori esistenti: resetta, estrae ogni campo da una distribuzione
sbilanciata verso valori piccoli con escursioni occasionali ((2U-1)^k),
poi applica tre correzioni a posteriori:

1. suono troppo corto (attack + sustain + decay < 0.2) → sustain e decay
   ri-estratti in [0.2, 0.5]
2. slide che porterebbe il pitch fuori range rispetto a start_frequency
   → slide invertito
3. passa-basso già chiuso che continua a chiudersi → sweep invertito

Le estensioni BFXR vengono estratte DOPO le correzioni.
"""

from typing import Optional

from parameters.parameter_definitions import WaveType
from parameters.sfx_params import SfxParams
from shared.random_source import RandomSource
from shared.utils import int_power

# Soglie delle correzioni a posteriori
MIN_AUDIBLE_DURATION = 0.2
HIGH_START_FREQUENCY = 0.7
HIGH_START_MAX_SLIDE = 0.2
LOW_START_FREQUENCY = 0.2
LOW_START_MIN_SLIDE = -0.05
CLOSED_LP_CUTOFF = 0.1
CLOSING_LP_SWEEP = -0.05


def _signed(rng: RandomSource, power: int = 1) -> float:
    """(2U - 1)^power: esponente dispari conserva il segno, pari dà valori >= 0."""
    return int_power(rng.random() * 2.0 - 1.0, power)


def randomize(rng: RandomSource, params: Optional[SfxParams] = None) -> SfxParams:
    """
    Imposta tutti i parametri a valori casuali.

    Args:
        rng: sorgente random
        params: ParameterSet da sovrascrivere (None = nuovo)
    """
    p = params if params is not None else SfxParams()
    p.reset()

    p.wave_type = int(rng.random() * (WaveType.BREAKER + 1))

    p.attack_time = _signed(rng, 4)
    p.sustain_time = _signed(rng, 2)
    p.sustain_punch = int_power(rng.random() * 0.8, 2)
    p.decay_time = rng.random()

    if rng.random_bool():
        p.start_frequency = _signed(rng, 2)
    else:
        p.start_frequency = int_power(rng.random() * 0.5, 3) + 0.5
    p.min_frequency = 0.0

    p.slide = _signed(rng, 3)
    p.delta_slide = _signed(rng, 3)

    p.vibrato_depth = _signed(rng, 3)
    p.vibrato_speed = _signed(rng)

    p.change_amount = _signed(rng)
    p.change_speed = _signed(rng)

    p.square_duty = _signed(rng)
    p.duty_sweep = _signed(rng, 3)

    p.repeat_speed = _signed(rng)

    p.phaser_offset = _signed(rng, 3)
    p.phaser_sweep = _signed(rng, 3)

    p.lp_filter_cutoff = 1.0 - int_power(rng.random(), 3)
    p.lp_filter_cutoff_sweep = _signed(rng, 3)
    p.lp_filter_resonance = _signed(rng)

    p.hp_filter_cutoff = int_power(rng.random(), 5)
    p.hp_filter_cutoff_sweep = _signed(rng, 5)

    # =========================================================================
    # CORREZIONI A POSTERIORI
    # =========================================================================

    if p.attack_time + p.sustain_time + p.decay_time < MIN_AUDIBLE_DURATION:
        p.sustain_time = 0.2 + rng.random() * 0.3
        p.decay_time = 0.2 + rng.random() * 0.3

    if ((p.start_frequency > HIGH_START_FREQUENCY and p.slide > HIGH_START_MAX_SLIDE)
            or (p.start_frequency < LOW_START_FREQUENCY and p.slide < LOW_START_MIN_SLIDE)):
        p.slide = -p.slide

    if p.lp_filter_cutoff < CLOSED_LP_CUTOFF and p.lp_filter_cutoff_sweep < CLOSING_LP_SWEEP:
        p.lp_filter_cutoff_sweep = -p.lp_filter_cutoff_sweep

    # =========================================================================
    # ESTENSIONI BFXR
    # =========================================================================

    p.compression_amount = rng.random()

    p.overtones = rng.random()
    p.overtone_falloff = rng.random()

    p.bit_crush = rng.random()
    p.bit_crush_sweep = _signed(rng)

    return p
