import math
import numpy as np


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Limita value a [min_val, max_val]. NaN diventa 0.0 prima del clamp."""
    if math.isnan(value):
        value = 0.0
    return max(min_val, min(max_val, value))


def to_float32(value: float) -> float:
    """Arrotonda alla precisione float a 32 bit (come il renderer)."""
    return float(np.float32(value))


def int_power(base: float, power: int) -> float:
    """
    Potenza intera per moltiplicazioni ripetute.
    Con esponente dispari il segno della base si conserva.
    """
    result = 1.0
    for _ in range(power):
        result *= base
    return result

