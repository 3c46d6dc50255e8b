"""
mutator.py - Perturbazione leggera di un ParameterSet esistente.

Per ogni campo di MUTATION_ORDER si lancia una moneta; se esce True il campo
riceve un delta uniforme in [-mutation, +mutation] attraverso il suo setter
clampato. Wave type e master volume non vengono mai mutati.
"""

from parameters.parameter_definitions import DEFAULT_MUTATION, MUTATION_ORDER
from parameters.sfx_params import SfxParams
from shared.random_source import RandomSource


def mutate(params: SfxParams, rng: RandomSource, mutation: float = DEFAULT_MUTATION) -> SfxParams:
    """
    Muta params in place e lo ritorna.

    Args:
        params: ParameterSet da perturbare
        rng: sorgente random (2 estrazioni per campo mutato, 1 per campo saltato)
        mutation: ampiezza massima del delta; il segno è ignorato

    Returns:
        Lo stesso params (per concatenare le chiamate).
    """
    mutation = abs(mutation)

    for name in MUTATION_ORDER:
        if rng.random_bool():
            delta = rng.random() * mutation * 2.0 - mutation
            params.set_field(name, params.get_field(name) + delta)

    return params
