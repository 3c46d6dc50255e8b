# generator_registry.py
"""
Registry e Factory per i generatori di preset.
Segue lo stesso pattern di random_source.RandomSourceFactory per coerenza.
"""

from typing import Callable, Dict, Optional

from parameters.sfx_params import SfxParams
from shared.random_source import RandomSource
from shared.logger import log_generation
from generators.preset_generators import (
    generate_pickup_coin,
    generate_laser_shoot,
    generate_explosion,
    generate_powerup,
    generate_hit_hurt,
    generate_jump,
    generate_blip_select,
)
from generators.randomizer import randomize

PresetGenerator = Callable[..., SfxParams]

# =============================================================================
# REGISTRY
# =============================================================================

PRESET_GENERATORS: Dict[str, PresetGenerator] = {
    'pickup_coin': generate_pickup_coin,
    'laser_shoot': generate_laser_shoot,
    'explosion': generate_explosion,
    'powerup': generate_powerup,
    'hit_hurt': generate_hit_hurt,
    'jump': generate_jump,
    'blip_select': generate_blip_select,
    'random': randomize,
}

# Nomi brevi di categoria → nome canonico
PRESET_ALIASES: Dict[str, str] = {
    'pickup': 'pickup_coin',
    'coin': 'pickup_coin',
    'laser': 'laser_shoot',
    'shoot': 'laser_shoot',
    'hit': 'hit_hurt',
    'hurt': 'hit_hurt',
    'blip': 'blip_select',
    'select': 'blip_select',
    'randomize': 'random',
}


# =============================================================================
# FUNZIONI DI REGISTRAZIONE (per estensibilità)
# =============================================================================

def register_preset_generator(name: str, generator: PresetGenerator):
    """
    Registra un nuovo generatore di preset.

    Il generatore deve avere firma (rng, params=None) -> SfxParams.
    """
    PRESET_GENERATORS[name] = generator
    print(f"✅ Registrato nuovo generatore preset: {name} -> {generator.__name__}")


def resolve_preset_name(name: str) -> str:
    """Normalizza un nome (case, trattini, alias) al nome canonico del registry."""
    key = name.strip().lower().replace('-', '_').replace('/', '_')
    return PRESET_ALIASES.get(key, key)


# =============================================================================
# FACTORY
# =============================================================================

class PresetFactory:
    """Genera ParameterSet a partire dal nome del preset."""

    @staticmethod
    def available() -> list:
        return sorted(PRESET_GENERATORS.keys())

    @staticmethod
    def generate(
        preset: str,
        rng: RandomSource,
        params: Optional[SfxParams] = None
    ) -> SfxParams:
        """
        Esegue il generatore registrato per preset.

        Args:
            preset: nome canonico o alias ('laser', 'coin', 'random', ...)
            rng: sorgente random
            params: ParameterSet da sovrascrivere (None = nuovo)

        Raises:
            ValueError: se il preset non è registrato
        """
        key = resolve_preset_name(preset)
        if key not in PRESET_GENERATORS:
            available = ', '.join(PresetFactory.available())
            raise ValueError(
                f"Preset non trovato: '{preset}'. "
                f"Preset disponibili: {available}"
            )

        result = PRESET_GENERATORS[key](rng, params)
        log_generation(result.owner_id, key, rng.name)
        return result
