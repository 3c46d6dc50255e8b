# sound_config.py
from dataclasses import dataclass, field, fields
from typing import Dict, Optional

from parameters.parameter_definitions import DEFAULT_MUTATION


@dataclass(frozen=True)
class BankConfig:
    """
    Regole comuni a tutto il banco di suoni (sezione 'bank' del YAML).

    Il seed del banco, se presente, dà un seed derivato (seed + indice)
    ai suoni che non ne dichiarano uno proprio.
    """
    random_source: str = 'python'
    seed: Optional[int] = None
    mutation: float = DEFAULT_MUTATION

    @classmethod
    def from_yaml(cls, yaml_data: Optional[dict]) -> 'BankConfig':
        if not yaml_data:
            return cls()
        field_names = [f.name for f in fields(cls)]
        kwargs = {
            name: yaml_data[name]
            for name in field_names
            if name in yaml_data and yaml_data[name] is not None
        }
        return cls(**kwargs)

    def seed_for(self, index: int) -> Optional[int]:
        """Seed derivato per il suono in posizione index."""
        if self.seed is None:
            return None
        return int(self.seed) + index


@dataclass(frozen=True)
class SoundConfig:
    """
    Configurazione di un singolo suono del banco.

    Un suono nasce da un preset (nome del registry) OPPURE da una settings
    string; poi riceve eventuali mutazioni e override espliciti.
    """
    sound_id: str
    preset: Optional[str] = None
    settings: Optional[str] = None
    seed: Optional[int] = None
    mutations: int = 0
    mutation_amount: Optional[float] = None
    overrides: Dict[str, float] = field(default_factory=dict)

    @classmethod
    def from_yaml(cls, yaml_data: dict) -> 'SoundConfig':
        """
        Raises:
            ValueError: se manca 'id' o se preset/settings non sono
                esattamente uno dei due
        """
        if 'id' not in yaml_data:
            raise ValueError(f"Suono senza 'id': {yaml_data}")

        sound_id = str(yaml_data['id'])
        if not sound_id or any(ch.isspace() for ch in sound_id):
            raise ValueError(f"Suono: id '{sound_id}' vuoto o con spazi")
        preset = yaml_data.get('preset')
        settings = yaml_data.get('settings')

        if (preset is None) == (settings is None):
            raise ValueError(
                f"Suono '{sound_id}': specificare esattamente uno tra 'preset' e 'settings'"
            )

        mutations = int(yaml_data.get('mutations', 0) or 0)
        if mutations < 0:
            raise ValueError(f"Suono '{sound_id}': mutations deve essere >= 0")

        return cls(
            sound_id=sound_id,
            preset=preset,
            settings=str(settings) if settings is not None else None,
            seed=yaml_data.get('seed'),
            mutations=mutations,
            mutation_amount=yaml_data.get('mutation_amount'),
            overrides=dict(yaml_data.get('overrides') or {}),
        )
