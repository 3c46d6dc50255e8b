# src/engine/bank_generator.py
"""
SfxBankGenerator: orchestratore principale per la generazione di un banco
di effetti sonori a partire da un file YAML.

Responsabilita separate:
- SoundConfig / BankConfig: lettura e validazione della configurazione
- PresetFactory / mutate: generazione dei ParameterSet
- SettingsWriter: scrittura del banco su file

Esempio di YAML:

    bank:
      random_source: python
      seed: 42
      mutation: 0.05
    sounds:
      - id: coin
        preset: pickup_coin
        mutations: 2
      - id: boom
        preset: explosion
        overrides: {master_volume: 0.4}
      - id: shared
        settings: "0,,.3,,.4,.3,,,,,,,,,,,,,1,,,,,.5"
"""
import yaml
from dataclasses import dataclass
from typing import Any, Dict, List

from parameters.sfx_params import SfxParams
from shared.random_source import RandomSourceFactory
from generators.generator_registry import PresetFactory
from generators.mutator import mutate
from rendering.settings_string import decode
from rendering.settings_writer import SettingsWriter
from engine.sound_config import BankConfig, SoundConfig


@dataclass
class GeneratedSound:
    """Un suono del banco con la sua origine (per header e log)."""
    sound_id: str
    params: SfxParams
    origin: str
    source_name: str


class SfxBankGenerator:
    """
    Orchestratore per la generazione di un banco di settings string.

    Public API:
    - load_yaml() -> dict
    - create_sounds() -> List[GeneratedSound]
    - generate_bank_file(output_path: str) -> None

    Attributes:
        yaml_path: path file configurazione YAML
        data: dati YAML caricati
        bank_config: regole comuni del banco
        sounds: suoni generati
        settings_writer: scrittore del file di output
    """

    def __init__(self, yaml_path: str):
        """
        Args:
            yaml_path: percorso file YAML di configurazione
        """
        self.yaml_path = yaml_path
        self.data: Dict[str, Any] = None
        self.bank_config: BankConfig = BankConfig()
        self.sounds: List[GeneratedSound] = []

        self.settings_writer = SettingsWriter()

    # =========================================================================
    # PUBLIC API
    # =========================================================================

    def load_yaml(self) -> dict:
        """
        Carica il file YAML.

        Raises:
            FileNotFoundError: se il file YAML non esiste
            yaml.YAMLError: se il file YAML è malformato
        """
        with open(self.yaml_path, 'r', encoding='utf-8') as f:
            self.data = yaml.safe_load(f) or {}

        self.bank_config = BankConfig.from_yaml(self.data.get('bank'))
        return self.data

    def create_sounds(self) -> List[GeneratedSound]:
        """
        Crea i suoni dai dati YAML, applicando la logica solo/mute.

        Raises:
            ValueError: se load_yaml() non è stato chiamato
        """
        if self.data is None:
            raise ValueError("Devi prima caricare il YAML con load_yaml()")

        sound_data_list = self.data.get('sounds', []) or []
        filtered = self._filter_solo_mute(sound_data_list)

        print(f"Creazione di {len(filtered)} suoni...")

        # L'indice nel file (non nel filtrato) tiene stabile il seed derivato
        file_index = {id(s): i for i, s in enumerate(sound_data_list)}

        self.sounds = []
        for sound_data in filtered:
            index = file_index[id(sound_data)]
            sound = self._create_sound(SoundConfig.from_yaml(sound_data), index)
            self.sounds.append(sound)
            print(f"  → Suono '{sound.sound_id}': {sound.params}")

        return self.sounds

    def generate_bank_file(self, output_path: str = 'output.txt'):
        """
        Scrive il banco su file. Delega la scrittura a SettingsWriter.
        """
        self.settings_writer.write_bank(
            filepath=output_path,
            sounds=self.sounds,
            yaml_source=self.yaml_path
        )

    # =========================================================================
    # CREAZIONE SUONI
    # =========================================================================

    def _create_sound(self, config: SoundConfig, index: int) -> GeneratedSound:
        """Genera (o decodifica), muta e applica gli override di un suono."""
        seed = config.seed if config.seed is not None else self.bank_config.seed_for(index)
        rng = RandomSourceFactory.create(self.bank_config.random_source, seed)

        params = SfxParams(owner_id=config.sound_id)

        if config.preset is not None:
            PresetFactory.generate(config.preset, rng, params)
            origin = f"preset '{config.preset}'"
        else:
            if not decode(params, config.settings):
                raise ValueError(
                    f"Suono '{config.sound_id}': settings string con numero di campi errato"
                )
            origin = "settings"

        amount = (
            config.mutation_amount
            if config.mutation_amount is not None
            else self.bank_config.mutation
        )
        for _ in range(config.mutations):
            mutate(params, rng, amount)
        if config.mutations:
            origin += f" + {config.mutations} mutazioni"

        for name, value in config.overrides.items():
            params.set_field(name, value, value_type='override')

        return GeneratedSound(
            sound_id=config.sound_id,
            params=params,
            origin=origin,
            source_name=rng.name
        )

    def _filter_solo_mute(self, sound_data_list: list) -> list:
        """
        Applica logica solo/mute ai suoni.

        Regole:
        - Se almeno un suono ha 'solo' → prendi SOLO quelli con 'solo'
        - Altrimenti → prendi tutti TRANNE quelli con 'mute'
        """
        solo_mode = any('solo' in s for s in sound_data_list)

        if solo_mode:
            filtered = [s for s in sound_data_list if 'solo' in s]
            print(
                f"⚡ SOLO MODE: creazione di {len(filtered)} suoni "
                f"(su {len(sound_data_list)} totali)"
            )
        else:
            filtered = [s for s in sound_data_list if 'mute' not in s]
            muted_count = len(sound_data_list) - len(filtered)

            if muted_count > 0:
                print(f"🔇 {muted_count} suoni muted")

        return filtered
