# src/rendering/settings_writer.py
"""
SettingsWriter: scrittura e lettura di un banco di settings string.
Separato dalla logica di orchestrazione.

Formato file: righe di commento '#', poi una riga per suono:
    <sound_id> <settings string>
"""
from typing import Dict, List

from rendering.settings_string import encode


class SettingsWriter:
    """
    Scrive il banco di suoni su file.

    Responsabilita:
    - Formattare header e metadati
    - Scrivere una settings string per suono
    - Rileggere un banco scritto in precedenza
    """

    def write_bank(self, filepath: str, sounds: List, yaml_source: str = None):
        """
        Scrive il banco completo su file.

        Args:
            filepath: percorso file output
            sounds: lista di GeneratedSound
            yaml_source: path file YAML sorgente (per header)
        """
        with open(filepath, 'w', encoding='utf-8') as f:
            self._write_header(f, yaml_source)
            for sound in sounds:
                self._write_sound(f, sound)
            self._write_footer(f, len(sounds))

        print(f"✓ Banco scritto: {filepath} ({len(sounds)} suoni)")

    def read_bank(self, filepath: str) -> Dict[str, str]:
        """
        Rilegge un banco: sound_id → settings string.
        Righe vuote e commenti sono ignorati.
        """
        bank: Dict[str, str] = {}
        with open(filepath, 'r', encoding='utf-8') as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith('#'):
                    continue
                sound_id, _, settings = line.partition(' ')
                bank[sound_id] = settings.strip()
        return bank

    # =========================================================================
    # SEZIONI
    # =========================================================================

    def _write_header(self, f, yaml_source: str = None):
        f.write("# " + "=" * 77 + "\n")
        f.write("# SFX SETTINGS BANK\n")
        if yaml_source:
            f.write(f"# Generated from: {yaml_source}\n")
        f.write("# " + "=" * 77 + "\n\n")

    def _write_sound(self, f, sound):
        f.write(f"# {sound.sound_id}: {sound.origin} | random: {sound.source_name}\n")
        f.write(f"{sound.sound_id} {encode(sound.params)}\n")

    def _write_footer(self, f, count: int):
        f.write("\n# " + "=" * 77 + "\n")
        f.write(f"# End of bank ({count} sounds)\n")
        f.write("# " + "=" * 77 + "\n")
