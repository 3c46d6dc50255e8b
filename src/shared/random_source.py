"""
random_source.py - Strategy Pattern per le sorgenti di numeri casuali.

Generatori di preset, Mutator e Randomizer non usano MAI il modulo random
globale: ricevono una RandomSource esplicita. Così una sorgente con seed
riproduce lo stesso suono, e una sorgente "scriptata" permette di fissare
nei test l'esatta sequenza di estrazioni.
"""

import random
from abc import ABC, abstractmethod
from typing import Iterable, Optional

import numpy as np


class RandomSourceExhaustedError(RuntimeError):
    """Sollevata quando una ScriptedRandomSource non ha più valori."""


class RandomSource(ABC):
    """
    Interfaccia: un float uniforme in [0, 1) e un booleano derivato.
    """

    @abstractmethod
    def random(self) -> float:
        """Ritorna un valore 0 <= n < 1."""
        pass

    def random_bool(self) -> bool:
        """
        Lancio di moneta: True se random() > 0.5.

        Il confronto è stretto: un'estrazione di esattamente 0.5 vale False.
        Consuma una estrazione.
        """
        return self.random() > 0.5

    @property
    @abstractmethod
    def name(self) -> str:
        """Nome descrittivo della sorgente."""
        pass


class PythonRandomSource(RandomSource):
    """Sorgente basata su un'istanza privata di random.Random."""

    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._rng = random.Random(seed)

    def random(self) -> float:
        return self._rng.random()

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    @property
    def name(self) -> str:
        return f"python(seed={self._seed})"


class NumpyRandomSource(RandomSource):
    """Sorgente basata su numpy.random.Generator (PCG64)."""

    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    def random(self) -> float:
        return float(self._rng.random())

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    @property
    def name(self) -> str:
        return f"numpy(seed={self._seed})"


class ScriptedRandomSource(RandomSource):
    """
    Riproduce una sequenza fissa di estrazioni.

    Uso tipico: test di determinismo dei generatori, replay di un suono
    a partire dalle estrazioni registrate.

    Args:
        values: sequenza di valori in [0, 1)
        cycle: se True, a fine sequenza ricomincia da capo
    """

    def __init__(self, values: Iterable[float], cycle: bool = False):
        self._values = [float(v) for v in values]
        if not self._values:
            raise ValueError("ScriptedRandomSource richiede almeno un valore")
        for v in self._values:
            if not 0.0 <= v < 1.0:
                raise ValueError(f"Valore scriptato fuori da [0, 1): {v}")
        self._cycle = cycle
        self._index = 0
        self._consumed = 0

    def random(self) -> float:
        if self._index >= len(self._values):
            if not self._cycle:
                raise RandomSourceExhaustedError(
                    f"Sequenza esaurita dopo {self._index} estrazioni"
                )
            self._index = 0
        value = self._values[self._index]
        self._index += 1
        self._consumed += 1
        return value

    @property
    def draws_consumed(self) -> int:
        """Numero totale di estrazioni effettuate."""
        return self._consumed

    @property
    def name(self) -> str:
        mode = "cycle" if self._cycle else "once"
        return f"scripted({len(self._values)} values, {mode})"


class RandomSourceFactory:
    """
    Factory per creare istanze di RandomSource.

    Registry pattern: mappa stringhe a classi.
    """

    _registry = {
        'python': PythonRandomSource,
        'numpy': NumpyRandomSource,
    }

    @classmethod
    def create(cls, mode: str = 'python', seed: Optional[int] = None) -> RandomSource:
        """
        Crea una sorgente random.

        Args:
            mode: Nome della sorgente ('python', 'numpy')
            seed: Seed opzionale (None = non deterministico)

        Raises:
            ValueError: Se mode non è riconosciuto
        """
        if mode not in cls._registry:
            valid_modes = list(cls._registry.keys())
            raise ValueError(
                f"Sorgente random '{mode}' non riconosciuta. "
                f"Modalità valide: {valid_modes}"
            )

        source_class = cls._registry[mode]
        return source_class(seed)

    @classmethod
    def register(cls, name: str, source_class: type):
        """Registra una nuova sorgente random (estensibilità futura)."""
        if not issubclass(source_class, RandomSource):
            raise TypeError(
                f"{source_class} deve essere subclass di RandomSource"
            )
        cls._registry[name] = source_class
