# tests/conftest.py
import pytest

import shared.logger as logger_module
from parameters.sfx_params import SfxParams
from shared.random_source import ScriptedRandomSource


# =============================================================================
# STATO GLOBALE DEL LOGGER
# =============================================================================

@pytest.fixture(autouse=True)
def reset_clip_logger():
    """
    Riporta shared.logger ai default (console on, file off) prima e dopo
    ogni test, chiudendo gli handler aperti.
    """
    def _close_and_reset():
        if logger_module._clip_logger is not None:
            for handler in logger_module._clip_logger.handlers[:]:
                handler.close()
                logger_module._clip_logger.removeHandler(handler)
        logger_module.configure_clip_logger()
        logger_module.CLIP_LOG_CONFIG['log_filename'] = None

    _close_and_reset()
    yield
    _close_and_reset()


# =============================================================================
# SORGENTI RANDOM
# =============================================================================

@pytest.fixture
def half_rng():
    """Ogni estrazione vale 0.5 (random_bool quindi sempre False)."""
    return ScriptedRandomSource([0.5], cycle=True)


@pytest.fixture
def high_rng():
    """Ogni estrazione vale 0.9 (random_bool sempre True)."""
    return ScriptedRandomSource([0.9], cycle=True)


@pytest.fixture
def scripted():
    """Factory: ScriptedRandomSource non ciclica da una lista di valori."""
    def _make(values, cycle=False):
        return ScriptedRandomSource(values, cycle=cycle)
    return _make


# =============================================================================
# PARAMETER SET
# =============================================================================

@pytest.fixture
def params():
    """ParameterSet nuovo alla baseline."""
    return SfxParams(owner_id="test_sound")
