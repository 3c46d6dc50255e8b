# =============================================================================
# tests/parameters/test_sfx_params.py
# =============================================================================
"""
Test suite per SfxParams (Parameter Store + Cloner).

Copre:
- Valori iniziali e baseline
- Clamp di ogni campo (incluso ±inf e NaN) e arrotondamento float32
- Flag dirty dopo ogni scrittura
- Reset del wave type fuori enum
- reset(), clone(), copy_from()
- Log dei clip (INFO per scritture programmatiche, WARNING per input esterni)
"""
import logging
import math

import numpy as np
import pytest

from parameters.parameter_definitions import (
    SFX_PARAMETERS,
    DEFAULT_MASTER_VOLUME,
    WaveType,
)
from parameters.sfx_params import SfxParams


ALL_FIELDS = list(SFX_PARAMETERS.keys())


# =============================================================================
# STATO INIZIALE
# =============================================================================

class TestInitialState:

    def test_new_params_are_at_baseline(self, params):
        for name, bounds in SFX_PARAMETERS.items():
            assert params.get_field(name) == pytest.approx(bounds.default), name

    def test_new_params_wave_is_square(self, params):
        assert params.wave_type is WaveType.SQUARE

    def test_new_params_master_volume(self, params):
        assert params.master_volume == DEFAULT_MASTER_VOLUME

    def test_new_params_are_dirty(self, params):
        assert params.dirty is True

    def test_owner_id_default(self):
        assert SfxParams().owner_id == "unknown"


# =============================================================================
# CLAMP
# =============================================================================

class TestClamping:

    @pytest.mark.parametrize("name", ALL_FIELDS)
    def test_above_max_clamps_to_max(self, params, name):
        setattr(params, name, 5.0)
        assert getattr(params, name) == SFX_PARAMETERS[name].max_val

    @pytest.mark.parametrize("name", ALL_FIELDS)
    def test_below_min_clamps_to_min(self, params, name):
        setattr(params, name, -5.0)
        assert getattr(params, name) == SFX_PARAMETERS[name].min_val

    @pytest.mark.parametrize("name", ALL_FIELDS)
    def test_positive_infinity(self, params, name):
        setattr(params, name, math.inf)
        assert getattr(params, name) == SFX_PARAMETERS[name].max_val

    @pytest.mark.parametrize("name", ALL_FIELDS)
    def test_negative_infinity(self, params, name):
        setattr(params, name, -math.inf)
        assert getattr(params, name) == SFX_PARAMETERS[name].min_val

    @pytest.mark.parametrize("name", ALL_FIELDS)
    def test_nan_becomes_zero(self, params, name):
        setattr(params, name, math.nan)
        assert getattr(params, name) == 0.0

    def test_in_range_value_is_kept(self, params):
        params.slide = -0.25
        assert params.slide == -0.25

    def test_value_rounded_to_float32(self, params):
        params.start_frequency = 0.1
        assert params.start_frequency == float(np.float32(0.1))
        assert params.start_frequency != 0.1

    def test_set_field_returns_stored_value(self, params):
        assert params.set_field('decay_time', 3.0) == 1.0

    def test_set_field_unknown_name_raises(self, params):
        with pytest.raises(KeyError):
            params.set_field('volume', 0.5)

    def test_get_field_unknown_name_raises(self, params):
        with pytest.raises(KeyError):
            params.get_field('volume')

    def test_numeric_string_is_accepted(self, params):
        params.set_field('sustain_punch', "0.25")
        assert params.sustain_punch == 0.25


# =============================================================================
# DIRTY FLAG
# =============================================================================

class TestDirtyFlag:

    @pytest.mark.parametrize("name", ALL_FIELDS)
    def test_every_setter_marks_dirty(self, params, name):
        params.mark_clean()
        setattr(params, name, getattr(params, name))
        assert params.dirty is True

    def test_clamped_write_marks_dirty(self, params):
        params.mark_clean()
        params.slide = 10.0
        assert params.dirty is True

    def test_wave_type_setter_marks_dirty(self, params):
        params.mark_clean()
        params.wave_type = WaveType.NOISE
        assert params.dirty is True

    def test_mark_clean(self, params):
        params.mark_clean()
        assert params.dirty is False


# =============================================================================
# WAVE TYPE
# =============================================================================

class TestWaveType:

    @pytest.mark.parametrize("code", range(9))
    def test_valid_codes(self, params, code):
        params.wave_type = code
        assert params.wave_type == code
        assert isinstance(params.wave_type, WaveType)

    @pytest.mark.parametrize("code", [9, 42, -1, -100])
    def test_out_of_enum_resets_to_square(self, params, code):
        params.wave_type = WaveType.NOISE
        params.wave_type = code
        assert params.wave_type is WaveType.SQUARE

    @pytest.mark.parametrize("code", [math.inf, -math.inf, math.nan])
    def test_non_finite_resets_to_square(self, params, code):
        params.wave_type = WaveType.SINE
        params.wave_type = code
        assert params.wave_type is WaveType.SQUARE

    def test_set_field_wave_type(self, params):
        params.set_field('wave_type', 3)
        assert params.get_field('wave_type') is WaveType.NOISE

    def test_reset_is_logged_as_warning(self, params, caplog):
        with caplog.at_level(logging.INFO, logger='sfx_clip'):
            params.wave_type = 12
        assert any(
            r.levelno == logging.WARNING and 'wave_type' in r.getMessage()
            for r in caplog.records
        )


# =============================================================================
# RESET
# =============================================================================

class TestReset:

    def test_reset_restores_baseline(self, params):
        params.wave_type = WaveType.BREAKER
        for name in ALL_FIELDS:
            setattr(params, name, 0.77)
        params.reset()

        assert params.wave_type is WaveType.SQUARE
        for name, bounds in SFX_PARAMETERS.items():
            if name == 'master_volume':
                continue
            assert getattr(params, name) == pytest.approx(bounds.default), name

    def test_reset_keeps_master_volume(self, params):
        params.master_volume = 0.8
        params.reset()
        assert params.master_volume == pytest.approx(0.8)

    def test_reset_marks_dirty(self, params):
        params.mark_clean()
        params.reset()
        assert params.dirty is True


# =============================================================================
# CLONER
# =============================================================================

class TestCloner:

    def test_clone_copies_every_field(self, params):
        params.wave_type = WaveType.TRIANGLE
        params.slide = -0.4
        params.overtones = 0.6
        params.master_volume = 0.9

        copy = params.clone()

        assert copy == params
        assert copy is not params
        assert copy.wave_type is WaveType.TRIANGLE

    def test_clone_is_independent(self, params):
        copy = params.clone()
        copy.slide = 0.9
        copy.wave_type = WaveType.NOISE

        assert params.slide == 0.0
        assert params.wave_type is WaveType.SQUARE

    def test_copy_from_leaves_dirty_untouched(self, params):
        source = SfxParams()
        source.decay_time = 0.1
        params.mark_clean()

        params.copy_from(source)

        assert params.decay_time == pytest.approx(0.1)
        assert params.dirty is False

    def test_copy_from_make_dirty(self, params):
        params.mark_clean()
        params.copy_from(SfxParams(), make_dirty=True)
        assert params.dirty is True

    def test_copy_from_copies_master_volume(self, params):
        source = SfxParams()
        source.master_volume = 0.2
        params.copy_from(source)
        assert params.master_volume == pytest.approx(0.2)


# =============================================================================
# LOG DEI CLIP
# =============================================================================

class TestClipLogging:

    def test_programmatic_clip_is_info(self, params, caplog):
        with caplog.at_level(logging.INFO, logger='sfx_clip'):
            params.attack_time = -0.5
        records = [r for r in caplog.records if 'attack_time' in r.getMessage()]
        assert records
        assert all(r.levelno == logging.INFO for r in records)

    def test_external_clip_is_warning(self, params, caplog):
        with caplog.at_level(logging.INFO, logger='sfx_clip'):
            params.set_field('master_volume', 2.0, value_type='override')
        records = [r for r in caplog.records if 'master_volume' in r.getMessage()]
        assert records
        assert records[0].levelno == logging.WARNING
        assert 'override' in records[0].getMessage()

    def test_in_range_write_is_not_logged(self, params, caplog):
        with caplog.at_level(logging.INFO, logger='sfx_clip'):
            params.slide = 0.5
        assert not caplog.records


# =============================================================================
# DUNDER
# =============================================================================

class TestDunder:

    def test_equality_by_values(self):
        a, b = SfxParams("a"), SfxParams("b")
        assert a == b
        b.slide = 0.1
        assert a != b

    def test_not_hashable(self, params):
        with pytest.raises(TypeError):
            hash(params)

    def test_as_dict(self, params):
        snapshot = params.as_dict()
        assert snapshot['wave_type'] == 0
        assert len(snapshot) == len(SFX_PARAMETERS) + 1

    def test_repr(self, params):
        assert 'test_sound' in repr(params)
        assert 'SQUARE' in repr(params)
