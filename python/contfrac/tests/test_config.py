# ContFrac SDK - Configuration Tests
# Copyright (c) 2024 ContFrac Contributors. All rights reserved.

"""
Tests for the configuration module including OverflowMode selection
and Config factory methods.
"""

import dataclasses

import numpy as np
import pytest

from contfrac.config import Config, OverflowMode, DEFAULT_CONFIG


class TestOverflowModeEnum:
    """Tests for the OverflowMode enum."""

    def test_mode_values(self):
        assert OverflowMode.CHECKED.value == "checked"
        assert OverflowMode.WRAPPING.value == "wrapping"

    def test_mode_from_string(self):
        assert OverflowMode("checked") == OverflowMode.CHECKED
        assert OverflowMode("wrapping") == OverflowMode.WRAPPING

    def test_mode_invalid_value(self):
        with pytest.raises(ValueError):
            OverflowMode("saturating")


class TestConfig:
    """Tests for Config."""

    def test_default_values(self):
        cfg = Config()
        assert cfg.int_type == "int32"
        assert cfg.overflow == OverflowMode.CHECKED
        assert DEFAULT_CONFIG == cfg

    def test_bounds(self):
        cfg = Config()
        assert cfg.bits == 32
        assert cfg.min_value == -2**31
        assert cfg.max_value == 2**31 - 1

    def test_int8_bounds(self):
        cfg = Config(int_type="int8")
        assert cfg.bits == 8
        assert cfg.min_value == -128
        assert cfg.max_value == 127

    def test_numpy_dtype_accepted(self):
        cfg = Config(int_type=np.int64)
        assert cfg.int_type == "int64"

    def test_overflow_string_coerced(self):
        cfg = Config(overflow="wrapping")
        assert cfg.overflow is OverflowMode.WRAPPING

    def test_invalid_overflow(self):
        with pytest.raises(ValueError):
            Config(overflow="saturating")

    @pytest.mark.parametrize("int_type", ["float32", "uint32", "bool"])
    def test_non_signed_types_rejected(self, int_type):
        with pytest.raises(ValueError, match="signed integer"):
            Config(int_type=int_type)

    def test_unknown_type_rejected(self):
        with pytest.raises(ValueError, match="Unknown integer type"):
            Config(int_type="int33")

    def test_frozen(self):
        cfg = Config()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.int_type = "int64"


class TestConfigPresets:
    """Tests for Config factory methods."""

    def test_i32(self):
        assert Config.i32() == Config()

    def test_i64(self):
        cfg = Config.i64()
        assert cfg.int_type == "int64"
        assert cfg.max_value == 2**63 - 1
        assert cfg.overflow == OverflowMode.CHECKED

    def test_wrapping(self):
        cfg = Config.wrapping()
        assert cfg.int_type == "int32"
        assert cfg.overflow == OverflowMode.WRAPPING

    def test_wrapping_custom_width(self):
        assert Config.wrapping("int16").bits == 16


class TestConfigSerialization:
    """Tests for to_dict() and repr."""

    def test_to_dict(self):
        assert Config.wrapping("int64").to_dict() == {
            'intType': 'int64',
            'overflow': 'wrapping',
        }

    def test_repr(self):
        assert repr(Config()) == "Config(int_type='int32', overflow='checked')"
