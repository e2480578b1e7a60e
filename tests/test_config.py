"""Tests for config module."""
import dataclasses

import pytest
from smrt_gimbal import config
from smrt_gimbal import constants as C


def test_gimbal_config_defaults():
    """Test that default config uses constants values."""
    cfg = config.GimbalConfig()
    assert cfg.gimbal_range == C.DEFAULT_GIMBAL_RANGE == 1.0
    assert cfg.gimbal_transform_name == C.DEFAULT_GIMBAL_TRANSFORM_NAME
    assert cfg.start_locked is False
    assert cfg.clamp_control_input is False


def test_gimbal_config_frozen():
    """Test that config is immutable (frozen)."""
    cfg = config.GimbalConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.gimbal_range = 3.0


@pytest.mark.parametrize('bad_range', [-1.0, float('nan'), float('inf')])
def test_gimbal_config_rejects_bad_range(bad_range):
    with pytest.raises(config.ConfigurationError):
        config.GimbalConfig(gimbal_range=bad_range)


def test_gimbal_config_rejects_empty_transform_name():
    with pytest.raises(config.ConfigurationError):
        config.GimbalConfig(gimbal_transform_name='')


def test_zero_range_allowed():
    assert config.GimbalConfig(gimbal_range=0.0).gimbal_range == 0.0


def test_create_default_config():
    cfg = config.create_default_config()
    assert isinstance(cfg, config.GimbalConfig)
    assert cfg.gimbal_range == C.DEFAULT_GIMBAL_RANGE


def test_create_test_config():
    cfg = config.create_test_config()
    assert cfg.gimbal_range == 5.0
    assert cfg.verbose is False
    assert cfg.validate is True


def test_create_test_config_custom():
    cfg = config.create_test_config(gimbal_range=2.0, clamp_control_input=True)
    assert cfg.gimbal_range == 2.0
    assert cfg.clamp_control_input is True


PART_CFG = """
MODULE
{
    name = ModuleSMRTGimbal
    gimbalTransformName = thrustTransform   // nozzle pivot
    gimbalRange = 4.5
    gimbalLock = False
    useGimbalResponseSpeed = true
}
"""


def test_parse_module_config():
    cfg = config.parse_module_config(PART_CFG)
    assert cfg.gimbal_range == 4.5
    assert cfg.gimbal_transform_name == 'thrustTransform'
    assert cfg.start_locked is False


def test_parse_module_config_overrides_and_lock():
    cfg = config.parse_module_config("gimbalLock = True\nclampControlInput = yes",
                                     verbose=False)
    assert cfg.start_locked is True
    assert cfg.clamp_control_input is True
    assert cfg.verbose is False
    assert cfg.gimbal_range == C.DEFAULT_GIMBAL_RANGE


def test_parse_module_config_bad_number():
    with pytest.raises(config.ConfigurationError, match='gimbalRange'):
        config.parse_module_config("gimbalRange = wide")


def test_parse_module_config_bad_bool():
    with pytest.raises(config.ConfigurationError, match='gimbalLock'):
        config.parse_module_config("gimbalLock = maybe")


def test_parse_module_config_negative_range():
    with pytest.raises(config.ConfigurationError):
        config.parse_module_config("gimbalRange = -2")
