"""
SMRT Gimbal - Configuration

This module provides a GimbalConfig dataclass for dependency injection,
so each gimbal instance can be built with its own range and options
without touching global constants.

Part configs written for the stock gimbal module can be read with
parse_module_config().
"""

from dataclasses import dataclass
import logging
import math

from . import constants as C

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when a gimbal configuration is invalid or cannot be applied."""
    pass


@dataclass(frozen=True)
class GimbalConfig:
    """
    Immutable load-time configuration for one gimbal instance.

    Using frozen=True ensures configs cannot be accidentally modified.
    Create new configs via dataclass replace() if needed.
    """

    # Maximum deflection from the neutral pose (degrees); 0 disables gimbaling
    gimbal_range: float = C.DEFAULT_GIMBAL_RANGE

    # Name of the pivoting nozzle transform
    gimbal_transform_name: str = C.DEFAULT_GIMBAL_TRANSFORM_NAME

    # Begin in the LOCKED state
    start_locked: bool = False

    # Clamp pitch/yaw/roll to [-1, 1] before resolving. Off by default:
    # out-of-range inputs saturate through the cone clip instead.
    clamp_control_input: bool = False

    # Harness-side geometric checks each tick
    validate: bool = False

    verbose: bool = True

    def __post_init__(self):
        if not math.isfinite(self.gimbal_range) or self.gimbal_range < 0.0:
            raise ConfigurationError(
                f"gimbal_range must be a finite, non-negative angle in degrees, "
                f"got {self.gimbal_range!r}"
            )
        if not self.gimbal_transform_name:
            raise ConfigurationError("gimbal_transform_name must not be empty")


def create_default_config() -> GimbalConfig:
    """Create a GimbalConfig with default values from constants."""
    return GimbalConfig()


def create_test_config(gimbal_range: float = 5.0, **overrides) -> GimbalConfig:
    """Create a quiet, validating config suitable for testing.

    Any keyword arg accepted by GimbalConfig can be passed as an override.
    """
    defaults = dict(gimbal_range=gimbal_range, verbose=False, validate=True)
    defaults.update(overrides)
    return GimbalConfig(**defaults)


def _parse_bool(key: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in ('true', '1', 'yes'):
        return True
    if lowered in ('false', '0', 'no'):
        return False
    raise ConfigurationError(f"{key}: expected a boolean, got {raw!r}")


def _parse_float(key: str, raw: str) -> float:
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{key}: expected a number, got {raw!r}") from None


# Part-config key -> (GimbalConfig field, parser)
_MODULE_FIELDS = {
    'gimbalRange': ('gimbal_range', _parse_float),
    'gimbalTransformName': ('gimbal_transform_name', lambda key, raw: raw.strip()),
    'gimbalLock': ('start_locked', _parse_bool),
    'clampControlInput': ('clamp_control_input', _parse_bool),
}


def parse_module_config(text: str, **overrides) -> GimbalConfig:
    """
    Build a GimbalConfig from a part-config MODULE block.

    Accepts ``key = value`` lines; braces, ``MODULE`` headers, ``name``
    and ``//`` comments are ignored. Unknown keys are skipped.

    Example::

        MODULE
        {
            name = ModuleSMRTGimbal
            gimbalTransformName = thrustTransform
            gimbalRange = 5   // degrees
        }

    Args:
        text: Config text
        **overrides: Extra GimbalConfig fields (e.g. verbose=False)

    Returns:
        GimbalConfig
    """
    values = {}
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.split('//', 1)[0].strip()
        if not line or line in ('{', '}') or '=' not in line:
            continue
        key, raw = (part.strip() for part in line.split('=', 1))
        if key == 'name':
            continue
        if key not in _MODULE_FIELDS:
            logger.debug(f"Ignoring unknown gimbal config key {key!r} on line {lineno}")
            continue
        field_name, parse = _MODULE_FIELDS[key]
        values[field_name] = parse(key, raw)

    values.update(overrides)
    return GimbalConfig(**values)
