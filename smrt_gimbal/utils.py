"""
SMRT Gimbal - Utility Functions

Shared vector helpers used by the cone clipper, the resolver and the
tick driver.
"""

import numpy as np

from . import constants as C


def normalize_or_zero(v: np.ndarray) -> np.ndarray:
    """
    Return v scaled to unit length, or the zero vector if v is near zero.

    Never produces NaN, so a degenerate lever arm or axis contributes nothing
    instead of poisoning the mix.
    """
    v = np.asarray(v, dtype=float)
    norm = np.linalg.norm(v)
    if norm < C.TARGET_EPSILON:
        return np.zeros(3)
    return v / norm


def clamp_control(value: float) -> float:
    """Clamp a normalized control input to [-1, 1]."""
    return float(np.clip(value, -1.0, 1.0))
