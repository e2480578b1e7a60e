"""
SMRT Gimbal - Type Definitions

Structured inputs and per-tick telemetry for the gimbal controller.
"""

from typing import NamedTuple, TypedDict

import numpy as np
from numpy.typing import NDArray


class ControlDemand(NamedTuple):
    """Normalized pilot/autopilot rotation request, nominally in [-1, 1]."""
    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0

    @property
    def is_neutral(self) -> bool:
        return self.pitch == 0.0 and self.yaw == 0.0 and self.roll == 0.0


class GimbalTickOutput(TypedDict):
    """Return type for one unlocked controller tick (world frame)."""
    neutral_pose: NDArray[np.float64]  # Nozzle thrust direction with gimbal centered
    lever_arm: NDArray[np.float64]  # Nozzle position minus center of mass (m)
    pitch_vector: NDArray[np.float64]  # Clipped pitch contribution
    yaw_vector: NDArray[np.float64]  # Clipped yaw contribution
    roll_vector: NDArray[np.float64]  # Clipped roll contribution
    combined: NDArray[np.float64]  # Sum of the three contributions
    clipped: NDArray[np.float64]  # Combined vector clipped to the full cone
    deflection_degrees: float  # Angle between nozzle and neutral pose
    orientation_written: bool  # False when the clipped vector was degenerate
    saturated: bool  # Deflection at the gimbal range
