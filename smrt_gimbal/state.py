"""
SMRT Gimbal - Persistent Gimbal State

The only state a gimbal instance carries from one tick to the next. The
neutral pose and lever arm are recomputed every tick and are not stored.
"""

from dataclasses import dataclass, field
import numpy as np

from . import constants as C


@dataclass
class GimbalState:
    """
    Per-instance gimbal state.

    Attributes:
        rest_rotation: Nozzle local rotation captured at start [w, x, y, z]
        locked: Gimbal lock flag
        ticks: Number of unlocked ticks computed
    """

    rest_rotation: np.ndarray = field(default_factory=lambda: C.IDENTITY_QUATERNION.copy())

    locked: bool = False

    ticks: int = 0

    def __post_init__(self):
        self.rest_rotation = np.asarray(self.rest_rotation, dtype=np.float64)

    def copy(self) -> 'GimbalState':
        """Create a deep copy of the state."""
        return GimbalState(
            rest_rotation=self.rest_rotation.copy(),
            locked=self.locked,
            ticks=self.ticks
        )

    def __str__(self) -> str:
        return (
            f"GimbalState(locked={self.locked}, "
            f"ticks={self.ticks}, "
            f"rest={np.round(self.rest_rotation, 6).tolist()})"
        )
