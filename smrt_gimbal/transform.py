"""
SMRT Gimbal - Transforms

Minimal stand-ins for a host engine's scene graph: a world-space pose and
a child pose expressed relative to a parent. The gimbal controller only
needs the nozzle's world position, its local and world rotation, and
local-to-world direction transforms.
"""

from dataclasses import dataclass, field

import numpy as np

from . import constants as C
from .frames import (
    quaternion_inverse,
    quaternion_multiply,
    quaternion_normalize,
    rotate_vector_by_quaternion,
)


@dataclass
class Transform:
    """
    World-space pose.

    Attributes:
        position: World position (m) [3]
        rotation: Local-to-world quaternion [w, x, y, z]
    """
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: C.IDENTITY_QUATERNION.copy())

    def __post_init__(self):
        self.position = np.asarray(self.position, dtype=np.float64)
        self.rotation = quaternion_normalize(self.rotation)

    def transform_direction(self, v: np.ndarray) -> np.ndarray:
        return rotate_vector_by_quaternion(v, self.rotation)

    def transform_point(self, p: np.ndarray) -> np.ndarray:
        return self.position + rotate_vector_by_quaternion(p, self.rotation)

    @property
    def right(self) -> np.ndarray:
        return self.transform_direction(C.BODY_RIGHT_AXIS)

    @property
    def up(self) -> np.ndarray:
        return self.transform_direction(C.BODY_UP_AXIS)

    @property
    def forward(self) -> np.ndarray:
        return self.transform_direction(C.BODY_FORWARD_AXIS)


@dataclass
class ChildTransform:
    """
    Pose relative to a parent Transform.

    Writing the world rotation stores the equivalent local rotation, so the
    child keeps following the parent afterwards.

    Attributes:
        parent: Parent transform
        local_position: Position in the parent frame (m) [3]
        local_rotation: Child-to-parent quaternion [w, x, y, z]
    """
    parent: Transform
    local_position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    local_rotation: np.ndarray = field(default_factory=lambda: C.IDENTITY_QUATERNION.copy())

    def __post_init__(self):
        self.local_position = np.asarray(self.local_position, dtype=np.float64)
        self.local_rotation = quaternion_normalize(self.local_rotation)

    @property
    def position(self) -> np.ndarray:
        """World position (m)."""
        return self.parent.transform_point(self.local_position)

    @property
    def rotation(self) -> np.ndarray:
        """World rotation quaternion."""
        return quaternion_normalize(
            quaternion_multiply(self.parent.rotation, self.local_rotation))

    @rotation.setter
    def rotation(self, q_world: np.ndarray) -> None:
        q_local = quaternion_multiply(quaternion_inverse(self.parent.rotation), q_world)
        self.local_rotation = quaternion_normalize(q_local)

    def transform_direction(self, v: np.ndarray) -> np.ndarray:
        return rotate_vector_by_quaternion(v, self.rotation)
