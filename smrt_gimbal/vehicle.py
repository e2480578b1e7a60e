"""
SMRT Gimbal - Vehicle Pose Provider

The gimbal controller reads everything it knows about the vehicle through
the small VehiclePoseProvider protocol, so it has no dependency on any
particular simulation engine. RigidVehicle is a concrete provider used by
the headless harness, the CLI and the tests.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol, Tuple

import numpy as np

from . import constants as C
from .frames import direction_to_quaternion, quaternion_multiply, quaternion_normalize
from .transform import ChildTransform, Transform
from .types import ControlDemand


class VehiclePoseProvider(Protocol):
    """Read-only view of the vehicle the gimbal is mounted on."""

    def center_of_mass(self) -> np.ndarray:
        """World-space center of mass (m)."""
        ...

    def body_axes(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """World-space (right, forward, up) axes: pitch, yaw and roll axes."""
        ...

    def control_demand(self) -> ControlDemand:
        """Current normalized pitch/yaw/roll demand."""
        ...

    def find_nozzle_transform(self, name: str) -> Optional[ChildTransform]:
        """Nozzle transform by name, or None if the part has none."""
        ...


@dataclass
class RigidVehicle:
    """
    Rigid vehicle with named nozzle transforms.

    Attributes:
        transform: Vehicle world pose
        com_offset: Center of mass in the vehicle frame (m) [3]
        demand: Control demand returned to the controller
        nozzles: Nozzle transforms by name, parented to the vehicle
    """
    transform: Transform = field(default_factory=Transform)
    com_offset: np.ndarray = field(default_factory=lambda: np.zeros(3))
    demand: ControlDemand = field(default_factory=ControlDemand)
    nozzles: Dict[str, ChildTransform] = field(default_factory=dict)

    def __post_init__(self):
        self.com_offset = np.asarray(self.com_offset, dtype=np.float64)

    def add_nozzle(self, name: str, local_position: np.ndarray,
                   local_rotation: np.ndarray = None) -> ChildTransform:
        """Mount a nozzle transform on the vehicle and return it."""
        kwargs = {} if local_rotation is None else {'local_rotation': local_rotation}
        nozzle = ChildTransform(parent=self.transform, local_position=local_position, **kwargs)
        self.nozzles[name] = nozzle
        return nozzle

    def rotate(self, q: np.ndarray) -> None:
        """Apply a world-frame rotation to the vehicle attitude."""
        self.transform.rotation = quaternion_normalize(
            quaternion_multiply(q, self.transform.rotation))

    def center_of_mass(self) -> np.ndarray:
        return self.transform.transform_point(self.com_offset)

    def body_axes(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        return self.transform.right, self.transform.forward, self.transform.up

    def control_demand(self) -> ControlDemand:
        return self.demand

    def find_nozzle_transform(self, name: str) -> Optional[ChildTransform]:
        return self.nozzles.get(name)


def create_default_vehicle(nozzle_offset: float = 5.0,
                           nozzle_name: str = C.DEFAULT_GIMBAL_TRANSFORM_NAME,
                           demand: ControlDemand = None) -> RigidVehicle:
    """
    Create an upright vehicle with one nozzle below the center of mass.

    The vehicle sits at the origin with identity attitude and its center of
    mass at the origin. The nozzle is mounted nozzle_offset meters down the
    roll (up) axis with its thrust axis pointing straight down it.

    Returns:
        RigidVehicle with a single nozzle named nozzle_name
    """
    vehicle = RigidVehicle(demand=demand or ControlDemand())
    down = -C.BODY_UP_AXIS
    vehicle.add_nozzle(nozzle_name, local_position=down * nozzle_offset,
                       local_rotation=direction_to_quaternion(down))
    return vehicle
