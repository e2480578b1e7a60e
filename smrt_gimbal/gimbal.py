"""
SMRT Gimbal - Gimbal Controller (Tick Driver)

Per-tick thrust vectoring for one gimbaled nozzle:

1. Restore the nozzle's rest rotation and read the neutral thrust direction
2. Compute the lever arm from the center of mass to the nozzle
3. Resolve pitch, yaw and roll into nozzle displacements and sum them
4. Clip the sum to the gimbal cone at full authority
5. Point the nozzle along the clipped direction

While locked the controller does nothing and the nozzle keeps whatever
orientation it last had.
"""

from enum import Enum, auto
import logging
from typing import Optional

import numpy as np

from . import constants as C
from .config import ConfigurationError, GimbalConfig, create_default_config
from .cone import clip_to_gimbal_cone
from .control import mix_axis_demands
from .frames import angle_between_degrees, look_rotation
from .state import GimbalState
from .transform import ChildTransform
from .types import GimbalTickOutput
from .vehicle import VehiclePoseProvider

logger = logging.getLogger(__name__)


class GimbalMode(Enum):
    ACTIVE = auto()
    LOCKED = auto()


class GimbalController:
    """
    Thrust-vectoring controller for a single nozzle.

    One instance per gimbaled part; instances share no state.
    """

    def __init__(self, vehicle: VehiclePoseProvider, config: GimbalConfig = None):
        self.vehicle = vehicle
        self.config = config or create_default_config()
        self.state = GimbalState(locked=self.config.start_locked)
        self.nozzle: Optional[ChildTransform] = None
        self.last_output: Optional[GimbalTickOutput] = None

    @property
    def mode(self) -> GimbalMode:
        return GimbalMode.LOCKED if self.state.locked else GimbalMode.ACTIVE

    @property
    def locked(self) -> bool:
        return self.state.locked

    @property
    def started(self) -> bool:
        return self.nozzle is not None

    def start(self) -> None:
        """Find the nozzle transform and cache its rest local rotation."""
        name = self.config.gimbal_transform_name
        nozzle = self.vehicle.find_nozzle_transform(name)
        if nozzle is None:
            raise ConfigurationError(f"Nozzle transform {name!r} not found on vehicle")
        self.nozzle = nozzle
        self.state.rest_rotation = nozzle.local_rotation.copy()
        logger.info(f"Gimbal started on {name!r}: range={self.config.gimbal_range} deg, "
                    f"mode={self.mode.name}")

    # ── Commands ─────────────────────────────────────────────────────────

    def lock(self) -> None:
        """Freeze the nozzle at its current orientation."""
        if not self.state.locked:
            logger.info("Gimbal locked")
        self.state.locked = True

    def free(self) -> None:
        """Resume gimbaling on the next tick."""
        if self.state.locked:
            logger.info("Gimbal freed")
        self.state.locked = False

    def toggle(self) -> None:
        if self.state.locked:
            self.free()
        else:
            self.lock()

    # ── Tick ─────────────────────────────────────────────────────────────

    def compute_neutral_pose(self) -> np.ndarray:
        """
        Restore the rest rotation and return the nozzle's world thrust direction.

        Recomputed every tick so that "centered" follows the vehicle attitude.
        """
        self.nozzle.local_rotation = self.state.rest_rotation.copy()
        return self.nozzle.transform_direction(C.NOZZLE_FORWARD_AXIS)

    def update(self) -> Optional[GimbalTickOutput]:
        """
        Run one control tick.

        Returns:
            Tick telemetry, or None while locked.
        """
        if not self.started:
            raise RuntimeError("GimbalController.update() called before start()")

        if self.state.locked:
            return None

        gimbal_range = self.config.gimbal_range
        neutral_pose = self.compute_neutral_pose()
        lever_arm = self.nozzle.position - self.vehicle.center_of_mass()

        combined, (pitch_vector, yaw_vector, roll_vector) = mix_axis_demands(
            lever_arm,
            self.vehicle.body_axes(),
            neutral_pose,
            self.vehicle.control_demand(),
            gimbal_range,
            clamp_inputs=self.config.clamp_control_input,
        )

        clipped = clip_to_gimbal_cone(neutral_pose, combined, 1.0, gimbal_range)

        # A zero vector has no direction to look along; stay at rest
        written = float(np.dot(clipped, clipped)) > C.ZERO_TOLERANCE
        if written:
            thrust_dir = clipped / np.linalg.norm(clipped)
            self.nozzle.rotation = look_rotation(thrust_dir)
            deflection = angle_between_degrees(neutral_pose, thrust_dir)
        else:
            deflection = 0.0

        self.state.ticks += 1
        logger.debug(f"Gimbal tick {self.state.ticks}: deflection={deflection:.4f} deg, "
                     f"written={written}")

        self.last_output = {
            'neutral_pose': neutral_pose,
            'lever_arm': lever_arm,
            'pitch_vector': pitch_vector,
            'yaw_vector': yaw_vector,
            'roll_vector': roll_vector,
            'combined': combined,
            'clipped': clipped,
            'deflection_degrees': deflection,
            'orientation_written': written,
            'saturated': written and deflection >= gimbal_range - C.SATURATION_TOLERANCE_DEG,
        }
        return self.last_output
