"""
SMRT Gimbal - Validation Checks

Geometric checks the harness can run after each tick:
- Nozzle quaternion norm
- Nozzle deflection within the gimbal cone
- Clipped displacement keeps the requested magnitude

The controller itself never raises; these checks do, so a harness can abort.
"""

import numpy as np

from . import constants as C
from .frames import angle_between_degrees, quaternion_multiply, rotate_vector_by_quaternion
from .transform import ChildTransform


class ValidationError(Exception):
    """Raised when a gimbal validation check fails."""
    pass


def check_quaternion_norm(q: np.ndarray, tolerance: float = None) -> bool:
    """
    Verify a quaternion is unit-normalized.

    Returns:
        True if valid, raises ValidationError otherwise
    """
    if tolerance is None:
        tolerance = C.QUATERNION_NORM_TOL

    norm = np.linalg.norm(q)
    if abs(norm - 1.0) > tolerance:
        raise ValidationError(
            f"Quaternion norm violation: |q| = {norm:.10f}, "
            f"deviation = {abs(norm - 1.0):.2e}, tolerance = {tolerance:.2e}"
        )
    return True


def check_cone_bound(neutral_pose: np.ndarray, direction: np.ndarray,
                     gimbal_range: float,
                     tolerance: float = C.CONE_BOUND_TOLERANCE_DEG) -> bool:
    """
    Check that direction lies within gimbal_range degrees of neutral_pose.

    Returns:
        True if valid, raises ValidationError otherwise
    """
    deflection = angle_between_degrees(neutral_pose, direction)
    if deflection > gimbal_range + tolerance:
        raise ValidationError(
            f"Gimbal cone violation: deflection = {deflection:.6f} deg, "
            f"range = {gimbal_range:.6f} deg"
        )
    return True


def check_magnitude_preserved(target: np.ndarray, clipped: np.ndarray,
                              rel_tolerance: float = 1e-9) -> bool:
    """
    Check that a non-zero clip result has the magnitude of its target.

    Returns:
        True if valid, raises ValidationError otherwise
    """
    r_target = np.linalg.norm(target)
    r_clipped = np.linalg.norm(clipped)
    if r_clipped == 0.0:
        return True
    if abs(r_clipped - r_target) > rel_tolerance * max(r_target, 1.0):
        raise ValidationError(
            f"Clip changed magnitude: |target| = {r_target:.10f}, "
            f"|clipped| = {r_clipped:.10f}"
        )
    return True


def validate_nozzle(nozzle: ChildTransform, rest_rotation: np.ndarray,
                    gimbal_range: float) -> bool:
    """
    Run all nozzle checks against the rest pose under the current parent pose.

    Raises:
        ValidationError: If any check fails
    """
    check_quaternion_norm(nozzle.rotation)
    neutral_world = quaternion_multiply(nozzle.parent.rotation, rest_rotation)
    neutral_pose = rotate_vector_by_quaternion(C.NOZZLE_FORWARD_AXIS, neutral_world)
    thrust_dir = nozzle.transform_direction(C.NOZZLE_FORWARD_AXIS)
    check_cone_bound(neutral_pose, thrust_dir, gimbal_range)
    return True
