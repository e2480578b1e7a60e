"""
SMRT Gimbal - Gimbal Cone Clipping

Maps a requested nozzle displacement onto the cone of directions the
gimbal can reach, at a fraction of full authority.

The result lies in the plane spanned by the neutral pose and the target,
is rotated away from the neutral pose by

    min(gimbal_range, angle(neutral_pose, target)) * |factor|   degrees

and keeps the target's magnitude. A negative factor requests the opposite
torque sense and flips the target before clipping.
"""

import numpy as np

from . import constants as C
from .frames import angle_between_degrees, orthonormalize


def clip_to_gimbal_cone(neutral_pose: np.ndarray, target: np.ndarray,
                        factor: float, gimbal_range: float) -> np.ndarray:
    """
    Clip a displacement to the gimbal cone, at a fraction of authority.

    With factor 1 the result points at the target, or at the closest
    direction to it on the cone boundary. With factor 0.5 the angle is
    bisected, and so on.

    Args:
        neutral_pose: Nozzle thrust direction with the gimbal centered (world)
        target: Requested displacement (world, any magnitude)
        factor: Signed fraction of authority
        gimbal_range: Cone half-angle (degrees)

    Returns:
        Clipped displacement with |result| == |target|, or the zero vector
        when no deflection is requested or possible.
    """
    # No authority requested, or a zero-width cone disables gimbaling
    if factor == 0 or gimbal_range <= 0:
        return np.zeros(3)

    target = np.asarray(target, dtype=float)
    r = np.linalg.norm(target)
    if r < C.TARGET_EPSILON:
        return np.zeros(3)

    # Work with a positive factor from here on
    if factor < 0:
        factor = -factor
        target = -target

    ideal_degrees = angle_between_degrees(neutral_pose, target)
    if (ideal_degrees < C.PARALLEL_DEGREES
            or (ideal_degrees < gimbal_range
                and factor > 1.0 - C.FULL_AUTHORITY_TOLERANCE)):
        # Already reachable at full authority; avoids trig round-off
        return target

    max_degrees = min(gimbal_range, ideal_degrees)
    target_radians = np.radians(max_degrees * factor)

    # target = n r cos(ideal) + n' r sin(ideal); swap in the clipped angle
    n, n_prime = orthonormalize(np.asarray(neutral_pose, dtype=float), target)
    return r * np.cos(target_radians) * n + r * np.sin(target_radians) * n_prime
