"""
SMRT Gimbal - Rotations and Frame Geometry

Quaternion operations, direction angles and the look-rotation used to point
the nozzle. Orientation is represented exclusively by quaternions.

Quaternion Convention: [w, x, y, z] where w is the scalar component.
A quaternion q maps local directions to world directions: v_world = R(q) @ v_local.
"""

import numpy as np

from . import constants as C


def quaternion_normalize(q: np.ndarray) -> np.ndarray:
    """
    Normalize a quaternion to unit length.

    A degenerate (near-zero) quaternion collapses to identity.
    """
    q = np.asarray(q, dtype=float)
    norm = np.linalg.norm(q)
    if norm < C.ZERO_TOLERANCE:
        return C.IDENTITY_QUATERNION.copy()
    return q / norm


def quaternion_multiply(q1: np.ndarray, q2: np.ndarray) -> np.ndarray:
    """
    Hamilton product q1 * q2 (apply q2 first, then q1).
    """
    w1, x1, y1, z1 = q1
    w2, x2, y2, z2 = q2

    return np.array([
        w1*w2 - x1*x2 - y1*y2 - z1*z2,
        w1*x2 + x1*w2 + y1*z2 - z1*y2,
        w1*y2 - x1*z2 + y1*w2 + z1*x2,
        w1*z2 + x1*y2 - y1*x2 + z1*w2
    ])


def quaternion_conjugate(q: np.ndarray) -> np.ndarray:
    """Negate the vector part of q."""
    return np.array([q[0], -q[1], -q[2], -q[3]])


def quaternion_inverse(q: np.ndarray) -> np.ndarray:
    """
    Inverse of a quaternion. Equal to the conjugate for unit quaternions.
    """
    norm_sq = np.dot(q, q)
    if norm_sq < C.ZERO_TOLERANCE:
        return C.IDENTITY_QUATERNION.copy()
    return quaternion_conjugate(q) / norm_sq


def quaternion_to_rotation_matrix(q: np.ndarray) -> np.ndarray:
    """
    Convert a quaternion to the rotation matrix R(q).

    Columns of R(q) are the local X, Y and Z axes expressed in the parent frame.

    Args:
        q: Quaternion [w, x, y, z] (normalized internally)

    Returns:
        3x3 rotation matrix
    """
    w, x, y, z = quaternion_normalize(q)

    xx, yy, zz = x*x, y*y, z*z
    xy, xz, yz = x*y, x*z, y*z
    wx, wy, wz = w*x, w*y, w*z

    return np.array([
        [1 - 2*(yy + zz),     2*(xy - wz),     2*(xz + wy)],
        [    2*(xy + wz), 1 - 2*(xx + zz),     2*(yz - wx)],
        [    2*(xz - wy),     2*(yz + wx), 1 - 2*(xx + yy)]
    ])


def rotation_matrix_to_quaternion(R: np.ndarray) -> np.ndarray:
    """
    Convert a proper rotation matrix to a quaternion (Shepperd's method).

    Args:
        R: 3x3 rotation matrix

    Returns:
        Unit quaternion [w, x, y, z]
    """
    trace = np.trace(R)

    if trace > 0:
        s = 0.5 / np.sqrt(trace + 1.0)
        w = 0.25 / s
        x = (R[2, 1] - R[1, 2]) * s
        y = (R[0, 2] - R[2, 0]) * s
        z = (R[1, 0] - R[0, 1]) * s
    elif R[0, 0] > R[1, 1] and R[0, 0] > R[2, 2]:
        s = 2.0 * np.sqrt(1.0 + R[0, 0] - R[1, 1] - R[2, 2])
        w = (R[2, 1] - R[1, 2]) / s
        x = 0.25 * s
        y = (R[0, 1] + R[1, 0]) / s
        z = (R[0, 2] + R[2, 0]) / s
    elif R[1, 1] > R[2, 2]:
        s = 2.0 * np.sqrt(1.0 + R[1, 1] - R[0, 0] - R[2, 2])
        w = (R[0, 2] - R[2, 0]) / s
        x = (R[0, 1] + R[1, 0]) / s
        y = 0.25 * s
        z = (R[1, 2] + R[2, 1]) / s
    else:
        s = 2.0 * np.sqrt(1.0 + R[2, 2] - R[0, 0] - R[1, 1])
        w = (R[1, 0] - R[0, 1]) / s
        x = (R[0, 2] + R[2, 0]) / s
        y = (R[1, 2] + R[2, 1]) / s
        z = 0.25 * s

    return quaternion_normalize(np.array([w, x, y, z]))


def rotate_vector_by_quaternion(v: np.ndarray, q: np.ndarray) -> np.ndarray:
    """Rotate v from the local frame of q into its parent frame."""
    return quaternion_to_rotation_matrix(q) @ np.asarray(v, dtype=float)


def direction_to_quaternion(direction: np.ndarray,
                            reference: np.ndarray = None) -> np.ndarray:
    """
    Shortest-arc quaternion rotating the reference direction onto direction.

    Args:
        direction: Target direction (will be normalized)
        reference: Local reference direction (default: nozzle +Z)

    Returns:
        Quaternion [w, x, y, z]
    """
    if reference is None:
        reference = C.NOZZLE_FORWARD_AXIS

    d = direction / np.linalg.norm(direction)
    r = reference / np.linalg.norm(reference)

    dot = np.clip(np.dot(r, d), -1.0, 1.0)

    if dot > 0.9999999:
        return C.IDENTITY_QUATERNION.copy()
    elif dot < -0.9999999:
        # Half turn about any axis perpendicular to the reference
        axis = any_perpendicular(r)
        return np.array([0.0, axis[0], axis[1], axis[2]])

    axis = np.cross(r, d)
    axis = axis / np.linalg.norm(axis)
    half_angle = np.arccos(dot) / 2.0
    xyz = axis * np.sin(half_angle)

    return np.array([np.cos(half_angle), xyz[0], xyz[1], xyz[2]])


def any_perpendicular(v: np.ndarray) -> np.ndarray:
    """Return some unit vector perpendicular to the unit vector v."""
    helper = np.array([1.0, 0.0, 0.0]) if abs(v[0]) < 0.9 else np.array([0.0, 1.0, 0.0])
    perp = np.cross(v, helper)
    return perp / np.linalg.norm(perp)


def angle_between_degrees(a: np.ndarray, b: np.ndarray) -> float:
    """
    Unsigned angle between two directions, in degrees.

    The cosine is clamped to [-1, 1] so round-off on parallel inputs yields
    exactly 0. Returns 0.0 if either vector is near zero.
    """
    norm_a = np.linalg.norm(a)
    norm_b = np.linalg.norm(b)
    if norm_a < C.ZERO_TOLERANCE or norm_b < C.ZERO_TOLERANCE:
        return 0.0
    cos_angle = np.clip(np.dot(a, b) / (norm_a * norm_b), -1.0, 1.0)
    return float(np.degrees(np.arccos(cos_angle)))


def orthonormalize(n: np.ndarray, t: np.ndarray) -> tuple:
    """
    Gram-Schmidt a pair of vectors into an orthonormal basis of their plane.

    n is normalized; t has its component along n removed and is normalized.
    If t is parallel to n an arbitrary perpendicular is used instead.

    Returns:
        (n_hat, t_perp_hat) tuple of unit vectors
    """
    n_hat = n / np.linalg.norm(n)
    t_perp = t - np.dot(t, n_hat) * n_hat
    t_perp_norm = np.linalg.norm(t_perp)
    if t_perp_norm < C.TARGET_EPSILON * max(np.linalg.norm(t), 1.0):
        return n_hat, any_perpendicular(n_hat)
    return n_hat, t_perp / t_perp_norm


def look_rotation(forward: np.ndarray, up: np.ndarray = None) -> np.ndarray:
    """
    Orientation whose local +Z axis points along forward.

    The basis is built directly: right = up x forward, up' = forward x right,
    giving the rotation matrix [right | up' | forward]. When forward is
    (anti)parallel to the up hint another hint is substituted so the basis
    stays well defined.

    Args:
        forward: Desired world direction of the local +Z axis (nonzero)
        up: Up hint (default: world +Y)

    Returns:
        Unit quaternion [w, x, y, z]
    """
    if up is None:
        up = C.WORLD_UP

    f = forward / np.linalg.norm(forward)
    right = np.cross(up, f)
    if np.linalg.norm(right) < 1e-9:
        right = np.cross(any_perpendicular(f), f)
    right = right / np.linalg.norm(right)
    true_up = np.cross(f, right)

    R = np.column_stack([right, true_up, f])
    return rotation_matrix_to_quaternion(R)
