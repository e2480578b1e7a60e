"""
SMRT Gimbal - Torque-Demand Resolver

This module turns single-axis rotation demands into nozzle displacements:
- Lever-arm torque direction for a rotation axis
- Per-axis clipping to the gimbal cone
- Three-axis mixing
"""

import numpy as np

from .cone import clip_to_gimbal_cone
from .types import ControlDemand
from .utils import clamp_control, normalize_or_zero


def compute_torque_direction(lever_arm: np.ndarray, axis: np.ndarray) -> np.ndarray:
    """
    Direction to displace the nozzle to torque counter-clockwise about axis.

    The result is scaled by the sine of the angle between lever arm and axis,
    so an axis nearly parallel to the lever arm (little torque authority)
    yields a short vector. A zero lever arm or axis yields the zero vector.

    Args:
        lever_arm: Nozzle position minus center of mass (world)
        axis: Rotation axis (world)

    Returns:
        Displacement direction (world), magnitude in [0, 1]
    """
    return np.cross(normalize_or_zero(lever_arm), normalize_or_zero(axis))


def resolve_axis_demand(lever_arm: np.ndarray, axis: np.ndarray,
                        neutral_pose: np.ndarray, control_input: float,
                        gimbal_range: float) -> np.ndarray:
    """
    Nozzle displacement that answers one axis's control demand.

    The control input requests clockwise rotation, whereas the torque
    direction is counter-clockwise, so the input is negated before it is
    used as the clipping factor.

    Args:
        lever_arm: Nozzle position minus center of mass (world)
        axis: Rotation axis for this control channel (world)
        neutral_pose: Nozzle thrust direction with the gimbal centered (world)
        control_input: Demand for this axis (unclamped)
        gimbal_range: Cone half-angle (degrees)

    Returns:
        This axis's contribution (world), not normalized
    """
    direction = compute_torque_direction(lever_arm, axis)
    return clip_to_gimbal_cone(neutral_pose, direction, -control_input, gimbal_range)


def mix_axis_demands(lever_arm: np.ndarray, body_axes: tuple,
                     neutral_pose: np.ndarray, demand: ControlDemand,
                     gimbal_range: float, clamp_inputs: bool = False) -> tuple:
    """
    Resolve pitch, yaw and roll independently and sum the contributions.

    Args:
        lever_arm: Nozzle position minus center of mass (world)
        body_axes: (right, forward, up) vehicle axes, used as the pitch,
                   yaw and roll rotation axes
        neutral_pose: Nozzle thrust direction with the gimbal centered (world)
        demand: Control demand for this tick
        gimbal_range: Cone half-angle (degrees)
        clamp_inputs: Clamp each input to [-1, 1] first

    Returns:
        (combined, (pitch_vector, yaw_vector, roll_vector)) tuple
    """
    if demand.is_neutral:
        return np.zeros(3), (np.zeros(3), np.zeros(3), np.zeros(3))

    right, forward, up = body_axes
    pitch, yaw, roll = demand
    if clamp_inputs:
        pitch, yaw, roll = clamp_control(pitch), clamp_control(yaw), clamp_control(roll)

    pitch_vector = resolve_axis_demand(lever_arm, right, neutral_pose, pitch, gimbal_range)
    yaw_vector = resolve_axis_demand(lever_arm, forward, neutral_pose, yaw, gimbal_range)
    roll_vector = resolve_axis_demand(lever_arm, up, neutral_pose, roll, gimbal_range)

    combined = pitch_vector + yaw_vector + roll_vector
    return combined, (pitch_vector, yaw_vector, roll_vector)
