"""Tests for the torque-demand resolver."""

import numpy as np
import pytest

from smrt_gimbal import control
from smrt_gimbal.frames import angle_between_degrees
from smrt_gimbal.types import ControlDemand

LEVER = np.array([0.0, -5.0, 0.0])  # nozzle 5 m below the center of mass
NEUTRAL = np.array([0.0, -1.0, 0.0])
RIGHT = np.array([1.0, 0.0, 0.0])
FORWARD = np.array([0.0, 0.0, 1.0])
UP = np.array([0.0, 1.0, 0.0])
RANGE = 5.0


def test_torque_direction_is_normalized_cross_product():
    direction = control.compute_torque_direction(LEVER, 3.0 * RIGHT)
    np.testing.assert_array_almost_equal(direction, [0.0, 0.0, 1.0])


def test_torque_direction_scaled_by_sine():
    axis = np.array([1.0, 1.0, 0.0])  # 45 degrees off the lever arm
    direction = control.compute_torque_direction(LEVER, axis)
    assert np.linalg.norm(direction) == pytest.approx(np.sin(np.radians(45.0)))


def test_torque_direction_parallel_axis_is_zero():
    direction = control.compute_torque_direction(LEVER, UP)
    np.testing.assert_array_almost_equal(direction, np.zeros(3))


def test_torque_direction_zero_lever_arm_is_zero():
    direction = control.compute_torque_direction(np.zeros(3), RIGHT)
    np.testing.assert_array_equal(direction, np.zeros(3))
    assert np.all(np.isfinite(direction))


def test_resolve_axis_positive_input_moves_against_torque_direction():
    """Inputs are clockwise demands; the torque direction is counter-clockwise."""
    out = control.resolve_axis_demand(LEVER, RIGHT, NEUTRAL, 1.0, RANGE)
    assert out[2] < 0.0
    assert angle_between_degrees(NEUTRAL, out) == pytest.approx(RANGE, abs=1e-9)


def test_resolve_axis_negative_input():
    out = control.resolve_axis_demand(LEVER, RIGHT, NEUTRAL, -1.0, RANGE)
    assert out[2] > 0.0


def test_resolve_axis_partial_input():
    out = control.resolve_axis_demand(LEVER, RIGHT, NEUTRAL, 0.4, RANGE)
    assert angle_between_degrees(NEUTRAL, out) == pytest.approx(2.0, abs=1e-9)


def test_resolve_axis_zero_input():
    out = control.resolve_axis_demand(LEVER, RIGHT, NEUTRAL, 0.0, RANGE)
    np.testing.assert_array_equal(out, np.zeros(3))


def test_resolve_axis_unclamped_input_exceeds_range():
    out = control.resolve_axis_demand(LEVER, RIGHT, NEUTRAL, 2.0, RANGE)
    assert angle_between_degrees(NEUTRAL, out) == pytest.approx(2.0 * RANGE, abs=1e-9)


def test_mix_sums_contributions():
    demand = ControlDemand(pitch=1.0, yaw=0.5, roll=1.0)
    combined, (p, y, r) = control.mix_axis_demands(
        LEVER, (RIGHT, FORWARD, UP), NEUTRAL, demand, RANGE)
    np.testing.assert_array_almost_equal(combined, p + y + r)
    # Nozzle on the roll axis has no roll authority
    np.testing.assert_array_almost_equal(r, np.zeros(3))
    # Yaw about forward moves the nozzle along +/-X
    assert abs(y[0]) > 0.0


def test_mix_clamps_inputs_when_requested():
    demand = ControlDemand(pitch=3.0)
    _, (p_raw, _, _) = control.mix_axis_demands(
        LEVER, (RIGHT, FORWARD, UP), NEUTRAL, demand, RANGE)
    _, (p_clamped, _, _) = control.mix_axis_demands(
        LEVER, (RIGHT, FORWARD, UP), NEUTRAL, demand, RANGE, clamp_inputs=True)
    assert angle_between_degrees(NEUTRAL, p_raw) == pytest.approx(3.0 * RANGE, abs=1e-9)
    assert angle_between_degrees(NEUTRAL, p_clamped) == pytest.approx(RANGE, abs=1e-9)
