"""Tests for transforms and the rigid vehicle pose provider."""

import numpy as np
import pytest

from smrt_gimbal import constants as C
from smrt_gimbal.frames import direction_to_quaternion
from smrt_gimbal.transform import ChildTransform, Transform
from smrt_gimbal.types import ControlDemand
from smrt_gimbal.vehicle import RigidVehicle, create_default_vehicle

# 90 degrees about +X: body up (+Y) -> world +Z
Q_90X = np.array([np.cos(np.pi/4), np.sin(np.pi/4), 0.0, 0.0])


def test_transform_axes_identity():
    t = Transform()
    np.testing.assert_array_almost_equal(t.right, [1.0, 0.0, 0.0])
    np.testing.assert_array_almost_equal(t.up, [0.0, 1.0, 0.0])
    np.testing.assert_array_almost_equal(t.forward, [0.0, 0.0, 1.0])


def test_transform_point_and_direction():
    t = Transform(position=[1.0, 2.0, 3.0], rotation=Q_90X)
    np.testing.assert_array_almost_equal(t.up, [0.0, 0.0, 1.0])
    np.testing.assert_array_almost_equal(t.transform_point([0.0, 1.0, 0.0]), [1.0, 2.0, 4.0])


def test_child_follows_parent():
    parent = Transform()
    child = ChildTransform(parent=parent, local_position=[0.0, -5.0, 0.0])
    parent.rotation = Q_90X
    np.testing.assert_array_almost_equal(child.position, [0.0, 0.0, -5.0])


def test_child_world_rotation_setter_stores_local():
    parent = Transform(rotation=Q_90X)
    child = ChildTransform(parent=parent)
    target = direction_to_quaternion(np.array([1.0, 0.0, 0.0]))
    child.rotation = target
    np.testing.assert_array_almost_equal(
        child.transform_direction(C.NOZZLE_FORWARD_AXIS), [1.0, 0.0, 0.0])
    # Local rotation is relative to the parent, not the world
    assert not np.allclose(child.local_rotation, target)


def test_rigid_vehicle_center_of_mass_moves_with_attitude():
    vehicle = RigidVehicle(com_offset=[0.0, 2.0, 0.0])
    np.testing.assert_array_almost_equal(vehicle.center_of_mass(), [0.0, 2.0, 0.0])
    vehicle.rotate(Q_90X)
    np.testing.assert_array_almost_equal(vehicle.center_of_mass(), [0.0, 0.0, 2.0])


def test_rigid_vehicle_body_axes_order():
    right, forward, up = RigidVehicle().body_axes()
    np.testing.assert_array_almost_equal(right, [1.0, 0.0, 0.0])
    np.testing.assert_array_almost_equal(forward, [0.0, 0.0, 1.0])
    np.testing.assert_array_almost_equal(up, [0.0, 1.0, 0.0])


def test_find_nozzle_transform():
    vehicle = create_default_vehicle(nozzle_offset=4.0, nozzle_name='engine')
    nozzle = vehicle.find_nozzle_transform('engine')
    assert nozzle is not None
    assert vehicle.find_nozzle_transform('missing') is None
    np.testing.assert_array_almost_equal(nozzle.position, [0.0, -4.0, 0.0])
    np.testing.assert_array_almost_equal(
        nozzle.transform_direction(C.NOZZLE_FORWARD_AXIS), [0.0, -1.0, 0.0])


def test_default_vehicle_demand():
    vehicle = create_default_vehicle(demand=ControlDemand(pitch=0.5))
    assert vehicle.control_demand() == ControlDemand(0.5, 0.0, 0.0)
    assert not vehicle.control_demand().is_neutral
    assert ControlDemand().is_neutral
