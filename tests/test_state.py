import numpy as np

from smrt_gimbal.state import GimbalState


def test_defaults():
    s = GimbalState()
    np.testing.assert_array_equal(s.rest_rotation, [1.0, 0.0, 0.0, 0.0])
    assert s.locked is False
    assert s.ticks == 0


def test_copy_is_deep():
    s = GimbalState(rest_rotation=[0.0, 1.0, 0.0, 0.0], locked=True, ticks=3)
    c = s.copy()
    c.rest_rotation[0] = 9.0
    c.ticks = 4
    assert s.rest_rotation[0] == 0.0
    assert s.ticks == 3
    assert c.locked is True


def test_str():
    assert 'locked=False' in str(GimbalState())
