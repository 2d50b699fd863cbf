import math

import numpy as np
import pytest

from orrery.camera import FAR_PLANE, MAX_FOV, MIN_FOV, NEAR_PLANE, PITCH_LIMIT, Camera


def _apply(matrix, point):
    result = matrix @ np.array([*point, 1.0])
    return result[:3] / result[3]


def test_default_position_and_view():
    camera = Camera()
    np.testing.assert_allclose(camera.position, [0.0, 0.0, 5.0])
    view = camera.calculate_view_matrix()
    np.testing.assert_allclose(_apply(view, camera.position), [0.0, 0.0, 0.0], atol=1e-12)


def test_custom_position_is_kept():
    camera = Camera((0.0, 0.0, 10.0))
    np.testing.assert_allclose(camera.position, [0.0, 0.0, 10.0])


def test_view_matrix_places_origin_in_front():
    camera = Camera((0.0, 0.0, 10.0))
    camera.calculate_view_matrix()
    np.testing.assert_allclose(
        _apply(camera.view_matrix, (0.0, 0.0, 0.0)), [0.0, 0.0, -10.0], atol=1e-12
    )


def test_move_forward_follows_forward_vector():
    camera = Camera((1.0, 2.0, 3.0))
    camera.move_forward(2.0)
    np.testing.assert_allclose(camera.position, [1.0, 2.0, 1.0])


def test_move_right_and_up_are_perpendicular_to_forward():
    camera = Camera((0.0, 0.0, 0.0))
    camera.calculate_view_matrix()
    camera.move_right(1.5)
    camera.move_up(-0.5)
    assert float(np.dot(camera.position, camera.forward)) == pytest.approx(0.0)
    np.testing.assert_allclose(camera.position, 1.5 * camera.right - 0.5 * camera.up)


def test_first_mouse_event_keeps_direction():
    camera = Camera()
    camera.compute_rotation(300.0, 200.0)
    np.testing.assert_allclose(camera.forward, [0.0, 0.0, -1.0], atol=1e-12)
    assert camera.yaw == pytest.approx(-90.0)
    assert camera.pitch == pytest.approx(0.0)


def test_mouse_movement_scaled_by_sensitivity():
    camera = Camera()
    camera.compute_rotation(0.0, 0.0)
    camera.compute_rotation(100.0, -50.0)
    assert camera.yaw == pytest.approx(-90.0 + 100.0 * camera.sensitivity)
    assert camera.pitch == pytest.approx(50.0 * camera.sensitivity)
    assert np.linalg.norm(camera.forward) == pytest.approx(1.0)


@pytest.mark.parametrize("ypos, limit", [(-100000.0, PITCH_LIMIT), (100000.0, -PITCH_LIMIT)])
def test_pitch_is_clamped(ypos, limit):
    camera = Camera()
    camera.compute_rotation(0.0, 0.0)
    camera.compute_rotation(0.0, ypos)
    assert camera.pitch == pytest.approx(limit)
    assert camera.forward[1] == pytest.approx(math.sin(math.radians(limit)))


def test_scroll_zooms_and_clamps():
    camera = Camera()
    camera.compute_scroll(5.0)
    assert camera.fov == pytest.approx(MAX_FOV - 5.0)
    camera.compute_scroll(1000.0)
    assert camera.fov == pytest.approx(MIN_FOV)
    camera.compute_scroll(-1000.0)
    assert camera.fov == pytest.approx(MAX_FOV)


def test_perspective_uses_field_of_view_and_planes():
    camera = Camera()
    proj = camera.calculate_perspective_matrix(1280 / 720)
    assert proj[1, 1] == pytest.approx(1.0 / math.tan(math.radians(MAX_FOV) / 2))
    assert _apply(proj, (0.0, 0.0, -NEAR_PLANE))[2] == pytest.approx(-1.0)
    assert _apply(proj, (0.0, 0.0, -FAR_PLANE))[2] == pytest.approx(1.0)
    np.testing.assert_allclose(camera.perspective_matrix, proj)


def test_perspective_rejects_zero_aspect():
    with pytest.raises(ValueError):
        Camera().calculate_perspective_matrix(0.0)