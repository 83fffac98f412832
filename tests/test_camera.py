"""
Tests for Camera smoothing, clamping and transforms
"""

import pytest

from systems.camera import (
    Camera, CameraTransform, ease_in_out_cubic, screen_to_world, world_to_screen
)


def test_ease_fixed_points():
    assert ease_in_out_cubic(0.0) == 0.0
    assert ease_in_out_cubic(0.5) == pytest.approx(0.5)
    assert ease_in_out_cubic(1.0) == 1.0


def test_ease_is_monotonic():
    values = [ease_in_out_cubic(i / 200) for i in range(201)]
    assert all(b >= a for a, b in zip(values, values[1:]))


def test_smoothing_moves_fraction_toward_target(camera):
    camera.set_target(100.0, -50.0, 2.0)
    camera.tick()

    assert camera.pan_x == pytest.approx(5.0)
    assert camera.pan_y == pytest.approx(-2.5)
    assert camera.zoom == pytest.approx(1.05)


def test_smoothing_never_overshoots(camera):
    camera.set_target(100.0, 0.0, 3.0)
    for _ in range(500):
        camera.tick()
        assert camera.pan_x <= 100.0
        assert camera.zoom <= 3.0

    assert camera.pan_x == pytest.approx(100.0, abs=1e-3)


@pytest.mark.parametrize("delta", [1e9, -1e9, 5000, -5000, 123.4])
def test_scroll_zoom_clamped(camera, delta):
    for _ in range(20):
        camera.zoom_by(delta)
        assert 0.5 <= camera.target_zoom <= 3.0


def test_scroll_down_zooms_out(camera):
    camera.zoom_by(100)
    assert camera.target_zoom == pytest.approx(0.9)

    camera.zoom_by(-300)
    assert camera.target_zoom == pytest.approx(1.2)


def test_set_target_clamps_zoom(camera):
    camera.set_target(0, 0, 10.0)
    assert camera.target_zoom == 3.0
    camera.set_target(0, 0, 0.01)
    assert camera.target_zoom == 0.5


def test_drag_scaled_by_zoom(camera):
    camera.zoom = 2.0
    camera.pan_by(10, -20)

    assert camera.target_pan_x == pytest.approx(-5.0)
    assert camera.target_pan_y == pytest.approx(10.0)


def test_transition_not_clamped(camera):
    start = CameraTransform(0, 0, 1)
    end = CameraTransform(200, 100, 5)

    camera.apply_transition(start, end, 1.0)
    assert camera.zoom == 5.0
    assert camera.current_transform() == end

    camera.apply_transition(start, end, 0.0)
    assert camera.current_transform() == start


def test_transition_progress_clamped(camera):
    start = CameraTransform(10, 20, 1.5)
    end = CameraTransform(50, 60, 5)

    camera.apply_transition(start, end, -3.0)
    assert camera.current_transform() == start
    camera.apply_transition(start, end, 7.0)
    assert camera.current_transform() == end


def test_reset_is_canonical(camera):
    camera.set_target(40, 40, 2)
    camera.apply_transition(CameraTransform(), CameraTransform(80, 80, 5), 0.5)
    camera.reset()

    assert camera.current_transform() == CameraTransform(0.0, 0.0, 1.0)
    assert camera.target_transform() == CameraTransform(0.0, 0.0, 1.0)


def test_invalid_zoom_range():
    with pytest.raises(ValueError):
        Camera(min_zoom=4, max_zoom=2)


@pytest.mark.parametrize("min_zoom", [0, -0.5])
def test_non_positive_min_zoom_rejected(min_zoom):
    with pytest.raises(ValueError):
        Camera(min_zoom=min_zoom)


@pytest.mark.parametrize("transform", [
    CameraTransform(0, 0, 1),
    CameraTransform(120, -80, 2.5),
    CameraTransform(-300, 45, 0.5),
    CameraTransform(900, 400, 5),
])
def test_screen_world_inverse(transform):
    for wx, wy in [(0, 0), (640, 360), (123.4, 987.6), (-50, 20)]:
        sx, sy = world_to_screen(wx, wy, transform, 1280, 720)
        rx, ry = screen_to_world(sx, sy, transform, 1280, 720)
        assert rx == pytest.approx(wx)
        assert ry == pytest.approx(wy)
