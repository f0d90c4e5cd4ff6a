import math
from dataclasses import replace

import pytest

from mandelscape.core.profiles import CameraConfig, get_profile
from mandelscape.interactive.state import (
    ApplicationState,
    FrameLoop,
    PointerMoved,
    Tick,
    initial_state,
    pointer_target,
    update,
)


@pytest.fixture
def loop_profile():
    return get_profile('terrain', lattice_size=5, lattice_spacing=40.0, max_iter=15)


def test_pointer_target_maps_edges():
    camera = CameraConfig()
    centre = pointer_target(400.0, 300.0, camera)
    assert (centre.pitch, centre.yaw) == (camera.base_pitch, 0.0)

    right = pointer_target(800.0, 300.0, camera)
    assert right.yaw == pytest.approx(camera.max_angle)

    top = pointer_target(400.0, 0.0, camera)
    assert top.pitch == pytest.approx(camera.base_pitch - camera.max_angle)


def test_pointer_updates_target_but_not_current(loop_profile):
    state = initial_state(loop_profile)
    moved = update(state, PointerMoved(800.0, 300.0), loop_profile)
    assert (moved.mouse_x, moved.mouse_y) == (800.0, 300.0)
    assert moved.target_rotation.yaw == pytest.approx(loop_profile.camera.max_angle)
    assert moved.current_rotation == state.current_rotation
    assert moved.time == state.time


def test_tick_smooths_current_rotation(loop_profile):
    state = update(initial_state(loop_profile), PointerMoved(800.0, 300.0), loop_profile)
    ticked = update(state, Tick(33.0), loop_profile)
    assert ticked.time == 33.0
    expected_yaw = loop_profile.camera.max_angle * loop_profile.camera.smoothing
    assert ticked.current_rotation.yaw == pytest.approx(expected_yaw)

    for i in range(2, 400):
        ticked = update(ticked, Tick(33.0 * i), loop_profile)
    assert ticked.current_rotation.yaw == pytest.approx(loop_profile.camera.max_angle, abs=1e-6)


def test_auto_profile_ignores_pointer():
    profile = get_profile('perspective', lattice_size=5)
    state = initial_state(profile)
    assert update(state, PointerMoved(10.0, 10.0), profile) is state


def test_auto_profile_drifts_with_time():
    profile = get_profile('perspective', lattice_size=5)
    a = update(initial_state(profile), Tick(5000.0), profile)
    assert a.target_rotation != initial_state(profile).target_rotation


def test_two_axis_profile_pins_roll():
    profile = get_profile('flat', lattice_size=5)
    state = initial_state(profile)
    for i in range(1, 50):
        state = update(state, Tick(400.0 * i), profile)
    assert state.current_rotation.roll == 0.0
    assert state.target_rotation.roll == 0.0


def test_three_axis_roll_follows_time(loop_profile):
    camera = loop_profile.camera
    quarter = camera.drift_period / 4
    state = update(initial_state(loop_profile), Tick(quarter), loop_profile)
    assert state.target_rotation.roll == pytest.approx(camera.drift_amplitude)


def test_unknown_event_rejected(loop_profile):
    with pytest.raises(TypeError):
        update(ApplicationState(), 'click', loop_profile)


def test_frame_loop_serializes_events(loop_profile):
    loop = FrameLoop(loop_profile)
    before = loop.state

    loop.pointer_moved(0.0, 300.0)
    loop.pointer_moved(800.0, 300.0)
    assert loop.state is before
    assert loop.frames_rendered == 0

    batch = loop.tick(33.0)
    assert len(batch) == loop_profile.n_points
    assert loop.frames_rendered == 1
    # Later pointer event wins
    assert loop.state.mouse_x == 800.0
    assert loop.state.target_rotation.yaw == pytest.approx(loop_profile.camera.max_angle)
    assert not loop.events


def test_frame_loop_uses_smoothed_rotation(loop_profile):
    profile = replace(loop_profile, camera=replace(loop_profile.camera, smoothing=1.0))
    loop = FrameLoop(profile)
    loop.pointer_moved(800.0, 300.0)
    loop.tick(0.0)
    assert loop.state.current_rotation.yaw == pytest.approx(profile.camera.max_angle)
    assert math.isclose(loop.state.current_rotation.pitch, profile.camera.base_pitch)
