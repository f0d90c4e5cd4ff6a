import numpy as np
import pytest

from dataclasses import replace

from mandelscape.core.frame import project_and_sort, render_batch, render_frame
from mandelscape.core.profiles import get_profile
from mandelscape.core.projection import Rotation, perspective_scale
from mandelscape.core.sampler import ColoredPoint, Point3D, sample_cloud, sample_frame


def test_three_by_three_zero_rotation_is_orthographic_identity(tiny_profile):
    points = sample_frame(0.0, tiny_profile)
    drawables = project_and_sort(points, Rotation(), tiny_profile)

    assert len(drawables) == 9
    projected = sorted((d.screen_x, d.screen_y) for d in drawables)
    original = sorted((p.position.x, p.position.y) for p in points)
    assert projected == original


def test_drawables_carry_profile_constants(small_profile):
    for d in render_frame(0.0, Rotation(0.4, 0.2, 0.1), small_profile):
        assert d.radius == small_profile.point_radius
        assert d.opacity == small_profile.opacity


def test_batch_is_back_to_front(small_profile):
    batch = render_batch(500.0, Rotation(0.6, -0.3, 0.2), small_profile)
    assert len(batch) == small_profile.n_points
    assert np.all(np.diff(batch.depth) >= 0)
    assert batch.offsets.shape == (small_profile.n_points, 2)


def test_batch_and_list_paths_agree(small_profile):
    rot = Rotation(0.5, 0.25, -0.4)
    from_list = project_and_sort(sample_frame(750.0, small_profile), rot, small_profile)
    from_batch = render_frame(750.0, rot, small_profile)

    assert [d.color for d in from_batch] == [d.color for d in from_list]
    for a, b in zip(from_batch, from_list):
        assert (a.screen_x, a.screen_y) == pytest.approx((b.screen_x, b.screen_y))


def test_perspective_profile_renders(small_profile):
    profile = replace(small_profile, projection='perspective')
    batch = render_batch(0.0, Rotation(0.8), profile)
    assert np.all(np.isfinite(batch.screen_x))
    assert np.all(np.isfinite(batch.screen_y))


def test_perspective_paints_nearest_last():
    profile = get_profile('perspective')
    points = [
        ColoredPoint(Point3D(100.0, 0.0, 200.0), '#0000ff', index=0),
        ColoredPoint(Point3D(100.0, 0.0, -200.0), '#ff0000', index=1),
    ]
    drawables = project_and_sort(points, Rotation(), profile)

    assert [d.color for d in drawables] == ['#ff0000', '#0000ff']
    assert drawables[0].screen_x == pytest.approx(75.0)
    assert drawables[-1].screen_x == pytest.approx(150.0)


def test_perspective_scale_grows_in_paint_order(small_profile):
    profile = replace(small_profile, projection='perspective', focal_length=400.0)
    batch = render_batch(0.0, Rotation(0.8, 0.3, 0.1), profile)

    scale = perspective_scale(batch.depth, profile.focal_length)
    assert np.all(np.diff(scale) >= 0)
    assert scale[-1] == scale.max()


def test_batch_keeps_its_sampled_cloud(small_profile):
    batch = render_batch(1200.0, Rotation(0.3), small_profile)
    cloud = sample_cloud(1200.0, small_profile)

    assert batch.params == cloud.params
    np.testing.assert_array_equal(batch.cloud.iterations, cloud.iterations)
    assert sorted(batch.colors.tolist()) == sorted(cloud.colors.tolist())
