"""Tests for the golden-angle point-sequence computation."""
import math

import numpy as np
import pytest

from phyllotaxis._animation import AnimationState
from phyllotaxis._config import GOLDEN_ANGLE, PatternConfig, ShapeKind
from phyllotaxis._points import (
    PointDescriptor, PointSet, calculate_points, iter_points, map_range,
)

CENTER = (300.0, 300.0)


def radii(pts, center=CENTER):
    return np.hypot(pts.x - center[0], pts.y - center[1])


class TestMapRange:

    def test_scalar(self):
        assert map_range(150, 0, 300, 0, 60) == pytest.approx(30)

    def test_unclamped(self):
        assert map_range(600, 0, 300, 0, 60) == pytest.approx(120)

    def test_array(self):
        out = map_range(np.array([0.0, 300.0]), 0, 300, 10, 20)
        numpy_out = np.asarray(out)
        assert numpy_out.shape == (2,)
        assert np.allclose(numpy_out, [10, 20])


class TestGeometry:
    """Positions, spacing and rotation of the spiral points."""

    def test_length_matches_point_count(self):
        for n in (100, 3000, 5000):
            pts = calculate_points(AnimationState(),
                                   PatternConfig(num_points=n))
            assert len(pts) == n
            assert pts.x.shape == pts.y.shape == pts.hue.shape == (n,)

    def test_first_points_default_frame(self):
        """3000 points, spacing 0.1, no rotation, centre (300, 300)."""
        pts = calculate_points(AnimationState(distance_increment=0.1),
                               PatternConfig(num_points=3000),
                               center=CENTER)
        assert pts.x[0] == 300.0
        assert pts.y[0] == 300.0

        dx, dy = pts.x[1] - 300.0, pts.y[1] - 300.0
        assert math.hypot(dx, dy) == pytest.approx(0.1)
        assert math.degrees(math.atan2(dy, dx)) == pytest.approx(137.5)

    def test_radius_linear_in_index(self):
        state = AnimationState(distance_increment=0.37, angular_offset=42.0)
        pts = calculate_points(state, PatternConfig(num_points=500),
                               center=CENTER)
        r = radii(pts)
        assert np.allclose(r, np.arange(500) * 0.37)
        assert np.all(np.diff(r) >= -1e-9)

    def test_golden_angle_spacing(self):
        state = AnimationState(distance_increment=0.5, angular_offset=17.0)
        pts = calculate_points(state, PatternConfig(num_points=300),
                               center=CENTER)
        theta = np.degrees(np.arctan2(pts.y[1:] - CENTER[1],
                                      pts.x[1:] - CENTER[0]))
        step = np.diff(theta) % 360
        assert np.allclose(step, GOLDEN_ANGLE, atol=1e-6)

    def test_angular_offset_rotates_spiral(self):
        state = AnimationState(distance_increment=1.0, angular_offset=90.0)
        pts = calculate_points(state, PatternConfig(num_points=100),
                               center=CENTER)
        # Point 1 sits at 90 + 137.5 degrees
        angle = math.radians(227.5)
        assert pts.x[1] == pytest.approx(300 + math.cos(angle))
        assert pts.y[1] == pytest.approx(300 + math.sin(angle))

    def test_rotation(self):
        state = AnimationState(square_rotation_offset=30.0)
        pts = calculate_points(state, PatternConfig(num_points=400))
        assert pts.rotation[0] == pytest.approx(math.radians(30.0))
        expected = np.radians(30.0 + np.arange(400) * (360 / 400) * 0.5)
        assert np.allclose(pts.rotation, expected)

    def test_custom_center(self):
        pts = calculate_points(AnimationState(), PatternConfig(),
                               center=(10.0, 20.0), width=40)
        assert (pts.x[0], pts.y[0]) == (10.0, 20.0)


class TestHue:
    """Hue as a function of distance from the centre."""

    def test_centre_has_hue_offset(self):
        pts = calculate_points(AnimationState(hue_offset=75.0),
                               PatternConfig())
        assert pts.hue[0] == pytest.approx(75.0)

    def test_half_width_maps_to_hue_range(self):
        """The point at width/2 from the centre gets exactly hue_range."""
        cfg = PatternConfig(num_points=3100, hue_range=60)
        pts = calculate_points(AnimationState(distance_increment=0.1), cfg,
                               center=CENTER, width=600)
        assert radii(pts)[3000] == pytest.approx(300.0)
        assert pts.hue[3000] == pytest.approx(60.0)

    def test_hue_wraps_with_offset(self):
        cfg = PatternConfig(num_points=3100, hue_range=60)
        state = AnimationState(distance_increment=0.1, hue_offset=350.0)
        pts = calculate_points(state, cfg, center=CENTER, width=600)
        assert pts.hue[3000] == pytest.approx(50.0)

    def test_hue_in_range(self):
        cfg = PatternConfig(num_points=5000, hue_range=180)
        state = AnimationState(distance_increment=1.0, hue_offset=359.0)
        pts = calculate_points(state, cfg)
        assert np.all(pts.hue >= 0)
        assert np.all(pts.hue < 360)

    def test_zero_hue_range_uniform(self):
        cfg = PatternConfig(hue_range=0)
        pts = calculate_points(AnimationState(hue_offset=12.0), cfg)
        assert np.allclose(pts.hue, 12.0)


class TestSequence:
    """PointSet iteration and the scalar generator."""

    def test_iter_points_matches_vectorised(self):
        state = AnimationState(distance_increment=0.43, angular_offset=12.0,
                               square_rotation_offset=200.0,
                               hue_offset=310.0)
        cfg = PatternConfig(num_points=200, hue_range=120)
        pts = calculate_points(state, cfg)
        scalar = list(iter_points(state, cfg))
        assert len(scalar) == 200
        assert np.allclose([p.x for p in scalar], pts.x)
        assert np.allclose([p.y for p in scalar], pts.y)
        assert np.allclose([p.hue for p in scalar], pts.hue)
        assert np.allclose([p.rotation for p in scalar], pts.rotation)

    def test_iter_points_restartable(self):
        state, cfg = AnimationState(), PatternConfig(num_points=100)
        assert list(iter_points(state, cfg)) == list(iter_points(state, cfg))

    def test_pointset_iteration(self):
        cfg = PatternConfig(num_points=100, shape_size=7,
                            shape_kind='triangle')
        pts = calculate_points(AnimationState(), cfg)
        first = list(pts)
        second = list(pts)
        assert first == second
        assert len(first) == 100
        p = first[10]
        assert isinstance(p, PointDescriptor)
        assert p.index == 10
        assert p.size == 7
        assert p.shape_kind is ShapeKind.TRIANGLE
        assert (p.saturation, p.brightness) == (90, 100)
        assert (p.fill_alpha, p.stroke_alpha) == (10, 30)

    def test_negative_index(self):
        pts = calculate_points(AnimationState(), PatternConfig(num_points=100))
        assert pts[-1].index == 99
        assert pts[-1].x == pts.x[99]

    def test_zero_points_is_empty_frame(self):
        """A config assigned directly can bypass the clamp to 0 points."""
        cfg = PatternConfig()
        cfg.num_points = 0
        pts = calculate_points(AnimationState(), cfg)
        assert len(pts) == 0
        assert list(pts) == []
        assert list(iter_points(AnimationState(), cfg)) == []

    def test_offsets(self):
        pts = calculate_points(AnimationState(), PatternConfig(num_points=100))
        assert isinstance(pts, PointSet)
        assert pts.offsets.shape == (100, 2)
        assert np.array_equal(pts.offsets[:, 0], pts.x)
