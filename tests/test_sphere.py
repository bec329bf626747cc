"""Unit tests for sphere intersection.

Tests cover:
- Ray aimed at the sphere center from outside
- The discriminant used directly as the root offset
- Ray missing the sphere
- Ray tangent to the sphere (single root)
- Unnormalized ray directions
- Spheres behind the ray origin (negative distances)
"""

import math

import pytest
import taichi as ti


def _intersect(origin, direction, center, radius):
    """Run intersect_sphere in a kernel and return (hit, t)."""
    from raycaster.core.ray import Ray
    from raycaster.core.vector import vec3
    from raycaster.geometry.sphere import Sphere, intersect_sphere

    params = ti.field(dtype=vec3, shape=3)
    params[0] = list(origin)
    params[1] = list(direction)
    params[2] = list(center)
    sphere_radius = ti.field(dtype=ti.f64, shape=())
    sphere_radius[None] = radius

    hit = ti.field(dtype=ti.i32, shape=())
    t_val = ti.field(dtype=ti.f64, shape=())

    @ti.kernel
    def test_kernel():
        ray = Ray(origin=params[0], direction=params[1])
        sphere = Sphere(center=params[2], radius=sphere_radius[None])
        rec = intersect_sphere(sphere, ray)
        hit[None] = rec.hit
        t_val[None] = rec.t

    test_kernel()
    return hit[None], t_val[None]


class TestSphereBasics:
    """Tests for Sphere dataclass and basic operations."""

    def test_make_sphere(self):
        """Test make_sphere convenience function."""
        from raycaster.core.vector import vec3
        from raycaster.geometry.sphere import make_sphere

        center_result = ti.field(dtype=vec3, shape=())
        radius_result = ti.field(dtype=ti.f64, shape=())

        @ti.kernel
        def test_kernel():
            sphere = make_sphere(vec3(1.0, 2.0, 3.0), 0.5)
            center_result[None] = sphere.center
            radius_result[None] = sphere.radius

        test_kernel()
        c = center_result[None]
        assert c[0] == pytest.approx(1.0)
        assert c[1] == pytest.approx(2.0)
        assert c[2] == pytest.approx(3.0)
        assert radius_result[None] == pytest.approx(0.5)

    def test_miss_record(self):
        """Test miss() reports no hit."""
        from raycaster.geometry.sphere import miss

        hit = ti.field(dtype=ti.i32, shape=())

        @ti.kernel
        def test_kernel():
            hit[None] = miss().hit

        hit[None] = 7
        test_kernel()
        assert hit[None] == 0


class TestSphereIntersection:
    """Tests for ray-sphere intersection."""

    def test_direct_hit_unit_sphere(self):
        """Test a ray through the center of a unit sphere hits at distance - radius."""
        hit, t = _intersect((0.0, 0.0, 0.0), (0.0, 0.0, -1.0), (0.0, 0.0, -10.0), 1.0)
        assert hit == 1
        assert t == pytest.approx(9.0)

    def test_direct_hit_from_offset_origin(self):
        """Test the hit distance is measured from the ray origin."""
        hit, t = _intersect((1.0, 2.0, 3.0), (1.0, 0.0, 0.0), (6.0, 2.0, 3.0), 1.0)
        assert hit == 1
        assert t == pytest.approx(4.0)

    def test_discriminant_offset_is_not_square_rooted(self):
        """Test the root offset is the discriminant itself (r^2 through the center)."""
        hit, t = _intersect((0.0, 0.0, 0.0), (0.0, 0.0, -1.0), (0.0, 0.0, -10.0), 2.0)
        assert hit == 1
        # disc = r^2 = 4, so t = 10 - 4 rather than 10 - 2
        assert t == pytest.approx(6.0)

    def test_returns_smaller_root(self):
        """Test the smaller of the two roots is returned."""
        hit, t = _intersect((0.0, 0.0, 0.0), (0.0, 0.0, -1.0), (0.0, 0.0, -10.0), 1.5)
        assert hit == 1
        assert t == pytest.approx(10.0 - 2.25)

    def test_miss(self):
        """Test a ray passing farther than the radius from the center misses."""
        hit, _ = _intersect((5.0, 0.0, 0.0), (0.0, 0.0, -1.0), (0.0, 0.0, -10.0), 1.0)
        assert hit == 0

    def test_miss_just_outside_radius(self):
        """Test a ray with perpendicular distance slightly above the radius misses."""
        hit, _ = _intersect((1.001, 0.0, 0.0), (0.0, 0.0, -1.0), (0.0, 0.0, -10.0), 1.0)
        assert hit == 0

    def test_tangent_single_root(self):
        """Test a tangent ray returns the single root -b."""
        # |diff| = 5 and b = -4 exactly, so the discriminant is exactly zero
        hit, t = _intersect((3.0, 0.0, 0.0), (0.0, 0.0, -1.0), (0.0, 0.0, -4.0), 3.0)
        assert hit == 1
        assert t == pytest.approx(4.0)

    def test_unnormalized_direction(self):
        """Test the direction is normalized before intersecting."""
        hit, t = _intersect((0.0, 0.0, 0.0), (0.0, 0.0, -25.0), (0.0, 0.0, -10.0), 1.0)
        assert hit == 1
        assert t == pytest.approx(9.0)

    def test_sphere_behind_origin_is_negative_hit(self):
        """Test a sphere behind the ray yields a negative distance, still a hit."""
        hit, t = _intersect((0.0, 0.0, 0.0), (0.0, 0.0, 1.0), (0.0, 0.0, -10.0), 1.0)
        assert hit == 1
        assert t == pytest.approx(-11.0)

    def test_nan_direction_yields_nan_distance(self):
        """Test a NaN direction is reported as a hit with a NaN distance."""
        hit, t = _intersect((0.0, 0.0, 0.0), (0.0, 0.0, math.nan), (0.0, 0.0, -10.0), 1.0)
        assert hit == 1
        assert math.isnan(t)
