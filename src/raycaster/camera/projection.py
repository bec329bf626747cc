"""Pinhole projection from pixel coordinates to camera rays.

The horizontal field of view is the only angular input. The vertical field
of view follows from the aspect ratio:

    fov_y = height * fov / width

Each pixel maps to a pair of angles, one per axis, whose tangents give the
x and y components of the ray direction. The z component is chosen so the
direction has unit length:

    dz = -sqrt(1 - dx^2 - dy^2)

This requires dx^2 + dy^2 <= 1. Very wide fields of view break that and
produce NaN directions, which the render loop treats as misses.

Example:
    >>> vertical_fov(640, 480, math.radians(45.0))
    0.5890486225480862
"""

import taichi as ti

from raycaster.core.ray import Ray, make_ray
from raycaster.core.vector import vec3


def vertical_fov(width: int, height: int, fov: float) -> float:
    """Derive the vertical field of view from the horizontal one.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        fov: Horizontal field of view in radians.

    Returns:
        The vertical field of view in radians.
    """
    return height * fov / width


@ti.func
def camera_direction(x: ti.i32, y: ti.i32, width: ti.i32, height: ti.i32, fov: ti.f64) -> vec3:
    """Compute the camera-space direction through a pixel.

    Args:
        x: Pixel column in [0, width), left to right.
        y: Pixel row in [0, height), top to bottom.
        width: Image width in pixels.
        height: Image height in pixels.
        fov: Horizontal field of view in radians.

    Returns:
        The direction (tan(angle_x), tan(angle_y), -sqrt(1 - dx^2 - dy^2)).
    """
    w = ti.cast(width, ti.f64)
    h = ti.cast(height, ti.f64)
    fov_y = h * fov / w

    angle_x = (ti.cast(x, ti.f64) / w - 0.5) * fov
    angle_y = -(ti.cast(y, ti.f64) / h - 0.5) * fov_y

    dx = ti.tan(angle_x)
    dy = ti.tan(angle_y)
    dz = -ti.sqrt(1.0 - dx * dx - dy * dy)
    return vec3(dx, dy, dz)


@ti.func
def camera_ray(x: ti.i32, y: ti.i32, width: ti.i32, height: ti.i32, fov: ti.f64) -> Ray:
    """Generate the primary ray through a pixel.

    The ray starts at the world origin. Its direction is not renormalized.
    """
    origin = vec3(0.0, 0.0, 0.0)
    return make_ray(origin, camera_direction(x, y, width, height, fov))
