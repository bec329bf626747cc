"""Core rendering module.

Components:
    vector: 3D vector type and algebra (add, sub, dot, scale, length, normalize)
    ray: Ray data structure and point-at-distance evaluation
    runtime: Taichi initialization with double precision
    render: Per-pixel render loop producing the RGBA buffer

All per-pixel math is written as Taichi functions and runs inside kernels.
"""

from .ray import Ray, make_ray, ray_at
from .runtime import init_runtime
from .vector import add, dot, length, normalize, scale, sub, vec3

# Note: render is NOT imported here to avoid circular imports with scene.
# Import it directly from raycaster.core.render when needed.

__all__ = [
    "Ray",
    "ray_at",
    "make_ray",
    "vec3",
    "add",
    "sub",
    "dot",
    "scale",
    "length",
    "normalize",
    "init_runtime",
]
