"""Geometry module for shape primitives.

Components:
    sphere: Sphere primitive with ray-sphere intersection

Every shape exposes the same capability: given a ray, return an
``Intersection`` record holding whether it was hit and at which distance.
Intersection routines are Taichi functions (@ti.func) called from the
scene's nearest-hit search:

    rec = intersect_<shape>(shape, ray)
"""

from .sphere import Intersection, Sphere, intersect_sphere, make_sphere, miss

__all__ = [
    "Sphere",
    "Intersection",
    "intersect_sphere",
    "make_sphere",
    "miss",
]
