"""Lighting module.

Components:
    point_light: Zero-size lights with inverse-square falloff

Lights contribute unconditionally: there is no shadow or occlusion test.
"""

from .point_light import PointLight, illuminate, make_point_light

__all__ = [
    "PointLight",
    "illuminate",
    "make_point_light",
]
