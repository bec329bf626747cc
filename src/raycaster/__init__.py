"""Taichi ray caster for a sphere lit by coloured point lights.

This package casts one primary ray per pixel from a pinhole camera at the
world origin and shades the nearest hit with inverse-square point lights.
The result is an 8-bit RGBA pixel buffer that can be written out as PNG.

Subpackages:
    core: Vector algebra, rays, runtime setup and the render loop
    geometry: Shape primitives and ray intersection
    lighting: Point light illumination
    camera: Pixel-to-ray projection
    scene: Scene storage, parameters and the fixed three-light scene
    preview: PNG export and Matplotlib preview
"""

__version__ = "0.1.0"
