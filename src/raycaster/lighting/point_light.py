"""Point light with inverse-square falloff.

The light reaching a point is

    intensity / |point - source|^2 * color

The color is intended to lie in [0, 1] per channel but this is not
enforced. Accumulated light is clamped by the scene when shading.
"""

import taichi as ti

from raycaster.core.vector import length, scale, sub, vec3


@ti.dataclass
class PointLight:
    """A point light source.

    Attributes:
        source: Position of the light in world space (vec3).
        color: RGB color of the light (vec3).
        intensity: Falloff numerator; the light is this bright at unit distance.
    """

    source: vec3
    color: vec3
    intensity: ti.f64


@ti.func
def illuminate(light: PointLight, point: vec3) -> vec3:
    """Compute the light contributed by a point light at a given point.

    Args:
        light: The light source.
        point: The illuminated point in world space.

    Returns:
        The RGB contribution scaled by intensity / distance^2. A point at the
        light's own position divides by zero.
    """
    distance = length(sub(point, light.source))
    return scale(light.intensity / (distance * distance), light.color)


@ti.func
def make_point_light(source: vec3, color: vec3, intensity: ti.f64) -> PointLight:
    """Create a point light inside a Taichi kernel."""
    return PointLight(source=source, color=color, intensity=intensity)
