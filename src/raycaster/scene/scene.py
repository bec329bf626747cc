"""Device-side scene storage with nearest-hit search and shading.

A ``Scene`` owns the Taichi fields holding its shapes and lights. Nothing
is kept at module level, so several scenes can coexist and each render
receives its scene explicitly.

Primitives are stored as a Structure of Arrays, one field per attribute,
and rebuilt into their Taichi dataclass inside the search loop. Each shape
kind has its own arrays and is scanned in a fixed order. A new kind adds
its arrays plus one more loop in ``nearest_hit`` calling its own
``intersect_<shape>`` function.

Example:
    >>> from raycaster.core.runtime import init_runtime
    >>> init_runtime()
    >>> scene = Scene(
    ...     spheres=[SphereConfig(center=(0.0, 0.0, -10.0), radius=1.0)],
    ...     lights=[PointLightConfig((2.0, 0.0, -9.0), (1.0, 0.0, 0.0), 2.0)],
    ... )
    >>> # Inside a Taichi kernel:
    >>> # rec = scene.nearest_hit(ray)
    >>> # color = scene.shade(ray_at(ray, rec.t))
"""

from collections.abc import Sequence

import taichi as ti
import taichi.math as tm

from raycaster.core.ray import Ray
from raycaster.core.vector import add, vec3
from raycaster.geometry.sphere import Sphere, intersect_sphere
from raycaster.lighting.point_light import PointLight, illuminate
from raycaster.scene.config import PointLightConfig, SphereConfig


@ti.dataclass
class SceneHit:
    """Record of the nearest intersection between a ray and the scene.

    Attributes:
        hit: 1 if any shape was hit, 0 otherwise.
        t: Distance to the nearest hit. Only valid if hit == 1.
        shape_index: Index of the hit shape within its kind, in insertion
            order. -1 on a miss.
    """

    hit: ti.i32
    t: ti.f64
    shape_index: ti.i32


@ti.func
def clamp_channels(color: vec3) -> vec3:
    """Clamp every channel of a color to at most 1.0.

    A NaN channel is left as NaN.
    """
    return vec3(
        ti.select(color.x > 1.0, 1.0, color.x),
        ti.select(color.y > 1.0, 1.0, color.y),
        ti.select(color.z > 1.0, 1.0, color.z),
    )


@ti.data_oriented
class Scene:
    """An ordered set of shapes and point lights stored in Taichi fields.

    The scene is read-only once constructed.

    Attributes:
        num_spheres: Number of spheres in the scene.
        num_lights: Number of point lights in the scene.
    """

    def __init__(
        self,
        spheres: Sequence[SphereConfig],
        lights: Sequence[PointLightConfig],
    ) -> None:
        """Upload shapes and lights to Taichi fields.

        Args:
            spheres: Spheres in search order. Earlier spheres win exact ties.
            lights: Point lights in accumulation order.
        """
        self._sphere_configs = tuple(spheres)
        self._light_configs = tuple(lights)
        self.num_spheres = len(self._sphere_configs)
        self.num_lights = len(self._light_configs)

        # Fields cannot be empty; an empty scene keeps one unused slot
        sphere_slots = max(self.num_spheres, 1)
        light_slots = max(self.num_lights, 1)

        self.sphere_centers = ti.Vector.field(3, dtype=ti.f64, shape=sphere_slots)
        self.sphere_radii = ti.field(dtype=ti.f64, shape=sphere_slots)

        self.light_sources = ti.Vector.field(3, dtype=ti.f64, shape=light_slots)
        self.light_colors = ti.Vector.field(3, dtype=ti.f64, shape=light_slots)
        self.light_intensities = ti.field(dtype=ti.f64, shape=light_slots)

        for i, sphere in enumerate(self._sphere_configs):
            self.sphere_centers[i] = list(sphere.center)
            self.sphere_radii[i] = sphere.radius

        for i, light in enumerate(self._light_configs):
            self.light_sources[i] = list(light.source)
            self.light_colors[i] = list(light.color)
            self.light_intensities[i] = light.intensity

    @property
    def spheres(self) -> tuple[SphereConfig, ...]:
        """The spheres this scene was built from."""
        return self._sphere_configs

    @property
    def lights(self) -> tuple[PointLightConfig, ...]:
        """The lights this scene was built from."""
        return self._light_configs

    @ti.func
    def nearest_hit(self, ray: Ray) -> SceneHit:
        """Find the nearest intersection of a ray with any shape.

        Shapes are tested in insertion order and a hit replaces the current
        best only when strictly nearer, so the first shape wins exact ties.
        Negative distances count as hits. NaN distances are ignored.

        Args:
            ray: The ray to test.

        Returns:
            A SceneHit for the nearest shape, or a miss record.
        """
        result = SceneHit(hit=0, t=0.0, shape_index=-1)

        for i in range(self.num_spheres):
            sphere = Sphere(center=self.sphere_centers[i], radius=self.sphere_radii[i])
            rec = intersect_sphere(sphere, ray)
            if rec.hit == 1 and not tm.isnan(rec.t):
                if result.hit == 0 or rec.t < result.t:
                    result = SceneHit(hit=1, t=rec.t, shape_index=i)

        return result

    @ti.func
    def shade(self, point: vec3) -> vec3:
        """Accumulate the light reaching a point from every light.

        Each channel is clamped to 1.0 after every light is added. There is
        no occlusion test.

        Args:
            point: The shaded point in world space.

        Returns:
            The accumulated RGB color with channels at most 1.0.
        """
        color = vec3(0.0, 0.0, 0.0)
        for i in range(self.num_lights):
            light = PointLight(
                source=self.light_sources[i],
                color=self.light_colors[i],
                intensity=self.light_intensities[i],
            )
            color = clamp_channels(add(color, illuminate(light, point)))
        return color

    def __repr__(self) -> str:
        """Return a string representation of the scene contents."""
        return f"Scene(spheres={self.num_spheres}, lights={self.num_lights})"
