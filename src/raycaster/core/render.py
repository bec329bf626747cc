"""Render loop producing the RGBA pixel buffer.

For every pixel the renderer builds the camera ray, finds the nearest shape
hit in the scene and shades the hit point with every light. Pixels with no
hit are opaque black. The result is a flat ``uint8`` buffer of
``width * height * 4`` bytes, row-major, with pixel (x, y) at offset
``(x + y * width) * 4`` and channels in R, G, B, A order. Alpha is always
255.

Each pixel is computed independently and written exactly once. The loop is
serialized, and repeated renders of the same scene produce identical
buffers.

Example:
    >>> from raycaster.core.runtime import init_runtime
    >>> from raycaster.scene.three_lights import create_three_lights_scene
    >>> init_runtime()
    >>> scene, settings = create_three_lights_scene()
    >>> pixels = render_scene(scene, settings)
    >>> pixels.shape
    (1228800,)
"""

import numpy as np
import numpy.typing as npt
import taichi as ti

from raycaster.camera.projection import camera_ray
from raycaster.core.ray import ray_at
from raycaster.scene.config import RenderSettings
from raycaster.scene.scene import Scene

# Alpha channel value for every pixel
OPAQUE = 255


@ti.func
def to_byte(channel: ti.f64) -> ti.u8:
    """Convert a color channel in [0, 1] to an 8-bit value.

    The conversion truncates toward zero, so 0.5 maps to 127. Negative
    and NaN input map to 0.
    """
    return ti.cast(ti.select(channel > 0.0, channel, 0.0) * 255.0, ti.u8)


@ti.data_oriented
class Renderer:
    """Renders a scene into an RGBA8 pixel buffer.

    The renderer owns the pixel field for one image size. The scene is
    only read.

    Attributes:
        scene: The scene to render.
        settings: Image size and field of view.
    """

    def __init__(self, scene: Scene, settings: RenderSettings) -> None:
        """Allocate the pixel buffer for the given settings.

        Args:
            scene: The scene to render.
            settings: Image size and field of view.
        """
        self.scene = scene
        self.settings = settings
        self.width = settings.width
        self.height = settings.height
        self.pixels = ti.field(dtype=ti.u8, shape=settings.buffer_size)

    @ti.kernel
    def _render_kernel(self, fov: ti.f64):
        ti.loop_config(serialize=True)
        for x, y in ti.ndrange(self.width, self.height):
            ray = camera_ray(x, y, self.width, self.height, fov)
            rec = self.scene.nearest_hit(ray)
            i = (x + y * self.width) * 4

            if rec.hit == 1:
                color = self.scene.shade(ray_at(ray, rec.t))
                self.pixels[i + 0] = to_byte(color.x)
                self.pixels[i + 1] = to_byte(color.y)
                self.pixels[i + 2] = to_byte(color.z)
            else:
                self.pixels[i + 0] = ti.u8(0)
                self.pixels[i + 1] = ti.u8(0)
                self.pixels[i + 2] = ti.u8(0)

            self.pixels[i + 3] = ti.cast(OPAQUE, ti.u8)

    def render(self) -> npt.NDArray[np.uint8]:
        """Render every pixel and return the buffer.

        Returns:
            A flat NumPy array of width * height * 4 bytes (dtype uint8).
        """
        self._render_kernel(self.settings.fov)
        return self.pixels.to_numpy()

    def render_image(self) -> npt.NDArray[np.uint8]:
        """Render and return the buffer shaped (height, width, 4)."""
        return self.render().reshape(self.height, self.width, 4)

    def __repr__(self) -> str:
        """Return a string representation of the renderer."""
        return f"Renderer(width={self.width}, height={self.height}, scene={self.scene!r})"


def render_scene(scene: Scene, settings: RenderSettings) -> npt.NDArray[np.uint8]:
    """Render a scene once and return the flat RGBA buffer.

    Args:
        scene: The scene to render.
        settings: Image size and field of view.

    Returns:
        A flat NumPy array of settings.buffer_size bytes (dtype uint8).
    """
    return Renderer(scene, settings).render()
