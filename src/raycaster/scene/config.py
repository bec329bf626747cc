"""Host-side scene and render parameters.

These dataclasses describe what to render. They are validated on
construction and then uploaded to Taichi fields by ``Scene``.
"""

import math
from dataclasses import dataclass

from raycaster.camera.projection import vertical_fov


@dataclass(frozen=True)
class SphereConfig:
    """A sphere in world space.

    Attributes:
        center: Center point (x, y, z).
        radius: Radius, must be positive.
    """

    center: tuple[float, float, float]
    radius: float

    def __post_init__(self) -> None:
        if not self.radius > 0.0:
            raise ValueError(f"Sphere radius must be positive, got {self.radius}")


@dataclass(frozen=True)
class PointLightConfig:
    """A point light in world space.

    Attributes:
        source: Light position (x, y, z).
        color: RGB color, intended to lie in [0, 1] per channel.
        intensity: Brightness at unit distance.
    """

    source: tuple[float, float, float]
    color: tuple[float, float, float]
    intensity: float


@dataclass(frozen=True)
class RenderSettings:
    """Image size and camera field of view.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
        fov_degrees: Horizontal field of view in degrees.
    """

    width: int = 640
    height: int = 480
    fov_degrees: float = 45.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Image dimensions must be positive, got {self.width}x{self.height}"
            )
        if not self.fov_degrees > 0.0:
            raise ValueError(f"Field of view must be positive, got {self.fov_degrees}")

    @property
    def fov(self) -> float:
        """Horizontal field of view in radians."""
        return self.fov_degrees * math.pi / 180.0

    @property
    def fov_y(self) -> float:
        """Vertical field of view in radians, derived from the aspect ratio."""
        return vertical_fov(self.width, self.height, self.fov)

    @property
    def buffer_size(self) -> int:
        """Number of bytes in the RGBA pixel buffer."""
        return self.width * self.height * 4
