"""The fixed sphere-and-three-lights scene.

One unit sphere sits ten units in front of the camera. Three point lights,
pure red, green and blue, sit one unit in front of it: red to the right,
green to the left and blue below. Each has intensity 2.0, so a point one
unit in front of the sphere center receives exactly half of every channel.

Example:
    >>> from raycaster.core.runtime import init_runtime
    >>> from raycaster.scene.three_lights import create_three_lights_scene
    >>> init_runtime()
    >>> scene, settings = create_three_lights_scene()
    >>> settings.width, settings.height
    (640, 480)
"""

from dataclasses import dataclass

from raycaster.scene.config import PointLightConfig, RenderSettings, SphereConfig
from raycaster.scene.scene import Scene

# =============================================================================
# Scene Constants
# =============================================================================

SPHERE_CENTER = (0.0, 0.0, -10.0)
SPHERE_RADIUS = 1.0

RED_LIGHT_POSITION = (2.0, 0.0, -9.0)
GREEN_LIGHT_POSITION = (-2.0, 0.0, -9.0)
BLUE_LIGHT_POSITION = (0.0, -2.0, -9.0)

RED = (1.0, 0.0, 0.0)
GREEN = (0.0, 1.0, 0.0)
BLUE = (0.0, 0.0, 1.0)

LIGHT_INTENSITY = 2.0

IMAGE_WIDTH = 640
IMAGE_HEIGHT = 480
FOV_DEGREES = 45.0


@dataclass
class ThreeLightsParams:
    """Parameters for the three-light scene.

    All defaults reproduce the reference scene.

    Attributes:
        light_intensity: Intensity shared by the three lights.
        width: Image width in pixels.
        height: Image height in pixels.
        fov_degrees: Horizontal field of view in degrees.
    """

    light_intensity: float = LIGHT_INTENSITY
    width: int = IMAGE_WIDTH
    height: int = IMAGE_HEIGHT
    fov_degrees: float = FOV_DEGREES


def three_lights_configs(
    params: ThreeLightsParams | None = None,
) -> tuple[list[SphereConfig], list[PointLightConfig]]:
    """Build the host-side shape and light descriptions.

    Args:
        params: Optional parameter overrides. Defaults to ThreeLightsParams().

    Returns:
        A tuple of (spheres, lights) in search and accumulation order.
    """
    if params is None:
        params = ThreeLightsParams()

    spheres = [SphereConfig(center=SPHERE_CENTER, radius=SPHERE_RADIUS)]
    lights = [
        PointLightConfig(source=RED_LIGHT_POSITION, color=RED, intensity=params.light_intensity),
        PointLightConfig(source=GREEN_LIGHT_POSITION, color=GREEN, intensity=params.light_intensity),
        PointLightConfig(source=BLUE_LIGHT_POSITION, color=BLUE, intensity=params.light_intensity),
    ]
    return spheres, lights


def create_three_lights_scene(
    params: ThreeLightsParams | None = None,
) -> tuple[Scene, RenderSettings]:
    """Create the three-light scene and its render settings.

    Args:
        params: Optional parameter overrides. Defaults to ThreeLightsParams().

    Returns:
        A tuple of (Scene, RenderSettings).

    Raises:
        ValueError: If the image size or field of view is not positive.
    """
    if params is None:
        params = ThreeLightsParams()

    settings = RenderSettings(
        width=params.width,
        height=params.height,
        fov_degrees=params.fov_degrees,
    )
    spheres, lights = three_lights_configs(params)
    return Scene(spheres=spheres, lights=lights), settings
