"""Scene module for scene storage and configuration.

Components:
    config: Host-side parameter dataclasses (spheres, lights, render settings)
    scene: Device-side scene storage with nearest-hit search and shading
    three_lights: Factory for the fixed sphere-and-three-lights scene

Example:
    >>> from raycaster.scene import create_three_lights_scene
    >>> scene, settings = create_three_lights_scene()
"""

from .config import PointLightConfig, RenderSettings, SphereConfig
from .scene import Scene, SceneHit
from .three_lights import ThreeLightsParams, create_three_lights_scene

__all__ = [
    "SphereConfig",
    "PointLightConfig",
    "RenderSettings",
    "Scene",
    "SceneHit",
    "ThreeLightsParams",
    "create_three_lights_scene",
]
