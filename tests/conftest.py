"""Pytest configuration for raycaster tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls, which would
    invalidate fields created by earlier tests.
    """
    from raycaster.core.runtime import init_runtime

    init_runtime(arch=ti.cpu)
    yield


@pytest.fixture(scope="session")
def three_lights_pixels():
    """Render the fixed three-light scene once and share the buffer."""
    from raycaster.core.render import render_scene
    from raycaster.scene.three_lights import create_three_lights_scene

    scene, settings = create_three_lights_scene()
    return render_scene(scene, settings), settings
