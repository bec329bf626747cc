"""Taichi runtime initialization.

Every vector in the package is double precision, so the runtime is
initialized with ``default_fp=ti.f64`` to keep literals and intermediate
values in the same precision. Fast math is disabled: the render loop
relies on IEEE NaN semantics to drop degenerate hits.
"""

import taichi as ti


def init_runtime(arch=ti.cpu, **kwargs) -> None:
    """Initialize Taichi for rendering.

    Must be called once before any Scene or Renderer is created.

    Args:
        arch: Taichi backend (default ``ti.cpu``). The backend must
            support 64-bit floats.
        **kwargs: Extra keyword arguments forwarded to ``ti.init``.
    """
    ti.init(arch=arch, default_fp=ti.f64, fast_math=False, **kwargs)
