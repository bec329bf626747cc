"""3D vector algebra for the ray caster.

Vectors are Taichi ``vec3`` values with double precision components. They
are immutable from the caller's point of view: every operation returns a
new vector.

The functions are thin, explicit wrappers so that the rest of the package
reads in terms of the algebra it implements (add, sub, dot, scale, length,
normalize) rather than operator overloads.

Example:
    >>> import taichi as ti
    >>> from raycaster.core.runtime import init_runtime
    >>> init_runtime()
    >>> @ti.kernel
    ... def unit_x() -> ti.f64:
    ...     return length(normalize(vec3(3.0, 0.0, 0.0)))
"""

import taichi as ti

# Double precision 3D vector type
vec3 = ti.types.vector(3, ti.f64)


@ti.func
def add(a: vec3, b: vec3) -> vec3:
    """Component-wise sum a + b."""
    return vec3(a.x + b.x, a.y + b.y, a.z + b.z)


@ti.func
def sub(a: vec3, b: vec3) -> vec3:
    """Component-wise difference a - b."""
    return vec3(a.x - b.x, a.y - b.y, a.z - b.z)


@ti.func
def dot(a: vec3, b: vec3) -> ti.f64:
    """Compute the dot product of two vectors.

    Args:
        a: First vector.
        b: Second vector.

    Returns:
        The scalar a . b.
    """
    return a.x * b.x + a.y * b.y + a.z * b.z


@ti.func
def scale(k: ti.f64, a: vec3) -> vec3:
    """Multiply every component of a by the scalar k."""
    return vec3(k * a.x, k * a.y, k * a.z)


@ti.func
def length(a: vec3) -> ti.f64:
    """Euclidean length sqrt(x^2 + y^2 + z^2)."""
    return ti.sqrt(a.x * a.x + a.y * a.y + a.z * a.z)


@ti.func
def normalize(a: vec3) -> vec3:
    """Scale a vector to unit length.

    The vector must have non-zero length. A zero vector divides by zero
    and yields inf/NaN components, which propagate through any further
    arithmetic.

    Args:
        a: The input vector.

    Returns:
        scale(1 / length(a), a).
    """
    return scale(1.0 / length(a), a)
