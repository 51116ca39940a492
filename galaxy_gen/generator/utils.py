"""Utility functions for spiral galaxy generation."""

import numpy as np
from typing import Any, Sequence
from galaxy_gen.backends.base import Backend


def populated_count(particle_count: int) -> int:
    """Number of leading slots that receive a generated particle.

    The final two slots of every buffer are left at zero.
    """
    return max(particle_count - 2, 0)


def sample_radii(n: int, radius: float, rng: np.random.Generator) -> np.ndarray:
    """Sample particle radii linearly in [0, radius).

    r_i = R * U(0, 1)

    Linear sampling (not area-weighted) concentrates particles near the core.

    Args:
        n: Number of particles
        radius: Galaxy radius R
        rng: NumPy random generator

    Returns:
        (n,) radii
    """
    return radius * rng.random(n)


def branch_angles(n: int, branch_count: int) -> np.ndarray:
    """Base angle of the arm each particle belongs to.

    θ_branch(i) = (i mod B) / B * 2π

    Args:
        n: Number of particles
        branch_count: Number of spiral arms B

    Returns:
        (n,) angles in radians
    """
    indices = np.arange(n)
    return (indices % branch_count) / branch_count * 2 * np.pi


def scatter_offsets(
    radii: Any,
    randomness: float,
    randomness_power: float,
    rng: np.random.Generator,
    backend: Backend
) -> Any:
    """Signed random offsets added to each particle's spiral position.

    offset = ±1 * U(0, 1)^p * randomness * r_i, sign and magnitude drawn
    independently per axis.

    Higher powers push most offsets toward zero and leave a few large outliers.

    Args:
        radii: (n,) backend array of particle radii
        randomness: Scatter scale
        randomness_power: Falloff exponent p
        rng: NumPy random generator
        backend: Compute backend

    Returns:
        (n, 3) backend array of (x, y, z) offsets
    """
    n = radii.shape[0]
    magnitudes = rng.random((n, 3))
    signs = np.where(rng.random((n, 3)) < 0.5, 1.0, -1.0)

    scaled = backend.power(backend.array(magnitudes), randomness_power)
    scaled = backend.multiply(scaled, backend.array(signs))
    scaled = backend.multiply(scaled, randomness)
    return backend.multiply(scaled, backend.expand_dims(radii, 1))


def spiral_positions(
    radii: Any,
    base_angles: Any,
    spin: float,
    offsets: Any,
    backend: Backend
) -> Any:
    """Place particles on their spiral arm in the x/z plane, then scatter.

    x = cos(θ_branch + r * spin) * r + off_x
    y = off_y
    z = sin(θ_branch + r * spin) * r + off_z

    Args:
        radii: (n,) backend array of radii
        base_angles: (n,) backend array of branch angles
        spin: Angular twist per unit radius
        offsets: (n, 3) backend array of scatter offsets
        backend: Compute backend

    Returns:
        (n, 3) backend array of positions
    """
    angle = backend.add(base_angles, backend.multiply(radii, spin))
    x = backend.multiply(backend.cos(angle), radii)
    z = backend.multiply(backend.sin(angle), radii)
    y = backend.multiply(radii, 0.0)
    return backend.add(backend.stack([x, y, z], axis=1), offsets)


def lerp_colors(
    inside: Sequence[float],
    outside: Sequence[float],
    t: Any,
    backend: Backend
) -> Any:
    """Linearly interpolate between two RGB colors.

    c(t) = inside * (1 - t) + outside * t

    Written in this form so t = 0 and t = 1 return the endpoints exactly.

    Args:
        inside: RGB color at t = 0
        outside: RGB color at t = 1
        t: (n,) backend array of interpolation factors in [0, 1]
        backend: Compute backend

    Returns:
        (n, 3) backend array of RGB colors
    """
    t_col = backend.expand_dims(t, 1)
    inside_arr = backend.expand_dims(backend.array(np.asarray(inside, dtype=np.float64)), 0)
    outside_arr = backend.expand_dims(backend.array(np.asarray(outside, dtype=np.float64)), 0)
    weight_in = backend.subtract(1.0, t_col)
    return backend.add(
        backend.multiply(inside_arr, weight_in),
        backend.multiply(outside_arr, t_col),
    )
