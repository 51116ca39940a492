"""Spiral galaxy generator."""

import logging
import time
import warnings
from typing import Optional

import numpy as np

from galaxy_gen.backends.base import Backend
from galaxy_gen.generator.base import Generator
from galaxy_gen.generator.particle_set import ParticleSet
from galaxy_gen.generator.utils import (
    populated_count,
    sample_radii,
    branch_angles,
    scatter_offsets,
    spiral_positions,
    lerp_colors,
)
from galaxy_gen.params import GalaxyParameters

logger = logging.getLogger(__name__)

# Above this many particles interactive regeneration becomes sluggish
LARGE_PARTICLE_COUNT = 1_000_000


class SpiralGalaxyGenerator(Generator):
    """Point-cloud spiral galaxy with scattered arms and a radial color gradient."""

    @property
    def name(self) -> str:
        return "spiral"

    def generate(self, params: GalaxyParameters, seed: Optional[int] = None) -> ParticleSet:
        """Generate positions and colors for every particle.

        Parameters are validated before any random draw, so an invalid
        snapshot never yields a partial set.

        Args:
            params: Parameter snapshot
            seed: Random seed; fresh entropy is used when None

        Returns:
            New ParticleSet with ``params.particle_count`` rows

        Raises:
            ParameterError: If params are outside their domain
        """
        params.validate()
        if params.particle_count > LARGE_PARTICLE_COUNT:
            warnings.warn(
                f"particle_count={params.particle_count} may make regeneration slow.",
                UserWarning
            )

        start = time.perf_counter()
        n_total = params.particle_count
        n = populated_count(n_total)

        # Use numpy RNG for proper random number generation
        rng = np.random.default_rng(seed)
        backend = self.backend

        positions = np.zeros((n_total, 3), dtype=np.float32)
        colors = np.zeros((n_total, 3), dtype=np.float32)

        if n > 0:
            radii_np = sample_radii(n, params.radius, rng)
            radii = backend.array(radii_np)
            angles = backend.array(branch_angles(n, params.branch_count))
            offsets = scatter_offsets(radii, params.randomness, params.randomness_power, rng, backend)

            pos = spiral_positions(radii, angles, params.spin, offsets, backend)
            t = backend.array(radii_np / params.radius)
            col = lerp_colors(params.inside_rgb, params.outside_rgb, t, backend)

            positions[:n] = backend.to_numpy(pos)
            colors[:n] = backend.to_numpy(col)

        logger.debug(
            "Generated %d particles (%d populated) on %s in %.1f ms",
            n_total, n, backend.name, (time.perf_counter() - start) * 1000.0
        )
        return ParticleSet(
            positions=positions,
            colors=colors,
            particle_size=float(params.particle_size),
            parameters=params.replace(),
            seed=seed,
        )
