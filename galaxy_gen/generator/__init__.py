"""Point-cloud generators."""

from galaxy_gen.generator.base import Generator
from galaxy_gen.generator.particle_set import ParticleSet
from galaxy_gen.generator.spiral import SpiralGalaxyGenerator

__all__ = ["Generator", "ParticleSet", "SpiralGalaxyGenerator"]
