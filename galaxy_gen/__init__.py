"""
Galaxy Generator - procedural spiral galaxy point clouds.

Features:
- Vectorized spiral-arm generation on NumPy or PyTorch backends
- Radial inside/outside color gradient
- 2D and 3D matplotlib point-cloud display with safe set replacement
- PNG snapshot export
- CLI and GUI interfaces
"""

__version__ = "0.1.0"

from galaxy_gen.exceptions import ParameterError, DisposalError
from galaxy_gen.params import GalaxyParameters
from galaxy_gen.generator import ParticleSet, SpiralGalaxyGenerator
from galaxy_gen.backends.factory import get_backend, list_available_backends

__all__ = [
    "GalaxyParameters",
    "ParticleSet",
    "SpiralGalaxyGenerator",
    "ParameterError",
    "DisposalError",
    "get_backend",
    "list_available_backends",
]
