"""Base class for galaxy generators."""

from abc import ABC, abstractmethod
from typing import Optional
from galaxy_gen.backends.base import Backend
from galaxy_gen.params import GalaxyParameters
from galaxy_gen.generator.particle_set import ParticleSet


class Generator(ABC):
    """Abstract base class for point-cloud generators."""
    
    def __init__(self, backend: Backend):
        """Initialize generator.
        
        Args:
            backend: Compute backend
        """
        self.backend = backend
    
    @abstractmethod
    def generate(self, params: GalaxyParameters, seed: Optional[int] = None) -> ParticleSet:
        """Generate a fresh particle set.
        
        Args:
            params: Parameter snapshot to generate from
            seed: Random seed; fresh entropy is used when None
        
        Returns:
            New ParticleSet
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this generator."""
        pass
