"""Particle buffers produced by a generator."""

from dataclasses import dataclass, field
from typing import Optional
import numpy as np

from galaxy_gen.params import GalaxyParameters


@dataclass(eq=False)
class ParticleSet:
    """Positions and matching colors for one generated galaxy.

    Row ``i`` of ``colors`` is the color of the particle at row ``i`` of
    ``positions``. Both are ``(n, 3)`` float32 arrays.
    """
    positions: np.ndarray
    colors: np.ndarray
    particle_size: float
    parameters: Optional[GalaxyParameters] = None
    seed: Optional[int] = None
    disposed: bool = field(default=False, init=False)

    def __post_init__(self):
        if self.positions.shape != self.colors.shape:
            raise ValueError(
                f"positions {self.positions.shape} and colors {self.colors.shape} must match"
            )
        if self.positions.ndim != 2 or self.positions.shape[1] != 3:
            raise ValueError(f"Expected (n, 3) buffers, got {self.positions.shape}")

    def __len__(self) -> int:
        return self.positions.shape[0]

    def dispose(self):
        """Release the buffers. Safe to call more than once."""
        if self.disposed:
            return
        self.positions = np.empty((0, 3), dtype=np.float32)
        self.colors = np.empty((0, 3), dtype=np.float32)
        self.disposed = True
