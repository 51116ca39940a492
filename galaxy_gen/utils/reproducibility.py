"""Reproducibility utilities for seeded generation."""

import random
import numpy as np
from typing import Optional
from galaxy_gen.backends.base import Backend


def set_all_seeds(seed: int, backend: Optional[Backend] = None):
    """Set random seeds for reproducibility.
    
    The generator itself draws from a per-call ``default_rng(seed)``; this
    covers the global generators used elsewhere (e.g. matplotlib jitter,
    torch kernels).
    
    Args:
        seed: Random seed
        backend: Optional backend to set seed for
    """
    random.seed(seed)
    np.random.seed(seed)
    
    if backend is not None:
        backend.set_seed(seed)
