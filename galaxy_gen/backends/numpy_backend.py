"""NumPy backend implementation."""

from typing import Any
import numpy as np
from galaxy_gen.backends.base import Backend


class NumPyBackend(Backend):
    """NumPy-based backend (baseline, always available)."""
    
    def __init__(self):
        self._seed = None
    
    @property
    def name(self) -> str:
        return "numpy"
    
    @property
    def device(self) -> str:
        return "cpu"
    
    def array(self, data: Any, dtype=None) -> np.ndarray:
        return np.array(data, dtype=dtype)
    
    def add(self, a: Any, b: Any) -> np.ndarray:
        return np.add(a, b)
    
    def subtract(self, a: Any, b: Any) -> np.ndarray:
        return np.subtract(a, b)
    
    def multiply(self, a: Any, b: Any) -> np.ndarray:
        return np.multiply(a, b)
    
    def power(self, base: Any, exponent: Any) -> np.ndarray:
        return np.power(base, exponent)
    
    def sin(self, array: Any) -> np.ndarray:
        return np.sin(array)

    def cos(self, array: Any) -> np.ndarray:
        return np.cos(array)

    def stack(self, arrays, axis: int = 0) -> np.ndarray:
        return np.stack(arrays, axis=axis)

    def expand_dims(self, array: Any, axis: int) -> np.ndarray:
        return np.expand_dims(array, axis=axis)

    def to_numpy(self, array: Any) -> np.ndarray:
        return np.asarray(array)
    
    def set_seed(self, seed: int) -> None:
        self._seed = seed
        np.random.seed(seed)
