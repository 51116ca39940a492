"""Abstract base class for compute backends."""

from abc import ABC, abstractmethod
from typing import Any
import numpy as np


class Backend(ABC):
    """Abstract interface for array computation backends.
    
    Lets the generator run the same vectorized math on different
    execution engines (NumPy, PyTorch) with a unified API.
    """
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this backend."""
        pass
    
    @property
    @abstractmethod
    def device(self) -> str:
        """Return the device type (e.g., 'cpu', 'cuda:0')."""
        pass
    
    @abstractmethod
    def array(self, data: Any, dtype=None) -> Any:
        """Create an array from data.
        
        Args:
            data: Input data (list, numpy array, etc.)
            dtype: Optional data type
            
        Returns:
            Backend array object
        """
        pass
    
    @abstractmethod
    def add(self, a: Any, b: Any) -> Any:
        """Element-wise addition."""
        pass
    
    @abstractmethod
    def subtract(self, a: Any, b: Any) -> Any:
        """Element-wise subtraction."""
        pass
    
    @abstractmethod
    def multiply(self, a: Any, b: Any) -> Any:
        """Element-wise multiplication."""
        pass
    
    @abstractmethod
    def power(self, base: Any, exponent: Any) -> Any:
        """Element-wise power."""
        pass
    
    @abstractmethod
    def sin(self, array: Any) -> Any:
        """Element-wise sine."""
        pass
    
    @abstractmethod
    def cos(self, array: Any) -> Any:
        """Element-wise cosine."""
        pass
    
    @abstractmethod
    def stack(self, arrays, axis: int = 0) -> Any:
        """Stack arrays along a new axis. E.g. stack([x, y, z], axis=1) -> (n, 3)."""
        pass

    @abstractmethod
    def expand_dims(self, array: Any, axis: int) -> Any:
        """Expand the shape by inserting a new axis at axis (e.g. (n,) -> (n, 1))."""
        pass

    @abstractmethod
    def to_numpy(self, array: Any) -> np.ndarray:
        """Convert backend array to NumPy array.
        
        Needed before handing buffers to a renderer.
        """
        pass
    
    @abstractmethod
    def set_seed(self, seed: int) -> None:
        """Set random seed for reproducibility."""
        pass
