"""PyTorch backend implementation (optional, GPU support)."""

from typing import Any
import numpy as np
from galaxy_gen.backends.base import Backend

try:
    import torch
    TORCH_AVAILABLE = True
except ImportError:
    TORCH_AVAILABLE = False


class PyTorchBackend(Backend):
    """PyTorch-based backend with GPU support."""
    
    def __init__(self, device: str = None):
        """Initialize PyTorch backend.
        
        Args:
            device: Device string (e.g., 'cpu', 'cuda:0'). Auto-selects if None.
        """
        if not TORCH_AVAILABLE:
            raise ImportError("PyTorch not available. Install with: pip install torch")
        
        if device is None:
            self._device = torch.device('cuda' if torch.cuda.is_available() else 'cpu')
        else:
            self._device = torch.device(device)
        
        self._seed = None
    
    @property
    def name(self) -> str:
        return "pytorch"
    
    @property
    def device(self) -> str:
        return str(self._device)
    
    def _as_tensor(self, value: Any) -> Any:
        if isinstance(value, torch.Tensor):
            return value
        return self.array(value)
    
    def array(self, data: Any, dtype=None) -> Any:
        if isinstance(data, np.ndarray):
            tensor = torch.from_numpy(np.ascontiguousarray(data))
            if dtype is not None:
                tensor = tensor.to(dtype)
        else:
            tensor = torch.tensor(data, dtype=dtype or torch.float64)
        return tensor.to(self._device)
    
    def add(self, a: Any, b: Any) -> Any:
        return torch.add(self._as_tensor(a), b)
    
    def subtract(self, a: Any, b: Any) -> Any:
        return torch.subtract(self._as_tensor(a), b)
    
    def multiply(self, a: Any, b: Any) -> Any:
        return torch.multiply(self._as_tensor(a), b)
    
    def power(self, base: Any, exponent: Any) -> Any:
        return torch.pow(self._as_tensor(base), exponent)
    
    def sin(self, array: Any) -> Any:
        return torch.sin(self._as_tensor(array))

    def cos(self, array: Any) -> Any:
        return torch.cos(self._as_tensor(array))

    def stack(self, arrays, axis: int = 0) -> Any:
        return torch.stack([self._as_tensor(a) for a in arrays], dim=axis)

    def expand_dims(self, array: Any, axis: int) -> Any:
        return torch.unsqueeze(self._as_tensor(array), dim=axis)

    def to_numpy(self, array: Any) -> np.ndarray:
        if isinstance(array, torch.Tensor):
            return array.cpu().numpy()
        return np.asarray(array)
    
    def set_seed(self, seed: int) -> None:
        self._seed = seed
        torch.manual_seed(seed)
        if torch.cuda.is_available():
            torch.cuda.manual_seed_all(seed)
