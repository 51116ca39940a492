"""Backend factory for creating and managing compute backends."""

from typing import List, Optional
from galaxy_gen.backends.base import Backend
from galaxy_gen.backends.numpy_backend import NumPyBackend
from galaxy_gen.backends.pytorch_backend import TORCH_AVAILABLE, PyTorchBackend


def list_available_backends() -> List[str]:
    """List all available backends.
    
    Returns:
        List of backend names that can be instantiated
    """
    backends = ["numpy"]  # Always available
    
    if TORCH_AVAILABLE:
        backends.append("pytorch")
    
    return backends


def get_backend(name: Optional[str] = None, prefer_gpu: bool = False) -> Backend:
    """Get a backend instance.
    
    Args:
        name: Backend name ('numpy', 'pytorch'). If None, auto-selects.
        prefer_gpu: If True and name is None, prefer PyTorch over NumPy.
        
    Returns:
        Backend instance
        
    Raises:
        ValueError: If requested backend is not available
    """
    if name is None:
        if prefer_gpu and TORCH_AVAILABLE:
            return PyTorchBackend()
        return NumPyBackend()
    
    name_lower = name.lower()
    
    if name_lower == "numpy":
        return NumPyBackend()
    elif name_lower == "pytorch":
        if not TORCH_AVAILABLE:
            raise ValueError("PyTorch backend not available. Install with: pip install torch")
        return PyTorchBackend()
    else:
        available = list_available_backends()
        raise ValueError(f"Unknown backend '{name}'. Available: {available}")
