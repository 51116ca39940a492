"""Tests for compute backends."""

import pytest
import numpy as np
from galaxy_gen.backends.factory import get_backend, list_available_backends
from galaxy_gen.backends.numpy_backend import NumPyBackend
from galaxy_gen.generator.spiral import SpiralGalaxyGenerator
from galaxy_gen.params import GalaxyParameters


def test_numpy_backend_basic():
    """Test basic NumPy backend operations."""
    backend = NumPyBackend()
    
    arr = backend.array([1, 2, 3])
    assert backend.to_numpy(arr).shape == (3,)
    
    a = backend.array([1.0, 2.0, 3.0])
    b = backend.array([4.0, 5.0, 6.0])
    
    assert np.allclose(backend.to_numpy(backend.add(a, b)), [5, 7, 9])
    assert np.allclose(backend.to_numpy(backend.subtract(1.0, a)), [0, -1, -2])
    assert np.allclose(backend.to_numpy(backend.multiply(a, b)), [4, 10, 18])
    assert np.allclose(backend.to_numpy(backend.power(a, 2)), [1, 4, 9])
    assert np.allclose(backend.to_numpy(backend.cos(backend.array([0.0]))), [1.0])
    assert np.allclose(backend.to_numpy(backend.sin(backend.array([0.0]))), [0.0])
    assert backend.to_numpy(backend.stack([a, b], axis=1)).shape == (3, 2)
    assert backend.to_numpy(backend.expand_dims(a, 1)).shape == (3, 1)


def test_backend_factory():
    """Test backend factory."""
    backends = list_available_backends()
    assert "numpy" in backends
    
    backend = get_backend("numpy")
    assert backend.name == "numpy"
    assert backend.device == "cpu"
    
    # Auto-select should work
    backend = get_backend()
    assert backend is not None


def test_unknown_backend():
    """Test that unknown backend names are rejected."""
    with pytest.raises(ValueError):
        get_backend("fortran")


def test_pytorch_backend_matches_numpy():
    """Test that the PyTorch backend produces the same galaxy for a seed."""
    pytest.importorskip("torch")
    from galaxy_gen.backends.pytorch_backend import PyTorchBackend
    
    params = GalaxyParameters(particle_count=500)
    expected = SpiralGalaxyGenerator(NumPyBackend()).generate(params, seed=3)
    actual = SpiralGalaxyGenerator(PyTorchBackend(device="cpu")).generate(params, seed=3)
    
    assert np.allclose(actual.positions, expected.positions, atol=1e-5)
    assert np.allclose(actual.colors, expected.colors, atol=1e-6)
