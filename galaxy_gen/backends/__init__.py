"""Compute backend abstractions for galaxy generation."""

from galaxy_gen.backends.base import Backend
from galaxy_gen.backends.factory import get_backend, list_available_backends

__all__ = ["Backend", "get_backend", "list_available_backends"]
