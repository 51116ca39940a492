"""I/O utilities for image export."""

from galaxy_gen.io.snapshot import save_snapshot

__all__ = ["save_snapshot"]
