"""Shared pytest configuration."""

import matplotlib

# Renderers draw into off-screen figures during tests
matplotlib.use("Agg")
