"""Render manager for switching between 2D and 3D modes."""

import logging
import time
from typing import Optional, Literal
import numpy as np
from galaxy_gen.generator.particle_set import ParticleSet
from galaxy_gen.render.base import Renderer
from galaxy_gen.render.renderer_2d import Renderer2D
from galaxy_gen.render.renderer_3d import Renderer3D

logger = logging.getLogger(__name__)


class RenderManager:
    """Manages rendering, mode switching and the attached particle set."""
    
    def __init__(self, mode: Literal["2d", "3d"] = "3d", **renderer_kwargs):
        """Initialize render manager.
        
        Args:
            mode: Rendering mode ('2d' or '3d')
            **renderer_kwargs: Additional arguments for renderer
        """
        self.mode = mode
        self.renderer: Optional[Renderer] = None
        self.renderer_kwargs = renderer_kwargs
        self._start_time = time.perf_counter()
        self._create_renderer()
    
    def _create_renderer(self):
        """Create appropriate renderer based on mode, carrying over the attached set."""
        current = None
        if self.renderer is not None:
            current = self.renderer.current
            self.renderer.close()
        
        if self.mode == "2d":
            self.renderer = Renderer2D(**self.renderer_kwargs)
        elif self.mode == "3d":
            self.renderer = Renderer3D(**self.renderer_kwargs)
        else:
            raise ValueError(f"Unknown mode: {self.mode}")
        
        if current is not None:
            self.renderer.replace(None, current)
    
    def set_mode(self, mode: Literal["2d", "3d"]):
        """Switch rendering mode.
        
        Args:
            mode: New mode ('2d' or '3d')
        """
        if mode != self.mode:
            self.mode = mode
            self._create_renderer()
    
    @property
    def current(self) -> Optional[ParticleSet]:
        if self.renderer is None:
            return None
        return self.renderer.current
    
    def replace(self, old: Optional[ParticleSet], new: Optional[ParticleSet]):
        """Swap the displayed particle set (see Renderer.replace)."""
        if self.renderer is None:
            raise RuntimeError("Renderer not initialized")
        self.renderer.replace(old, new)
    
    def elapsed(self) -> float:
        """Seconds since the manager was created."""
        return time.perf_counter() - self._start_time
    
    def render(self, elapsed: Optional[float] = None):
        """Render current frame."""
        if self.renderer is None:
            raise RuntimeError("Renderer not initialized")
        self.renderer.render(self.elapsed() if elapsed is None else elapsed)
    
    def run(self, frames: Optional[int] = None):
        """Render repeatedly until ``frames`` are drawn or the window closes.
        
        Args:
            frames: Number of frames to draw; None runs until the window is closed
        """
        if self.renderer is None:
            raise RuntimeError("Renderer not initialized")
        count = 0
        self.render()
        while frames is None or count < frames:
            if not self.renderer.is_open():
                logger.info("Display closed after %d frames", count)
                break
            self.render()
            count += 1
    
    def resize(self, width: int, height: int, pixel_ratio: float = 1.0):
        """Resize the drawing surface."""
        if self.renderer is None:
            raise RuntimeError("Renderer not initialized")
        self.renderer.resize(width, height, pixel_ratio)
    
    def capture_frame(self) -> np.ndarray:
        """Capture current frame."""
        if self.renderer is None:
            raise RuntimeError("Renderer not initialized")
        return self.renderer.capture_frame()
    
    def close(self):
        """Close renderer and dispose the attached set."""
        if self.renderer is not None:
            current = self.renderer.current
            self.renderer.close()
            self.renderer = None
            if current is not None:
                current.dispose()
