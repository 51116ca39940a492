"""3D point-cloud renderer using matplotlib."""

import numpy as np
import matplotlib.pyplot as plt
from typing import Tuple
from galaxy_gen.render.base import MatplotlibRenderer, rotate_y, ROTATION_SPEED


class Renderer3D(MatplotlibRenderer):
    """3D real-time renderer using matplotlib 3D.

    World y is the galaxy's vertical axis; it is drawn on matplotlib's z axis.
    """
    
    def __init__(
        self,
        figsize: Tuple[float, float] = (10, 10),
        dpi: int = 100,
        show_window: bool = True,
        point_scale: float = 100.0,
        elevation: float = 35.0,
        azimuth: float = 45.0,
        rotate: bool = True
    ):
        """Initialize 3D renderer.
        
        Args:
            figsize: Figure size
            dpi: Dots per inch
            show_window: Open an interactive window on first render
            point_scale: Points per world unit used to size markers
            elevation: Camera elevation angle
            azimuth: Camera azimuth angle
            rotate: Slowly turn the galaxy about its vertical axis
        """
        super().__init__(figsize=figsize, dpi=dpi, show_window=show_window, point_scale=point_scale)
        self.elevation = elevation
        self.azimuth = azimuth
        self.rotate = rotate
    
    def _initialize(self):
        """Initialize plot if not already done."""
        if not self.initialized:
            self.fig = plt.figure(figsize=self.figsize, dpi=self.dpi * self.pixel_ratio)
            self.ax = self.fig.add_subplot(111, projection='3d')
            self.fig.patch.set_facecolor('black')
            self._style_axes()
            self._show()
            self.initialized = True
    
    def _style_axes(self):
        self.ax.set_facecolor('black')
        self.ax.set_axis_off()
        extent = self._extent()
        self.ax.set_xlim(-extent, extent)
        self.ax.set_ylim(-extent, extent)
        self.ax.set_zlim(-extent, extent)
        self.ax.view_init(elev=self.elevation, azim=self.azimuth)
    
    def render(self, elapsed: float = 0.0):
        """Render current frame."""
        # Check if figure was closed - if so, stop rendering
        if self.initialized and not self.is_open():
            return
        self._initialize()
        
        particles = self._current
        if particles is None:
            plt.draw()
            return
        
        angle = elapsed * ROTATION_SPEED if self.rotate else 0.0
        positions = rotate_y(particles.positions, angle)
        
        if self.scatter is None:
            self._style_axes()
            self.scatter = self.ax.scatter(
                positions[:, 0], positions[:, 2], positions[:, 1],
                c=particles.colors if self.material.vertex_colors else 'white',
                s=self._marker_size(),
                alpha=self.material.alpha,
                edgecolors='none',
                depthshade=self.material.depth_write
            )
        else:
            self.scatter._offsets3d = (positions[:, 0], positions[:, 2], positions[:, 1])
        
        if self.show_window:
            plt.draw()
            plt.pause(0.001)
