"""2D top-down renderer using matplotlib."""

import matplotlib.pyplot as plt
from galaxy_gen.render.base import MatplotlibRenderer, rotate_y, ROTATION_SPEED


class Renderer2D(MatplotlibRenderer):
    """Face-on view of the galactic plane (world x horizontal, world z vertical)."""
    
    def _initialize(self):
        """Initialize plot if not already done."""
        if not self.initialized:
            self.fig, self.ax = plt.subplots(figsize=self.figsize, dpi=self.dpi * self.pixel_ratio)
            self.fig.patch.set_facecolor('black')
            self._style_axes()
            self._show()
            self.initialized = True
    
    def _style_axes(self):
        self.ax.set_facecolor('black')
        self.ax.set_aspect('equal')
        self.ax.set_axis_off()
        extent = self._extent()
        self.ax.set_xlim(-extent, extent)
        self.ax.set_ylim(-extent, extent)
    
    def render(self, elapsed: float = 0.0):
        """Render current frame."""
        if self.initialized and not self.is_open():
            return
        self._initialize()
        
        particles = self._current
        if particles is None:
            plt.draw()
            return
        
        positions = rotate_y(particles.positions, elapsed * ROTATION_SPEED)
        pos_2d = positions[:, [0, 2]]
        
        if self.scatter is None:
            self._style_axes()
            self.scatter = self.ax.scatter(
                pos_2d[:, 0], pos_2d[:, 1],
                c=particles.colors if self.material.vertex_colors else 'white',
                s=self._marker_size(),
                alpha=self.material.alpha,
                edgecolors='none'
            )
        else:
            self.scatter.set_offsets(pos_2d)
        
        if self.show_window:
            plt.draw()
            plt.pause(0.001)
