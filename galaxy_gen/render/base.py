"""Base renderer interface and particle-set lifecycle."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from galaxy_gen.exceptions import DisposalError
from galaxy_gen.generator.particle_set import ParticleSet

logger = logging.getLogger(__name__)

# Radians per second of slow turntable rotation about the vertical axis
ROTATION_SPEED = 0.01


@dataclass
class PointsMaterial:
    """Draw settings for a point-cloud drawable."""
    size: float = 0.01
    size_attenuation: bool = True
    depth_write: bool = False
    blending: str = "additive"
    vertex_colors: bool = True

    @property
    def alpha(self) -> float:
        # Additive blending is approximated by letting overlapping points accumulate
        return 0.6 if self.blending == "additive" else 1.0


def rotate_y(positions: np.ndarray, angle: float) -> np.ndarray:
    """Rotate (n, 3) positions about the vertical y axis.

    x' =  x cos(a) + z sin(a)
    z' = -x sin(a) + z cos(a)
    """
    if angle == 0.0:
        return positions
    c, s = np.cos(angle), np.sin(angle)
    rotated = positions.copy()
    rotated[:, 0] = positions[:, 0] * c + positions[:, 2] * s
    rotated[:, 2] = -positions[:, 0] * s + positions[:, 2] * c
    return rotated


class Renderer(ABC):
    """Abstract base class for renderers.

    A renderer displays at most one ParticleSet at a time. Sets are swapped
    with replace(), which releases the old set before attaching the new one.
    """

    def __init__(self):
        self._current: Optional[ParticleSet] = None
        self.material: Optional[PointsMaterial] = None

    @property
    def current(self) -> Optional[ParticleSet]:
        """The attached particle set, if any."""
        return self._current

    def replace(self, old: Optional[ParticleSet], new: Optional[ParticleSet]):
        """Detach and dispose ``old``, then attach ``new``.

        Args:
            old: Set currently attached (None when nothing is displayed)
            new: Set to display (None to leave the scene empty)

        Raises:
            RuntimeError: If ``old`` is not the attached set or ``new`` was disposed
            DisposalError: If releasing ``old`` fails; nothing is attached afterwards
        """
        if old is not self._current:
            raise RuntimeError("replace() called with a set that is not attached")
        if new is not None and new.disposed:
            raise RuntimeError("Cannot attach a disposed particle set")

        if old is not None:
            self._current = None
            self.material = None
            try:
                self._release(old)
                old.dispose()
            except Exception as exc:
                raise DisposalError(f"Failed to release particle set: {exc}") from exc

        if new is not None:
            self.material = PointsMaterial(size=new.particle_size)
            self._attach(new)
            self._current = new
            logger.debug("Attached particle set with %d particles", len(new))

    @abstractmethod
    def _attach(self, particles: ParticleSet):
        """Create the drawable for ``particles``."""
        pass

    @abstractmethod
    def _release(self, particles: ParticleSet):
        """Remove the drawable for ``particles`` from the scene."""
        pass

    @abstractmethod
    def render(self, elapsed: float = 0.0):
        """Render current frame.

        Args:
            elapsed: Seconds since the render loop started
        """
        pass

    @abstractmethod
    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array.

        Returns:
            Image array (H, W, 3) uint8
        """
        pass

    @abstractmethod
    def resize(self, width: int, height: int, pixel_ratio: float = 1.0):
        """Resize the drawing surface to a viewport in pixels."""
        pass

    @abstractmethod
    def is_open(self) -> bool:
        """Whether the display surface still exists."""
        pass

    @abstractmethod
    def close(self):
        """Close the renderer."""
        pass


class MatplotlibRenderer(Renderer):
    """Shared figure handling for matplotlib renderers."""

    def __init__(
        self,
        figsize: Tuple[float, float] = (10, 10),
        dpi: int = 100,
        show_window: bool = True,
        point_scale: float = 100.0
    ):
        """Initialize renderer.

        Args:
            figsize: Figure size in inches
            dpi: Base dots per inch (before pixel ratio)
            show_window: Open an interactive window on first render
            point_scale: Points per world unit used to size markers
        """
        super().__init__()
        self.figsize = figsize
        self.dpi = dpi
        self.pixel_ratio = 1.0
        self.show_window = show_window
        self.point_scale = point_scale
        self.fig: Optional[Figure] = None
        self.ax = None
        self.scatter = None
        self.initialized = False

    def _marker_size(self) -> float:
        size = self.material.size if self.material is not None else 0.01
        return max((size * self.point_scale) ** 2, 0.05)

    def _extent(self) -> float:
        """Half-width of the view, from the attached galaxy's radius."""
        particles = self._current
        if particles is None:
            return 1.0
        if particles.parameters is not None:
            return float(particles.parameters.radius) * 1.1
        if len(particles) == 0:
            return 1.0
        return float(np.abs(particles.positions).max()) * 1.1 or 1.0

    def _attach(self, particles: ParticleSet):
        # The drawable is created lazily by the next render()
        self.scatter = None

    def _release(self, particles: ParticleSet):
        if self.scatter is not None:
            self.scatter.remove()
            self.scatter = None

    def _show(self):
        if self.show_window:
            plt.show(block=False)
            plt.pause(0.1)  # Give it time to appear

    def is_open(self) -> bool:
        """Check if the figure window is still open."""
        if self.fig is None:
            return False
        if not plt.fignum_exists(self.fig.number):
            # Reset initialized flag if figure was closed
            self.initialized = False
            self.fig = None
            self.ax = None
            self.scatter = None
            return False
        return True

    def resize(self, width: int, height: int, pixel_ratio: float = 1.0):
        """Resize to a viewport in pixels, capping the pixel ratio at 2."""
        self.pixel_ratio = min(pixel_ratio, 2.0)
        self.figsize = (width / self.dpi, height / self.dpi)
        if self.fig is not None:
            self.fig.set_dpi(self.dpi * self.pixel_ratio)
            self.fig.set_size_inches(*self.figsize, forward=True)

    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")

        self.fig.canvas.draw()
        buf = np.asarray(self.fig.canvas.buffer_rgba())
        return buf[:, :, :3].copy()

    def close(self):
        """Close the renderer, releasing the attached drawable but not the set."""
        if self._current is not None:
            self._release(self._current)
            self._current = None
            self.material = None
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
            self.initialized = False
