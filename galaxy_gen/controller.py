"""Glue between parameter edits, the generator and the display."""

import logging
from typing import Optional

from galaxy_gen.exceptions import ParameterError
from galaxy_gen.generator.base import Generator
from galaxy_gen.generator.particle_set import ParticleSet
from galaxy_gen.io.snapshot import save_snapshot, DEFAULT_SNAPSHOT_NAME
from galaxy_gen.params import GalaxyParameters

logger = logging.getLogger(__name__)


class GalaxyController:
    """Owns the editable parameters and regenerates the galaxy on commit.

    Intermediate edits are staged with update(); commit() validates the
    staged snapshot, generates a new set and swaps it into the display.
    """

    def __init__(
        self,
        generator: Generator,
        renderer,
        parameters: Optional[GalaxyParameters] = None,
        seed: Optional[int] = None
    ):
        """Initialize controller.

        Args:
            generator: Generator used on every commit
            renderer: Renderer or RenderManager exposing replace()/current
            parameters: Initial parameters (defaults if None)
            seed: Seed for the first commit; later commits draw fresh entropy
        """
        self.generator = generator
        self.renderer = renderer
        self.parameters = parameters or GalaxyParameters()
        self.seed = seed
        self.generation_count = 0
        self._committing = False

    @property
    def particles(self) -> Optional[ParticleSet]:
        """The particle set currently on display."""
        return self.renderer.current

    def update(self, **changes):
        """Stage parameter changes without regenerating."""
        self.parameters = self.parameters.replace(**changes)

    def commit(self, parameters: Optional[GalaxyParameters] = None) -> ParticleSet:
        """Generate from the staged (or given) parameters and display the result.

        Args:
            parameters: Full snapshot to commit; the staged one if None

        Returns:
            The newly attached ParticleSet

        Raises:
            ParameterError: If the snapshot is invalid; the displayed set is kept
            RuntimeError: If called while another commit is in progress
        """
        if self._committing:
            raise RuntimeError("A galaxy generation is already in progress")
        if parameters is None:
            parameters = self.parameters

        self._committing = True
        try:
            try:
                particles = self.generator.generate(parameters, seed=self.seed)
            except ParameterError as exc:
                logger.warning("Rejected parameters: %s", exc)
                raise
            # Only a snapshot that generated becomes the staged state
            self.parameters = parameters
            self.seed = None
            self.renderer.replace(self.renderer.current, particles)
            self.generation_count += 1
            logger.info(
                "Generated galaxy #%d: %d particles, %d branches",
                self.generation_count,
                self.parameters.particle_count,
                self.parameters.branch_count,
            )
            return particles
        finally:
            self._committing = False

    def snapshot(self, output_path: str = DEFAULT_SNAPSHOT_NAME):
        """Render the current frame and save it as an image."""
        self.renderer.render()
        return save_snapshot(self.renderer.capture_frame(), output_path)
