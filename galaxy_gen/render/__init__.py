"""Rendering system for 2D and 3D point-cloud display."""

from galaxy_gen.render.base import PointsMaterial, Renderer
from galaxy_gen.render.renderer_2d import Renderer2D
from galaxy_gen.render.renderer_3d import Renderer3D
from galaxy_gen.render.manager import RenderManager

__all__ = ["PointsMaterial", "Renderer", "Renderer2D", "Renderer3D", "RenderManager"]
