"""Tests for renderers and particle-set replacement."""

import numpy as np
import pytest
from galaxy_gen.backends.numpy_backend import NumPyBackend
from galaxy_gen.exceptions import DisposalError
from galaxy_gen.generator.spiral import SpiralGalaxyGenerator
from galaxy_gen.params import GalaxyParameters
from galaxy_gen.render import PointsMaterial, Renderer2D, Renderer3D, RenderManager
from galaxy_gen.render.base import rotate_y


def _particles(count=200, seed=0):
    generator = SpiralGalaxyGenerator(NumPyBackend())
    return generator.generate(GalaxyParameters(particle_count=count), seed=seed)


@pytest.fixture
def renderer():
    r = Renderer3D(figsize=(2, 2), dpi=50, show_window=False)
    yield r
    r.close()


def test_replace_attaches_and_disposes(renderer):
    """Test that replace() releases the old set before attaching the new one."""
    first = _particles(seed=1)
    second = _particles(seed=2)

    renderer.replace(None, first)
    assert renderer.current is first
    renderer.render(0.0)

    renderer.replace(first, second)
    assert renderer.current is second
    assert first.disposed
    assert not second.disposed
    renderer.render(1.0)


@pytest.mark.parametrize("renderer_class", [Renderer2D, Renderer3D])
def test_replace_leaves_one_drawable(renderer_class):
    """Test that only the new set is drawn after a replacement."""
    renderer = renderer_class(figsize=(2, 2), dpi=50, show_window=False)
    first = _particles(seed=1)
    second = _particles(seed=2)

    renderer.replace(None, first)
    renderer.render(0.0)
    assert len(renderer.ax.collections) == 1

    renderer.replace(first, second)
    renderer.render(1.0)
    assert len(renderer.ax.collections) == 1
    assert renderer.ax.collections[0] is renderer.scatter
    renderer.close()


def test_replace_sets_points_material(renderer):
    """Test the material handed to the display."""
    particles = _particles()
    renderer.replace(None, particles)

    material = renderer.material
    assert material.size == pytest.approx(GalaxyParameters().particle_size)
    assert material.blending == "additive"
    assert material.depth_write is False
    assert material.vertex_colors is True
    assert PointsMaterial(blending="normal").alpha == 1.0


def test_replace_rejects_unattached_old(renderer):
    """Test that replace() refuses a set it does not display."""
    renderer.replace(None, _particles(seed=1))
    with pytest.raises(RuntimeError):
        renderer.replace(_particles(seed=2), _particles(seed=3))


def test_replace_rejects_disposed_new(renderer):
    """Test that a disposed set cannot be attached again."""
    particles = _particles()
    particles.dispose()
    with pytest.raises(RuntimeError):
        renderer.replace(None, particles)


def test_disposal_failure_is_fatal():
    """Test that a failing release raises DisposalError and leaves nothing attached."""
    class FailingRenderer(Renderer2D):
        def _release(self, particles):
            raise OSError("device lost")

    renderer = FailingRenderer(figsize=(2, 2), dpi=50, show_window=False)
    first = _particles(seed=1)
    renderer.replace(None, first)

    with pytest.raises(DisposalError):
        renderer.replace(first, _particles(seed=2))
    assert renderer.current is None
    renderer.close()


@pytest.mark.parametrize("renderer_class", [Renderer2D, Renderer3D])
def test_capture_frame(renderer_class):
    """Test capturing an RGB frame."""
    renderer = renderer_class(figsize=(2, 2), dpi=50, show_window=False)
    renderer.replace(None, _particles())
    renderer.render(0.0)
    renderer.render(10.0)

    frame = renderer.capture_frame()
    assert frame.shape == (100, 100, 3)
    assert frame.dtype == np.uint8
    renderer.close()


def test_capture_before_render_fails(renderer):
    """Test that there is no frame before the first render."""
    with pytest.raises(RuntimeError):
        renderer.capture_frame()


def test_resize_caps_pixel_ratio(renderer):
    """Test viewport resize with a high-density display."""
    renderer.resize(200, 100, pixel_ratio=3.0)
    assert renderer.pixel_ratio == 2.0
    assert renderer.figsize == (4.0, 2.0)

    renderer.replace(None, _particles())
    renderer.render(0.0)
    frame = renderer.capture_frame()
    assert frame.shape == (200, 400, 3)


def test_rotate_y():
    """Test rotation about the vertical axis."""
    positions = np.array([[1.0, 2.0, 0.0], [0.0, -1.0, 1.0]])

    rotated = rotate_y(positions, np.pi / 2)

    assert np.allclose(rotated, [[0.0, 2.0, -1.0], [1.0, -1.0, 0.0]])
    assert rotate_y(positions, 0.0) is positions


def test_manager_mode_switch_keeps_set():
    """Test that switching 2D/3D keeps the attached galaxy."""
    manager = RenderManager(mode="3d", figsize=(2, 2), dpi=50, show_window=False)
    particles = _particles()
    manager.replace(None, particles)
    manager.render(0.0)

    manager.set_mode("2d")

    assert isinstance(manager.renderer, Renderer2D)
    assert manager.current is particles
    assert not particles.disposed
    manager.render(0.0)
    assert manager.capture_frame().shape == (100, 100, 3)

    manager.close()
    assert particles.disposed


def test_manager_run_frames():
    """Test a bounded render loop."""
    manager = RenderManager(mode="2d", figsize=(2, 2), dpi=50, show_window=False)
    manager.replace(None, _particles())
    manager.run(frames=3)
    assert manager.renderer.is_open()
    manager.close()


def test_manager_unknown_mode():
    """Test that unknown modes are rejected."""
    with pytest.raises(ValueError):
        RenderManager(mode="4d")
