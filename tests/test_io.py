"""Tests for configuration files and snapshot export."""

import numpy as np
import pytest
from galaxy_gen.io.snapshot import save_snapshot
from galaxy_gen.params import GalaxyParameters
from galaxy_gen.utils.config import Config, load_config, save_config


def test_save_load_json(tmp_path):
    """Test saving and loading a JSON config."""
    config = Config(
        parameters=GalaxyParameters(particle_count=2000, inside_color=(1.0, 0.5, 0.0)),
        seed=7,
        render_mode="2d",
    )
    path = tmp_path / "galaxy.json"
    
    save_config(config, str(path))
    loaded = load_config(str(path))
    
    assert loaded.parameters == config.parameters
    assert loaded.seed == 7
    assert loaded.render_mode == "2d"
    assert loaded.backend is None


def test_save_load_yaml(tmp_path):
    """Test saving and loading a YAML config."""
    pytest.importorskip("yaml")
    config = Config(parameters=GalaxyParameters(branch_count=6, spin=-0.5))
    path = tmp_path / "galaxy.yaml"
    
    save_config(config, str(path))
    loaded = load_config(str(path))
    
    assert loaded.parameters.branch_count == 6
    assert loaded.parameters.spin == -0.5


def test_partial_config_uses_defaults(tmp_path):
    """Test that omitted fields fall back to defaults."""
    path = tmp_path / "partial.json"
    path.write_text('{"parameters": {"radius": 9.5}, "seed": 3}')
    
    loaded = load_config(str(path))
    
    assert loaded.parameters.radius == 9.5
    assert loaded.parameters.particle_count == GalaxyParameters().particle_count
    assert loaded.seed == 3


def test_unsupported_config_format(tmp_path):
    """Test that unknown suffixes are rejected."""
    with pytest.raises(ValueError):
        save_config(Config(), str(tmp_path / "galaxy.toml"))
    with pytest.raises(ValueError):
        load_config(str(tmp_path / "galaxy.ini"))


def test_save_snapshot(tmp_path):
    """Test writing float and uint8 frames."""
    imageio = pytest.importorskip("imageio")
    frame = np.zeros((8, 12, 3), dtype=np.float64)
    frame[:, :6] = 1.0
    
    path = save_snapshot(frame, str(tmp_path / "shot.png"))
    image = imageio.imread(path)
    
    assert image.shape == (8, 12, 3)
    assert image[0, 0, 0] == 255
    assert image[0, 11, 0] == 0


def test_save_snapshot_rejects_bad_shape(tmp_path):
    """Test that non-image arrays are refused."""
    with pytest.raises(ValueError):
        save_snapshot(np.zeros((4, 4)), str(tmp_path / "bad.png"))
