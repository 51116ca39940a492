"""Configuration management."""

import json
from typing import Dict, Any, Optional
from pathlib import Path
from dataclasses import dataclass, field, fields

from galaxy_gen.params import GalaxyParameters

_YAML_SUFFIXES = ('.yaml', '.yml')


@dataclass
class Config:
    """Generation and display configuration."""
    # Galaxy shape and colors
    parameters: GalaxyParameters = field(default_factory=GalaxyParameters)
    
    # Compute
    backend: Optional[str] = None
    seed: Optional[int] = None
    
    # Rendering parameters
    render_mode: str = "3d"
    
    # Export parameters
    output_path: str = "galaxy-snapshot.png"
    
    log_level: str = "INFO"
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'parameters': self.parameters.to_dict(),
            'backend': self.backend,
            'seed': self.seed,
            'render_mode': self.render_mode,
            'output_path': self.output_path,
            'log_level': self.log_level,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        data = dict(data or {})
        params = data.pop('parameters', None) or {}
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in data.items() if k in known}
        return cls(parameters=GalaxyParameters.from_dict(params), **kwargs)


def _check_suffix(path: Path):
    if path.suffix not in _YAML_SUFFIXES and path.suffix != '.json':
        raise ValueError(f"Unsupported config format: {path.suffix}. Use .json, .yaml or .yml")


def load_config(config_path: str) -> Config:
    """Load configuration from file.
    
    Args:
        config_path: Path to config file (.json or .yaml)
        
    Returns:
        Config object
    """
    config_path = Path(config_path)
    _check_suffix(config_path)
    
    with open(config_path, 'r') as f:
        if config_path.suffix in _YAML_SUFFIXES:
            try:
                import yaml
            except ImportError:
                raise ImportError("YAML support requires PyYAML. Install with: pip install pyyaml")
            data = yaml.safe_load(f)
        else:
            data = json.load(f)
    
    return Config.from_dict(data)


def save_config(config: Config, output_path: str):
    """Save configuration to file.
    
    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    _check_suffix(output_path)
    data = config.to_dict()
    
    with open(output_path, 'w') as f:
        if output_path.suffix in _YAML_SUFFIXES:
            try:
                import yaml
            except ImportError:
                raise ImportError("YAML support requires PyYAML. Install with: pip install pyyaml")
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
