"""Galaxy parameter set."""

import math
import numbers
from dataclasses import dataclass, asdict, fields, replace as dc_replace
from typing import Any, Dict, Tuple, Union

from matplotlib.colors import to_rgb

from galaxy_gen.exceptions import ParameterError

ColorSpec = Union[str, Tuple[float, float, float]]


def resolve_color(color: ColorSpec) -> Tuple[float, float, float]:
    """Resolve a color spec (hex string, name or RGB triple) to RGB floats in [0, 1].

    Raises:
        ParameterError: If matplotlib cannot interpret the color
    """
    try:
        return tuple(float(c) for c in to_rgb(color))
    except (ValueError, TypeError) as exc:
        raise ParameterError(f"Invalid color {color!r}: {exc}") from exc


@dataclass
class GalaxyParameters:
    """Parameters controlling the shape and coloring of a generated galaxy.

    Defaults match the galaxy shown on startup.
    """
    particle_size: float = 0.01
    radius: float = 5.0
    particle_count: int = 100000
    branch_count: int = 3
    spin: float = 1.017
    randomness: float = 1.287
    randomness_power: float = 3.0
    inside_color: ColorSpec = "#ff6030"
    outside_color: ColorSpec = "#3b38ff"

    def validate(self) -> "GalaxyParameters":
        """Check every field against its domain.

        Returns:
            self, so calls can be chained

        Raises:
            ParameterError: On the first invalid field
        """
        for name in ("particle_count", "branch_count"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ParameterError(f"{name} must be an integer, got {value!r}")

        for name in ("particle_size", "radius", "spin", "randomness", "randomness_power"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ParameterError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ParameterError(f"{name} must be finite, got {value!r}")

        if self.particle_count < 0:
            raise ParameterError(f"particle_count must be >= 0, got {self.particle_count}")
        if self.branch_count < 1:
            raise ParameterError(f"branch_count must be >= 1, got {self.branch_count}")
        if self.radius <= 0:
            raise ParameterError(f"radius must be > 0, got {self.radius}")
        if self.particle_size <= 0:
            raise ParameterError(f"particle_size must be > 0, got {self.particle_size}")
        if self.randomness < 0:
            raise ParameterError(f"randomness must be >= 0, got {self.randomness}")
        if self.randomness_power < 1:
            raise ParameterError(f"randomness_power must be >= 1, got {self.randomness_power}")

        resolve_color(self.inside_color)
        resolve_color(self.outside_color)
        return self

    @property
    def inside_rgb(self) -> Tuple[float, float, float]:
        return resolve_color(self.inside_color)

    @property
    def outside_rgb(self) -> Tuple[float, float, float]:
        return resolve_color(self.outside_color)

    def replace(self, **changes) -> "GalaxyParameters":
        """Return a copy with the given fields changed (not validated)."""
        return dc_replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        for key in ("inside_color", "outside_color"):
            if isinstance(data[key], tuple):
                data[key] = list(data[key])
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GalaxyParameters":
        """Build parameters from a mapping, ignoring unknown keys.

        Color lists (as produced by JSON/YAML) are turned back into tuples.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in data.items() if k in known}
        for key in ("inside_color", "outside_color"):
            if isinstance(kwargs.get(key), list):
                kwargs[key] = tuple(kwargs[key])
        return cls(**kwargs)
