"""CLI main entry point."""

import argparse
import sys
from typing import List, Optional

from galaxy_gen.backends.factory import get_backend, list_available_backends
from galaxy_gen.controller import GalaxyController
from galaxy_gen.exceptions import ParameterError
from galaxy_gen.generator.spiral import SpiralGalaxyGenerator
from galaxy_gen.logging_config import setup_logging
from galaxy_gen.render.manager import RenderManager
from galaxy_gen.utils.config import Config, load_config, save_config
from galaxy_gen.utils.reproducibility import set_all_seeds

# CLI flag -> GalaxyParameters field
PARAMETER_FLAGS = {
    'particles': 'particle_count',
    'size': 'particle_size',
    'radius': 'radius',
    'branches': 'branch_count',
    'spin': 'spin',
    'randomness': 'randomness',
    'randomness_power': 'randomness_power',
    'inside_color': 'inside_color',
    'outside_color': 'outside_color',
}


def build_config(args) -> Config:
    """Merge the optional config file with command-line overrides."""
    config = load_config(args.config) if args.config else Config()

    changes = {}
    for flag, field_name in PARAMETER_FLAGS.items():
        value = getattr(args, flag)
        if value is not None:
            changes[field_name] = value
    config.parameters = config.parameters.replace(**changes)

    if args.backend is not None:
        config.backend = args.backend
    if args.seed is not None:
        config.seed = args.seed
    if args.render_mode is not None:
        config.render_mode = args.render_mode
    if args.snapshot is not None:
        config.output_path = args.snapshot
    if args.log_level is not None:
        config.log_level = args.log_level
    return config


def run_generation(args) -> int:
    """Generate a galaxy, optionally display it and export a snapshot."""
    config = build_config(args)
    setup_logging(config.log_level, args.log_file)

    backend = get_backend(config.backend, prefer_gpu=args.gpu)
    if config.seed is not None:
        set_all_seeds(config.seed, backend)

    try:
        config.parameters.validate()
    except ParameterError as exc:
        print(f"Invalid parameters: {exc}", file=sys.stderr)
        return 2

    if args.save_config:
        save_config(config, args.save_config)
        print(f"Config saved to {args.save_config}")

    generator = SpiralGalaxyGenerator(backend)
    renderer = RenderManager(mode=config.render_mode, show_window=args.render)
    controller = GalaxyController(generator, renderer, config.parameters, seed=config.seed)

    params = config.parameters
    print(f"Generating galaxy: {params.particle_count} particles, {params.branch_count} branches")
    print(f"Backend: {backend.name}, radius: {params.radius}, spin: {params.spin}, "
          f"randomness: {params.randomness} (power {params.randomness_power})")

    try:
        controller.commit()

        if args.render:
            renderer.run(frames=args.frames)

        if args.snapshot:
            path = controller.snapshot(config.output_path)
            print(f"Snapshot saved to {path}")
    finally:
        renderer.close()

    print("Generation complete!")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Galaxy Generator - procedural spiral galaxy point clouds")

    # Galaxy parameters
    parser.add_argument('--particles', type=int, default=None,
                       help='Number of particles (default: 100000)')
    parser.add_argument('--size', type=float, default=None,
                       help='Particle size in world units (default: 0.01)')
    parser.add_argument('--radius', type=float, default=None,
                       help='Galaxy radius (default: 5)')
    parser.add_argument('--branches', type=int, default=None,
                       help='Number of spiral arms (default: 3)')
    parser.add_argument('--spin', type=float, default=None,
                       help='Angular twist per unit radius in radians (default: 1.017)')
    parser.add_argument('--randomness', type=float, default=None,
                       help='Scatter scale (default: 1.287)')
    parser.add_argument('--randomness-power', type=float, default=None,
                       help='Scatter falloff exponent, >= 1 (default: 3)')
    parser.add_argument('--inside-color', type=str, default=None,
                       help='Core color, hex or matplotlib name (default: #ff6030)')
    parser.add_argument('--outside-color', type=str, default=None,
                       help='Rim color, hex or matplotlib name (default: #3b38ff)')
    parser.add_argument('--config', type=str, default=None,
                       help='Load parameters from a .json or .yaml file')
    parser.add_argument('--save-config', type=str, default=None,
                       help='Write the effective configuration to a .json or .yaml file')

    # Backend
    parser.add_argument('--backend', type=str, default=None,
                       choices=['numpy', 'pytorch'],
                       help='Compute backend (auto-select if not specified)')
    parser.add_argument('--gpu', action='store_true',
                       help='Prefer GPU backends')

    # Rendering
    parser.add_argument('--render', action='store_true',
                       help='Open an interactive window')
    parser.add_argument('--render-mode', type=str, default=None,
                       choices=['2d', '3d'],
                       help='Rendering mode (default: 3d)')
    parser.add_argument('--frames', type=int, default=None,
                       help='Stop rendering after N frames (default: until the window closes)')

    # Export
    parser.add_argument('--snapshot', type=str, default=None,
                       help='Save a PNG snapshot of the galaxy to this path')

    # Reproducibility
    parser.add_argument('--seed', type=int, default=None,
                       help='Random seed for reproducibility')

    # Logging
    parser.add_argument('--log-level', type=str, default=None,
                       choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                       help='Logging level (default: INFO)')
    parser.add_argument('--log-file', type=str, default=None,
                       help='Also write logs to this file')

    # Info
    parser.add_argument('--list-backends', action='store_true',
                       help='List available backends and exit')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.list_backends:
        backends = list_available_backends()
        print("Available backends:")
        for backend in backends:
            print(f"  - {backend}")
        return 0

    return run_generation(args)


if __name__ == '__main__':
    sys.exit(main())
