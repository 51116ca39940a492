"""Basic example of generating a galaxy point cloud."""

import numpy as np
from galaxy_gen import GalaxyParameters, SpiralGalaxyGenerator, get_backend

def main():
    """Generate a spiral galaxy and summarize its buffers."""
    # Get backend (NumPy is always available)
    backend = get_backend("numpy")
    generator = SpiralGalaxyGenerator(backend)
    
    params = GalaxyParameters(
        particle_count=20000,
        branch_count=4,
        spin=1.2,
        randomness=0.8,
        randomness_power=3.0
    )
    
    particles = generator.generate(params, seed=42)
    
    radii = np.hypot(particles.positions[:, 0], particles.positions[:, 2])
    print(f"Particles: {len(particles)}")
    print(f"Median radius: {np.median(radii):.3f} (galaxy radius {params.radius})")
    print(f"Mean |y|: {np.abs(particles.positions[:, 1]).mean():.4f}")
    print(f"Mean color: {particles.colors.mean(axis=0).round(3)}")

if __name__ == "__main__":
    main()
