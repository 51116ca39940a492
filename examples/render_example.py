"""Example with real-time rendering and live parameter changes."""

from galaxy_gen import GalaxyParameters, SpiralGalaxyGenerator, get_backend
from galaxy_gen.controller import GalaxyController
from galaxy_gen.render.manager import RenderManager

def main():
    """Show a galaxy, then regenerate it with more arms."""
    backend = get_backend("numpy")
    manager = RenderManager(mode="3d")
    controller = GalaxyController(
        SpiralGalaxyGenerator(backend),
        manager,
        GalaxyParameters(particle_count=30000),
        seed=123
    )
    
    print("Close the matplotlib window to stop.")
    
    try:
        controller.commit()
        manager.run(frames=200)
        
        controller.update(branch_count=6, spin=-1.5, outside_color="#00ffaa")
        controller.commit()
        manager.run()
    except KeyboardInterrupt:
        print("\nInterrupted by user")
    finally:
        manager.close()
        print("Done!")

if __name__ == "__main__":
    main()
