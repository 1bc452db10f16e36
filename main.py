# main.py
"""
Main entry point for the circle-bounce simulation.

This script orchestrates the entire simulation lifecycle:
1. Loads configuration from `config.json`.
2. Initializes the logging system.
3. Sets up the window, the particle ring and the boundary.
4. Runs the main simulation loop, drawing every few ticks.
5. Handles clean shutdown.
"""
import logging
from utils import setup_logging, load_config, vector_from_config
import cProfile
import pstats
import io
from typing import NamedTuple, Optional


class RunSummary(NamedTuple):
    """What a finished run did, for logging and for callers of main()."""
    steps: int
    frames: int
    collisions: int


def main(config_path: str = 'config.json') -> Optional[RunSummary]:
    """
    The main function to run the simulation.

    Returns None if the run could not start (bad config file or invalid
    simulation parameters).
    """
    # Logging is not set up yet, so we use a print for this one error.
    try:
        config = load_config(config_path)
    except Exception as e:
        print(f"FATAL: Could not load {config_path}. Error: {e}")
        return None

    setup_logging(config)

    logging.info("--- Circle Bounce Simulation Starting ---")

    sim_params = config.get('simulation_parameters', {})
    run_params = config.get('run_control', {})
    vis_params = config.get('visualization', {})

    from boundary import Boundary
    from particle import ParticleSystem
    from simulation import Simulation
    from vector import Vector2
    from visualization import Visualizer

    # --- Component Initialization ---
    # 1. The visualizer determines the size of the simulation area.
    visualizer = Visualizer(vis_params=vis_params, sim_params=sim_params)

    # 2. Ring and boundary share a center, defaulting to the middle of the area.
    default_center = Vector2(visualizer.sim_width / 2, visualizer.sim_height / 2)
    center = vector_from_config(sim_params.get('center'), default_center)

    # 3. Build the particles, the boundary and the simulation around them.
    particles = ParticleSystem(sim_params, center)
    boundary = Boundary(center, sim_params.get('boundary_radius', 600.0))
    try:
        sim = Simulation(particles, boundary, sim_params)
    except ValueError:
        visualizer.close()
        return None

    profiler = cProfile.Profile()

    log_throttle = max(1, run_params.get('log_throttle_steps', 1000))
    max_steps = run_params.get('max_steps', 0)
    draw_every = max(1, run_params.get('draw_every_n_ticks', 8))

    running = True
    step_num = 0
    collisions_at_last_log = 0

    profiler.enable()
    while running:
        if not visualizer.handle_events():
            break

        sim.step()
        step_num += 1

        # Display cadence is decided here, not by the simulation.
        if step_num % draw_every == 0:
            visualizer.draw(sim.snapshot(), {"collisions": sim.collision_count})

        # Hot loops must throttle logs
        if step_num % log_throttle == 0:
            logging.info(f"Simulation step {step_num}" + (f"/{max_steps}" if max_steps else ""))

            interval_collisions = sim.collision_count - collisions_at_last_log
            collisions_at_last_log = sim.collision_count
            logging.debug(
                f"Step {step_num} | Mean speed: {particles.mean_speed():.4f} | "
                f"Collisions since last log: {interval_collisions}"
            )

        if max_steps and step_num >= max_steps:
            logging.info(f"Reached max_steps ({max_steps}). Stopping simulation.")
            running = False
    profiler.disable()

    visualizer.close()
    logging.info(
        f"Simulation loop finished after {step_num} steps, "
        f"{visualizer.frames_drawn} frames and {sim.collision_count} collisions."
    )

    logging.info("--- Performance Profile ---")
    s = io.StringIO()
    stats = pstats.Stats(profiler, stream=s).sort_stats('cumtime')
    stats.print_stats(20)
    logging.info(f"\n{s.getvalue()}")

    logging.info("--- Circle Bounce Simulation Shutting Down ---")
    return RunSummary(step_num, visualizer.frames_drawn, sim.collision_count)


if __name__ == "__main__":
    main()
