# simulation.py
"""
Handles the core simulation logic.

This module defines the Simulation class, which advances the particle
system by one time step: every particle is integrated and then tested
against the boundary, reflecting its velocity if it has crossed. Deciding
when to draw is left to the caller.
"""
import logging
import math
from typing import Dict, Any, NamedTuple, Tuple
from boundary import Boundary, BoundarySnapshot
from particle import ParticleSystem, ParticleSnapshot

# --- Data Contracts ---
#
# class Simulation:
#   - __init__(self, particles: ParticleSystem, boundary: Boundary, params: Dict[str, Any]):
#     - Inputs:
#       - particles: An initialized ParticleSystem object.
#       - boundary: The Boundary the particles are confined by.
#       - params: Dictionary of simulation parameters from config.json.
#         - "delta_time": float, must be finite and positive.
#     - Side Effects: Stores references to particles and boundary.
#
#   - tick(self, dt: float) -> None:
#     - Side Effects: Modifies each particle's position and velocity.
#     - Invariants: Each particle is integrated, then collision tested and
#       resolved, before the next particle is processed. Particle count
#       remains constant.
#
#   - step(self) -> None: tick(self.delta_time)
#
#   - snapshot(self) -> Frame:
#     - Outputs: immutable per-particle and boundary state for rendering.

DEFAULT_DELTA_TIME = 0.005


class Frame(NamedTuple):
    """Everything the rendering sink needs to draw one frame."""
    particles: Tuple[ParticleSnapshot, ...]
    boundary: BoundarySnapshot
    tick: int


class Simulation:
    """
    Drives the particles and the boundary one tick at a time.
    """
    def __init__(self, particles: ParticleSystem, boundary: Boundary, params: Dict[str, Any]):
        """
        Initializes the simulation environment.

        Args:
            particles (ParticleSystem): The particle system to simulate.
            boundary (Boundary): The confining circle.
            params (Dict[str, Any]): Simulation parameters from config.
        """
        self.particles = particles
        self.boundary = boundary
        self.delta_time = float(params.get('delta_time', DEFAULT_DELTA_TIME))

        if not math.isfinite(self.delta_time) or self.delta_time <= 0:
            msg = (
                f"Configuration error: delta_time must be a positive, finite "
                f"number, got {self.delta_time}."
            )
            logging.critical(msg)
            raise ValueError(msg)

        self.tick_count = 0
        self.collision_count = 0
        self.collisions_last_tick = 0

        logging.info(f"Simulation logic initialized with delta_time={self.delta_time}.")

    def tick(self, dt: float) -> None:
        """
        Executes one time step of length `dt`.
        """
        collisions = 0
        boundary = self.boundary
        for particle in self.particles:
            particle.integrate(dt)
            if boundary.check_collision(particle):
                boundary.handle_collision(particle)
                collisions += 1

        self.collisions_last_tick = collisions
        self.collision_count += collisions
        self.tick_count += 1

    def step(self) -> None:
        """
        Executes one time step using the configured delta_time.
        """
        self.tick(self.delta_time)

    def snapshot(self) -> Frame:
        return Frame(
            particles=tuple(self.particles.snapshots()),
            boundary=self.boundary.snapshot(),
            tick=self.tick_count
        )
