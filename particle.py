# particle.py
"""
Manages the state of all particles in the simulation.

This module defines the Particle point mass and its integrator, the
initializer that places particles evenly on a ring, and the
ParticleSystem container that owns the fixed-size particle collection for
the lifetime of a run.
"""
import logging
import math
import numpy as np
from typing import Dict, Any, List, NamedTuple, Sequence
from color import Color, get_color
from vector import Vector2

# --- Data Contracts ---
#
# class Particle:
#   - integrate(self, dt: float) -> None:
#     - Side Effects: velocity += acceleration * dt, then
#       position += velocity * dt using the updated velocity
#       (semi-implicit Euler).
#   - snapshot(self) -> ParticleSnapshot
#
# place_particles_on_ring(ring_radius, count, center, base_acceleration, particle_radius) -> List[Particle]:
#   - Outputs: `count` particles at distance `ring_radius` from `center`,
#     angle_i = i * (360 / count) degrees, zero velocity, colored by angle.
#   - Invariants: count <= 0 yields an empty list.
#
# class ParticleSystem:
#   - __init__(self, params: Dict[str, Any], center: Vector2):
#     - Inputs:
#       - params: Dictionary of simulation parameters from config.json.
#         - "particle_count": int
#         - "ring_radius": float
#         - "particle_radius": float
#         - "acceleration": [float, float]
#       - center: Vector2, center of the starting ring.
#     - Invariants:
#       - The particle count never changes after construction.
#       - self.positions / self.velocities are NumPy arrays of shape (N, 2)
#         of dtype float64, rebuilt on access.

DEFAULT_PARTICLE_COUNT = 1000
DEFAULT_RING_RADIUS = 150.0
DEFAULT_PARTICLE_RADIUS = 6.0
DEFAULT_ACCELERATION = (0.0, 2.0)


class ParticleSnapshot(NamedTuple):
    """Read-only drawable state of a particle for the rendering sink."""
    position: Vector2
    radius: float
    color: Color


class Particle:
    """
    A moving point mass with a constant acceleration.
    """
    def __init__(
        self,
        position: Vector2,
        velocity: Vector2,
        acceleration: Vector2,
        radius: float,
        color: Color
    ):
        self.position = position
        self.velocity = velocity
        self.acceleration = acceleration
        self.radius = radius
        self.color = color

    def integrate(self, dt: float) -> None:
        """
        Advances the particle by one semi-implicit Euler step.

        The position update uses the velocity computed in this same step.
        """
        self.velocity += self.acceleration * dt
        self.position += self.velocity * dt

    def snapshot(self) -> ParticleSnapshot:
        return ParticleSnapshot(self.position, self.radius, self.color)

    def __repr__(self) -> str:
        return (
            f"Particle(position={self.position!r}, velocity={self.velocity!r}, "
            f"acceleration={self.acceleration!r}, radius={self.radius!r})"
        )


def place_particles_on_ring(
    ring_radius: float,
    count: int,
    center: Vector2,
    base_acceleration: Vector2,
    particle_radius: float
) -> List[Particle]:
    """
    Places `count` particles evenly around a ring, each at rest.

    Each angle is computed directly from the particle index rather than by
    accumulating a step, so the last particle does not drift.
    """
    particles = []
    if count <= 0:
        return particles

    angle_step = 360.0 / count
    for i in range(count):
        angle = i * angle_step
        radians = math.radians(angle)
        offset = Vector2(ring_radius * math.cos(radians), ring_radius * math.sin(radians))
        particles.append(Particle(
            position=center + offset,
            velocity=Vector2(0.0, 0.0),
            acceleration=base_acceleration,
            radius=particle_radius,
            color=get_color(angle)
        ))
    return particles


class ParticleSystem:
    """
    A container for all particles in a run.
    """
    def __init__(self, params: Dict[str, Any], center: Vector2):
        """
        Initializes the particle system.

        Args:
            params (Dict[str, Any]): Simulation parameters from config.
            center (Vector2): Center of the starting ring.
        """
        self.ring_radius = float(params.get('ring_radius', DEFAULT_RING_RADIUS))
        self.particle_radius = float(params.get('particle_radius', DEFAULT_PARTICLE_RADIUS))
        ax, ay = params.get('acceleration', DEFAULT_ACCELERATION)
        self.acceleration = Vector2(ax, ay)
        self.center = center

        self.particles: List[Particle] = place_particles_on_ring(
            self.ring_radius,
            int(params.get('particle_count', DEFAULT_PARTICLE_COUNT)),
            self.center,
            self.acceleration,
            self.particle_radius
        )

        logging.info(
            f"ParticleSystem initialized with {self.particle_count} "
            f"particles on a ring of radius {self.ring_radius:.1f}."
        )
        logging.debug(
            f"Ring center: ({center.x:.1f}, {center.y:.1f}), "
            f"particle radius: {self.particle_radius}, "
            f"acceleration: ({self.acceleration.x}, {self.acceleration.y})"
        )

    @property
    def particle_count(self) -> int:
        return len(self.particles)

    @property
    def positions(self) -> np.ndarray:
        return self._as_array([p.position for p in self.particles])

    @property
    def velocities(self) -> np.ndarray:
        return self._as_array([p.velocity for p in self.particles])

    def mean_speed(self) -> float:
        """Average particle speed, 0.0 for an empty system."""
        if not self.particles:
            return 0.0
        return float(np.mean(np.linalg.norm(self.velocities, axis=1)))

    def snapshots(self) -> List[ParticleSnapshot]:
        return [p.snapshot() for p in self.particles]

    def __iter__(self):
        return iter(self.particles)

    def __len__(self) -> int:
        return len(self.particles)

    @staticmethod
    def _as_array(vectors: Sequence[Vector2]) -> np.ndarray:
        array = np.zeros((len(vectors), 2), dtype=np.float64)
        for i, v in enumerate(vectors):
            array[i] = (v.x, v.y)
        return array
