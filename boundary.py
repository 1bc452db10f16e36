# boundary.py
"""
The static circular boundary that keeps the particles (mostly) contained.

Collision detection is a post-penetration test: a particle is only
reported once its center is already beyond the inward-offset radius, and
the response reflects the velocity without moving the particle back
inside. Fast particles can therefore tunnel through the ring or stay
outside for several ticks, reflecting each time they are tested.
"""
import logging
from typing import NamedTuple
from particle import Particle
from vector import Vector2

# --- Data Contracts ---
#
# class Boundary:
#   - __init__(self, center: Vector2, radius: float)
#   - check_collision(self, particle: Particle) -> bool:
#     - Outputs: True when |p - center|^2 > (radius - particle.radius)^2.
#   - handle_collision(self, particle: Particle) -> None:
#     - Side Effects: reflects particle.velocity about the boundary normal.
#       particle.position is never modified.
#   - Invariants: center and radius do not change during a run.


class BoundarySnapshot(NamedTuple):
    """Read-only drawable state of the boundary for the rendering sink."""
    center: Vector2
    radius: float


class Boundary:
    """
    A circle that reflects particles found outside its inner face.
    """
    def __init__(self, center: Vector2, radius: float):
        self._center = center
        self._radius = float(radius)
        logging.info(
            f"Boundary initialized at ({center.x:.1f}, {center.y:.1f}) "
            f"with radius {self._radius:.1f}."
        )

    @property
    def center(self) -> Vector2:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius

    def check_collision(self, particle: Particle) -> bool:
        """
        Returns True if the particle has crossed the inner face of the ring.

        Compares squared distances, so no square root is taken. A particle
        exactly at `radius - particle.radius` is not colliding.
        """
        offset = particle.position - self._center
        limit = self._radius - particle.radius
        return offset.dot(offset) > limit * limit

    def closest_point(self, point: Vector2) -> Vector2:
        """Returns the point on the circumference nearest to `point`."""
        direction = (point - self._center).normalized()
        return self._center + direction * self._radius

    def handle_collision(self, particle: Particle) -> None:
        """
        Reflects the particle's velocity about the boundary normal.

        The normal points from the nearest circumference point to the
        particle. A particle sitting exactly on the circumference gets a
        zero normal and keeps its velocity.
        """
        collision_point = self.closest_point(particle.position)
        normal = (particle.position - collision_point).normalized()
        particle.velocity = particle.velocity - normal * (2.0 * particle.velocity.dot(normal))

    def snapshot(self) -> BoundarySnapshot:
        return BoundarySnapshot(self._center, self._radius)
