import math

import pytest

from boundary import Boundary
from color import get_color
from particle import Particle
from vector import Vector2


def make_particle(x, y, vx=0.0, vy=0.0, radius=6.0):
    return Particle(Vector2(x, y), Vector2(vx, vy), Vector2(), radius, get_color(0))


@pytest.fixture
def boundary():
    return Boundary(Vector2(0.0, 0.0), 100.0)


def test_no_collision_exactly_at_inner_face(boundary):
    assert not boundary.check_collision(make_particle(94.0, 0.0))


def test_collision_just_beyond_inner_face(boundary):
    assert boundary.check_collision(make_particle(94.001, 0.0))
    assert boundary.check_collision(make_particle(0.0, -94.001))


def test_no_collision_near_center(boundary):
    assert not boundary.check_collision(make_particle(0.0, 0.0))
    assert not boundary.check_collision(make_particle(-30.0, 40.0))


def test_check_collision_respects_offset_center():
    shifted = Boundary(Vector2(1000.0, 667.0), 600.0)
    assert not shifted.check_collision(make_particle(1594.0, 667.0))
    assert shifted.check_collision(make_particle(1595.0, 667.0))


def test_closest_point_on_circumference(boundary):
    assert tuple(boundary.closest_point(Vector2(30.0, 40.0))) == pytest.approx((60.0, 80.0))
    assert tuple(boundary.closest_point(Vector2(0.0, 250.0))) == pytest.approx((0.0, 100.0))


@pytest.mark.parametrize("x", [97.0, 110.0])
def test_radial_velocity_bounces_straight_back(boundary, x):
    particle = make_particle(x, 0.0, vx=20.0)

    boundary.handle_collision(particle)

    assert particle.velocity.x == pytest.approx(-20.0)
    assert particle.velocity.y == 0.0


def test_diagonal_reflection_flips_radial_component(boundary):
    particle = make_particle(80.0, 80.0, vx=3.0, vy=4.0)

    boundary.handle_collision(particle)

    assert particle.velocity.x == pytest.approx(-4.0)
    assert particle.velocity.y == pytest.approx(-3.0)


@pytest.mark.parametrize("vx, vy", [(20.0, 0.0), (0.0, 20.0), (-7.0, 3.5), (12.0, -30.0), (1e-3, 1e3)])
def test_reflection_preserves_speed(boundary, vx, vy):
    particle = make_particle(70.0, 75.0, vx=vx, vy=vy)
    speed_before = particle.velocity.length()

    boundary.handle_collision(particle)

    assert math.isclose(particle.velocity.length(), speed_before, rel_tol=1e-12)


def test_handle_collision_does_not_move_particle(boundary):
    particle = make_particle(130.0, -20.0, vx=5.0, vy=1.0)

    boundary.handle_collision(particle)

    assert particle.position == Vector2(130.0, -20.0)


def test_particle_on_circumference_keeps_velocity():
    boundary = Boundary(Vector2(0.0, 0.0), 128.0)
    particle = make_particle(128.0, 0.0, vx=5.0, vy=2.0)

    boundary.handle_collision(particle)

    assert particle.velocity == Vector2(5.0, 2.0)


def test_snapshot(boundary):
    snap = boundary.snapshot()
    assert snap.center == Vector2(0.0, 0.0)
    assert snap.radius == 100.0
