import pygame
import pytest

from boundary import Boundary
from particle import ParticleSystem
from simulation import Simulation
from vector import Vector2
from visualization import Visualizer


@pytest.fixture
def visualizer():
    vis = Visualizer({"width": 240, "height": 180, "fps": 0}, {"particle_count": 6, "delta_time": 0.5})
    yield vis
    vis.close()


def make_simulation(center):
    params = {"particle_count": 6, "ring_radius": 20.0, "particle_radius": 3.0, "delta_time": 0.5}
    return Simulation(ParticleSystem(params, center), Boundary(center, 80.0), params)


def test_simulation_area_excludes_ui_panel(visualizer):
    assert visualizer.sim_width == 240
    assert visualizer.sim_height == 180


def test_draw_renders_particles_and_boundary(visualizer):
    center = Vector2(visualizer.sim_width / 2, visualizer.sim_height / 2)
    sim = make_simulation(center)
    first = sim.particles.particles[0]

    visualizer.draw(sim.snapshot(), {"collisions": sim.collision_count})

    assert visualizer.frames_drawn == 1
    px = visualizer.sim_surface.get_at((int(first.position.x), int(first.position.y)))
    assert (px.r, px.g, px.b) == first.color[:3]
    corner = visualizer.sim_surface.get_at((2, 2))
    assert (corner.r, corner.g, corner.b) == (0, 0, 0)


def test_draw_does_not_modify_simulation_state(visualizer):
    sim = make_simulation(Vector2(120.0, 90.0))
    sim.tick(0.5)
    before = [(p.position, p.velocity) for p in sim.particles]

    visualizer.draw(sim.snapshot())

    assert [(p.position, p.velocity) for p in sim.particles] == before


def test_draw_skips_non_finite_particles(visualizer):
    sim = make_simulation(Vector2(120.0, 90.0))
    sim.particles.particles[0].position = Vector2(float("nan"), 0.0)

    visualizer.draw(sim.snapshot())

    assert visualizer.frames_drawn == 1


@pytest.mark.parametrize("position", [(120.0, 1e20), (-3e12, 90.0), (1e300, -1e300)])
def test_draw_skips_particles_far_off_the_surface(visualizer, position):
    sim = make_simulation(Vector2(120.0, 90.0))
    sim.particles.particles[0].position = Vector2(*position)

    visualizer.draw(sim.snapshot())

    assert visualizer.frames_drawn == 1


def test_particle_overlapping_the_edge_is_still_drawn(visualizer):
    sim = make_simulation(Vector2(120.0, 90.0))
    edge = sim.particles.particles[0]
    edge.position = Vector2(visualizer.sim_width + 1.0, 50.0)

    visualizer.draw(sim.snapshot())

    px = visualizer.sim_surface.get_at((visualizer.sim_width - 1, 50))
    assert (px.r, px.g, px.b) == edge.color[:3]


def test_parameter_panel_leaves_out_empty_entries(visualizer):
    rows = visualizer._draw_parameters({"particle_count": 6, "center": None, "acceleration": [0.0, 2.0], "delta_time": 0.005})
    assert rows == 3


def test_quit_event_stops_the_loop(visualizer):
    assert visualizer.handle_events()

    pygame.event.post(pygame.event.Event(pygame.QUIT))

    assert not visualizer.handle_events()
