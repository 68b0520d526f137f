import pytest

from amoebot.node import Node
from amoebot.particle import Particle
from amoebot.system import System, is_connected


class ListSystem(System):
    def __init__(self, particles):
        super().__init__()
        self.particles = list(particles)
        self.activated = []

    def activate(self):
        if self.particles:
            self.activated.append(self.particles[0])

    def activate_particle_at(self, node):
        for p in self.particles:
            if p.head == node:
                self.activated.append(p)

    def __len__(self):
        return len(self.particles)

    def num_objects(self):
        return 0

    def at(self, index):
        return self.particles[index]


def test_system_is_abstract():
    with pytest.raises(TypeError):
        System()


def test_iteration_yields_particles_in_order():
    particles = [Particle(Node(i, 0)) for i in range(4)]
    system = ListSystem(particles)
    assert list(system) == particles
    assert len(system) == len(particles)


def test_default_has_not_terminated():
    system = ListSystem([Particle(Node(0, 0))])
    assert System.has_terminated(system) is False


def test_mutex_is_reentrant():
    particle = Particle(Node(1, 1))
    system = ListSystem([particle])
    with system.mutex:
        with system.mutex:
            system.activate()
    assert system.activated == [particle]
    assert list(system) == [particle]


def test_activate_particle_at_targets_node():
    target = Particle(Node(2, 2))
    system = ListSystem([Particle(Node(0, 0)), target])
    system.activate_particle_at(Node(2, 2))
    assert system.activated == [target]


def test_line_of_particles_is_connected():
    particles = [Particle(Node(i, 0)) for i in range(5)]
    assert is_connected(particles)


def test_gap_disconnects():
    particles = [Particle(Node(0, 0)), Particle(Node(3, 0))]
    assert not is_connected(particles)


def test_expanded_tail_bridges_gap():
    # The tail of the first particle lies between the two heads.
    first = Particle(Node(0, 0), 0)
    second = Particle(first.tail().node_in_dir(0))
    assert is_connected([first, second])
    assert not is_connected([Particle(Node(0, 0)), second])


def test_single_particle_is_connected():
    assert is_connected([Particle(Node(7, -3))])


def test_empty_is_connected():
    assert is_connected([])