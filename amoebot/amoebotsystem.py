"""Particle system obeying the amoebot model, independent of any algorithm."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from amoebot import rng
from amoebot.metric import Count, Measure
from amoebot.node import Node
from amoebot.object import Object
from amoebot.particle import Particle
from amoebot.system import System

ROUNDS = "# Rounds"
ACTIVATIONS = "# Activations"
MOVES = "# Moves"


class AmoebotSystem(System):
    """A collection of amoebot particles and objects on the triangular lattice.

    Particles read and update ``particle_map`` and ``object_map`` directly when
    they move or look at their neighbourhood.
    """

    def __init__(self) -> None:
        super().__init__()
        self.particles: list[Any] = []
        self.particle_map: dict[Node, Any] = {}
        self.activated_particles: set[Any] = set()
        self.objects: list[Object] = []
        self.object_map: dict[Node, Object] = {}
        self.counts: list[Count] = [Count(ROUNDS), Count(ACTIVATIONS), Count(MOVES)]
        self.measures: list[Measure] = []

    def activate(self) -> None:
        """Activate one particle chosen uniformly at random."""
        if self.particles:
            particle = self.particles[rng.rand_int(0, len(self.particles))]
            self.register_activation(particle)
            particle.activate()

    def activate_particle_at(self, node: Node) -> None:
        """Activate the particle occupying ``node``; do nothing if it is empty."""
        particle = self.particle_map.get(node)
        if particle is not None:
            self.register_activation(particle)
            particle.activate()

    def __len__(self) -> int:
        return len(self.particles)

    def num_objects(self) -> int:
        return len(self.objects)

    def at(self, index: int) -> Particle:
        return self.particles[index]

    def insert_particle(self, particle: Any) -> None:
        """Add a contracted or expanded particle; its nodes must be free."""
        nodes = [particle.head]
        if particle.is_expanded():
            nodes.append(particle.tail())
        for node in nodes:
            if node in self.particle_map:
                raise ValueError(f"{node!r} is already occupied by a particle")
            if node in self.object_map:
                raise ValueError(f"{node!r} is already occupied by an object")
        self.particles.append(particle)
        for node in nodes:
            self.particle_map[node] = particle

    def insert_object(self, obj: Object) -> None:
        """Add an object; its node must be free."""
        if obj.node in self.object_map:
            raise ValueError(f"{obj.node!r} is already occupied by an object")
        if obj.node in self.particle_map:
            raise ValueError(f"{obj.node!r} is already occupied by a particle")
        self.objects.append(obj)
        self.object_map[obj.node] = obj

    def remove(self, particle: Any) -> None:
        """Take the particle out of the system."""
        self.particles = [p for p in self.particles if p is not particle]
        self.particle_map = {
            node: p for node, p in self.particle_map.items() if p is not particle
        }
        self.activated_particles.discard(particle)

    def register_movement(self, num_moves: int = 1) -> None:
        self.get_count(MOVES).record(num_moves)

    def register_activation(self, particle: Any) -> None:
        """Log an activation; once every particle has acted, close the round."""
        self.get_count(ACTIVATIONS).record()
        self.activated_particles.add(particle)
        if len(self.activated_particles) == len(self.particles):
            self.register_round()
            self.activated_particles.clear()

    def register_round(self) -> None:
        """Commit counts and due measures to their histories; count the round."""
        for count in self.counts:
            count.history.append(count.value)
        rounds = self.get_count(ROUNDS)
        for measure in self.measures:
            if rounds.value % measure.freq == 0:
                measure.history.append(measure.calculate())
        rounds.record()

    def get_count(self, name: str) -> Count:
        for count in self.counts:
            if count.name == name:
                return count
        raise KeyError(f"no count named {name!r}")

    def get_measure(self, name: str) -> Measure:
        for measure in self.measures:
            if measure.name == name:
                return measure
        raise KeyError(f"no measure named {name!r}")

    def metrics_as_json(self) -> str:
        """Histories of all counts and measures as a JSON document."""
        document = {
            "title": "Amoebot Metrics JSON",
            "datetime": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            "algorithm": "???",
            "counts": [
                {"name": c.name, "history": list(c.history)} for c in self.counts
            ],
            "measures": [
                {"name": m.name, "frequency": m.freq, "history": list(m.history)}
                for m in self.measures
            ],
        }
        return json.dumps(document)