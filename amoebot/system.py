"""Base particle system and a connectivity check."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections import deque
from typing import Iterable, Iterator

from amoebot.node import Node
from amoebot.particle import Particle


class System(ABC):
    """Abstract collection of particles that can be activated one at a time."""

    def __init__(self) -> None:
        self.mutex = threading.RLock()

    @abstractmethod
    def activate(self) -> None:
        """Activate one particle of the system."""

    @abstractmethod
    def activate_particle_at(self, node: Node) -> None:
        """Activate the particle occupying ``node``, if there is one."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of particles in the system."""

    @abstractmethod
    def num_objects(self) -> int:
        """Number of objects in the system."""

    @abstractmethod
    def at(self, index: int) -> Particle:
        """Return the particle at the given index."""

    def __iter__(self) -> Iterator[Particle]:
        for index in range(len(self)):
            yield self.at(index)

    def has_terminated(self) -> bool:
        """Whether the algorithm running on the system has finished."""
        return False


def is_connected(particles: Iterable[Particle]) -> bool:
    """Return whether the nodes occupied by the particles form one component."""
    occupied: set[Node] = set()
    for p in particles:
        occupied.add(p.head)
        if p.is_expanded():
            occupied.add(p.tail())
    if not occupied:
        return True

    start = occupied.pop()
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for direction in range(6):
            neighbour = node.node_in_dir(direction)
            if neighbour in occupied:
                occupied.remove(neighbour)
                queue.append(neighbour)
    return not occupied