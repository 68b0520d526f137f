"""Particles that obey the amoebot model, independent of any algorithm.

Objects are not members of the particle system, but a particle can sense
objects on neighbouring nodes through ``has_object_at_label`` and friends.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Callable, Deque, TypeVar

from amoebot.amoebotsystem import AmoebotSystem
from amoebot.localparticle import LocalParticle
from amoebot.node import Node


class Token:
    """Base class for tokens carried by particles."""


T = TypeVar("T", bound=Token)
P = TypeVar("P")


class AmoebotParticle(LocalParticle, ABC):
    """A particle living in an ``AmoebotSystem`` that moves by the amoebot rules."""

    def __init__(self, head: Node, global_tail_dir: int, orientation: int,
                 system: AmoebotSystem) -> None:
        super().__init__(head, global_tail_dir, orientation)
        self.system = system
        self._tokens: Deque[Token] = deque()

    @abstractmethod
    def activate(self) -> None:
        """Execute one activation of this particle."""

    # Direction markers for drawing.

    def head_mark_global_dir(self) -> int:
        """Global direction of the head marker, or -1 for none."""
        return self._mark_to_global(self.head_mark_dir())

    def tail_mark_global_dir(self) -> int:
        """Global direction of the tail marker, or -1 for none."""
        return self._mark_to_global(self.tail_mark_dir())

    def _mark_to_global(self, direction: int) -> int:
        if not -1 <= direction < 6:
            raise ValueError(f"marker direction must be in -1..5, got {direction}")
        return -1 if direction == -1 else self.local_to_global_dir(direction)

    def head_mark_dir(self) -> int:
        """Local direction of the head marker; -1 means no marker."""
        return -1

    def tail_mark_dir(self) -> int:
        """Local direction of the tail marker; -1 means no marker."""
        return -1

    # Movement.

    def can_expand(self, label: int) -> bool:
        """Whether the particle is contracted and the labelled node is free."""
        if not 0 <= label < 6:
            raise ValueError(f"expansion label must be in 0..5, got {label}")
        return (self.is_contracted() and not self.has_nbr_at_label(label)
                and not self.has_object_at_label(label))

    def expand(self, label: int) -> None:
        """Expand the head onto the node reached via ``label``."""
        if not self.can_expand(label):
            raise ValueError(f"cannot expand over label {label}")
        direction = self.local_to_global_dir(label)
        self.head = self.head.node_in_dir(direction)
        self.global_tail_dir = (direction + 3) % 6
        self.system.particle_map[self.head] = self

        self.system.register_movement()

    def can_push(self, label: int) -> bool:
        """Whether the particle is contracted and faces an expanded neighbour."""
        if not 0 <= label < 6:
            raise ValueError(f"push label must be in 0..5, got {label}")
        return (self.is_contracted() and self.has_nbr_at_label(label)
                and self.nbr_at_label(label).is_expanded())

    def push(self, label: int) -> None:
        """Expand into a node of an expanded neighbour, which contracts."""
        if not self.can_push(label):
            raise ValueError(f"cannot push over label {label}")
        direction = self.local_to_global_dir(label)
        handover = self.head.node_in_dir(direction)
        neighbor = self.nbr_at_label(label, AmoebotParticle)

        self.head = handover
        self.global_tail_dir = (direction + 3) % 6
        self.system.particle_map[handover] = self

        if handover == neighbor.head:
            neighbor.head = neighbor.tail()
        neighbor.global_tail_dir = -1

        self.system.register_movement(2)
        self.system.register_activation(neighbor)

    def contract(self, label: int) -> None:
        """Contract using a head or tail contraction label."""
        if not 0 <= label < 10:
            raise ValueError(f"contraction label must be in 0..9, got {label}")
        head_label = self.head_contraction_label()
        if label == head_label:
            self.contract_head()
        elif label == self.tail_contraction_label():
            self.contract_tail()
        else:
            raise ValueError(f"{label} is not a contraction label")

    def contract_head(self) -> None:
        """Give up the head node and keep the tail."""
        if self.is_contracted():
            raise ValueError("the particle must be expanded")
        del self.system.particle_map[self.head]
        self.head = self.tail()
        self.global_tail_dir = -1

        self.system.register_movement()

    def contract_tail(self) -> None:
        """Give up the tail node and keep the head."""
        if self.is_contracted():
            raise ValueError("the particle must be expanded")
        del self.system.particle_map[self.tail()]
        self.global_tail_dir = -1

        self.system.register_movement()

    def can_pull(self, label: int) -> bool:
        """Whether the particle is expanded and faces a contracted neighbour."""
        if not 0 <= label < 10:
            raise ValueError(f"pull label must be in 0..9, got {label}")
        return (self.is_expanded() and self.has_nbr_at_label(label)
                and self.nbr_at_label(label).is_contracted())

    def pull(self, label: int) -> None:
        """Contract while the neighbour at ``label`` expands into the freed node."""
        if not self.can_pull(label):
            raise ValueError(f"cannot pull over label {label}")
        pull_dir = self.label_to_global_dir(label)
        on_head = self.is_head_label(label)
        handover = self.head if on_head else self.tail()
        neighbor = self.nbr_at_label(label, AmoebotParticle)

        if on_head:
            self.head = self.tail()
        self.global_tail_dir = -1
        neighbor.head = handover
        neighbor.global_tail_dir = pull_dir
        self.system.particle_map[handover] = neighbor

        self.system.register_movement(2)
        self.system.register_activation(neighbor)

    # Neighbourhood.

    def nbr_at_label(self, label: int, particle_type: type | None = None) -> Any:
        """Return the neighbour at ``label``, optionally checking its type."""
        node = self.nbr_node_reached_via_label(label)
        neighbor = self.system.particle_map.get(node)
        if neighbor is None:
            raise LookupError(f"no neighbour at label {label}")
        if particle_type is not None and not isinstance(neighbor, particle_type):
            raise TypeError(
                f"neighbour at label {label} is not a {particle_type.__name__}")
        return neighbor

    def has_nbr_at_label(self, label: int) -> bool:
        return self.nbr_node_reached_via_label(label) in self.system.particle_map

    def has_head_at_label(self, label: int) -> bool:
        """Whether a neighbour's head occupies the node reached via ``label``."""
        return (self.has_nbr_at_label(label)
                and self.nbr_at_label(label).head == self.nbr_node_reached_via_label(label))

    def has_tail_at_label(self, label: int) -> bool:
        """Whether a neighbour's tail occupies the node reached via ``label``."""
        if not self.has_nbr_at_label(label):
            return False
        neighbor = self.nbr_at_label(label)
        if neighbor.is_contracted():
            return False
        return neighbor.tail() == self.nbr_node_reached_via_label(label)

    def has_object_at_label(self, label: int) -> bool:
        return self.nbr_node_reached_via_label(label) in self.system.object_map

    def has_object_nbr(self) -> bool:
        return self.label_of_first_object_nbr() != -1

    def _labels_from(self, start_label: int) -> list[int]:
        limit = 6 if self.is_contracted() else 10
        return [(start_label + offset) % limit for offset in range(limit)]

    def label_of_first_object_nbr(self, start_label: int = 0) -> int:
        """First label, counter-clockwise from ``start_label``, facing an object."""
        return next((label for label in self._labels_from(start_label)
                     if self.has_object_at_label(label)), -1)

    def label_of_first_nbr_with_property(self, property_check: Callable[[Any], bool],
                                         start_label: int = 0) -> int:
        """First label, counter-clockwise from ``start_label``, facing a
        neighbour that satisfies ``property_check``; -1 if there is none."""
        for label in self._labels_from(start_label):
            if self.has_nbr_at_label(label) and property_check(self.nbr_at_label(label)):
                return label
        return -1

    # Tokens.

    def put_token(self, token: Token) -> None:
        self._tokens.append(token)

    def _matching(self, token_type: type[T],
                  property_check: Callable[[T], bool] | None):
        for index, token in enumerate(self._tokens):
            if isinstance(token, token_type) and (
                    property_check is None or property_check(token)):
                yield index, token

    def peek_at_token(self, token_type: type[T],
                      property_check: Callable[[T], bool] | None = None) -> T:
        """Return the first matching token without removing it."""
        for _, token in self._matching(token_type, property_check):
            return token
        raise LookupError(f"no {token_type.__name__} token held")

    def take_token(self, token_type: type[T],
                   property_check: Callable[[T], bool] | None = None) -> T:
        """Remove and return the first matching token.

        The token at the front of the collection takes the removed one's place.
        """
        for index, token in self._matching(token_type, property_check):
            self._tokens[0], self._tokens[index] = self._tokens[index], self._tokens[0]
            self._tokens.popleft()
            return token
        raise LookupError(f"no {token_type.__name__} token held")

    def count_tokens(self, token_type: type[T],
                     property_check: Callable[[T], bool] | None = None) -> int:
        return sum(1 for _ in self._matching(token_type, property_check))

    def has_token(self, token_type: type[T],
                  property_check: Callable[[T], bool] | None = None) -> bool:
        return any(True for _ in self._matching(token_type, property_check))