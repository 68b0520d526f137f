"""Particles restricted to local compasses and port labels.

A direction is a number in 0..5. Global direction 0 points right in the
triangular lattice and global directions increase clockwise. Each particle has
an orientation in 0..5 and sees local direction
``(global_dir - orientation + 6) % 6``.

A label is a number in 0..9 naming an edge from the particle to a neighbouring
node it does not occupy. For a contracted particle, the edge in local direction
0 has label 0. For an expanded particle, when two edges point in local
direction 0, the one leading to a node adjacent to only one of the occupied
nodes gets label 0. Labels increase counter-clockwise from label 0.
"""

from __future__ import annotations

from amoebot.node import Node
from amoebot.particle import Particle

_SIX_LABELS: tuple[int, ...] = (0, 1, 2, 3, 4, 5)

# Head labels of an expanded particle, indexed by the local tail direction.
_LABELS: tuple[tuple[int, ...], ...] = (
    (3, 4, 5, 6, 7),
    (4, 5, 6, 7, 8),
    (7, 8, 9, 0, 1),
    (8, 9, 0, 1, 2),
    (9, 0, 1, 2, 3),
    (2, 3, 4, 5, 6),
)

_CONTRACT_LABELS: tuple[int, ...] = (0, 1, 4, 5, 6, 9)

# Local direction of each label of an expanded particle, indexed by the local
# tail direction.
_LABEL_DIR: tuple[tuple[int, ...], ...] = (
    (0, 1, 2, 1, 2, 3, 4, 5, 4, 5),
    (0, 1, 2, 3, 2, 3, 4, 5, 0, 5),
    (0, 1, 0, 1, 2, 3, 4, 3, 4, 5),
    (0, 1, 2, 1, 2, 3, 4, 5, 4, 5),
    (0, 1, 2, 3, 2, 3, 4, 5, 0, 5),
    (0, 1, 0, 1, 2, 3, 4, 3, 4, 5),
)


def _check_dir(direction: int, what: str = "direction") -> None:
    if not 0 <= direction < 6:
        raise ValueError(f"{what} must be in 0..5, got {direction}")


def _check_label(label: int, limit: int = 10) -> None:
    if not 0 <= label < limit:
        raise ValueError(f"label must be in 0..{limit - 1}, got {label}")


class LocalParticle(Particle):
    """A particle that addresses its surroundings through local port labels."""

    def __init__(self, head: Node | None = None, global_tail_dir: int = -1,
                 orientation: int = 0) -> None:
        super().__init__(head, global_tail_dir)
        _check_dir(orientation, "orientation")
        self.orientation = orientation

    def _require_expanded(self) -> None:
        if self.is_contracted():
            raise ValueError("the particle must be expanded")

    def _require_contracted(self) -> None:
        if self.is_expanded():
            raise ValueError("the particle must be contracted")

    def tail_dir(self) -> int:
        """Local direction from head to tail, or -1 when contracted."""
        if self.is_contracted():
            return -1
        return self.global_to_local_dir(self.global_tail_dir)

    def label_to_dir(self, label: int) -> int:
        """Local direction the edge with the given label points to."""
        if self.is_contracted():
            _check_label(label, 6)
            return label
        _check_label(label)
        return _LABEL_DIR[self.tail_dir()][label]

    def label_to_dir_after_expansion(self, label: int, expansion_dir: int) -> int:
        """Local direction of the label after expanding in ``expansion_dir``."""
        self._require_contracted()
        _check_label(label)
        _check_dir(expansion_dir, "expansion direction")
        return _LABEL_DIR[(expansion_dir + 3) % 6][label]

    def unique_labels(self) -> list[int]:
        """Labels that address each neighbouring node exactly once."""
        if self.is_contracted():
            return list(_SIX_LABELS)
        return [
            label
            for label in range(10)
            if self.nbr_node_reached_via_label(label)
            != self.nbr_node_reached_via_label((label + 9) % 10)
        ]

    def head_labels(self) -> tuple[int, ...]:
        """Labels of the edges incident to the head."""
        if self.is_contracted():
            return _SIX_LABELS
        return _LABELS[self.tail_dir()]

    def tail_labels(self) -> tuple[int, ...]:
        """Labels of the edges incident to the tail."""
        self._require_expanded()
        return _LABELS[(self.tail_dir() + 3) % 6]

    def is_head_label(self, label: int) -> bool:
        _check_label(label)
        return label in self.head_labels()

    def is_tail_label(self, label: int) -> bool:
        self._require_expanded()
        _check_label(label)
        return label in self.tail_labels()

    def dir_to_head_label(self, direction: int) -> int:
        """Head label of the edge pointing in the given local direction."""
        _check_dir(direction)
        for label in self.head_labels():
            if self.label_to_dir(label) == direction:
                return label
        raise ValueError(f"no head label points in direction {direction}")

    def dir_to_tail_label(self, direction: int) -> int:
        """Tail label of the edge pointing in the given local direction."""
        self._require_expanded()
        _check_dir(direction)
        for label in self.tail_labels():
            if self.label_to_dir(label) == direction:
                return label
        raise ValueError(f"no tail label points in direction {direction}")

    def head_contraction_label(self) -> int:
        """Label to pass to a contraction that gives up the head."""
        self._require_expanded()
        return _CONTRACT_LABELS[self.tail_dir()]

    def tail_contraction_label(self) -> int:
        """Label to pass to a contraction that gives up the tail."""
        self._require_expanded()
        return _CONTRACT_LABELS[(self.tail_dir() + 3) % 6]

    def head_labels_after_expansion(self, expansion_dir: int) -> tuple[int, ...]:
        self._require_contracted()
        _check_dir(expansion_dir, "expansion direction")
        return _LABELS[(expansion_dir + 3) % 6]

    def tail_labels_after_expansion(self, expansion_dir: int) -> tuple[int, ...]:
        self._require_contracted()
        _check_dir(expansion_dir, "expansion direction")
        return _LABELS[expansion_dir]

    def is_head_label_after_expansion(self, label: int, expansion_dir: int) -> bool:
        return label in self.head_labels_after_expansion(expansion_dir)

    def is_tail_label_after_expansion(self, label: int, expansion_dir: int) -> bool:
        return label in self.tail_labels_after_expansion(expansion_dir)

    def dir_to_head_label_after_expansion(self, direction: int, expansion_dir: int) -> int:
        _check_dir(direction)
        for label in self.head_labels_after_expansion(expansion_dir):
            if self.label_to_dir_after_expansion(label, expansion_dir) == direction:
                return label
        raise ValueError(f"no head label points in direction {direction}")

    def dir_to_tail_label_after_expansion(self, direction: int, expansion_dir: int) -> int:
        _check_dir(direction)
        for label in self.tail_labels_after_expansion(expansion_dir):
            if self.label_to_dir_after_expansion(label, expansion_dir) == direction:
                return label
        raise ValueError(f"no tail label points in direction {direction}")

    def head_contraction_label_after_expansion(self, expansion_dir: int) -> int:
        self._require_contracted()
        _check_dir(expansion_dir, "expansion direction")
        return _CONTRACT_LABELS[(expansion_dir + 3) % 6]

    def tail_contraction_label_after_expansion(self, expansion_dir: int) -> int:
        self._require_contracted()
        _check_dir(expansion_dir, "expansion direction")
        return _CONTRACT_LABELS[expansion_dir]

    def label_to_global_dir(self, label: int) -> int:
        """Global direction the edge with the given label points to."""
        _check_label(label)
        return self.local_to_global_dir(self.label_to_dir(label))

    def label_of_nbr_node_in_global_dir(self, node: Node, global_dir: int) -> int:
        """Label of the edge in ``global_dir`` that leads to ``node``."""
        _check_dir(global_dir, "global direction")
        limit = 6 if self.is_contracted() else 10
        for label in range(limit):
            if (self.label_to_global_dir(label) == global_dir
                    and self.nbr_node_reached_via_label(label) == node):
                return label
        raise ValueError(f"{node!r} is not reached in global direction {global_dir}")

    def occupied_node_incident_to_label(self, label: int) -> Node:
        """Head if the label is a head label, tail otherwise."""
        if self.is_contracted():
            _check_label(label, 6)
            return self.head
        _check_label(label)
        return self.head if self.is_head_label(label) else self.tail()

    def nbr_node_reached_via_label(self, label: int) -> Node:
        """Node reached from the particle over the edge with the given label."""
        if self.is_contracted():
            _check_label(label, 6)
            return self.head.node_in_dir((self.orientation + label) % 6)
        _check_label(label)
        incident = self.occupied_node_incident_to_label(label)
        return incident.node_in_dir(self.label_to_global_dir(label))

    def local_to_global_dir(self, local_dir: int) -> int:
        _check_dir(local_dir)
        return (self.orientation + local_dir) % 6

    def global_to_local_dir(self, global_dir: int) -> int:
        _check_dir(global_dir)
        return (global_dir - self.orientation + 6) % 6

    def nbr_dir_to_dir(self, nbr: LocalParticle, nbr_dir: int) -> int:
        """Convert a direction of the neighbour's compass to this compass."""
        _check_dir(nbr_dir)
        return self.global_to_local_dir(nbr.local_to_global_dir(nbr_dir))

    def dir_to_nbr_dir(self, nbr: LocalParticle, my_dir: int) -> int:
        """Convert a direction of this compass to the neighbour's compass."""
        _check_dir(my_dir)
        return nbr.global_to_local_dir(self.local_to_global_dir(my_dir))

    def points_at_me(self, nbr: LocalParticle, nbr_label: int) -> bool:
        """Whether the neighbour's labelled edge leads to this particle."""
        _check_label(nbr_label)
        if self.is_contracted():
            return self.points_at_my_head(nbr, nbr_label)
        return (self.points_at_my_head(nbr, nbr_label)
                or self.points_at_my_tail(nbr, nbr_label))

    def points_at_my_head(self, nbr: LocalParticle, nbr_label: int) -> bool:
        _check_label(nbr_label)
        return nbr.nbr_node_reached_via_label(nbr_label) == self.head

    def points_at_my_tail(self, nbr: LocalParticle, nbr_label: int) -> bool:
        self._require_expanded()
        _check_label(nbr_label)
        return nbr.nbr_node_reached_via_label(nbr_label) == self.tail()