"""Base particle holding what is needed to draw it."""

from __future__ import annotations

from amoebot.node import Node


class Particle:
    """A particle occupying its head node and, when expanded, a tail node.

    ``global_tail_dir`` is the global direction from head to tail, or -1 when
    the particle is contracted. Colors use the 0xrrggbb form, -1 for none.
    """

    def __init__(self, head: Node | None = None, global_tail_dir: int = -1) -> None:
        if not -1 <= global_tail_dir < 6:
            raise ValueError(f"global tail direction must be in -1..5, got {global_tail_dir}")
        self.head = head if head is not None else Node()
        self.global_tail_dir = global_tail_dir

    def is_contracted(self) -> bool:
        return self.global_tail_dir == -1

    def is_expanded(self) -> bool:
        return not self.is_contracted()

    def tail(self) -> Node:
        """Return the node occupied by the tail; the particle must be expanded."""
        if self.is_contracted():
            raise ValueError("a contracted particle has no tail")
        return self.head.node_in_dir(self.global_tail_dir)

    def head_mark_color(self) -> int:
        return -1

    def tail_mark_color(self) -> int:
        return -1

    def head_mark_global_dir(self) -> int:
        return -1

    def tail_mark_global_dir(self) -> int:
        return -1

    def border_colors(self) -> list[int]:
        """Colors of the 18 possible border segments."""
        return [-1] * 18

    def border_point_colors(self) -> list[int]:
        """Colors of the 6 possible border points."""
        return [-1] * 6

    def inspection_text(self) -> str:
        """Text shown when the particle is inspected."""
        return "Overwrite Particle::inspectionText() to specify an inspection text."

    def __repr__(self) -> str:
        return f"{type(self).__name__}(head={self.head!r}, global_tail_dir={self.global_tail_dir})"