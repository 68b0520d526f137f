"""Nodes of the triangular lattice."""

from __future__ import annotations

from dataclasses import dataclass

# Offsets for the six global directions, clockwise from east:
# 0=E, 1=NE, 2=NW, 3=W, 4=SW, 5=SE.
_X_OFFSET = (1, 0, -1, -1, 0, 1)
_Y_OFFSET = (0, 1, 1, 0, -1, -1)


@dataclass(frozen=True, order=True)
class Node:
    """A node (x, y) on the triangular lattice.

    The x-axis runs left-right and the y-axis runs northeast-southwest.
    Nodes order by x first and then by y.
    """

    x: int = 0
    y: int = 0

    def node_in_dir(self, direction: int) -> Node:
        """Return the adjacent node in the given global direction (0-5)."""
        if not 0 <= direction <= 5:
            raise ValueError(f"direction must be in 0..5, got {direction}")
        return Node(self.x + _X_OFFSET[direction], self.y + _Y_OFFSET[direction])