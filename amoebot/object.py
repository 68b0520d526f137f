"""Single nodes of solid objects placed in the lattice."""

from __future__ import annotations

from dataclasses import dataclass, field

from amoebot.node import Node


@dataclass
class Object:
    """One node of a solid object; particles can sense it but it never moves."""

    node: Node = field(default_factory=Node)