"""Camera over the lattice and conversions between nodes and world space."""

from __future__ import annotations

import math
import threading

from amoebot.node import Node

Point = tuple[float, float]

ZOOM_INIT = 16.0
ZOOM_MIN = 4.0
ZOOM_MAX = 128.0
ZOOM_ATTENUATION = 500.0

# Extra world-space margin around the visible area when culling particles.
_SLACK = 2.0

# Height of a triangle of the lattice with unit side length.
TRIANGLE_HEIGHT = math.sqrt(3.0 / 4.0)


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    magnitude = math.floor(abs(value) + 0.5)
    return int(-magnitude if value < 0 else magnitude)


def node_to_world_coord(node: Node) -> Point:
    """World-space position of the centre of ``node``."""
    return (node.x + 0.5 * node.y, node.y * TRIANGLE_HEIGHT)


def world_coord_to_node(point: Point) -> Node:
    """Lattice node closest to the world-space ``point``."""
    px, py = point
    y = _round_half_away(py / TRIANGLE_HEIGHT)
    x = _round_half_away(px - 0.5 * y)
    return Node(x, y)


class View:
    """A zoomable, pannable window onto world space.

    The focus position is the world point at the centre of the viewport; zoom
    is the number of viewport pixels per world unit.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._viewport_width = 900
        self._viewport_height = 600
        self._focus_pos: Point = (0.0, 0.0)
        self._zoom = ZOOM_INIT

    @property
    def zoom(self) -> float:
        return self._zoom

    @property
    def focus_pos(self) -> Point:
        return self._focus_pos

    @property
    def viewport_size(self) -> tuple[int, int]:
        return (self._viewport_width, self._viewport_height)

    def left(self) -> float:
        with self._lock:
            return self._focus_pos[0] - 0.5 / self._zoom * self._viewport_width

    def right(self) -> float:
        with self._lock:
            return self._focus_pos[0] + 0.5 / self._zoom * self._viewport_width

    def bottom(self) -> float:
        with self._lock:
            return self._focus_pos[1] - 0.5 / self._zoom * self._viewport_height

    def top(self) -> float:
        with self._lock:
            return self._focus_pos[1] + 0.5 / self._zoom * self._viewport_height

    def includes(self, pos: Point) -> bool:
        """Whether ``pos`` lies in the visible area, with a small margin."""
        with self._lock:
            x, y = pos
            return (self.left() - _SLACK <= x <= self.right() + _SLACK
                    and self.bottom() - _SLACK <= y <= self.top() + _SLACK)

    def set_viewport_size(self, width: int, height: int) -> None:
        with self._lock:
            self._viewport_width = width
            self._viewport_height = height

    def set_focus_pos(self, pos: Point) -> None:
        with self._lock:
            self._focus_pos = (float(pos[0]), float(pos[1]))

    def set_zoom(self, zoom: float) -> None:
        """Set the zoom, clamped to the allowed range."""
        with self._lock:
            self._zoom = min(max(zoom, ZOOM_MIN), ZOOM_MAX)

    def modify_focus_pos(self, mouse_offset: Point) -> None:
        """Pan by a mouse offset given in viewport pixels."""
        with self._lock:
            fx, fy = self._focus_pos
            self._focus_pos = (fx + mouse_offset[0] / self._zoom,
                               fy + mouse_offset[1] / self._zoom)

    def modify_zoom(self, mouse_pos: Point, mouse_angle_delta: float) -> None:
        """Zoom by a wheel delta, keeping the point under the cursor fixed."""
        with self._lock:
            mx, my = mouse_pos
            old_x = self.left() + mx / self._zoom
            old_y = self.bottom() + my / self._zoom
            self.set_zoom(self._zoom * math.exp(mouse_angle_delta / ZOOM_ATTENUATION))
            new_x = self.left() + mx / self._zoom
            new_y = self.bottom() + my / self._zoom
            fx, fy = self._focus_pos
            self._focus_pos = (fx + old_x - new_x, fy + old_y - new_y)