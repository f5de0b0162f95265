# planning/grid_search.py
from collections import deque
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from generator.cell import Position
from generator.grid import Grid

# up, down, left, right; this order decides ties between equally near cells
DIRECTIONS: Tuple[Position, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class PathNode:
    position: Position
    path: Tuple[Position, ...] = ()  # origin .. predecessor, excluding `position`

    def route(self) -> Tuple[Position, ...]:
        """Cells after the origin up to and including this node."""
        return self.path[1:] + (self.position,)


def breadth_first_search(
    grid: Grid,
    origin: Position,
    accept: Callable[[Position], bool],
    can_enter: Optional[Callable[[Position], bool]] = None,
) -> Optional[PathNode]:
    """
    Uniform-cost search over the 4-connected grid.

    Args:
        grid: lot to search; only read.
        origin: first node dequeued. It is always expanded, whatever `can_enter` says.
        accept: checked on each node when it is dequeued; the first match is returned.
        can_enter: optional filter on neighbours before they are queued.

    A position may sit in the queue several times but is expanded at most once.
    Returns None when the queue runs dry.
    """
    grid.validate_position(origin)

    queue = deque([PathNode(tuple(origin))])
    visited = set()
    in_bounds = grid.in_bounds

    while queue:
        node = queue.popleft()
        pos = node.position

        if pos in visited:
            continue
        visited.add(pos)

        if accept(pos):
            return node

        row, col = pos
        next_path = node.path + (pos,)
        for dr, dc in DIRECTIONS:
            neighbor = (row + dr, col + dc)

            if not in_bounds(neighbor) or neighbor in visited:
                continue
            if can_enter is not None and not can_enter(neighbor):
                continue

            queue.append(PathNode(neighbor, next_path))

    return None
