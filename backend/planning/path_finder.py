'''
PathFinder answers "how do I drive from here to that spot?".

By default the route may cross occupied spots; only the destination has to be
free. With avoid_occupied=True occupied spots are never entered.
'''

import logging
from typing import List, Optional

from generator.cell import Position
from generator.grid import Grid
from planning.grid_search import breadth_first_search

logger = logging.getLogger(__name__)


def manhattan(a: Position, b: Position) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class PathFinder:
    def __init__(self, avoid_occupied: bool = False):
        self.avoid_occupied = avoid_occupied

    def find_path(self, grid: Grid, start: Position, goal: Position) -> Optional[List[Position]]:
        """
        Shortest route from `start` (exclusive) to `goal` (inclusive), or None.

        An occupied goal is never accepted, so it yields None even when it is
        geometrically reachable. start == goal on a free cell gives [goal].
        """
        grid.validate_position(start)
        grid.validate_position(goal)
        target = tuple(goal)

        def accept(pos: Position) -> bool:
            return pos == target and not grid.get_cell(pos).occupied

        can_enter = None
        if self.avoid_occupied:
            def can_enter(pos: Position) -> bool:
                return not grid.get_cell(pos).occupied

        node = breadth_first_search(grid, start, accept, can_enter)

        if node is None:
            logger.debug("No path from %s to %s", tuple(start), target)
            return None

        path = list(node.route())
        logger.debug("Path from %s to %s: %d steps", tuple(start), target, len(path))
        return path
