import logging
from typing import Optional

from generator.cell import Position
from generator.grid import Grid
from planning.grid_search import PathNode, breadth_first_search

logger = logging.getLogger(__name__)


class SpotLocator:
    """Finds the free spot closest (in steps) to an origin, the pedestrian entrance by default."""

    def find_nearest_free(self, grid: Grid, origin: Optional[Position] = None) -> Optional[PathNode]:
        if origin is None:
            origin = grid.pedestrian_entrance

        node = breadth_first_search(
            grid,
            origin,
            accept=lambda pos: not grid.get_cell(pos).occupied,
        )

        if node is None:
            logger.debug("No free spot reachable from %s", tuple(origin))
        return node
