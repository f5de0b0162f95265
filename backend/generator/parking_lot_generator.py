import logging
import random
from typing import Optional, Sequence

from generator.grid import Grid

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    pass


class ParkingLotGenerator:
    def __init__(
        self,
        rows: int,
        cols: int,
        occupancy_probability: float = 0.3,
        seed: Optional[int] = None,
    ):
        if rows < 1 or cols < 1:
            raise GenerationError(
                f"Parking lot must be at least 1x1 (got {rows}x{cols})"
            )
        if not 0.0 <= occupancy_probability <= 1.0:
            raise GenerationError(
                f"Occupancy probability must be within [0, 1] (got {occupancy_probability})"
            )

        self.rows = rows
        self.cols = cols
        self.occupancy_probability = occupancy_probability
        self._rng = random.Random(seed)

    def generate(self) -> Grid:
        grid = Grid(self.rows, self.cols)

        for cell in grid.iter_cells():
            cell.occupied = self._rng.random() < self.occupancy_probability

        logger.debug(
            "Generated %dx%d lot with %d free spots",
            self.rows, self.cols, len(grid.free_positions()),
        )
        return grid

    @staticmethod
    def from_occupancy(occupancy: Sequence[Sequence[bool]]) -> Grid:
        """
        Builds a grid from an explicit occupancy matrix, indexed [row][col].
        All other flags start cleared.
        """
        if not occupancy or not occupancy[0]:
            raise GenerationError("Occupancy matrix must have at least one row and one column")

        cols = len(occupancy[0])
        for row_index, row in enumerate(occupancy):
            if len(row) != cols:
                raise GenerationError(
                    f"Occupancy row {row_index} has {len(row)} cells, expected {cols}"
                )

        grid = Grid(len(occupancy), cols)
        for cell in grid.iter_cells():
            cell.occupied = bool(occupancy[cell.row][cell.col])

        return grid
