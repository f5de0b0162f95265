import copy
from typing import Iterable, Iterator, List, Optional

from core.navigation_errors import InvalidCoordinateError
from generator.cell import Cell, Position


class Grid:
    """Occupancy, reservation, highlight and goal state of a parking lot.

    The grid has a single owner (the reservation controller). Mutators check
    their input before writing anything, so a rejected call leaves every cell
    as it was.
    """

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        self.cells = [
            [Cell(row, col) for col in range(cols)]
            for row in range(rows)
        ]
        self.reserved_spot: Optional[Position] = None

    # ------------------------
    # Fixed markers
    # ------------------------

    @property
    def vehicle_entrance(self) -> Position:
        return (0, 0)

    @property
    def pedestrian_entrance(self) -> Position:
        return (self.rows - 1, self.cols - 1)

    # ------------------------
    # Queries
    # ------------------------

    def in_bounds(self, pos: Position) -> bool:
        row, col = pos
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_cell(self, pos: Position) -> Cell:
        row, col = pos
        return self.cells[row][col]

    def iter_cells(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def free_positions(self) -> List[Position]:
        return [cell.position for cell in self.iter_cells() if not cell.occupied]

    def validate_position(self, pos: Position) -> None:
        if not self.in_bounds(pos):
            raise InvalidCoordinateError(
                f"Cell {tuple(pos)} is outside the {self.rows}x{self.cols} lot"
            )

    # ------------------------
    # Mutators
    # ------------------------

    def set_highlighted(self, path: Iterable[Position]) -> None:
        on_path = {tuple(pos) for pos in path}
        for pos in on_path:
            self.validate_position(pos)

        for cell in self.iter_cells():
            cell.highlighted = cell.position in on_path

    def set_goal(self, pos: Position) -> None:
        self.validate_position(pos)
        target = tuple(pos)

        for cell in self.iter_cells():
            cell.goal = cell.position == target

    def try_set_reserved(self, pos: Position) -> bool:
        """Reserve `pos` if it is free; returns False and changes nothing otherwise.

        A successful reservation replaces the previous one and highlights only
        the reserved cell, so the driver sees the new target straight away.
        """
        self.validate_position(pos)
        target = tuple(pos)

        if not self.get_cell(target).is_available():
            return False

        for cell in self.iter_cells():
            is_target = cell.position == target
            cell.reserved = is_target
            cell.highlighted = is_target

        self.reserved_spot = target
        return True

    def snapshot(self) -> "Grid":
        """Copy for readers that must not touch the owner's grid."""
        return copy.deepcopy(self)
