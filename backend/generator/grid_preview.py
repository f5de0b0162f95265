from typing import List

from generator.cell import Cell
from generator.grid import Grid

SYMBOLS = {
    "vehicle_entrance": "E",
    "pedestrian_entrance": "P",
    "goal": "G",
    "highlighted": "*",
    "reserved": "R",
    "occupied": "X",
    "free": ".",
}


def cell_symbol(grid: Grid, cell: Cell) -> str:
    # Entrance markers are drawn on top of whatever the cell holds.
    if cell.position == grid.vehicle_entrance:
        return SYMBOLS["vehicle_entrance"]
    if cell.position == grid.pedestrian_entrance:
        return SYMBOLS["pedestrian_entrance"]
    if cell.goal:
        return SYMBOLS["goal"]
    if cell.highlighted:
        return SYMBOLS["highlighted"]
    if cell.reserved:
        return SYMBOLS["reserved"]
    if cell.occupied:
        return SYMBOLS["occupied"]
    return SYMBOLS["free"]


def preview_rows(grid: Grid) -> List[str]:
    """One string per grid row, e.g. ['E.X.', '..*P']."""
    return [
        "".join(cell_symbol(grid, cell) for cell in row)
        for row in grid.cells
    ]
