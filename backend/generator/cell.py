from typing import Tuple

Position = Tuple[int, int]  # (row, col)


class Cell:
    def __init__(self, row: int, col: int, occupied: bool = False):
        self.row = row
        self.col = col
        # Fixed at creation; nothing in the lot frees or fills a spot afterwards.
        self.occupied = occupied
        self.highlighted = False
        self.reserved = False
        self.goal = False

    @property
    def position(self) -> Position:
        return (self.row, self.col)

    def is_available(self) -> bool:
        """True if a driver could reserve this spot right now."""
        return not self.occupied and not self.reserved

    def __repr__(self) -> str:
        return (
            f"Cell({self.row}, {self.col}, occupied={self.occupied}, "
            f"highlighted={self.highlighted}, reserved={self.reserved}, goal={self.goal})"
        )
