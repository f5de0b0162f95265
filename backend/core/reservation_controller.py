'''
ReservationController is not an algorithm.
It is a policy layer over one parking lot.

Its responsibilities are:

1) Apply reservation requests to the grid

2) Call the path finder / spot locator

3) Turn their answers into highlight and goal updates

4) Report every result as an Outcome
'''

import logging
import threading
from typing import Optional

from core.outcomes import Outcome, OutcomeCode
from generator.cell import Position
from generator.grid import Grid
from planning.path_finder import PathFinder
from planning.spot_locator import SpotLocator

logger = logging.getLogger(__name__)


class ReservationController:
    def __init__(
        self,
        grid: Grid,
        path_finder: Optional[PathFinder] = None,
        spot_locator: Optional[SpotLocator] = None,
    ):
        self.grid = grid
        self.path_finder = path_finder or PathFinder()
        self.spot_locator = spot_locator or SpotLocator()
        # One lock per lot; the HTTP layer may call in from several threads.
        self._lock = threading.Lock()

    # ---------------- read side ----------------

    @property
    def reserved_spot(self) -> Optional[Position]:
        return self.grid.reserved_spot

    @property
    def has_reservation(self) -> bool:
        return self.grid.reserved_spot is not None

    def snapshot(self) -> Grid:
        with self._lock:
            return self.grid.snapshot()

    # ---------------- reservations ----------------

    def reserve(self, row: int, col: int) -> Outcome:
        spot = (row, col)

        with self._lock:
            self.grid.validate_position(spot)

            if self.grid.reserved_spot == spot:
                return Outcome.success(target=spot)

            if not self.grid.try_set_reserved(spot):
                logger.info("Spot %s is not available", spot)
                return Outcome.failure(OutcomeCode.SPOT_UNAVAILABLE, target=spot)

        logger.info("Reserved spot %s", spot)
        return Outcome.success(target=spot)

    # ---------------- navigation ----------------

    def navigate_to_reserved(self) -> Outcome:
        with self._lock:
            spot = self.grid.reserved_spot
            if spot is None:
                return Outcome.failure(OutcomeCode.NO_ACTIVE_RESERVATION)

            return self._route_to(spot)

    def navigate_to_nearest_spot(self) -> Outcome:
        """Route from the vehicle entrance to the free spot nearest the pedestrian entrance."""
        with self._lock:
            nearest = self.spot_locator.find_nearest_free(self.grid, self.grid.pedestrian_entrance)
            if nearest is None:
                logger.info("Lot is full")
                return Outcome.failure(OutcomeCode.LOT_FULL)

            return self._route_to(nearest.position)

    def _route_to(self, spot: Position) -> Outcome:
        # Caller holds the lock.
        path = self.path_finder.find_path(self.grid, self.grid.vehicle_entrance, spot)

        if path is None:
            logger.info("No path from %s to %s", self.grid.vehicle_entrance, spot)
            return Outcome.failure(OutcomeCode.NO_PATH_FOUND, target=spot)

        self.grid.set_highlighted(path)
        self.grid.set_goal(spot)

        logger.info("Route to %s: %d steps", spot, len(path))
        return Outcome.success(target=spot, path=path)
