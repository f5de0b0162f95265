import threading

import pytest

from core.navigation_errors import InvalidCoordinateError
from core.outcomes import OutcomeCode
from core.reservation_controller import ReservationController
from generator.grid_preview import preview_rows
from generator.parking_lot_generator import ParkingLotGenerator
from planning.path_finder import PathFinder


def create_controller(rows=4, cols=10, occupied=(), avoid_occupied=False):
    occupancy = [[(r, c) in occupied for c in range(cols)] for r in range(rows)]
    grid = ParkingLotGenerator.from_occupancy(occupancy)
    return ReservationController(grid, path_finder=PathFinder(avoid_occupied=avoid_occupied))


def state(controller):
    return [
        (c.position, c.occupied, c.highlighted, c.reserved, c.goal)
        for c in controller.grid.iter_cells()
    ]


def positions(controller, name):
    return {c.position for c in controller.grid.iter_cells() if getattr(c, name)}


# -------------------------------------------------
# reserve
# -------------------------------------------------

def test_reserve_success():
    controller = create_controller()
    outcome = controller.reserve(2, 4)

    assert outcome.ok
    assert outcome.target == (2, 4)
    assert controller.has_reservation
    assert controller.reserved_spot == (2, 4)
    assert positions(controller, "highlighted") == {(2, 4)}


def test_reserve_occupied_spot_in_full_first_row():
    controller = create_controller(occupied={(0, c) for c in range(1, 10)})
    before = state(controller)

    outcome = controller.reserve(0, 5)

    assert outcome.code == OutcomeCode.SPOT_UNAVAILABLE
    assert not outcome.ok
    assert state(controller) == before
    assert not controller.has_reservation


def test_second_reservation_moves_the_reservation():
    controller = create_controller()
    assert controller.reserve(3, 0).ok
    assert controller.reserve(1, 1).ok

    assert controller.grid.get_cell((3, 0)).reserved is False
    assert controller.grid.get_cell((1, 1)).reserved is True
    assert positions(controller, "reserved") == {(1, 1)}


def test_reserving_held_spot_again_is_a_no_op_success():
    controller = create_controller()
    controller.reserve(1, 1)
    controller.navigate_to_reserved()
    before = state(controller)

    outcome = controller.reserve(1, 1)

    assert outcome.ok
    assert state(controller) == before


def test_at_most_one_reservation_after_many_calls():
    controller = create_controller(occupied={(1, 1), (2, 2)})
    for row, col in [(0, 1), (1, 1), (3, 3), (2, 2), (3, 3), (0, 9)]:
        controller.reserve(row, col)
        assert len(positions(controller, "reserved")) == 1

    assert controller.reserved_spot == (0, 9)


def test_reserve_out_of_bounds_raises():
    controller = create_controller()
    with pytest.raises(InvalidCoordinateError):
        controller.reserve(4, 0)
    assert not controller.has_reservation


# -------------------------------------------------
# navigate_to_reserved
# -------------------------------------------------

def test_navigate_without_reservation():
    controller = create_controller()
    before = state(controller)

    outcome = controller.navigate_to_reserved()

    assert outcome.code == OutcomeCode.NO_ACTIVE_RESERVATION
    assert state(controller) == before


def test_navigate_to_reserved_highlights_path_and_goal():
    controller = create_controller(occupied={(0, 1), (1, 1)})
    controller.reserve(2, 3)

    outcome = controller.navigate_to_reserved()

    assert outcome.ok
    assert outcome.target == (2, 3)
    assert len(outcome.path) == 5
    assert outcome.path[-1] == (2, 3)
    assert positions(controller, "highlighted") == set(outcome.path)
    assert positions(controller, "goal") == {(2, 3)}
    # reservation survives navigation
    assert controller.reserved_spot == (2, 3)


def test_navigate_to_reserved_no_path_leaves_state_unchanged():
    # strict routing with the spot sealed off by occupied cells
    occupied = {(0, 2), (1, 2), (2, 2), (3, 2)}
    controller = create_controller(occupied=occupied, avoid_occupied=True)
    controller.reserve(1, 5)
    before = state(controller)

    outcome = controller.navigate_to_reserved()

    assert outcome.code == OutcomeCode.NO_PATH_FOUND
    assert outcome.target == (1, 5)
    assert state(controller) == before


# -------------------------------------------------
# navigate_to_nearest_spot
# -------------------------------------------------

def test_nearest_spot_on_empty_lot():
    controller = create_controller()

    outcome = controller.navigate_to_nearest_spot()

    assert outcome.ok
    assert outcome.target == (3, 9)
    assert len(outcome.path) == 3 + 9
    assert outcome.path[-1] == (3, 9)
    assert positions(controller, "goal") == {(3, 9)}
    assert positions(controller, "highlighted") == set(outcome.path)


def test_nearest_spot_skips_occupied_pedestrian_entrance():
    controller = create_controller(occupied={(3, 9)})
    outcome = controller.navigate_to_nearest_spot()

    assert outcome.target == (2, 9)
    assert len(outcome.path) == 2 + 9


def test_nearest_spot_on_full_lot():
    grid = ParkingLotGenerator(4, 10, occupancy_probability=1.0).generate()
    controller = ReservationController(grid)
    before = state(controller)

    outcome = controller.navigate_to_nearest_spot()

    assert outcome.code == OutcomeCode.LOT_FULL
    assert outcome.path == []
    assert state(controller) == before


def test_nearest_spot_replaces_previous_route():
    controller = create_controller()
    controller.reserve(1, 1)
    controller.navigate_to_reserved()
    controller.navigate_to_nearest_spot()

    assert positions(controller, "goal") == {(3, 9)}
    assert (1, 1) not in positions(controller, "highlighted")
    # the reservation itself is kept
    assert controller.reserved_spot == (1, 1)


def test_preview_after_navigation():
    controller = create_controller(rows=2, cols=3, occupied={(0, 1)})
    controller.reserve(1, 1)
    controller.navigate_to_reserved()

    assert preview_rows(controller.snapshot()) == [
        "EX.",
        "*GP",
    ]


def test_concurrent_reservations_keep_one_reserved_cell():
    controller = create_controller()
    spots = [(r, c) for r in range(4) for c in range(10)]

    threads = [threading.Thread(target=controller.reserve, args=spot) for spot in spots]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(positions(controller, "reserved")) == 1
    assert controller.reserved_spot in spots
