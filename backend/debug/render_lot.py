import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from core.config import LotConfig
from core.reservation_controller import ReservationController
from generator.grid_preview import preview_rows
from generator.parking_lot_generator import ParkingLotGenerator
from planning.path_finder import PathFinder


def print_lot(grid, title):
    print(title)
    for index, row_str in enumerate(preview_rows(grid)):
        print(f"{index:2d} {row_str}")
    print()


def parse_args(config: LotConfig):
    p = argparse.ArgumentParser(description="Print a parking lot and one navigation on it.")

    p.add_argument("--seed", type=int, default=config.seed)

    p.add_argument("--rows", type=int, default=config.rows)
    p.add_argument("--cols", type=int, default=config.cols)
    p.add_argument("--occupancy", type=float, default=config.occupancy_probability)

    p.add_argument("--reserve", type=int, nargs=2, metavar=("ROW", "COL"),
                   help="reserve this spot and route to it instead of the nearest spot")
    p.add_argument("--avoid-occupied", action="store_true", default=config.avoid_occupied)
    p.add_argument("--verbose", action="store_true")

    return p.parse_args()


def run_once(args):
    grid = ParkingLotGenerator(args.rows, args.cols, args.occupancy, seed=args.seed).generate()
    controller = ReservationController(grid, path_finder=PathFinder(avoid_occupied=args.avoid_occupied))

    print_lot(controller.snapshot(), "Lot:")

    if args.reserve:
        row, col = args.reserve
        outcome = controller.reserve(row, col)
        print(f"reserve({row}, {col}) -> {outcome.code.value}")
        if outcome.ok:
            outcome = controller.navigate_to_reserved()
            print(f"navigate_to_reserved() -> {outcome.code.value}")
    else:
        outcome = controller.navigate_to_nearest_spot()
        print(f"navigate_to_nearest_spot() -> {outcome.code.value}")

    if outcome.ok and outcome.path:
        print(f"target={outcome.target} steps={len(outcome.path)}")

    print_lot(controller.snapshot(), "After:")
    return outcome


def main():
    config = LotConfig.from_env()
    args = parse_args(config)
    logging.basicConfig(level=logging.DEBUG if args.verbose else config.log_level)
    run_once(args)


if __name__ == "__main__":
    main()
