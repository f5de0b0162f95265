"""
Lot configuration.

Loads settings from environment variables (and a local .env file) with the
reference lot as defaults: 4 rows, 10 columns, 30% of spots taken.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

_TRUE_VALUES = {"1", "true", "yes", "on"}
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass
class LotConfig:
    rows: int = 4
    cols: int = 10
    occupancy_probability: float = 0.3
    # Strict routing: never drive through occupied spots.
    avoid_occupied: bool = False
    seed: Optional[int] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LotConfig":
        if environ is None:
            load_dotenv()
            environ = os.environ

        seed = environ.get("PARKING_SEED")

        config = cls(
            rows=int(environ.get("PARKING_ROWS", "4")),
            cols=int(environ.get("PARKING_COLS", "10")),
            occupancy_probability=float(environ.get("PARKING_OCCUPANCY_PROBABILITY", "0.3")),
            avoid_occupied=environ.get("PARKING_AVOID_OCCUPIED", "false").strip().lower() in _TRUE_VALUES,
            seed=int(seed) if seed not in (None, "") else None,
            log_level=environ.get("LOG_LEVEL", "INFO").upper(),
        )
        config.validate()
        return config

    def validate(self) -> None:
        """Raise ValueError if any setting is unusable."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"Lot must be at least 1x1, got {self.rows}x{self.cols}")

        if not 0.0 <= self.occupancy_probability <= 1.0:
            raise ValueError(
                f"PARKING_OCCUPANCY_PROBABILITY must be within [0, 1], got {self.occupancy_probability}"
            )

        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"Unknown LOG_LEVEL '{self.log_level}'")
