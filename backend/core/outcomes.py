from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from generator.cell import Position


class OutcomeCode(str, Enum):
    OK = "OK"
    SPOT_UNAVAILABLE = "SPOT_UNAVAILABLE"        # occupied or already reserved
    NO_PATH_FOUND = "NO_PATH_FOUND"
    LOT_FULL = "LOT_FULL"
    NO_ACTIVE_RESERVATION = "NO_ACTIVE_RESERVATION"


@dataclass(frozen=True)
class Outcome:
    """Result of one controller action.

    `target` is the spot the action was about (the reserved or the nearest
    spot), `path` the highlighted route when a navigation succeeded.
    """

    code: OutcomeCode
    target: Optional[Position] = None
    path: List[Position] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.code == OutcomeCode.OK

    @classmethod
    def success(cls, target: Optional[Position] = None, path: Optional[List[Position]] = None) -> "Outcome":
        return cls(OutcomeCode.OK, target=target, path=list(path or []))

    @classmethod
    def failure(cls, code: OutcomeCode, target: Optional[Position] = None) -> "Outcome":
        return cls(code, target=target)
