import threading
import uuid
from dataclasses import dataclass
from typing import Dict, Optional

from core.reservation_controller import ReservationController


@dataclass(frozen=True)
class LotSession:
    """A server-owned parking lot.

    The frontend holds only the `lot_id`; the grid and its reservation live on
    the backend.
    """

    lot_id: str
    controller: ReservationController


class LotStore:
    """In-memory storage for lot sessions.

    Lots are ephemeral: a restart draws fresh occupancy, nothing is persisted.
    The store is process-local.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._lots: Dict[str, ReservationController] = {}

    def create(self, controller: ReservationController) -> LotSession:
        lot_id = str(uuid.uuid4())
        with self._lock:
            self._lots[lot_id] = controller
        return LotSession(lot_id=lot_id, controller=controller)

    def get(self, lot_id: str) -> Optional[ReservationController]:
        with self._lock:
            return self._lots.get(lot_id)
