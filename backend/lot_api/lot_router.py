from __future__ import annotations

"""Parking lot navigation HTTP API.

This router is consumed by the lot display.

Key concepts:
- Lots are server-owned: the backend holds the authoritative grid and reservation.
- The display sends a selected cell or one of two navigation actions; the
  backend applies it and returns the full lot state to render.
- A taken spot, a full lot or a missing route are normal answers (`ok=false`),
  not HTTP errors.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from core.config import LotConfig
from core.navigation_errors import InvalidCoordinateError, NavigationError
from core.outcomes import Outcome
from core.reservation_controller import ReservationController
from generator.cell import Position
from generator.grid import Grid
from generator.grid_preview import preview_rows
from generator.parking_lot_generator import GenerationError, ParkingLotGenerator
from planning.path_finder import PathFinder

from .deps import get_config
from .lot_dtos import (
    ActionResponse,
    CellDTO,
    CreateLotRequest,
    ErrorDTO,
    LotResponse,
    LotStateDTO,
    ReserveRequest,
)
from .lot_store import LotStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/lots", tags=["lots"])
_store = LotStore()


# ------------------------
# Serialization helpers
# ------------------------

def _pos(pos: Optional[Position]) -> Optional[List[int]]:
    if pos is None:
        return None
    return [pos[0], pos[1]]


def _grid_to_dto(grid: Grid) -> LotStateDTO:
    cells: List[CellDTO] = []
    for cell in grid.iter_cells():
        cells.append(
            CellDTO(
                row=cell.row,
                col=cell.col,
                occupied=cell.occupied,
                highlighted=cell.highlighted,
                reserved=cell.reserved,
                goal=cell.goal,
            )
        )

    return LotStateDTO(
        rows=grid.rows,
        cols=grid.cols,
        vehicleEntrance=_pos(grid.vehicle_entrance),
        pedestrianEntrance=_pos(grid.pedestrian_entrance),
        hasReservation=grid.reserved_spot is not None,
        reservedSpot=_pos(grid.reserved_spot),
        cells=cells,
        previewMatrix=preview_rows(grid),
    )


def _outcome_to_response(outcome: Outcome, controller: ReservationController) -> ActionResponse:
    return ActionResponse(
        ok=outcome.ok,
        code=outcome.code.value,
        target=_pos(outcome.target),
        path=[_pos(p) for p in outcome.path],
        state=_grid_to_dto(controller.snapshot()),
    )


def _get_controller(lot_id: str) -> ReservationController:
    controller = _store.get(lot_id)
    if controller is None:
        raise HTTPException(status_code=404, detail={"code": "LOT_NOT_FOUND", "message": "Lot not found"})
    return controller


# ------------------------
# Routes
# ------------------------

@router.post("", response_model=LotResponse)
def create_lot(req: CreateLotRequest, config: LotConfig = Depends(get_config)):
    rows = req.rows if req.rows is not None else config.rows
    cols = req.cols if req.cols is not None else config.cols
    probability = (
        req.occupancyProbability
        if req.occupancyProbability is not None
        else config.occupancy_probability
    )
    seed = req.seed if req.seed is not None else config.seed

    try:
        grid = ParkingLotGenerator(rows, cols, occupancy_probability=probability, seed=seed).generate()
    except GenerationError as e:
        raise HTTPException(status_code=422, detail={"code": "INVALID_LOT_PARAMETERS", "message": str(e)})

    controller = ReservationController(grid, path_finder=PathFinder(avoid_occupied=config.avoid_occupied))
    session = _store.create(controller)
    logger.info("Created lot %s (%dx%d)", session.lot_id, rows, cols)

    return LotResponse(lotId=session.lot_id, state=_grid_to_dto(controller.snapshot()))


@router.get("/{lot_id}", response_model=LotResponse)
def get_lot(lot_id: str):
    controller = _get_controller(lot_id)
    return LotResponse(lotId=lot_id, state=_grid_to_dto(controller.snapshot()))


@router.post("/{lot_id}/reservations", response_model=ActionResponse)
def reserve_spot(lot_id: str, req: ReserveRequest):
    controller = _get_controller(lot_id)

    try:
        outcome = controller.reserve(req.row, req.col)
    except InvalidCoordinateError as e:
        return ActionResponse(
            ok=False,
            code="INVALID_COORDINATE",
            error=ErrorDTO(code="INVALID_COORDINATE", message=str(e), row=req.row, col=req.col),
            state=_grid_to_dto(controller.snapshot()),
        )
    except NavigationError as e:
        return ActionResponse(
            ok=False,
            code="NAVIGATION_ERROR",
            error=ErrorDTO(code="NAVIGATION_ERROR", message=str(e), row=req.row, col=req.col),
            state=_grid_to_dto(controller.snapshot()),
        )

    return _outcome_to_response(outcome, controller)


@router.post("/{lot_id}:navigate-reserved", response_model=ActionResponse)
def navigate_to_reserved(lot_id: str):
    controller = _get_controller(lot_id)
    return _outcome_to_response(controller.navigate_to_reserved(), controller)


@router.post("/{lot_id}:navigate-nearest", response_model=ActionResponse)
def navigate_to_nearest(lot_id: str):
    controller = _get_controller(lot_id)
    return _outcome_to_response(controller.navigate_to_nearest_spot(), controller)
