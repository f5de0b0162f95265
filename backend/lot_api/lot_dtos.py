from typing import List, Optional

from pydantic import BaseModel, Field

# --- Request DTOs ---

class CreateLotRequest(BaseModel):
    # Unset fields fall back to the server's LotConfig
    rows: Optional[int] = None
    cols: Optional[int] = None
    occupancyProbability: Optional[float] = None
    seed: Optional[int] = None

class ReserveRequest(BaseModel):
    row: int
    col: int

# --- Response DTOs ---

class CellDTO(BaseModel):
    row: int
    col: int
    occupied: bool
    highlighted: bool
    reserved: bool = False
    goal: bool = False

class LotStateDTO(BaseModel):
    rows: int
    cols: int
    vehicleEntrance: List[int]
    pedestrianEntrance: List[int]
    hasReservation: bool
    reservedSpot: Optional[List[int]] = None
    cells: List[CellDTO]
    previewMatrix: List[str]

class LotResponse(BaseModel):
    lotId: str
    state: LotStateDTO

class ErrorDTO(BaseModel):
    code: str
    message: str
    row: Optional[int] = None
    col: Optional[int] = None

class ActionResponse(BaseModel):
    ok: bool
    code: str
    target: Optional[List[int]] = None
    path: List[List[int]] = Field(default_factory=list)
    error: Optional[ErrorDTO] = None
    state: LotStateDTO
