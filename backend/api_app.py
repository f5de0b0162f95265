"""FastAPI application entrypoint.

This file exposes the parking lot navigator over HTTP for the lot display
(reserve a spot, route to it, route to the spot nearest the pedestrian entrance).

Run locally with:
    uvicorn api_app:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lot_api.deps import get_config
from lot_api.lot_router import router as lot_router

logging.basicConfig(
    level=get_config().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Parking Lot Navigator")

# Enable CORS for frontend integration
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # For development, allow all. In production, list the display's origin.
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(lot_router)
