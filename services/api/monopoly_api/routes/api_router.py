"""Central API router composition.

Mounts the individual route modules on one router so `main.py` has a single
`include_router(...)` call. Player routes live at the root (`/players`), not
under a version prefix.
"""

from fastapi import APIRouter

from .players import router as players_router

router = APIRouter()

router.include_router(players_router)
