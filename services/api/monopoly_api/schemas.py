"""API schemas for the Player resource.

The store is the only validator: `PlayerIn` accepts missing fields so that the
database's own constraints (e.g. NOT NULL) decide what is rejected.
"""

from pydantic import BaseModel


class PlayerIn(BaseModel):
    email: str | None = None
    name: str | None = None


class Player(BaseModel):
    id: int
    email: str | None = None
    name: str | None = None


class PlayerId(BaseModel):
    id: int
