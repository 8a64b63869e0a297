"""Player CRUD routes.

Each endpoint issues exactly one SQL statement against the `Player` table and
maps the result to a response:

- `GET /players`          -> list of players (never 404)
- `GET /players/{id}`     -> one player, or 404
- `POST /players`         -> `{"id": ...}` of the new row
- `PUT /players/{id}`     -> `{"id": ...}`, or 404
- `DELETE /players/{id}`  -> `{"id": ...}`, or 404 (hard delete)

All client-supplied values are passed as bound parameters. This prevents a
request such as

    /players/1%3BDELETE%20FROM%20PlayerGame%3BDELETE%20FROM%20Player

from ever running the trailing statements. Never build SQL text from request
values with f-strings or `%` formatting.

Database errors are not handled here; they propagate to the application's
error handlers, which log the details and return a bare 500.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection

from ..db import get_db
from ..schemas import Player, PlayerId, PlayerIn

router = APIRouter(tags=["players"])

SELECT_PLAYERS = text("SELECT * FROM Player")
SELECT_PLAYER = text("SELECT * FROM Player WHERE id = :id")
INSERT_PLAYER = text("INSERT INTO Player(email, name) VALUES (:email, :name) RETURNING id")
UPDATE_PLAYER = text("UPDATE Player SET email = :email, name = :name WHERE id = :id RETURNING id")
DELETE_PLAYER = text("DELETE FROM Player WHERE id = :id RETURNING id")


def _row_or_404(row):
    # Rows that may legitimately be missing map to an empty-bodied 404.
    if row is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return dict(row)


@router.get("/players", response_model=list[Player])
async def read_players(db: AsyncConnection = Depends(get_db)):
    """List every player.

    Returns:
        list[dict]: All rows of `Player`; an empty list when the table is empty.
    """
    result = await db.execute(SELECT_PLAYERS)
    return [dict(row) for row in result.mappings().all()]


@router.get("/players/{player_id}", response_model=Player)
async def read_player(player_id: int, db: AsyncConnection = Depends(get_db)):
    """Fetch a single player.

    Args:
        player_id: Primary key of the player.
        db: Async connection (injected).

    Returns:
        dict: The player row, or an empty 404 response if it does not exist.
    """
    result = await db.execute(SELECT_PLAYER, {"id": player_id})
    return _row_or_404(result.mappings().first())


@router.post("/players", response_model=PlayerId)
async def create_player(payload: PlayerIn, db: AsyncConnection = Depends(get_db)):
    """Insert a new player and return the id assigned by the database.

    The response status is 200, not 201. Missing fields are bound as NULL and
    left for the table constraints to accept or reject.
    """
    result = await db.execute(INSERT_PLAYER, {"email": payload.email, "name": payload.name})
    row = result.mappings().one()
    await db.commit()
    return dict(row)


@router.put("/players/{player_id}", response_model=PlayerId)
async def update_player(
    player_id: int,
    payload: PlayerIn,
    db: AsyncConnection = Depends(get_db),
):
    """Replace a player's email and name.

    Args:
        player_id: Primary key of the player to update.
        payload: New `email` and `name` values.
        db: Async connection (injected).

    Returns:
        dict: `{"id": player_id}`, or an empty 404 response if no row matched.
    """
    result = await db.execute(
        UPDATE_PLAYER,
        {"id": player_id, "email": payload.email, "name": payload.name},
    )
    row = result.mappings().first()
    await db.commit()
    return _row_or_404(row)


@router.delete("/players/{player_id}", response_model=PlayerId)
async def delete_player(player_id: int, db: AsyncConnection = Depends(get_db)):
    """Hard-delete a player.

    The row is removed from the table; related rows (e.g. in `PlayerGame`) are
    not touched, so the database's foreign keys decide whether the delete is
    allowed.

    Returns:
        dict: `{"id": player_id}`, or an empty 404 response if no row matched.
    """
    result = await db.execute(DELETE_PLAYER, {"id": player_id})
    row = result.mappings().first()
    await db.commit()
    return _row_or_404(row)
