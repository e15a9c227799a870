"""
Player CRUD endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Path

from core import db

from . import repository, schemas

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/players")
async def list_players() -> dict:
    rows = await repository.list_players()
    return {"players": rows, "count": len(rows)}


@router.get("/players/{player_id}")
async def get_player(player_id: int = Path(..., ge=1, le=db.MAX_ROW_ID)) -> dict:
    row = await repository.get_player(player_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Player not found.")
    return row


@router.post("/players")
async def create_player(request: schemas.PlayerRequest) -> dict:
    row = await repository.create_player(
        name=request.name,
        email=request.email,
        join_date=request.join_date,
    )
    logger.info("player_created id=%s", row["id"])
    return row


@router.put("/players/{player_id}")
async def update_player(
    request: schemas.PlayerRequest,
    player_id: int = Path(..., ge=1, le=db.MAX_ROW_ID),
) -> dict:
    row = await repository.update_player(
        player_id,
        name=request.name,
        email=request.email,
        join_date=request.join_date,
    )
    if row is None:
        raise HTTPException(status_code=404, detail="Player not found.")
    return row


@router.delete("/players/{player_id}")
async def delete_player(player_id: int = Path(..., ge=1, le=db.MAX_ROW_ID)) -> dict:
    """
    Delete a player. Their scores go with them (ON DELETE CASCADE).
    """
    row = await repository.delete_player(player_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Player not found.")
    logger.info("player_deleted id=%s", player_id)
    return {
        "ok": True,
        "message": "Player deleted successfully.",
        "player": row,
    }
