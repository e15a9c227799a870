"""
Game CRUD endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Path

from core import db

from . import repository, schemas

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/games")
async def list_games() -> dict:
    rows = await repository.list_games()
    return {"games": rows, "count": len(rows)}


@router.get("/games/{game_id}")
async def get_game(game_id: int = Path(..., ge=1, le=db.MAX_ROW_ID)) -> dict:
    row = await repository.get_game(game_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Game not found.")
    return row


@router.post("/games")
async def create_game(request: schemas.GameRequest) -> dict:
    row = await repository.create_game(
        title=request.title,
        genre=request.genre,
        release_date=request.release_date,
    )
    logger.info("game_created id=%s", row["id"])
    return row


@router.put("/games/{game_id}")
async def update_game(
    request: schemas.GameRequest,
    game_id: int = Path(..., ge=1, le=db.MAX_ROW_ID),
) -> dict:
    row = await repository.update_game(
        game_id,
        title=request.title,
        genre=request.genre,
        release_date=request.release_date,
    )
    if row is None:
        raise HTTPException(status_code=404, detail="Game not found.")
    return row


@router.delete("/games/{game_id}")
async def delete_game(game_id: int = Path(..., ge=1, le=db.MAX_ROW_ID)) -> dict:
    row = await repository.delete_game(game_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Game not found.")
    logger.info("game_deleted id=%s", game_id)
    return {
        "ok": True,
        "message": "Game deleted successfully.",
        "game": row,
    }
