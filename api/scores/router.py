"""
Score CRUD endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Path, Query

from core import db

from . import repository, schemas

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/scores")
async def list_scores(
    player_id: int | None = Query(default=None, ge=1, le=db.MAX_ROW_ID),
    game_id: int | None = Query(default=None, ge=1, le=db.MAX_ROW_ID),
) -> dict:
    """
    List scores, newest first. Optionally narrowed to one player and/or game.
    """
    rows = await repository.list_scores(player_id=player_id, game_id=game_id)
    return {"scores": rows, "count": len(rows)}


@router.get("/scores/{score_id}")
async def get_score(score_id: int = Path(..., ge=1, le=db.MAX_ROW_ID)) -> dict:
    row = await repository.get_score(score_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Score not found.")
    return row


@router.post("/scores")
async def create_score(request: schemas.ScoreRequest) -> dict:
    row = await repository.create_score(
        player_id=request.player_id,
        game_id=request.game_id,
        score=request.score,
        date_played=request.date_played,
    )
    logger.info(
        "score_created id=%s player_id=%s game_id=%s",
        row["id"],
        request.player_id,
        request.game_id,
    )
    return row


@router.put("/scores/{score_id}")
async def update_score(
    request: schemas.ScoreRequest,
    score_id: int = Path(..., ge=1, le=db.MAX_ROW_ID),
) -> dict:
    row = await repository.update_score(
        score_id,
        player_id=request.player_id,
        game_id=request.game_id,
        score=request.score,
        date_played=request.date_played,
    )
    if row is None:
        raise HTTPException(status_code=404, detail="Score not found.")
    return row


@router.delete("/scores/{score_id}")
async def delete_score(score_id: int = Path(..., ge=1, le=db.MAX_ROW_ID)) -> dict:
    row = await repository.delete_score(score_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Score not found.")
    logger.info("score_deleted id=%s", score_id)
    return {
        "ok": True,
        "message": "Score deleted successfully.",
        "score": row,
    }
