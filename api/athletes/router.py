"""
Athlete CRUD endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Path

from core import db

from . import repository, schemas

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
async def root_athletes() -> list[dict]:
    """
    Root listing kept for existing clients: a bare JSON array of athletes.
    """
    return await repository.list_athletes()


@router.get("/athletes")
async def list_athletes() -> dict:
    rows = await repository.list_athletes()
    return {"athletes": rows, "count": len(rows)}


@router.get("/athletes/{athlete_id}")
async def get_athlete(athlete_id: int = Path(..., ge=1, le=db.MAX_ROW_ID)) -> dict:
    row = await repository.get_athlete(athlete_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Athlete not found.")
    return row


@router.post("/athletes")
async def create_athlete(request: schemas.AthleteRequest) -> dict:
    row = await repository.create_athlete(
        name=request.name,
        sport=request.sport,
        age=request.age,
    )
    logger.info("athlete_created id=%s", row["id"])
    return row


@router.put("/athletes/{athlete_id}")
async def update_athlete(
    request: schemas.AthleteRequest,
    athlete_id: int = Path(..., ge=1, le=db.MAX_ROW_ID),
) -> dict:
    row = await repository.update_athlete(
        athlete_id,
        name=request.name,
        sport=request.sport,
        age=request.age,
    )
    if row is None:
        raise HTTPException(status_code=404, detail="Athlete not found.")
    return row


@router.delete("/athletes/{athlete_id}")
async def delete_athlete(athlete_id: int = Path(..., ge=1, le=db.MAX_ROW_ID)) -> dict:
    row = await repository.delete_athlete(athlete_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Athlete not found.")
    logger.info("athlete_deleted id=%s", athlete_id)
    return {
        "ok": True,
        "message": "Athlete deleted successfully.",
        "athlete": row,
    }
