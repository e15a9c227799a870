"""
Analytical read endpoints (leaderboards and activity reports).
"""

from __future__ import annotations

from fastapi import APIRouter, Query

from . import repository

router = APIRouter(prefix="/analytics")


@router.get("/top-scorers")
async def top_scorers(limit: int = Query(3, ge=1, le=100)) -> dict:
    rows = await repository.top_scorers(limit=limit)
    return {"players": rows, "count": len(rows)}


@router.get("/inactive-players")
async def inactive_players(days: int = Query(30, ge=1, le=3650)) -> dict:
    rows = await repository.inactive_players(days=days)
    return {"players": rows, "days": days, "count": len(rows)}


@router.get("/popular-genres")
async def popular_genres(limit: int = Query(5, ge=1, le=100)) -> dict:
    rows = await repository.popular_genres(limit=limit)
    return {"genres": rows, "count": len(rows)}


@router.get("/recent-joiners")
async def recent_joiners(days: int = Query(30, ge=0, le=3650)) -> dict:
    rows = await repository.recent_joiners(days=days)
    return {"players": rows, "days": days, "count": len(rows)}


@router.get("/favorite-games")
async def favorite_games() -> dict:
    rows = await repository.favorite_games()
    return {"favorites": rows, "count": len(rows)}
