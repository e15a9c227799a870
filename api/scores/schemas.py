"""
Pydantic schemas for score endpoints.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from core import db

MAX_SCORE = 1_000_000


class ScoreRequest(BaseModel):
    player_id: int = Field(..., ge=1, le=db.MAX_ROW_ID)
    game_id: int = Field(..., ge=1, le=db.MAX_ROW_ID)
    score: int = Field(..., ge=0, le=MAX_SCORE)
    date_played: datetime | None = None
