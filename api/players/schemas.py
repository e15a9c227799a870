"""
Pydantic schemas for player endpoints.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class PlayerRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=320)
    # Omitted on create -> CURRENT_DATE; omitted on update -> unchanged.
    join_date: date | None = None
