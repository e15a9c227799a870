"""
Pydantic schemas for athlete endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AthleteRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=100)
    sport: str = Field(..., min_length=1, max_length=50)
    age: int = Field(..., ge=1, le=120)
