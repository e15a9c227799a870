"""
Athlete persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_athletes() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, name, sport, age
        FROM athletes
        ORDER BY id
        """
    )


async def get_athlete(athlete_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, name, sport, age
        FROM athletes
        WHERE id = $1
        """,
        athlete_id,
    )


async def create_athlete(*, name: str, sport: str, age: int) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO athletes (name, sport, age)
        VALUES ($1, $2, $3)
        RETURNING id, name, sport, age
        """,
        name,
        sport,
        age,
    )
    if row is None:
        raise RuntimeError("Failed to create athlete.")
    return row


async def update_athlete(athlete_id: int, *, name: str, sport: str, age: int) -> dict[str, Any] | None:
    """
    Replace all fields of an athlete. Returns None when the id does not exist.
    """
    return await db.fetch_one(
        """
        UPDATE athletes
        SET name = $1,
            sport = $2,
            age = $3
        WHERE id = $4
        RETURNING id, name, sport, age
        """,
        name,
        sport,
        age,
        athlete_id,
    )


async def delete_athlete(athlete_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        DELETE FROM athletes
        WHERE id = $1
        RETURNING id, name, sport, age
        """,
        athlete_id,
    )
