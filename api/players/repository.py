"""
Player persistence (raw SQL).
"""

from __future__ import annotations

from datetime import date
from typing import Any

from core import db


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


async def list_players() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, name, email, join_date
        FROM players
        ORDER BY id
        """
    )


async def get_player(player_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, name, email, join_date
        FROM players
        WHERE id = $1
        """,
        player_id,
    )


async def create_player(*, name: str, email: str, join_date: date | None = None) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO players (name, email, join_date)
        VALUES ($1, $2, COALESCE($3::date, CURRENT_DATE))
        RETURNING id, name, email, join_date
        """,
        name,
        normalize_email(email),
        join_date,
    )
    if row is None:
        raise RuntimeError("Failed to create player.")
    return row


async def update_player(
    player_id: int,
    *,
    name: str,
    email: str,
    join_date: date | None = None,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        UPDATE players
        SET name = $1,
            email = $2,
            join_date = COALESCE($3::date, join_date)
        WHERE id = $4
        RETURNING id, name, email, join_date
        """,
        name,
        normalize_email(email),
        join_date,
        player_id,
    )


async def delete_player(player_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        DELETE FROM players
        WHERE id = $1
        RETURNING id, name, email, join_date
        """,
        player_id,
    )
