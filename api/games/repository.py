"""
Game catalog persistence (raw SQL).
"""

from __future__ import annotations

from datetime import date
from typing import Any

from core import db


async def list_games() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, title, genre, release_date
        FROM games
        ORDER BY id
        """
    )


async def get_game(game_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, title, genre, release_date
        FROM games
        WHERE id = $1
        """,
        game_id,
    )


async def create_game(*, title: str, genre: str, release_date: date | None = None) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO games (title, genre, release_date)
        VALUES ($1, $2, $3)
        RETURNING id, title, genre, release_date
        """,
        title,
        genre,
        release_date,
    )
    if row is None:
        raise RuntimeError("Failed to create game.")
    return row


async def update_game(
    game_id: int,
    *,
    title: str,
    genre: str,
    release_date: date | None = None,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        UPDATE games
        SET title = $1,
            genre = $2,
            release_date = $3
        WHERE id = $4
        RETURNING id, title, genre, release_date
        """,
        title,
        genre,
        release_date,
        game_id,
    )


async def delete_game(game_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        DELETE FROM games
        WHERE id = $1
        RETURNING id, title, genre, release_date
        """,
        game_id,
    )
