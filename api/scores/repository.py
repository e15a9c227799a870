"""
Score persistence (raw SQL).

A score row links one player to one game. Unknown player/game ids surface as
asyncpg.ForeignKeyViolationError from the database.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from core import db


def _utc(value: datetime | None) -> datetime | None:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


async def list_scores(*, player_id: int | None = None, game_id: int | None = None) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, player_id, game_id, score, date_played
        FROM scores
        WHERE ($1::int IS NULL OR player_id = $1)
          AND ($2::int IS NULL OR game_id = $2)
        ORDER BY date_played DESC, id DESC
        """,
        player_id,
        game_id,
    )


async def get_score(score_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, player_id, game_id, score, date_played
        FROM scores
        WHERE id = $1
        """,
        score_id,
    )


async def create_score(
    *,
    player_id: int,
    game_id: int,
    score: int,
    date_played: datetime | None = None,
) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO scores (player_id, game_id, score, date_played)
        VALUES ($1, $2, $3, COALESCE($4::timestamptz, now()))
        RETURNING id, player_id, game_id, score, date_played
        """,
        player_id,
        game_id,
        score,
        _utc(date_played),
    )
    if row is None:
        raise RuntimeError("Failed to create score.")
    return row


async def update_score(
    score_id: int,
    *,
    player_id: int,
    game_id: int,
    score: int,
    date_played: datetime | None = None,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        UPDATE scores
        SET player_id = $1,
            game_id = $2,
            score = $3,
            date_played = COALESCE($4::timestamptz, date_played)
        WHERE id = $5
        RETURNING id, player_id, game_id, score, date_played
        """,
        player_id,
        game_id,
        score,
        _utc(date_played),
        score_id,
    )


async def delete_score(score_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        DELETE FROM scores
        WHERE id = $1
        RETURNING id, player_id, game_id, score, date_played
        """,
        score_id,
    )
