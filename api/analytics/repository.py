"""
Fixed analytical read queries over players, games and scores.

Every query has a deterministic ORDER BY (ties broken by id or name) so callers
can rely on row order.
"""

from __future__ import annotations

from typing import Any

from core import db


async def top_scorers(*, limit: int = 3) -> list[dict[str, Any]]:
    """
    Players ranked by the sum of all their scores, highest first.
    Players without any score are not ranked.
    """
    return await db.fetch_all(
        """
        SELECT
          p.id,
          p.name,
          SUM(s.score)::bigint AS total_score,
          COUNT(s.id) AS games_played
        FROM players p
        JOIN scores s ON s.player_id = p.id
        GROUP BY p.id, p.name
        ORDER BY total_score DESC, p.id ASC
        LIMIT $1
        """,
        limit,
    )


async def inactive_players(*, days: int = 30) -> list[dict[str, Any]]:
    """
    Players with no score recorded in the last `days` days (including players
    who never played). `last_played` is NULL for the latter.
    """
    return await db.fetch_all(
        """
        SELECT
          p.id,
          p.name,
          p.email,
          p.join_date,
          (SELECT max(s.date_played) FROM scores s WHERE s.player_id = p.id) AS last_played
        FROM players p
        WHERE NOT EXISTS (
          SELECT 1
          FROM scores s
          WHERE s.player_id = p.id
            AND s.date_played >= now() - make_interval(days => $1)
        )
        ORDER BY p.name ASC, p.id ASC
        """,
        days,
    )


async def popular_genres(*, limit: int = 5) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT
          g.genre,
          COUNT(s.id) AS play_count,
          COUNT(DISTINCT s.player_id) AS player_count
        FROM games g
        JOIN scores s ON s.game_id = g.id
        GROUP BY g.genre
        ORDER BY play_count DESC, g.genre ASC
        LIMIT $1
        """,
        limit,
    )


async def recent_joiners(*, days: int = 30) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, name, email, join_date
        FROM players
        WHERE join_date >= CURRENT_DATE - $1::int
        ORDER BY join_date DESC, id DESC
        """,
        days,
    )


async def favorite_games() -> list[dict[str, Any]]:
    """
    For each player with at least one score: the game they played most often.
    Ties go to the alphabetically first title.
    """
    return await db.fetch_all(
        """
        SELECT DISTINCT ON (s.player_id)
          s.player_id,
          p.name AS player_name,
          s.game_id,
          g.title AS game_title,
          COUNT(*) AS play_count,
          MAX(s.score) AS best_score
        FROM scores s
        JOIN players p ON p.id = s.player_id
        JOIN games g ON g.id = s.game_id
        GROUP BY s.player_id, p.name, s.game_id, g.title
        ORDER BY s.player_id ASC, COUNT(*) DESC, g.title ASC
        """
    )
