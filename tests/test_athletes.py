"""
Athlete endpoints against the fake DB.
"""

from __future__ import annotations

from typing import Any

import asyncpg


class AthleteTable:
    """Just enough of the athletes table to answer the repository's SQL."""

    def __init__(self) -> None:
        self.rows: dict[int, dict[str, Any]] = {}
        self.next_id = 1

    def __call__(self, sql: str, args: tuple[Any, ...]) -> Any:
        if sql.lstrip().startswith("INSERT INTO athletes"):
            name, sport, age = args
            row = {"id": self.next_id, "name": name, "sport": sport, "age": age}
            self.rows[self.next_id] = row
            self.next_id += 1
            return dict(row)
        if sql.lstrip().startswith("UPDATE athletes"):
            name, sport, age, athlete_id = args
            if athlete_id not in self.rows:
                return None
            self.rows[athlete_id].update(name=name, sport=sport, age=age)
            return dict(self.rows[athlete_id])
        if sql.lstrip().startswith("DELETE FROM athletes"):
            row = self.rows.pop(args[0], None)
            return dict(row) if row is not None else None
        if "WHERE id = $1" in sql:
            row = self.rows.get(args[0])
            return dict(row) if row is not None else None
        return [dict(row) for _, row in sorted(self.rows.items())]


def test_create_then_fetch_returns_same_fields(client, fake_db) -> None:
    fake_db.responder = AthleteTable()

    created = client.post("/athletes", json={"name": "Mo Farah", "sport": "Athletics", "age": 41})
    assert created.status_code == 200
    body = created.json()
    assert body["name"] == "Mo Farah"

    fetched = client.get(f"/athletes/{body['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == body


def test_root_lists_athletes_as_array(client, fake_db) -> None:
    table = AthleteTable()
    fake_db.responder = table
    client.post("/athletes", json={"name": "A", "sport": "Rowing", "age": 30})
    client.post("/athletes", json={"name": "B", "sport": "Judo", "age": 25})

    resp = client.get("/")
    assert resp.status_code == 200
    assert [row["name"] for row in resp.json()] == ["A", "B"]

    listed = client.get("/athletes").json()
    assert listed["count"] == 2


def test_update_replaces_fields(client, fake_db) -> None:
    fake_db.responder = AthleteTable()
    athlete_id = client.post("/athletes", json={"name": "A", "sport": "Rowing", "age": 30}).json()["id"]

    resp = client.put(f"/athletes/{athlete_id}", json={"name": "A", "sport": "Sculling", "age": 31})
    assert resp.status_code == 200
    assert resp.json() == {"id": athlete_id, "name": "A", "sport": "Sculling", "age": 31}


def test_update_missing_athlete_returns_404(client, fake_db) -> None:
    fake_db.responder = AthleteTable()

    resp = client.put("/athletes/999", json={"name": "Ghost", "sport": "None", "age": 20})
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Athlete not found."


def test_delete_missing_athlete_returns_404(client, fake_db) -> None:
    fake_db.responder = AthleteTable()

    resp = client.delete("/athletes/999")
    assert resp.status_code == 404


def test_delete_existing_athlete(client, fake_db) -> None:
    fake_db.responder = AthleteTable()
    athlete_id = client.post("/athletes", json={"name": "A", "sport": "Rowing", "age": 30}).json()["id"]

    resp = client.delete(f"/athletes/{athlete_id}")
    assert resp.status_code == 200
    assert resp.json()["ok"] is True
    assert client.get(f"/athletes/{athlete_id}").status_code == 404


def test_invalid_payload_returns_400_without_sql(client, fake_db) -> None:
    resp = client.post("/athletes", json={"name": "", "sport": "Rowing", "age": 200})
    assert resp.status_code == 400
    fields = {tuple(err["loc"]) for err in resp.json()["detail"]}
    assert ("body", "name") in fields
    assert ("body", "age") in fields
    assert fake_db.calls == []


def test_non_integer_id_returns_400(client, fake_db) -> None:
    resp = client.delete("/athletes/abc")
    assert resp.status_code == 400
    assert fake_db.calls == []


def test_database_error_returns_500_with_message(client, fake_db) -> None:
    fake_db.error = RuntimeError("connection refused")

    resp = client.get("/")
    assert resp.status_code == 500
    assert resp.text == "connection refused"


def test_athlete_id_above_integer_range_returns_400(client, fake_db) -> None:
    resp = client.put("/athletes/3000000000", json={"name": "A", "sport": "B", "age": 3})
    assert resp.status_code == 400
    assert resp.json()["detail"][0]["loc"] == ["path", "athlete_id"]
    assert fake_db.calls == []


def test_postgres_error_returns_500_and_is_logged(client, fake_db, caplog) -> None:
    fake_db.error = asyncpg.UndefinedTableError('relation "athletes" does not exist')

    with caplog.at_level("ERROR", logger="core.errors"):
        resp = client.get("/athletes")

    assert resp.status_code == 500
    assert resp.text == 'relation "athletes" does not exist'
    assert any("database_error" in record.getMessage() for record in caplog.records)
