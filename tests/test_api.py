from __future__ import annotations

from fastapi.testclient import TestClient

from match_schedule.api.app import create_app
from match_schedule.priorities.store import PriorityStore
from match_schedule.schedule.models import AggregationResult


def _client(service, store: PriorityStore) -> TestClient:
    return TestClient(create_app(service, store))


def test_schedule_endpoint_returns_days(make_service, priority_store: PriorityStore) -> None:
    priority_store.toggle_event_priority(2001)
    client = _client(make_service(), priority_store)

    resp = client.get("/schedule/api/schedule")

    assert resp.status_code == 200
    body = resp.json()
    assert body["generatedAt"] == "2025-03-10T10:00:00Z"
    assert [d["date"] for d in body["days"]] == ["2025-03-11", "2025-03-12"]

    first = body["days"][0]["matches"][0]
    assert first["id"] == "2001"
    assert first["time"] == "18:00"
    assert first["channel"] == "Discovery+"
    assert first["priority"] is True

    second = body["days"][1]["matches"][0]
    assert (second["id"], second["time"], second["home"], second["away"]) == (
        "1001",
        "20:00",
        "Arsenal",
        "Chelsea",
    )
    assert second["priority"] is False


def test_schedule_endpoint_total_failure_is_single_error(
    make_service, priority_store: PriorityStore, monkeypatch
) -> None:
    service = make_service()

    def explode(**kwargs) -> AggregationResult:
        raise RuntimeError("upstream exploded")

    monkeypatch.setattr(service, "build", explode)

    resp = _client(service, priority_store).get("/schedule/api/schedule")

    assert resp.status_code == 500
    assert resp.json() == {"error": "upstream exploded"}


def test_priority_toggle_round_trip(make_service, priority_store: PriorityStore) -> None:
    client = _client(make_service(), priority_store)

    first = client.post("/schedule/api/priorities/toggle", json={"id": 2052711})
    assert first.json() == {"ok": True, "eventIds": ["2052711"]}

    second = client.post("/schedule/api/priorities/toggle", json={"id": "2052711"})
    assert second.json() == {"ok": True, "eventIds": []}
    assert priority_store.is_priority("2052711") is False


def test_priority_toggle_without_id(make_service, priority_store: PriorityStore) -> None:
    resp = _client(make_service(), priority_store).post("/schedule/api/priorities/toggle", json={})
    assert resp.json() == {"ok": False}


def test_tag_toggle(make_service, priority_store: PriorityStore) -> None:
    client = _client(make_service(), priority_store)

    resp = client.post("/schedule/api/tags/toggle", json={"id": 7, "tag": "bar"})
    assert resp.json() == {"ok": True, "tagsForId": ["bar"]}
    assert priority_store.tags_for("7") == ["bar"]

    missing_tag = client.post("/schedule/api/tags/toggle", json={"id": 7})
    assert missing_tag.json() == {"ok": False}


def test_toggle_persist_failure_is_reported(make_service, priority_store: PriorityStore, monkeypatch) -> None:
    def fail_replace(src, dst) -> None:
        raise OSError("read-only filesystem")

    monkeypatch.setattr("match_schedule.priorities.store.os.replace", fail_replace)

    resp = _client(make_service(), priority_store).post(
        "/schedule/api/priorities/toggle", json={"id": "1"}
    )

    assert resp.status_code == 500
    assert resp.json()["ok"] is False
    assert priority_store.event_ids() == []
