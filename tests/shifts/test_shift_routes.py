from __future__ import annotations

import importlib
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

import src.oncall_shifts.oncall_shifts.shifts.controller as controller_module
from src.oncall_shifts.oncall_shifts.main import create_app


@pytest.fixture
def client():
    app = create_app(importlib.import_module("config.testing"))
    return app.test_client()


def test_list_shifts(client):
    resp = client.get("/api/shifts")

    assert resp.status_code == 200
    assert [s["name"] for s in resp.get_json()["shifts"]] == ["Night", "Day", "Evening"]


def test_current_shift_at_fixed_time(client):
    data = client.get("/api/shifts/current?at=09:00").get_json()

    assert data["now"] == "09:00"
    assert data["current_index"] == 1
    assert data["current"]["name"] == "Day"
    assert len(data["shifts"]) == 3


def test_next_shift_at_fixed_time(client):
    data = client.get("/api/shifts/next?at=09:00").get_json()

    assert data["current_index"] == 1
    assert data["next"]["name"] == "Evening"
    assert data["minutes_until_start"] == 420


def test_next_shift_wraps_to_first(client):
    data = client.get("/api/shifts/next?at=16:00").get_json()

    assert data["current_index"] == 2
    assert data["next"]["name"] == "Night"
    assert data["minutes_until_start"] == 480


def test_current_shift_without_at_uses_clock(client, monkeypatch):
    monkeypatch.setattr(controller_module, "now_utc", lambda: datetime(2026, 2, 1, 17, 5, tzinfo=timezone.utc))

    data = client.get("/api/shifts/current").get_json()

    assert data["now"] == "17:05"
    assert data["current_index"] == 2
    assert data["current"]["name"] == "Evening"


def test_next_shift_without_at_uses_clock(client, monkeypatch):
    monkeypatch.setattr(controller_module, "now_utc", lambda: datetime(2026, 2, 1, 7, 45, tzinfo=timezone.utc))

    data = client.get("/api/shifts/next").get_json()

    assert data["current_index"] == 0
    assert data["next"]["name"] == "Day"
    assert data["minutes_until_start"] == 15


@pytest.mark.parametrize("at", ["9:00", "24:00", "noon"])
def test_bad_at_parameter(client, at):
    resp = client.get(f"/api/shifts/current?at={at}")

    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_list_shifts_config_error_becomes_json_500(tmp_path):
    settings = SimpleNamespace(SECRET_KEY="x", SHIFTS_FILE=str(tmp_path / "missing.json"))
    client = create_app(settings).test_client()

    resp = client.get("/api/shifts")

    assert resp.status_code == 500
    assert "Cannot read" in resp.get_json()["error"]


def test_config_error_becomes_json_500():
    settings = SimpleNamespace(
        SECRET_KEY="x",
        SHIFTS_FILE=None,
        SHIFT_TIMES=[{"start": "8:00", "end": "16:00", "name": "Day"}],
    )
    client = create_app(settings).test_client()

    resp = client.get("/api/shifts/next?at=09:00")

    assert resp.status_code == 500
    assert "8:00" in resp.get_json()["error"]


def test_empty_schedule_has_no_next():
    settings = SimpleNamespace(SECRET_KEY="x", SHIFTS_FILE=None, SHIFT_TIMES=[])
    client = create_app(settings).test_client()

    data = client.get("/api/shifts/next?at=09:00").get_json()

    assert data["current_index"] == -1
    assert data["next"] is None
    assert data["minutes_until_start"] is None
