import json
from datetime import date

import httpx
import pytest

from selfcare import supabase_rest
from selfcare.errors import BackendError
from selfcare.models import Failure, Found, NotFound
from selfcare.repositories import SupabaseLogRepository

DAY = date(2026, 10, 18)

ROW = {
    "id": "6f1c",
    "user_id": "user-1",
    "date": "2026-10-18",
    "water_intake": 8,
    "sleep_hours": 7.5,
    "exercise_minutes": 30,
    "meditation_minutes": 10,
    "mood": "good",
    "notes": None,
    "created_at": "2026-10-18T07:00:00+00:00",
}


@pytest.fixture
def backend(monkeypatch):
    """Routes PostgREST calls to a handler set by each test; records requests."""
    state = {"handler": None, "requests": []}

    def handler(request):
        state["requests"].append(request)
        return state["handler"](request)

    monkeypatch.setattr(supabase_rest, "SUPABASE_URL", "https://proj.supabase.co")
    monkeypatch.setattr(
        supabase_rest, "_client", lambda: httpx.Client(transport=httpx.MockTransport(handler))
    )
    return state


def pgrst116(rows):
    return httpx.Response(406, json={
        "code": "PGRST116",
        "details": f"The result contains {rows} rows",
        "hint": None,
        "message": "JSON object requested, multiple (or no) rows returned",
    })


def test_fetch_by_date_found(backend):
    backend["handler"] = lambda request: httpx.Response(200, json=ROW)

    result = SupabaseLogRepository().fetch_by_date("user-1", DAY)

    assert isinstance(result, Found)
    assert result.record.notes == ""
    request = backend["requests"][0]
    assert request.headers["Accept"] == "application/vnd.pgrst.object+json"
    assert request.url.params["user_id"] == "eq.user-1"
    assert request.url.params["date"] == "eq.2026-10-18"


def test_zero_rows_is_not_found(backend):
    backend["handler"] = lambda request: pgrst116(0)
    assert isinstance(SupabaseLogRepository().fetch_by_date("user-1", DAY), NotFound)


def test_multiple_rows_is_failure(backend):
    backend["handler"] = lambda request: pgrst116(2)
    result = SupabaseLogRepository().fetch_by_date("user-1", DAY)
    assert isinstance(result, Failure)


def test_server_error_is_failure(backend):
    backend["handler"] = lambda request: httpx.Response(500, json={"message": "database is down"})
    result = SupabaseLogRepository().fetch_by_date("user-1", DAY)
    assert result == Failure("database is down")


def test_connection_error_is_failure(backend):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    backend["handler"] = refuse
    assert isinstance(SupabaseLogRepository().fetch_by_date("user-1", DAY), Failure)


def test_fetch_since_filters_user_and_range(backend):
    backend["handler"] = lambda request: httpx.Response(200, json=[ROW])

    logs = SupabaseLogRepository().fetch_since("user-1", date(2026, 10, 11))

    assert [log.id for log in logs] == ["6f1c"]
    params = backend["requests"][0].url.params
    assert params["user_id"] == "eq.user-1"
    assert params["date"] == "gte.2026-10-11"
    assert params["order"] == "date.desc"


def test_fetch_all_errors_raise(backend):
    backend["handler"] = lambda request: httpx.Response(401, json={"message": "Invalid API key"})
    with pytest.raises(BackendError, match="Invalid API key"):
        SupabaseLogRepository().fetch_all("user-1")


def test_insert_sends_user_and_date(backend):
    backend["handler"] = lambda request: httpx.Response(201, json=[ROW])

    log = SupabaseLogRepository().insert("user-1", DAY, {"water_intake": 8, "mood": "good"})

    assert log.id == "6f1c"
    request = backend["requests"][0]
    assert request.method == "POST"
    assert json.loads(request.content) == {
        "user_id": "user-1",
        "date": "2026-10-18",
        "water_intake": 8,
        "mood": "good",
    }


def test_update_filters_by_id_and_user(backend):
    backend["handler"] = lambda request: httpx.Response(200, json=[ROW])

    SupabaseLogRepository().update("user-1", "6f1c", {"water_intake": 8})

    request = backend["requests"][0]
    assert request.method == "PATCH"
    assert request.url.params["id"] == "eq.6f1c"
    assert request.url.params["user_id"] == "eq.user-1"


def test_update_of_missing_row_raises(backend):
    backend["handler"] = lambda request: httpx.Response(200, json=[])
    with pytest.raises(BackendError):
        SupabaseLogRepository().update("user-1", "nope", {"water_intake": 8})


def test_delete_filters_by_id_and_user(backend):
    backend["handler"] = lambda request: httpx.Response(200, json=[ROW])

    SupabaseLogRepository().delete("user-1", "6f1c")

    request = backend["requests"][0]
    assert request.method == "DELETE"
    assert request.url.params["id"] == "eq.6f1c"
    assert request.url.params["user_id"] == "eq.user-1"
