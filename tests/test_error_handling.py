"""
Error envelope, identifier parsing and health check tests.

Every error leaves the API in the same shape:
    {"success": false, "error": {"code", "message", ["details"]}, "timestamp"}
"""

import pytest
from sqlalchemy.exc import OperationalError

from test_fixtures import meal_scenario
from api.dependencies import get_db
from api.validators import MAX_ID, parent_id, parse_id, resource_id
from app.exceptions import NotFoundError, ServiceValidationError


# =============================================================================
# IDENTIFIER PARSING
# =============================================================================


def test_parse_id_accepts_positive_integers():
    assert parse_id("1") == 1
    assert parse_id("42") == 42
    assert parse_id(str(MAX_ID)) == MAX_ID


def test_parse_id_rejects_malformed_values():
    for value in (None, "", "id", "0", "-1", "1.5", "1e3", " 7", "0x10", str(MAX_ID + 1)):
        assert parse_id(value) is None, value


def test_parent_and_resource_ids_raise_different_errors():
    with pytest.raises(ServiceValidationError) as parent_exc:
        parent_id("id")
    with pytest.raises(NotFoundError) as resource_exc:
        resource_id("id", "MealIngredient")

    assert parent_exc.value.http_status == 400
    assert parent_exc.value.code == "INVALID_PARENT_ID"
    assert resource_exc.value.http_status == 404
    assert resource_exc.value.code == "INVALID_ID"


# =============================================================================
# ERROR ENVELOPE
# =============================================================================


def test_error_envelope_shape(client, db_session):
    s = meal_scenario(db_session)

    r = client.get(f"/api/meals/{s.meal_id}/meal-ingredients/id", headers=s.headers)

    assert r.status_code == 404
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "INVALID_ID"
    assert body["error"]["message"]
    assert "timestamp" in body


def test_missing_token_envelope(client):
    r = client.get("/api/meals/1/meal-ingredients/1")

    assert r.status_code == 401
    assert r.json()["error"]["code"] == "TOKEN_MISSING"


def test_body_validation_envelope(client, db_session):
    s = meal_scenario(db_session)

    r = client.post(
        f"/api/meals/{s.meal_id}/meal-ingredients",
        json={"servings": "lots"},
        headers=s.headers,
    )

    assert r.status_code == 400
    body = r.json()
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert isinstance(body["error"]["details"], list)


def test_unknown_route_is_404(client):
    r = client.get("/api/nothing-here")

    assert r.status_code == 404
    assert r.json()["error"]["code"] == "HTTP_404"


def test_responses_carry_request_id(client):
    r = client.get("/api/health-check")

    assert r.headers.get("X-Request-ID")
    assert r.headers.get("X-Process-Time")


# =============================================================================
# HEALTH CHECK
# =============================================================================


def test_health_check(client):
    r = client.get("/api/health-check")

    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.json()["service"] == "MealTracker"


def test_database_health_check(client):
    r = client.get("/api/health-check/db")

    assert r.status_code == 200
    assert r.json() == {"status": "ok", "database": "reachable"}


def test_database_health_check_hides_driver_error(client):
    """
    Verifies:
    - an unreachable database reports degraded
    - the driver's error text stays out of the response
    """

    class BrokenSession:
        def execute(self, *args, **kwargs):
            raise OperationalError(
                "SELECT 1", {}, Exception("could not connect to postgresql://user:secret@db")
            )

    def broken_db():
        yield BrokenSession()

    client.app.dependency_overrides[get_db] = broken_db
    try:
        r = client.get("/api/health-check/db")
    finally:
        client.app.dependency_overrides.pop(get_db, None)

    assert r.status_code == 200
    assert r.json() == {"status": "degraded", "database": "unreachable"}
    assert "secret" not in r.text
