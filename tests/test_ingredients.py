"""
Tests for the ingredient catalog (/api/ingredients).

Any logged-in user can read the catalog; only admins can change it.
"""

import json

from test_fixtures import (
    auth_headers,
    make_ingredient,
    make_user,
    meal_scenario,
    refetch,
    BACON,
    PEAR,
)
from domain.models import Ingredient


def _body(data):
    return {
        "name": data["name"],
        "description": data["description"],
        "servingSize": data["serving_size"],
        "calories": data["calories"],
        "carbohydrates": data["carbohydrates"],
        "fat": data["fat"],
        "protein": data["protein"],
    }


def test_list_ingredients_sorted_by_name(client, db_session):
    user = make_user(db_session)
    make_ingredient(db_session, **PEAR)
    make_ingredient(db_session, **BACON)

    r = client.get("/api/ingredients", headers=auth_headers(user))

    assert r.status_code == 200
    assert [i["name"] for i in r.json()] == ["Bacon", "Medium Pear"]
    assert r.json()[1]["servingSize"] == 178.0


def test_get_ingredient(client, db_session):
    user = make_user(db_session)
    pear = make_ingredient(db_session)

    r = client.get(f"/api/ingredients/{pear.id}", headers=auth_headers(user))
    assert r.status_code == 200
    assert r.json()["name"] == "Medium Pear"

    assert client.get("/api/ingredients/id", headers=auth_headers(user)).status_code == 404
    assert client.get("/api/ingredients/10000", headers=auth_headers(user)).status_code == 404


def test_create_ingredient_requires_admin(client, db_session):
    user = make_user(db_session)
    admin = make_user(db_session, username="admin", admin=True)

    r = client.post("/api/ingredients", json=_body(PEAR), headers=auth_headers(user))
    assert r.status_code == 403

    r = client.post("/api/ingredients", json=_body(PEAR), headers=auth_headers(admin))
    assert r.status_code == 200
    assert r.json()["calories"] == 101.0
    assert refetch(db_session, Ingredient, r.json()["id"]).serving_size == 178.0


def test_create_ingredient_duplicate_name_conflicts(client, db_session):
    admin = make_user(db_session, username="admin", admin=True)
    make_ingredient(db_session)

    r = client.post(
        "/api/ingredients",
        json={**_body(PEAR), "name": "medium pear"},
        headers=auth_headers(admin),
    )

    assert r.status_code == 409


def test_create_ingredient_rejects_negative_values(client, db_session):
    admin = make_user(db_session, username="admin", admin=True)

    r = client.post(
        "/api/ingredients",
        json={**_body(PEAR), "calories": -5},
        headers=auth_headers(admin),
    )

    assert r.status_code == 400


def test_update_ingredient(client, db_session):
    admin = make_user(db_session, username="admin", admin=True)
    pear = make_ingredient(db_session)

    r = client.put(
        f"/api/ingredients/{pear.id}",
        json={"fat": 0.2, "protein": 0.6},
        headers=auth_headers(admin),
    )

    assert r.status_code == 200
    assert r.json()["fat"] == 0.2
    assert r.json()["name"] == "Medium Pear"


def test_delete_unused_ingredient(client, db_session):
    admin = make_user(db_session, username="admin", admin=True)
    bacon = make_ingredient(db_session, **BACON)
    bacon_id = bacon.id

    r = client.delete(f"/api/ingredients/{bacon_id}", headers=auth_headers(admin))

    assert r.status_code == 200
    assert r.json()["name"] == "Bacon"
    assert refetch(db_session, Ingredient, bacon_id) is None


def test_delete_ingredient_in_use_conflicts(client, db_session):
    s = meal_scenario(db_session)
    admin = make_user(db_session, username="admin", admin=True)

    r = client.delete(f"/api/ingredients/{s.ingredient_id}", headers=auth_headers(admin))

    assert r.status_code == 409
    assert r.json()["error"]["details"] == {"references": 1}
    assert refetch(db_session, Ingredient, s.ingredient_id) is not None


def test_create_ingredient_rejects_infinite_values(client, db_session):
    admin = make_user(db_session, username="admin", admin=True)
    body = _body(PEAR)
    body["calories"] = "__INF__"

    r = client.post(
        "/api/ingredients",
        content=json.dumps(body).replace('"__INF__"', "1e400"),
        headers={**auth_headers(admin), "Content-Type": "application/json"},
    )

    assert r.status_code == 400
    assert db_session.query(Ingredient).count() == 0
