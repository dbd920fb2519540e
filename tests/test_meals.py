"""
Tests for meal management (/api/meals).

A meal addressed directly by its id answers 404 when the id is malformed
or unknown, and 403 when it belongs to someone else.
"""

from test_fixtures import (
    auth_headers,
    make_ingredient,
    make_meal,
    make_meal_ingredient,
    make_user,
    meal_scenario,
    refetch,
    BACON,
)
from domain.models import Meal, MealIngredient


# =============================================================================
# LISTING & READING
# =============================================================================


def test_list_meals_only_returns_callers_meals(client, db_session):
    s = meal_scenario(db_session)
    make_meal(db_session, s.user, name="Lunch", description=None)
    make_meal(db_session, s.other_user, name="Seth's Dinner")

    r = client.get("/api/meals", headers=s.headers)

    assert r.status_code == 200
    assert [m["name"] for m in r.json()] == ["Breakfast", "Lunch"]
    assert all(m["userId"] == s.user_id for m in r.json())


def test_list_meals_requires_token(client):
    assert client.get("/api/meals").status_code == 401


def test_get_meal_includes_ingredients_and_totals(client, db_session):
    """
    Detail view of a meal.

    Verifies:
    - meal ingredient rows are embedded with their ingredient
    - totals are servings * per-serving values, summed
    """
    s = meal_scenario(db_session)
    bacon = make_ingredient(db_session, **BACON)
    make_meal_ingredient(db_session, s.meal, bacon, servings=1)

    r = client.get(f"/api/meals/{s.meal_id}", headers=s.headers)

    assert r.status_code == 200
    body = r.json()
    assert body["id"] == s.meal_id
    assert len(body["mealIngredients"]) == 2
    assert body["mealIngredients"][0]["ingredient"]["name"] == "Medium Pear"
    # 2 pears + 1 bacon
    assert body["totals"]["calories"] == 2 * 101 + 161
    assert body["totals"]["protein"] == 2 * 25 + 12
    assert body["totals"]["carbohydrates"] == 54.6


def test_get_meal_status_codes(client, db_session):
    s = meal_scenario(db_session)

    assert client.get(f"/api/meals/{s.meal_id}", headers=s.other_headers).status_code == 403
    assert client.get("/api/meals/id", headers=s.headers).status_code == 404
    assert client.get("/api/meals/10000", headers=s.headers).status_code == 404
    assert client.get(f"/api/meals/{s.meal_id}").status_code == 401


# =============================================================================
# CREATE / UPDATE / DELETE
# =============================================================================


def test_create_meal_is_owned_by_caller(client, db_session):
    user = make_user(db_session)

    r = client.post(
        "/api/meals",
        json={"name": "Snack", "description": "Afternoon"},
        headers=auth_headers(user),
    )

    assert r.status_code == 200
    assert r.json()["userId"] == user.id
    assert refetch(db_session, Meal, r.json()["id"]).name == "Snack"


def test_create_meal_requires_name(client, db_session):
    user = make_user(db_session)

    r = client.post("/api/meals", json={"description": "no name"}, headers=auth_headers(user))
    assert r.status_code == 400

    r = client.post("/api/meals", json={"name": ""}, headers=auth_headers(user))
    assert r.status_code == 400


def test_update_meal(client, db_session):
    s = meal_scenario(db_session)

    r = client.put(
        f"/api/meals/{s.meal_id}", json={"name": "Brunch"}, headers=s.headers
    )

    assert r.status_code == 200
    assert r.json()["name"] == "Brunch"
    assert r.json()["description"] == "Breakfast foods"


def test_update_meal_rejects_non_owner_and_empty_body(client, db_session):
    s = meal_scenario(db_session)

    r = client.put(f"/api/meals/{s.meal_id}", json={"name": "Mine"}, headers=s.other_headers)
    assert r.status_code == 403

    r = client.put(f"/api/meals/{s.meal_id}", json={}, headers=s.headers)
    assert r.status_code == 400

    assert refetch(db_session, Meal, s.meal_id).name == "Breakfast"


def test_delete_meal_cascades_to_meal_ingredients(client, db_session):
    s = meal_scenario(db_session)

    r = client.delete(f"/api/meals/{s.meal_id}", headers=s.headers)

    assert r.status_code == 200
    assert r.json()["id"] == s.meal_id
    assert r.json()["name"] == "Breakfast"
    assert refetch(db_session, Meal, s.meal_id) is None
    assert refetch(db_session, MealIngredient, s.meal_ingredient_id) is None


def test_delete_meal_rejects_non_owner(client, db_session):
    s = meal_scenario(db_session)

    r = client.delete(f"/api/meals/{s.meal_id}", headers=s.other_headers)

    assert r.status_code == 403
    assert refetch(db_session, Meal, s.meal_id) is not None
