import random
from datetime import date

import pytest
from fastapi import HTTPException

from data import SPANISH_FOODS, MEAL_CATEGORIES, WEEK_DAYS
from service_modules.meal_plan_service import (
    meal_plan_service, filter_foods, build_week, build_shopping_list, week_start_for
)


def test_filter_vegan_and_allergies():
    vegan = filter_foods(SPANISH_FOODS, {"diet_type": "vegan"})
    assert vegan and all(f["is_vegan"] for f in vegan)

    no_nuts = filter_foods(SPANISH_FOODS, {"allergies": ["Frutos secos", "queso"]})
    assert not [f for f in no_nuts if f["category"] == "Frutos secos"]
    assert not [f for f in no_nuts if "queso" in f["name"].lower()]


def test_vegetarian_keeps_dairy():
    vegetarian = filter_foods(SPANISH_FOODS, {"diet_type": "vegetarian"})
    categories = {f["category"] for f in vegetarian}
    assert "Lácteos" in categories
    assert "Carnes" not in categories


def test_week_has_no_repeats():
    meals = build_week(SPANISH_FOODS, random.Random(7))
    assert list(meals) == WEEK_DAYS
    ids = [food["id"] for day in meals.values() for food in day.values()]
    assert len(ids) == len(set(ids)) == 28
    assert meals["monday"]["breakfast"]["category"] in MEAL_CATEGORIES["breakfast"]


def test_week_runs_out_of_foods():
    foods = filter_foods(SPANISH_FOODS, {"diet_type": "vegan"})[:20]
    meals = build_week(foods, random.Random(3))
    empty = [meal for day in meals.values() for meal, food in day.items() if food is None]
    assert len(empty) == 8


def test_shopping_list_distinct_names():
    food = {"name": "nueces", "category": "Frutos secos"}
    meals = {"monday": {"breakfast": food, "lunch": food, "dinner": None, "snack": None}}
    assert build_shopping_list(meals) == [
        {"ingredient": "Nueces", "quantity": "1 serving", "category": "Frutos secos", "checked": False}
    ]


def test_week_start_is_monday():
    assert week_start_for(date(2026, 10, 15)) == date(2026, 10, 12)
    assert week_start_for(date(2026, 10, 12)) == date(2026, 10, 12)


def test_same_seed_same_plan(client, user):
    prefs = {"diet_type": "omnivore", "allergies": []}
    first = meal_plan_service.generate_meal_plan(user["id"], prefs, date(2026, 10, 15), random.Random(42))
    second = meal_plan_service.generate_meal_plan(user["id"], prefs, date(2026, 10, 15), random.Random(42))
    assert first["meals"] == second["meals"]
    assert first["week_start"] == "2026-10-12"
    assert first["name"] == "Weekly Plan - 2026-10-12"
    assert len(first["shopping_list"]) == 28


def test_too_restrictive_preferences(client, user):
    with pytest.raises(HTTPException) as exc:
        meal_plan_service.generate_meal_plan(user["id"], {"diet_type": "vegan", "allergies": ["frutas", "verduras"]})
    assert exc.value.status_code == 400


def test_generate_via_api(client, user):
    assert client.get("/api/meal-plans/current", headers=user["headers"]).status_code == 404

    res = client.post("/api/meal-plans/generate", json={"diet_type": "vegan"}, headers=user["headers"])
    assert res.status_code == 200
    plan = res.json()
    foods = [f for day in plan["meals"].values() for f in day.values() if f]
    assert all(f["is_vegan"] for f in foods)
    assert set(plan["nutrition_summary"]) == set(WEEK_DAYS)
    assert plan["preferences"]["servings"] == 2

    current = client.get("/api/meal-plans/current", headers=user["headers"]).json()
    assert current["id"] == plan["id"]
    assert [p["id"] for p in client.get("/api/meal-plans", headers=user["headers"]).json()] == [plan["id"]]


def test_shopping_toggle(client, user, other_user):
    plan = client.post("/api/meal-plans/generate", json={}, headers=user["headers"]).json()

    res = client.put(f"/api/meal-plans/{plan['id']}/shopping/0", json={"checked": True}, headers=user["headers"])
    assert res.status_code == 200
    assert res.json()["shopping_list"][0]["checked"] is True

    stored = client.get(f"/api/meal-plans/{plan['id']}", headers=user["headers"]).json()
    assert stored["shopping_list"][0]["checked"] is True

    out_of_range = client.put(f"/api/meal-plans/{plan['id']}/shopping/999", json={"checked": True},
                              headers=user["headers"])
    assert out_of_range.status_code == 400
    forbidden = client.put(f"/api/meal-plans/{plan['id']}/shopping/0", json={"checked": False},
                           headers=other_user["headers"])
    assert forbidden.status_code == 403


def test_delete_plan(client, user):
    plan = client.post("/api/meal-plans/generate", json={}, headers=user["headers"]).json()
    assert client.delete(f"/api/meal-plans/{plan['id']}", headers=user["headers"]).status_code == 200
    assert client.get(f"/api/meal-plans/{plan['id']}", headers=user["headers"]).status_code == 404
