"""
HTTP layer – FastAPI TestClient (no server needed).
"""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from main import app

client = TestClient(app)

REC = "/api/v1/recommendations"

PROFILE = {
    "weightKg": 70,
    "heightCm": 175,
    "ageYears": 28,
    "sex": "male",
    "activityLevel": "moderate",
}

WORKED_EXAMPLE = {
    "dailyCalories": 2057,
    "macros": {"proteinGrams": 206, "carbGrams": 154, "fatGrams": 69},
    "mealDistribution": {"breakfast": 514, "lunch": 720, "dinner": 617, "snacks": 206},
}


def _body(**profile_overrides):
    return {
        "profile": {**PROFILE, **profile_overrides},
        "goalType": "weight_loss",
        "dietType": "veg",
    }


def _error_kind(resp) -> str:
    assert resp.status_code == 400, resp.text
    err = resp.json()["error"]
    assert err["message"]
    return err["kind"]


# ── recommendations ─────────────────────────────────────────────────
def test_recommendation_worked_example():
    r = client.post(REC, json=_body())
    assert r.status_code == 200
    assert r.json() == WORKED_EXAMPLE


def test_storefront_field_names_accepted():
    r = client.post(
        REC,
        json={
            "profile": {
                "weight": 70, "height": 175, "age": 28,
                "gender": "male", "activity_level": "moderate",
            },
            "plan_type": "weight_loss",
            "diet_type": "non-veg",
        },
    )
    assert r.status_code == 200
    assert r.json() == WORKED_EXAMPLE


def test_identical_requests_identical_bytes():
    a = client.post(REC, json=_body())
    b = client.post(REC, json=_body())
    assert a.content == b.content


def test_unknown_goal_type_uses_default():
    body = _body()
    body["goalType"] = "bulk"
    general = {**_body(), "goalType": "general"}
    assert client.post(REC, json=body).json() == client.post(REC, json=general).json()


def test_non_string_goal_type_uses_default():
    body = {**_body(), "goalType": 5}
    general = {**_body(), "goalType": "general"}
    r = client.post(REC, json=body)
    assert r.status_code == 200
    assert r.json() == client.post(REC, json=general).json()


@pytest.mark.parametrize("overrides", [{"weightKg": 1e308}, {"weightKg": 1e308, "ageYears": 1e308}])
def test_overflowing_profile_is_invalid_profile(overrides):
    assert _error_kind(client.post(REC, json=_body(**overrides))) == "InvalidProfile"


@pytest.mark.parametrize(
    "overrides",
    [{"weightKg": 0}, {"ageYears": 0}, {"heightCm": -1}, {"weightKg": "abc"}, {"weightKg": None}],
)
def test_invalid_profile(overrides):
    assert _error_kind(client.post(REC, json=_body(**overrides))) == "InvalidProfile"


def test_missing_profile_object():
    r = client.post(REC, json={"goalType": "general"})
    assert _error_kind(r) == "InvalidProfile"


@pytest.mark.parametrize("level", ["extreme", None, 3])
def test_unknown_activity_level(level):
    r = client.post(REC, json=_body(activityLevel=level))
    assert _error_kind(r) == "UnknownActivityLevel"


def test_bad_diet_type():
    body = {**_body(), "dietType": "keto"}
    assert _error_kind(client.post(REC, json=body)) == "InvalidRequest"


def test_malformed_json():
    r = client.post(REC, content=b"{not json", headers={"Content-Type": "application/json"})
    assert _error_kind(r) == "InvalidRequest"


def test_cors_preflight():
    r = client.options(
        REC,
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"
    assert "POST" in r.headers["access-control-allow-methods"]


# ── recommendations + meals ─────────────────────────────────────────
def test_recommendation_with_meals():
    r = client.post(f"{REC}/meals", json=_body())
    assert r.status_code == 200
    data = r.json()
    assert data["recommendation"] == WORKED_EXAMPLE
    assert data["dietType"] == "veg"
    assert data["meals"]["breakfast"][0]["id"] == "v-b2"
    assert data["meals"]["breakfast"][0]["mealType"] == "breakfast"
    assert data["meals"]["snacks"][0]["id"] == "v-s2"
    assert all(m["dietType"] == "veg" for opts in data["meals"].values() for m in opts)


def test_meals_default_to_veg_without_diet_type():
    body = _body()
    del body["dietType"]
    assert client.post(f"{REC}/meals", json=body).json()["dietType"] == "veg"


# ── BMI ─────────────────────────────────────────────────────────────
def test_bmi():
    r = client.post("/api/v1/bmi", json={"heightCm": 175, "weightKg": 70})
    assert r.status_code == 200
    assert r.json()["bmi"] == 22.86
    assert r.json()["category"] == "normal"


def test_bmi_invalid():
    r = client.post("/api/v1/bmi", json={"height": 0, "weight": 70})
    assert _error_kind(r) == "InvalidProfile"


@pytest.mark.parametrize(
    "body", [{"heightCm": 1e-300, "weightKg": 70}, {"heightCm": 1e-150, "weightKg": 1e308}]
)
def test_bmi_out_of_range(body):
    assert _error_kind(client.post("/api/v1/bmi", json=body)) == "InvalidProfile"


# ── plans ───────────────────────────────────────────────────────────
def test_list_plans_filters():
    r = client.get("/api/v1/plans", params={"min_calories": 1500, "max_calories": 2000})
    assert r.status_code == 200
    assert {p["id"] for p in r.json()} == {"1", "2", "3"}

    vegan = client.get("/api/v1/plans", params={"diet_type": "Vegan"}).json()
    assert [p["name"] for p in vegan] == ["Vegan Delight"]
    assert vegan[0]["dietType"] == "Vegan"
    assert vegan[0]["imageUrl"].startswith("https://")


def test_list_plans_bad_diet_type():
    r = client.get("/api/v1/plans", params={"diet_type": "Paleo"})
    assert _error_kind(r) == "InvalidRequest"


def test_plan_types():
    r = client.get("/api/v1/plans/types")
    assert r.status_code == 200
    assert {t["type"]: t["monthlyPrice"] for t in r.json()}["muscle_gain"] == 2500


def test_fetch_plan():
    assert client.get("/api/v1/plans/5").json()["name"] == "Keto Non-Veg Plan"

    r = client.get("/api/v1/plans/99")
    assert r.status_code == 404
    assert r.json()["error"]["kind"] == "PlanNotFound"


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_run_serves_app_with_uvicorn(monkeypatch):
    import uvicorn
    import main

    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda *a, **kw: calls.append((a, kw)))
    main.run()
    (args, kwargs), = calls
    assert args == ("main:app",)
    assert kwargs["port"] == main.settings.port
