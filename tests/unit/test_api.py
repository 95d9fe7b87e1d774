from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[2] / "src"
sys.path.append(str(ROOT))

from furnish_reco.api.main import app, get_recommender  # noqa: E402
from furnish_reco.services.recommender import Recommender  # noqa: E402


@pytest.fixture()
def client():
    app.dependency_overrides[get_recommender] = lambda: Recommender()
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _package_body(**overrides):
    body = {
        "budgetMaxFils": 500,
        "stylePreferences": ["modern"],
        "availableProducts": [
            {"id": "p-coffee", "name": "Glass Table", "category": "COFFEE_TABLE", "priceFils": 150},
            {"id": "p-sofa", "name": "Leather Sofa", "category": "SOFA", "priceFils": 300},
        ],
    }
    body.update(overrides)
    return body


@pytest.mark.unit
def test_health_reports_ai_not_configured(client) -> None:
    res = client.get("/health")

    assert res.status_code == 200
    assert res.json()["status"] == "ok"
    assert res.json()["aiConfigured"] is False


@pytest.mark.unit
def test_recommend_package_uses_fallback(client) -> None:
    res = client.post("/recommendations/package", json=_package_body())

    assert res.status_code == 200
    data = res.json()
    assert data["source"] == "fallback"
    assert data["totalPriceFils"] == 450
    assert [p["productId"] for p in data["selectedProducts"]] == ["p-sofa", "p-coffee"]
    assert data["packageReasoning"].startswith("Rule-based selection: picked 2 items")


@pytest.mark.unit
def test_recommend_package_rejects_negative_budget(client) -> None:
    res = client.post("/recommendations/package", json=_package_body(budgetMaxFils=-1))

    assert res.status_code == 422


@pytest.mark.unit
def test_recommend_package_rejects_unknown_category(client) -> None:
    body = _package_body(
        availableProducts=[{"id": "p-1", "name": "Hammock", "category": "HAMMOCK", "priceFils": 10}]
    )

    res = client.post("/recommendations/package", json=body)

    assert res.status_code == 422


@pytest.mark.unit
def test_recommend_package_with_no_affordable_products(client) -> None:
    res = client.post("/recommendations/package", json=_package_body(budgetMaxFils=100))

    assert res.status_code == 200
    data = res.json()
    assert data["selectedProducts"] == []
    assert data["totalPriceFils"] == 0


@pytest.mark.unit
def test_style_match_fallback_score(client) -> None:
    res = client.post(
        "/style-match",
        json={
            "productId": "p-sofa",
            "styleTag": "modern",
            "productCategory": "SOFA",
            "productMaterials": ["leather"],
        },
    )

    assert res.status_code == 200
    data = res.json()
    assert data["score"] == 0.77
    assert data["source"] == "fallback"


@pytest.mark.unit
def test_room_classification_by_name(client) -> None:
    res = client.post("/room-classification/by-name", json={"name": "Master Bedroom"})

    assert res.status_code == 200
    assert res.json() == {"type": "BEDROOM", "confidence": 0.85, "source": "fallback"}


@pytest.mark.unit
def test_room_classification_without_photos_uses_room_name(client) -> None:
    res = client.post("/room-classification", json={"photoUrls": [], "roomName": "Family Room"})

    assert res.status_code == 200
    assert res.json()["type"] == "LIVING_ROOM"


@pytest.mark.unit
def test_recommend_package_rejects_unknown_style(client) -> None:
    res = client.post("/recommendations/package", json=_package_body(stylePreferences=["gothic"]))

    assert res.status_code == 422


@pytest.mark.unit
def test_style_match_rejects_unknown_style_tag(client) -> None:
    res = client.post("/style-match", json={"productId": "p-1", "styleTag": "gothic"})

    assert res.status_code == 422
