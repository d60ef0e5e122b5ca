"""
Tests for error handling across the API.

This test suite validates:
- Request decoding failures map to 400 before anything is written
- Store failures map to 500 with the driver message
- Unknown resources and routes map to 404
- Every error body has the shape {"error": "<message>"}
"""

import logging

from test_fixtures import BREAKFAST, make_ingredient_template


# ============================================================================
# Decoding errors (400)
# ============================================================================


class TestDecodingErrors:
    def test_malformed_json_writes_nothing(self, client):
        resp = client.post(
            "/api/meals",
            content=b'{"name": "Breakfast", ',
            headers={"Content-Type": "application/json"},
        )

        assert resp.status_code == 400
        assert resp.json() == {"error": "JSON decode error"}
        assert client.get("/api/meals").json() == []
        assert client.get("/api/ingredients").json() == []

    def test_missing_required_field(self, client):
        resp = client.post("/api/meals", json={"datetime": "2024-01-01T08:00:00Z"})

        assert resp.status_code == 400
        assert "name" in resp.json()["error"]

    def test_wrong_field_type(self, client):
        payload = dict(BREAKFAST, datetime="not a date")
        resp = client.post("/api/meals", json=payload)

        assert resp.status_code == 400
        assert "datetime" in resp.json()["error"]

    def test_non_numeric_path_id(self, client):
        resp = client.get("/api/meals/abc")
        assert resp.status_code == 400
        assert "error" in resp.json()

    def test_meal_template_link_without_id(self, client):
        resp = client.post(
            "/api/meal-templates", json={"name": "Broken", "ingredients": [{"quantity": 2}]}
        )
        assert resp.status_code == 400
        assert client.get("/api/meal-templates").json() == []


# ============================================================================
# Storage errors (500)
# ============================================================================


class TestStorageErrors:
    def test_invalid_macro_unit(self, client):
        resp = client.post(
            "/api/ingredient-templates", json=make_ingredient_template(macro_unit="per_cup")
        )

        assert resp.status_code == 500
        body = resp.json()
        assert set(body) == {"error"}
        assert body["error"]
        assert len(client.get("/api/ingredient-templates").json()) == 10

    def test_storage_failure_logged_once(self, client, caplog):
        with caplog.at_level(logging.ERROR):
            resp = client.post(
                "/api/ingredient-templates", json=make_ingredient_template(name="Banana")
            )

        assert resp.status_code == 500
        errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
        assert len(errors) == 1
        assert "storage_failure" in errors[0].getMessage()

    def test_duplicate_template_name(self, client):
        resp = client.post(
            "/api/ingredient-templates", json=make_ingredient_template(name="Banana")
        )
        assert resp.status_code == 500
        assert "error" in resp.json()

    def test_unknown_ingredient_template_reference(self, client):
        """
        Verifies:
        - Linking a nonexistent ingredient template fails with 500
        - The meal template row inserted before the failure is rolled back
        """
        resp = client.post(
            "/api/meal-templates",
            json={"name": "Ghost meal", "ingredients": [{"id": 987654}]},
        )

        assert resp.status_code == 500
        assert "error" in resp.json()
        assert client.get("/api/meal-templates").json() == []


# ============================================================================
# Not found (404)
# ============================================================================


def test_unknown_api_route(client):
    resp = client.get("/api/does-not-exist")
    assert resp.status_code == 404
    assert "error" in resp.json()


def test_missing_ingredient_template(client):
    resp = client.get("/api/ingredient-templates/424242")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Ingredient template not found"}
