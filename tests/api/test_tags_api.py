from __future__ import annotations

from fastapi.testclient import TestClient

from papergraph.main import create_app


def test_list_tags_and_filter_by_category(client) -> None:
    all_tags = client.get("/api/tags").json()["data"]
    techniques = client.get("/api/tags", params={"category": "technique"}).json()["data"]

    assert len(all_tags) == 10
    assert [tag["name"] for tag in techniques] == ["Transformer", "BERT", "GPT"]


def test_create_tag_rejects_duplicates(client) -> None:
    created = client.post("/api/tags", json={"name": "Diffusion", "color": "#000", "category": "technique"})
    duplicate = client.post("/api/tags", json={"name": "diffusion", "color": "#111", "category": "method"})

    assert created.status_code == 200
    assert created.json()["data"]["usage_count"] == 0
    assert duplicate.status_code == 409


def test_update_tag_keeps_identity(client, api_catalog) -> None:
    gpt = api_catalog.tags.get_by_name("GPT")

    response = client.put(f"/api/tags/{gpt.id}", json={"name": "GPT-4", "color": "#fff"})
    conflict = client.put(f"/api/tags/{gpt.id}", json={"name": "bert"})
    missing = client.put("/api/tags/999", json={"color": "#fff"})

    assert response.json()["data"]["id"] == gpt.id
    assert response.json()["data"]["name"] == "GPT-4"
    assert conflict.status_code == 409
    assert missing.status_code == 404


def test_update_tag_rejects_null_required_fields(client, api_catalog, article_payload) -> None:
    tag = client.post("/api/tags", json={"name": "Pruning", "color": "#000", "category": "method"}).json()["data"]
    article = client.post("/api/articles", json={**article_payload, "tags": ["Pruning"]}).json()["data"]

    for field in ("name", "color", "category"):
        response = client.put(f"/api/tags/{tag['id']}", json={field: None})
        assert response.status_code == 422
        assert response.json()["code"] == 1

    cleared_description = client.put(f"/api/tags/{tag['id']}", json={"description": None})
    found = client.get("/api/articles", params={"tags": "prun"}).json()["data"]

    assert cleared_description.status_code == 200
    assert api_catalog.tags.get(tag["id"]).name == "Pruning"
    assert [item["id"] for item in found["articles"]] == [article["id"]]


def test_blank_tag_names_are_rejected(client, api_catalog, article_payload) -> None:
    article = client.post("/api/articles", json=article_payload).json()["data"]
    gpt = api_catalog.tags.get_by_name("GPT")

    created = client.post("/api/tags", json={"name": "   ", "color": "#000", "category": "method"})
    renamed = client.put(f"/api/tags/{gpt.id}", json={"name": " "})
    attached = client.post(
        f"/api/articles/{article['id']}/tags",
        json={"name": "  ", "color": "#000", "category": "method"},
    )

    assert created.status_code == 422
    assert renamed.status_code == 422
    assert attached.status_code == 422
    assert api_catalog.tags.get_by_name("") is None
    assert gpt.name == "GPT"


def test_create_tag_strips_surrounding_whitespace(client, api_catalog) -> None:
    response = client.post("/api/tags", json={"name": "  Pruning ", "color": "#000", "category": "method"})

    assert response.json()["data"]["name"] == "Pruning"
    assert api_catalog.tags.get_by_name("pruning") is not None


def test_delete_tag(client, api_catalog) -> None:
    gpt = api_catalog.tags.get_by_name("GPT")

    assert client.delete(f"/api/tags/{gpt.id}").status_code == 200
    assert client.delete(f"/api/tags/{gpt.id}").status_code == 404
    assert api_catalog.tags.get_by_name("GPT") is None


def test_categories_and_health(client) -> None:
    categories = client.get("/api/categories").json()

    assert categories["code"] == 0
    assert categories["data"][0]["id"] == "cs-ai"
    health = client.get("/api/health").json()
    assert health["code"] == 0
    assert health["data"]["status"] == "healthy"
    assert client.get("/").json()["data"]["service"]


def test_app_creates_and_closes_its_own_catalog() -> None:
    app = create_app()

    with TestClient(app) as owned_client:
        assert owned_client.get("/api/tags").status_code == 200
        assert app.state.catalog is not None

    assert app.state.catalog is None
