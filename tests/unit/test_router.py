# tests/unit/test_router.py
import openai
import pytest
from fastapi.testclient import TestClient
from app.main import app
from app.deps import get_openai_client, get_profile_store
from app.schemas import SoftwareEngineer

client = TestClient(app)

BASE = "/api/v1/software-engineers"

@pytest.fixture
def overrides(store, fake_openai):
    def _apply(openai_client):
        app.dependency_overrides[get_openai_client] = lambda: openai_client
        app.dependency_overrides[get_profile_store] = lambda: store
    yield _apply
    app.dependency_overrides.clear()

def test_hello():
    resp = client.get("/hello")
    assert resp.status_code == 200
    assert resp.text == "Hello World"

def test_list_empty(overrides, fake_openai):
    overrides(fake_openai("unused"))
    resp = client.get(BASE)
    assert resp.status_code == 200
    assert resp.json() == []

def test_create_returns_enriched_record(overrides, fake_openai, store):
    overrides(fake_openai("Study X"))
    resp = client.post(BASE, json={"name": "Ana", "techStack": "Java, Spring"})
    assert resp.status_code == 201
    body = resp.json()
    assert body["id"] == 1
    assert body["learningPathRecommendation"] == "Study X"
    assert store.count() == 1

def test_create_ignores_id_and_recommendation_in_body(overrides, fake_openai, store):
    overrides(fake_openai("Study X"))
    resp = client.post(BASE, json={
        "id": 99, "name": "Ana", "techStack": "Go", "learningPathRecommendation": "mine"
    })
    assert resp.status_code == 201
    assert resp.json()["id"] != 99
    assert resp.json()["learningPathRecommendation"] == "Study X"

def test_create_invalid_payload(overrides, fake_openai):
    overrides(fake_openai("unused"))
    # name, techStack 가 없으면 FastAPI validation error
    resp = client.post(BASE, json={})
    assert resp.status_code == 422

def test_create_generation_failure_is_502_and_nothing_saved(overrides, fake_openai, store):
    overrides(fake_openai(error=openai.OpenAIError("backend down")))
    resp = client.post(BASE, json={"name": "Ana", "techStack": "Java"})
    assert resp.status_code == 502
    assert store.count() == 0

def test_get_missing_is_404(overrides, fake_openai):
    overrides(fake_openai("unused"))
    resp = client.get(f"{BASE}/9999")
    assert resp.status_code == 404
    assert "not found" in resp.json()["detail"]

def test_delete_missing_is_204(overrides, fake_openai):
    overrides(fake_openai("unused"))
    resp = client.delete(f"{BASE}/9999")
    assert resp.status_code == 204

def test_update_missing_is_404(overrides, fake_openai):
    overrides(fake_openai("unused"))
    resp = client.put(f"{BASE}/5", json={"name": "New", "techStack": "Go"})
    assert resp.status_code == 404

def test_update_keeps_recommendation(overrides, fake_openai, store):
    overrides(fake_openai("unused"))
    store.save(SoftwareEngineer(name="Ana", techStack="Java", learningPathRecommendation="Study X"))

    resp = client.put(f"{BASE}/1", json={"name": "New", "techStack": "Go"})
    assert resp.status_code == 204

    body = client.get(f"{BASE}/1").json()
    assert body == {"id": 1, "name": "New", "techStack": "Go", "learningPathRecommendation": "Study X"}

def test_unexpected_error_is_500(overrides, fake_openai, store, mocker):
    overrides(fake_openai("unused"))
    mocker.patch.object(store, "find_all", side_effect=Exception("db gone"))
    resp = client.get(BASE)
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Internal server error"
