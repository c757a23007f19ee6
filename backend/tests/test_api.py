import inspect
import json

import pytest
from fastapi.routing import APIRoute
from fastapi.testclient import TestClient

from main import create_app


@pytest.fixture
def client():
    with TestClient(create_app()) as test_client:
        yield test_client


def _scene_id(client, name: str) -> str:
    return next(s["id"] for s in client.get("/scenes").json() if s["name"] == name)


def test_health(client):
    body = client.get("/health").json()

    assert body["status"] == "ok"
    assert body["llm_available"] is True


def test_landmarks_by_continent(client):
    resp = client.get("/landmarks", params={"continent": "Asia"})

    assert resp.status_code == 200
    assert [l["name"] for l in resp.json()] == ["Mount Everest", "Mount Fuji", "Wulingyuan"]
    assert client.get("/landmarks/9999").status_code == 404
    assert client.get("/landmarks/featured").json()["id"] == 1016


def test_toggle_favorite(client):
    resp = client.post("/landmarks/1002/favorite")

    assert resp.json()["is_favorite"] is True
    favorites = client.get("/collections/1001").json()
    assert 1002 in favorites["landmark_ids"]


def test_badge_progress_updates_earned_badges(client):
    resp = client.delete("/landmarks/1016/badge-progress/draw_sketch")

    assert resp.json()["badge_earned"] is False
    badges = [b["id"] for b in client.get("/landmarks/badges").json()]
    assert "mount_fuji" not in badges
    assert client.put("/landmarks/1002/badge-progress/take_photo").status_code == 404


def test_collections_lifecycle(client):
    created = client.post("/collections")
    assert created.status_code == 201
    collection_id = created.json()["id"]
    assert collection_id == 1006

    renamed = client.patch(f"/collections/{collection_id}", json={"name": "Volcanoes"})
    assert renamed.json()["name"] == "Volcanoes"

    added = client.put(f"/collections/{collection_id}/landmarks/1016")
    assert added.json()["landmarks"][0]["name"] == "Mount Fuji"

    assert client.delete(f"/collections/{collection_id}").status_code == 204
    assert client.get(f"/collections/{collection_id}").status_code == 404


def test_favorites_collection_cannot_be_deleted(client):
    assert client.delete("/collections/1001").status_code == 409


def test_create_scene_from_location(client):
    resp = client.post(
        "/scenes",
        json={"country": "Japan", "region": "Osaka", "city": "Osaka", "planned_date": "2030-05-01T00:00:00"},
    )

    assert resp.status_code == 201
    scene = resp.json()
    assert scene["name"] == "Osaka"
    assert scene["status"] == "Planned"
    assert scene["latitude"] == 34.6937
    planned = [s["name"] for s in client.get("/scenes", params={"status": "Planned"}).json()]
    assert planned[-1] == "Osaka"


def test_create_scene_with_unknown_location(client):
    resp = client.post("/scenes", json={"country": "Atlantis", "region": "x", "city": "y"})

    assert resp.status_code == 422


def test_scene_status_and_visits(client):
    scene_id = _scene_id(client, "Sydney")

    visited = client.put(f"/scenes/{scene_id}/status", json={"status": "Visited"}).json()
    assert visited["visit_count"] == 1
    assert visited["planned_date"] is None

    bad = client.post(
        f"/scenes/{scene_id}/visits",
        json={"start_date": "2024-01-03T00:00:00", "end_date": "2024-01-01T00:00:00"},
    )
    assert bad.status_code == 422

    good = client.post(
        f"/scenes/{scene_id}/visits",
        json={"start_date": "2024-01-01T00:00:00", "end_date": "2024-01-03T00:00:00"},
    )
    assert good.json()["visit_count"] == 2


def test_scene_photos(client):
    scene_id = _scene_id(client, "Paris")

    photo = client.post(f"/scenes/{scene_id}/photos", params={"caption": "Louvre"}, content=b"\x89PNG").json()
    assert photo["size"] == 4

    download = client.get(f"/scenes/{scene_id}/photos/{photo['id']}")
    assert download.content == b"\x89PNG"

    assert client.delete(f"/scenes/{scene_id}/photos/{photo['id']}").status_code == 204
    assert client.get(f"/scenes/{scene_id}/photos").json() == []


def test_set_toggle(client):
    tokyo_id = _scene_id(client, "Tokyo")
    scene_set = client.post("/sets", json={"name": "Food Trips", "color": "orange"}).json()
    assert scene_set["color_hex"] == "#FF9500"

    toggled = client.post(f"/sets/{scene_set['id']}/scenes/{tokyo_id}/toggle").json()
    assert toggled["scene_ids"] == [tokyo_id]
    scene_sets = client.get(f"/scenes/{tokyo_id}/sets").json()
    assert scene_set["id"] in [s["id"] for s in scene_sets]

    client.post(f"/sets/{scene_set['id']}/scenes/{tokyo_id}/toggle")
    assert client.get(f"/sets/{scene_set['id']}/scenes").json() == []


def test_landmark_recommendation_streams_ndjson(client):
    resp = client.get("/landmarks/1016/recommendation")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/x-ndjson")
    snapshots = [json.loads(line) for line in resp.text.splitlines() if line]
    assert len(snapshots) > 1
    assert snapshots[-1]["title"] == "Discover Mount Fuji"


def test_locations_lookup(client):
    assert client.get("/locations/countries/日本").json()["code"] == "JP"
    assert client.get("/locations/countries/Atlantis").status_code == 404
    assert len(client.get("/locations/countries").json()) == 14


def test_store_handlers_run_on_the_event_loop(client):
    app = client.app
    blocking = {"/health", "/landmarks/{landmark_id}/recommendation", "/scenes/{scene_id}/recommendation"}
    store_routes = [
        route
        for route in app.routes
        if isinstance(route, APIRoute)
        and route.path.startswith(("/landmarks", "/collections", "/scenes", "/sets"))
        and route.path not in blocking
    ]

    assert store_routes
    assert [r.path for r in store_routes if not inspect.iscoroutinefunction(r.endpoint)] == []
