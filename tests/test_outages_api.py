"""Tests for the outages HTTP endpoints."""

from fastapi.testclient import TestClient

from auth_outage.middleware import parse_actor_id


def create(client: TestClient, user_id: str = "5", **fields):
    payload = {"starttime": 1000, "stoptime": 2000, "title": "Maintenance"}
    payload.update(fields)
    return client.post("/outages/", json=payload, headers={"X-User-Id": user_id})


class TestOutagesApi:
    def test_root(self, client: TestClient):
        response = client.get("/")
        assert response.status_code == 200

    def test_create_outage(self, client: TestClient, clock):
        response = create(client)
        assert response.status_code == 201
        data = response.json()
        assert data["id"] > 0
        assert data["createdby"] == 5
        assert data["modifiedby"] == 5
        assert data["lastmodified"] == clock.now
        assert "X-Process-Time" in response.headers

    def test_create_without_user_uses_default_actor(self, client: TestClient):
        response = client.post("/outages/", json={"starttime": 1, "stoptime": 2, "title": "Anon"})
        assert response.status_code == 201
        assert response.json()["createdby"] == 1

    def test_create_invalid_window(self, client: TestClient):
        response = create(client, starttime=2000, stoptime=1000)
        assert response.status_code == 422

    def test_list_outages_ordered(self, client: TestClient):
        create(client, starttime=10, stoptime=20, title="B")
        create(client, starttime=5, stoptime=20, title="Z")
        create(client, starttime=5, stoptime=20, title="A")

        response = client.get("/outages/")

        assert response.status_code == 200
        assert [o["title"] for o in response.json()] == ["A", "Z", "B"]

    def test_get_outage(self, client: TestClient):
        outage_id = create(client).json()["id"]
        response = client.get(f"/outages/{outage_id}")
        assert response.status_code == 200
        assert response.json()["title"] == "Maintenance"

    def test_get_outage_not_found(self, client: TestClient):
        response = client.get("/outages/99")
        assert response.status_code == 404

    def test_get_outage_invalid_id(self, client: TestClient):
        response = client.get("/outages/0")
        assert response.status_code == 400

    def test_update_outage(self, client: TestClient, clock):
        outage_id = create(client, user_id="5").json()["id"]
        clock.now += 30

        response = client.put(
            f"/outages/{outage_id}",
            json={"starttime": 1000, "stoptime": 3000, "title": "Longer"},
            headers={"X-User-Id": "8"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == outage_id
        assert data["stoptime"] == 3000
        assert data["title"] == "Longer"
        assert data["createdby"] == 5
        assert data["modifiedby"] == 8
        assert data["lastmodified"] == clock.now

    def test_update_outage_not_found(self, client: TestClient):
        response = client.put("/outages/99", json={"starttime": 1, "stoptime": 2, "title": "x"})
        assert response.status_code == 404

    def test_delete_outage(self, client: TestClient):
        outage_id = create(client).json()["id"]

        assert client.delete(f"/outages/{outage_id}").status_code == 200
        assert client.get(f"/outages/{outage_id}").status_code == 404
        # deleting again is not an error
        assert client.delete(f"/outages/{outage_id}").status_code == 200

    def test_delete_invalid_id(self, client: TestClient):
        assert client.delete("/outages/-3").status_code == 400


def test_parse_actor_id():
    assert parse_actor_id("12") == 12
    assert parse_actor_id(None) is None
    assert parse_actor_id("") is None
    assert parse_actor_id("abc") is None
    assert parse_actor_id("-4") is None
