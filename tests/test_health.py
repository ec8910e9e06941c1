from datetime import datetime


def test_health_reports_status_timestamp_and_version(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "healthy"
    assert body["version"] == "9.9.9"
    assert datetime.fromisoformat(body["timestamp"].replace("Z", "+00:00"))


def test_health_ignores_store_contents(empty_client):
    resp = empty_client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


def test_health_unaffected_by_creates(client):
    client.post("/api/users", json={"name": "Dana", "email": "dana@example.com"})
    assert client.get("/health").json()["status"] == "healthy"


def test_health_answers_head(client):
    resp = client.head("/health")

    assert resp.status_code == 200
