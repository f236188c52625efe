from fastapi.testclient import TestClient

from app.main import create_app


def test_health_endpoints():
    client = TestClient(create_app())

    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["service"] == "Advertisement API"

    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_cors_allows_any_origin():
    client = TestClient(create_app())

    r = client.get("/health", headers={"Origin": "https://ads.example.com"})
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"


def test_database_health(client):
    r = client.get("/health/db")

    assert r.status_code == 200
    assert r.json() == {"status": "ok", "database": "reachable"}
