"""Tests for the homepage, health, hits and app wiring."""

from fastapi.testclient import TestClient

from config import Settings


def test_homepage(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "Video Player API" in response.text
    assert "/api/embed.js" in response.text
    assert "/api/source/0tmqi4jmtowr" in response.text


def test_ready(client):
    response = client.get("/ready")
    assert response.json() == {"status": "ok", "service": "clean-player-api", "commit": "abc123"}


def test_health_reports_cache_entries(client):
    assert client.get("/health").json()["cache_entries"] == 0
    client.get("/embed/abc")
    assert client.get("/health").json()["cache_entries"] == 1


def test_hits_counts_requests(client):
    first = client.get("/api/hits").json()
    second = client.get("/api/hits").json()

    assert first["status"] == "ok"
    assert first["total_hits"] == 1
    assert second["total_hits"] == 2
    assert second["last_hit_time"].endswith("+00:00")
    assert second["region"] == "test-region"
    assert second["requester_ip"] == "testclient"


def test_hits_prefers_forwarded_for(client):
    response = client.get("/api/hits", headers={"X-Forwarded-For": "203.0.113.7"})
    assert response.json()["requester_ip"] == "203.0.113.7"


def test_apps_do_not_share_state(settings, clock):
    from app import create_app

    first = TestClient(create_app(settings=settings, clock=clock))
    second = TestClient(create_app(settings=settings, clock=clock))
    first.get("/api/hits")
    first.get("/embed/abc")

    assert second.get("/api/hits").json()["total_hits"] == 1
    assert second.get("/health").json()["cache_entries"] == 0


def test_unexpected_error_outside_player_is_json(app, monkeypatch):
    def _boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr("routes.hits._requester_ip", _boom)
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/api/hits")
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_production_sets_hsts(monkeypatch, clock):
    from app import create_app

    monkeypatch.setenv("ENVIRONMENT", "production")
    client = TestClient(create_app(settings=Settings(), clock=clock))
    response = client.get("/ready")
    assert "max-age=31536000" in response.headers["strict-transport-security"]


def test_settings_defaults(monkeypatch):
    for var in ("PORT", "EMBED_CACHE_TTL_SECONDS", "REGION", "ENVIRONMENT"):
        monkeypatch.delenv(var, raising=False)
    settings = Settings()
    assert settings.port == 3000
    assert settings.embed_cache_ttl_seconds == 1800
    assert settings.region == "unknown"
    assert not settings.is_production
    assert settings.validate() == []


def test_settings_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("PORT", "abc")
    monkeypatch.setenv("EMBED_CACHE_TTL_SECONDS", "-5")
    settings = Settings()
    assert settings.port == 3000
    assert settings.embed_cache_ttl_seconds == 1800
    problems = settings.validate()
    assert len(problems) == 2
    assert problems[0].startswith("PORT=")
