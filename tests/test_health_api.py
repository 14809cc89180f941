# tests/test_health_api.py

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from app.core.settings import Settings
from app.main import create_app


def test_ping_uses_env_message(slow_client):
    resp = slow_client.get("/api/ping")
    assert resp.status_code == 200
    assert resp.json() == {"message": "pong from tests"}


def test_ping_uses_injected_settings():
    cfg = Settings(ping_message="hello there")
    with TestClient(create_app(cfg)) as c:
        assert c.get("/api/ping").json() == {"message": "hello there"}


def test_demo(client, fast_settings):
    resp = client.get("/api/demo")
    assert resp.status_code == 200
    assert resp.json() == {"message": fast_settings.demo_message}


def test_healthz_reports_caption_config(client):
    body = client.get("/healthz").json()
    assert body["status"] == "ok"
    assert body["caption"]["pattern_groups"] == [
        "person", "building", "nature", "food", "animal", "vehicle",
    ]
    assert body["caption"]["fallback_pool_size"] == 5
    assert body["caption"]["delay_ms"] == [0, 5]
    assert body["client"]["mounted"] is False
    assert body["versions"]["fastapi"] != "not-installed"


def test_client_bundle_is_served(tmp_path):
    (tmp_path / "index.html").write_text("<html>caption demo</html>", encoding="utf-8")
    cfg = Settings(client_dist_dir=tmp_path, caption_delay_min_ms=0, caption_delay_max_ms=1)
    with TestClient(create_app(cfg)) as c:
        page = c.get("/")
        assert page.status_code == 200
        assert "caption demo" in page.text
        # API routes still win over the static mount
        assert c.get("/api/ping").status_code == 200


def test_settings_reject_inverted_delay():
    with pytest.raises(ValidationError):
        Settings(caption_delay_min_ms=2000, caption_delay_max_ms=800)


def test_settings_reject_negative_delay():
    with pytest.raises(ValidationError):
        Settings(caption_delay_min_ms=-1)
