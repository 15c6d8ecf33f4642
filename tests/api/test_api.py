"""
Tests for the SmartLink HTTP API.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from smartlink.api.deps import get_context
from smartlink.api.main import app

# --- Test Setup ---


@pytest.fixture
def client(test_ctx):
    """Test client wired to an in-memory engine (lifespan not started)."""
    app.dependency_overrides[get_context] = lambda: test_ctx
    yield TestClient(app)
    app.dependency_overrides.clear()


def add_link(client: TestClient, title: str, url: str, **extra) -> dict:
    response = client.post("/api/links", json={"title": title, "url": url, **extra})
    assert response.status_code == 201
    return response.json()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok", "service": "smartlink"}


class TestProfileRoutes:
    def test_get_default_profile(self, client):
        response = client.get("/api/profile")

        assert response.status_code == 200
        body = response.json()
        assert body["saved"] is True
        assert body["profile"]["displayName"] == "Your Name"
        assert body["profile"]["theme"]["primaryColor"] == "#0d6efd"

    def test_partial_update(self, client):
        response = client.put("/api/profile", json={"displayName": "Ada", "bannerUrl": "b.png"})

        assert response.status_code == 200
        profile = response.json()["profile"]
        assert profile["displayName"] == "Ada"
        assert profile["username"] == "username"
        assert profile["bannerUrl"] == "b.png"


class TestLinkRoutes:
    def test_create_and_list(self, client):
        created = add_link(client, "GitHub", "github.com/ada", type="social")

        assert created["index"] == 0
        assert created["link"]["url"] == "https://github.com/ada"
        assert created["link"]["icon"] == "fas fa-share-alt"
        assert created["saved"] is True

        listing = client.get("/api/links").json()
        assert listing["total"] == 1
        assert listing["canAddMore"] is True
        assert listing["maxLinks"] == 50
        assert listing["items"][0]["cssClass"] == "social-github"
        assert listing["items"][0]["clicks"] == 0

    def test_create_validation_error(self, client):
        response = client.post("/api/links", json={"title": "", "url": "x.com"})

        assert response.status_code == 400
        assert response.json()["detail"][0] == {
            "code": "missing_field",
            "message": "Title is required",
            "field": "title",
        }

    def test_update(self, client):
        add_link(client, "Old", "old.com")

        response = client.put("/api/links/0", json={"title": "New", "url": "new.com"})

        assert response.status_code == 200
        assert response.json()["link"]["title"] == "New"

    def test_get_missing_link_is_404(self, client):
        response = client.get("/api/links/7")

        assert response.status_code == 404
        assert response.json()["detail"][0]["code"] == "index_out_of_range"

    def test_delete(self, client):
        add_link(client, "A", "a.com")

        assert client.delete("/api/links/0").json() == {"saved": True}
        assert client.delete("/api/links/0").status_code == 404

    def test_move(self, client):
        add_link(client, "A", "a.com")
        add_link(client, "B", "b.com")

        response = client.post("/api/links/1/move", json={"toIndex": 0})

        assert response.status_code == 200
        titles = [item["title"] for item in client.get("/api/links").json()["items"]]
        assert titles == ["B", "A"]


class TestStatsRoutes:
    def test_click_and_summary(self, client):
        add_link(client, "A", "a.com")
        add_link(client, "B", "b.com")

        click = client.post("/api/links/0/click").json()
        assert click["key"] == "link_0"
        assert click["clicks"] == 1
        assert click["lastClickTimestamp"] == "2025-03-14T09:30:00Z"
        assert click["totalClicks"] == 1

        stats = client.get("/api/stats").json()
        assert stats["totalClicks"] == 1
        assert stats["totalLinks"] == 2
        assert stats["averageClicksPerLink"] == 1
        assert stats["rows"][0]["title"] == "A"

    def test_negative_click_is_404(self, client):
        assert client.post("/api/links/-1/click").status_code == 404

    def test_reset(self, client):
        add_link(client, "A", "a.com")
        client.post("/api/links/0/click")

        assert client.delete("/api/stats").json() == {"saved": True}
        assert client.get("/api/stats").json()["totalClicks"] == 0


class TestThemeRoutes:
    def test_toggle(self, client):
        body = client.post("/api/theme/toggle").json()

        assert body["theme"]["mode"] == "dark"
        assert body["changed"] is True

    def test_invalid_mode(self, client):
        response = client.put("/api/theme/mode", json={"mode": "sepia"})

        assert response.status_code == 400
        assert response.json()["detail"][0]["field"] == "mode"

    def test_color(self, client):
        body = client.put("/api/theme/color", json={"primaryColor": "#222222"}).json()

        assert body["theme"]["primaryColor"] == "#222222"

    def test_blank_color_rejected(self, client):
        response = client.put("/api/theme/color", json={"primaryColor": "  "})

        assert response.status_code == 400
        assert response.json()["detail"][0] == {
            "code": "invalid_value",
            "message": "Primary color is required",
            "field": "primaryColor",
        }
        assert client.get("/api/theme").json()["theme"]["primaryColor"] == "#0d6efd"

    def test_presets(self, client):
        ocean = client.post("/api/theme/preset/ocean").json()
        assert ocean["theme"]["primaryColor"] == "#74b9ff"
        assert ocean["theme"]["preset"] == "ocean"

        unknown = client.post("/api/theme/preset/neon").json()
        assert unknown["changed"] is False
        assert unknown["theme"]["primaryColor"] == "#74b9ff"


class TestSnapshotRoutes:
    def test_export_download(self, client):
        client.put("/api/profile", json={"username": "ada"})

        response = client.get("/api/export")

        assert response.status_code == 200
        assert response.headers["content-disposition"] == (
            "attachment; filename=\"smartlink-ada-2025-03-14.json\"; "
            "filename*=UTF-8''smartlink-ada-2025-03-14.json"
        )
        assert response.json()["profile"]["username"] == "ada"

    def test_export_non_ascii_username(self, client):
        client.put("/api/profile", json={"username": "李雷"})

        response = client.get("/api/export")

        assert response.status_code == 200
        assert response.headers["content-disposition"] == (
            "attachment; filename=\"smartlink-__-2025-03-14.json\"; "
            "filename*=UTF-8''smartlink-%E6%9D%8E%E9%9B%B7-2025-03-14.json"
        )
        assert response.json()["profile"]["username"] == "李雷"

    def test_export_username_cannot_break_header(self, client):
        client.put("/api/profile", json={"username": 'a"b\r\nX-Injected: 1'})

        response = client.get("/api/export")

        assert response.status_code == 200
        assert "x-injected" not in response.headers
        disposition = response.headers["content-disposition"]
        assert 'filename="smartlink-a_b__X-Injected: 1-2025-03-14.json"' in disposition
        assert disposition.endswith(
            "filename*=UTF-8''smartlink-a%22b%0D%0AX-Injected%3A%201-2025-03-14.json"
        )

    def test_import_round_trip(self, client):
        client.put("/api/profile", json={"username": "ada"})
        add_link(client, "A", "a.com")
        exported = client.get("/api/export").json()
        client.post("/api/reset")
        assert client.get("/api/links").json()["total"] == 0

        response = client.post("/api/import", json=exported)

        assert response.status_code == 200
        assert response.json() == {"saved": True}
        assert client.get("/api/profile").json()["profile"]["username"] == "ada"
        assert client.get("/api/links").json()["total"] == 1

    def test_import_invalid_document(self, client):
        response = client.post("/api/import", json={"hello": "world"})

        assert response.status_code == 400
        assert response.json()["detail"][0]["field"] == "content"
