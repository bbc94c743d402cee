"""
Hauge API — Application Tests
==============================

What we test:
    ✅ Startup refuses to run without JWT_SECRET
    ✅ Health endpoint reports the database
    ✅ Unknown routes return the JSON 404 body
    ✅ Every response carries X-Request-ID; unsafe client ids are replaced
"""

import pytest

from app.config import Settings
from app.exceptions import ConfigurationError
from app.main import create_app
from app.middleware.request_id import resolve_request_id


class TestCreateApp:

    def test_missing_secret_aborts(self):
        with pytest.raises(ConfigurationError):
            create_app(Settings(jwt_secret=""))

    def test_codec_attached(self):
        app = create_app(Settings(jwt_secret="another-secret"))
        token = app.state.token_codec.issue(3)
        assert app.state.token_codec.verify(token) == 3


class TestHttpSurface:

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"

    @pytest.mark.asyncio
    async def test_unknown_route(self, test_client):
        response = await test_client.get("/nope")
        assert response.status_code == 404
        assert response.json() == {"error": "Not found"}

    @pytest.mark.asyncio
    async def test_request_id_header(self, test_client):
        generated = await test_client.get("/users")
        assert generated.headers.get("X-Request-ID")

        echoed = await test_client.get("/users", headers={"X-Request-ID": "abc123"})
        assert echoed.headers["X-Request-ID"] == "abc123"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("supplied", ["bad id", "x" * 65])
    async def test_unsafe_request_id_replaced(self, test_client, supplied):
        response = await test_client.get("/users", headers={"X-Request-ID": supplied})

        rid = response.headers["X-Request-ID"]
        assert rid != supplied
        assert len(rid) == 8


class TestResolveRequestId:

    @pytest.mark.parametrize("supplied", ["abc123", "req-1.2_3", "x" * 64])
    def test_safe_tokens_kept(self, supplied):
        assert resolve_request_id(supplied) == supplied

    @pytest.mark.parametrize("supplied", ["", "two words", "x" * 65, "id\nforged log line"])
    def test_unsafe_values_regenerated(self, supplied):
        rid = resolve_request_id(supplied)
        assert rid != supplied
        assert len(rid) == 8
