"""Tests for the app factory, rate limiting and startup."""

import json
import logging
import socket
from unittest.mock import patch

import pytest
from werkzeug.serving import BaseWSGIServer

import app as app_module
from app import create_app
from Utils.catalog import Catalog
from Utils.config import Settings


class TestCreateApp:
    """create_app — catalog built and injected before serving."""

    def test_builds_catalog_from_settings(self) -> None:
        app = create_app(Settings(item_count=12, seed=5, file_logging=False, ratelimit_enabled=False))
        catalog = app.extensions["catalog"]
        assert isinstance(catalog, Catalog)
        assert len(catalog) == 12

    def test_uses_injected_catalog(self, catalog, settings) -> None:
        app = create_app(settings, catalog)
        assert app.extensions["catalog"] is catalog
        assert app.config["CATALOG_SETTINGS"] is settings

    def test_catalog_size_constant_while_serving(self, client, catalog) -> None:
        sizes = set()
        for item_id in (1, 2, 3):
            client.get(f"/items/{item_id}")
            sizes.add(json.loads(client.get("/").get_data(as_text=True))["itemsLoaded"])
        assert sizes == {len(catalog)}


class TestRateLimit:
    """Flask-Limiter default limits answered as JSON."""

    def test_too_many_requests(self) -> None:
        settings = Settings(file_logging=False, ratelimit_enabled=True,
                            hourly_limit="1000 per hour", secondly_limit="2 per minute", seed=1)
        client = create_app(settings).test_client()
        statuses = [client.get("/items/1").status_code for _ in range(3)]
        assert statuses == [200, 200, 429]
        response = client.get("/items/1")
        assert response.status_code == 429
        assert response.headers["Content-Type"] == "application/json"
        assert json.loads(response.get_data(as_text=True)) == {"error": "Too Many Requests"}


@pytest.fixture
def serve_env(monkeypatch):
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("LOG_TO_FILE", "false")
    monkeypatch.setenv("RATELIMIT_ENABLED", "false")
    return monkeypatch


@pytest.fixture
def held_port():
    """A port with a live listener on it, so binding it again fails."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        sock.listen(1)
        yield sock.getsockname()[1]


@pytest.fixture
def free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


class TestMain:
    """main — bind before announcing, exit 1 when the port is taken."""

    def test_port_in_use_exits_with_status_1(self, serve_env, held_port, caplog) -> None:
        serve_env.setenv("PORT", str(held_port))
        with caplog.at_level(logging.INFO):
            with pytest.raises(SystemExit) as exc:
                app_module.main()
        assert exc.value.code == 1
        messages = [record.getMessage() for record in caplog.records]
        assert any(f"Could not bind 127.0.0.1:{held_port}" in m for m in messages)
        assert not any("Server started" in m for m in messages)

    def test_serves_threaded_on_configured_port(self, serve_env, free_port, caplog) -> None:
        serve_env.setenv("PORT", str(free_port))
        with caplog.at_level(logging.INFO):
            with patch.object(BaseWSGIServer, "serve_forever", autospec=True) as serve:
                app_module.main()
        server = serve.call_args.args[0]
        try:
            assert server.server_address[1] == free_port
            assert server.multithread is True
        finally:
            server.server_close()
        messages = [record.getMessage() for record in caplog.records]
        assert f"Server started on port {free_port}" in messages
