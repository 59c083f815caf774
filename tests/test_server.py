"""
Startup banner ordering for the uvicorn entry point.
"""
from __future__ import annotations

import asyncio
import logging

import uvicorn

from api.__main__ import FeedbackServer, build_server
from api.core import config as core_config


def test_banner_logged_after_successful_bind(data_file, monkeypatch, caplog):
    async def _bound(self, sockets=None):
        self.started = True

    monkeypatch.setattr(uvicorn.Server, "startup", _bound)
    settings = core_config.get_settings()
    server = build_server(settings)
    assert isinstance(server, FeedbackServer)

    caplog.set_level(logging.INFO, logger="api.app")
    asyncio.run(server.startup())

    messages = [record.getMessage() for record in caplog.records if record.name == "api.app"]
    assert f"Server running on port {settings.port}" in messages
    assert f"Data file: {data_file.resolve()}" in messages
    assert "Loaded 0 existing feedback entries" in messages


def test_no_banner_when_startup_aborts(data_file, monkeypatch, caplog):
    async def _aborted(self, sockets=None):
        self.should_exit = True

    monkeypatch.setattr(uvicorn.Server, "startup", _aborted)
    server = build_server(core_config.get_settings())

    caplog.set_level(logging.INFO, logger="api.app")
    asyncio.run(server.startup())

    assert not [r for r in caplog.records if r.getMessage().startswith("Server running")]
