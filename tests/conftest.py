"""Shared fixtures for the generator test suite.

Provides an isolated settings file path and a fake npm registry built on
``httpx.MockTransport`` so no test touches the network.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path
from urllib.parse import unquote

import httpx
import pytest

# package name -> version, or an exception instance to raise, or "hang"
RegistryBehaviour = dict[str, object]
MakeRegistry = Callable[[RegistryBehaviour], "FakeRegistry"]


class FakeRegistry:
    """Fake npm registry answering ``GET /<name>/latest``."""

    def __init__(self, behaviour: RegistryBehaviour) -> None:
        self.behaviour = behaviour
        self.requested: list[str] = []

    async def handler(self, request: httpx.Request) -> httpx.Response:
        encoded_name = request.url.raw_path.decode("ascii").strip("/").split("/")[0]
        name = unquote(encoded_name)
        self.requested.append(name)

        outcome = self.behaviour.get(name)
        if outcome is None:
            return httpx.Response(404, json={"error": "Not found"})
        if outcome == "hang":
            await asyncio.sleep(10)
            return httpx.Response(200, json={"name": name, "version": "0.0.0"})
        if isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, httpx.Response):
            return outcome
        return httpx.Response(200, json={"name": name, "version": outcome})

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=httpx.MockTransport(self.handler),
            base_url="https://registry.test",
        )


@pytest.fixture()
def settings_file(tmp_path: Path) -> Path:
    """Path to a settings file that does not exist yet."""
    return tmp_path / "config" / "settings.yaml"


@pytest.fixture()
def make_registry() -> MakeRegistry:
    """Return a factory for fake registries."""
    return FakeRegistry
