"""Shared fixtures - local YAML documents and a fake web for httpx."""

import json
from pathlib import Path

import httpx
import pytest
import yaml

from regcheck.config import RegistryPaths

FIXTURES_DIR = Path(__file__).parent / "fixtures"

DESCRIPTOR_URL = "https://raw.githubusercontent.com/{}/my-links/main/page.json"


def make_descriptor(name: str, **overrides) -> dict:
    """Build a valid page.json payload for a user."""
    data = {
        "name": name,
        "description": f"{name}'s links",
        "image_url": f"https://images.example.com/{name}.png",
        "links": [{"title": "Home", "url": f"https://{name}.example.com"}],
    }
    data.update(overrides)
    return data


class FakeWeb:
    """Routes URLs to canned responses and records every request."""

    def __init__(self):
        self.routes: dict[str, httpx.Response | Exception] = {}
        self.requests: list[str] = []

    def add(self, url: str, status: int = 200, body: bytes | dict | None = None) -> None:
        if isinstance(body, dict):
            body = json.dumps(body).encode("utf-8")
        self.routes[url] = httpx.Response(status, content=body or b"")

    def fail(self, url: str, error: Exception) -> None:
        self.routes[url] = error

    def add_user(self, github_username: str, descriptor: dict | bytes | None = None) -> dict | bytes:
        """Serve a descriptor and a reachable image for a GitHub user."""
        if descriptor is None:
            descriptor = make_descriptor(github_username)
        self.add(DESCRIPTOR_URL.format(github_username), body=descriptor)
        if isinstance(descriptor, dict) and descriptor.get("image_url"):
            self.add(descriptor["image_url"], body=b"\x89PNG\r\n")
        return descriptor

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        route = self.routes.get(url)
        if isinstance(route, Exception):
            raise route
        if route is None:
            return httpx.Response(404, content=b"404: Not Found")
        return httpx.Response(route.status_code, content=route.content)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def web() -> FakeWeb:
    return FakeWeb()


@pytest.fixture
def write_documents(tmp_path):
    """Write registry and restricted-list YAML files and return their paths."""

    def _write(registry, restricted: list[str] | None = None) -> RegistryPaths:
        registry_path = tmp_path / "registry.yaml"
        restricted_path = tmp_path / "restricted-usernames.yaml"
        registry_path.write_text(yaml.safe_dump(registry, sort_keys=False), encoding="utf-8")
        restricted_path.write_text(
            yaml.safe_dump({"restricted_usernames": restricted or []}),
            encoding="utf-8",
        )
        return RegistryPaths(registry_path=registry_path, restricted_path=restricted_path)

    return _write


@pytest.fixture(autouse=True)
def _no_ci_env(monkeypatch):
    """Tests decide the execution context themselves."""
    monkeypatch.delenv("CI", raising=False)
    monkeypatch.delenv("REGCHECK_CI", raising=False)
