import json
from pathlib import Path
from typing import Callable

import httpx
import pytest

import dropx.auth.flow as flow
import dropx.files.listing as listing


@pytest.fixture
def home(tmp_path, monkeypatch) -> Path:
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    return home_dir


@pytest.fixture
def cache_file(home) -> Path:
    return home / ".cache" / "dropx" / "dropx"


@pytest.fixture
def config_file(tmp_path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"client_id": "app-key", "client_secret": "app-secret"}))
    return path


@pytest.fixture
def mock_http(monkeypatch) -> Callable[[Callable[[httpx.Request], httpx.Response]], list[httpx.Request]]:
    """Route every outgoing request to a handler and record it."""

    def install(handler: Callable[[httpx.Request], httpx.Response]) -> list[httpx.Request]:
        seen: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        def _client() -> httpx.Client:
            return httpx.Client(transport=httpx.MockTransport(_record))

        monkeypatch.setattr(flow, "new_http_client", _client)
        monkeypatch.setattr(listing, "new_http_client", _client)
        return seen

    return install
