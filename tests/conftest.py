from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest
import requests

import libcdb.core.client as client_module
import libcdb.core.config as config_module


def make_response(body: str | bytes = b"", status_code: int = 200, url: str = "https://libc.example/api") -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode("utf-8") if isinstance(body, str) else body
    response.encoding = "utf-8"
    response.url = url
    return response


@dataclass
class FakeSession:
    """Replays canned responses keyed by (method, url) and records every call."""

    responses: dict[tuple[str, str], Any] = field(default_factory=dict)
    calls: list[dict[str, Any]] = field(default_factory=list)
    proxies: dict[str, str] = field(default_factory=dict)
    closed: bool = False

    def add(self, method: str, url: str, body: str | bytes = b"", status_code: int = 200) -> None:
        self.responses[(method, url)] = make_response(body, status_code, url)

    def fail(self, method: str, url: str, exc: Exception) -> None:
        self.responses[(method, url)] = exc

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append({"method": method, "url": url, **kwargs})
        outcome = self.responses.get((method, url))
        if outcome is None:
            raise requests.ConnectionError(f"no route to {url}")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self) -> None:
        self.closed = True



@pytest.fixture()
def fake_session(monkeypatch: pytest.MonkeyPatch) -> FakeSession:
    session = FakeSession()
    monkeypatch.setattr(client_module.requests, "Session", lambda: session)
    return session


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> config_module.Config:
    config = config_module.Config(config_file=tmp_path / "config" / "config.yaml")
    monkeypatch.setattr(config_module, "config", config)
    return config
