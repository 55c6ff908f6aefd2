"""Shared fixtures: an isolated working directory and a fake Azkaban server.

The fake session stands in for ``requests.Session`` and answers by
``(method, path)``.  Each route holds a list of responses consumed in order
(the last one repeats), so a test can script a login that succeeds once and
fails the second time.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union
from urllib.parse import urlparse

import pytest
import requests

from azkabantool.config import AzkabanConfig

LOGIN_OK = {"status": "success", "session.id": "sess-123"}
UPLOAD_OK = {"projectId": "7", "version": "1"}
EXECUTE_OK = {"project": "daily_reporting", "flow": "final_daily_reporting_job", "execid": 42, "message": "Execution submitted successfully with exec id 42"}


class FakeResponse:
    def __init__(self, body: Union[str, Dict[str, Any]], status_code: int = 200):
        self.text = body if isinstance(body, str) else json.dumps(body)
        self.status_code = status_code


class FakeSession:
    def __init__(self, routes: Dict[Tuple[str, str], List[FakeResponse]]):
        self.routes = routes
        self.calls: List[Dict[str, Any]] = []

    def request(self, method: str, url: str, **kwargs) -> FakeResponse:
        path = urlparse(url).path or "/"
        call = {"method": method, "url": url, "path": path, **kwargs}
        files = kwargs.get("files")
        if files:
            name, handle, content_type = files["file"]
            call["file_name"] = name
            call["file_content_type"] = content_type
            call["file_existed"] = Path(handle.name).exists()
        self.calls.append(call)

        responses = self.routes.get((method, path))
        if not responses:
            raise AssertionError(f"unexpected request {method} {path}")
        return responses.pop(0) if len(responses) > 1 else responses[0]

    def paths(self) -> List[str]:
        return [f"{c['method']} {c['path']}" for c in self.calls]


def make_session(login=LOGIN_OK, upload=UPLOAD_OK, execute=EXECUTE_OK) -> FakeSession:
    def _responses(value):
        if isinstance(value, list):
            return [v if isinstance(v, FakeResponse) else FakeResponse(v) for v in value]
        return [value if isinstance(value, FakeResponse) else FakeResponse(value)]

    return FakeSession(
        {
            ("POST", "/"): _responses(login),
            ("POST", "/manager"): _responses(upload),
            ("GET", "/executor"): _responses(execute),
        }
    )


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test inside an empty directory with a known server config."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("AZKABAN_SERVER", "http://azkaban.test:8081")
    monkeypatch.setenv("AZKABAN_USERNAME", "etl")
    monkeypatch.setenv("AZKABAN_PASSWORD", "secret")
    monkeypatch.setenv("AZKABAN_FAILURE_EMAIL", "oncall@example.com")
    return tmp_path


@pytest.fixture
def config(workdir: Path) -> AzkabanConfig:
    return AzkabanConfig()


@pytest.fixture
def fake_server(monkeypatch: pytest.MonkeyPatch):
    """Install a fake session for every client created during the test."""

    def _install(**kwargs) -> FakeSession:
        session = make_session(**kwargs)
        monkeypatch.setattr(requests, "Session", lambda: session)
        return session

    return _install
