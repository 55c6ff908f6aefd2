"""Tests for uploading collections as Azkaban projects."""

from __future__ import annotations

from pathlib import Path

import pytest

from azkabantool.core import AzkabanClient, Uploader, render_collection
from azkabantool.errors import AuthenticationFailed, DirectoryNotFound, InvalidName, RemoteUnavailable, UploadFailed

from conftest import FakeResponse, make_session


def _uploader(config, session):
    return Uploader(config, AzkabanClient(config, session=session))


def test_upload_sends_archive(config, workdir: Path) -> None:
    render_collection("daily_reporting")
    session = make_session()

    result = _uploader(config, session).upload("daily_reporting")

    assert result == {"projectId": "7", "version": "1"}
    assert session.paths() == ["POST /", "POST /manager"]
    upload_call = session.calls[1]
    assert upload_call["data"] == {"session.id": "sess-123", "ajax": "upload", "project": "daily_reporting"}
    assert upload_call["file_name"] == "daily_reporting.zip"
    assert upload_call["file_content_type"] == "application/zip"
    assert upload_call["file_existed"]
    assert not (workdir / "daily_reporting.zip").exists()


def test_upload_missing_collection(config, workdir: Path) -> None:
    session = make_session()
    with pytest.raises(DirectoryNotFound) as exc:
        _uploader(config, session).upload("daily_reporting")
    assert "daily_reporting" in str(exc.value)
    assert session.calls == []


def test_failed_login_skips_upload(config, workdir: Path) -> None:
    render_collection("daily_reporting")
    session = make_session(login={"status": "error"})

    with pytest.raises(AuthenticationFailed):
        _uploader(config, session).upload("daily_reporting")

    assert session.paths() == ["POST /"]
    assert not (workdir / "daily_reporting.zip").exists()


def test_error_response_fails_and_cleans_up(config, workdir: Path) -> None:
    render_collection("daily_reporting")
    session = make_session(upload={"error": "Installation Failed. Project 'daily_reporting' doesn't exist."})

    with pytest.raises(UploadFailed) as exc:
        _uploader(config, session).upload("daily_reporting")

    assert "doesn't exist" in exc.value.detail
    assert not (workdir / "daily_reporting.zip").exists()


@pytest.mark.parametrize(
    "response",
    [
        FakeResponse({"projectId": "7"}, status_code=500),
        FakeResponse("Internal error", status_code=200),
    ],
)
def test_http_error_or_non_json_fails(config, workdir: Path, response) -> None:
    render_collection("daily_reporting")
    session = make_session(upload=response)

    with pytest.raises(UploadFailed):
        _uploader(config, session).upload("daily_reporting")
    assert not (workdir / "daily_reporting.zip").exists()


def test_transport_failure_cleans_up(config, workdir: Path) -> None:
    import requests

    render_collection("daily_reporting")

    class FlakySession:
        def __init__(self):
            self.inner = make_session()

        def request(self, method, url, **kwargs):
            if url.endswith("/manager"):
                raise requests.exceptions.ConnectionError("reset by peer")
            return self.inner.request(method, url, **kwargs)

    with pytest.raises(RemoteUnavailable):
        _uploader(config, FlakySession()).upload("daily_reporting")
    assert not (workdir / "daily_reporting.zip").exists()


def test_upload_rejects_trailing_slash(config, workdir: Path) -> None:
    render_collection("daily_reporting")
    session = make_session()

    with pytest.raises(InvalidName):
        _uploader(config, session).upload("daily_reporting/")
    assert session.calls == []
    assert list(workdir.glob("*.zip")) == []
