import json
from typing import Any, Dict, Optional

import requests
from loguru import logger

from azkabantool.config import AzkabanConfig
from azkabantool.errors import RemoteUnavailable


class AzkabanClient:
    """
    Thin wrapper around a requests session for the Azkaban web API.

    Every request carries the configured timeout. Connection errors and
    timeouts are raised as RemoteUnavailable; HTTP error statuses are left to
    the caller, which decides how to report them.
    """

    def __init__(self, config: AzkabanConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    def post(self, endpoint: str, **kwargs) -> requests.Response:
        return self._request("POST", endpoint, **kwargs)

    def get(self, endpoint: str, **kwargs) -> requests.Response:
        return self._request("GET", endpoint, **kwargs)

    def _request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        url = self.config.url(endpoint)
        kwargs.setdefault("timeout", self.config.timeout)
        kwargs.setdefault("verify", self.config.verify_ssl)
        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(method, url, **kwargs)
        except requests.exceptions.Timeout as e:
            raise RemoteUnavailable(f"Request to {url} timed out after {self.config.timeout}s", detail=str(e))
        except requests.exceptions.ConnectionError as e:
            raise RemoteUnavailable(f"Could not connect to {url}", detail=str(e))
        logger.debug(f"{method} {url} -> {response.status_code}")
        return response


def parse_json(response: requests.Response) -> Optional[Dict[str, Any]]:
    """Decode a JSON object body, or return None when the body is not one."""
    try:
        body = json.loads(response.text)
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


def failure_reason(response: requests.Response, body: Optional[Dict[str, Any]]) -> Optional[str]:
    """Return why an upload/execute response counts as failed, or None."""
    if body is not None and "error" in body:
        return str(body["error"])
    if response.status_code >= 400:
        return f"HTTP {response.status_code}"
    if body is None:
        return "response is not a JSON object"
    return None
