from typing import Optional

from loguru import logger

from azkabantool.config import AzkabanConfig
from .client import AzkabanClient, parse_json
from azkabantool.errors import AuthenticationFailed, MalformedResponse

SESSION_ID_FIELDS = ("session.id", "session_id")


class SessionAuthenticator:
    def __init__(self, config: AzkabanConfig, client: Optional[AzkabanClient] = None):
        self.config = config
        self.client = client or AzkabanClient(config)

    def authenticate(self) -> str:
        """
        Log in and return a fresh session id.

        Sessions are never cached; every upload or execute logs in again.
        """
        logger.info(f"🔑 Logging in to {self.config.server_address} as {self.config.username}")
        response = self.client.post(
            "/",
            data={
                "action": "login",
                "username": self.config.username,
                "password": self.config.password,
            },
        )

        body = parse_json(response)
        if body is None:
            raise MalformedResponse(
                f"Login response from {self.config.server_address} is not a JSON object (HTTP {response.status_code})",
                detail=response.text,
            )

        if "error" in body:
            raise AuthenticationFailed(
                f"Login failed for user {self.config.username}: {body['error']}",
                detail=response.text,
            )

        if "status" not in body:
            raise MalformedResponse("Login response has no status field", detail=response.text)
        if body["status"] != "success":
            raise AuthenticationFailed(
                f"Login failed for user {self.config.username}: status={body['status']}",
                detail=response.text,
            )

        session_id = next((body[key] for key in SESSION_ID_FIELDS if body.get(key)), None)
        if session_id is None:
            raise MalformedResponse("Login response has no session id field", detail=response.text)

        logger.info("✓ Logged in")
        return str(session_id)
