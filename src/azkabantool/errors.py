"""
Error types raised by AzkabanTool.

Every error is caught by the command dispatcher, printed together with the
offending value (or the raw response body for remote failures), and turned
into a non-zero exit code.
"""

from typing import Optional


class AzkabanToolError(Exception):
    """Base class for all errors reported to the user."""

    exit_code: int = 1

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message}\n{self.detail}"
        return self.message


class MissingArgument(AzkabanToolError):
    pass


class AlreadyExists(AzkabanToolError):
    pass


class DirectoryNotFound(AzkabanToolError):
    pass


class UnknownCommand(AzkabanToolError):
    pass


class ConfigError(AzkabanToolError):
    pass


class RemoteUnavailable(AzkabanToolError):
    """The server could not be reached or did not answer in time."""


class AuthenticationFailed(AzkabanToolError):
    pass


class MalformedResponse(AuthenticationFailed):
    """The login response did not carry the expected fields."""


class UploadFailed(AzkabanToolError):
    pass


class ExecutionFailed(AzkabanToolError):
    pass


class InvalidName(AzkabanToolError):
    """A collection or flow name that is not a single directory name."""
