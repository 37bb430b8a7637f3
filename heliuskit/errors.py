"""Exception hierarchy raised by the client."""

from __future__ import annotations

from http import HTTPStatus

__all__ = [
    "HeliusError",
    "BadRequestError",
    "InternalServerError",
    "InvalidInputError",
    "NetworkError",
    "NotFoundError",
    "RateLimitExceededError",
    "RequestError",
    "SerializationError",
    "UnauthorizedError",
    "UnknownError",
    "from_response_status",
]


def _status_label(code: int) -> str:
    """Render a status code with its reason phrase when one is known."""
    try:
        status = HTTPStatus(code)
    except ValueError:
        return str(int(code))
    return f"{status.value} {status.phrase}"


class HeliusError(Exception):
    """Base class of every error raised by the client."""


class BadRequestError(HeliusError):
    """The request was malformed, incomplete or held invalid data."""

    def __init__(self, path: str, text: str) -> None:
        self.path = path
        self.text = text
        super().__init__(f"Bad request to {path}: {text}")


class InternalServerError(HeliusError):
    """The server hit an unexpected condition."""

    def __init__(self, code: int, text: str) -> None:
        self.code = int(code)
        self.text = text
        super().__init__(f"Internal server error: {_status_label(self.code)} - {text}")


class InvalidInputError(HeliusError):
    """A required input was missing or invalid."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Invalid input: {message}")


class NetworkError(HeliusError):
    """The server could not be reached."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"Network error: {cause}")


class NotFoundError(HeliusError):
    """The requested resource does not exist."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Not found: {text}")


class RateLimitExceededError(HeliusError):
    """Too many requests were sent in a given amount of time."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Too many requests made to {path}")


class RequestError(HeliusError):
    """The underlying HTTP client failed."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"Request error: {cause}")


class SerializationError(HeliusError):
    """JSON data could not be encoded or decoded."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"Serialization / Deserialization error: {cause}")


class UnauthorizedError(HeliusError):
    """The request lacked valid authentication credentials."""

    def __init__(self, path: str, text: str) -> None:
        self.path = path
        self.text = text
        super().__init__(f"Unauthorized access to {path}: {text}")


class UnknownError(HeliusError):
    """Any failure status without a more specific error."""

    def __init__(self, code: int, text: str) -> None:
        self.code = int(code)
        self.text = text
        super().__init__(f"Unknown error has occurred: HTTP {_status_label(self.code)} - {text}")


def from_response_status(status: int, path: str, text: str) -> HeliusError:
    """Map an HTTP failure status to the matching error."""
    code = int(status)
    if code == HTTPStatus.BAD_REQUEST:
        return BadRequestError(path, text)
    if code in (HTTPStatus.UNAUTHORIZED, HTTPStatus.FORBIDDEN):
        return UnauthorizedError(path, text)
    if code == HTTPStatus.NOT_FOUND:
        return NotFoundError(text)
    if code == HTTPStatus.INTERNAL_SERVER_ERROR:
        return InternalServerError(code, text)
    if code == HTTPStatus.TOO_MANY_REQUESTS:
        return RateLimitExceededError(path)
    return UnknownError(code, text)