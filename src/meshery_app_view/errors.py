"""Domain errors."""

from __future__ import annotations

from dataclasses import dataclass


class AppViewError(Exception):
    """Base class for every failure that ends a ``view`` invocation."""


class ConflictingSelectorsError(AppViewError):
    """An application name/id was given together with ``--all``."""


class NoSelectorProvidedError(AppViewError):
    """Neither an application name/id nor ``--all`` was given."""


class TransportError(AppViewError):
    """The request never produced a usable HTTP response."""


@dataclass(frozen=True, slots=True)
class ApiError(TransportError):
    """Raised when the management API returns a non-200 response."""

    status_code: int
    method: str
    url: str
    response_text: str
    hint: str | None = None

    def __str__(self) -> str:
        message = f"Response Status Code {self.status_code}"
        if self.hint:
            return f"{message}, {self.hint}"
        return f"{message} for {self.method} {self.url}: {self.response_text}"


class DecodeError(AppViewError):
    """The response body could not be decoded."""


class NotFoundError(AppViewError):
    """No application matched the requested name."""


class InvalidOutputFormatError(AppViewError):
    """The output format is neither json nor yaml."""


class AuthError(AppViewError):
    """The auth token file is missing or malformed."""


class ConfigurationError(AppViewError):
    """The environment or .env file holds an invalid setting."""
