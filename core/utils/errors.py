"""Custom exceptions for core logic."""

from __future__ import annotations


class SupportError(Exception):
    """Base class for terminal limited-support errors."""


class MalformedParameterError(SupportError):
    """Raised when a ``-p`` entry is not in ``NAME=VALUE`` form."""

    def __init__(self, message: str, *, raw: str) -> None:
        super().__init__(message)
        self.raw = raw


class InvalidTemplateError(SupportError):
    """Raised when template bytes are not a valid limited support reason."""


class UnusedParameterError(SupportError):
    """Raised when a parameter has no matching placeholder in the template."""

    def __init__(self, parameter: str, *, value: str | None = None) -> None:
        super().__init__(
            f"The selected template is not using '${{{parameter}}}' parameter, "
            f"but '--param' flag was set. Do not use '-p {parameter}={value or ''}' to fix this."
        )
        self.parameter = parameter
        self.value = value


class InvalidClusterKeyError(SupportError):
    """Raised when a cluster key contains characters outside the safe set."""

    def __init__(self, message: str, *, cluster_key: str) -> None:
        super().__init__(message)
        self.cluster_key = cluster_key


class RequestBuildError(SupportError):
    """Raised when the outbound request cannot be composed."""


class ResponseBodyError(SupportError):
    """Raised when a response body does not match its expected schema."""

    def __init__(self, message: str, *, status: int, body: bytes) -> None:
        super().__init__(message)
        self.status = status
        self.body = body


class InvalidSuccessBodyError(ResponseBodyError):
    """Raised when a 201 response body cannot be decoded."""


class InvalidErrorBodyError(ResponseBodyError):
    """Raised when a non-201 response body cannot be decoded."""


class TemplateSourceError(SupportError):
    """Raised when template bytes cannot be read from a file or URL."""

    def __init__(self, message: str, *, location: str) -> None:
        super().__init__(message)
        self.location = location
