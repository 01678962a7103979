"""Exception hierarchy for the Bitbucket webhook binding.

Validation errors are raised locally before any request leaves the client.
TransportError is raised only by the transport and is never caught here.
"""


class BitbucketError(Exception):
    """Base class for every error raised by this package."""


class MissingContextError(BitbucketError):
    """Owner or repository identifier is missing."""

    def __init__(self, message: str = "Owner and repository must be provided"):
        super().__init__(message)


class MissingIdentifierError(BitbucketError):
    """A per-item identifier (e.g. webhook UUID) is missing."""

    def __init__(self, message: str = "Identifier must be provided"):
        super().__init__(message)


class MissingRequiredParameterError(BitbucketError):
    """A required parameter is absent after filtering."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Required parameter '{key}' is missing")


class InvalidParameterError(BitbucketError):
    """A parameter value has an unsupported shape."""

    def __init__(self, key: str, value):
        self.key = key
        self.value = value
        super().__init__(
            f"Parameter '{key}' has unsupported value type {type(value).__name__}"
        )


class TransportError(BitbucketError):
    """The HTTP request failed or returned a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None, body=None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ConfigError(BitbucketError):
    """Settings file or environment contains invalid values."""
