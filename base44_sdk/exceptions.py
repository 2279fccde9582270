"""Public exceptions for the Base44 SDK."""

from typing import Any, Literal

# "configuration" - client could not be built
# "http" - non-2xx response without a problem document
# "problem" - non-2xx response with an application/problem+json body
ErrorKind = Literal["configuration", "http", "problem"]


class Base44Error(Exception):
    """Base exception for all Base44 SDK errors.

    Callers branch on ``kind`` and ``status`` rather than on subclasses.
    """

    def __init__(
        self,
        message: str,
        status: int | None = None,
        code: str | None = None,
        data: Any = None,
        cause: BaseException | None = None,
        *,
        kind: ErrorKind = "http",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code
        self.data = data
        self.cause = cause
        self.kind = kind
        if cause is not None:
            self.__cause__ = cause


class Base44ConfigError(Base44Error):
    """Configuration error (missing server URL, invalid config)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, kind="configuration")
