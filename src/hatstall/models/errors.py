from typing import Any, Optional


class HatstallError(Exception):
    """Base class for every failure reported to an error handler."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ConfigurationError(HatstallError):
    def __init__(
        self,
        message="Backend origin is not configured. Override host_path() or set the base URL via the HATSTALL_URL environment variable.",
    ):
        super().__init__(message)


class TransportError(HatstallError):
    """Raised when the request never produced a response.

    Covers connection failures, DNS resolution errors, timeouts and
    protocol errors. The original httpx exception is kept as ``__cause__``.
    """


class HTTPStatusError(HatstallError):
    """Raised when the backend answered with a non-2xx status code."""

    def __init__(
        self, message: str, status_code: int, body: Optional[str] = None
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)

    def __str__(self) -> str:
        return f"HTTP {self.status_code}: {self.message}"


class DecodeError(HatstallError):
    """Raised when a response body does not match the expected shape."""

    def __init__(self, message: str, payload: Any = None) -> None:
        self.payload = payload
        super().__init__(message)


class RequestError(HatstallError):
    """Raised for any other failure while building, sending or decoding a call.

    The underlying exception is kept as ``__cause__``.
    """
