from typing import override


class ToncenterError(Exception):
    pass


class InvalidFormat(ToncenterError, ValueError):
    """Malformed address, hash or amount text."""


class TransportError(ToncenterError):
    """The service answered with a non-2xx HTTP status."""

    def __init__(self, status_code: int, message: str, body: str = ""):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code: int = status_code
        self.message: str = message
        self.body: str = body

    @override
    def __str__(self):
        return f"TransportError(status_code={self.status_code}, message={self.message!r})"


class NetworkError(ToncenterError, OSError):
    """The request never produced an HTTP response (connect failure, timeout, ...)."""


class ProtocolError(ToncenterError):
    """
    A v2 response did not carry a successful ``{"ok": true, "result": ...}`` envelope.

    ``code`` and ``error`` are taken from the envelope when the service provides them.
    """

    def __init__(self, message: str, code: int | None = None, error: str | None = None):
        super().__init__(message)
        self.message: str = message
        self.code: int | None = code
        self.error: str | None = error

    @override
    def __str__(self):
        return f"ProtocolError(code={self.code}, message={self.message!r})"


class DecodeError(ToncenterError):
    def __init__(self, type_name: str, errors: list[tuple[str, str]]):
        details = "; ".join(f"{field}: {message}" for field, message in errors)
        super().__init__(f"failed to decode {type_name}: {details}")
        self.type_name: str = type_name
        self.errors: list[tuple[str, str]] = errors

    @property
    def fields(self) -> list[str]:
        return [field for field, _ in self.errors]
