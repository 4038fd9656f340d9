from __future__ import annotations

from typing import Any, Optional


class BramblError(RuntimeError):
    exit_code: int = 1


class ValidationError(BramblError):
    """A request was rejected locally, before any network I/O."""

    exit_code = 2

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class TransportError(BramblError):
    """The HTTP exchange itself failed (connection, unparsable body)."""

    exit_code = 3


class ProtocolError(BramblError):
    """The node answered with a JSON-RPC ``error`` object."""

    exit_code = 4

    def __init__(self, error: Any, response: Optional[dict[str, Any]] = None) -> None:
        self.error = error
        self.response = response if response is not None else {"error": error}
        super().__init__(f"RPC error: {error}")

    @property
    def code(self) -> Any:
        return self.error.get("code") if isinstance(self.error, dict) else None

    @property
    def message(self) -> Any:
        return self.error.get("message") if isinstance(self.error, dict) else None

    @property
    def data(self) -> Any:
        return self.error.get("data") if isinstance(self.error, dict) else None


class ConfirmationTimeout(BramblError):
    exit_code = 5
