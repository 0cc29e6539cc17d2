"""
Error types raised by the Horace API client.

Every failure surfaces as an :class:`APIError`. The ``kind`` attribute tells
callers where the failure originated:

* ``LOCAL`` - caller misuse detected before any network I/O.
* ``REMOTE`` - the API answered with an ``error`` envelope.
* ``TRANSPORT`` - the HTTP exchange failed or the body was not a valid envelope.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

__all__ = [
    "APIError",
    "ConfigError",
    "ErrorKind",
]


class ErrorKind(str, Enum):
    LOCAL = "local"
    REMOTE = "remote"
    TRANSPORT = "transport"


class APIError(Exception):
    """
    A failure of a Horace API call.

    Remote errors carry the server's ``error_code``/``error_msg`` verbatim.
    Local and transport errors have no ``code``; transport errors record the
    HTTP ``status`` when a response was received.
    """

    def __init__(
        self,
        msg: str,
        *,
        kind: ErrorKind,
        code: Any = None,
        status: Optional[int] = None,
    ) -> None:
        super().__init__(msg)
        self._msg = msg
        self._kind = ErrorKind(kind)
        self._code = code
        self._status = status

    @classmethod
    def local(cls, msg: str) -> "APIError":
        return cls(msg, kind=ErrorKind.LOCAL)

    @classmethod
    def remote(cls, code: Any, msg: Optional[str]) -> "APIError":
        return cls(msg, kind=ErrorKind.REMOTE, code=code)

    @classmethod
    def transport(cls, msg: str, *, status: Optional[int] = None) -> "APIError":
        return cls(msg, kind=ErrorKind.TRANSPORT, status=status)

    @property
    def msg(self) -> str:
        return self._msg

    @property
    def kind(self) -> ErrorKind:
        return self._kind

    @property
    def code(self) -> Any:
        return self._code

    @property
    def status(self) -> Optional[int]:
        return self._status

    @property
    def is_local(self) -> bool:
        return self._kind is ErrorKind.LOCAL

    @property
    def is_remote(self) -> bool:
        return self._kind is ErrorKind.REMOTE

    @property
    def is_transport(self) -> bool:
        return self._kind is ErrorKind.TRANSPORT

    def __str__(self) -> str:
        text = "" if self._msg is None else str(self._msg)
        if self._code is not None:
            return f"[{self._code}] {text}"
        return text

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self._kind.value!r}, "
            f"code={self._code!r}, msg={self._msg!r})"
        )


class ConfigError(APIError):
    """Raised when the supplied configuration is invalid."""

    def __init__(self, msg: str) -> None:
        super().__init__(msg, kind=ErrorKind.LOCAL)
