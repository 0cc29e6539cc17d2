"""
Single-slot registry for the inbound payment notification handler.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Optional

from .errors import APIError

__all__ = ["PaymentHandler", "PaymentSink"]

PaymentHandler = Callable[[Any], Any]


class PaymentSink:
    """
    Holds at most one payment handler. Registering replaces the previous one.

    The webhook transport belongs to the application; it hands every delivered
    payload to :meth:`dispatch`.
    """

    def __init__(self) -> None:
        self._handler: Optional[PaymentHandler] = None
        self._lock = threading.Lock()

    @property
    def handler(self) -> Optional[PaymentHandler]:
        with self._lock:
            return self._handler

    def register(self, handler: PaymentHandler) -> PaymentHandler:
        if not callable(handler):
            raise APIError.local("Payment handler must be callable")
        with self._lock:
            self._handler = handler
        return handler

    def dispatch(self, payload: Any) -> Any:
        """
        Call the current handler with ``payload`` and return its result.

        Without a handler the payload is dropped and ``None`` is returned.
        """
        handler = self.handler
        if handler is None:
            logging.debug("No payment handler registered; dropping notification")
            return None
        return handler(payload)
