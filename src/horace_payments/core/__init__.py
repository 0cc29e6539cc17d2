"""
Core primitives that implement the Horace API protocol.
"""

from .client import HoraceClient, call_method, decode_envelope
from .config import (
    DEFAULT_BASE_URL,
    ClientConfig,
    load_client_config,
)
from .errors import APIError, ConfigError, ErrorKind
from .notifications import PaymentHandler, PaymentSink
from .payloads import (
    EditMerchantParams,
    HistoryByIdsParams,
    HistoryParams,
    TransferParams,
    UsersParams,
    WebhookParams,
    build_request_body,
)

__all__ = [
    "APIError",
    "ClientConfig",
    "ConfigError",
    "DEFAULT_BASE_URL",
    "EditMerchantParams",
    "ErrorKind",
    "HistoryByIdsParams",
    "HistoryParams",
    "HoraceClient",
    "PaymentHandler",
    "PaymentSink",
    "TransferParams",
    "UsersParams",
    "WebhookParams",
    "build_request_body",
    "call_method",
    "decode_envelope",
    "load_client_config",
]
