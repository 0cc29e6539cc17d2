"""
Public facade for the Horace payment API client.

The most useful pieces are re-exported so integrators can
``from horace_payments import ...`` without navigating the package.
"""

from .api import call_remote, create_client
from .core import (
    DEFAULT_BASE_URL,
    APIError,
    ClientConfig,
    ConfigError,
    EditMerchantParams,
    ErrorKind,
    HistoryByIdsParams,
    HistoryParams,
    HoraceClient,
    PaymentHandler,
    PaymentSink,
    TransferParams,
    UsersParams,
    WebhookParams,
    build_request_body,
    call_method,
    decode_envelope,
    load_client_config,
)

__all__ = (
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
    "call_remote",
    "create_client",
    "decode_envelope",
    "load_client_config",
)
