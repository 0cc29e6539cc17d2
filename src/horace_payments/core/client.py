"""
HTTP client for the Horace payment API.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Tuple

import requests

from .config import DEFAULT_BASE_URL, ClientConfig
from .errors import APIError
from .notifications import PaymentHandler, PaymentSink
from .payloads import (
    MERCHANT_GET,
    WEBHOOKS_GET,
    EditMerchantParams,
    HistoryByIdsParams,
    HistoryParams,
    IdList,
    TransferParams,
    UsersParams,
    WebhookParams,
    build_request_body,
)

__all__ = [
    "HoraceClient",
    "call_method",
    "decode_envelope",
]

_JSON_HEADERS = {"Content-Type": "application/json"}


def _post_json(
    session: requests.Session,
    url: str,
    body: Dict[str, Any],
    timeout: Optional[float],
) -> Tuple[int, Any]:
    try:
        response = session.post(url, json=body, headers=_JSON_HEADERS, timeout=timeout)
    except requests.RequestException as exc:
        raise APIError.transport(f"Request to {url} failed: {exc}") from exc
    try:
        return response.status_code, response.json()
    except ValueError as exc:
        raise APIError.transport(
            f"Failed to parse JSON from {url} ({response.status_code}): {response.text}",
            status=response.status_code,
        ) from exc


def decode_envelope(payload: Any, *, status: Optional[int] = None) -> Any:
    """
    Return ``response.msg`` from a response envelope.

    An ``error`` envelope raises a remote :class:`APIError` with the server's
    code and message untouched. Anything else is a transport error carrying
    ``status``, the HTTP status of the reply.
    """
    if not isinstance(payload, dict):
        raise APIError.transport(
            f"Malformed response envelope: {payload!r}", status=status
        )

    error = payload.get("error")
    if error is not None:
        if not isinstance(error, dict):
            raise APIError.transport(
                f"Malformed error envelope: {error!r}", status=status
            )
        raise APIError.remote(error.get("error_code"), error.get("error_msg"))

    response = payload.get("response")
    if not isinstance(response, dict) or "msg" not in response:
        raise APIError.transport(
            f"Malformed response envelope: {payload!r}", status=status
        )
    return response["msg"]


def call_method(
    session: requests.Session,
    config: ClientConfig,
    method_name: str,
    params: Optional[Mapping[str, Any]] = None,
) -> Any:
    """
    Call ``method_name`` once and return the decoded result.
    """
    if not isinstance(method_name, str) or not method_name.strip():
        raise APIError.local('Parameter "method_name" is required.')

    url = config.method_url(method_name)
    logging.info("Calling Horace API method %s", method_name)
    status, payload = _post_json(
        session,
        url,
        build_request_body(config.access_token, params),
        config.timeout_seconds,
    )
    return decode_envelope(payload, status=status)


class HoraceClient:
    """
    Client for one merchant of the Horace payment API.

    Every method performs a single POST and returns the ``msg`` of the
    response envelope, or raises :class:`APIError`.
    """

    def __init__(
        self,
        access_token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = ClientConfig.create(
            access_token=access_token,
            base_url=base_url,
            timeout_seconds=timeout_seconds,
        )
        self.session = session or requests.Session()
        self.notifications = PaymentSink()

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> "HoraceClient":
        return cls(
            config.access_token,
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
            session=session,
        )

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def call(
        self,
        method_name: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Call any API method by name."""
        return call_method(self.session, self.config, method_name, params)

    def invoke(self, request: Any) -> Any:
        """Call the method described by a parameter record from :mod:`.payloads`."""
        return self.call(request.method, request.as_params())

    def get_merchant(self) -> Any:
        """Return information about the merchant."""
        return self.call(MERCHANT_GET)

    def edit_merchant(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        group_id: Optional[int] = None,
        avatar: Optional[str] = None,
    ) -> Any:
        return self.invoke(
            EditMerchantParams(
                name=name,
                description=description,
                group_id=group_id,
                avatar=avatar,
            )
        )

    def get_history(self, count: int = 100, type: str = "all", offset: int = 0) -> Any:
        """Return the payment history, newest first."""
        return self.invoke(HistoryParams(count=count, type=type, offset=offset))

    def get_history_by_ids(self, ids: IdList, type: str = "all") -> Any:
        return self.invoke(HistoryByIdsParams(ids=ids, type=type))

    def pay_to(self, field: str, amount: Any, user_id: Any) -> Any:
        """Transfer ``amount`` of ``field`` (``coin`` or ``diamonds``) to ``user_id``."""
        return self.invoke(TransferParams(field=field, amount=amount, user_id=user_id))

    def get_users(self, user_ids: IdList) -> Any:
        return self.invoke(UsersParams(user_ids=user_ids))

    def webhook_new(self, url: str) -> Any:
        """Point payment notifications at ``url``."""
        return self.invoke(WebhookParams(url=url))

    def webhook_get(self) -> Any:
        """Return the URL of the current webhook."""
        return self.call(WEBHOOKS_GET)

    def on_payment(self, handler: PaymentHandler) -> PaymentHandler:
        """
        Register the handler for incoming transfers, replacing any previous one.

        Returns ``handler`` so the method can be used as a decorator.
        """
        return self.notifications.register(handler)

    def dispatch_payment(self, payload: Any) -> Any:
        """Hand a delivered webhook payload to the registered handler, if any."""
        return self.notifications.dispatch(payload)
