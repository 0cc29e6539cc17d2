"""
Helpers for constructing the JSON bodies sent to the Horace API.

Each catalog method has a frozen parameter record. Records validate their
fields on construction and raise a local :class:`APIError` for caller misuse,
so an invalid call never reaches the network.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Mapping, Optional, Sequence, Union

from .errors import APIError

__all__ = [
    "MERCHANT_GET",
    "WEBHOOKS_GET",
    "TRANSFER_FIELDS",
    "EditMerchantParams",
    "HistoryByIdsParams",
    "HistoryParams",
    "TransferParams",
    "UsersParams",
    "WebhookParams",
    "build_request_body",
]

MERCHANT_GET = "merchant.get"
WEBHOOKS_GET = "webhooks.get"

TRANSFER_FIELDS = ("coin", "diamonds")

IdList = Union[int, float, str, Sequence[Union[int, str]]]


def build_request_body(
    access_token: str,
    params: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Merge the access token with ``params``.

    The token always comes from the client: an ``access_token`` key in
    ``params`` is dropped.
    """
    body: Dict[str, Any] = {"access_token": access_token}
    for key, value in (params or {}).items():
        if key == "access_token":
            logging.warning("Ignoring access_token supplied in call parameters")
            continue
        body[key] = value
    return body


def _is_positive_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return False
    if not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


def _is_id_list(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _wire_ids(value: IdList) -> Any:
    return list(value) if isinstance(value, tuple) else value


def _drop_none(values: Mapping[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


@dataclass(frozen=True)
class EditMerchantParams:
    """
    New merchant data. Fields left as ``None`` are not sent.

    ``avatar`` must be a direct imgur link to a png/jpg/jpeg image; the API
    enforces this.
    """

    method: ClassVar[str] = "merchant.edit"

    name: Optional[str] = None
    description: Optional[str] = None
    group_id: Optional[int] = None
    avatar: Optional[str] = None

    def as_params(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "name": self.name,
                "description": self.description,
                "avatar": self.avatar,
                "group_id": self.group_id,
            }
        )


@dataclass(frozen=True)
class HistoryParams:
    """``type`` is ``all``, ``out`` (outgoing) or ``in`` (incoming)."""

    method: ClassVar[str] = "payment.getHistory"

    count: int = 100
    type: str = "all"
    offset: int = 0

    def as_params(self) -> Dict[str, Any]:
        return _drop_none(
            {"count": self.count, "type": self.type, "offset": self.offset}
        )


@dataclass(frozen=True)
class HistoryByIdsParams:
    method: ClassVar[str] = "payment.getHistoryByIds"

    ids: IdList
    type: str = "all"

    def __post_init__(self) -> None:
        if not _is_id_list(self.ids) and not _is_positive_number(self.ids):
            raise APIError.local('Parameter "ids" must be a list or a number.')

    def as_params(self) -> Dict[str, Any]:
        return _drop_none({"ids": _wire_ids(self.ids), "type": self.type})


@dataclass(frozen=True)
class TransferParams:
    """Send ``amount`` of ``field`` (``coin`` or ``diamonds``) to ``user_id``."""

    method: ClassVar[str] = "payment.send"

    field: str
    amount: Any
    user_id: Any

    def __post_init__(self) -> None:
        if self.field not in TRANSFER_FIELDS:
            raise APIError.local(
                'Parameter "field" must be either "coin" or "diamonds".'
            )

    def as_params(self) -> Dict[str, Any]:
        return _drop_none(
            {"field": self.field, "amount": self.amount, "id": self.user_id}
        )


@dataclass(frozen=True)
class UsersParams:
    method: ClassVar[str] = "users.get"

    user_ids: IdList

    def __post_init__(self) -> None:
        if self.user_ids is None or self.user_ids == "":
            raise APIError.local('Parameter "userIds" is required.')
        if not _is_id_list(self.user_ids) and not _is_positive_number(self.user_ids):
            raise APIError.local('Parameter "userIds" must be a list or a number.')

    def as_params(self) -> Dict[str, Any]:
        return {"userIds": _wire_ids(self.user_ids)}


@dataclass(frozen=True)
class WebhookParams:
    """Address that will receive payment notifications."""

    method: ClassVar[str] = "webhooks.create"

    url: str

    def __post_init__(self) -> None:
        if not self.url:
            raise APIError.local('Parameter "url" is required.')
        if not isinstance(self.url, str) or not self.url.startswith("http"):
            raise APIError.local(
                'Parameter "url" must start with the http(s):// protocol.'
            )

    def as_params(self) -> Dict[str, Any]:
        return {"url": self.url}
