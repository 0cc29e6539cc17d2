"""
Public, high-level helpers for talking to the Horace payment API.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

import requests

from .core.client import HoraceClient, call_method
from .core.config import ClientConfig, load_client_config

__all__ = [
    "call_remote",
    "create_client",
]


def _resolve_config(
    *,
    config: Optional[ClientConfig],
    env_file: Optional[str],
    overrides: Optional[Mapping[str, str]],
    base: Optional[Mapping[str, str]],
    access_token: Optional[str],
    base_url: Optional[str],
    timeout_seconds: Optional[float | int | str],
) -> ClientConfig:
    if config is not None:
        extras = (overrides, base, access_token, base_url, timeout_seconds)
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built ClientConfig or individual settings, not both."
            )
        return config
    return load_client_config(
        env_file=env_file,
        overrides=overrides,
        base=base,
        access_token=access_token,
        base_url=base_url,
        timeout_seconds=timeout_seconds,
    )


def create_client(
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    access_token: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout_seconds: Optional[float | int | str] = None,
) -> HoraceClient:
    """
    Construct a :class:`HoraceClient`.

    Callers can either supply a ready-made :class:`ClientConfig` or let the
    helper assemble one from ``HORACE_*`` environment data.
    """
    cfg = _resolve_config(
        config=config,
        env_file=env_file,
        overrides=overrides,
        base=base,
        access_token=access_token,
        base_url=base_url,
        timeout_seconds=timeout_seconds,
    )
    return HoraceClient.from_config(cfg, session=session)


def call_remote(
    method_name: str,
    params: Optional[Mapping[str, Any]] = None,
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    access_token: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout_seconds: Optional[float | int | str] = None,
) -> Any:
    """
    One-shot helper: resolve the configuration and call ``method_name``.
    """
    cfg = _resolve_config(
        config=config,
        env_file=env_file,
        overrides=overrides,
        base=base,
        access_token=access_token,
        base_url=base_url,
        timeout_seconds=timeout_seconds,
    )
    if session is not None:
        return call_method(session, cfg, method_name, params)
    with requests.Session() as own_session:
        return call_method(own_session, cfg, method_name, params)
