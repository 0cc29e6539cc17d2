"""
Configuration objects and helpers for the Horace API client.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .errors import ConfigError

__all__ = [
    "DEFAULT_BASE_URL",
    "ClientConfig",
    "load_client_config",
    "normalize_base_url",
]

DEFAULT_BASE_URL = "https://race.danyarub.ru/api/"

_PARAMETER_TO_ENV_KEY = {
    "access_token": "HORACE_ACCESS_TOKEN",
    "base_url": "HORACE_BASE_URL",
    "timeout_seconds": "HORACE_TIMEOUT_SECONDS",
}
_ENV_KEYS = frozenset(_PARAMETER_TO_ENV_KEY.values())


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _collect_parameter_overrides(explicit: Mapping[str, Any]) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    for key, value in explicit.items():
        if value is None:
            continue
        try:
            env_key = _PARAMETER_TO_ENV_KEY[key]
        except KeyError as exc:
            raise TypeError(f"Unknown client parameter '{key}'") from exc
        overrides[env_key] = _stringify(value)
    return overrides


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def _read_env_file(path: Optional[str]) -> Dict[str, str]:
    """Return the ``HORACE_*`` assignments found in the .env file at ``path``."""
    if path is None:
        return {}
    try:
        lines = Path(path).read_text(encoding="utf-8").splitlines()
    except FileNotFoundError:
        return {}

    found: Dict[str, str] = {}
    for line in lines:
        key, sep, value = line.partition("=")
        key = key.strip()
        if key.startswith("export "):
            key = key[len("export "):].strip()
        if sep and key in _ENV_KEYS:
            found[key] = _unquote(value.strip())
    return found


def _resolve_settings(
    *,
    env_file: Optional[str],
    base: Optional[Mapping[str, str]],
    overrides: Mapping[str, str],
) -> Dict[str, str]:
    """
    Pick the ``HORACE_*`` settings: .env file < ``base`` (``os.environ`` when
    ``None``) < ``overrides``. Unrelated keys are ignored.
    """
    source = os.environ if base is None else base
    settings = _read_env_file(env_file)
    for layer in (source, overrides):
        settings.update((key, layer[key]) for key in _ENV_KEYS if key in layer)
    return settings


def _normalize_access_token(raw_token: Any) -> str:
    if not isinstance(raw_token, str):
        raise ConfigError("access_token is required and must be a string")
    if not raw_token.strip():
        raise ConfigError("access_token is required")
    return raw_token


def normalize_base_url(raw_url: Any) -> str:
    """Return ``raw_url`` with exactly one trailing slash."""
    if not isinstance(raw_url, str) or not raw_url.strip():
        raise ConfigError("base_url must not be empty")
    url = raw_url.strip()
    if not url.startswith(("http://", "https://")):
        raise ConfigError(f"base_url must use http(s), got '{url}'")
    return url.rstrip("/") + "/"


def _normalize_timeout(raw_timeout: Any) -> Optional[float]:
    if raw_timeout is None:
        return None
    if isinstance(raw_timeout, str):
        raw_timeout = raw_timeout.strip()
        if not raw_timeout or raw_timeout.lower() == "none":
            return None
    try:
        timeout = float(raw_timeout)
    except (TypeError, ValueError) as exc:
        raise ConfigError(
            f"timeout_seconds must be a number, got '{raw_timeout}'"
        ) from exc
    if not math.isfinite(timeout) or timeout <= 0:
        raise ConfigError("timeout_seconds must be greater than zero")
    return timeout


@dataclass(frozen=True)
class ClientConfig:
    access_token: str
    base_url: str = DEFAULT_BASE_URL
    # None means calls wait for the server indefinitely.
    timeout_seconds: Optional[float] = None

    def __repr__(self) -> str:
        return (
            f"ClientConfig(access_token='***', base_url={self.base_url!r}, "
            f"timeout_seconds={self.timeout_seconds!r})"
        )

    def method_url(self, method_name: str) -> str:
        return self.base_url + method_name

    @classmethod
    def create(
        cls,
        *,
        access_token: Any,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float | int | str] = None,
    ) -> "ClientConfig":
        """Validate and normalise the individual settings."""
        return cls(
            access_token=_normalize_access_token(access_token),
            base_url=normalize_base_url(
                DEFAULT_BASE_URL if base_url is None else base_url
            ),
            timeout_seconds=_normalize_timeout(timeout_seconds),
        )

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "ClientConfig":
        token = values.get("HORACE_ACCESS_TOKEN")
        if token is None:
            raise ConfigError("HORACE_ACCESS_TOKEN must be provided")
        return cls.create(
            access_token=token,
            base_url=values.get("HORACE_BASE_URL", DEFAULT_BASE_URL),
            timeout_seconds=values.get("HORACE_TIMEOUT_SECONDS"),
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        access_token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float | int | str] = None,
    ) -> "ClientConfig":
        parameter_overrides = _collect_parameter_overrides(
            {
                "access_token": access_token,
                "base_url": base_url,
                "timeout_seconds": timeout_seconds,
            }
        )
        merged_overrides = dict(overrides or {})
        merged_overrides.update(parameter_overrides)

        return cls.from_mapping(
            _resolve_settings(env_file=env_file, base=base, overrides=merged_overrides)
        )


def load_client_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    access_token: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout_seconds: Optional[float | int | str] = None,
) -> ClientConfig:
    """
    Convenience wrapper that mirrors :meth:`ClientConfig.from_env`.

    Settings can come from environment variables, a ``.env`` file, direct
    keyword arguments, or any combination of the three. Keyword arguments win.
    """
    return ClientConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        access_token=access_token,
        base_url=base_url,
        timeout_seconds=timeout_seconds,
    )
