"""
Minimal script that uses the public API to inspect a Horace merchant.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Iterable, Tuple

from horace_payments import APIError, create_client, load_client_config


def _override(value: str) -> Tuple[str, str]:
    if "=" not in value:
        raise argparse.ArgumentTypeError("Overrides must look like KEY=VALUE")
    key, val = value.split("=", 1)
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError("Override key must not be empty")
    return key, val


def _build_overrides(pairs: Iterable[Tuple[str, str]]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key, value in pairs:
        overrides[key] = value
    return overrides


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print merchant details and recent payments using the SDK API"
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to the .env file containing HORACE_* settings",
    )
    parser.add_argument(
        "--set",
        action="append",
        type=_override,
        metavar="KEY=VALUE",
        default=None,
        help="Override an environment variable without editing the .env file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Python logging level (default: INFO)",
    )
    parser.add_argument(
        "--access-token",
        help="Merchant access token (default: HORACE_ACCESS_TOKEN)",
    )
    parser.add_argument(
        "--base-url",
        help="Override the API base URL",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=10,
        help="Number of history entries to print (default: 10)",
    )
    parser.add_argument(
        "--type",
        choices=("all", "in", "out"),
        default="all",
        help="Which transfers to list (default: all)",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        config = load_client_config(
            env_file=args.env_file,
            overrides=_build_overrides(args.set or ()),
            access_token=args.access_token,
            base_url=args.base_url,
        )
    except APIError as exc:
        logging.error("Invalid configuration: %s", exc)
        return 1

    client = create_client(config=config)

    try:
        merchant = client.get_merchant()
        history = client.get_history(count=args.count, type=args.type)
    except APIError as exc:
        logging.error("%s error while querying the API: %s", exc.kind.value, exc)
        return 1

    print(json.dumps({"merchant": merchant, "history": history}, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
