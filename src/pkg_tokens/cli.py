# src/pkg_tokens/cli.py

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Sequence

from .domain.exceptions import TokenError
from .env import settings_from_env
from .integrations.common.auth_factory import create_token_auth_from_settings


def _claim(raw: str) -> tuple[str, Any]:
    """Parse `KEY=VALUE`; VALUE is read as JSON when it is valid JSON."""
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {raw!r}")
    try:
        return key, json.loads(value)
    except ValueError:
        return key, value


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pkg-tokens",
        description="Issue and inspect HMAC-signed access/refresh tokens "
                    "(key from TOKEN_SECRET_KEY).",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    issue = sub.add_parser("issue-pair", help="Issue an access/refresh token pair.")
    issue.add_argument(
        "--access-claim",
        "-a",
        type=_claim,
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Claim for the access token (repeatable, VALUE may be JSON).",
    )
    issue.add_argument(
        "--refresh-claim",
        "-r",
        type=_claim,
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Claim for the refresh token (repeatable, VALUE may be JSON).",
    )
    issue.add_argument(
        "--now",
        type=int,
        help="Issue time as Unix timestamp (default: current time). "
             "Expiries are now + TOKEN_ACCESS_TTL / TOKEN_REFRESH_TTL.",
    )

    parse = sub.add_parser("parse", help="Verify a token and print its content.")
    parse.add_argument("token", help="Token string, or a full header value with --bearer.")
    parse.add_argument(
        "--bearer",
        action="store_true",
        help="Treat the argument as an Authorization header value (`Bearer <token>`).",
    )

    return parser.parse_args(args=argv)


def _run(args: argparse.Namespace) -> dict[str, Any]:
    auth = create_token_auth_from_settings(settings_from_env())

    if args.command == "issue-pair":
        pair = auth.issue_pair(
            access_data=dict(args.access_claim),
            refresh_data=dict(args.refresh_claim),
            now=args.now,
        )
        return {"access_token": pair.access_token, "refresh_token": pair.refresh_token}

    # parse: the bare codec, so expired tokens are still shown
    token = args.token
    if args.bearer:
        token = auth.extract({auth.header_name: token})
    return auth.codec.parse(token).to_dict()


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        result = _run(args)
    except (TokenError, RuntimeError) as exc:
        json.dump({"ok": False, "error": str(exc), "type": type(exc).__name__}, sys.stdout, indent=2)
        sys.stdout.write("\n")
        return 1

    json.dump({"ok": True, **result}, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
