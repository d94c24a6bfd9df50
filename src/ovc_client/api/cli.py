from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Sequence

from .env import settings_from_env
from ..adapters.iyo.client import ItsYouOnlineClient
from ..factory import create_token_holder


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ovc-client",
        description="Obtain and inspect OVC bearer tokens",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log SDK activity to stderr.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    login = sub.add_parser(
        "login",
        help="Print a fresh JWT obtained with OVC_CLIENT_ID / OVC_CLIENT_SECRET.",
    )
    login.add_argument(
        "--scope",
        "-s",
        nargs="*",
        help="Scopes to request (defaults from env OVC_SCOPES).",
    )

    claims = sub.add_parser(
        "claims",
        help="Verify a JWT with OVC_JWT_PUBLIC_KEY and print its claims.",
    )
    claims.add_argument("token", help="The JWT to inspect.")

    return parser.parse_args(args=argv)


def _login(args: argparse.Namespace) -> dict[str, Any]:
    settings = settings_from_env()
    client_id, client_secret = settings.credentials()
    iyo = ItsYouOnlineClient(settings.iyo_base_url, timeout=settings.timeout, verify=settings.verify_ssl)
    try:
        scopes = settings.scopes if args.scope is None else list(args.scope)
        return {"token": iyo.login(client_id, client_secret, scopes=scopes)}
    finally:
        iyo.close()


def _claims(args: argparse.Namespace) -> dict[str, Any]:
    settings = settings_from_env()
    holder = create_token_holder(
        args.token,
        settings.identity_provider,
        public_key=settings.jwt_public_key,
        expiration_buffer=settings.expiration_buffer,
    )
    return {
        "provider": holder.provider,
        "state": holder.state.value,
        "refreshable": holder.refreshable,
        "claims": dict(holder.claims),
    }


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        result = _login(args) if args.command == "login" else _claims(args)
        json.dump({"ok": True, **result}, sys.stdout, indent=2, default=str)
        sys.stdout.write("\n")
    except Exception as exc:  # noqa: BLE001
        json.dump({"ok": False, "error": str(exc)}, sys.stdout, indent=2)
        sys.stdout.write("\n")
        raise


if __name__ == "__main__":
    main()
