"""Command-line helper for common Okta administration lookups.

Thin wrapper around the oktaclient resource services.
"""
from __future__ import annotations
import argparse
import dataclasses
import json
import logging
import sys
from typing import Any, Optional, Sequence

from oktaclient.config.settings import Settings, load_settings
from oktaclient.core.exceptions import OktaAPIError, OktaConfigError, OktaError
from oktaclient.okta import Okta


def _print_json(value: Any) -> None:
    print(json.dumps(value, indent=2, sort_keys=True))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="okta-admin",
        description="Okta administration helper",
        epilog="Unset options fall back to OKTA_ORG, OKTA_API_KEY (or /run/secrets/okta_api_key), "
               "OKTA_API_VERSION, OKTA_PREVIEW and OKTA_TIMEOUT.",
    )
    parser.add_argument("--org")
    parser.add_argument("--api-key")
    parser.add_argument("--api-version")
    parser.add_argument("--preview", action="store_true", default=None, help="Target <org>.oktapreview.com")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log HTTP requests to stderr")

    sub = parser.add_subparsers(dest="cmd")

    gu = sub.add_parser("get-user")
    gu.add_argument("uid", help="User id or login")

    lu = sub.add_parser("list-users")
    lu.add_argument("--q")
    lu.add_argument("--filter")
    lu.add_argument("--limit", type=int)
    lu.add_argument("--after")

    du = sub.add_parser("deactivate-user")
    du.add_argument("uid")

    lg = sub.add_parser("list-groups")
    lg.add_argument("--q")
    lg.add_argument("--limit", type=int)
    lg.add_argument("--after")

    gm = sub.add_parser("group-members")
    gm.add_argument("gid")
    gm.add_argument("--limit", type=int)
    gm.add_argument("--after")

    la = sub.add_parser("list-apps")
    la.add_argument("--q")
    la.add_argument("--limit", type=int)
    la.add_argument("--after")

    le = sub.add_parser("list-events")
    le.add_argument("--start-date")
    le.add_argument("--filter")
    le.add_argument("--limit", type=int)
    le.add_argument("--after")

    sub.add_parser("user-schema")

    return parser


def run(okta: Okta, args: argparse.Namespace) -> Any:
    """Dispatch a parsed command to the matching resource service."""
    res = okta.resources
    if args.cmd == "get-user":
        return res.users.get(args.uid)
    if args.cmd == "list-users":
        return res.users.list({"q": args.q, "filter": args.filter, "limit": args.limit, "after": args.after})
    if args.cmd == "deactivate-user":
        return res.users.deactivate(args.uid)
    if args.cmd == "list-groups":
        return res.groups.list({"q": args.q, "limit": args.limit, "after": args.after})
    if args.cmd == "group-members":
        return res.groups.list_members(args.gid, limit=args.limit, after=args.after)
    if args.cmd == "list-apps":
        return res.apps.list({"q": args.q, "limit": args.limit, "after": args.after})
    if args.cmd == "list-events":
        return res.events.list({
            "startDate": args.start_date,
            "filter": args.filter,
            "limit": args.limit,
            "after": args.after,
        })
    if args.cmd == "user-schema":
        return res.schemas.get_user_schema()
    raise ValueError(f"Unknown command: {args.cmd}")


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Environment settings with command-line flags taking precedence."""
    settings = load_settings(org=args.org, api_key=args.api_key)
    overrides = {
        name: value
        for name, value in (
            ("api_version", args.api_version),
            ("preview", args.preview),
            ("timeout", args.timeout),
        )
        if value is not None
    }
    return dataclasses.replace(settings, **overrides)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.cmd:
        parser.print_help()
        return 0

    try:
        settings = resolve_settings(args)
    except OktaConfigError as exc:
        parser.error(str(exc))

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="[%(name)s] %(message)s")

    try:
        with Okta.from_settings(settings) as okta:
            result = run(okta, args)
    except OktaAPIError as exc:
        code = exc.error_code or "error"
        summary = exc.error_summary or exc.body
        print(f"[{exc.status_code}] {code}: {summary}", file=sys.stderr)
        return 1
    except OktaError as exc:
        print(f"[okta-admin] {exc}", file=sys.stderr)
        return 1

    _print_json(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
