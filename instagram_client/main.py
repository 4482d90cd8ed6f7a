from __future__ import annotations

import argparse
import json
import sys

from .client import InstagramClient
from .config import AUTH_KEYS, OPTIONAL_KEYS, Config
from .errors import InstagramError
from .http import VERSION

RELATIONSHIP_ACTIONS = ["follow", "unfollow", "block", "unblock", "approve", "ignore"]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="instagram-users")
    p.add_argument("--version", action="store_true", help="Print version and exit")

    sub = p.add_subparsers(dest="cmd", required=False)

    p_config = sub.add_parser("config", help="Config commands")
    sub_config = p_config.add_subparsers(dest="config_cmd", required=True)
    sub_config.add_parser("keys", help="List the environment variables read")
    sub_config.add_parser("check", help="Validate that credentials are set")

    p_user = sub.add_parser("user", help="Show a user (default: the authenticated user)")
    p_user.add_argument("id", nargs="?")

    p_search = sub.add_parser("search", help="Search users by name")
    p_search.add_argument("query")
    p_search.add_argument("--count", type=int)

    for name, help_text in (
        ("follows", "Users a user follows"),
        ("followed-by", "Users following a user"),
    ):
        p_list = sub.add_parser(name, help=help_text)
        p_list.add_argument("id", nargs="?")
        p_list.add_argument("--cursor")
        p_list.add_argument("--count", type=int)

    sub.add_parser("requested-by", help="Pending follow requests for the authenticated user")

    p_feed = sub.add_parser("feed", help="Media feed of the authenticated user")
    p_feed.add_argument("--max-id", dest="max_id")
    p_feed.add_argument("--count", type=int)

    p_media = sub.add_parser("media", help="Recent media of a user")
    p_media.add_argument("id", nargs="?")
    p_media.add_argument("--max-id", dest="max_id")
    p_media.add_argument("--count", type=int)

    p_rel = sub.add_parser("relationship", help="Relationship with a user")
    p_rel.add_argument("id")

    p_relate = sub.add_parser("relate", help="Change the relationship with a user")
    p_relate.add_argument("id")
    p_relate.add_argument("action", choices=RELATIONSHIP_ACTIONS)

    return p


def _options(args: argparse.Namespace, *keys: str) -> dict:
    """Collect the paging flags that were actually given."""
    return {k: getattr(args, k) for k in keys if getattr(args, k) is not None}


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    if args.version:
        print(VERSION)
        return 0

    if args.cmd is None:
        p.print_help()
        return 0

    if args.cmd == "config":
        if args.config_cmd == "keys":
            for k in AUTH_KEYS + OPTIONAL_KEYS:
                print(k)
            return 0

        if args.config_cmd == "check":
            # Intentionally do not print secret values
            cfg = Config.load_from_env()
            mode = "access token" if cfg.access_token else "client id"
            print(f"OK: using {mode} against {cfg.api_url}")
            return 0

    client = InstagramClient.from_config(Config.load_from_env())
    try:
        data = _dispatch(client, args)
    except InstagramError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(data, indent=2, ensure_ascii=False))
    return 0


def _dispatch(client: InstagramClient, args: argparse.Namespace):
    users = client.users

    if args.cmd == "user":
        return users.get_user(args.id)
    if args.cmd == "search":
        return users.search_users(args.query, _options(args, "count"))
    if args.cmd == "follows":
        return users.get_follows(args.id, _options(args, "cursor", "count"))
    if args.cmd == "followed-by":
        return users.get_followed_by(args.id, _options(args, "cursor", "count"))
    if args.cmd == "requested-by":
        return users.get_requested_by()
    if args.cmd == "feed":
        return users.get_self_feed(_options(args, "max_id", "count"))
    if args.cmd == "media":
        return users.get_recent_media(args.id, _options(args, "max_id", "count"))
    if args.cmd == "relationship":
        return users.get_relationship(args.id)
    if args.cmd == "relate":
        return users.set_relationship(args.id, args.action)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
