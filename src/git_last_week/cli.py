from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .git import GitCommandError, get_user_email
from .options import parse_bool, positive_int, resolve_options
from .repos import resolve_repos, split_selectors
from .report import run_report


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-last-week",
        usage="%(prog)s [--repo=ios] [--me] [--days=7] [--cherry-picks] [--user=someone]",
        description="Shows formatted git log for changes in the past 7 days.",
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="store_true", help="Show this help message and exit.")
    parser.add_argument(
        "-r",
        "--repo",
        action="append",
        default=[],
        help="Repos to report on: ids, group names or `all` (repeatable, comma-separated). Default: config `default_repos`, else all.",
    )
    parser.add_argument(
        "--me",
        action="store_true",
        help="Show only your commits. Short for --user=<git config user.email> --cherry-picks=false",
    )
    parser.add_argument(
        "--cherry-picks",
        dest="cherry_picks",
        type=parse_bool,
        nargs="?",
        const=True,
        default=None,
        metavar="BOOL",
        help="Show changes that you authored, even if you didn't commit them (default: true, false with --me).",
    )
    parser.add_argument("--no-cherry-picks", dest="cherry_picks", action="store_false", help="Same as --cherry-picks=false.")
    parser.add_argument("--user", type=str, default="", help="Show commits for the given user (substring match).")
    parser.add_argument(
        "--days",
        type=positive_int,
        default=None,
        help="Show history for this many days instead of past week.",
    )
    parser.add_argument("--config", type=Path, default=Path("config.json"), help="Path to config.json.")
    parser.add_argument(
        "--root",
        type=Path,
        default=Path("."),
        help="Root directory to scan for git repos when the config lists none.",
    )
    parser.add_argument("--jobs", type=positive_int, default=max(1, min(8, (os.cpu_count() or 4))), help="Parallel git jobs.")
    return parser


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.help:
        parser.print_help(sys.stderr)
        return 1

    me_email = get_user_email(Path.cwd()) if args.me else ""
    options = resolve_options(
        me=bool(args.me),
        user=args.user,
        days=args.days,
        cherry_picks=args.cherry_picks,
        me_email=me_email,
    )

    repos = resolve_repos(config_path=args.config, scan_root=args.root, selectors=split_selectors(args.repo))
    if not repos:
        print(f"No git repositories found (config: {args.config}, scan root: {args.root.resolve()}).", file=sys.stderr)
        return 2

    try:
        run_report(repos, options, jobs=int(args.jobs))
    except GitCommandError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
