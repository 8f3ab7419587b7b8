from __future__ import annotations

import argparse

from .models import DEFAULT_DAYS, ReportOptions


def parse_bool(value: str) -> bool:
    v = str(value).strip().lower()
    if v in ("1", "true", "yes", "y", "on"):
        return True
    if v in ("0", "false", "no", "n", "off"):
        return False
    raise argparse.ArgumentTypeError(f"expected a boolean, got {value!r}")


def positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a whole number, got {value!r}") from None
    if n <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive number, got {value!r}")
    return n


def resolve_options(
    *,
    me: bool,
    user: str | None,
    days: int | None,
    cherry_picks: bool | None,
    me_email: str,
) -> ReportOptions:
    """
    `--me` is short for `--user=<own email> --cherry-picks=false`; an explicit
    `--cherry-picks` still wins. `--user` takes precedence over the own email.
    """
    user = (user or "").strip()
    filter_by_email = bool(me) or bool(user)
    user_email = (user or me_email) if filter_by_email else ""
    if filter_by_email and not user_email:
        raise SystemExit("--me needs `git config user.email` to be set (or pass --user=<email>).")
    if cherry_picks is None:
        show_cherry_picks = not me
    else:
        show_cherry_picks = bool(cherry_picks)
    return ReportOptions(
        filter_by_email=filter_by_email,
        days=days or DEFAULT_DAYS,
        user_email=user_email,
        show_cherry_picks=show_cherry_picks,
    )
