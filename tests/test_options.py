from __future__ import annotations

import argparse

import pytest

from git_last_week.models import DEFAULT_DAYS, ReportOptions
from git_last_week.options import parse_bool, positive_int, resolve_options


def test_defaults_report_everyone_for_a_week() -> None:
    opts = resolve_options(me=False, user="", days=None, cherry_picks=None, me_email="")
    assert opts.filter_by_email is False
    assert opts.days == 7
    assert opts.user_email == ""
    assert opts.show_cherry_picks is True


def test_me_filters_by_own_email_without_cherry_picks() -> None:
    opts = resolve_options(me=True, user="", days=None, cherry_picks=None, me_email="me@example.com")
    assert opts.filter_by_email is True
    assert opts.user_email == "me@example.com"
    assert opts.show_cherry_picks is False


def test_me_with_explicit_cherry_picks_reenables_them() -> None:
    opts = resolve_options(me=True, user="", days=3, cherry_picks=True, me_email="me@example.com")
    assert opts.show_cherry_picks is True
    assert opts.days == 3


def test_user_wins_over_own_email() -> None:
    opts = resolve_options(me=True, user="jane@", days=None, cherry_picks=None, me_email="me@example.com")
    assert opts.user_email == "jane@"
    assert opts.show_cherry_picks is False


def test_user_keeps_cherry_picks_unless_disabled() -> None:
    assert resolve_options(me=False, user="jane", days=None, cherry_picks=None, me_email="").show_cherry_picks is True
    assert resolve_options(me=False, user="jane", days=None, cherry_picks=False, me_email="").show_cherry_picks is False


def test_me_without_configured_email_is_an_error() -> None:
    with pytest.raises(SystemExit):
        resolve_options(me=True, user="", days=None, cherry_picks=None, me_email="")


def test_parse_bool() -> None:
    assert parse_bool("false") is False
    assert parse_bool("Yes") is True
    with pytest.raises(argparse.ArgumentTypeError):
        parse_bool("maybe")


def test_positive_int_rejects_zero_and_junk() -> None:
    assert positive_int("14") == 14
    with pytest.raises(argparse.ArgumentTypeError):
        positive_int("0")
    with pytest.raises(argparse.ArgumentTypeError):
        positive_int("week")


def test_report_options_default_window_matches_flag_default() -> None:
    assert ReportOptions().days == DEFAULT_DAYS == 7
    assert resolve_options(me=False, user="", days=None, cherry_picks=None, me_email="").days == ReportOptions().days
