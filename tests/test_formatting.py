"""Tests for reply formatting helpers."""

import locale
from datetime import datetime

import pytz

from GitHubRelay.formatting import (batch_replies, format_date, gist_date, parse_timestamp,
                                    render, sort_repos, wants_url)


def repo(name, forks, watchers):
    return {"name": name, "forks_count": forks, "watchers_count": watchers}


class TestSortRepos:
    def test_forks_then_watchers_then_name(self):
        repos = [
            repo("zeta", 1, 5),
            repo("alpha", 1, 5),
            repo("most-watched", 1, 50),
            repo("most-forked", 9, 0),
        ]

        names = [r["name"] for r in sort_repos(repos)]

        assert names == ["most-forked", "most-watched", "alpha", "zeta"]

    def test_name_is_case_insensitive(self):
        repos = [repo("beta", 0, 0), repo("Alpha", 0, 0)]

        assert [r["name"] for r in sort_repos(repos)] == ["Alpha", "beta"]

    def test_stargazers_used_without_watchers(self):
        repos = [
            {"name": "a", "forks_count": 0, "stargazers_count": 1},
            {"name": "b", "forks_count": 0, "stargazers_count": 7},
        ]

        assert [r["name"] for r in sort_repos(repos)] == ["b", "a"]

    def test_input_not_mutated(self):
        repos = [repo("a", 0, 0), repo("b", 5, 0)]

        sort_repos(repos)

        assert [r["name"] for r in repos] == ["a", "b"]


class TestBatchReplies:
    def test_below_threshold_joined(self):
        assert batch_replies(["a", "b"], 3, " | ") == ["a | b"]

    def test_at_threshold_separate(self):
        assert batch_replies(["a", "b", "c"], 3, " | ") == ["a", "b", "c"]

    def test_above_threshold_separate(self):
        assert batch_replies(["a", "b", "c", "d"], 3) == ["a", "b", "c", "d"]

    def test_zero_threshold_never_joins(self):
        assert batch_replies(["a"], 0) == ["a"]

    def test_empty(self):
        assert batch_replies([], 5) == []


def test_parse_timestamp_is_utc():
    assert parse_timestamp("2024-01-02T03:04:05Z") == datetime(2024, 1, 2, 3, 4, 5, tzinfo=pytz.UTC)


def test_format_date_timezone():
    dt = parse_timestamp("2024-01-02T03:04:05Z")

    assert format_date(dt, "%d.%m.%Y %H:%M:%S", "Europe/Helsinki") == "02.01.2024 05:04:05"


def test_format_date_unknown_timezone_uses_utc():
    dt = parse_timestamp("2024-01-02T03:04:05Z")

    assert format_date(dt, "%H:%M", "Nowhere/Special") == "03:04"


def test_format_date_unknown_locale_still_formats():
    dt = parse_timestamp("2024-01-02T03:04:05Z")

    assert format_date(dt, "%Y-%m-%d", "UTC", "xx_NOPE.UTF-8") == "2024-01-02"


def test_gist_date_uses_latest():
    gist = {"created_at": "2024-01-02T03:04:05Z", "updated_at": "2024-03-01T00:00:00Z"}

    assert gist_date(gist) == parse_timestamp("2024-03-01T00:00:00Z")


def test_gist_date_without_update():
    assert gist_date({"created_at": "2024-01-02T03:04:05Z"}) == parse_timestamp("2024-01-02T03:04:05Z")


def test_render_leaves_unknown_placeholders():
    assert render("${url} - ${nope}", url="https://x") == "https://x - ${nope}"


def test_wants_url():
    assert wants_url("${url} - ${date}")
    assert wants_url("see $url")
    assert not wants_url("${login}")
    assert not wants_url("$urls")


def test_format_date_with_locale_restores_lc_time():
    dt = parse_timestamp("2024-01-02T03:04:05Z")
    before = locale.setlocale(locale.LC_TIME)

    assert format_date(dt, "%B %d", "UTC", "C") == "January 02"
    assert locale.setlocale(locale.LC_TIME) == before
