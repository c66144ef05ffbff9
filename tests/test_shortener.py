"""Tests for the sequential-fallback URL shortener.

Covers:
- first successful provider wins and later ones are never called
- exceptions, None and empty strings all fall through to the next provider
- the long URL comes back when every provider fails (or none is configured)
- parallel shortening keeps the input order
"""

from unittest.mock import MagicMock, patch

import pytest

from GitHubRelay.shortener import Shortener

LONG_URL = "https://github.com/octocat/Hello-World/compare/abc...def"


def failing(exc=RuntimeError("service down")):
    return MagicMock(side_effect=exc)


def test_first_provider_wins():
    first = MagicMock(return_value="https://tinyurl.com/x")
    second = MagicMock(return_value="https://is.gd/y")
    shortener = Shortener([("tinyurl", first), ("isgd", second)])

    assert shortener.short(LONG_URL) == "https://tinyurl.com/x"
    first.assert_called_once_with(LONG_URL)
    second.assert_not_called()


def test_falls_back_after_exception():
    second = MagicMock(return_value="https://is.gd/y")
    shortener = Shortener([("tinyurl", failing()), ("isgd", second)])

    assert shortener.short(LONG_URL) == "https://is.gd/y"


@pytest.mark.parametrize("falsy", ["", None, "   "])
def test_falsy_result_counts_as_failure(falsy):
    second = MagicMock(return_value="https://da.gd/z")
    shortener = Shortener([("tinyurl", MagicMock(return_value=falsy)), ("dagd", second)])

    assert shortener.short(LONG_URL) == "https://da.gd/z"
    second.assert_called_once_with(LONG_URL)


def test_returns_original_when_all_fail():
    providers = [
        ("tinyurl", failing()),
        ("isgd", MagicMock(return_value="")),
        ("dagd", MagicMock(return_value=None)),
    ]
    shortener = Shortener(providers)

    assert shortener.short(LONG_URL) == LONG_URL
    for _, provider in providers:
        provider.assert_called_once_with(LONG_URL)


def test_no_providers_returns_original():
    assert Shortener([]).short(LONG_URL) == LONG_URL
    assert Shortener([]).short_many([LONG_URL]) == [LONG_URL]


def test_result_is_stripped():
    shortener = Shortener([("tinyurl", MagicMock(return_value="https://tinyurl.com/x\n"))])

    assert shortener.short(LONG_URL) == "https://tinyurl.com/x"


def test_short_many_keeps_order():
    shortener = Shortener([("fake", lambda url: url.upper())], workers=3)
    urls = [f"https://github.com/repo{i}" for i in range(7)]

    assert shortener.short_many(urls) == [url.upper() for url in urls]


def test_short_many_empty():
    assert Shortener([("fake", str)]).short_many([]) == []


def test_from_services_uses_pyshorteners_in_order():
    backend = MagicMock()
    backend.tinyurl.short.side_effect = RuntimeError("down")
    backend.isgd.short.return_value = "https://is.gd/ok"

    with patch("GitHubRelay.shortener.pyshorteners.Shortener", return_value=backend) as factory:
        shortener = Shortener.from_services(["tinyurl", "isgd", "dagd"], timeout=3, api_key="k")

    factory.assert_called_once_with(timeout=3, api_key="k")
    assert [name for name, _ in shortener.providers] == ["tinyurl", "isgd", "dagd"]
    assert shortener.short(LONG_URL) == "https://is.gd/ok"
    backend.dagd.short.assert_not_called()


def test_from_services_without_timeout_support():
    backend = MagicMock()
    backend.dagd.short.return_value = "https://da.gd/ok"

    with patch("GitHubRelay.shortener.pyshorteners.Shortener",
               side_effect=[TypeError("unexpected keyword"), backend]) as factory:
        shortener = Shortener.from_services(["dagd"])

    assert factory.call_count == 2
    assert shortener.short(LONG_URL) == "https://da.gd/ok"
