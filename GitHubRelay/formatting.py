"""Helpers that turn GitHub records into IRC-ready lines."""

import locale
import re
import threading
from datetime import datetime
from string import Template

import pytz
import supybot.log as log

GITHUB_TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

# setlocale() is process-wide; commands run in their own threads
_locale_lock = threading.Lock()

_URL_PLACEHOLDER = re.compile(r'\$(?:url\b|\{url\})')


def parse_timestamp(value):
    return datetime.strptime(value, GITHUB_TIME_FORMAT).replace(tzinfo=pytz.UTC)


def _zone(tz_name):
    try:
        return pytz.timezone(tz_name or 'UTC')
    except pytz.UnknownTimeZoneError:
        log.warning('GitHubRelay: unknown time zone %r, using UTC', tz_name)
        return pytz.UTC


def format_date(dt, fmt, tz_name='UTC', locale_name=''):
    """Format an aware datetime in the given zone and (optionally) LC_TIME locale."""
    local = dt.astimezone(_zone(tz_name))
    if not locale_name:
        return local.strftime(fmt)

    with _locale_lock:
        saved = locale.setlocale(locale.LC_TIME)
        try:
            locale.setlocale(locale.LC_TIME, locale_name)
        except locale.Error:
            log.warning('GitHubRelay: unknown locale %r, using %r', locale_name, saved)
            return local.strftime(fmt)
        try:
            return local.strftime(fmt)
        finally:
            locale.setlocale(locale.LC_TIME, saved)


def gist_date(gist):
    """A gist's last activity: the later of its creation and update times."""
    created = parse_timestamp(gist['created_at'])
    updated = gist.get('updated_at')
    if updated:
        return max(created, parse_timestamp(updated))
    return created


def sort_repos(repos):
    """Most forked first, then most watched, then by name."""
    def key(repo):
        watchers = repo.get('watchers_count', repo.get('stargazers_count', 0)) or 0
        name = repo.get('name', '')
        return (-(repo.get('forks_count') or 0), -watchers, name.lower(), name)
    return sorted(repos, key=key)


def render(template, **values):
    return Template(template).safe_substitute(values)


def wants_url(template):
    """True when a template prints $url, i.e. when shortening is worth doing."""
    return bool(_URL_PLACEHOLDER.search(template))


def batch_replies(lines, threshold, separator=' | '):
    """Join small result sets into one line; leave larger ones one per message."""
    lines = list(lines)
    if lines and len(lines) < threshold:
        return [separator.join(lines)]
    return lines
