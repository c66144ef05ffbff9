###
# Copyright (c) 2025 Nelluk
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#   * Redistributions of source code must retain the above copyright notice,
#     this list of conditions, and the following disclaimer.
#   * Redistributions in binary form must reproduce the above copyright notice,
#     this list of conditions, and the following disclaimer in the
#     documentation and/or other materials provided with the distribution.
#   * Neither the name of the author of this software nor the name of
#     contributors to this software may be used to endorse or promote products
#     derived from this software without specific prior written consent.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED.  IN NO EVENT SHALL THE COPYRIGHT OWNER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.
###

"""
GitHubRelay plugin

Relays GitHub gists, organization members, repositories and user activity
into IRC. Links are shortened through the services listed in
`plugins.GitHubRelay.shortenerServices`, tried in order; the long URL is
used when none of them answers.

Notes:

- Every command builds a fresh GitHubClient from the registry so token and
  API URL changes apply without reloading the plugin.
- Replies with fewer items than `joinThreshold` go out as one joined line,
  larger ones as one message per item.
- With `triggers` enabled for a channel, the bare `ghGist`, `ghMembers`,
  `ghRepos` and `ghActivity` lines are answered too (see `_TRIGGERS`).
"""

import json
import re

import requests
import supybot.callbacks as callbacks
import supybot.log as log
import supybot.world as world
# Avoid wildcard import: it can shadow Python builtins like `any`/`all`.
from supybot.commands import optional, wrap

from .client import GitHubClient, GitHubError
from .events import summarize
from .formatting import (batch_replies, format_date, gist_date, parse_timestamp,
                         render, sort_repos, wants_url)
from .shortener import Shortener


class GitHubRelay(callbacks.Plugin):
    """Shows GitHub gists, organization members, repositories and activity."""
    threaded = True

    # pattern -> (builder method, what the items are called)
    _TRIGGERS = (
        (re.compile(r'^ghGist(?: (\S+))?(?: ([1-9]\d*))?$'), '_gist_lines', 'gists'),
        (re.compile(r'^ghMembers (\S+)(?: ([1-9]\d*))?$'), '_member_lines', 'members'),
        (re.compile(r'^ghRepos (\S+)(?: ([1-9]\d*))?$'), '_repo_lines', 'repositories'),
        (re.compile(r'^ghActivity(?: (\S+))?(?: ([1-9]\d*))?$'), '_activity_lines', 'events'),
    )

    # ---------------------------- helpers ----------------------------- #

    def _client(self):
        return GitHubClient(
            self.registryValue('apiUrl'),
            token=self.registryValue('apiToken') or None,
            timeout=self.registryValue('timeout'),
        )

    def _shortener(self):
        return Shortener.from_services(
            self.registryValue('shortenerServices'),
            timeout=self.registryValue('timeout'),
            api_key=self.registryValue('shortenerApiKey') or None,
            workers=self.registryValue('shortenerWorkers'),
        )

    def _short_urls(self, template, urls):
        if not wants_url(template):
            return urls
        return self._shortener().short_many(urls)

    def _count(self, requested, default_name, channel):
        count = requested or self.registryValue(default_name, channel)
        return min(count, self.registryValue('maxItems', channel))

    def _date(self, timestamp, channel):
        return format_date(
            timestamp,
            self.registryValue('dateFormat', channel),
            self.registryValue('timezone', channel),
            self.registryValue('dateLocale', channel),
        )

    # ---------------------------- builders ---------------------------- #

    def _gist_lines(self, channel, user, count):
        count = self._count(count, 'gistCount', channel)
        gists = self._client().user_gists(user, count)[:count]
        template = self.registryValue('gistTemplate', channel)
        urls = self._short_urls(template, [gist['html_url'] for gist in gists])

        return [
            render(
                template,
                url=url,
                date=self._date(gist_date(gist), channel),
                description=gist.get('description') or '',
                files=len(gist.get('files') or {}),
                id=gist.get('id', ''),
                owner=(gist.get('owner') or {}).get('login', user),
            )
            for gist, url in zip(gists, urls)
        ]

    def _member_lines(self, channel, org, count):
        count = self._count(count, 'memberCount', channel)
        members = self._client().org_members(org, count)[:count]
        template = self.registryValue('memberTemplate', channel)
        urls = self._short_urls(template, [member['html_url'] for member in members])

        return [render(template, login=member['login'], url=url)
                for member, url in zip(members, urls)]

    def _repo_lines(self, channel, owner, count):
        count = self._count(count, 'repoCount', channel)
        repos = sort_repos(self._client().user_repos(owner))[:count]
        template = self.registryValue('repoTemplate', channel)
        urls = self._short_urls(template, [repo['html_url'] for repo in repos])

        return [
            render(
                template,
                name=repo['name'],
                full_name=repo.get('full_name', repo['name']),
                forks=repo.get('forks_count', 0),
                stars=repo.get('stargazers_count', 0),
                watchers=repo.get('watchers_count', 0),
                language=repo.get('language') or '',
                description=repo.get('description') or '',
                url=url,
            )
            for repo, url in zip(repos, urls)
        ]

    def _activity_lines(self, channel, user, count):
        count = self._count(count, 'eventCount', channel)
        events = self._client().user_events(user, count)[:count]
        template = self.registryValue('eventTemplate', channel)
        summaries = [summarize(event) for event in events]
        urls = self._short_urls(template, [url for _, url in summaries])

        lines = []
        for event, (summary, _), url in zip(events, summaries, urls):
            created = event.get('created_at')
            lines.append(render(
                template,
                summary=summary,
                url=url,
                type=event.get('type', ''),
                repo=event.get('repo', {}).get('name', ''),
                date=self._date(parse_timestamp(created), channel) if created else '',
                actor=event.get('actor', {}).get('login', user),
            ))
        return lines

    # ---------------------------- replying ---------------------------- #

    def _relay(self, irc, channel, builder, name, count, noun):
        """Run a builder and post its lines, reporting GitHub errors to the caller."""
        error_template = self.registryValue('errorTemplate', channel)
        try:
            lines = builder(channel, name, count)
        except GitHubError as e:
            log.warning('GitHubRelay: GitHub error %d for %s: %r', e.status, name, e.payload)
            payload = e.payload if isinstance(e.payload, str) else json.dumps(e.payload)
            irc.reply(render(error_template, error=payload))
            return
        except requests.RequestException as e:
            log.error('GitHubRelay: request for %s failed: %s', name, e)
            irc.reply(render(error_template, error=str(e)))
            return
        except Exception as e:
            log.exception(f"GitHubRelay: unexpected error for {name}: {e!r}")
            irc.reply("An unexpected error occurred.")
            return

        if not lines:
            irc.reply(f"No {noun} found for {name}.", prefixNick=False)
            return

        replies = batch_replies(
            lines,
            self.registryValue('joinThreshold', channel),
            self.registryValue('joinSeparator', channel),
        )
        log.debug('GitHubRelay: sending %d line(s) for %s', len(replies), name)
        for line in replies:
            irc.reply(line, prefixNick=False)

    def _enabled(self, irc, channel):
        if channel and irc.isChannel(channel):
            return self.registryValue('enabled', channel)
        return self.registryValue('enabled')

    def doPrivmsg(self, irc, msg):
        """Answer the bare gh* trigger lines in channels that enable them."""
        channel = msg.args[0]
        if not irc.isChannel(channel):
            return
        if not self.registryValue('triggers', channel) or not self.registryValue('enabled', channel):
            return

        text = msg.args[1].strip()
        for pattern, builder, noun in self._TRIGGERS:
            match = pattern.match(text)
            if match:
                name, count = match.groups()
                # doPrivmsg runs on the driver thread
                thread = world.SupyThread(
                    target=self._relay,
                    name=f"GitHubRelay {text}",
                    args=(irc, channel, getattr(self, builder),
                          name or msg.nick, int(count) if count else None, noun),
                    daemon=True,
                )
                thread.start()
                return

    # ---------------------------- commands ---------------------------- #

    def gist(self, irc, msg, args, user, count):
        """[<user>] [<count>]

        Shows the newest gists of <user> (defaults to your nick).
        """
        if not self._enabled(irc, msg.channel):
            return
        self._relay(irc, msg.channel, self._gist_lines, user or msg.nick, count, 'gists')

    gist = wrap(gist, [optional('somethingWithoutSpaces'), optional('positiveInt')])

    def members(self, irc, msg, args, org, count):
        """<organization> [<count>]

        Lists members of a GitHub organization.
        """
        if not self._enabled(irc, msg.channel):
            return
        self._relay(irc, msg.channel, self._member_lines, org, count, 'members')

    members = wrap(members, ['somethingWithoutSpaces', optional('positiveInt')])

    def repos(self, irc, msg, args, owner, count):
        """<user|organization> [<count>]

        Lists repositories of <user|organization>, most forked and most
        starred first.
        """
        if not self._enabled(irc, msg.channel):
            return
        self._relay(irc, msg.channel, self._repo_lines, owner, count, 'repositories')

    repos = wrap(repos, ['somethingWithoutSpaces', optional('positiveInt')])

    def activity(self, irc, msg, args, user, count):
        """[<user>] [<count>]

        Shows recent public GitHub activity of <user> (defaults to your nick).
        """
        if not self._enabled(irc, msg.channel):
            return
        self._relay(irc, msg.channel, self._activity_lines, user or msg.nick, count, 'events')

    activity = wrap(activity, [optional('somethingWithoutSpaces'), optional('positiveInt')])


Class = GitHubRelay

# vim: set shiftwidth=4 softtabstop=4 expandtab textwidth=79:
