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

from supybot import conf, registry

try:
    from supybot.i18n import PluginInternationalization

    _ = PluginInternationalization("GitHubRelay")
except ImportError:
    _ = lambda x: x


def configure(advanced):
    # This will be called by supybot to configure this module.  advanced is
    # a bool that specifies whether the user identified themself as an advanced
    # user or not.  You should effect your configuration by manipulating the
    # registry as appropriate.
    from supybot.questions import expect, anything, something, yn

    conf.registerPlugin("GitHubRelay", True)


GitHubRelay = conf.registerPlugin("GitHubRelay")

# ------------------------------------------------------------------ #
# Outbound services (global)
# ------------------------------------------------------------------ #

conf.registerGlobalValue(
    GitHubRelay,
    "apiUrl",
    registry.String(
        "https://api.github.com",
        _("""Base URL of the GitHub REST API."""),
    ),
)

conf.registerGlobalValue(
    GitHubRelay,
    "apiToken",
    registry.String(
        "",
        _(
            """
            Optional GitHub token. It is sent as-is in the Authorization
            header; leave empty for anonymous requests.
            """
        ),
        private=True,
    ),
)

conf.registerGlobalValue(
    GitHubRelay,
    "timeout",
    registry.PositiveInteger(
        10,
        _("""Timeout in seconds for GitHub and URL shortener requests."""),
    ),
)

# Tried left to right; the first service returning a short URL wins and the
# long URL is used when all of them fail.
conf.registerGlobalValue(
    GitHubRelay,
    "shortenerServices",
    registry.SpaceSeparatedListOfStrings(
        ["tinyurl", "isgd", "dagd"],
        _(
            """
            Space-separated, ordered list of pyshorteners services used to
            shorten URLs (e.g. 'tinyurl isgd dagd clckru osdb'). Empty
            disables shortening.
            """
        ),
    ),
)

conf.registerGlobalValue(
    GitHubRelay,
    "shortenerApiKey",
    registry.String(
        "",
        _("""API key for shortener services that need one (bitly, cuttly)."""),
        private=True,
    ),
)

conf.registerGlobalValue(
    GitHubRelay,
    "shortenerWorkers",
    registry.PositiveInteger(
        5,
        _("""Maximum number of URLs shortened in parallel for one reply."""),
    ),
)

# ------------------------------------------------------------------ #
# Per-channel behaviour
# ------------------------------------------------------------------ #

conf.registerChannelValue(
    GitHubRelay,
    "enabled",
    registry.Boolean(
        True,
        _("""Set False to disable the plugin, True to enable."""),
    ),
)

conf.registerChannelValue(
    GitHubRelay,
    "triggers",
    registry.Boolean(
        False,
        _(
            """
            Also answer bare ghGist, ghMembers, ghRepos and ghActivity lines
            (no command prefix needed).
            """
        ),
    ),
)

conf.registerChannelValue(
    GitHubRelay,
    "dateFormat",
    registry.String(
        "%d.%m.%Y %H:%M:%S",
        _("""strftime() format used for $date in templates."""),
    ),
)

conf.registerChannelValue(
    GitHubRelay,
    "dateLocale",
    registry.String(
        "",
        _(
            """
            Locale used for month and day names in $date (e.g. 'fi_FI.UTF-8').
            Empty keeps the bot's locale.
            """
        ),
    ),
)

conf.registerChannelValue(
    GitHubRelay,
    "timezone",
    registry.String(
        "UTC",
        _("""Time zone dates are shown in (e.g. 'Europe/Helsinki')."""),
    ),
)

conf.registerChannelValue(
    GitHubRelay,
    "gistTemplate",
    registry.String(
        "${url} - ${date} - ${description}",
        _(
            """
            Line for each gist. Available: $url, $date, $description, $files,
            $id, $owner.
            """
        ),
    ),
)

conf.registerChannelValue(
    GitHubRelay,
    "memberTemplate",
    registry.String(
        "${login}",
        _("""Line for each organization member. Available: $login, $url."""),
    ),
)

conf.registerChannelValue(
    GitHubRelay,
    "repoTemplate",
    registry.String(
        "${name} (${forks} forks, ${stars} stars) ${url}",
        _(
            """
            Line for each repository. Available: $name, $full_name, $forks,
            $stars, $watchers, $language, $description, $url.
            """
        ),
    ),
)

conf.registerChannelValue(
    GitHubRelay,
    "eventTemplate",
    registry.String(
        "${summary} - ${url}",
        _(
            """
            Line for each activity event. Available: $summary, $url, $type,
            $repo, $date, $actor.
            """
        ),
    ),
)

conf.registerChannelValue(
    GitHubRelay,
    "errorTemplate",
    registry.String(
        "Oh noes, error - ${error}",
        _("""Reply used when GitHub returns an error. Available: $error."""),
    ),
)

conf.registerChannelValue(
    GitHubRelay,
    "joinThreshold",
    registry.NonNegativeInteger(
        5,
        _(
            """
            Results with fewer items than this are posted as a single line;
            larger results are posted one message per item. 0 always posts
            one message per item.
            """
        ),
    ),
)

conf.registerChannelValue(
    GitHubRelay,
    "joinSeparator",
    registry.String(
        " | ",
        _("""Separator between items when they are posted as one line."""),
    ),
)

conf.registerChannelValue(
    GitHubRelay,
    "gistCount",
    registry.PositiveInteger(
        1, _("""Number of gists shown when no count is given.""")
    ),
)

conf.registerChannelValue(
    GitHubRelay,
    "memberCount",
    registry.PositiveInteger(
        20, _("""Number of members shown when no count is given.""")
    ),
)

conf.registerChannelValue(
    GitHubRelay,
    "repoCount",
    registry.PositiveInteger(
        5, _("""Number of repositories shown when no count is given.""")
    ),
)

conf.registerChannelValue(
    GitHubRelay,
    "eventCount",
    registry.PositiveInteger(
        5, _("""Number of activity events shown when no count is given.""")
    ),
)

conf.registerChannelValue(
    GitHubRelay,
    "maxItems",
    registry.PositiveInteger(
        20, _("""Upper limit for any requested item count.""")
    ),
)

# vim:set shiftwidth=4 tabstop=4 expandtab textwidth=79:
