"""
GitHubRelay: relays GitHub gists, organization members, repositories and user
activity into IRC channels, shortening links along the way.

Configuration:
    - apiToken: optional GitHub token, passed through as-is
    - shortenerServices: ordered list of URL shorteners to try
    - gistTemplate, memberTemplate, repoTemplate, eventTemplate: line formats
    - joinThreshold: results smaller than this are posted as one line
    - triggers: also answer bare ghGist/ghMembers/ghRepos/ghActivity lines

Example usage:
    1. Show someone's newest two gists:
        !gist octocat 2
    2. List an organization's most forked repositories:
        !repos python 5
    3. Try is.gd before TinyURL:
        !config plugins.GitHubRelay.shortenerServices isgd tinyurl dagd
    4. Enable the bare triggers in a channel:
        !config channel #yourchannel plugins.GitHubRelay.triggers True
"""

import supybot
import supybot.world as world

# Use this for the version of this plugin.
__version__ = "1.0.0"

__author__ = supybot.Author("Nelluk", "Nelluk", "")

# This is a dictionary mapping supybot.Author instances to lists of
# contributions.
__contributors__ = {}

# This is a url where the most recent plugin package can be downloaded.
__url__ = ''

from . import config
from . import plugin
from importlib import reload
reload(plugin)  # In case we're being reloaded.

if world.testing:
    from . import test

Class = plugin.Class
configure = config.configure
