import threading
from unittest import mock

import requests
from supybot import conf
from supybot.test import ChannelPluginTestCase

from .client import GitHubClient, GitHubError
from .shortener import Shortener

REPOS = [
    {'name': 'small', 'html_url': 'https://github.com/o/small',
     'forks_count': 1, 'watchers_count': 1, 'stargazers_count': 1},
    {'name': 'big', 'html_url': 'https://github.com/o/big',
     'forks_count': 10, 'watchers_count': 3, 'stargazers_count': 3},
]

GISTS = [
    {'id': 'abc', 'html_url': 'https://gist.github.com/abc', 'description': 'dotfiles',
     'created_at': '2024-01-02T03:04:05Z', 'updated_at': '2024-02-03T04:05:06Z',
     'files': {'a.sh': {}, 'b.sh': {}}, 'owner': {'login': 'octocat'}},
]


def fake_short(self, url):
    return url.replace('https://github.com/', 'https://sho.rt/')


class GitHubRelayTestCase(ChannelPluginTestCase):
    plugins = ('GitHubRelay',)

    def setUp(self):
        super().setUp()
        self.cb = self.irc.getCallback('GitHubRelay')
        self.cb.threaded = False
        patcher = mock.patch.object(Shortener, 'short', fake_short)
        patcher.start()
        self.addCleanup(patcher.stop)

    def testRepos(self):
        with mock.patch.object(GitHubClient, 'user_repos', return_value=REPOS):
            self.assertResponse(
                'repos o',
                'big (10 forks, 3 stars) https://sho.rt/o/big | '
                'small (1 forks, 1 stars) https://sho.rt/o/small')

    def testReposSeparateMessages(self):
        with conf.supybot.plugins.GitHubRelay.joinThreshold.context(2):
            with mock.patch.object(GitHubClient, 'user_repos', return_value=REPOS):
                self.assertResponse('repos o', 'big (10 forks, 3 stars) https://sho.rt/o/big')
                m = self.irc.takeMsg()
                self.assertEqual(m.args[1], 'small (1 forks, 1 stars) https://sho.rt/o/small')

    def testGistDefaultsToNick(self):
        with mock.patch.object(GitHubClient, 'user_gists', return_value=GISTS) as gists:
            self.assertResponse(
                'gist',
                'https://gist.github.com/abc - 03.02.2024 04:05:06 - dotfiles')
            gists.assert_called_once_with(self.nick, 1)

    def testMembersTemplate(self):
        members = [{'login': 'alice', 'html_url': 'https://github.com/alice'}]
        with conf.supybot.plugins.GitHubRelay.memberTemplate.context('${login} <${url}>'):
            with mock.patch.object(GitHubClient, 'org_members', return_value=members):
                self.assertResponse('members org', 'alice <https://sho.rt/alice>')

    def testActivity(self):
        events = [{'type': 'WatchEvent', 'repo': {'name': 'o/big'},
                   'created_at': '2024-01-02T03:04:05Z', 'payload': {'action': 'started'}}]
        with mock.patch.object(GitHubClient, 'user_events', return_value=events):
            self.assertResponse('activity someone 1',
                                'Starred repository o/big - https://sho.rt/o/big')

    def testNoResults(self):
        with mock.patch.object(GitHubClient, 'user_repos', return_value=[]):
            self.assertResponse('repos nobody', 'No repositories found for nobody.')

    def testGitHubErrorIsReported(self):
        error = GitHubError(404, {'message': 'Not Found'})
        with mock.patch.object(GitHubClient, 'user_repos', side_effect=error):
            self.assertRegexp('repos nobody', r'Oh noes, error - \{"message": "Not Found"\}')

    def testConnectionErrorIsReported(self):
        error = requests.ConnectionError('boom')
        with mock.patch.object(GitHubClient, 'user_events', side_effect=error):
            self.assertRegexp('activity someone', 'Oh noes, error - boom')

    def testTrigger(self):
        with conf.supybot.plugins.GitHubRelay.triggers.context(True):
            with mock.patch.object(GitHubClient, 'user_repos', return_value=REPOS[:1]):
                self.assertResponse('ghRepos o',
                                    'small (1 forks, 1 stars) https://sho.rt/o/small',
                                    usePrefixChar=False)

    def testTriggersOffByDefault(self):
        with mock.patch.object(GitHubClient, 'user_repos', return_value=REPOS) as repos:
            self.assertNoResponse('ghRepos o', usePrefixChar=False)
            repos.assert_not_called()

    def testTriggerRunsOffMainThread(self):
        on_main_thread = []

        def user_repos(owner):
            on_main_thread.append(threading.current_thread() is threading.main_thread())
            return REPOS[:1]

        with conf.supybot.plugins.GitHubRelay.triggers.context(True):
            with mock.patch.object(GitHubClient, 'user_repos', side_effect=user_repos):
                self.assertResponse('ghRepos o',
                                    'small (1 forks, 1 stars) https://sho.rt/o/small',
                                    usePrefixChar=False)
        self.assertEqual(on_main_thread, [False])

    def testTriggerSingleArgumentIsUser(self):
        with conf.supybot.plugins.GitHubRelay.triggers.context(True):
            with mock.patch.object(GitHubClient, 'user_gists', return_value=[]) as gists:
                self.assertResponse('ghGist someone', 'No gists found for someone.',
                                    usePrefixChar=False)
                gists.assert_called_once_with('someone', 1)
            with mock.patch.object(GitHubClient, 'user_events', return_value=[]) as events:
                self.assertResponse('ghActivity someone', 'No events found for someone.',
                                    usePrefixChar=False)
                events.assert_called_once_with('someone', 5)

    def testTriggerZeroCountIgnored(self):
        with conf.supybot.plugins.GitHubRelay.triggers.context(True):
            with mock.patch.object(GitHubClient, 'user_repos', return_value=REPOS) as repos:
                self.assertNoResponse('ghRepos o 0', usePrefixChar=False)
                repos.assert_not_called()

    def testCountIsCapped(self):
        with conf.supybot.plugins.GitHubRelay.maxItems.context(3):
            with mock.patch.object(GitHubClient, 'user_gists', return_value=[]) as gists:
                self.assertResponse('gist someone 50', 'No gists found for someone.')
                gists.assert_called_once_with('someone', 3)

    def testDisabledChannelIsSilent(self):
        with conf.supybot.plugins.GitHubRelay.enabled.context(False):
            with mock.patch.object(GitHubClient, 'user_repos', return_value=REPOS) as repos:
                self.assertNoResponse('repos o')
                repos.assert_not_called()

    def testUnexpectedErrorIsReported(self):
        with mock.patch.object(GitHubClient, 'user_repos', side_effect=RuntimeError('bad')):
            self.assertRegexp('repos o', 'An unexpected error occurred.')

    def testPlainTextErrorShownVerbatim(self):
        error = GitHubError(502, 'Bad Gateway')
        with mock.patch.object(GitHubClient, 'user_repos', side_effect=error):
            self.assertRegexp('repos o', r'Oh noes, error - Bad Gateway$')

# vim:set shiftwidth=4 tabstop=4 expandtab textwidth=79:
