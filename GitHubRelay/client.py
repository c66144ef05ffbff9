"""Read-only access to the handful of GitHub REST endpoints the plugin relays."""

import requests
import supybot.log as log

USER_AGENT = "Limnoria-GitHubRelay"


class GitHubError(Exception):
    """GitHub answered with a non-2xx status.

    `payload` is the decoded JSON error body (or the raw text when the body
    is not JSON) so it can be shown to the user as-is.
    """

    def __init__(self, status, payload):
        super().__init__(f"GitHub API returned status {status}")
        self.status = status
        self.payload = payload


class GitHubClient:
    """Thin wrapper around `requests` for the GitHub v3 API."""

    def __init__(self, base_url="https://api.github.com", token=None, timeout=10, session=None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers = {
            'Accept': 'application/vnd.github+json',
            'User-Agent': USER_AGENT,
        }
        if token:
            self.headers['Authorization'] = f"token {token}"

    def _get(self, path, params=None):
        url = f"{self.base_url}{path}"
        log.debug('GitHubRelay: GET %s params=%r', url, params)
        response = self.session.get(url, params=params, headers=self.headers, timeout=self.timeout)

        if not response.ok:
            try:
                payload = response.json()
            except ValueError:
                payload = response.text
            log.debug('GitHubRelay: %s failed with status %d: %r', url, response.status_code, payload)
            raise GitHubError(response.status_code, payload)

        return response.json()

    def user_gists(self, user, count):
        return self._get(f"/users/{user}/gists", {'per_page': count})

    def org_members(self, org, count):
        return self._get(f"/orgs/{org}/members", {'per_page': count})

    def user_repos(self, owner):
        # /users/<name>/repos also answers for organizations
        return self._get(f"/users/{owner}/repos", {'per_page': 100, 'type': 'owner'})

    def user_events(self, user, count):
        return self._get(f"/users/{user}/events/public", {'per_page': count})
