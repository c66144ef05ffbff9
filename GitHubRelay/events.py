"""Turn GitHub activity events into a one-line summary plus a link."""

import supybot.log as log

GITHUB_URL = "https://github.com"


def _repo(event):
    return event.get('repo', {}).get('name', '')


def _repo_url(event):
    return f"{GITHUB_URL}/{_repo(event)}"


def _issues(event, payload):
    return (f"{payload.get('action', 'updated')} issue - {_repo(event)}",
            payload['issue']['html_url'])


def _issue_comment(event, payload):
    return f"Commented issue - {_repo(event)}", payload['comment']['html_url']


def _push(event, payload):
    repo = _repo(event)
    size = payload.get('size', len(payload.get('commits', [])))
    return (f"Pushed {size} commits to {repo}",
            f"{GITHUB_URL}/{repo}/compare/{payload['before']}...{payload['head']}")


def _watch(event, payload):
    return f"Starred repository {_repo(event)}", _repo_url(event)


def _create(event, payload):
    ref_type = payload.get('ref_type', 'repository')
    if ref_type == 'repository' or not payload.get('ref'):
        return f"Created {ref_type} {_repo(event)}", _repo_url(event)
    return f"Created {ref_type} {payload['ref']} in {_repo(event)}", _repo_url(event)


def _delete(event, payload):
    return (f"Deleted {payload.get('ref_type', 'ref')} {payload.get('ref', '')} in {_repo(event)}",
            _repo_url(event))


def _fork(event, payload):
    forkee = payload.get('forkee', {})
    return (f"Forked {_repo(event)} to {forkee.get('full_name', '?')}",
            forkee.get('html_url') or _repo_url(event))


def _pull_request(event, payload):
    pr = payload['pull_request']
    number = payload.get('number', pr.get('number'))
    return (f"{payload.get('action', 'updated')} pull request #{number} - {_repo(event)}",
            pr['html_url'])


def _review_comment(event, payload):
    number = payload.get('pull_request', {}).get('number', '?')
    return (f"Commented pull request #{number} - {_repo(event)}",
            payload['comment']['html_url'])


def _commit_comment(event, payload):
    return f"Commented commit - {_repo(event)}", payload['comment']['html_url']


def _release(event, payload):
    release = payload['release']
    return (f"{payload.get('action', 'published')} release {release.get('tag_name', '')} - {_repo(event)}",
            release['html_url'])


def _public(event, payload):
    return f"Open sourced {_repo(event)}", _repo_url(event)


def _member(event, payload):
    login = payload.get('member', {}).get('login', '?')
    return (f"{payload.get('action', 'added')} member {login} - {_repo(event)}",
            _repo_url(event))


def _gollum(event, payload):
    return f"Edited wiki of {_repo(event)}", f"{_repo_url(event)}/wiki"


SUMMARIZERS = {
    'IssuesEvent': _issues,
    'IssueCommentEvent': _issue_comment,
    'PushEvent': _push,
    'WatchEvent': _watch,
    'CreateEvent': _create,
    'DeleteEvent': _delete,
    'ForkEvent': _fork,
    'PullRequestEvent': _pull_request,
    'PullRequestReviewCommentEvent': _review_comment,
    'CommitCommentEvent': _commit_comment,
    'ReleaseEvent': _release,
    'PublicEvent': _public,
    'MemberEvent': _member,
    'GollumEvent': _gollum,
}


def summarize(event):
    """Return (summary, url) for an event record.

    Unknown types, and known types with an unexpected payload, fall back to
    "<Type> - <repo>" pointing at the repository.
    """
    event_type = event.get('type') or 'Event'
    summarizer = SUMMARIZERS.get(event_type)
    if summarizer is not None:
        try:
            return summarizer(event, event.get('payload') or {})
        except KeyError as e:
            log.debug("GitHubRelay: %s without expected field %s", event_type, e)

    label = event_type[:-len('Event')] if event_type.endswith('Event') else event_type
    return f"{label or event_type} - {_repo(event)}", _repo_url(event)
