"""Tests for GitHub activity event summaries."""

from GitHubRelay.events import summarize


def event(event_type, payload=None, repo="octocat/Hello-World"):
    return {"type": event_type, "repo": {"name": repo}, "payload": payload or {}}


def test_issues_event():
    e = event("IssuesEvent", {"action": "opened",
                              "issue": {"html_url": "https://github.com/octocat/Hello-World/issues/1"}})

    assert summarize(e) == ("opened issue - octocat/Hello-World",
                            "https://github.com/octocat/Hello-World/issues/1")


def test_issue_comment_event():
    url = "https://github.com/octocat/Hello-World/issues/1#issuecomment-2"
    e = event("IssueCommentEvent", {"comment": {"html_url": url}})

    assert summarize(e) == ("Commented issue - octocat/Hello-World", url)


def test_push_event_links_compare_view():
    e = event("PushEvent", {"size": 3, "before": "aaa", "head": "bbb"})

    assert summarize(e) == ("Pushed 3 commits to octocat/Hello-World",
                            "https://github.com/octocat/Hello-World/compare/aaa...bbb")


def test_watch_event():
    assert summarize(event("WatchEvent", {"action": "started"})) == (
        "Starred repository octocat/Hello-World", "https://github.com/octocat/Hello-World")


def test_create_branch_and_repository():
    branch = event("CreateEvent", {"ref_type": "branch", "ref": "feature"})
    repository = event("CreateEvent", {"ref_type": "repository", "ref": None})

    assert summarize(branch)[0] == "Created branch feature in octocat/Hello-World"
    assert summarize(repository)[0] == "Created repository octocat/Hello-World"


def test_fork_event_links_fork():
    e = event("ForkEvent", {"forkee": {"full_name": "me/Hello-World",
                                       "html_url": "https://github.com/me/Hello-World"}})

    assert summarize(e) == ("Forked octocat/Hello-World to me/Hello-World",
                            "https://github.com/me/Hello-World")


def test_pull_request_event():
    e = event("PullRequestEvent", {"action": "closed", "number": 7,
                                   "pull_request": {"html_url": "https://github.com/octocat/Hello-World/pull/7"}})

    assert summarize(e) == ("closed pull request #7 - octocat/Hello-World",
                            "https://github.com/octocat/Hello-World/pull/7")


def test_release_event():
    e = event("ReleaseEvent", {"action": "published",
                               "release": {"tag_name": "v1.0", "html_url": "https://github.com/r/v1.0"}})

    assert summarize(e) == ("published release v1.0 - octocat/Hello-World", "https://github.com/r/v1.0")


def test_unknown_event_type_falls_back_to_repository():
    assert summarize(event("SponsorshipEvent")) == (
        "Sponsorship - octocat/Hello-World", "https://github.com/octocat/Hello-World")


def test_known_type_with_broken_payload_falls_back():
    assert summarize(event("IssuesEvent", {"action": "opened"})) == (
        "Issues - octocat/Hello-World", "https://github.com/octocat/Hello-World")


def test_gollum_event_links_wiki():
    e = event("GollumEvent", {"pages": [{"page_name": "Home", "action": "edited"}]})

    assert summarize(e) == ("Edited wiki of octocat/Hello-World",
                            "https://github.com/octocat/Hello-World/wiki")
