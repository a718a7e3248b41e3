import pytest

from relnotes.changelog.models import CommitRecord, Identity, PullRequestRef, SourceCommit


def build(sha="abcdef1234567", category=None, scope=None, subject=None, header=None,
          breaking=False, author="ada", author_name="Ada", committer=None, prs=()):
    """Build a commit record with sensible defaults."""
    author_identity = None
    if author is not None:
        author_identity = Identity(
            login=author,
            display_name=author_name,
            url=f"https://github.com/{author}",
            avatar_url=f"https://avatars.githubusercontent.com/{author}",
        )
    committer_identity = None
    if committer is not None:
        committer_identity = Identity(
            login=committer,
            url=f"https://github.com/{committer}",
            avatar_url=f"https://avatars.githubusercontent.com/{committer}",
        )

    return CommitRecord(
        category=category,
        scope=scope,
        subject=subject,
        header=header or (f"{category}: {subject}" if category else subject),
        breaking_change=breaking,
        associated_pull_requests=[PullRequestRef(number=n, url=u) for n, u in prs],
        source_commit=SourceCommit(
            sha=sha,
            html_url=f"https://github.com/owner/repo/commit/{sha}",
            author=author_identity,
            committer=committer_identity,
        ),
    )


@pytest.fixture
def make_record():
    return build


@pytest.fixture
def raw_github_commit():
    """A commit item as returned by the GitHub compare API."""
    return {
        "sha": "0123456789abcdef",
        "html_url": "https://github.com/owner/repo/commit/0123456789abcdef",
        "commit": {
            "message": "feat(api): add health endpoint\n\nExposes /healthz.\n\nCloses #7",
            "author": {"name": "Ada Lovelace", "email": "ada@example.com", "date": "2024-05-01T10:00:00Z"},
            "committer": {"name": "GitHub", "email": "noreply@github.com", "date": "2024-05-01T11:00:00Z"},
        },
        "author": {
            "login": "ada",
            "html_url": "https://github.com/ada",
            "avatar_url": "https://avatars.githubusercontent.com/u/1",
        },
        "committer": {
            "login": "web-flow",
            "html_url": "https://github.com/web-flow",
            "avatar_url": "https://avatars.githubusercontent.com/u/2",
        },
    }
