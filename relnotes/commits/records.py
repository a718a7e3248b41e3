"""Build commit records from GitHub commit data."""

from typing import Any, Dict, List, Optional

from ..changelog.models import CommitRecord, Identity, PullRequestRef, SourceCommit
from .parser import ParserOptions, parse_commit_message
from .utils import is_breaking_change


def _identity(user: Optional[Dict[str, Any]], git_user: Optional[Dict[str, Any]]) -> Optional[Identity]:
    """Combine a GitHub user with the git signature of the same role."""
    if not user or not user.get('login'):
        return None
    return Identity(
        login=user['login'],
        display_name=(git_user or {}).get('name') or None,
        url=user.get('html_url'),
        avatar_url=user.get('avatar_url'),
    )


def build_source_commit(raw_commit: Dict[str, Any]) -> SourceCommit:
    """Convert a commit from the GitHub compare API.

    Args:
        raw_commit: Commit item as returned by ``GET /repos/{repo}/compare/{basehead}``

    Returns:
        Source commit metadata
    """
    git_commit = raw_commit.get('commit') or {}
    git_author = git_commit.get('author')
    git_committer = git_commit.get('committer')

    timestamp = (git_committer or {}).get('date') or (git_author or {}).get('date')

    return SourceCommit(
        sha=raw_commit['sha'],
        html_url=raw_commit.get('html_url') or '',
        author_name=(git_author or {}).get('name') or None,
        author=_identity(raw_commit.get('author'), git_author),
        committer=_identity(raw_commit.get('committer'), git_committer),
        timestamp=timestamp,
    )


def build_record(raw_commit: Dict[str, Any],
                 pull_requests: Optional[List[Dict[str, Any]]] = None,
                 options: Optional[ParserOptions] = None) -> CommitRecord:
    """Parse a GitHub commit into a changelog record.

    Args:
        raw_commit: Commit item from the GitHub compare API
        pull_requests: Pull requests associated with the commit, as
            ``{'number': ..., 'url': ...}`` dictionaries
        options: Commit message parser options

    Returns:
        Commit record
    """
    message = (raw_commit.get('commit') or {}).get('message') or ''
    parsed = parse_commit_message(message, options)

    return CommitRecord(
        category=parsed.type,
        scope=parsed.scope,
        subject=parsed.subject,
        header=parsed.header,
        body=parsed.body,
        footer=parsed.footer,
        breaking_change=is_breaking_change(parsed.body, parsed.footer),
        associated_pull_requests=[
            PullRequestRef(number=pr['number'], url=pr['url']) for pr in pull_requests or []
        ],
        source_commit=build_source_commit(raw_commit),
    )
