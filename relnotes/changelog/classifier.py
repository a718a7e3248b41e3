"""Group commit records into changelog sections and collect contributors."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple, Union

from .models import CommitRecord, Contributor, PullRequestRef
from .taxonomy import COMMIT_TYPES, CommitType, SHORT_SHA_LENGTH, is_known_type


@dataclass(frozen=True)
class PlainEntry:
    """Entry for a commit without a recognised conventional type."""

    short_sha: str
    header: str
    author: str
    pull_requests: Tuple[PullRequestRef, ...] = ()


@dataclass(frozen=True)
class TypedEntry:
    """Entry for a commit with a recognised conventional type."""

    scope: Optional[str]
    subject: str
    author: str
    commit_url: str
    pull_requests: Tuple[PullRequestRef, ...] = ()


Entry = Union[PlainEntry, TypedEntry]


@dataclass
class ClassifiedChangelog:
    """Buckets of entries ready to be rendered.

    Attributes:
        breaking: Entries of breaking commits, in input order
        sections: Non-empty type sections, in taxonomy order
        commits: Entries of commits without a known type
        contributors: Roster deduplicated by login, in first-seen order
    """

    breaking: List[Entry] = field(default_factory=list)
    sections: List[Tuple[CommitType, List[Entry]]] = field(default_factory=list)
    commits: List[Entry] = field(default_factory=list)
    contributors: List[Contributor] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.breaking or self.sections or self.commits or self.contributors)


def make_entry(record: CommitRecord) -> Entry:
    """Pick the entry variant for a record."""
    source = record.source_commit
    identity = source.identity
    author = source.author_name or ''
    if not author and identity is not None:
        author = identity.display_name or identity.login
    pull_requests = tuple(record.associated_pull_requests)

    if is_known_type(record.category):
        return TypedEntry(
            scope=record.scope or None,
            subject=record.subject or '',
            author=author,
            commit_url=record.source_commit.html_url,
            pull_requests=pull_requests,
        )

    return PlainEntry(
        short_sha=record.source_commit.sha[:SHORT_SHA_LENGTH],
        header=record.header or '',
        author=author,
        pull_requests=pull_requests,
    )


def collect_contributors(records: Iterable[CommitRecord],
                         logger: Optional[logging.Logger] = None) -> List[Contributor]:
    """Build the contributor roster from commit authorship.

    The author is preferred, the committer used when there is no author.
    Records with neither are skipped. A contributor is added only when no
    roster entry has the same login.
    """
    logger = logger or logging.getLogger(__name__)

    contributors: List[Contributor] = []
    seen = set()
    for record in records:
        identity = record.source_commit.identity
        if identity is None:
            logger.debug(f"No author or committer for commit {record.source_commit.sha}, skipping")
            continue

        if identity.login in seen:
            continue

        seen.add(identity.login)
        contributors.append(Contributor.from_identity(identity))

    return contributors


def classify(records: Iterable[CommitRecord],
             logger: Optional[logging.Logger] = None) -> ClassifiedChangelog:
    """Assign every record to its changelog buckets.

    Args:
        records: Commit records in the order they should be listed
        logger: Logger instance

    Returns:
        The classified changelog
    """
    logger = logger or logging.getLogger(__name__)
    records = list(records)

    classified = ClassifiedChangelog()
    by_type = {commit_type.key: [] for commit_type in COMMIT_TYPES}

    for record in records:
        entry = make_entry(record)

        if record.breaking_change:
            classified.breaking.append(entry)

        if isinstance(entry, TypedEntry):
            by_type[record.category].append(entry)
        else:
            if record.category:
                logger.debug(f"Unknown commit type '{record.category}' for {record.source_commit.sha}")
            classified.commits.append(entry)

    classified.sections = [
        (commit_type, by_type[commit_type.key])
        for commit_type in COMMIT_TYPES
        if by_type[commit_type.key]
    ]
    classified.contributors = collect_contributors(records, logger)

    logger.debug(
        f"Classified {len(records)} commits: {len(classified.breaking)} breaking, "
        f"{len(classified.sections)} type sections, {len(classified.commits)} uncategorized, "
        f"{len(classified.contributors)} contributors"
    )
    return classified
