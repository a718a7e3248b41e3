"""Changelog classification and rendering."""

from .classifier import (
    ClassifiedChangelog,
    PlainEntry,
    TypedEntry,
    classify,
    collect_contributors,
    make_entry,
)
from .generator import generate_changelog
from .models import CommitRecord, Contributor, Identity, PullRequestRef, SourceCommit
from .renderer import (
    CONTRIBUTORS_STYLES,
    format_entry,
    format_pull_requests,
    render_changelog,
    render_contributors,
)
from .taxonomy import COMMIT_TYPES, CommitType

__all__ = [
    "ClassifiedChangelog",
    "PlainEntry",
    "TypedEntry",
    "classify",
    "collect_contributors",
    "make_entry",
    "generate_changelog",
    "CommitRecord",
    "Contributor",
    "Identity",
    "PullRequestRef",
    "SourceCommit",
    "CONTRIBUTORS_STYLES",
    "format_entry",
    "format_pull_requests",
    "render_changelog",
    "render_contributors",
    "COMMIT_TYPES",
    "CommitType",
]
