"""Conventional commit types and the section titles they render under."""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class CommitType:
    """A conventional commit type and its changelog section title."""

    key: str
    label: str


# Declaration order is the order sections appear in the changelog
COMMIT_TYPES: Tuple[CommitType, ...] = (
    CommitType("feat", "✨ Features"),
    CommitType("fix", "🐛 Bug Fixes"),
    CommitType("docs", "📝 Documentation"),
    CommitType("style", "🎨 Styles"),
    CommitType("refactor", "♻️ Code Refactoring"),
    CommitType("perf", "🚀 Performance Improvements"),
    CommitType("test", "✅ Tests"),
    CommitType("build", "👷 Builds"),
    CommitType("ci", "💚 Continuous Integration"),
    CommitType("chore", "🔨 Chores"),
    CommitType("revert", "⏪️ Reverts"),
)

BREAKING_TITLE = "💥💥 Breaking Changes 💥💥"
COMMITS_TITLE = "Commits"
CONTRIBUTORS_TITLE = "Contributors"

SHORT_SHA_LENGTH = 7
TABLE_COLUMNS = 5

_TYPES_BY_KEY = {commit_type.key: commit_type for commit_type in COMMIT_TYPES}


def is_known_type(key: Optional[str]) -> bool:
    """Check whether key names one of the conventional commit types."""
    return key is not None and key in _TYPES_BY_KEY

