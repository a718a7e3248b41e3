"""Commit records consumed by the changelog engine."""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Identity(BaseModel):
    """A GitHub user attached to a commit as author or committer."""

    model_config = ConfigDict(populate_by_name=True)

    login: str
    display_name: Optional[str] = Field(default=None, alias="name")
    url: Optional[str] = Field(default=None, alias="html_url")
    avatar_url: Optional[str] = None


class PullRequestRef(BaseModel):
    """A pull request associated with a commit."""

    number: int
    url: str


class SourceCommit(BaseModel):
    """The underlying commit metadata a record was built from."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    sha: str
    html_url: str = ""
    author_name: Optional[str] = None
    author: Optional[Identity] = None
    committer: Optional[Identity] = None
    timestamp: Optional[datetime] = None

    @property
    def identity(self) -> Optional[Identity]:
        """Author identity, falling back to the committer."""
        return self.author if self.author is not None else self.committer


class CommitRecord(BaseModel):
    """A commit annotated with its conventional commit fields."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    category: Optional[str] = Field(default=None, alias="type")
    scope: Optional[str] = None
    subject: Optional[str] = None
    header: Optional[str] = None
    body: Optional[str] = None
    footer: Optional[str] = None
    breaking_change: bool = False
    associated_pull_requests: List[PullRequestRef] = Field(default_factory=list)
    source_commit: SourceCommit


@dataclass(frozen=True)
class Contributor:
    """A commit author listed in the contributors section."""

    login: str
    display_name: Optional[str] = None
    url: Optional[str] = None
    avatar_url: Optional[str] = None

    @classmethod
    def from_identity(cls, identity: Identity) -> "Contributor":
        return cls(
            login=identity.login,
            display_name=identity.display_name,
            url=identity.url,
            avatar_url=identity.avatar_url,
        )
