"""Markdown rendering of classified changelogs."""

import logging
import math
from typing import List, Optional, Sequence

from .classifier import ClassifiedChangelog, Entry, PlainEntry, TypedEntry
from .models import Contributor, PullRequestRef
from .taxonomy import BREAKING_TITLE, COMMITS_TITLE, CONTRIBUTORS_TITLE, TABLE_COLUMNS


STYLE_LIST = "list"
STYLE_TABLE = "table"
CONTRIBUTORS_STYLES = (STYLE_LIST, STYLE_TABLE)

GITHUB_PROFILE_URL = "https://github.com/{login}"


def format_pull_requests(pull_requests: Sequence[PullRequestRef]) -> str:
    """Format pull request links, e.g. ``[#1](u1),[#2](u2)``."""
    return ','.join(f"[#{pr.number}]({pr.url})" for pr in pull_requests)


def format_entry(entry: Entry) -> str:
    """Format a single changelog line.

    Args:
        entry: Plain or typed entry

    Returns:
        Markdown list item
    """
    prs = format_pull_requests(entry.pull_requests)
    prs = f" {prs}" if prs else ''

    if isinstance(entry, TypedEntry):
        scope = f"**{entry.scope}**: " if entry.scope else ''
        return f"- {scope}{entry.subject}{prs} ([{entry.author}]({entry.commit_url}))"

    if isinstance(entry, PlainEntry):
        return f"- {entry.short_sha}: {entry.header} ({entry.author}){prs}"

    raise TypeError(f"Unsupported changelog entry: {entry!r}")


def _profile_url(contributor: Contributor) -> str:
    return contributor.url or GITHUB_PROFILE_URL.format(login=contributor.login)


def _render_list(contributors: Sequence[Contributor]) -> str:
    items = []
    for contributor in contributors:
        items.append(
            '<li class="mb-2 mr-2">'
            f'<a href="{_profile_url(contributor)}" data-hovercard-type="user" '
            f'data-hovercard-url="/users/{contributor.login}/hovercard">'
            f'<img src="{contributor.avatar_url or ""}" size="32" height="32" width="32" '
            f'class="avatar circle" alt="@{contributor.login}" />'
            '</a></li>'
        )
    return '<ul class="list-style-none d-flex flex-wrap mb-n2">\n' + '\n'.join(items) + '\n</ul>'


def _render_table(contributors: Sequence[Contributor], columns: int = TABLE_COLUMNS) -> str:
    rows = math.ceil(len(contributors) / columns)

    lines = ['<table>']
    for row in range(rows):
        cells = []
        for contributor in contributors[row * columns:(row + 1) * columns]:
            name = contributor.display_name or contributor.login
            cells.append(
                '<td align="center">'
                f'<a href="{_profile_url(contributor)}">'
                f'<img src="{contributor.avatar_url or ""}" width="150px;" alt="{contributor.login}"/>'
                f'<br /><sub><b>{name}</b></sub>'
                '</a></td>'
            )
        lines.append('<tr>' + ''.join(cells) + '</tr>')
    lines.append('</table>')
    return '\n'.join(lines)


def render_contributors(contributors: Sequence[Contributor], style: str = STYLE_LIST) -> str:
    """Render the contributor roster as an avatar list or a 5 column table.

    Raises:
        ValueError: If style is not one of ``list`` or ``table``
    """
    if style == STYLE_LIST:
        return _render_list(contributors)
    if style == STYLE_TABLE:
        return _render_table(contributors)
    raise ValueError(f"Unknown contributors style '{style}', expected one of {', '.join(CONTRIBUTORS_STYLES)}")


def _section(title: str, body: str) -> str:
    return f"## {title}\n{body.strip()}"


def _entries_body(entries: Sequence[Entry]) -> str:
    return '\n'.join(format_entry(entry) for entry in entries)


def render_changelog(classified: ClassifiedChangelog,
                     contributors_style: str = STYLE_LIST,
                     logger: Optional[logging.Logger] = None) -> str:
    """Render classified commits into the changelog document.

    Sections appear in the order breaking changes, commit types in taxonomy
    order, uncategorized commits, contributors. Empty sections are omitted.

    Args:
        classified: Output of :func:`relnotes.changelog.classifier.classify`
        contributors_style: ``list`` or ``table``
        logger: Logger instance

    Returns:
        Markdown document, empty when there is nothing to report
    """
    logger = logger or logging.getLogger(__name__)

    sections: List[str] = []

    if classified.breaking:
        sections.append(_section(BREAKING_TITLE, _entries_body(classified.breaking)))

    for commit_type, entries in classified.sections:
        if entries:
            sections.append(_section(commit_type.label, _entries_body(entries)))

    if classified.commits:
        sections.append(_section(COMMITS_TITLE, _entries_body(classified.commits)))

    if classified.contributors:
        sections.append(_section(
            CONTRIBUTORS_TITLE,
            render_contributors(classified.contributors, contributors_style),
        ))

    logger.debug(f"Rendered {len(sections)} changelog sections")
    return '\n\n'.join(sections).strip()
