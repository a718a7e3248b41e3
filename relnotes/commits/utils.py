"""Small helpers for commit metadata."""

import logging
import re
from typing import Optional

from ..changelog.taxonomy import SHORT_SHA_LENGTH


BREAKING_CHANGE_RE = re.compile(r'^BREAKING\s+CHANGES?:\s+')
TAG_REF_RE = re.compile(r'^(refs/)?tags/(.*)$')

logger = logging.getLogger(__name__)


def get_short_sha(sha: str) -> str:
    """Return the abbreviated form of a commit hash."""
    return sha[:SHORT_SHA_LENGTH]


def is_breaking_change(body: Optional[str], footer: Optional[str]) -> bool:
    """Check if the commit body or footer starts with a breaking change marker.

    The match is case sensitive and anchored at the start of the field.
    """
    return bool(BREAKING_CHANGE_RE.match(body or '') or BREAKING_CHANGE_RE.match(footer or ''))


def parse_git_tag(ref: str) -> str:
    """Extract the tag name from a git ref.

    Args:
        ref: Git ref such as ``refs/tags/v1.0.0`` or ``tags/v1.0.0``

    Returns:
        Tag name or empty string if ref is not a tag
    """
    match = TAG_REF_RE.match(ref)
    if not match or not match.group(2):
        logger.debug(f'Input "{ref}" does not appear to be a tag')
        return ''
    return match.group(2)
