"""Commit message parsing and record building."""

from .parser import ParsedMessage, ParserOptions, parse_commit_message
from .records import build_record, build_source_commit
from .utils import get_short_sha, is_breaking_change, parse_git_tag

__all__ = [
    "ParsedMessage",
    "ParserOptions",
    "parse_commit_message",
    "build_record",
    "build_source_commit",
    "get_short_sha",
    "is_breaking_change",
    "parse_git_tag",
]
