"""Conventional commit message parsing.

Splits a raw commit message into the fields the changelog engine works
with. Pull request merge commits (``Merge pull request #12 from org/branch``)
are recognised and their first body line is parsed as the header instead.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Pattern, Tuple


HEADER_PATTERN = re.compile(r'^(\w*)(?:\((.*)\))?!?: (.*)$')
MERGE_PATTERN = re.compile(r'^Merge pull request #(.*) from (.*)$')
MERGE_CORRESPONDENCE = ('issueId', 'source')
REVERT_PATTERN = re.compile(r'^(?:Revert|revert:)\s"?([\s\S]+?)"?\s*This reverts commit (\w*)\.', re.IGNORECASE)
NOTE_KEYWORDS = ('BREAKING CHANGE', 'BREAKING CHANGES')
REFERENCE_ACTIONS = (
    'close', 'closes', 'closed',
    'fix', 'fixes', 'fixed',
    'resolve', 'resolves', 'resolved',
)
ISSUE_PREFIXES = ('#',)
MENTION_PATTERN = re.compile(r'(?:^|\s)@([\w-]+)')


@dataclass
class ParserOptions:
    """Patterns used when parsing commit messages."""

    header_pattern: Pattern = HEADER_PATTERN
    merge_pattern: Pattern = MERGE_PATTERN
    merge_correspondence: Tuple[str, ...] = MERGE_CORRESPONDENCE
    revert_pattern: Pattern = REVERT_PATTERN
    note_keywords: Tuple[str, ...] = NOTE_KEYWORDS
    reference_actions: Tuple[str, ...] = REFERENCE_ACTIONS
    issue_prefixes: Tuple[str, ...] = ISSUE_PREFIXES


@dataclass
class Note:
    title: str
    text: str


@dataclass
class Reference:
    action: Optional[str]
    issue: str
    raw: str
    prefix: str
    owner: Optional[str] = None
    repository: Optional[str] = None


@dataclass
class ParsedMessage:
    """Fields extracted from a commit message."""

    type: Optional[str] = None
    scope: Optional[str] = None
    subject: Optional[str] = None
    merge: Optional[str] = None
    header: Optional[str] = None
    body: Optional[str] = None
    footer: Optional[str] = None
    notes: List[Note] = field(default_factory=list)
    references: List[Reference] = field(default_factory=list)
    mentions: List[str] = field(default_factory=list)
    revert: Optional[Dict[str, str]] = None
    merge_fields: Dict[str, str] = field(default_factory=dict)


def _notes_pattern(options: ParserOptions) -> Pattern:
    keywords = '|'.join(re.escape(k) for k in sorted(options.note_keywords, key=len, reverse=True))
    return re.compile(rf'^[\s|*]*({keywords})[:\s]+(.*)$')


def _references_pattern(options: ParserOptions) -> Pattern:
    prefixes = '|'.join(re.escape(p) for p in options.issue_prefixes)
    return re.compile(rf'(?:([\w-]*)/([\w.-]+))?({prefixes})(\d+)')


def _action_pattern(options: ParserOptions) -> Pattern:
    actions = '|'.join(re.escape(a) for a in options.reference_actions)
    return re.compile(rf'^\s*({actions})\s+(.*)$', re.IGNORECASE)


def _parse_references(text: str, options: ParserOptions, action: Optional[str] = None) -> List[Reference]:
    references = []
    for match in _references_pattern(options).finditer(text):
        references.append(Reference(
            action=action,
            owner=match.group(1) or None,
            repository=match.group(2) or None,
            prefix=match.group(3),
            issue=match.group(4),
            raw=match.group(0),
        ))
    return references


def _join(lines: List[str]) -> Optional[str]:
    text = '\n'.join(lines).strip()
    return text or None


def parse_commit_message(message: str, options: Optional[ParserOptions] = None) -> ParsedMessage:
    """Parse a raw commit message.

    Args:
        message: Full commit message
        options: Parser patterns, defaults to conventional commits with
            GitHub pull request merges

    Returns:
        Parsed fields; unset fields are None
    """
    options = options or ParserOptions()
    parsed = ParsedMessage()

    lines = message.strip().splitlines()
    if not lines:
        return parsed

    header = lines.pop(0)
    merge_match = options.merge_pattern.match(header)
    if merge_match:
        parsed.merge = header
        parsed.merge_fields = dict(zip(options.merge_correspondence, merge_match.groups()))
        while lines and not lines[0].strip():
            lines.pop(0)
        header = lines.pop(0) if lines else ''

    parsed.header = header or None

    header_match = options.header_pattern.match(header)
    if header_match:
        parsed.type = header_match.group(1) or None
        parsed.scope = header_match.group(2) or None
        parsed.subject = header_match.group(3) or None
    else:
        parsed.subject = header or None

    notes_re = _notes_pattern(options)
    action_re = _action_pattern(options)

    body_lines: List[str] = []
    footer_lines: List[str] = []
    in_footer = False
    current_note: Optional[Note] = None

    for line in lines:
        note_match = notes_re.match(line)
        if note_match:
            in_footer = True
            current_note = Note(title=note_match.group(1), text=note_match.group(2))
            parsed.notes.append(current_note)
            footer_lines.append(line)
            continue

        action_match = action_re.match(line)
        if action_match:
            refs = _parse_references(action_match.group(2), options, action_match.group(1))
            if refs:
                in_footer = True
                current_note = None
                parsed.references.extend(refs)
                footer_lines.append(line)
                continue

        if in_footer:
            footer_lines.append(line)
            if current_note is not None:
                current_note.text = f"{current_note.text}\n{line}" if current_note.text else line
        else:
            body_lines.append(line)

    for note in parsed.notes:
        note.text = note.text.strip()

    parsed.body = _join(body_lines)
    parsed.footer = _join(footer_lines)

    # references without an action, e.g. in the header or body
    seen = {ref.raw for ref in parsed.references}
    for text in (header, parsed.body or ''):
        for ref in _parse_references(text, options):
            if ref.raw not in seen:
                seen.add(ref.raw)
                parsed.references.append(ref)

    parsed.mentions = MENTION_PATTERN.findall(message)

    revert_match = options.revert_pattern.match(message.strip())
    if revert_match:
        parsed.revert = {'header': revert_match.group(1), 'hash': revert_match.group(2)}

    return parsed
