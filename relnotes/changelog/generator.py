"""Changelog generation entry point."""

import logging
from typing import Iterable, Optional

from .classifier import classify
from .models import CommitRecord
from .renderer import STYLE_LIST, render_changelog


def generate_changelog(records: Iterable[CommitRecord],
                       contributors_style: str = STYLE_LIST,
                       logger: Optional[logging.Logger] = None) -> str:
    """Generate the changelog for a sequence of commit records.

    Args:
        records: Parsed commit records, oldest first
        contributors_style: ``list`` or ``table``
        logger: Logger instance passed down to classification and rendering

    Returns:
        Markdown changelog, empty for empty input
    """
    logger = logger or logging.getLogger(__name__)

    classified = classify(records, logger)
    return render_changelog(classified, contributors_style, logger)
