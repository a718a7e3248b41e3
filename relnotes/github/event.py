"""Access to the GitHub Actions event payload."""

import json
import logging
import os
from typing import Any, Dict, Optional


def load_event_payload(path: Optional[str] = None) -> Dict[str, Any]:
    """Read the event payload of the running workflow.

    Args:
        path: Payload file, defaults to ``GITHUB_EVENT_PATH``

    Raises:
        ValueError: If no path is given and ``GITHUB_EVENT_PATH`` is unset,
            or the file cannot be read
    """
    path = path or os.getenv('GITHUB_EVENT_PATH', '')
    if not path:
        raise ValueError("Environment variable GITHUB_EVENT_PATH does not appear to be set.")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ValueError(f"Error loading event payload {path}: {e}")


def dump_event_payload(path: Optional[str] = None, logger: Optional[logging.Logger] = None) -> Dict[str, Any]:
    """Log the event payload at info level and return it."""
    logger = logger or logging.getLogger(__name__)

    payload = load_event_payload(path)
    logger.info(f"GitHub payload: {json.dumps(payload)}")
    return payload
