"""GitHub access."""

from .client import GitHubClient, GitHubError, sanitize_log_args
from .event import dump_event_payload, load_event_payload

__all__ = [
    "GitHubClient",
    "GitHubError",
    "sanitize_log_args",
    "dump_event_payload",
    "load_event_payload",
]
