"""GitHub REST client used to collect the commits of a release."""

import json
import logging
from typing import Any, Dict, List, Optional

import requests

from ..changelog.models import CommitRecord
from ..commits import ParserOptions, build_record, get_short_sha
from ..config import Config


REMOVED_PAYLOAD = '== raw file buffer info removed =='
PER_PAGE = 100


class GitHubError(Exception):
    """Raised when a GitHub API request fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def sanitize_log_args(*args: Any) -> str:
    """Render request arguments for debug logging without raw payloads."""
    parts = []
    for arg in args:
        if isinstance(arg, str):
            parts.append(arg)
            continue

        arg_copy = dict(arg)
        if arg_copy.get('file'):
            arg_copy['file'] = REMOVED_PAYLOAD
        if arg_copy.get('data'):
            arg_copy['data'] = REMOVED_PAYLOAD
        parts.append(json.dumps(arg_copy, default=str))

    return ''.join(f" {part}" for part in parts)


class GitHubClient:
    """Thin wrapper around the GitHub REST API."""

    def __init__(self, config: Config, logger: Optional[logging.Logger] = None,
                 session: Optional[requests.Session] = None):
        """Initialize GitHub client.

        Args:
            config: Configuration object containing GitHub settings
            logger: Logger instance
            session: Optional requests session, mostly for tests
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)

        self.session = session or requests.Session()
        self.session.headers.update({
            'Accept': 'application/vnd.github+json',
            'X-GitHub-Api-Version': '2022-11-28',
        })
        if config.github_token:
            self.session.headers['Authorization'] = f"Bearer {config.github_token}"

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.config.github_api_url}{path}"
        self.logger.debug(f"GET{sanitize_log_args(url, params or {})}")

        try:
            response = self.session.get(url, params=params, timeout=300)
        except requests.RequestException as e:
            raise GitHubError(f"Request to {url} failed: {e}") from e

        if response.status_code >= 400:
            raise GitHubError(
                f"GET {url} returned {response.status_code}: {response.text}",
                status_code=response.status_code,
            )
        return response.json()

    def compare_commits(self, repository: str, base: str, head: str) -> List[Dict[str, Any]]:
        """List commits between two refs.

        Args:
            repository: Repository as ``owner/name``
            base: Base ref (older)
            head: Head ref (newer)

        Returns:
            Commit items from the compare API, oldest first

        Raises:
            GitHubError: If the comparison cannot be fetched
        """
        commits: List[Dict[str, Any]] = []
        page = 1
        while True:
            data = self._get(
                f"/repos/{repository}/compare/{base}...{head}",
                params={'per_page': PER_PAGE, 'page': page},
            )
            batch = data.get('commits') or []
            commits.extend(batch)

            if len(batch) < PER_PAGE or len(commits) >= data.get('total_commits', 0):
                break
            page += 1

        self.logger.info(f"Found {len(commits)} commits between {base} and {head}")
        return commits

    def list_pull_requests_for_commit(self, repository: str, sha: str) -> List[Dict[str, Any]]:
        """List pull requests associated with a commit.

        Args:
            repository: Repository as ``owner/name``
            sha: Commit hash

        Returns:
            List of ``{'number': ..., 'url': ...}``, empty if the lookup fails
        """
        self.logger.debug(f"Looking up pull requests for commit {get_short_sha(sha)}")
        try:
            pulls = self._get(f"/repos/{repository}/commits/{sha}/pulls")
        except GitHubError as e:
            self.logger.warning(f"Error getting pull requests for commit {sha}: {e}")
            return []

        return [{'number': pr['number'], 'url': pr['html_url']} for pr in pulls]

    def collect_records(self, repository: str, base: str, head: str,
                        options: Optional[ParserOptions] = None) -> List[CommitRecord]:
        """Fetch and parse the commits between two refs.

        Args:
            repository: Repository as ``owner/name``
            base: Base ref
            head: Head ref
            options: Commit message parser options

        Returns:
            Commit records, oldest first
        """
        records = []
        for raw_commit in self.compare_commits(repository, base, head):
            pull_requests = self.list_pull_requests_for_commit(repository, raw_commit['sha'])
            records.append(build_record(raw_commit, pull_requests, options))

        return records
