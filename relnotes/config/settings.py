"""Configuration management for relnotes."""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..changelog.renderer import CONTRIBUTORS_STYLES, STYLE_LIST


logger = logging.getLogger(__name__)

CONFIG_SEARCH_PATHS = [
    "relnotes.json",
    ".relnotes.json",
    "~/.relnotes.json",
    "~/.config/relnotes/config.json",
]


class Config(BaseSettings):
    """Configuration settings for relnotes."""

    model_config = SettingsConfigDict(env_prefix="RELNOTES_", case_sensitive=False, extra="ignore")

    github_api_url: str = "https://api.github.com"
    github_token: Optional[str] = None
    repository: Optional[str] = None
    contributors_style: str = STYLE_LIST
    config_file: Optional[str] = None

    @field_validator('github_api_url')
    @classmethod
    def normalize_github_api_url(cls, v):
        """Ensure the API URL has a protocol and no trailing slash."""
        if v and not v.startswith(('http://', 'https://')):
            v = f"https://{v}"
        return v.rstrip('/')

    @field_validator('contributors_style')
    @classmethod
    def check_contributors_style(cls, v):
        if v not in CONTRIBUTORS_STYLES:
            raise ValueError(f"contributors_style must be one of {', '.join(CONTRIBUTORS_STYLES)}")
        return v


def load_json_config(config_path: str) -> dict:
    """Load configuration from JSON file.

    Args:
        config_path: Path to JSON configuration file

    Returns:
        Configuration dictionary
    """
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        raise ValueError(f"Error loading config file {config_path}: {e}")


def find_config_file() -> Optional[str]:
    """Find configuration file in common locations.

    Returns:
        Path to config file or None if not found
    """
    for path_str in CONFIG_SEARCH_PATHS:
        path = Path(path_str).expanduser()
        if path.exists() and path.is_file():
            return str(path)

    return None


def get_config(config_file: Optional[str] = None) -> Config:
    """Load configuration from environment variables and/or JSON file.

    Args:
        config_file: Optional path to JSON config file

    Returns:
        Configuration object
    """
    config_data = {}

    json_config_path = config_file or find_config_file()
    if json_config_path:
        try:
            config_data.update(load_json_config(json_config_path))
            config_data['config_file'] = json_config_path
        except ValueError as e:
            # Environment variables still apply
            logger.warning(str(e))

    # Environment variables override JSON config
    env_config = {
        'github_api_url': os.getenv('RELNOTES_GITHUB_API_URL'),
        'github_token': os.getenv('RELNOTES_GITHUB_TOKEN') or os.getenv('GITHUB_TOKEN'),
        'repository': os.getenv('RELNOTES_REPOSITORY') or os.getenv('GITHUB_REPOSITORY'),
        'contributors_style': os.getenv('RELNOTES_CONTRIBUTORS_STYLE'),
    }

    env_config = {k: v for k, v in env_config.items() if v is not None}
    config_data.update(env_config)

    return Config(**config_data)


def create_sample_config(path: str = "relnotes.json") -> None:
    """Create a sample configuration file.

    Args:
        path: Path where to create the sample config file
    """
    sample_config = {
        "github_api_url": "https://api.github.com",
        "github_token": "your-github-token-here",
        "repository": "owner/repository",
        "contributors_style": "list",
    }

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(sample_config, f, indent=2)
