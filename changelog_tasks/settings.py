"""
Changelog Tasks Settings

Settings are read from .changelog-tasks.json in the working directory and
may be overridden by environment variables.

Priority (highest to lowest):
1. Environment (CHANGELOG_TASKS_FILE, CHANGELOG_TASKS_REMOTE)
2. Project settings (./.changelog-tasks.json)
3. Defaults

Example .changelog-tasks.json:
    {
        "changelogPath": "docs/CHANGELOG.md",
        "hostedEndpoints": ["github.com", "github.example.com"],
        "remote": "upstream"
    }
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from changelog_tasks.config import (
    DEFAULT_CHANGELOG_FILE,
    DEFAULT_HOSTED_ENDPOINTS,
    DEFAULT_REMOTE,
    ENV_CHANGELOG_FILE,
    ENV_REMOTE,
    SETTINGS_FILE_NAME,
)

logger = logging.getLogger(__name__)


def load_settings(path: Path) -> dict[str, Any]:
    """
    Load settings from a JSON file.

    Args:
        path: Path to the settings file.

    Returns:
        Parsed settings dict, or empty dict if file doesn't exist or is invalid.
    """
    if not path.exists():
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
            if isinstance(data, dict):
                return dict(data)
            return {}
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Failed to load settings from {path}: {e}")
        return {}


@dataclass
class ChangelogSettings:
    """Where the changelog lives and how comparison links are built."""

    changelog_path: Path = field(default_factory=lambda: Path(DEFAULT_CHANGELOG_FILE))
    hosted_endpoints: frozenset[str] = field(
        default_factory=lambda: DEFAULT_HOSTED_ENDPOINTS
    )
    remote: str = DEFAULT_REMOTE

    @classmethod
    def load(cls, project_path: Path | None = None) -> "ChangelogSettings":
        """
        Load settings from the project file and environment.

        Args:
            project_path: Settings file (default: ./.changelog-tasks.json).
                A relative changelogPath is resolved against its directory.
        """
        if project_path is None:
            project_path = Path.cwd() / SETTINGS_FILE_NAME

        data = load_settings(project_path)
        if data:
            logger.debug(f"Loaded project settings from {project_path}")

        changelog_path = Path(data.get("changelogPath", DEFAULT_CHANGELOG_FILE))
        if data and not changelog_path.is_absolute():
            changelog_path = project_path.parent / changelog_path

        endpoints = data.get("hostedEndpoints")
        hosted_endpoints = (
            frozenset(str(e).lower() for e in endpoints)
            if isinstance(endpoints, list)
            else DEFAULT_HOSTED_ENDPOINTS
        )
        remote = str(data.get("remote", DEFAULT_REMOTE))

        env_file = os.environ.get(ENV_CHANGELOG_FILE)
        if env_file:
            changelog_path = Path(os.path.expanduser(os.path.expandvars(env_file)))
        env_remote = os.environ.get(ENV_REMOTE)
        if env_remote:
            remote = env_remote

        return cls(
            changelog_path=changelog_path,
            hosted_endpoints=hosted_endpoints,
            remote=remote,
        )
