"""
Git Repository Reference

Identifies a hosted repository from its remote URL and provides the base
URL used to build comparison links. Supported remote forms:

- https://github.com/owner/repo(.git)
- git@github.com:owner/repo(.git)
- ssh://git@github.com/owner/repo(.git)
"""

from __future__ import annotations

import logging
import re
import subprocess
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from changelog_tasks.config import (
    DEFAULT_HOSTED_ENDPOINTS,
    DEFAULT_REMOTE,
    GIT_COMMAND_TIMEOUT,
)
from changelog_tasks.errors import RepositoryUrlError

logger = logging.getLogger(__name__)

# Order matters: scp-like syntax has no scheme and must be tried last
_HOST = r"(?:[^@/]+@)?(?P<endpoint>[^/:]+)"
_PATH_SUFFIX = r"(?:\.git)?/?$"
_URL_PATTERNS: list[re.Pattern[str]] = [
    re.compile(rf"^https?://{_HOST}(?::\d+)?/(?P<identifier>.+?){_PATH_SUFFIX}"),
    re.compile(rf"^ssh://{_HOST}(?::\d+)?/(?P<identifier>.+?){_PATH_SUFFIX}"),
    re.compile(rf"^{_HOST}:(?P<identifier>[^/].*?){_PATH_SUFFIX}"),
]


@dataclass
class GitRepository:
    """A repository on a (possibly) hosted git platform."""

    endpoint: str
    identifier: str
    hosted_endpoints: frozenset[str] = field(default=DEFAULT_HOSTED_ENDPOINTS)

    @classmethod
    def from_url(
        cls, url: str, hosted_endpoints: Iterable[str] | None = None
    ) -> "GitRepository":
        """
        Parse a remote URL.

        Args:
            url: Remote URL in https, ssh or scp-like form.
            hosted_endpoints: Hosts treated as recognized platforms
                (default: github.com).

        Raises:
            RepositoryUrlError: If the URL is not in a supported form.
        """
        url = url.strip()
        for pattern in _URL_PATTERNS:
            match = pattern.match(url)
            if match:
                return cls(
                    endpoint=match.group("endpoint").lower(),
                    identifier=match.group("identifier"),
                    hosted_endpoints=(
                        frozenset(hosted_endpoints)
                        if hosted_endpoints is not None
                        else DEFAULT_HOSTED_ENDPOINTS
                    ),
                )
        raise RepositoryUrlError(f"Unsupported repository URL: '{url}'")

    @classmethod
    def from_local_directory(
        cls,
        directory: str | Path = ".",
        remote: str = DEFAULT_REMOTE,
        hosted_endpoints: Iterable[str] | None = None,
    ) -> "GitRepository":
        """
        Build a repository reference from a local clone's remote.

        Raises:
            RepositoryUrlError: If git is missing, times out, or the remote
                does not exist.
        """
        cmd = ["git", "-C", str(directory), "remote", "get-url", remote]
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=GIT_COMMAND_TIMEOUT,
            )
        except FileNotFoundError:
            raise RepositoryUrlError("git is not installed") from None
        except subprocess.TimeoutExpired:
            raise RepositoryUrlError(
                f"git timed out after {GIT_COMMAND_TIMEOUT} seconds"
            ) from None
        if result.returncode != 0:
            raise RepositoryUrlError(
                f"Could not read remote '{remote}' in {directory}: {result.stderr.strip()}"
            )
        url = result.stdout.strip()
        logger.debug(f"Remote '{remote}' of {directory} is {url}")
        return cls.from_url(url, hosted_endpoints)

    @property
    def is_hosted(self) -> bool:
        """Check if links can be built for this repository's platform."""
        return self.endpoint in self.hosted_endpoints

    @property
    def http_url(self) -> str:
        return f"https://{self.endpoint}/{self.identifier}"

    def __str__(self) -> str:
        return self.http_url
