"""Pytest configuration and shared fixtures."""

import logging
import sys
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

# Add changelog_tasks to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

SAMPLE_CHANGELOG = """\
## Unreleased
### Added
- thing

## [1.0.0] / 2020-01-01
### Added
- initial release
"""

LINKED_CHANGELOG = """\
# Changelog

## Unreleased
- thing

## [1.0.0] / 2020-02-01
- second

## [0.1.0] / 2020-01-01
- first

[Unreleased]: https://github.com/acme/widget/compare/1.0.0...HEAD
[1.0.0]: https://github.com/acme/widget/compare/0.1.0...1.0.0
[0.1.0]: https://github.com/acme/widget/tree/0.1.0
"""


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Undo setup_logging() so caplog sees records in every test."""
    yield
    logger = logging.getLogger("changelog_tasks")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def write_changelog(tmp_path: Path) -> Callable[[str], Path]:
    """Write changelog text to a temporary CHANGELOG.md and return its path."""

    def _write(content: str, name: str = "CHANGELOG.md") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_changelog(write_changelog: Callable[[str], Path]) -> Path:
    """CHANGELOG.md with an Unreleased draft and a 1.0.0 release."""
    return write_changelog(SAMPLE_CHANGELOG)


@pytest.fixture
def linked_changelog(write_changelog: Callable[[str], Path]) -> Path:
    """CHANGELOG.md with three sections and a trailing comparison-link block."""
    return write_changelog(LINKED_CHANGELOG)
