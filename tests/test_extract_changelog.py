"""Tests for scripts/extract_changelog.py."""

import os
import subprocess
import sys
from pathlib import Path

import pytest

from changelog_tasks.errors import SectionNotFoundError

ROOT_DIR = Path(__file__).parent.parent
SCRIPTS_DIR = ROOT_DIR / "scripts"

# Import the module under test with guaranteed sys.path cleanup
_scripts_path = str(SCRIPTS_DIR)
try:
    sys.path.insert(0, _scripts_path)
    from extract_changelog import CHANGELOG_PATH, extract_changelog  # noqa: E402
finally:
    if _scripts_path in sys.path:
        sys.path.remove(_scripts_path)


class TestExtractChangelog:
    """Unit tests for the extract_changelog function."""

    def test_extract_existing_version(self, sample_changelog):
        """Extracting an existing version returns its body."""
        result = extract_changelog("1.0.0", changelog_path=sample_changelog)
        assert result == "### Added\n- initial release"

    def test_extract_default_is_draft(self, sample_changelog):
        """Without a version the draft is extracted."""
        assert extract_changelog(changelog_path=sample_changelog) == "### Added\n- thing"

    def test_extract_stops_at_next_version(self, linked_changelog):
        """Extracted notes do NOT bleed into the next section."""
        result = extract_changelog("1.0.0", changelog_path=linked_changelog)
        assert result == "- second"

    def test_extract_nonexistent_version(self, sample_changelog):
        """Nonexistent version raises SectionNotFoundError."""
        with pytest.raises(SectionNotFoundError, match="99.99.99"):
            extract_changelog("99.99.99", changelog_path=sample_changelog)

    def test_project_changelog(self):
        """The project's own changelog has notes for its latest release."""
        assert CHANGELOG_PATH == ROOT_DIR / "CHANGELOG.md"
        result = extract_changelog()
        assert result.startswith("### Added")


class TestExtractChangelogCLI:
    """Integration tests for the CLI entry point."""

    SCRIPT = str(SCRIPTS_DIR / "extract_changelog.py")

    def _run(self, *args: str) -> subprocess.CompletedProcess[str]:
        env = os.environ.copy()
        env["PYTHONPATH"] = os.pathsep.join(
            p for p in [str(ROOT_DIR), env.get("PYTHONPATH")] if p
        )
        return subprocess.run(
            [sys.executable, self.SCRIPT, *args],
            capture_output=True,
            text=True,
            timeout=10,
            env=env,
        )

    def test_cli_success(self):
        """CLI prints the release notes to stdout."""
        result = self._run("0.1.0")
        assert result.returncode == 0
        assert "### Added" in result.stdout

    def test_cli_missing_version(self):
        """CLI exits with code 1 for a missing version."""
        result = self._run("99.99.99")
        assert result.returncode == 1
        assert "ERROR" in result.stderr

    def test_cli_too_many_args(self):
        """CLI exits with code 1 when given more than one version."""
        result = self._run("0.1.0", "0.2.0")
        assert result.returncode == 1
        assert "Usage" in result.stderr
