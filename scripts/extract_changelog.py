#!/usr/bin/env python3
"""Extract a version's release notes from CHANGELOG.md.

Usage:
    python scripts/extract_changelog.py [<version>]

Prints the section body to stdout. Without a version, prints the first
section that has content (the draft, or the latest release when the draft
is empty). Exits with code 1 if the version is not found.
"""

import sys
from pathlib import Path

from changelog_tasks.errors import ChangelogError
from changelog_tasks.reader import extract_section_notes

CHANGELOG_PATH = Path(__file__).parent.parent / "CHANGELOG.md"


def extract_changelog(
    version: str | None = None, changelog_path: Path = CHANGELOG_PATH
) -> str:
    """Extract release notes for the given version.

    Raises:
        SectionNotFoundError: If the version is not found in the changelog.
    """
    return "\n".join(extract_section_notes(changelog_path, version)).strip()


def main() -> None:
    if len(sys.argv) > 2:
        print("Usage: extract_changelog.py [<version>]", file=sys.stderr)
        sys.exit(1)
    version = sys.argv[1] if len(sys.argv) == 2 else None
    try:
        print(extract_changelog(version))
    except ChangelogError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
