"""
Changelog Reader

Builds release notes and the Changelog aggregate from a changelog file.
Every call re-reads the file; nothing is cached between calls.
"""

from __future__ import annotations

import logging
from pathlib import Path

from changelog_tasks.errors import (
    EmptyChangelogError,
    MultipleDraftSectionsError,
    NoReleasedVersionError,
    SectionNotFoundError,
)
from changelog_tasks.models import Changelog, Draft, Released, ReleaseNotes, Section
from changelog_tasks.sections import scan_sections
from changelog_tasks.textio import read_all_lines
from changelog_tasks.versions import try_parse_version

logger = logging.getLogger(__name__)


def _to_release_notes(lines: list[str], section: Section) -> ReleaseNotes:
    version = try_parse_version(section.caption)
    kind = Draft() if version is None else Released(version)
    return ReleaseNotes(
        kind=kind,
        caption=section.caption,
        lines=tuple(section.body(lines)),
        start_index=section.start_index,
        end_index=section.end_index,
    )


def read_release_notes_from_lines(
    lines: list[str], path: str | None = None
) -> list[ReleaseNotes]:
    """
    Turn a changelog buffer into release notes, one per section.

    Sections whose caption parses as a version are Released; all others
    are Draft.

    Raises:
        EmptyChangelogError: If the buffer has no release sections.
    """
    sections = list(scan_sections(lines))
    if not sections:
        raise EmptyChangelogError(path)
    return [_to_release_notes(lines, section) for section in sections]


def read_release_notes(path: str | Path) -> list[ReleaseNotes]:
    """Read release notes for every section of a changelog file."""
    return read_release_notes_from_lines(read_all_lines(path), path=str(path))


def read_changelog(path: str | Path) -> Changelog:
    """
    Read a changelog file into a Changelog.

    Raises:
        EmptyChangelogError: No release sections.
        MultipleDraftSectionsError: More than one draft section.
        NoReleasedVersionError: No draft and no released section.
    """
    release_notes = read_release_notes(path)
    drafts = [notes for notes in release_notes if notes.unreleased]
    released = tuple(notes for notes in release_notes if not notes.unreleased)

    if len(drafts) > 1:
        raise MultipleDraftSectionsError([notes.caption for notes in drafts])
    if not drafts and not released:
        raise NoReleasedVersionError()

    unreleased = drafts[0] if drafts else None
    logger.debug(
        f"Read {path}: draft={unreleased.caption if unreleased else None}, "
        f"released={len(released)}"
    )
    return Changelog(path=Path(path), unreleased=unreleased, release_notes=released)


def find_section(sections: list[Section], tag: str | None = None) -> Section:
    """
    Pick a section by caption, or the first one with content.

    Args:
        sections: Scanned sections.
        tag: Caption to match case-insensitively. None selects the first
            non-empty section.

    Raises:
        SectionNotFoundError: If nothing matches.
    """
    for section in sections:
        if tag is None:
            if not section.is_empty:
                return section
        elif section.caption.casefold() == tag.casefold():
            return section
    raise SectionNotFoundError(tag)


def extract_section_notes(path: str | Path, tag: str | None = None) -> list[str]:
    """
    Extract the body lines of one section.

    Args:
        path: Changelog file.
        tag: Section caption (case-insensitive). Defaults to the first
            section that has content.

    Returns:
        The section's body lines, header excluded.
    """
    lines = read_all_lines(path)
    section = find_section(list(scan_sections(lines)), tag)
    return section.body(lines)
