"""
Changelog Finalizer

Promotes the draft section of a changelog into a dated release:

    ## Unreleased                ## Unreleased
    ### Added           ->
    - thing                      ## [1.1.0] / 2024-05-01
                                 ### Added
                                 - thing

The draft header stays on top (now empty) and the new release header takes
over the draft's content. All preconditions are checked before the file is
written, and the output is always a new list built from the lines read.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

from packaging.version import Version

from changelog_tasks.config import (
    COMPARE_HEAD_LINK_TEMPLATE,
    COMPARE_LINK_TEMPLATE,
    DATE_FORMAT,
    RELEASE_HEADER_TEMPLATE,
    TREE_LINK_TEMPLATE,
)
from changelog_tasks.errors import (
    DuplicateTagError,
    EmptyChangelogError,
    EmptyDraftError,
    NoDraftSectionError,
    VersionOrderError,
)
from changelog_tasks.models import Changelog, Section
from changelog_tasks.repository import GitRepository
from changelog_tasks.sections import scan_sections
from changelog_tasks.textio import read_all_lines, write_all_lines
from changelog_tasks.versions import is_newer, parse_version

logger = logging.getLogger(__name__)


def _display_path(path: str | Path) -> str:
    """Path relative to the working directory when it lies below it."""
    try:
        return str(Path(path).resolve().relative_to(Path.cwd().resolve()))
    except ValueError:
        return str(path)


def format_release_header(tag: str | Version, release_date: date | None = None) -> str:
    """Build the header line for a new release, dated today by default."""
    release_date = release_date or date.today()
    return RELEASE_HEADER_TEMPLATE.format(
        tag=tag, date=release_date.strftime(DATE_FORMAT)
    )


def insert_release_header(lines: list[str], draft_start: int, header: str) -> list[str]:
    """Return a copy of ``lines`` with a blank line and ``header`` after the draft head."""
    return [*lines[: draft_start + 1], "", header, *lines[draft_start + 1 :]]


def with_trailing_blank_line(lines: list[str]) -> list[str]:
    """Return a copy of ``lines`` ending in exactly one blank line."""
    end = len(lines)
    while end > 0 and not lines[end - 1].strip():
        end -= 1
    return [*lines[:end], ""]


def build_link_block(sections: list[Section], tag: str, base: str) -> list[str]:
    """
    Build the comparison-link reference definitions, newest section first.

    The newest section compares ``tag`` against HEAD, every middle section
    compares against the next older one, and the oldest links to its tree.
    """
    first, last = sections[0], sections[-1]
    links = [COMPARE_HEAD_LINK_TEMPLATE.format(caption=first.caption, base=base, tag=tag)]
    for current, previous in zip(sections[1:-1], sections[2:]):
        links.append(
            COMPARE_LINK_TEMPLATE.format(
                caption=current.caption, base=base, previous=previous.caption
            )
        )
    links.append(TREE_LINK_TEMPLATE.format(caption=last.caption, base=base))
    return links


def rewrite_links(lines: list[str], tag: str, base: str) -> list[str]:
    """Replace everything after the last section with a fresh link block."""
    sections = list(scan_sections(lines))
    last = sections[-1]
    return [*lines[: last.end_index + 1], "", *build_link_block(sections, tag, base)]


def finalize_changelog(
    changelog: Changelog,
    tag: str | Version,
    release_date: date | None = None,
) -> None:
    """
    Promote the draft of a read Changelog to release ``tag``.

    Args:
        changelog: Result of ``read_changelog``.
        tag: Version being released.
        release_date: Date for the header (default: today).

    Raises:
        InvalidVersionError: ``tag`` is not a version.
        NoDraftSectionError: The changelog has no draft section.
        DuplicateTagError: ``tag`` is already released.
        VersionOrderError: ``tag`` is not newer than the latest release.
    """
    tag = parse_version(tag)
    logger.info(f"Finalizing {_display_path(changelog.path)} for '{tag}'...")

    draft = changelog.unreleased
    if draft is None:
        raise NoDraftSectionError()
    if any(notes.version == tag for notes in changelog.release_notes):
        raise DuplicateTagError(str(tag))
    latest = changelog.latest_version
    if latest is not None and not tag > latest:
        raise VersionOrderError(str(tag), str(latest))

    lines = read_all_lines(changelog.path)
    header = format_release_header(tag, release_date)
    updated = insert_release_header(lines, draft.start_index, header)

    write_all_lines(changelog.path, with_trailing_blank_line(updated))
    logger.info(f"Released '{draft.caption}' as {tag}")


def finalize_changelog_file(
    path: str | Path,
    tag: str,
    repository: GitRepository | None = None,
    release_date: date | None = None,
) -> None:
    """
    Promote the first section of a changelog file to release ``tag``.

    The first section is the draft when its caption is a plain word such as
    "Unreleased". When ``repository`` is on a hosted platform, the trailing
    link block is rebuilt for all sections.

    Args:
        path: Changelog file.
        tag: Tag being released, used verbatim in the header and links.
        repository: Optional repository reference for comparison links.
        release_date: Date for the header (default: today).

    Raises:
        EmptyChangelogError: No release sections.
        NoDraftSectionError: The first section is not a draft.
        DuplicateTagError: A section is already captioned ``tag``.
        EmptyDraftError: The draft has no content.
        VersionOrderError: ``tag`` is not newer than the previous section.
        InvalidVersionError: ``tag`` or the previous caption is not a version.
    """
    logger.info(f"Finalizing {_display_path(path)} for '{tag}'...")

    lines = read_all_lines(path)
    sections = list(scan_sections(lines))
    if not sections:
        raise EmptyChangelogError(str(path))

    first = sections[0]
    second = sections[1] if len(sections) > 1 else None
    if not all(char.isalpha() for char in first.caption):
        raise NoDraftSectionError(first.caption)
    if any(section.caption.casefold() == tag.casefold() for section in sections):
        raise DuplicateTagError(tag)
    if first.is_empty:
        raise EmptyDraftError(first.caption)
    if second is not None and not is_newer(tag, second.caption):
        raise VersionOrderError(tag, second.caption)

    header = format_release_header(tag, release_date)
    updated = insert_release_header(lines, first.start_index, header)

    if repository is not None and repository.is_hosted:
        logger.debug(f"Rewriting comparison links for {repository}")
        updated = rewrite_links(updated, tag, str(repository))

    write_all_lines(path, with_trailing_blank_line(updated))
    logger.info(f"Released '{first.caption}' as {tag}")
