"""
Release Section Scanner

Splits a changelog buffer into release sections. A section starts at a
release head ("## ...") and runs over the following content lines
("###..." sub-headers and "- " list items). The first line that is neither
ends the run; trailing blank lines are trimmed off the result.
"""

import logging
from collections.abc import Iterator

from changelog_tasks.config import (
    CAPTION_LEFT_STRIP,
    CAPTION_RIGHT_STRIP,
    LIST_ITEM_MARKER,
    RELEASE_HEAD_MARKER,
    SUBSECTION_MARKER,
)
from changelog_tasks.models import Section

logger = logging.getLogger(__name__)


def is_release_head(line: str) -> bool:
    """Check if a line opens a release section."""
    return line.startswith(RELEASE_HEAD_MARKER)


def is_release_content(line: str) -> bool:
    """Check if a line is a sub-header or list item of a release section."""
    return line.startswith(SUBSECTION_MARKER) or line.strip().startswith(
        LIST_ITEM_MARKER
    )


def get_caption(line: str) -> str:
    """
    Extract the caption from a release head.

    "## [1.2.0] / 2024-01-01" -> "1.2.0"
    "## Unreleased"           -> "Unreleased"
    """
    token = line.lstrip(CAPTION_LEFT_STRIP).split(" ", 1)[0]
    return token.rstrip(CAPTION_RIGHT_STRIP)


def _find_run_end(lines: list[str], start: int) -> int:
    """Index of the line that stops the content run after a head.

    Falls back to the last line of the buffer when the run reaches the end.
    """
    for index in range(start + 1, len(lines)):
        line = lines[index]
        if is_release_head(line) or not is_release_content(line):
            return index
    return len(lines) - 1


def _trim_end(lines: list[str], end_index: int) -> int:
    """Walk back from ``end_index`` to the last non-blank line before a head.

    Returns ``end_index - 1`` if the walk reaches a release head first.
    """
    index = end_index
    while not is_release_head(lines[index]):
        if lines[index].strip():
            return index
        index -= 1
    return end_index - 1


def scan_sections(lines: list[str]) -> Iterator[Section]:
    """
    Yield release sections in document order.

    Args:
        lines: Changelog buffer, one entry per line.

    Yields:
        Non-overlapping sections with ascending ``start_index``.
    """
    index = 0
    while index < len(lines):
        line = lines[index]
        if not is_release_head(line):
            index += 1
            continue

        caption = get_caption(line)
        # A head on the last line has nothing after it to trim back to
        end_index = max(_trim_end(lines, _find_run_end(lines, index)), index)
        section = Section(caption=caption, start_index=index, end_index=end_index)

        yield section
        logger.debug(f"Found section '{caption}' [{index}-{end_index}].")

        index = end_index + 1
