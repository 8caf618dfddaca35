"""
Changelog Value Types

Sections are line ranges inside a changelog buffer. Release notes wrap a
section's body together with what kind of release it is:

- Draft: the pending, unpublished section (caption is a label like "Unreleased")
- Released: a published section whose caption parses as a version
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from packaging.version import Version

from changelog_tasks.errors import NoReleasedVersionError


@dataclass
class Section:
    """A release section: header line plus its trimmed body.

    ``start_index`` is the header line. ``end_index`` is the last body line,
    inclusive. A section without body lines has ``end_index == start_index``.
    """

    caption: str
    start_index: int
    end_index: int

    @property
    def is_empty(self) -> bool:
        return self.end_index <= self.start_index

    def body(self, lines: list[str]) -> list[str]:
        """Slice this section's body out of the buffer it was scanned from."""
        return lines[self.start_index + 1 : self.end_index + 1]

    def __str__(self) -> str:
        return f"{self.caption} [{self.start_index}-{self.end_index}]"


@dataclass
class Draft:
    """Kind marker for the unreleased section."""


@dataclass
class Released:
    """Kind marker for a published section."""

    version: Version


ReleaseKind = Draft | Released


@dataclass
class ReleaseNotes:
    """Body lines of one section, tagged as draft or released."""

    kind: ReleaseKind
    caption: str
    lines: tuple[str, ...]
    start_index: int
    end_index: int

    @property
    def version(self) -> Version | None:
        if isinstance(self.kind, Released):
            return self.kind.version
        return None

    @property
    def unreleased(self) -> bool:
        return isinstance(self.kind, Draft)


@dataclass
class Changelog:
    """
    A parsed changelog file.

    Holds the draft section (if any) separately from the released sections.
    ``release_notes`` keeps document order and never contains the draft.

    Invariant: exactly one draft, or no draft and at least one released
    section.
    """

    path: Path
    unreleased: ReleaseNotes | None
    release_notes: tuple[ReleaseNotes, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.release_notes = tuple(self.release_notes)

        for notes in self.release_notes:
            if notes.unreleased:
                raise ValueError(
                    f"Draft section '{notes.caption}' cannot be listed as released"
                )
        if self.unreleased is not None and not self.unreleased.unreleased:
            raise ValueError(
                f"Section '{self.unreleased.caption}' is released and cannot be the draft"
            )
        if self.unreleased is None and not self.release_notes:
            raise NoReleasedVersionError()

    @property
    def latest_version(self) -> Version | None:
        """Highest released version, or None if nothing was released yet."""
        versions = [
            notes.version for notes in self.release_notes if notes.version is not None
        ]
        return max(versions) if versions else None
