"""
Changelog Tasks

Read release notes from Keep a Changelog files and promote the draft
section into a dated release.
"""

from changelog_tasks.errors import (
    ChangelogError,
    DuplicateTagError,
    EmptyChangelogError,
    EmptyDraftError,
    InvalidVersionError,
    MultipleDraftSectionsError,
    NoDraftSectionError,
    NoReleasedVersionError,
    RepositoryUrlError,
    SectionNotFoundError,
    VersionOrderError,
)
from changelog_tasks.finalizer import finalize_changelog, finalize_changelog_file
from changelog_tasks.models import (
    Changelog,
    Draft,
    Released,
    ReleaseKind,
    ReleaseNotes,
    Section,
)
from changelog_tasks.reader import (
    extract_section_notes,
    read_changelog,
    read_release_notes,
)
from changelog_tasks.repository import GitRepository
from changelog_tasks.sections import scan_sections

__all__ = [
    # Operations
    "scan_sections",
    "read_release_notes",
    "read_changelog",
    "extract_section_notes",
    "finalize_changelog",
    "finalize_changelog_file",
    # Types
    "Section",
    "Draft",
    "Released",
    "ReleaseKind",
    "ReleaseNotes",
    "Changelog",
    "GitRepository",
    # Errors
    "ChangelogError",
    "EmptyChangelogError",
    "MultipleDraftSectionsError",
    "NoReleasedVersionError",
    "SectionNotFoundError",
    "NoDraftSectionError",
    "DuplicateTagError",
    "EmptyDraftError",
    "VersionOrderError",
    "InvalidVersionError",
    "RepositoryUrlError",
]
