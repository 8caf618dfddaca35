"""
Changelog Tasks Exceptions

Every failure is a precondition violation raised before anything is written,
so a failed call leaves the changelog file untouched.
"""


class ChangelogError(Exception):
    """Base class for all changelog errors."""

    pass


# ============================================================
# Reading
# ============================================================


class EmptyChangelogError(ChangelogError):
    """Raised when a changelog has no release sections at all."""

    def __init__(self, path: str | None = None) -> None:
        self.path = path
        where = f" in {path}" if path else ""
        super().__init__(f"Changelog should have at least one release note section{where}.")


class MultipleDraftSectionsError(ChangelogError):
    """Raised when more than one section has a caption that is not a version."""

    def __init__(self, captions: list[str]) -> None:
        self.captions = captions
        listed = ", ".join(f"'{c}'" for c in captions)
        super().__init__(f"Changelog should have only one draft section (found {listed}).")


class NoReleasedVersionError(ChangelogError):
    """Raised when a changelog has neither a draft nor a released version."""

    def __init__(self) -> None:
        super().__init__("Changelog should have at least one released version section.")


class SectionNotFoundError(ChangelogError):
    """Raised when no section matches the requested tag."""

    def __init__(self, tag: str | None) -> None:
        self.tag = tag
        if tag is None:
            message = "Could not find a release section with content."
        else:
            message = f"Could not find release section for '{tag}'."
        super().__init__(message)


# ============================================================
# Finalizing
# ============================================================


class NoDraftSectionError(ChangelogError):
    """Raised when there is no draft section to promote."""

    def __init__(self, caption: str | None = None) -> None:
        self.caption = caption
        if caption is None:
            message = "Changelog should have draft section."
        else:
            message = f"Cannot find a draft section (first section is '{caption}')."
        super().__init__(message)


class DuplicateTagError(ChangelogError):
    """Raised when the tag being released already has a section."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"Tag '{tag}' already exists.")


class EmptyDraftError(ChangelogError):
    """Raised when the draft section has no content to release."""

    def __init__(self, caption: str) -> None:
        self.caption = caption
        super().__init__(f"Draft section '{caption}' does not contain any information.")


class VersionOrderError(ChangelogError):
    """Raised when the tag does not sort after the last released version."""

    def __init__(self, tag: str, last: str) -> None:
        self.tag = tag
        self.last = last
        super().__init__(f"Tag '{tag}' is not greater compared to last tag '{last}'.")


# ============================================================
# Collaborators
# ============================================================


class InvalidVersionError(ChangelogError, ValueError):
    """Raised when a string that must be a version cannot be parsed."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"'{value}' is not a valid version.")


class RepositoryUrlError(ChangelogError, ValueError):
    """Raised when a repository URL cannot be understood or looked up."""

    pass
