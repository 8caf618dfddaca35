"""
Changelog Tasks Configuration Constants

This module centralizes the markers, formats and defaults used throughout
the codebase.
"""

# ============================================================
# Section Markers
# ============================================================

# A line starting with this marker opens a release section
RELEASE_HEAD_MARKER: str = "## "

# Sub-headers inside a release section (### Added, ### Fixed, ...)
SUBSECTION_MARKER: str = "###"

# List items inside a release section (compared after stripping whitespace)
LIST_ITEM_MARKER: str = "-"

# Characters stripped from the left of a header line before reading the caption
CAPTION_LEFT_STRIP: str = "# ["

# Characters stripped from the right of the caption token
CAPTION_RIGHT_STRIP: str = "]"

# ============================================================
# Release Header Format
# ============================================================

# Date written into new release headers (ISO 8601 calendar date)
DATE_FORMAT: str = "%Y-%m-%d"

# Header inserted when a draft is promoted to a release
RELEASE_HEADER_TEMPLATE: str = "## [{tag}] / {date}"

# ============================================================
# Comparison Links
# ============================================================

# Newest section compares against HEAD
COMPARE_HEAD_LINK_TEMPLATE: str = "[{caption}]: {base}/compare/{tag}...HEAD"

# Middle sections compare against the next older section
COMPARE_LINK_TEMPLATE: str = "[{caption}]: {base}/compare/{previous}...{caption}"

# Oldest section links to the tree view at its tag
TREE_LINK_TEMPLATE: str = "[{caption}]: {base}/tree/{caption}"

# Hosting platforms whose URL layout matches the link templates above
DEFAULT_HOSTED_ENDPOINTS: frozenset[str] = frozenset({"github.com"})

# ============================================================
# Defaults
# ============================================================

DEFAULT_CHANGELOG_FILE: str = "CHANGELOG.md"

DEFAULT_REMOTE: str = "origin"

# Project-local settings file (JSON)
SETTINGS_FILE_NAME: str = ".changelog-tasks.json"

# Timeout for `git remote get-url`
GIT_COMMAND_TIMEOUT: int = 10

# ============================================================
# Environment Variables
# ============================================================

ENV_LOG_LEVEL: str = "CHANGELOG_TASKS_LOG_LEVEL"
ENV_CHANGELOG_FILE: str = "CHANGELOG_TASKS_FILE"
ENV_REMOTE: str = "CHANGELOG_TASKS_REMOTE"
