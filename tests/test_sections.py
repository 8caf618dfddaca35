"""Tests for changelog_tasks.sections."""

from changelog_tasks.models import Section
from changelog_tasks.sections import (
    get_caption,
    is_release_content,
    is_release_head,
    scan_sections,
)

from conftest import SAMPLE_CHANGELOG


def _scan(text: str) -> list[tuple[str, int, int]]:
    return [
        (s.caption, s.start_index, s.end_index)
        for s in scan_sections(text.splitlines())
    ]


class TestLineClassification:
    """Tests for head/content detection and caption extraction."""

    def test_release_head_requires_level_two_marker(self):
        """Only lines starting with '## ' open a section."""
        assert is_release_head("## Unreleased")
        assert is_release_head("## [1.0.0] / 2020-01-01")
        assert not is_release_head("### Added")
        assert not is_release_head("# Changelog")
        assert not is_release_head("##Unreleased")

    def test_release_content(self):
        """Sub-headers and list items are content, prose and blanks are not."""
        assert is_release_content("### Added")
        assert is_release_content("#### Details")
        assert is_release_content("- item")
        assert is_release_content("    - nested item")
        assert not is_release_content("")
        assert not is_release_content("Some prose")
        assert not is_release_content("[1.0.0]: https://example.com")

    def test_caption_of_versioned_header(self):
        """Brackets and the trailing date are dropped."""
        assert get_caption("## [1.2.0] / 2024-01-01") == "1.2.0"
        assert get_caption("## [1.2.0] - 2024-01-01") == "1.2.0"
        assert get_caption("## 1.2.0") == "1.2.0"

    def test_caption_of_label_header(self):
        """Labels are kept verbatim."""
        assert get_caption("## Unreleased") == "Unreleased"
        assert get_caption("## [Unreleased]") == "Unreleased"
        assert get_caption("##   [v2.0.0]] trailing") == "v2.0.0"


class TestScanSections:
    """Tests for section boundaries."""

    def test_sample_has_two_sections(self):
        """Draft and release are found in document order."""
        assert _scan(SAMPLE_CHANGELOG) == [
            ("Unreleased", 0, 2),
            ("1.0.0", 4, 6),
        ]

    def test_returns_lazy_iterator(self):
        """Sections are produced one at a time."""
        sections = scan_sections(SAMPLE_CHANGELOG.splitlines())
        first = next(sections)
        assert first == Section("Unreleased", 0, 2)
        assert next(sections).caption == "1.0.0"

    def test_preamble_is_skipped(self):
        """Lines before the first release head belong to no section."""
        text = "# Changelog\n\nSome intro\n## [Unreleased]\n### Fixed\n  - indented\n\n"
        assert _scan(text) == [("Unreleased", 3, 5)]

    def test_no_heads_yields_nothing(self):
        """A document without release heads has no sections."""
        assert _scan("# Changelog\n\nNothing yet.\n") == []
        assert _scan("") == []

    def test_blank_body_is_empty_section(self):
        """A body of blank lines gives start_index == end_index."""
        text = "## Unreleased\n\n\n## [1.0.0]\n- a\n"
        assert _scan(text) == [("Unreleased", 0, 0), ("1.0.0", 3, 4)]

    def test_adjacent_heads(self):
        """A head directly followed by another head is empty."""
        text = "## Unreleased\n## [1.0.0]\n- a\n"
        assert _scan(text) == [("Unreleased", 0, 0), ("1.0.0", 1, 2)]

    def test_head_on_last_line(self):
        """A trailing head still yields one empty section and ends the scan."""
        text = "## [1.0.0]\n- a\n## Unreleased"
        assert _scan(text) == [("1.0.0", 0, 1), ("Unreleased", 2, 2)]

    def test_single_head_only(self):
        """A one-line document is a single empty section."""
        assert _scan("## Unreleased") == [("Unreleased", 0, 0)]

    def test_trailing_blank_lines_are_trimmed(self):
        """Blank lines at the end of the file are not part of the last section."""
        text = "## [1.0.0]\n- a\n- b\n\n\n"
        assert _scan(text) == [("1.0.0", 0, 2)]

    def test_prose_line_ending_the_run_is_kept(self):
        """A non-blank line that stops the content run is the section's last line."""
        text = "## [1.0.0]\n- x\nSome prose\n\n## [0.9.0]\n- y\n"
        assert _scan(text) == [("1.0.0", 0, 2), ("0.9.0", 4, 5)]

    def test_prose_after_blank_is_not_part_of_section(self):
        """Content resumes only at the next release head."""
        text = "## Unreleased\n\nSome text\n## [1.0.0]\n- a\n"
        assert _scan(text) == [("Unreleased", 0, 0), ("1.0.0", 3, 4)]

    def test_link_block_after_blank_line_is_ignored(self):
        """Reference definitions after the last section are not scanned."""
        text = "## [1.0.0]\n- a\n\n[1.0.0]: https://github.com/acme/widget/tree/1.0.0\n"
        assert _scan(text) == [("1.0.0", 0, 1)]

    def test_sections_do_not_overlap(self):
        """Every section starts after the previous one ends."""
        text = (
            "## Unreleased\n\n## [2.0.0]\n### Added\n- a\nNote\n"
            "## [1.0.0]\n## [0.1.0]\n- b\n\n\n"
        )
        sections = list(scan_sections(text.splitlines()))
        assert [s.caption for s in sections] == ["Unreleased", "2.0.0", "1.0.0", "0.1.0"]
        for previous, current in zip(sections, sections[1:]):
            assert previous.end_index < current.start_index
        for section in sections:
            assert section.start_index <= section.end_index


class TestSection:
    """Tests for the Section value type."""

    def test_body_slices_lines_after_head(self):
        """body() returns the lines between header and end_index."""
        lines = SAMPLE_CHANGELOG.splitlines()
        section = Section("Unreleased", 0, 2)
        assert section.body(lines) == ["### Added", "- thing"]
        assert not section.is_empty

    def test_empty_section_has_no_body(self):
        """An empty section slices to an empty list."""
        section = Section("Unreleased", 3, 3)
        assert section.is_empty
        assert section.body(["a", "b", "c", "## Unreleased"]) == []

    def test_str(self):
        """String form shows caption and range."""
        assert str(Section("1.0.0", 4, 6)) == "1.0.0 [4-6]"
