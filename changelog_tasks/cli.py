#!/usr/bin/env python3
"""Changelog Tasks CLI - read and finalize Keep a Changelog files.

Usage:
    changelog-tasks sections [--file CHANGELOG.md]
    changelog-tasks extract [--tag 1.2.0] [--file CHANGELOG.md]
    changelog-tasks finalize 1.3.0 [--repository URL | --from-git]
"""

import argparse
import sys
from pathlib import Path

from changelog_tasks.errors import ChangelogError
from changelog_tasks.finalizer import finalize_changelog_file
from changelog_tasks.logging_config import set_debug_mode, setup_logging
from changelog_tasks.reader import extract_section_notes, read_release_notes
from changelog_tasks.renderer import RichRenderer
from changelog_tasks.repository import GitRepository
from changelog_tasks.settings import ChangelogSettings


def cmd_sections(args, settings):
    """Show every release section as a table."""
    release_notes = read_release_notes(args.file)
    RichRenderer().render(release_notes, title=str(args.file))


def cmd_extract(args, settings):
    """Print the body of one section to stdout."""
    for line in extract_section_notes(args.file, args.tag):
        print(line)


def cmd_finalize(args, settings):
    """Promote the draft section to a release."""
    repository = None
    if args.repository:
        repository = GitRepository.from_url(args.repository, settings.hosted_endpoints)
    elif args.from_git:
        repository = GitRepository.from_local_directory(
            Path(args.file).resolve().parent,
            remote=settings.remote,
            hosted_endpoints=settings.hosted_endpoints,
        )

    finalize_changelog_file(args.file, args.tag, repository=repository)
    print(f"Finalized {args.file} for {args.tag}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="changelog-tasks",
        description="Read and finalize Keep a Changelog files.",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    file_kwargs = {
        "type": Path,
        "default": None,
        "help": "Changelog file (default: from settings, usually CHANGELOG.md).",
    }

    p_sections = subparsers.add_parser("sections", help="List release sections.")
    p_sections.add_argument("--file", **file_kwargs)
    p_sections.set_defaults(func=cmd_sections)

    p_extract = subparsers.add_parser("extract", help="Print release notes of a section.")
    p_extract.add_argument("--file", **file_kwargs)
    p_extract.add_argument(
        "--tag",
        help="Section caption (case-insensitive). Default: first section with content.",
    )
    p_extract.set_defaults(func=cmd_extract)

    p_finalize = subparsers.add_parser(
        "finalize", help="Promote the draft section to a dated release."
    )
    p_finalize.add_argument("tag", help="Tag being released (e.g., 1.3.0).")
    p_finalize.add_argument("--file", **file_kwargs)
    links = p_finalize.add_mutually_exclusive_group()
    links.add_argument(
        "--repository",
        help="Repository URL used to rebuild comparison links.",
    )
    links.add_argument(
        "--from-git",
        action="store_true",
        help="Read the repository URL from the git remote next to the changelog.",
    )
    p_finalize.set_defaults(func=cmd_finalize)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging()
    if args.debug:
        set_debug_mode(True)

    settings = ChangelogSettings.load()
    if args.file is None:
        args.file = settings.changelog_path

    try:
        args.func(args, settings)
    except (ChangelogError, OSError, UnicodeDecodeError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
