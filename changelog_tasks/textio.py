"""Whole-file line I/O for changelog documents."""

from pathlib import Path


def read_all_lines(path: str | Path) -> list[str]:
    """Read a UTF-8 text file into a list of lines without terminators.

    Only ``\\n``, ``\\r\\n`` and ``\\r`` end a line. Form feeds and Unicode
    separators such as U+2028 stay inside the line they appear in.
    """
    lines = Path(path).read_text(encoding="utf-8").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def write_all_lines(path: str | Path, lines: list[str]) -> None:
    """Overwrite a file with the given lines, each terminated by a newline."""
    Path(path).write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
