"""Rendering of generated passwords: column layout, JSON report, clipboard."""

import sys

from loguru import logger
from pydantic import BaseModel
import pyperclip

from passforge.entropy import calculate_entropy


class GenerationReport(BaseModel):
    passwords: list[str]
    count: int
    length: int
    entropy_bits: float


def column_count(password_count: int) -> int:
    if 1 <= password_count <= 3:
        return 1
    if 4 <= password_count <= 8:
        return 2
    if 9 <= password_count <= 15:
        return 3
    if 16 <= password_count <= 24:
        return 4
    for columns in (5, 4, 3, 2):
        if password_count % columns == 0:
            return columns
    return 3  # odd counts read best in three columns


def format_columns(
    passwords: list[str], column_count: int, show_header: bool
) -> list[str]:
    lines: list[str] = []
    if show_header:
        lines.append(
            f"Printing {len(passwords)} passwords in {column_count} columns"
        )

    if column_count == 1:
        lines.extend(passwords)
        return lines

    width = max((len(p) for p in passwords), default=0)
    width = max(width, 1)

    for start in range(0, len(passwords), column_count):
        row = passwords[start : start + column_count]
        line = " ".join(p.ljust(width) for p in row)
        if len(row) < column_count:
            line += " "
        lines.append(line)

    return lines


def print_columns(passwords: list[str], column_count: int, show_header: bool) -> None:
    for line in format_columns(passwords, column_count, show_header):
        print(line)


def render_json(passwords: list[str], length: int, char_set_size: int) -> str:
    report = GenerationReport(
        passwords=passwords,
        count=len(passwords),
        length=length,
        entropy_bits=calculate_entropy(char_set_size, length),
    )
    return report.model_dump_json(indent=2)


def copy_to_clipboard(text: str, quiet: bool = False) -> bool:
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.debug(f"Clipboard copy failed: {e}")
        print(
            "Warning: Could not copy to clipboard (clipboard functionality not available)",
            file=sys.stderr,
        )
        return False

    if not quiet:
        print("Password copied to clipboard", file=sys.stderr)
    return True
