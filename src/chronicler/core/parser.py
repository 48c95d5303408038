"""Turn uploaded text into two equal-length integer lists."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Literal

from chronicler.core.errors import ChroniclerError, ErrorKind
from chronicler.models import MAX_VALUE, MIN_VALUE, ParsedLists

logger = logging.getLogger(__name__)

DEFAULT_MAX_BYTES = 10 * 1024 * 1024
LARGE_VALUE_THRESHOLD = 999_999_999

_INTEGER_TOKEN = re.compile(r"^[+-]?\d+$", re.ASCII)
_BOM = "\ufeff"
_PREVIEW_WIDTH = 40
_MAX_DIGITS = len(str(MAX_VALUE))


@dataclass(frozen=True)
class FormatReport:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    line_count: int = 0

    @property
    def valid(self) -> bool:
        return not self.errors and self.line_count > 0


def sanitize_content(content: str) -> str:
    """Strip a leading BOM, normalize line endings and trailing whitespace."""
    if content.startswith(_BOM):
        content = content[1:]
    content = content.replace("\r\n", "\n").replace("\r", "\n")
    return "\n".join(line.rstrip() for line in content.split("\n"))


def count_lines(content: str) -> int:
    if not content:
        return 0
    return sum(1 for line in re.split(r"\r\n|\n|\r", content) if line.strip())


def detect_line_ending(content: str) -> Literal["CRLF", "LF", "CR", "MIXED", "NONE"]:
    crlf = content.count("\r\n")
    lf = content.count("\n") - crlf
    cr = content.count("\r") - crlf
    if crlf == lf == cr == 0:
        return "NONE"
    if crlf and not lf and not cr:
        return "CRLF"
    if lf and not crlf and not cr:
        return "LF"
    if cr and not crlf and not lf:
        return "CR"
    return "MIXED"


def _preview(line: str) -> str:
    if len(line) > _PREVIEW_WIDTH:
        return line[: _PREVIEW_WIDTH - 3] + "..."
    return line


def _data_lines(content: str) -> list[tuple[int, str]]:
    """Return ``(1-based line number, stripped line)`` for every non-blank line."""
    lines = sanitize_content(content).split("\n")
    return [(number, line.strip()) for number, line in enumerate(lines, start=1) if line.strip()]


def _token_value(token: str) -> int | None:
    """Return the value of an integer token, or ``None`` when it falls outside the 64-bit range."""
    digits = token.lstrip("+-").lstrip("0")
    if len(digits) > _MAX_DIGITS:
        return None
    value = int(digits or "0")
    if token.startswith("-"):
        value = -value
    return value if MIN_VALUE <= value <= MAX_VALUE else None


def _parse_line(number: int, line: str) -> tuple[int, int]:
    tokens = line.split()
    if len(tokens) != 2:
        raise ChroniclerError(
            ErrorKind.MALFORMED_LINE,
            f"Invalid format at line {number}: expected 2 columns, found {len(tokens)} in {_preview(line)!r}",
            {"line": number, "content": _preview(line), "columns": len(tokens)},
        )
    values: list[int] = []
    for token in tokens:
        if not _INTEGER_TOKEN.match(token):
            raise ChroniclerError(
                ErrorKind.MALFORMED_LINE,
                f"Invalid number format at line {number}: {_preview(token)!r}",
                {"line": number, "content": _preview(line), "token": _preview(token)},
            )
        value = _token_value(token)
        if value is None:
            raise ChroniclerError(
                ErrorKind.MALFORMED_LINE,
                f"Number out of range at line {number}: {_preview(token)!r}",
                {"line": number, "content": _preview(line), "token": _preview(token)},
            )
        values.append(value)
    return values[0], values[1]


def parse_lists(
    content: str,
    *,
    max_bytes: int | None = DEFAULT_MAX_BYTES,
    max_lines: int | None = None,
) -> ParsedLists:
    """Parse two whitespace-separated integer columns.

    Blank lines are skipped; any other line must hold exactly two integer
    tokens or the whole input is rejected. ``max_lines`` stops after that
    many data lines, for previews.

    Raises ``ChroniclerError`` with kind ``FILE_TOO_LARGE``, ``MALFORMED_LINE``
    or ``EMPTY_INPUT``.
    """
    if max_bytes is not None:
        size = len(content.encode("utf-8"))
        if size > max_bytes:
            raise ChroniclerError(
                ErrorKind.FILE_TOO_LARGE,
                f"Input is {size} bytes, exceeding the limit of {max_bytes} bytes",
                {"size": size, "max_bytes": max_bytes},
            )

    list1: list[int] = []
    list2: list[int] = []
    for number, line in _data_lines(content):
        if max_lines is not None and len(list1) >= max_lines:
            break
        first, second = _parse_line(number, line)
        list1.append(first)
        list2.append(second)

    if not list1:
        raise ChroniclerError(ErrorKind.EMPTY_INPUT, "File is empty or contains no valid data")

    logger.debug("Parsed %d rows", len(list1))
    return ParsedLists(list1=list1, list2=list2)


def validate_format(content: str) -> FormatReport:
    """Check every line without raising, collecting all errors and warnings."""
    errors: list[str] = []
    warnings: list[str] = []
    lines = _data_lines(content)
    if not lines:
        errors.append("File is empty or contains no valid data")
        return FormatReport(errors=errors, warnings=warnings, line_count=0)

    for number, line in lines:
        tokens = line.split()
        if len(tokens) != 2:
            errors.append(f"Invalid format at line {number}: expected 2 columns, found {len(tokens)}")
            continue
        for token in tokens:
            if not _INTEGER_TOKEN.match(token):
                errors.append(f"Invalid number format at line {number}: {_preview(token)!r}")
                continue
            value = _token_value(token)
            if value is None:
                errors.append(f"Number out of range at line {number}: {_preview(token)!r}")
            elif abs(value) > LARGE_VALUE_THRESHOLD:
                warnings.append(f"Line {number} contains very large numbers: {token}")

    return FormatReport(errors=errors, warnings=warnings, line_count=len(lines))
