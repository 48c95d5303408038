"""Upload boundary: file-level checks before the text reaches the parser."""

from __future__ import annotations

import logging
import re
import secrets
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import PurePath

from chronicler.core.errors import ChroniclerError, ErrorKind
from chronicler.core.parser import DEFAULT_MAX_BYTES, parse_lists
from chronicler.models import ParsedLists

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".txt",)
DEFAULT_CONTENT_TYPES: tuple[str, ...] = ("text/plain", "application/octet-stream")

_UNSAFE_FILENAME_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')
_SNIFF_BYTES = 1024
_ALLOWED_CONTROL_BYTES = frozenset({9, 10, 13})

_BOM_ENCODINGS: tuple[tuple[bytes, str], ...] = (
    (b"\xef\xbb\xbf", "utf-8-sig"),
    (b"\xff\xfe", "utf-16"),
    (b"\xfe\xff", "utf-16"),
)


@dataclass(frozen=True)
class UploadOptions:
    max_bytes: int = DEFAULT_MAX_BYTES
    allowed_extensions: Sequence[str] = DEFAULT_EXTENSIONS
    allowed_content_types: Sequence[str] = field(default=DEFAULT_CONTENT_TYPES)


@dataclass(frozen=True)
class UploadResult:
    file_id: str
    filename: str
    size: int
    parsed: ParsedLists


def sanitize_filename(filename: str) -> str:
    """Drop path separators, reserved and control characters, and leading dots."""
    cleaned = _UNSAFE_FILENAME_CHARS.sub("", filename or "")
    return cleaned.lstrip(".").strip()


def file_extension(filename: str) -> str:
    return PurePath(filename).suffix.lower()


def validate_upload(
    filename: str,
    content_type: str | None,
    size: int,
    options: UploadOptions | None = None,
) -> None:
    """Raise ``FILE_TOO_LARGE`` or ``UNSUPPORTED_TYPE`` for unacceptable uploads."""
    options = options or UploadOptions()
    if size > options.max_bytes:
        limit_mb = options.max_bytes / (1024 * 1024)
        raise ChroniclerError(
            ErrorKind.FILE_TOO_LARGE,
            f"File size exceeds maximum allowed size of {limit_mb:.1f}MB",
            {"size": size, "max_bytes": options.max_bytes},
        )

    if not filename or "\x00" in filename or not sanitize_filename(filename):
        raise ChroniclerError(ErrorKind.UNSUPPORTED_TYPE, "Invalid filename")

    extension = file_extension(filename)
    if extension not in options.allowed_extensions:
        raise ChroniclerError(
            ErrorKind.UNSUPPORTED_TYPE,
            f"File extension {extension or '(none)'!s} not allowed. "
            f"Allowed extensions: {', '.join(options.allowed_extensions)}",
            {"extension": extension},
        )

    mime = (content_type or "").split(";", 1)[0].strip().lower()
    if mime and mime not in options.allowed_content_types:
        raise ChroniclerError(
            ErrorKind.UNSUPPORTED_TYPE,
            f"File type {mime} not allowed. Allowed types: {', '.join(options.allowed_content_types)}",
            {"content_type": mime},
        )


def is_text_content(data: bytes) -> bool:
    """Heuristic binary check over the first KiB: NUL or stray control bytes mean binary."""
    sample = data[:_SNIFF_BYTES]
    if sample.startswith((b"\xff\xfe", b"\xfe\xff")):
        return True
    return all(byte >= 32 or byte in _ALLOWED_CONTROL_BYTES for byte in sample)


def decode_upload(data: bytes) -> str:
    encoding = "utf-8"
    for bom, name in _BOM_ENCODINGS:
        if data.startswith(bom):
            encoding = name
            break
    try:
        return data.decode(encoding)
    except UnicodeDecodeError as exc:
        raise ChroniclerError(ErrorKind.UNSUPPORTED_TYPE, f"File is not valid {encoding} text") from exc


def process_upload(
    filename: str,
    content_type: str | None,
    data: bytes,
    options: UploadOptions | None = None,
) -> UploadResult:
    """Validate, decode and parse an uploaded file."""
    options = options or UploadOptions()
    validate_upload(filename, content_type, len(data), options)
    if not is_text_content(data):
        raise ChroniclerError(ErrorKind.UNSUPPORTED_TYPE, "File appears to be binary, not plain text")

    parsed = parse_lists(decode_upload(data), max_bytes=options.max_bytes)
    result = UploadResult(
        file_id=secrets.token_hex(16),
        filename=sanitize_filename(filename),
        size=len(data),
        parsed=parsed,
    )
    logger.info("Processed upload %s (%d bytes, %d rows)", result.filename, result.size, parsed.row_count)
    return result
