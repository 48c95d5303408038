"""English / Sindarin message catalogue for user-facing errors and labels."""

from __future__ import annotations

from typing import Any, Literal

from chronicler.core.errors import USER_MESSAGES, ErrorKind
from chronicler.core.tengwar import transliterate

Language = Literal["english", "sindarin"]

LANGUAGES: tuple[Language, ...] = ("english", "sindarin")

_SINDARIN_TAGS = ("sindarin", "elvish", "x-sindarin")

_CATALOGUE: dict[str, dict[str, Any]] = {
    "english": {
        "errors": {kind.code: message for kind, message in USER_MESSAGES.items()},
        "results": {
            "title": "Distance Calculation Results",
            "totalDistance": "Total Distance",
            "pairs": "Pairs",
            "processingTime": "Processing Time",
            "columns": {
                "position": "Position",
                "list1Value": "List 1",
                "list2Value": "List 2",
                "distance": "Distance",
            },
        },
        "upload": {
            "prompt": "Drag and drop a .txt file, or click to select one",
            "success": "File uploaded and processed successfully",
        },
    },
    "sindarin": {
        "errors": {
            ErrorKind.EMPTY_INPUT.code: "I parf lost. Ú-hirich rim.",
            ErrorKind.MALFORMED_LINE.code: "I parf bartha dad rim nedh tad thiw.",
            ErrorKind.LENGTH_MISMATCH.code: "I thiw tad ú-govannen.",
            ErrorKind.FILE_TOO_LARGE.code: "I parf beleg. Anno parf pen.",
            ErrorKind.NETWORK_ERROR.code: "I men dartha. Ceno i ven a mitho.",
        },
        "results": {
            "title": "Gwanath in Thiw",
            "totalDistance": "Gwanath Pan",
        },
    },
}


def t(key: str, language: str = "english", fallback: str | None = None) -> str:
    """Look up a dotted key, falling back to English, then ``fallback``, then the key."""
    current: Any = _CATALOGUE.get(language, _CATALOGUE["english"])
    for part in key.split("."):
        if isinstance(current, dict) and part in current:
            current = current[part]
        elif language != "english":
            return t(key, "english", fallback)
        else:
            return fallback or key
    if isinstance(current, str):
        return current
    return fallback or key


def error_message(kind: ErrorKind, language: str = "english") -> str:
    return t(f"errors.{kind.code}", language, USER_MESSAGES[kind])


def detect_language(accept_language: str | None) -> Language:
    """Pick Sindarin when any tag in an ``Accept-Language`` header asks for it."""
    if not accept_language:
        return "english"
    tags = [part.split(";", 1)[0].strip().lower() for part in accept_language.split(",")]
    if any(marker in tag for tag in tags for marker in _SINDARIN_TAGS):
        return "sindarin"
    return "english"


def normalize_language(language: str | None) -> Language:
    normalized = (language or "english").strip().lower()
    if normalized not in LANGUAGES:
        raise ValueError(f"Unsupported language '{language}'. Supported: {list(LANGUAGES)}")
    return normalized  # type: ignore[return-value]


def render(text: str, language: str = "english", tengwar: bool = False) -> str:
    """Return ``text`` as-is, or in Tengwar script for Sindarin output."""
    if tengwar and language == "sindarin":
        return transliterate(text)
    return text
