"""Table-driven Latin <-> Tengwar transliteration.

Glyphs live in the Unicode Private Use Area (U+E010 onwards), matching
the code points of the Tengwar display font. Longer spellings win: a
three-character match is tried first, then two, then one.
"""

from __future__ import annotations

from typing import Any

TENGWAR_MAP: dict[str, str] = {
    # consonants
    "t": "\uE010",
    "p": "\uE011",
    "k": "\uE012",
    "kw": "\uE013",
    "d": "\uE014",
    "b": "\uE015",
    "g": "\uE016",
    "gw": "\uE017",
    "th": "\uE018",
    "f": "\uE019",
    "ch": "\uE01A",
    "hw": "\uE01B",
    "n": "\uE01C",
    "m": "\uE01D",
    "ng": "\uE01E",
    "nw": "\uE01F",
    "r": "\uE020",
    "v": "\uE021",
    "y": "\uE022",
    "w": "\uE023",
    "z": "\uE024",
    "zh": "\uE025",
    "s": "\uE026",
    "h": "\uE027",
    "l": "\uE028",
    "lh": "\uE029",
    # vowels
    "a": "\uE030",
    "e": "\uE031",
    "i": "\uE032",
    "o": "\uE033",
    "u": "\uE034",
    "á": "\uE035",
    "é": "\uE036",
    "í": "\uE037",
    "ó": "\uE038",
    "ú": "\uE039",
    # punctuation
    " ": " ",
    ".": "\uE040",
    ",": "\uE041",
    "?": "\uE042",
    "!": "\uE043",
    ":": "\uE044",
    ";": "\uE045",
    "-": "\uE046",
    "\u2014": "\uE047",
    # Sindarin extras
    "dh": "\uE050",
    "rh": "\uE051",
    "ph": "\uE052",
}

# longest spelling tried first
_MAX_TOKEN = 3

# space is kept as-is and has no reverse entry
REVERSE_MAP: dict[str, str] = {glyph: latin for latin, glyph in TENGWAR_MAP.items() if glyph != " "}


def transliterate(text: Any) -> str:
    """Convert Latin text to Tengwar; characters without a glyph pass through."""
    if not isinstance(text, str) or not text:
        return ""
    source = text.lower()
    out: list[str] = []
    i = 0
    while i < len(source):
        for size in range(min(_MAX_TOKEN, len(source) - i), 0, -1):
            glyph = TENGWAR_MAP.get(source[i : i + size])
            if glyph is not None:
                out.append(glyph)
                i += size
                break
        else:
            out.append(source[i])
            i += 1
    return "".join(out)


def detransliterate(text: Any) -> str:
    if not isinstance(text, str):
        return ""
    return "".join(REVERSE_MAP.get(ch, ch) for ch in text)


def is_tengwar(text: str) -> bool:
    """True if ``text`` contains at least one Tengwar glyph."""
    return any("\uE000" <= ch <= "\uF8FF" for ch in text)
