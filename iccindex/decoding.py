"""Decoding of the obfuscated level names found in the input files."""

from __future__ import annotations

from iccindex.records import Classifier

_ITEM_TABLE = str.maketrans(
    {
        "@": "a",
        "8": "b",
        "3": "e",
        "1": "i",
        "0": "o",
        "$": "s",
        "7": "t",
        "|": "l",
        "5": "m",
        "9": "n",
    }
)

_GENERAL_LEVEL = "Nivel general"


def _shift(ch: str, offset: int) -> str:
    if "a" <= ch <= "z":
        base = ord("a")
    elif "A" <= ch <= "Z":
        base = ord("A")
    else:
        return ch
    return chr(base + (ord(ch) - base + offset) % 26)


def decode_chapter_name(text: str) -> str:
    """Decode a chapter name: letters at even positions move 4, odd ones 2."""
    return "".join(
        _shift(ch, 4 if pos % 2 == 0 else 2) for pos, ch in enumerate(text)
    )


def decrypt_item_name(text: str) -> str:
    """Replace the look-alike symbols used in item names with letters."""
    return text.translate(_ITEM_TABLE)


def classify_chapter(level: str) -> Classifier:
    """Classify a row of the chapters file by its cleaned level name."""
    if level == _GENERAL_LEVEL:
        return Classifier.GENERAL
    return Classifier.CHAPTERS