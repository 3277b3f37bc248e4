"""Small text clean-up helpers applied to the fields of the index files."""

from __future__ import annotations


def _is_ascii_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def comma_to_dot(text: str) -> str:
    """Turn a decimal comma into a decimal point."""
    return text.replace(",", ".")


def underscores_to_spaces(text: str) -> str:
    """Replace every underscore with a space."""
    return text.replace("_", " ")


def capitalize_first(text: str) -> str:
    """Upper-case the first letter and lower-case every other letter.

    A space seen before any letter means no letter is capitalised.
    """
    pending_first = True
    out = []
    for ch in text:
        if _is_ascii_letter(ch):
            if pending_first:
                out.append(ch.upper())
                pending_first = False
            else:
                out.append(ch.lower())
            continue
        if ch == " ":
            pending_first = False
        out.append(ch)
    return "".join(out)


def drop_before_first_underscore(text: str) -> str:
    """Return what follows the first underscore.

    Raises ValueError when the text holds no underscore.
    """
    head, sep, tail = text.partition("_")
    if not sep:
        raise ValueError(f"no underscore in {text!r}")
    return tail