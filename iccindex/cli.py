"""Command line entry: read both index files, compute and export."""

from __future__ import annotations

import argparse
import re
import sys
from datetime import date
from pathlib import Path
from typing import Callable, Iterator

from iccindex.decoding import classify_chapter, decode_chapter_name, decrypt_item_name
from iccindex.records import Classifier, Row, expand_row, record_sort_key, write_records
from iccindex.report import format_records, format_rows
from iccindex.textutils import (
    capitalize_first,
    comma_to_dot,
    drop_before_first_underscore,
    underscores_to_spaces,
)
from iccindex.variations import compute_variations

ERR_FILE = 1
_DELIMITERS = re.compile(r'[;"\r\n]+')


def _fields(path: str | Path) -> Iterator[tuple[int, str, str, str]]:
    with open(path, encoding="utf-8") as handle:
        next(handle, None)
        for number, line in enumerate(handle, start=2):
            tokens = [t for t in _DELIMITERS.split(line) if t]
            if len(tokens) < 3:
                raise ValueError(f"{path}:{number}: expected three fields")
            yield number, tokens[0], tokens[1], tokens[2]


def _load(
    path: str | Path,
    clean: Callable[[str], str],
    classify: Callable[[str], Classifier],
) -> list[Row]:
    rows = []
    for number, period, level, index in _fields(path):
        try:
            parsed_period = date.fromisoformat(period.strip())
            value = float(comma_to_dot(index).strip())
        except ValueError as exc:
            raise ValueError(f"{path}:{number}: {exc}") from exc
        name = capitalize_first(underscores_to_spaces(clean(level)))
        rows.append(Row(parsed_period, classify(name), name, value))
    return rows


def load_chapters(path: str | Path) -> list[Row]:
    """Read the general-level and chapters file, skipping its header."""
    return _load(path, decode_chapter_name, classify_chapter)


def load_items(path: str | Path) -> list[Row]:
    """Read the items file, skipping its header."""
    return _load(
        path,
        lambda text: drop_before_first_underscore(decrypt_item_name(text)),
        lambda _name: Classifier.ITEMS,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="iccindex",
        description="Merge construction cost index files and export them.",
    )
    parser.add_argument("chapters", help="CSV with the general level and chapters")
    parser.add_argument("items", help="CSV with the items")
    parser.add_argument("output", help="binary file to write")
    args = parser.parse_args(argv)

    if not (Path(args.chapters).is_file() and Path(args.items).is_file()):
        print("Error abriendo archivos CSV.")
        return ERR_FILE
    try:
        rows = load_chapters(args.chapters) + load_items(args.items)
    except OSError:
        print("Error abriendo archivos CSV.")
        return ERR_FILE

    rows = compute_variations(rows)
    print(format_rows(rows), end="")

    records = sorted(
        (record for row in rows for record in expand_row(row)),
        key=record_sort_key,
    )
    print(format_records(records), end="")

    try:
        write_records(records, args.output)
    except OSError:
        return ERR_FILE
    return 0


if __name__ == "__main__":
    sys.exit(main())