"""Row and record types, their ordering and the binary record file."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Iterable

ENCODING = "utf-8"

_PERIOD_SIZE = 11
_CLASSIFIER_SIZE = 20
_LEVEL_SIZE = 40
_VARIABLE_SIZE = 15

_RECORD_STRUCT = struct.Struct(
    f"<{_PERIOD_SIZE}s{_CLASSIFIER_SIZE}s{_LEVEL_SIZE}s{_VARIABLE_SIZE}s2xd"
)
RECORD_SIZE = _RECORD_STRUCT.size


class Classifier(str, Enum):
    """Grouping of a row: general level, chapters, or items."""

    GENERAL = "Nivel general"
    CHAPTERS = "Capitulos"
    ITEMS = "Items"

    @property
    def rank(self) -> int:
        return _CLASSIFIER_RANK[self]


_CLASSIFIER_RANK = {Classifier.GENERAL: 0, Classifier.CHAPTERS: 1, Classifier.ITEMS: 2}


class VariableType(str, Enum):
    """Kind of value held by an exported record."""

    INDEX = "indice_icc"
    MONTHLY = "var_mensual"
    YEAR_ON_YEAR = "var_interanual"

    @property
    def rank(self) -> int:
        return _VARIABLE_RANK[self]


_VARIABLE_RANK = {
    VariableType.INDEX: 0,
    VariableType.MONTHLY: 1,
    VariableType.YEAR_ON_YEAR: 2,
}


@dataclass
class Row:
    """One index value for a period and level, with its variations if known."""

    period: date
    classifier: Classifier
    level: str
    index: float
    monthly: float | None = None
    yearly: float | None = None


def _fixed(text: str, size: int, field: str) -> bytes:
    encoded = text.encode(ENCODING)
    if len(encoded) >= size:
        raise ValueError(f"{field} {text!r} does not fit in {size - 1} bytes")
    return encoded


def _text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode(ENCODING)


@dataclass(frozen=True)
class IccRecord:
    """One exported value: a period, a level and one kind of variable."""

    period: date
    classifier: Classifier
    level: str
    variable: VariableType
    value: float

    def pack(self) -> bytes:
        """Encode the record in its fixed-size binary layout."""
        return _RECORD_STRUCT.pack(
            _fixed(self.period.isoformat(), _PERIOD_SIZE, "period"),
            _fixed(self.classifier.value, _CLASSIFIER_SIZE, "classifier"),
            _fixed(self.level, _LEVEL_SIZE, "level"),
            _fixed(self.variable.value, _VARIABLE_SIZE, "variable"),
            self.value,
        )


def unpack_record(data: bytes) -> IccRecord:
    """Decode one record from exactly RECORD_SIZE bytes."""
    if len(data) != RECORD_SIZE:
        raise ValueError(f"a record takes {RECORD_SIZE} bytes, got {len(data)}")
    period, classifier, level, variable, value = _RECORD_STRUCT.unpack(data)
    return IccRecord(
        period=date.fromisoformat(_text(period)),
        classifier=Classifier(_text(classifier)),
        level=_text(level),
        variable=VariableType(_text(variable)),
        value=value,
    )


def row_sort_key(row: Row) -> tuple:
    """Order rows by period, then classifier, then level name."""
    return (row.period, row.classifier.rank, row.level)


def record_sort_key(record: IccRecord) -> tuple:
    """Order records by period, then classifier, then variable type."""
    return (record.period, record.classifier.rank, record.variable.rank)


def expand_row(row: Row) -> list[IccRecord]:
    """Split a row into one record per value it holds."""
    values = [
        (VariableType.INDEX, row.index),
        (VariableType.MONTHLY, row.monthly),
        (VariableType.YEAR_ON_YEAR, row.yearly),
    ]
    return [
        IccRecord(row.period, row.classifier, row.level, variable, value)
        for variable, value in values
        if value is not None
    ]


def write_records(records: Iterable[IccRecord], path: str | Path) -> None:
    """Write records one after another to a binary file."""
    with open(path, "wb") as handle:
        for record in records:
            handle.write(record.pack())


def read_records(path: str | Path) -> list[IccRecord]:
    """Read every whole record from a binary file; trailing bytes are ignored."""
    data = Path(path).read_bytes()
    whole = len(data) - len(data) % RECORD_SIZE
    return [
        unpack_record(data[start:start + RECORD_SIZE])
        for start in range(0, whole, RECORD_SIZE)
    ]