"""Text tables of rows and exported records."""

from __future__ import annotations

from typing import Iterable

from iccindex.records import IccRecord, Row

_SEPARATOR = "-" * 150
_MISSING = -101.0


def _value(value: float | None) -> float:
    return _MISSING if value is None else value


def format_rows(rows: Iterable[Row]) -> str:
    """Render rows as a table, one line per row."""
    lines = [
        "== Mostrar vector ==",
        "",
        "%-12s | %-60s | %-16s | %-15s | %-16s | %-16s"
        % ("Periodo", "Nivel", "Indice", "Clasificador", "var_mensual", "var_interanual"),
        _SEPARATOR,
    ]
    lines.extend(
        "%-12s | %-60s | %-16f | %-15s | %-16f | %-16f"
        % (
            row.period.isoformat(),
            row.level,
            row.index,
            row.classifier.value,
            _value(row.monthly),
            _value(row.yearly),
        )
        for row in rows
    )
    return "\n".join(lines) + "\n"


def format_records(records: Iterable[IccRecord]) -> str:
    """Render exported records as a table, one line per record."""
    lines = [
        "== Mostrar vector Final ==",
        "",
        "%-12s | %-16s | %-14s | %-60s | %-16s"
        % ("Periodo", "Clasificador", "Tipo_variable", "Nivel General Aperuras", "Valor"),
        _SEPARATOR,
    ]
    lines.extend(
        "%-12s | %-16s | %-14s | %-60s | %-16f"
        % (
            record.period.isoformat(),
            record.classifier.value,
            record.variable.value,
            record.level,
            record.value,
        )
        for record in records
    )
    return "\n".join(lines) + "\n"