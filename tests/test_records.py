import struct
from datetime import date

import pytest

from iccindex.records import (
    RECORD_SIZE,
    Classifier,
    IccRecord,
    Row,
    VariableType,
    expand_row,
    read_records,
    record_sort_key,
    row_sort_key,
    unpack_record,
    write_records,
)


def _record(**changes):
    fields = dict(
        period=date(2023, 1, 1),
        classifier=Classifier.CHAPTERS,
        level="Materiales",
        variable=VariableType.MONTHLY,
        value=3.25,
    )
    fields.update(changes)
    return IccRecord(**fields)


def test_packed_size():
    assert len(_record().pack()) == RECORD_SIZE == 96


def test_pack_layout():
    data = _record().pack()
    assert data[:10] == b"2023-01-01"
    assert data[11:11 + len("Capitulos")] == b"Capitulos"
    assert data[31:31 + len("Materiales")] == b"Materiales"
    assert data[71:71 + len("var_mensual")] == b"var_mensual"
    assert struct.unpack_from("<d", data, RECORD_SIZE - 8)[0] == 3.25


def test_pack_unpack_round_trip():
    record = _record(classifier=Classifier.ITEMS, variable=VariableType.YEAR_ON_YEAR)
    assert unpack_record(record.pack()) == record


def test_unpack_wrong_size():
    with pytest.raises(ValueError):
        unpack_record(b"\0" * (RECORD_SIZE - 1))


def test_pack_level_too_long():
    with pytest.raises(ValueError):
        _record(level="x" * 40).pack()


def test_row_sort_key_order():
    day = date(2023, 2, 1)
    rows = [
        Row(day, Classifier.ITEMS, "Aaa", 1.0),
        Row(day, Classifier.CHAPTERS, "Zzz", 1.0),
        Row(day, Classifier.CHAPTERS, "Bbb", 1.0),
        Row(day, Classifier.GENERAL, "Nivel general", 1.0),
        Row(date(2023, 1, 1), Classifier.ITEMS, "Zzz", 1.0),
    ]
    ordered = sorted(rows, key=row_sort_key)
    assert [r.level for r in ordered] == ["Zzz", "Nivel general", "Bbb", "Zzz", "Aaa"]
    assert ordered[0].period == date(2023, 1, 1)


def test_record_sort_key_order():
    records = [
        _record(variable=VariableType.YEAR_ON_YEAR),
        _record(variable=VariableType.INDEX),
        _record(variable=VariableType.MONTHLY),
        _record(classifier=Classifier.GENERAL, variable=VariableType.YEAR_ON_YEAR),
    ]
    ordered = sorted(records, key=record_sort_key)
    assert ordered[0].classifier is Classifier.GENERAL
    assert [r.variable for r in ordered[1:]] == [
        VariableType.INDEX,
        VariableType.MONTHLY,
        VariableType.YEAR_ON_YEAR,
    ]


def test_expand_row_index_only():
    row = Row(date(2023, 1, 1), Classifier.GENERAL, "Nivel general", 100.5)
    records = expand_row(row)
    assert [r.variable for r in records] == [VariableType.INDEX]
    assert records[0].value == 100.5


def test_expand_row_all_values():
    row = Row(date(2023, 1, 1), Classifier.ITEMS, "Cemento", 100.5, 2.5, -1.25)
    records = expand_row(row)
    assert [(r.variable, r.value) for r in records] == [
        (VariableType.INDEX, 100.5),
        (VariableType.MONTHLY, 2.5),
        (VariableType.YEAR_ON_YEAR, -1.25),
    ]
    assert all(r.level == "Cemento" and r.classifier is Classifier.ITEMS for r in records)


def test_write_read_round_trip(tmp_path):
    path = tmp_path / "out.dat"
    records = [_record(), _record(level="Nivel general", classifier=Classifier.GENERAL)]
    write_records(records, path)
    assert path.stat().st_size == 2 * RECORD_SIZE
    assert read_records(path) == records


def test_read_ignores_partial_tail(tmp_path):
    path = tmp_path / "out.dat"
    write_records([_record()], path)
    with open(path, "ab") as handle:
        handle.write(b"\0" * 10)
    assert read_records(path) == [_record()]


def test_read_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_records(tmp_path / "missing.dat")