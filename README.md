# iccindex

Combines two construction cost index (ICC) CSV exports, one with the general
level and its chapters and one with individual items, into a single sorted
dataset. For every row it computes the monthly and the year-on-year
percentage variation and writes the result as fixed-size binary records.

## Installation

```
pip install .
```

## Usage

```
iccindex CHAPTERS.csv ITEMS.csv OUTPUT.dat
```

- `CHAPTERS.csv` holds the general level and the chapters. Each line has a
  period (`YYYY-MM-DD`), an encoded level name and an index value. Fields are
  separated by `;` and may be wrapped in double quotes. The first line is a
  header and is skipped. Level names are decoded by shifting letters (4
  places at even positions, 2 at odd ones); the name `Nivel general` is
  classified as the general level, every other name as a chapter.
- `ITEMS.csv` holds the items, with the same three fields. Their names use
  symbol-for-letter substitution (`@` for `a`, `3` for `e`, and so on), and
  everything up to and including the first underscore is dropped.
- `OUTPUT.dat` receives the exported records.

In both files underscores in names become spaces, the first letter is
upper-cased and the rest lower-cased. Index values may use a comma as the
decimal separator.

If either CSV file cannot be found or opened, the command prints
`Error abriendo archivos CSV.` and exits with status 1. A line with fewer
than three fields, an invalid date or an invalid number raises `ValueError`
naming the file and line.

The command prints two tables. The first lists the merged rows, sorted by
period, classifier and level name, with their index and variations (a
missing variation is shown as `-101.000000`). The second lists the exported
records: one `indice_icc` entry per row, plus `var_mensual` and
`var_interanual` entries whenever the row one month or twelve months earlier
exists for the same classifier and level. Variations are percentages rounded
down to two decimals. The records are sorted by period, then by classifier
(`Nivel general`, `Capitulos`, `Items`), then by variable type
(`indice_icc`, `var_mensual`, `var_interanual`).

## Output format

Each record in `OUTPUT.dat` is `iccindex.records.RECORD_SIZE` (96) bytes,
little-endian: the period as an ISO date in 11 bytes, the classifier in 20,
the level name in 40, the variable type in 15 (each NUL-padded UTF-8), two
padding bytes and the value as a double. A text field too long for its slot
raises `ValueError`.

## Library use

```python
from iccindex.cli import load_chapters, load_items
from iccindex.variations import compute_variations
from iccindex.records import expand_row, record_sort_key, write_records, read_records

rows = load_chapters("chapters.csv") + load_items("items.csv")
rows = compute_variations(rows)  # returns a new, sorted list
records = sorted(
    (record for row in rows for record in expand_row(row)),
    key=record_sort_key,
)
write_records(records, "out.dat")
assert read_records("out.dat") == records
```

Other pieces:

- `iccindex.records`: `Row`, `IccRecord` (with `pack()`), `unpack_record`,
  the `Classifier` and `VariableType` enums, `row_sort_key`.
- `iccindex.variations.percent_change`: percentage change between two values.
- `iccindex.decoding`: `decode_chapter_name`, `decrypt_item_name`,
  `classify_chapter`.
- `iccindex.textutils`: `comma_to_dot`, `underscores_to_spaces`,
  `capitalize_first`, `drop_before_first_underscore`.
- `iccindex.report.format_rows` and `iccindex.report.format_records` render
  the tables that the command prints.

## Running the tests

```
pip install .[test]
pytest
```