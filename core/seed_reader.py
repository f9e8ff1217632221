# core/seed_reader.py

"""
Reader for the tab-delimited roster seed file.

The first non-comment line is a header naming the columns. Every following line is one
student record. Lines starting with the comment marker and blank lines are skipped. Records
may carry more or fewer fields than the header: trailing fields without a header are dropped
and missing trailing fields are simply absent from the record.
"""

import csv
from collections.abc import Iterable, Iterator

from core.constants import COMMENT_MARKER, FIELD_DELIMITER


def _data_lines(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        if line.startswith(COMMENT_MARKER) or not line.strip():
            continue
        yield line


def read_seed_rows(lines: Iterable[str]) -> Iterator[tuple[int, dict[str, str]]]:
    """
    Yields `(position, record)` pairs from seed file lines.

    Args:
        lines (Iterable[str]): Raw text lines, e.g. an open file.

    Yields:
        tuple[int, dict[str, str]]: The 1-based record position and a mapping of trimmed
        header names to raw field text.
    """
    reader = csv.reader(_data_lines(lines), delimiter=FIELD_DELIMITER)

    header = next(reader, None)
    if header is None:
        return

    columns = [column.strip() for column in header]

    for position, fields in enumerate(reader, 1):
        yield position, dict(zip(columns, fields))


def open_seed_file(path: str) -> list[tuple[int, dict[str, str]]]:
    """
    Reads every record from the seed file at `path`.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with open(path, "r", encoding="utf-8", newline="") as f:
        return list(read_seed_rows(f))
