"""Client-side paging over a local CSV export.

The first row holds the headers; every later row becomes a dict keyed by the
normalised header at the same column position. Pages are zero-indexed slices
``[page_size * page_number, page_size * page_number + page_size)``.
"""

from __future__ import annotations

import csv
import logging
import os
import re
import unicodedata
from typing import Dict, List, Union


logger = logging.getLogger("skuvault_sdk.csv_pager")

CsvRecord = Dict[str, str]

_WHITESPACE = re.compile(r"\s+")


class CsvPagerError(Exception):
    """Base error for CSV paging."""

    def __init__(self, message: str, path: Union[str, os.PathLike, None] = None) -> None:
        super().__init__(message)
        self.path = path


class CsvFileError(CsvPagerError):
    """The file could not be opened."""


class CsvReadError(CsvPagerError):
    """Reading stopped before a clean end of file."""


def _is_trimmable(char: str) -> bool:
    # Separators (Z*) and control/format/unassigned characters (C*)
    return unicodedata.category(char)[0] in ("Z", "C")


def normalize_header(raw: str) -> str:
    """Turn a header cell into a PascalCase key: ``"  order date "`` -> ``"OrderDate"``."""
    start, end = 0, len(raw)
    while start < end and _is_trimmable(raw[start]):
        start += 1
    while end > start and _is_trimmable(raw[end - 1]):
        end -= 1
    words = _WHITESPACE.split(raw[start:end])
    return "".join(word[:1].upper() + word[1:] for word in words)


def get_page(
    path: Union[str, os.PathLike],
    page_size: int,
    page_number: int,
    *,
    delimiter: str = ",",
    encoding: str = "utf-8",
) -> List[CsvRecord]:
    """Return one page of records from the CSV file at ``path``.

    Rows are zipped against the headers positionally, over the shorter of the
    two, so missing trailing cells are left out and excess cells are dropped.
    Blank lines are skipped. A page past the end is an empty list.

    Raises:
        ValueError: page_size or page_number is negative.
        CsvFileError: the file cannot be opened.
        CsvReadError: decoding or CSV parsing fails before end of file.
    """
    if page_size < 0 or page_number < 0:
        raise ValueError("page_size and page_number must be non-negative")

    start = page_size * page_number
    stop = start + page_size

    try:
        handle = open(path, "r", newline="", encoding=encoding)
    except OSError as e:
        raise CsvFileError(f"Cannot open {path}: {e}", path) from e

    headers: List[str] | None = None
    page: List[CsvRecord] = []
    index = 0
    with handle:
        reader = csv.reader(handle, delimiter=delimiter)
        try:
            for row in reader:
                if headers is None:
                    headers = [normalize_header(cell) for cell in row]
                    continue
                if not row:
                    continue
                # Keep reading past the page so a truncated file still fails
                if start <= index < stop:
                    page.append(dict(zip(headers, row)))
                index += 1
        except (csv.Error, UnicodeDecodeError, OSError) as e:
            raise CsvReadError(
                f"Read of {path} failed at data row {index}: {e}", path
            ) from e

    logger.debug(
        "CSV page %s (size=%s) from %s -> %d of %d records",
        page_number, page_size, path, len(page), index,
    )
    return page
