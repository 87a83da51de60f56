"""Reading of records from JSON, CSV, TSV, XML and FASTA files."""

from __future__ import annotations

import csv
import json
import os
from pathlib import Path

from .models import Record
from .parser import parse_fasta


class UnsupportedFormatError(ValueError):
    """Raised when a file extension names no known format."""

    def __init__(self, extension: str) -> None:
        super().__init__(f"Unsupported format: {extension}")
        self.extension = extension


def from_json(path: str | os.PathLike[str]) -> list[Record]:
    """Read a JSON array of ``{"id", "seq"}`` objects."""
    with open(path, encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, list):
        raise ValueError(f"expected a JSON array, got {type(data).__name__}")
    return [Record.from_dict(item) for item in data]


def _read_delimited(path: str | os.PathLike[str], delimiter: str) -> list[Record]:
    with open(path, encoding="utf-8", newline="") as handle:
        rows = (row for row in csv.reader(handle, delimiter=delimiter) if row)
        header = next(rows, None)
        if header is None:
            return []
        width = len(header)
        records = []
        for row in rows:
            if len(row) != width:
                raise ValueError(
                    f"found record with {len(row)} fields, "
                    f"but the header has {width} fields"
                )
            records.append(
                Record(
                    id=row[0] if len(row) > 0 else "",
                    seq=row[1] if len(row) > 1 else "",
                )
            )
        return records


def from_csv(path: str | os.PathLike[str]) -> list[Record]:
    """Read a comma-separated file whose first row is a header."""
    return _read_delimited(path, ",")


def from_tsv(path: str | os.PathLike[str]) -> list[Record]:
    """Read a tab-separated file whose first row is a header."""
    return _read_delimited(path, "\t")


def from_xml(path: str | os.PathLike[str]) -> list[Record]:
    """Read ``<record>`` elements holding ``<id>`` and ``<sequence>``.

    Records whose id or sequence is empty are skipped.
    """
    content = Path(path).read_text(encoding="utf-8")
    records = []
    for chunk in content.split("<record>"):
        if "<id>" not in chunk or "<sequence>" not in chunk:
            continue
        record_id = chunk.split("<id>")[1].split("</id>")[0].strip()
        seq = chunk.split("<sequence>")[1].split("</sequence>")[0].strip()
        if record_id and seq:
            records.append(Record(record_id, seq))
    return records


_READERS = {
    "json": from_json,
    "csv": from_csv,
    "tsv": from_tsv,
    "xml": from_xml,
    "fasta": parse_fasta,
    "fa": parse_fasta,
    "fna": parse_fasta,
}


def load_records(path: str | os.PathLike[str]) -> list[Record]:
    """Read records, choosing the format from the file extension."""
    extension = Path(path).suffix.lstrip(".").lower()
    reader = _READERS.get(extension)
    if reader is None:
        raise UnsupportedFormatError(extension)
    return reader(path)