"""Writing of records as FASTA, JSON, CSV, TSV or XML."""

from __future__ import annotations

import csv
import json
from typing import Iterable, TextIO

from .converter import UnsupportedFormatError
from .models import Record


def write_fasta(out: TextIO, records: Iterable[Record]) -> None:
    """Write each record as a header line and a single sequence line."""
    for record in records:
        out.write(f">{record.id}\n{record.seq}\n")


def write_json(out: TextIO, records: Iterable[Record]) -> None:
    """Write records as a pretty-printed JSON array."""
    json.dump(
        [record.to_dict() for record in records], out, indent=2, ensure_ascii=False
    )


def _write_delimited(out: TextIO, records: Iterable[Record], delimiter: str) -> None:
    writer = csv.writer(out, delimiter=delimiter, lineterminator="\n")
    writer.writerow(["id", "sequence"])
    writer.writerows([record.id, record.seq] for record in records)


def write_csv(out: TextIO, records: Iterable[Record]) -> None:
    """Write records as comma-separated values with an ``id,sequence`` header."""
    _write_delimited(out, records, ",")


def write_tsv(out: TextIO, records: Iterable[Record]) -> None:
    """Write records as tab-separated values with an ``id``/``sequence`` header."""
    _write_delimited(out, records, "\t")


def write_xml(out: TextIO, records: Iterable[Record]) -> None:
    """Write records as a ``<records>`` XML document."""
    out.write('<?xml version="1.0" encoding="UTF-8"?>\n')
    out.write("<records>\n")
    for record in records:
        out.write("  <record>\n")
        out.write(f"    <id>{record.id}</id>\n")
        out.write(f"    <sequence>{record.seq}</sequence>\n")
        out.write("  </record>\n")
    out.write("</records>\n")


_WRITERS = {
    "json": write_json,
    "csv": write_csv,
    "tsv": write_tsv,
    "xml": write_xml,
    "fasta": write_fasta,
    "fa": write_fasta,
    "fna": write_fasta,
}


def write_records(out: TextIO, records: Iterable[Record], fmt: str) -> None:
    """Write records in the format named by ``fmt`` (a file extension)."""
    writer = _WRITERS.get(fmt.lower())
    if writer is None:
        raise UnsupportedFormatError(fmt.lower())
    writer(out, records)