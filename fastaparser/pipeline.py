"""Conversion of a FASTA file to another format."""

from __future__ import annotations

import os
from typing import TextIO

from .parser import parse_fasta
from .writer import write_csv, write_fasta, write_json, write_tsv, write_xml

_WRITERS = {
    "json": write_json,
    "csv": write_csv,
    "tsv": write_tsv,
    "xml": write_xml,
}


def run(path: str | os.PathLike[str], fmt: str, out: TextIO) -> None:
    """Read the FASTA file at ``path`` and write it to ``out`` as ``fmt``.

    Any format name other than json, csv, tsv or xml writes FASTA.
    """
    records = parse_fasta(path)
    _WRITERS.get(fmt, write_fasta)(out, records)