"""Reading of FASTA files."""

from __future__ import annotations

import os
from typing import Iterable, Iterator

from .models import Record


def iter_fasta(lines: Iterable[str]) -> Iterator[Record]:
    """Yield records from FASTA lines.

    Sequence lines are stripped and joined. Sequence text that appears
    before any named header is carried over into the first named record.
    """
    current_id = ""
    current_seq: list[str] = []
    for raw in lines:
        line = raw.removesuffix("\n").removesuffix("\r")
        if line.startswith(">"):
            if current_id:
                yield Record(current_id, "".join(current_seq))
                current_seq = []
            current_id = line[1:]
        else:
            current_seq.append(line.strip())
    if current_id:
        yield Record(current_id, "".join(current_seq))


def parse_fasta(path: str | os.PathLike[str]) -> list[Record]:
    """Read every record from the FASTA file at ``path``."""
    with open(path, encoding="utf-8", newline="") as handle:
        return list(iter_fasta(handle))