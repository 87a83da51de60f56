"""GC content of sequences."""

from __future__ import annotations

import math
import os
import sys
from typing import TextIO

from .converter import load_records


def gc_content(seq: str) -> float:
    """Return the GC percentage (0.0 to 100.0) of ``seq``.

    The length is counted in UTF-8 bytes. An empty sequence gives NaN.
    """
    length = len(seq.encode("utf-8"))
    gc = sum(1 for base in seq if base in "GCgc")
    if length == 0:
        return math.nan
    return gc / length * 100.0


def _fixed2(value: float) -> str:
    """Format ``value`` with two decimals, spelling NaN and infinities consistently."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return f"{value:.2f}"


def run_gc(path: str | os.PathLike[str], out: TextIO | None = None) -> None:
    """Print the GC content of every record in the file at ``path``."""
    stream = sys.stdout if out is None else out
    for record in load_records(path):
        stream.write(f">{record.id} - GC Content: {_fixed2(gc_content(record.seq))}%\n")