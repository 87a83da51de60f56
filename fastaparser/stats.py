"""Length and GC summary statistics with histogram plots."""

from __future__ import annotations

import math
import os
import statistics
import sys
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, TextIO

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from .converter import load_records
from .gc import _fixed2, gc_content
from .models import Record

_WIDTH_PX = 800
_HEIGHT_PX = 600
_DPI = 100


@dataclass(frozen=True)
class SequenceStats:
    """Summary of sequence lengths and GC content."""

    count: int
    min_length: int
    max_length: int
    mean_length: float
    median_length: float
    mean_gc: float


def _length(record: Record) -> int:
    return len(record.seq.encode("utf-8"))


def compute_stats(records: Sequence[Record]) -> SequenceStats:
    """Summarise ``records``; raises ValueError when there are none."""
    if not records:
        raise ValueError("no sequences to summarise")
    lengths = [_length(record) for record in records]
    gcs = [gc_content(record.seq) for record in records]
    count = len(records)
    return SequenceStats(
        count=count,
        min_length=min(lengths),
        max_length=max(lengths),
        mean_length=sum(lengths) / count,
        median_length=float(statistics.median(lengths)),
        mean_gc=sum(gcs) / count,
    )


def _round_half_away(value: float) -> int:
    if math.isnan(value):
        return 0
    magnitude = math.floor(abs(value) + 0.5)
    return int(magnitude if value >= 0 else -magnitude)


def gc_bins(records: Sequence[Record]) -> list[int]:
    """Return each record's GC percentage rounded to a whole bin in 0..100."""
    return [
        min(max(_round_half_away(gc_content(record.seq)), 0), 100)
        for record in records
    ]


def _histogram(path: str, values: list[int], x_range: tuple[int, int],
               count: int, title: str, x_label: str, color: str) -> None:
    figure = Figure(figsize=(_WIDTH_PX / _DPI, _HEIGHT_PX / _DPI), dpi=_DPI)
    FigureCanvasAgg(figure)
    axes = figure.add_subplot()
    tally = Counter(values)
    axes.bar(list(tally), list(tally.values()), width=1.0, align="edge", color=color)
    axes.set_title(title, fontsize=24)
    axes.set_xlabel(x_label)
    axes.set_ylabel("Count")
    axes.set_xlim(*x_range)
    axes.set_ylim(0, count)
    figure.savefig(path, facecolor="white")


def plot_histograms(records: Sequence[Record], prefix: str) -> tuple[str, str]:
    """Draw the length and GC% histograms and return the two PNG paths."""
    if not records:
        raise ValueError("no sequences to plot")
    lengths = [_length(record) for record in records]
    count = len(records)
    low, high = min(lengths), max(lengths)

    length_path = f"{prefix}_length_hist.png"
    _histogram(length_path, lengths, (low, high if high > low else low + 1), count,
               "Sequence Length Distribution", "Sequence Length (nt)", "blue")

    gc_path = f"{prefix}_gc_hist.png"
    _histogram(gc_path, gc_bins(records), (0, 100), count,
               "GC Content Distribution", "GC Content (%)", "red")
    return length_path, gc_path


def run_stats(path: str | os.PathLike[str],
              out: TextIO | None = None) -> SequenceStats | None:
    """Print summary statistics for a file and write histograms to the working directory.

    Returns None, after a note on stderr, when the file holds no sequences.
    """
    stream = sys.stdout if out is None else out
    records = load_records(path)
    if not records:
        sys.stderr.write(f'No sequences found in "{os.fspath(path)}"\n')
        return None

    prefix = Path(path).stem or "output"
    summary = compute_stats(records)
    stream.write(f"Sequences: {summary.count}\n")
    stream.write(
        f"Length → min: {summary.min_length}  max: {summary.max_length}  "
        f"mean: {_fixed2(summary.mean_length)}  "
        f"median: {_fixed2(summary.median_length)}\n"
    )
    stream.write(f"Mean GC%: {_fixed2(summary.mean_gc)}\n")
    plot_histograms(records, prefix)
    return summary