# fastaparser

A small tool for sequence records: it converts them between FASTA, JSON,
CSV, TSV and XML, prints the GC content of each sequence, and summarises
sequence lengths and GC content with histograms drawn by matplotlib.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
fastaparser INPUT [OUTPUT] [--gc] [--stats]
```

### Converting

The input format comes from the input file's extension (`.fasta`, `.fa`,
`.fna`, `.json`, `.csv`, `.tsv`, `.xml`, in any letter case). The output
format comes from the output file's extension, from the same list. With
no output file, or an output file without an extension, the records are
written as CSV (to standard output when no output file is given).

```
fastaparser reads.fasta reads.json
fastaparser reads.csv reads.fa
fastaparser reads.xml
```

An unknown input or output extension prints `Unsupported input format: ...`
or `Unsupported output format: ...` on standard error and exits with
status 1. A file that cannot be read or parsed prints `Error: ...` and
also exits with status 1.

### GC content

```
fastaparser reads.fasta --gc
```

prints one line per record:

```
>seq1 - GC Content: 50.00%
```

An empty sequence is reported as `NaN%`.

### Statistics

```
fastaparser reads.fasta --stats
```

prints the number of sequences, the minimum, maximum, mean and median
length, and the mean GC%, and writes two 800×600 PNG histograms,
`<name>_length_hist.png` and `<name>_gc_hist.png`, to the current
directory, where `<name>` is the input file name without its extension.
A file with no sequences gives a note on standard error and no plots.

`--stats` takes precedence over `--gc`; with either flag the output
argument is ignored.

## Formats

- FASTA: a `>` line starts a record and gives its id. The lines that
  follow are stripped of surrounding whitespace and joined into the
  sequence. Written FASTA puts each sequence on one line.
- JSON: an array of objects with string `id` and `seq` keys. Written
  JSON is indented by two spaces.
- CSV / TSV: a header row, then the id in the first column and the
  sequence in the second. Blank lines are skipped; a row with a
  different number of fields from the header is an error. Written files
  use the header `id` / `sequence`.
- XML: `<record>` elements, each holding `<id>` and `<sequence>`.
  Records with an empty id or sequence are skipped on reading.

Lengths and GC percentages are computed over the UTF-8 bytes of the
sequence; `G`, `C`, `g` and `c` count as GC.

## Library use

```python
import sys

from fastaparser.converter import load_records
from fastaparser.gc import gc_content
from fastaparser.stats import compute_stats, plot_histograms
from fastaparser.writer import write_records

records = load_records("reads.fasta")
for record in records:
    print(record.id, gc_content(record.seq))

print(compute_stats(records))
plot_histograms(records, "reads")
write_records(sys.stdout, records, "json")
```

- `fastaparser.models.Record` — a dataclass with `id` and `seq`, plus
  `to_dict()` and `Record.from_dict(data)`.
- `fastaparser.parser` — `parse_fasta(path)` and `iter_fasta(lines)`.
- `fastaparser.converter` — `from_json`, `from_csv`, `from_tsv`,
  `from_xml`, `load_records(path)` and `UnsupportedFormatError`, raised
  when the extension is not recognised.
- `fastaparser.writer` — `write_fasta`, `write_json`, `write_csv`,
  `write_tsv`, `write_xml` and `write_records(out, records, fmt)`.
- `fastaparser.gc` — `gc_content(seq)` and `run_gc(path, out=None)`.
- `fastaparser.stats` — `SequenceStats`, `compute_stats(records)`
  (raises `ValueError` for no records), `gc_bins(records)`,
  `plot_histograms(records, prefix)` and `run_stats(path, out=None)`.
- `fastaparser.pipeline.run(path, fmt, out)` — reads a FASTA file and
  writes it as `json`, `csv`, `tsv` or `xml`; any other format name
  writes FASTA.

## Limitations

XML is handled as text rather than through an XML parser: reading
looks for the `<record>`, `<id>` and `<sequence>` tags only, and writing
does not escape special characters in ids or sequences. FASTA sequences
are always written unwrapped on a single line.