"""Convert sequence records between FASTA, JSON, CSV, TSV and XML, and report GC content and length statistics."""

__version__ = "0.1.0"