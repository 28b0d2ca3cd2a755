"""Command-line interface for tidyseq."""
