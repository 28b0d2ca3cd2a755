"""Entrypoints (inbound adapters) for tidyseq.

Expose the library to the outside world through the command line. Parse and
validate inputs, call `tidyseq.arrays` / `tidyseq.text`, and present results.
"""
