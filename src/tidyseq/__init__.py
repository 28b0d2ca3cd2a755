"""TIDYSEQ

Small, stateless helpers over fixed-size sequences and text: reversing and
transforming sequences in place, and splitting, joining, trimming, casing and
reversing strings. Preconditions are checked through `tidyseq.contracts`.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
