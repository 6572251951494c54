# Makes the folder importable as a package.
# Exports the context extractor and its result types.

from .extract import extract_context
from .types import PathEntry, SpecContext

__all__ = ["extract_context", "PathEntry", "SpecContext"]
