from .dictionary import (
    DictionaryReport, load_dictionary, pretty_summary, resolve_dictionary_path, skipped_warning,
)
from .io import read_lines, write_lines

__all__ = [
    "DictionaryReport", "load_dictionary", "pretty_summary", "resolve_dictionary_path",
    "skipped_warning", "read_lines", "write_lines",
]
