"""
Dictionary loading for the Wordle helper.

What this module does:
- Read the candidate word list (one word per line) once at startup.
- Normalize each entry: strip surrounding whitespace, lowercase.
- Drop blank lines silently; skip entries that aren't WORD_LENGTH long and
  record them so the caller can warn about them.
- Keep everything else as-is: order is preserved and duplicates are kept.

Typical use:
    from packages.datasets import load_dictionary, pretty_summary
    rep = load_dictionary("packages/datasets/data/dictionary_5.txt")
    print(pretty_summary(rep))
    words = rep.words
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional, Tuple

from packages.engine.validation import WORD_LENGTH
from .io import numbered, read_lines

# Environment variable that points the helper at an alternate word list.
DICTIONARY_ENV = "WORDLE_HELPER_DICTIONARY"

# Bundled word list, resolved relative to this package so it works from any cwd.
DEFAULT_DICTIONARY_PATH = Path(__file__).resolve().parent / "data" / "dictionary_5.txt"


@dataclass
class DictionaryReport:
    """Loaded words plus what had to be left out."""
    path: str
    words: List[str] = field(default_factory=list)
    skipped: List[Tuple[int, str]] = field(default_factory=list)  # (line_no, entry)

    @property
    def count(self) -> int:
        return len(self.words)


def resolve_dictionary_path(cli_value: Optional[str] = None,
                            environ: Optional[Mapping[str, str]] = None) -> Path:
    """
    Pick the dictionary file: CLI option, then $WORDLE_HELPER_DICTIONARY,
    then the bundled default.
    """
    if cli_value:
        return Path(cli_value)
    env = os.environ if environ is None else environ
    if env.get(DICTIONARY_ENV):
        return Path(env[DICTIONARY_ENV])
    return DEFAULT_DICTIONARY_PATH


def load_dictionary(path: Path | str, N: int = WORD_LENGTH) -> DictionaryReport:
    """
    Load words from `path`.

    Raises FileNotFoundError if the file is missing; the session can't run
    without words, so callers treat this as fatal.
    """
    rep = DictionaryReport(path=str(path))
    for line_no, raw in numbered(read_lines(path)):
        w = raw.strip().lower()
        if not w:
            continue
        if len(w) != N:
            rep.skipped.append((line_no, raw))
            continue
        rep.words.append(w)
    return rep


def skipped_warning(report: DictionaryReport, limit: int = 5) -> str:
    """
    One-line warning for skipped entries, or "" if nothing was skipped.

    Example:
        warning: skipped 2 entries of length != 5 in words.txt (e.g., line 3: 'cat', line 9: 'planet')
    """
    if not report.skipped:
        return ""
    examples = ", ".join(f"line {n}: {e!r}" for n, e in report.skipped[:limit])
    return (
        f"warning: skipped {len(report.skipped)} entries of length != {WORD_LENGTH} "
        f"in {report.path} (e.g., {examples})"
    )


def pretty_summary(report: DictionaryReport) -> str:
    """
    Compact one-liner for the console.

    Example:
        dictionary=packages/datasets/data/dictionary_5.txt | words=2315 | skipped=0
    """
    return f"dictionary={report.path} | words={report.count} | skipped={len(report.skipped)}"
