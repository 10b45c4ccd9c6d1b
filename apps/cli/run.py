# apps/cli/run.py
"""
CLI entry point for the Wordle helper.

This script:
  1) Resolves the dictionary path (--dictionary, then $WORDLE_HELPER_DICTIONARY,
     then the bundled list) and loads it once.
  2) Prints a one-line summary, plus a warning if entries were skipped.
  3) Runs the interactive menu until the user exits.

Usage:
    python -m apps.cli.run
    python -m apps.cli.run --dictionary my_words.txt
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from packages.datasets import load_dictionary, pretty_summary, resolve_dictionary_path, skipped_warning
from packages.datasets.dictionary import DICTIONARY_ENV
from packages.session import run_session

APP_NAME = "Wordle Helper"
APP_VERSION = "1.0.0"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="wordle-helper",
                                 description=f"{APP_NAME}: narrow a word list to possible answers")
    ap.add_argument("-d", "--dictionary",
                    help=f"path to the word list, one word per line (default: ${DICTIONARY_ENV} "
                         f"or the bundled list)")
    ap.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, load the dictionary, and run the session.
    Returns the process exit status.
    """
    args = build_parser().parse_args(argv)

    path = resolve_dictionary_path(args.dictionary)
    try:
        rep = load_dictionary(path)
    except (OSError, UnicodeDecodeError) as e:
        # No words, no session.
        sys.stderr.write(f"error: cannot load dictionary {path}: {e}\n")
        return 1

    print(pretty_summary(rep))
    warning = skipped_warning(rep)
    if warning:
        sys.stderr.write(warning + "\n")
        sys.stderr.flush()

    run_session(rep.words)
    return 0


if __name__ == "__main__":
    sys.exit(main())
