from __future__ import annotations
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 word-list file into a list of lines without their CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.is_file():
        raise FileNotFoundError(p)
    return p.read_text(encoding="utf-8").splitlines()


def numbered(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    """Pair each line with its 1-based line number (as editors show it)."""
    return enumerate(lines, start=1)


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write one word per line to a UTF-8 file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
