"""
Lightweight letter validation.

This module answers the question: "Is this user entry a usable letter?"
A letter entry is accepted iff its FIRST character, lower-cased, is in a–z.
Everything after the first character is ignored, so "Apple" reads as 'a'.

Used by the interactive prompt; the filtering core never validates input.
"""

from __future__ import annotations

from typing import Optional
import string

# Single source of truth for word shape.
WORD_LENGTH = 5
ALPHABET = frozenset(string.ascii_lowercase)


def normalize_letter(entry: Optional[str]) -> Optional[str]:
    """
    Return the normalized letter for a free-text `entry`, or None if unusable.

    Examples:
      normalize_letter("E")     -> "e"
      normalize_letter("xyz")   -> "x"
      normalize_letter("")      -> None
      normalize_letter("7a")    -> None
    """
    if not entry:
        return None
    ch = entry[0].lower()
    return ch if ch in ALPHABET else None
