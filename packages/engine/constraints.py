"""
Candidate filtering given what the player knows.

Given:
  - a dictionary of words (order matters, duplicates allowed)
  - position constraints: 5 slots, each None or the letter fixed there
  - required letters: present somewhere in the answer
  - excluded letters: absent from the answer entirely

Return:
  - the words consistent with ALL constraints, in dictionary order.

Letter multiplicity is not modelled: requiring 'e' is satisfied by one 'e',
and there is no way to say "exactly two e's".
"""

from __future__ import annotations

from typing import AbstractSet, Iterable, List, Optional, Sequence

from .validation import WORD_LENGTH

# One slot per letter of the word; None (or "") means unconstrained.
Positions = Sequence[Optional[str]]


def _check_positions(positions: Positions) -> None:
    """Guardrail: a position vector must have exactly one slot per letter."""
    if len(positions) != WORD_LENGTH:
        raise ValueError(f"positions must have {WORD_LENGTH} slots; got {len(positions)}")


def matches(word: str, required: AbstractSet[str], excluded: AbstractSet[str],
            positions: Positions) -> bool:
    """
    True if `word` satisfies the position, required and excluded rules.

    Words that aren't exactly WORD_LENGTH long never match.
    """
    if len(word) != WORD_LENGTH:
        return False

    # Positions first: cheapest check, rejects most of the dictionary.
    for i, ch in enumerate(positions):
        if ch and word[i] != ch:
            return False

    letters = set(word)
    if not letters >= required:
        return False

    return letters.isdisjoint(excluded)


def filter_words(dictionary: Iterable[str], required: Iterable[str],
                 excluded: Iterable[str], positions: Positions) -> List[str]:
    """
    Keep only dictionary words consistent with every constraint.

    Args:
      dictionary : iterable of candidate words
      required   : letters that must occur at least once (any iterable)
      excluded   : letters that must not occur at all (any iterable)
      positions  : WORD_LENGTH slots, each None/"" or a required letter

    Returns:
      List[str] of matching words (order and duplicates preserved).

    A letter both required and excluded can never be satisfied, so such a
    state simply yields [].
    """
    _check_positions(positions)
    req = frozenset(required)
    exc = frozenset(excluded)
    return [w for w in dictionary if matches(w, req, exc, positions)]
