"""
Constraint state for one interactive session.

SessionState is immutable: every update returns a new instance, so command
handlers are plain functions state -> state and nothing lives in globals.
Required/excluded letters behave like sets (no duplicates) but keep the order
they were entered in, which is the order the menu displays them.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from packages.engine import WORD_LENGTH, filter_words


def _add(letters: Tuple[str, ...], ch: str) -> Tuple[str, ...]:
    return letters if ch in letters else letters + (ch,)


def _remove(letters: Tuple[str, ...], ch: str) -> Tuple[str, ...]:
    return tuple(c for c in letters if c != ch)


@dataclass(frozen=True)
class SessionState:
    positions: Tuple[Optional[str], ...] = (None,) * WORD_LENGTH
    required: Tuple[str, ...] = ()
    excluded: Tuple[str, ...] = ()

    def set_position(self, index: int, ch: str) -> "SessionState":
        """Fix `ch` at 0-based `index`, overwriting whatever was there."""
        if not 0 <= index < WORD_LENGTH:
            raise ValueError(f"position index must be in 0..{WORD_LENGTH - 1}; got {index}")
        slots = list(self.positions)
        slots[index] = ch
        return replace(self, positions=tuple(slots))

    def add_required(self, ch: str) -> "SessionState":
        return replace(self, required=_add(self.required, ch))

    def remove_required(self, ch: str) -> "SessionState":
        return replace(self, required=_remove(self.required, ch))

    def add_excluded(self, ch: str) -> "SessionState":
        return replace(self, excluded=_add(self.excluded, ch))

    def remove_excluded(self, ch: str) -> "SessionState":
        return replace(self, excluded=_remove(self.excluded, ch))

    def candidates(self, dictionary: List[str]) -> List[str]:
        """Words from `dictionary` still consistent with this state."""
        return filter_words(dictionary, self.required, self.excluded, self.positions)

    def pattern(self) -> str:
        """Known positions as shown in the menu, e.g. '_ a _ _ e '."""
        return "".join(f"{ch or '_'} " for ch in self.positions)
