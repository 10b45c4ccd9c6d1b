"""
Console I/O for the interactive session.

Responsibilities:
- render_menu:   the menu text plus the current constraints.
- prompt_choice: read a menu choice (blank -> exit).
- prompt_letter: read one letter a–z with a bounded re-prompt loop.
- format_matches: lines for the "list potential words" command.

Everything takes `ask` (prompt -> answer) and `write` (line -> None) callables
so the session can be driven by `input`/`print` or by a test script.
"""

from __future__ import annotations

from typing import Callable, List

from packages.engine import normalize_letter
from .commands import EXIT_CHOICE
from .state import SessionState

Ask = Callable[[str], str]
Write = Callable[[str], None]

MENU_PROMPT = f"Please choose an action from the menu [{EXIT_CHOICE}]: "
LETTER_PROMPT = "Which character?: "
LETTER_ERROR = "You must enter a single character [a-z]."

# Re-prompts before a letter command gives up.
MAX_LETTER_ATTEMPTS = 10

MENU_LINES = [
    "Wordle Helper Menu",
    "=========================================================",
    "[c] - Set a known, valid character in an unknown position",
    "[u] - Unset a known, valid character",
    "[i] - Set a known, invalid character",
    "[n] - Unset a known, invalid character",
    "[1-5] - Set a known character in a specific space",
    "[l] - List potential words",
    "[x] - Exit",
    "----------------------------------------------------------",
]


class InvalidLetterError(ValueError):
    """Raised when the user never enters a usable letter."""


def render_menu(state: SessionState) -> List[str]:
    lines = list(MENU_LINES)
    if state.excluded:
        lines.append("Invalid characters: " + ", ".join(state.excluded))
    if state.required:
        lines.append("Valid characters: " + ", ".join(state.required))
    lines += ["Word: " + state.pattern(), ""]
    return lines


def prompt_choice(ask: Ask) -> str:
    """Menu choice, normalized; an empty answer means exit."""
    return ask(MENU_PROMPT).strip().lower() or EXIT_CHOICE


def prompt_letter(ask: Ask, write: Write, max_attempts: int = MAX_LETTER_ATTEMPTS) -> str:
    """
    Ask for a letter until one is valid or `max_attempts` answers were rejected.

    Only the first character of an answer counts, so "Apple" gives 'a'.
    Raises InvalidLetterError when attempts run out.
    """
    for _ in range(max_attempts):
        ch = normalize_letter(ask(LETTER_PROMPT))
        if ch is not None:
            return ch
        write(LETTER_ERROR)
    raise InvalidLetterError(f"no valid character after {max_attempts} attempts")


def format_matches(words: List[str]) -> List[str]:
    """One word per line, then a count line."""
    return list(words) + [f"{len(words)} possible word(s)."]
