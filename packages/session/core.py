"""
Interactive session loop.

- run_session: show the menu, read a choice, apply it, repeat until exit.
- apply_choice: one step of the loop; returns (new_state, keep_running).

State is threaded through explicitly; the loop itself holds nothing else.
These functions are UI-agnostic (I/O goes through `ask`/`write`), so the CLI,
tests, or another front end can drive them unchanged.
"""

from __future__ import annotations

from typing import List, Tuple

from .commands import EXIT_CHOICE, LIST_CHOICE, get_command
from .io import Ask, Write, InvalidLetterError, format_matches, prompt_choice, prompt_letter, render_menu
from .state import SessionState

CANCELLED = "No valid character entered; command cancelled."


def apply_choice(
        state: SessionState,
        choice: str,
        dictionary: List[str],
        *,
        ask: Ask,
        write: Write,
) -> Tuple[SessionState, bool]:
    """
    Run the command for `choice` against `state`.

    Returns:
        (state after the command, False if the session should end)

    Any choice outside the menu ends the session, same as 'x'.
    """
    if choice == LIST_CHOICE:
        for line in format_matches(state.candidates(dictionary)):
            write(line)
        return state, True

    command = get_command(choice)
    if choice == EXIT_CHOICE or command is None:
        return state, False

    try:
        ch = prompt_letter(ask, write)
    except InvalidLetterError:
        write(CANCELLED)
        return state, True
    return command(state, ch), True


def run_session(
        dictionary: List[str],
        *,
        ask: Ask | None = None,
        write: Write | None = None,
        state: SessionState | None = None,
) -> SessionState:
    """
    Drive the menu loop until the user exits or input ends (EOF).

    Returns the final state (handy for tests and callers that want a summary).
    """
    ask = ask or input
    write = write or print
    state = state if state is not None else SessionState()
    running = True
    while running:
        for line in render_menu(state):
            write(line)
        try:
            choice = prompt_choice(ask)
            state, running = apply_choice(state, choice, dictionary, ask=ask, write=write)
        except EOFError:
            write("")
            running = False
    return state
