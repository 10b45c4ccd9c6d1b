from __future__ import annotations
from functools import partial
from typing import Callable, Dict

from packages.engine import WORD_LENGTH
from .state import SessionState

# A letter command takes the current state and the entered letter.
LetterCommand = Callable[[SessionState, str], SessionState]

# ---- Menu choice registry ----
REGISTRY: Dict[str, LetterCommand] = {}

LIST_CHOICE = "l"
EXIT_CHOICE = "x"


def register(choice: str) -> Callable[[LetterCommand], LetterCommand]:
    """
    Decorator: @register("c") binds a letter command to a menu choice.
    """
    def deco(fn: LetterCommand) -> LetterCommand:
        if choice in REGISTRY or choice in (LIST_CHOICE, EXIT_CHOICE):
            raise ValueError(f"Duplicate menu choice: {choice}")
        REGISTRY[choice] = fn
        return fn
    return deco


@register("c")
def add_required(state: SessionState, ch: str) -> SessionState:
    return state.add_required(ch)


@register("u")
def remove_required(state: SessionState, ch: str) -> SessionState:
    return state.remove_required(ch)


@register("i")
def add_excluded(state: SessionState, ch: str) -> SessionState:
    return state.add_excluded(ch)


@register("n")
def remove_excluded(state: SessionState, ch: str) -> SessionState:
    return state.remove_excluded(ch)


def set_position(state: SessionState, ch: str, *, index: int) -> SessionState:
    return state.set_position(index, ch)


# Menu digits are 1-based.
for _i in range(WORD_LENGTH):
    register(str(_i + 1))(partial(set_position, index=_i))
del _i


def get_command(choice: str) -> LetterCommand | None:
    """Letter command bound to `choice`, or None if it doesn't take a letter."""
    return REGISTRY.get(choice)
