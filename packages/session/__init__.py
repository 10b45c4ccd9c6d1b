from .core import run_session, apply_choice
from .state import SessionState
from .io import InvalidLetterError, prompt_letter, render_menu

__all__ = ["run_session", "apply_choice", "SessionState", "InvalidLetterError",
           "prompt_letter", "render_menu"]
