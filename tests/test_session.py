import pytest
from packages.session import SessionState, InvalidLetterError, apply_choice, prompt_letter, render_menu, run_session
from packages.session.core import CANCELLED
from packages.session.io import LETTER_ERROR

WORDS = ["apple", "angle", "ample", "table"]


def _script(*answers):
    """An `ask` that replays answers, then behaves like input() at EOF."""
    it = iter(answers)

    def ask(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None
    return ask


def _run(*answers):
    out = []
    state = run_session(WORDS, ask=_script(*answers), write=out.append)
    return state, out


def test_required_letter_then_list():
    state, out = _run("c", "p", "l", "x")
    assert state.required == ("p",)
    assert "apple" in out and "ample" in out and "angle" not in out
    assert "2 possible word(s)." in out


def test_position_command_uses_first_letter_lowercased():
    state, out = _run("1", "Table", "l", "x")
    assert state.positions == ("t", None, None, None, None)
    assert "table" in out and "1 possible word(s)." in out


def test_invalid_letters_reprompt():
    state, out = _run("c", "", "7", "pz", "x")
    assert state.required == ("p",)
    assert out.count(LETTER_ERROR) == 2


def test_contradiction_lists_nothing():
    state, out = _run("c", "z", "i", "z", "l", "x")
    assert state.required == ("z",) and state.excluded == ("z",)
    assert "0 possible word(s)." in out


def test_remove_commands():
    state, _ = _run("c", "a", "c", "b", "u", "a", "i", "q", "n", "q", "x")
    assert state.required == ("b",)
    assert state.excluded == ()


@pytest.mark.parametrize("choice", ["", "x", "X", "?", "quit"])
def test_exit_and_unknown_choices_end_the_session(choice):
    state, out = _run(choice, "c", "p")
    assert state == SessionState()
    # menu shown once, nothing else asked
    assert out.count("Wordle Helper Menu") == 1


def test_eof_ends_the_session():
    state, out = _run("c", "p")
    assert state.required == ("p",)
    assert out.count("Wordle Helper Menu") == 2


def test_prompt_letter_gives_up_after_max_attempts():
    errors = []
    with pytest.raises(InvalidLetterError):
        prompt_letter(_script("1", "2", "3", "a"), errors.append, max_attempts=3)
    assert errors == [LETTER_ERROR] * 3


def test_apply_choice_cancels_on_exhausted_letter_prompt():
    out = []
    state = SessionState().add_required("e")
    new, running = apply_choice(state, "c", WORDS, ask=lambda p: "?", write=out.append)
    assert running is True
    assert new == state
    assert out[-1] == CANCELLED


def test_state_updates_are_immutable_and_set_like():
    s0 = SessionState()
    s1 = s0.add_required("a").add_required("a").add_excluded("b")
    assert s0.required == () and s0.excluded == ()
    assert s1.required == ("a",) and s1.excluded == ("b",)
    assert s1.remove_required("z") == s1  # removing an absent letter is a no-op
    s2 = s1.set_position(4, "e").set_position(4, "y")
    assert s2.positions == (None, None, None, None, "y")
    assert s2.pattern() == "_ _ _ _ y "


def test_set_position_out_of_range():
    with pytest.raises(ValueError):
        SessionState().set_position(5, "a")


def test_state_candidates_uses_filter():
    state = SessionState().set_position(0, "a").add_excluded("g")
    assert state.candidates(WORDS) == ["apple", "ample"]


def test_render_menu_shows_constraints():
    state = SessionState().add_excluded("a").add_excluded("b").add_required("c").set_position(1, "a")
    lines = render_menu(state)
    assert lines[0] == "Wordle Helper Menu"
    assert "Invalid characters: a, b" in lines
    assert "Valid characters: c" in lines
    assert "Word: _ a _ _ _ " in lines


def test_render_menu_hides_empty_letter_lines():
    lines = render_menu(SessionState())
    assert not any(l.startswith(("Invalid", "Valid")) for l in lines)
    assert "Word: _ _ _ _ _ " in lines


def test_choices_are_case_insensitive():
    state, _ = _run(" C ", "p", "X")
    assert state.required == ("p",)
