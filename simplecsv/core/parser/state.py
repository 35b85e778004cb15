"""
Parse state for the tokenizer state machine.

The state is two flags, ``in_quotes`` and ``in_escape``. Every
(state, character class) pair is listed in TRANSITIONS together with the
action the tokenizer performs for it, so the whole machine can be read
(and tested) cell by cell.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .classifier import CharClass


class Action(Enum):
    """What the tokenizer does with a character."""

    QUOTE = auto()  # handle a quote character
    ESCAPE = auto()  # handle an escape character
    LITERAL = auto()  # field data
    END_FIELD = auto()  # emit the current field
    END_RECORD = auto()  # emit the last field and stop


@dataclass(frozen=True)
class Transition:
    """Target state plus the action taken on the way."""

    in_quotes: bool
    in_escape: bool
    action: Action


_Q = CharClass.QUOTE
_E = CharClass.ESCAPE
_S = CharClass.SEPARATOR
_T = CharClass.TERMINATOR
_R = CharClass.REGULAR

# (in_quotes, in_escape, char class) -> Transition
TRANSITIONS: dict[tuple[bool, bool, CharClass], Transition] = {
    # outside quotes
    (False, False, _Q): Transition(True, False, Action.QUOTE),
    (False, False, _E): Transition(False, True, Action.ESCAPE),
    (False, False, _S): Transition(False, False, Action.END_FIELD),
    (False, False, _T): Transition(False, False, Action.END_RECORD),
    (False, False, _R): Transition(False, False, Action.LITERAL),
    # outside quotes, after an escape
    (False, True, _Q): Transition(False, False, Action.QUOTE),
    (False, True, _E): Transition(False, False, Action.ESCAPE),
    (False, True, _S): Transition(False, False, Action.LITERAL),
    (False, True, _T): Transition(False, False, Action.END_RECORD),
    (False, True, _R): Transition(False, False, Action.LITERAL),
    # inside quotes
    (True, False, _Q): Transition(False, False, Action.QUOTE),
    (True, False, _E): Transition(True, True, Action.ESCAPE),
    (True, False, _S): Transition(True, False, Action.LITERAL),
    (True, False, _T): Transition(True, False, Action.LITERAL),
    (True, False, _R): Transition(True, False, Action.LITERAL),
    # inside quotes, after an escape
    (True, True, _Q): Transition(True, False, Action.QUOTE),
    (True, True, _E): Transition(True, False, Action.ESCAPE),
    (True, True, _S): Transition(True, False, Action.LITERAL),
    (True, True, _T): Transition(True, False, Action.LITERAL),
    (True, True, _R): Transition(True, False, Action.LITERAL),
}


@dataclass
class ParseState:
    """Mutable state of one in-progress record parse."""

    in_quotes: bool = False
    in_escape: bool = False

    def quote_found(self) -> None:
        """Toggle quoting, unless the quote is escaped."""
        if not self.in_escape:
            self.in_quotes = not self.in_quotes

    def escape_found(self, seen_escape: bool) -> None:
        """
        Track escaping.

        A seen escape toggles the flag, so two escapes in a row cancel out.
        Any other processed character clears it.
        """
        if seen_escape:
            self.in_escape = not self.in_escape
        else:
            self.in_escape = False

    def reset(self) -> None:
        self.in_quotes = False
        self.in_escape = False

    def lookup(self, char_class: CharClass) -> Transition:
        """Transition for a character of the given class from this state."""
        return TRANSITIONS[(self.in_quotes, self.in_escape, char_class)]

    def enter(self, transition: Transition) -> None:
        """Move to the transition's target state."""
        self.in_quotes = transition.in_quotes
        self.in_escape = transition.in_escape
