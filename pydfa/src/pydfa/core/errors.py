"""
Error types for parsing and freezing DFA descriptions.

Parse-time errors all derive from DFAParseError (a ValueError) and record
where in the input they happened. Freezing failures are reported through
InvalidAutomaton, tagged with a BuildFailure reason.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class DFAParseError(ValueError):
    """Base class for errors raised while reading a DFA description."""

    default_message = "invalid DFA description"

    def __init__(
        self,
        message: Optional[str] = None,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
    ):
        self.line_number = line_number
        self.line = line
        text = message or self.default_message
        if line_number is not None:
            text = f"line {line_number}: {text}"
        super().__init__(text)


class EmptyStream(DFAParseError):
    """The input held no non-blank lines."""

    default_message = "input contains no DFA description"


class NonIntegralFinalState(DFAParseError):
    """The header line held a token that is not an integer state id."""

    default_message = "final state ids must be integers"


class MalformedLine(DFAParseError):
    """A transition line did not split into exactly three tokens."""

    default_message = "transition lines must have exactly 3 tokens"


class ExpectedChar(DFAParseError):
    """The symbol token of a transition line was longer than one character."""

    default_message = "transition symbol must be a single character"


class ExpectedInt(DFAParseError):
    """A state id token of a transition line was not an integer."""

    default_message = "state ids must be integers"


class InvalidEncoding(DFAParseError):
    """A line of the input is not valid UTF-8."""

    default_message = "input is not valid UTF-8"


class BuildFailure(Enum):
    """Why a parsed description could not be frozen into a DFA."""

    MISSING_INITIAL_STATE = "state 0 has no transitions"
    NO_FINAL_STATES = "no final states declared"
    INCOMPLETE_TRANSITIONS = "a state lacks a transition for some symbol"
    DANGLING_TARGET = "a transition targets an undeclared state"


class InvalidAutomaton(ValueError):
    """A description parsed fine but does not describe a valid DFA."""

    def __init__(self, reason: BuildFailure):
        self.reason = reason
        super().__init__(reason.value)
