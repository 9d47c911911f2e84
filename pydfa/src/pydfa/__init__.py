"""
pydfa: read DFA descriptions and test strings against them.

    >>> from pydfa import DFABuilder
    >>> dfa = DFABuilder.from_string("0\\n0 a 0\\n").build()
    >>> dfa.is_valid_string("aaa")
    True
"""

from pydfa.core import (
    DFA,
    INITIAL_STATE,
    BuildFailure,
    DFABuilder,
    DFAParseError,
    EmptyStream,
    ExpectedChar,
    ExpectedInt,
    InvalidEncoding,
    InvalidAutomaton,
    MalformedLine,
    NonIntegralFinalState,
    State,
    Transition,
    is_valid,
)

__version__ = "0.1.0"
