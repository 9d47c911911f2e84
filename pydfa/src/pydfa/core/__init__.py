"""Parsing, validation and matching of deterministic finite automata."""

from pydfa.core.builder import DFABuilder
from pydfa.core.dfa import DFA, is_valid
from pydfa.core.errors import (
    BuildFailure,
    DFAParseError,
    EmptyStream,
    ExpectedChar,
    ExpectedInt,
    InvalidEncoding,
    InvalidAutomaton,
    MalformedLine,
    NonIntegralFinalState,
)
from pydfa.core.parser import Transition, parse_final_states, parse_transition
from pydfa.core.state import State
from pydfa.core.validator import INITIAL_STATE
