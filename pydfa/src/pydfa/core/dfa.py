from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from pydfa.core.errors import InvalidAutomaton
from pydfa.core.validator import (
    INITIAL_STATE,
    check_state_id,
    check_symbol,
    find_build_failure,
)


@dataclass(frozen=True)
class DFA:
    """
    Immutable, validated deterministic finite automaton.

    State 0 is the initial state. The alphabet is derived from the symbols
    used by the transitions. Creating an instance is the freezing step: the
    structure is validated once here and raises InvalidAutomaton if it is
    not a complete DFA, so every live instance satisfies the invariants.
    """

    transitions: Mapping[int, Mapping[str, int]]
    final_states: frozenset[int]
    alphabet: frozenset[str] = field(init=False)

    def __post_init__(self) -> None:
        for state_id, edges in self.transitions.items():
            check_state_id(state_id)
            for symbol, target in edges.items():
                check_symbol(symbol)
                check_state_id(target)
        for state_id in self.final_states:
            check_state_id(state_id)

        # Private copies behind read-only proxies
        frozen = {
            state_id: MappingProxyType(dict(edges))
            for state_id, edges in self.transitions.items()
        }
        object.__setattr__(self, "transitions", MappingProxyType(frozen))
        object.__setattr__(self, "final_states", frozenset(self.final_states))
        object.__setattr__(
            self,
            "alphabet",
            frozenset(symbol for edges in frozen.values() for symbol in edges),
        )

        failure = find_build_failure(self.transitions, self.final_states, self.alphabet)
        if failure is not None:
            raise InvalidAutomaton(failure)

    @property
    def initial_state(self) -> int:
        return INITIAL_STATE

    @property
    def state_ids(self) -> frozenset[int]:
        return frozenset(self.transitions)

    def transition_for(self, state_id: int, symbol: str) -> Optional[int]:
        edges = self.transitions.get(state_id)
        if edges is None:
            return None
        return edges.get(symbol)

    def run(self, text: str) -> Optional[int]:
        """Return the state reached after reading `text`, or None if a symbol is outside the alphabet."""
        current = INITIAL_STATE
        for symbol in text:
            target = self.transitions[current].get(symbol)
            if target is None:
                return None
            current = target
        return current

    def is_valid_string(self, text: str) -> bool:
        """Whether `text` belongs to the language of this automaton."""
        final = self.run(text)
        return final is not None and final in self.final_states

    def _edges(self) -> frozenset[tuple[int, str, int]]:
        return frozenset(
            (state_id, symbol, target)
            for state_id, state_edges in self.transitions.items()
            for symbol, target in state_edges.items()
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DFA):
            return NotImplemented
        return (
            self.final_states == other.final_states
            and self.state_ids == other.state_ids
            and self._edges() == other._edges()
        )

    def __hash__(self) -> int:
        return hash((self._edges(), self.final_states))


def is_valid(dfa: DFA, text: str) -> bool:
    return dfa.is_valid_string(text)
