"""
State of a deterministic finite automaton.

A State owns its outgoing transitions: at most one target state id per
symbol. Targets are not checked here; the validator checks them once all
states are known.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional


class State:
    """A DFA node with a symbol -> target state id map."""

    def __init__(self) -> None:
        self._transitions: dict[str, int] = {}

    @property
    def transitions(self) -> Mapping[str, int]:
        return MappingProxyType(self._transitions)

    def add_transition(self, symbol: str, target: int) -> None:
        """
        Add (or overwrite) the transition taken on `symbol`.

        A later transition for the same symbol replaces the earlier one.
        """
        self._transitions[symbol] = target

    def transition_for(self, symbol: str) -> Optional[int]:
        return self._transitions.get(symbol)

    def num_transitions(self) -> int:
        return len(self._transitions)

    def symbols(self) -> frozenset[str]:
        return frozenset(self._transitions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self._transitions == other._transitions

    def __repr__(self) -> str:
        return f"State({self._transitions!r})"
