from __future__ import annotations

from typing import Collection, Mapping, Optional

from pydfa.core.errors import BuildFailure

INITIAL_STATE = 0


def find_build_failure(
    transitions: Mapping[int, Mapping[str, int]],
    final_states: Collection[int],
    alphabet: Collection[str],
) -> Optional[BuildFailure]:
    """
    Return the first DFA invariant the structure breaks, or None.

    Checked in order: initial state present, final states present, every
    state has a transition on every alphabet symbol, every transition
    target is a declared state.
    """
    if INITIAL_STATE not in transitions:
        return BuildFailure.MISSING_INITIAL_STATE
    if not final_states:
        return BuildFailure.NO_FINAL_STATES

    for edges in transitions.values():
        if any(symbol not in edges for symbol in alphabet):
            return BuildFailure.INCOMPLETE_TRANSITIONS

    for edges in transitions.values():
        if any(target not in transitions for target in edges.values()):
            return BuildFailure.DANGLING_TARGET

    return None


def check_state_id(state_id: object) -> None:
    if not isinstance(state_id, int) or isinstance(state_id, bool):
        raise ValueError(f"state ids must be int, got {state_id!r}")


def check_symbol(symbol: object) -> None:
    if not isinstance(symbol, str) or len(symbol) != 1 or symbol.isspace():
        raise ValueError(f"symbols must be single non-whitespace characters, got {symbol!r}")
