"""
Dense transition tables and vectorized matching.

The frozen DFA maps state ids to per-symbol dicts. For batch work the same
structure is laid out as an int64 array indexed by (state row, symbol
column); state ids and symbols are sorted to fix the axes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from pydfa.core.dfa import DFA


@dataclass(frozen=True)
class TransitionTable:
    """Row-indexed transition table of a DFA."""

    table: np.ndarray
    state_ids: tuple[int, ...]
    symbols: tuple[str, ...]
    initial_row: int
    final_rows: np.ndarray

    def __post_init__(self):
        self.table.flags.writeable = False
        self.final_rows.flags.writeable = False


@dataclass
class SamplingSpec:
    """Parameters for sampling random test strings."""

    n_strings: int
    max_length: int
    extra_symbols: tuple[str, ...] = ()
    seed: Optional[int] = None

    def __post_init__(self):
        if self.n_strings <= 0:
            raise ValueError("n_strings must be > 0")
        if self.max_length < 0:
            raise ValueError("max_length must be >= 0")
        if any(len(symbol) != 1 for symbol in self.extra_symbols):
            raise ValueError("extra_symbols must be single characters")


def transition_table(dfa: DFA) -> TransitionTable:
    state_ids = tuple(sorted(dfa.state_ids))
    symbols = tuple(sorted(dfa.alphabet))
    row_of = {state_id: row for row, state_id in enumerate(state_ids)}

    table = np.empty((len(state_ids), len(symbols)), dtype=np.int64)
    for row, state_id in enumerate(state_ids):
        for col, symbol in enumerate(symbols):
            table[row, col] = row_of[dfa.transitions[state_id][symbol]]

    final_rows = np.array(
        [state_id in dfa.final_states for state_id in state_ids], dtype=bool
    )
    return TransitionTable(
        table=table,
        state_ids=state_ids,
        symbols=symbols,
        initial_row=row_of[dfa.initial_state],
        final_rows=final_rows,
    )


def _encode(strings: Sequence[str], symbols: tuple[str, ...]) -> np.ndarray:
    # -1 pads short strings, -2 marks symbols outside the alphabet
    col_of = {symbol: col for col, symbol in enumerate(symbols)}
    width = max((len(s) for s in strings), default=0)
    codes = np.full((len(strings), width), -1, dtype=np.int64)
    for i, s in enumerate(strings):
        codes[i, : len(s)] = [col_of.get(symbol, -2) for symbol in s]
    return codes


def accepts_batch(dfa: DFA, strings: Sequence[str]) -> np.ndarray:
    """
    Run many strings through the DFA at once.

    Args:
        dfa: A frozen DFA.
        strings: Strings to test.

    Returns:
        Boolean array, True where the string is accepted. Agrees with
        dfa.is_valid_string element-wise.
    """
    tt = transition_table(dfa)
    codes = _encode(strings, tt.symbols)

    current = np.full(len(strings), tt.initial_row, dtype=np.int64)
    alive = np.ones(len(strings), dtype=bool)

    for step in range(codes.shape[1]):
        column = codes[:, step]
        alive &= column != -2
        moving = alive & (column >= 0)
        current[moving] = tt.table[current[moving], column[moving]]

    return alive & tt.final_rows[current]


def sample_strings(
    alphabet: Sequence[str],
    spec: SamplingSpec,
) -> list[str]:
    """
    Draw random strings over `alphabet` plus any extra symbols.

    Lengths are uniform in 0..max_length. A spec with a seed always yields
    the same strings; without one, each call draws fresh OS entropy.
    """
    symbols = sorted(set(alphabet) | set(spec.extra_symbols))
    if not symbols:
        raise ValueError("alphabet must not be empty")

    rng = np.random.default_rng(spec.seed)
    lengths = rng.integers(0, spec.max_length + 1, size=spec.n_strings)
    strings = []
    for length in lengths:
        picks = rng.integers(0, len(symbols), size=int(length))
        strings.append("".join(symbols[i] for i in picks))
    return strings
