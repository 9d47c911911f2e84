"""
DFABuilder: accumulates a DFA description and freezes it into a DFA.

Input format: the first non-blank line lists the final state ids, every
following non-blank line is a `<from> <symbol> <to>` transition. State 0 is
the initial state. The alphabet is every symbol seen on a transition line.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Iterable, Optional, Union

from pydfa.core.dfa import DFA
from pydfa.core.errors import BuildFailure, EmptyStream, InvalidAutomaton
from pydfa.core.parser import iter_content_lines, parse_final_states, parse_transition
from pydfa.core.state import State
from pydfa.core.validator import check_state_id, check_symbol, find_build_failure


class DFABuilder:
    def __init__(self) -> None:
        self._states: dict[int, State] = {}
        self._final_states: list[int] = []
        self._alphabet: set[str] = set()
        self._consumed = False

    @classmethod
    def from_stream(cls, readable: Iterable[Union[str, bytes]]) -> DFABuilder:
        """
        Read a whole DFA description from an open line stream.

        The stream is read to the end but not closed. Parsing stops at the
        first bad line and its error is raised; nothing is returned then.

        Args:
            readable: Text or binary file object, or any iterable of lines.

        Returns:
            A builder holding every state, transition and final state read.

        Raises:
            TypeError: `readable` is a str or bytes object, not a stream.
            EmptyStream: The stream holds no non-blank line.
            InvalidEncoding: A line is not valid UTF-8.
            NonIntegralFinalState: The header line holds a non-integer token.
            MalformedLine, ExpectedInt, ExpectedChar: A transition line is bad.
        """
        if isinstance(readable, (str, bytes, bytearray)):
            raise TypeError(
                f"from_stream expects a line stream, got {type(readable).__name__}; "
                "use from_string for text"
            )

        lines = iter_content_lines(readable)
        header = next(lines, None)
        if header is None:
            raise EmptyStream()

        builder = cls()
        header_number, header_line = header
        for state_id in parse_final_states(header_line, header_number):
            builder.add_final_state(state_id)

        for line_number, line in lines:
            transition = parse_transition(line, line_number)
            builder.add_transition(transition.source, transition.symbol, transition.target)

        return builder

    @classmethod
    def from_string(cls, text: str) -> DFABuilder:
        return cls.from_stream(io.StringIO(text))

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> DFABuilder:
        if not Path(path).is_file():
            raise FileNotFoundError(f"DFA file not found: {path}")

        # Binary lines, decoded one at a time so errors get a line number
        with open(path, "rb") as f:
            return cls.from_stream(f)

    @property
    def final_states(self) -> tuple[int, ...]:
        return tuple(self._final_states)

    @property
    def alphabet(self) -> frozenset[str]:
        return frozenset(self._alphabet)

    @property
    def state_ids(self) -> frozenset[int]:
        return frozenset(self._states)

    @property
    def num_states(self) -> int:
        return len(self._states)

    def state(self, state_id: int) -> Optional[State]:
        return self._states.get(state_id)

    def add_final_state(self, state_id: int) -> None:
        self._ensure_not_consumed()
        check_state_id(state_id)
        self._final_states.append(state_id)

    def add_transition(self, source: int, symbol: str, target: int) -> None:
        """Record `source --symbol--> target`, creating `source` on first sight."""
        self._ensure_not_consumed()
        check_state_id(source)
        check_symbol(symbol)
        check_state_id(target)
        state = self._states.setdefault(source, State())
        state.add_transition(symbol, target)
        self._alphabet.add(symbol)

    def check(self) -> Optional[BuildFailure]:
        """Return the reason build() would fail, or None if it would succeed."""
        return find_build_failure(self._transition_maps(), self._final_states, self._alphabet)

    def freeze(self) -> DFA:
        """
        Consume the builder and return the frozen DFA.

        Raises:
            InvalidAutomaton: The description breaks a DFA invariant.
            RuntimeError: The builder was already consumed.
        """
        self._ensure_not_consumed()
        self._consumed = True
        return DFA(transitions=self._transition_maps(), final_states=frozenset(self._final_states))

    def build(self) -> Optional[DFA]:
        """Consume the builder; return the frozen DFA, or None if it is not a valid DFA."""
        try:
            return self.freeze()
        except InvalidAutomaton:
            return None

    def _transition_maps(self) -> dict[int, dict[str, int]]:
        return {state_id: dict(state.transitions) for state_id, state in self._states.items()}

    def _ensure_not_consumed(self) -> None:
        if self._consumed:
            raise RuntimeError("builder has already been consumed by build()")
