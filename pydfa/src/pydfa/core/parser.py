from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union

from pydfa.core.errors import (
    ExpectedChar,
    ExpectedInt,
    InvalidEncoding,
    MalformedLine,
    NonIntegralFinalState,
)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Transition:
    source: int
    symbol: str
    target: int


def _parse_int(token: str) -> Optional[int]:
    # int() alone would also take "1_000" and non-ASCII digits
    if _INT_PATTERN.fullmatch(token) is None:
        return None
    return int(token)


def iter_content_lines(
    readable: Iterable[Union[str, bytes]],
) -> Iterator[tuple[int, str]]:
    """
    Yield (1-based line number, trimmed line) for every non-blank line.

    Raises:
        InvalidEncoding: A line is not valid UTF-8, either as bytes given
            here or as reported by a text stream while decoding it.
    """
    lines = iter(readable)
    line_number = 0
    while True:
        line_number += 1
        try:
            raw = next(lines)
            if isinstance(raw, bytes):
                raw = raw.decode("utf-8")
        except StopIteration:
            return
        except UnicodeDecodeError as e:
            raise InvalidEncoding(
                f"cannot decode byte {e.object[e.start:e.start + 1]!r} as UTF-8",
                line_number=line_number,
            ) from e

        line = raw.strip()
        if line:
            yield line_number, line


def parse_final_states(line: str, line_number: Optional[int] = None) -> tuple[int, ...]:
    final_states = []
    for token in line.split():
        state_id = _parse_int(token)
        if state_id is None:
            raise NonIntegralFinalState(
                f"final state id {token!r} is not an integer",
                line_number=line_number,
                line=line,
            )
        final_states.append(state_id)
    return tuple(final_states)


def parse_transition(line: str, line_number: Optional[int] = None) -> Transition:
    """
    Decode a `<from> <symbol> <to>` line.

    Args:
        line: A trimmed, non-empty transition line.
        line_number: Position of the line in its input, for error messages.

    Returns:
        The decoded Transition.

    Raises:
        MalformedLine: The line does not hold exactly 3 tokens.
        ExpectedInt: The source or target token is not an integer.
        ExpectedChar: The symbol token is longer than one character.
    """
    tokens = line.split()
    if len(tokens) != 3:
        raise MalformedLine(
            f"expected 3 tokens, got {len(tokens)}",
            line_number=line_number,
            line=line,
        )

    source_token, symbol, target_token = tokens

    source = _parse_int(source_token)
    if source is None:
        raise ExpectedInt(
            f"source state {source_token!r} is not an integer",
            line_number=line_number,
            line=line,
        )
    if len(symbol) != 1:
        raise ExpectedChar(
            f"symbol {symbol!r} is not a single character",
            line_number=line_number,
            line=line,
        )
    target = _parse_int(target_token)
    if target is None:
        raise ExpectedInt(
            f"target state {target_token!r} is not an integer",
            line_number=line_number,
            line=line,
        )

    return Transition(source=source, symbol=symbol, target=target)
