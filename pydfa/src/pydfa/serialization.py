"""DFA serialization to and from the text description format."""

from pathlib import Path
from typing import Union

from pydfa.core.builder import DFABuilder
from pydfa.core.dfa import DFA


def format_dfa(dfa: DFA) -> str:
    """
    Render a DFA in the format DFABuilder reads.

    The header lists the final states in ascending order; transitions follow,
    sorted by source state and then symbol.
    """
    lines = [" ".join(str(state_id) for state_id in sorted(dfa.final_states))]
    for state_id in sorted(dfa.transitions):
        edges = dfa.transitions[state_id]
        for symbol in sorted(edges):
            lines.append(f"{state_id} {symbol} {edges[symbol]}")
    return "\n".join(lines) + "\n"


def save_dfa(dfa: DFA, path: Union[str, Path]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(format_dfa(dfa))


def load_dfa(path: Union[str, Path]) -> DFA:
    """Load and freeze a DFA from a description file.

    Args:
        path: File path to load from

    Returns:
        The frozen DFA

    Raises:
        FileNotFoundError: If path does not exist
        DFAParseError: If the file is not a well-formed description
        InvalidAutomaton: If the description is not a complete DFA
    """
    return DFABuilder.from_path(path).freeze()
