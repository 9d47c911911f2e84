"""Example DFA descriptions."""

from __future__ import annotations

from pydfa.core.builder import DFABuilder
from pydfa.core.dfa import DFA

# (ab)*; state 2 is the dead state
AB_STAR = """\
0
0 a 1
0 b 2
1 a 2
1 b 0
2 a 2
2 b 2
"""

# ab*a; state 4 is the dead state
AB_STAR_A = """\
2
0 a 1
0 b 4
1 a 2
1 b 3
2 a 4
2 b 4
3 a 2
3 b 3
4 a 4
4 b 4
"""


def make_ab_star_dfa() -> DFA:
    return DFABuilder.from_string(AB_STAR).freeze()


def make_ab_star_a_dfa() -> DFA:
    return DFABuilder.from_string(AB_STAR_A).freeze()
