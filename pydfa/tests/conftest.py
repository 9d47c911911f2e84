"""
Pytest configuration and fixtures for pydfa tests.

Provides the example automata and a temporary description file writer.
"""

import pytest


@pytest.fixture
def ab_star_dfa():
    """DFA for (ab)*, with final state 0 and dead state 2."""
    from pydfa.examples import make_ab_star_dfa
    return make_ab_star_dfa()


@pytest.fixture
def ab_star_a_dfa():
    """DFA for ab*a, with final state 2 and dead state 4."""
    from pydfa.examples import make_ab_star_a_dfa
    return make_ab_star_a_dfa()


@pytest.fixture
def dfa_file(tmp_path):
    """Write a description to a temporary file and return its path."""
    def _write(text, name="machine.dfa"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
