from __future__ import annotations

import numpy as np
from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import breadth_first_order

from pydfa.analysis.table import transition_table
from pydfa.core.dfa import DFA


def adjacency_matrix(dfa: DFA) -> csr_matrix:
    """Sparse state-to-state adjacency; entry (i, j) counts the symbols leading from row i to row j."""
    tt = transition_table(dfa)
    n_states, n_symbols = tt.table.shape

    rows = np.repeat(np.arange(n_states, dtype=np.int64), n_symbols)
    cols = tt.table.ravel()
    data = np.ones(rows.size, dtype=np.int64)
    # Duplicate (row, col) entries are summed by csr_matrix
    return csr_matrix((data, (rows, cols)), shape=(n_states, n_states))


def reachable_states(dfa: DFA) -> frozenset[int]:
    """State ids reachable from the initial state (including it)."""
    tt = transition_table(dfa)
    order = breadth_first_order(
        adjacency_matrix(dfa),
        tt.initial_row,
        directed=True,
        return_predecessors=False,
    )
    return frozenset(tt.state_ids[row] for row in order)
