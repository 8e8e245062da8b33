from __future__ import annotations

from collections import deque
from typing import Callable, Optional

import numpy as np
from scipy.sparse import coo_matrix, csr_matrix
from scipy.sparse.csgraph import breadth_first_order

from pydfa.core.types import DFA


def is_empty(dfa: DFA, on_visit: Optional[Callable[[int], None]] = None) -> bool:
    """
    True iff no final state is reachable from dfa.start.

    Breadth-first from the start state; returns False as soon as a final
    state is dequeued. on_visit, if given, is called with every dequeued
    state.
    """
    n_symbols = len(dfa.alphabet)
    queue = deque([dfa.start])
    visited = {dfa.start}

    while queue:
        state = queue.popleft()
        if on_visit is not None:
            on_visit(state)

        if state in dfa.finals:
            return False

        for target in dfa.transitions[state, :n_symbols]:
            target = int(target)
            if target not in visited:
                visited.add(target)
                queue.append(target)

    return True


def transition_graph(dfa: DFA) -> csr_matrix:
    """Adjacency matrix; entry (s, t) counts the symbols leading from s to t."""
    n = dfa.n_states
    n_symbols = len(dfa.alphabet)
    row = np.repeat(np.arange(n, dtype=np.int64), n_symbols)
    col = dfa.transitions[:n, :n_symbols].ravel()
    data = np.ones(row.size, dtype=np.int64)
    coo = coo_matrix((data, (row, col)), shape=(n, n), dtype=np.int64)
    return csr_matrix(coo)


def reachable_states(dfa: DFA) -> frozenset[int]:
    order = breadth_first_order(
        transition_graph(dfa),
        dfa.start,
        directed=True,
        return_predecessors=False,
    )
    return frozenset(int(s) for s in order)
