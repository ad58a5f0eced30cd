"""
Module: calculator.combinations

Purpose:
    Sizing of the pass/fail search space. The subsets themselves come from
    ``itertools.combinations``, which emits them in lexicographic input order.

Key Functions:
    - count_subsets_up_to(): Number of subsets of size 0..limit
"""

from __future__ import annotations

from math import comb


def count_subsets_up_to(n: int, limit: int) -> int:
    """
    Count subsets of an ``n``-element set with size ``0..min(limit, n)``.

    Returns 1 (the empty subset) when ``limit <= 0``.
    """
    upper = min(max(limit, 0), max(n, 0))
    return sum(comb(n, r) for r in range(upper + 1))
