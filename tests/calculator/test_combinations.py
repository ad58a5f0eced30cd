"""
Unit Tests for search space sizing
"""

import pytest

from gpa_toolkit.calculator.combinations import count_subsets_up_to


class TestCountSubsets:
    """Tests for count_subsets_up_to."""

    @pytest.mark.parametrize("n,limit,expected", [
        (4, 2, 11),
        (3, 5, 8),
        (3, 0, 1),
        (3, -1, 1),
        (0, 3, 1),
        (20, 20, 2 ** 20),
    ])
    def test_counts(self, n, limit, expected):
        assert count_subsets_up_to(n, limit) == expected
