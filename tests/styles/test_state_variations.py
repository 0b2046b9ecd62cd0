"""
Tests for state variation generation and weighting.
"""

from itertools import combinations

import pytest

from stylecascade.styles.state_variations import (
    create_state_variations,
    get_state_variation_weight,
    sort_state_variations,
)


class TestCreateStateVariations:
    """Test cases for create_state_variations."""

    def test_two_states(self):
        assert set(create_state_variations(["active", "checked"])) == {"active", "checked", "active.checked"}

    def test_three_states(self):
        """Test that three states produce seven distinct ordered compounds."""
        states = ["a", "b", "c"]
        result = create_state_variations(states)

        assert len(result) == 7
        assert len(set(result)) == 7
        for variation in result:
            parts = variation.split(".")
            assert set(parts) <= set(states)
            assert parts == sorted(parts, key=states.index)

    @pytest.mark.parametrize("count", [1, 2, 4, 6])
    def test_every_subset_once(self, count):
        """Test that exactly the non-empty subsets are produced."""
        states = [f"s{i}" for i in range(count)]
        expected = {
            ".".join(subset)
            for size in range(1, count + 1)
            for subset in combinations(states, size)
        }

        result = create_state_variations(states)

        assert len(result) == 2 ** count - 1
        assert set(result) == expected

    def test_head_first_order(self):
        """Test that compounds are grouped by their first state."""
        assert create_state_variations(["a", "b", "c"]) == ["a", "a.b", "a.c", "a.b.c", "b", "b.c", "c"]

    def test_does_not_consume_input(self):
        states = ["a", "b", "c"]
        create_state_variations(states)

        assert states == ["a", "b", "c"]

    def test_tuple_input(self):
        assert create_state_variations(("x",)) == ["x"]


class TestStateVariationWeight:
    """Test cases for weighting and ordering."""

    def test_single_state_weight(self):
        assert get_state_variation_weight("b", ["a", "b"].index) == 2

    def test_compound_weight(self):
        """Test that each part adds its own weight plus the compound length."""
        assert get_state_variation_weight("a.b", ["a", "b"].index) == (0 + 2) + (1 + 2)

    def test_compound_sorted_after_subsets(self):
        states = ["a", "b", "c", "d"]
        result = sort_state_variations(create_state_variations(states), states.index)

        for variation in result:
            parts = variation.split(".")
            for size in range(1, len(parts)):
                for subset in combinations(parts, size):
                    assert result.index(".".join(subset)) < result.index(variation)

    def test_sort_is_ascending(self):
        states = ["a", "b", "c"]
        result = sort_state_variations(create_state_variations(states), states.index)
        weights = [get_state_variation_weight(variation, states.index) for variation in result]

        assert weights == sorted(weights)
