from functools import reduce
from operator import and_

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.graphs import (
    DisjointSet,
    construct_distanced_sequence,
    count_complete_components,
    find_all_recipes,
    minimum_cost,
)

FULL_MASK = (1 << 17) - 1


def test_distanced_sequence_worked_example():
    assert construct_distanced_sequence(3) == [3, 1, 2, 3, 2]


def test_distanced_sequence_second_example():
    assert construct_distanced_sequence(5) == [5, 3, 1, 4, 3, 5, 2, 4, 2]


@pytest.mark.parametrize("n", range(1, 9))
def test_distanced_sequence_is_valid(n):
    seq = construct_distanced_sequence(n)
    assert len(seq) == 2 * n - 1
    assert seq.count(1) == 1
    assert seq[0] == n
    for value in range(2, n + 1):
        positions = [i for i, v in enumerate(seq) if v == value]
        assert len(positions) == 2
        assert positions[1] - positions[0] == value


def test_distanced_sequence_rejects_zero():
    with pytest.raises(ValueError):
        construct_distanced_sequence(0)


def test_recipes_from_supplies():
    result = find_all_recipes(["bread"], [["yeast", "flour"]], ["yeast", "flour", "corn"])
    assert result == ["bread"]


def test_recipes_chain_in_dependency_order():
    recipes = ["burger", "sandwich", "bread"]
    ingredients = [["sandwich", "meat", "bread"], ["bread", "meat"], ["yeast", "flour"]]
    supplies = ["yeast", "flour", "meat"]
    assert find_all_recipes(recipes, ingredients, supplies) == ["bread", "sandwich", "burger"]


def test_recipes_cycle_and_missing_are_excluded():
    recipes = ["a", "b", "c"]
    ingredients = [["b"], ["a"], ["salt", "pepper"]]
    assert find_all_recipes(recipes, ingredients, ["salt"]) == []


def test_recipes_length_mismatch_raises():
    with pytest.raises(ValueError):
        find_all_recipes(["a", "b"], [["x"]], ["x"])


def test_complete_components_worked_example():
    assert count_complete_components(6, [[0, 1], [0, 2], [1, 2], [3, 4]]) == 3


@given(st.integers(min_value=0, max_value=30))
def test_isolated_nodes_are_complete(n):
    assert count_complete_components(n, []) == n


@given(st.integers(min_value=1, max_value=8))
def test_clique_is_one_complete_component(m):
    edges = [[u, v] for u in range(m) for v in range(u + 1, m)]
    assert count_complete_components(m, edges) == 1


@given(st.integers(min_value=3, max_value=20))
def test_path_is_not_complete(n):
    assert count_complete_components(n, [[0, 1], [1, 2]]) == n - 3


def test_disjoint_set_union_and_cost():
    ds = DisjointSet(4)
    assert ds.cost(2) == FULL_MASK
    ds.union(0, 1, 12)
    ds.union(1, 2, 10)
    assert ds.find(0) == ds.find(2)
    assert ds.find(3) != ds.find(0)
    assert ds.cost(0) == 12 & 10


def test_disjoint_set_same_component_edge_lowers_cost():
    ds = DisjointSet(2)
    ds.union(0, 1, 7)
    ds.union(1, 0, 5)
    assert ds.cost(1) == 7 & 5


def test_minimum_cost_disconnected_and_isolated():
    result = minimum_cost(3, [[0, 1, 6]], [[0, 2], [2, 2], [1, 0]])
    assert result == [-1, FULL_MASK, 6]


@given(st.lists(st.integers(min_value=0, max_value=100000), min_size=1, max_size=10))
def test_minimum_cost_is_and_of_chain(weights):
    n = len(weights) + 1
    edges = [[i, i + 1, w] for i, w in enumerate(weights)]
    result = minimum_cost(n, edges, [[0, n - 1], [n - 1, 0]])
    expected = reduce(and_, weights)
    assert result == [expected, expected]