"""
Unit tests for the dollar-game rules.
"""

import logging
import random

import pytest

from edge_list_graph import EdgeListGraph
from graph import DuplicateEdge
from nodes import DollarNode
from puzzle import NOT_APPLICABLE, Difficulty, DollarGame, distribution
from stochastic.partition import RandomPartitioner


def triangle(amounts=(0, 0, 0), seed=0) -> DollarGame:
    game = DollarGame(partitioner=RandomPartitioner(random.Random(seed)))
    ids = [game.add_node(a) for a in amounts]
    game.connect(ids[0], ids[1])
    game.connect(ids[1], ids[2])
    game.connect(ids[2], ids[0])
    return game


def amounts(game: DollarGame):
    return [game.amount(i) for i in game.graph.node_ids()]


@pytest.mark.parametrize(
    "setting,expected",
    [
        ("1", Difficulty.VERY_EASY),
        ("2", Difficulty.EASY),
        ("3", Difficulty.CHALLENGING),
        ("4", Difficulty.NOT_ALWAYS_POSSIBLE),
    ],
)
def test_difficulty_from_setting(setting, expected):
    assert Difficulty.from_setting(setting) is expected


def test_difficulty_offsets():
    assert [d.value for d in Difficulty] == [2, 1, 0, -1]


def test_unknown_difficulty_rejected():
    with pytest.raises(ValueError):
        Difficulty.from_setting("9")
    with pytest.raises(ValueError):
        Difficulty.from_name("impossible")
    assert Difficulty.from_name(" easy ") is Difficulty.EASY


def test_min_above_max_rejected():
    with pytest.raises(ValueError):
        DollarGame(min_amount=3, max_amount=2)


def test_connect_reports_duplicates():
    game = triangle()
    assert isinstance(game.connect(1, 0), DuplicateEdge)


def test_target_sum_adds_genus_when_connected():
    game = triangle()
    assert game.target_sum(Difficulty.CHALLENGING) == 1
    assert game.target_sum(Difficulty.VERY_EASY) == 3
    assert game.target_sum(Difficulty.NOT_ALWAYS_POSSIBLE) == 0


def test_target_sum_without_connection_is_offset_only():
    game = DollarGame()
    game.add_node()
    game.add_node()
    assert game.target_sum(Difficulty.EASY) == 1


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_randomize_fills_nodes_with_target_sum(difficulty):
    game = triangle(seed=3)
    values = game.randomize(difficulty)

    assert values is not None
    assert amounts(game) == values
    assert game.count() == game.target_sum(difficulty)
    assert all(game.min_amount <= v <= game.max_amount for v in values)


def test_randomize_is_reproducible_with_seed():
    assert triangle(seed=5).randomize(Difficulty.EASY) == triangle(seed=5).randomize(Difficulty.EASY)


def test_randomize_infeasible_leaves_board_alone(caplog):
    game = DollarGame(min_amount=0, max_amount=0)
    a = game.add_node(4)
    b = game.add_node(4)
    game.connect(a, b)

    with caplog.at_level(logging.ERROR, logger="puzzle"):
        assert game.randomize(Difficulty.VERY_EASY) is None
    assert amounts(game) == [4, 4]
    assert "Unable to spread" in caplog.text


def test_randomize_empty_board_is_infeasible():
    assert DollarGame().randomize(Difficulty.CHALLENGING) is None


def test_give_moves_one_dollar_along_each_edge():
    game = triangle(amounts=(3, 0, -1))
    assert game.give(0)
    assert amounts(game) == [1, 1, 0]
    assert game.graph.get_node_data(0).give_count == 1
    assert game.count() == 2


def test_take_pulls_one_dollar_along_each_edge():
    game = triangle(amounts=(-2, 1, 1))
    assert game.take(0)
    assert amounts(game) == [0, 0, 0]
    assert game.graph.get_node_data(0).take_count == 1


def test_give_then_take_restores_amounts():
    game = triangle(amounts=(2, -1, 0))
    game.give(1)
    game.take(1)
    assert amounts(game) == [2, -1, 0]


def test_moves_on_unknown_node_fail():
    game = triangle()
    assert not game.give(42)
    assert not game.take(42)


def test_give_on_directed_graph_uses_every_incident_edge():
    graph = EdgeListGraph(directed=True)
    for amount in (2, 0, 0):
        graph.add_node(DollarNode(amount))
    graph.add_edge(0, 1)
    graph.add_edge(2, 0)

    game = DollarGame(graph)
    game.give(0)
    assert amounts(game) == [0, 1, 1]


def test_solved_when_nobody_in_debt():
    game = triangle(amounts=(0, 1, 0))
    assert game.is_solved()

    game = triangle(amounts=(2, -1, 0))
    assert not game.is_solved()
    game.take(1)  # 1 takes from 0 and 2
    assert amounts(game) == [1, 1, -1]
    assert not game.is_solved()
    game.give(0)
    assert amounts(game) == [-1, 2, 0]
    game.give(1)
    assert amounts(game) == [0, 0, 1]
    assert game.is_solved()


def test_count_and_genus_label():
    game = DollarGame()
    assert game.count() is None
    assert game.genus_label() == NOT_APPLICABLE

    game = triangle(amounts=(1, 2, 3))
    assert game.count() == 6
    assert game.genus_label() == "1"

    game.add_node(0)
    assert game.genus_label() == NOT_APPLICABLE


def test_distribution_counts_each_value():
    assert distribution([-1, 0, 0, 2, 7], -1, 2) == [1, 2, 0, 1]
    assert distribution([], 0, 2) == [0, 0, 0]


def test_randomize_skips_nodes_without_payload():
    graph: EdgeListGraph = EdgeListGraph()
    a = graph.add_node(DollarNode(9))
    empty = graph.add_node(None)
    b = graph.add_node(DollarNode(9))
    graph.add_edge(a, empty)
    graph.add_edge(empty, b)
    game = DollarGame(graph, partitioner=RandomPartitioner(random.Random(1)))

    values = game.randomize(Difficulty.EASY)

    assert values is not None
    assert graph.get_node_data(empty) is None
    assert game.amount(a) == values[0]
    assert game.amount(b) == values[2]
