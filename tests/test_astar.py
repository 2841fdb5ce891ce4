import pytest

from agvnav.astar import GRID_COLUMNS, GRID_ROWS, NODE_COUNT, AStar, Node


def _adjacent(a, b):
    return abs(a.x - b.x) + abs(a.y - b.y) == 1


def test_grid_nodes_are_unique_and_inside_bounds():
    astar = AStar()
    nodes = [astar.node(i) for i in range(NODE_COUNT)]
    positions = {(n.x, n.y) for n in nodes}
    assert len(positions) == NODE_COUNT
    assert all(0 <= x < GRID_COLUMNS and 0 <= y < GRID_ROWS for x, y in positions)
    assert [n.id for n in nodes] == list(range(NODE_COUNT))


def test_start_and_goal_defaults():
    astar = AStar()
    assert astar.start is astar.node(0)
    assert astar.goal is astar.node(NODE_COUNT - 1)
    assert (astar.start.x, astar.start.y) == (0, 0)


def test_node_out_of_range_raises():
    astar = AStar()
    with pytest.raises(IndexError):
        astar.node(NODE_COUNT)
    with pytest.raises(IndexError):
        astar.node(-1)


def test_f_cost_sums_costs():
    node = Node(id=0, x=0, y=0, g_cost=3, h_cost=4)
    assert node.f_cost() == 7


def test_path_from_start_to_goal_is_connected():
    astar = AStar()
    path = astar.find_path(astar.start, astar.goal)
    assert path[0] is astar.start
    assert path[-1] is astar.goal
    assert all(_adjacent(a, b) for a, b in zip(path, path[1:]))
    assert len({n.id for n in path}) == len(path)
    assert len(path) >= 6


def test_path_to_adjacent_node():
    astar = AStar()
    path = astar.find_path(astar.node(0), astar.node(1))
    assert [n.id for n in path] == [0, 1]


def test_path_to_self_is_single_node():
    astar = AStar()
    start = astar.node(0)
    assert astar.find_path(start, start) == [start]


def test_unreachable_goal_gives_empty_path():
    astar = AStar()
    astar.node(1).blocked = True
    astar.node(4).blocked = True
    assert astar.find_path(astar.start, astar.goal) == []


def test_blocked_nodes_are_avoided():
    astar = AStar()
    for node_id in (5, 6):
        astar.node(node_id).blocked = True
    path = astar.find_path(astar.start, astar.goal)
    ids = [n.id for n in path]
    assert ids[0] == 0 and ids[-1] == 11
    assert 5 not in ids and 6 not in ids
    assert all(_adjacent(a, b) for a, b in zip(path, path[1:]))


def test_start_gets_zero_g_cost():
    astar = AStar()
    astar.find_path(astar.start, astar.goal)
    assert astar.start.g_cost == 0