"""A* path search over the fixed grid of floor markers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

GRID_COLUMNS = 4
GRID_ROWS = 3
NODE_COUNT = GRID_COLUMNS * GRID_ROWS
INITIAL_G_COST = 100

# Neighbour order: left, right, up, down.
_MOVES = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(eq=False)
class Node:
    """A marker on the grid together with its search bookkeeping."""

    id: int
    x: int
    y: int
    g_cost: int = INITIAL_G_COST
    h_cost: int = 0
    parent: Optional["Node"] = field(default=None, repr=False)
    blocked: bool = False

    def f_cost(self) -> int:
        """Total estimated cost through this node."""
        return self.g_cost + self.h_cost


class _OpenList:
    """Binary heap of nodes ordered by their live f cost, lowest on top.

    Keys are read at comparison time, so a node whose costs change while it
    sits in the heap is compared with its new values.
    """

    def __init__(self) -> None:
        self._items: List[Node] = []

    def __bool__(self) -> bool:
        return bool(self._items)

    @staticmethod
    def _after(a: Node, b: Node) -> bool:
        return a.f_cost() > b.f_cost()

    def push(self, node: Node) -> None:
        self._items.append(node)
        self._sift_up(len(self._items) - 1, 0, node)

    def pop(self) -> Node:
        items = self._items
        top = items[0]
        value = items.pop()
        if items:
            self._adjust(0, len(items), value)
        return top

    def _sift_up(self, hole: int, top: int, value: Node) -> None:
        items = self._items
        parent = (hole - 1) // 2
        while hole > top and self._after(items[parent], value):
            items[hole] = items[parent]
            hole = parent
            parent = (hole - 1) // 2
        items[hole] = value

    def _adjust(self, hole: int, length: int, value: Node) -> None:
        items = self._items
        top = hole
        child = hole
        while child < (length - 1) // 2:
            child = 2 * (child + 1)
            if self._after(items[child], items[child - 1]):
                child -= 1
            items[hole] = items[child]
            hole = child
        if length % 2 == 0 and child == (length - 2) // 2:
            child = 2 * (child + 1)
            items[hole] = items[child - 1]
            hole = child - 1
        self._sift_up(hole, top, value)


class AStar:
    """Path finder over a 4-column, 3-row grid of markers numbered 0 to 11."""

    def __init__(self) -> None:
        self._grid: List[Node] = [
            Node(id=i, x=i % GRID_COLUMNS, y=i // GRID_COLUMNS)
            for i in range(NODE_COUNT)
        ]
        self.start: Node = self._grid[0]
        self.goal: Node = self._grid[NODE_COUNT - 1]

    def node(self, node_id: int) -> Node:
        """Return the grid node with the given marker id."""
        if not 0 <= node_id < NODE_COUNT:
            raise IndexError(f"no node with id {node_id}")
        return self._grid[node_id]

    @staticmethod
    def _heuristic(current: Node, goal: Node) -> int:
        return abs(current.x - goal.x) + abs(current.y - goal.y)

    def find_path(self, start: Node, goal: Node) -> List[Node]:
        """Return the nodes from start to goal, or an empty list if unreachable."""
        open_list = _OpenList()
        closed = set()

        start.g_cost = 0
        start.h_cost = self._heuristic(start, goal)
        open_list.push(start)

        while open_list:
            current = open_list.pop()
            if current is goal:
                return self._trace(current)

            closed.add(current.id)

            for dx, dy in _MOVES:
                nx, ny = current.x + dx, current.y + dy
                if not (0 <= nx < GRID_COLUMNS and 0 <= ny < GRID_ROWS):
                    continue
                neighbor = self._grid[nx + ny * GRID_COLUMNS]
                if neighbor.blocked or neighbor.id in closed:
                    continue
                neighbor.parent = current
                neighbor.g_cost = current.g_cost + 1
                neighbor.h_cost = self._heuristic(neighbor, goal)
                open_list.push(neighbor)

        return []

    @staticmethod
    def _trace(node: Optional[Node]) -> List[Node]:
        path = []
        while node is not None:
            path.append(node)
            node = node.parent
        path.reverse()
        return path