"""Graph and backtracking algorithms: sequences, dependency resolution and components."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Sequence

_FULL_MASK = (1 << 17) - 1


def construct_distanced_sequence(n: int) -> list[int]:
    """Return the lexicographically largest sequence where 1 occurs once and each ``i`` in 2..n
    occurs twice, exactly ``i`` positions apart.

    Raises ValueError if ``n`` is less than 1.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    size = 2 * n - 1
    result = [0] * size
    used = [False] * (n + 1)

    def place(index: int) -> bool:
        while index < size and result[index]:
            index += 1
        if index == size:
            return True
        for number in range(n, 0, -1):
            if used[number]:
                continue
            partner = index if number == 1 else index + number
            if partner >= size or result[partner]:
                continue
            result[index] = result[partner] = number
            used[number] = True
            if place(index + 1):
                return True
            result[index] = result[partner] = 0
            used[number] = False
        return False

    place(0)
    return result


def find_all_recipes(
    recipes: Sequence[str],
    ingredients: Sequence[Sequence[str]],
    supplies: Sequence[str],
) -> list[str]:
    """Return the recipes that can be made from the supplies, in the order they become available.

    Raises ValueError if ``recipes`` and ``ingredients`` differ in length.
    """
    if len(recipes) != len(ingredients):
        raise ValueError("each recipe needs exactly one ingredient list")
    available = set(supplies)
    waiting: defaultdict[str, list[int]] = defaultdict(list)
    missing = [0] * len(recipes)
    for index, needs in enumerate(ingredients):
        for item in needs:
            if item not in available:
                waiting[item].append(index)
                missing[index] += 1

    ready = deque(index for index, count in enumerate(missing) if count == 0)
    made: list[str] = []
    while ready:
        index = ready.popleft()
        made.append(recipes[index])
        for dependant in waiting.get(recipes[index], ()):
            missing[dependant] -= 1
            if missing[dependant] == 0:
                ready.append(dependant)
    return made


def count_complete_components(n: int, edges: Sequence[Sequence[int]]) -> int:
    """Return how many connected components of the undirected graph are complete graphs."""
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)

    visited = [False] * n
    complete = 0
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        stack = [start]
        size = degree_sum = 0
        while stack:
            node = stack.pop()
            size += 1
            degree_sum += len(adjacency[node])
            for neighbour in adjacency[node]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append(neighbour)
        if degree_sum // 2 == size * (size - 1) // 2:
            complete += 1
    return complete


class DisjointSet:
    """Union-find over ``0..n-1`` that tracks the bitwise AND of edge weights per component."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._rank = [0] * n
        self._cost = [_FULL_MASK] * n

    def find(self, x: int) -> int:
        """Return the representative of the set containing ``x``."""
        parent = self._parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, x: int, y: int, weight: int) -> None:
        """Join the sets of ``x`` and ``y`` through an edge of the given weight."""
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            self._cost[root_x] &= weight
            return
        if self._rank[root_x] < self._rank[root_y]:
            root_x, root_y = root_y, root_x
        elif self._rank[root_x] == self._rank[root_y]:
            self._rank[root_x] += 1
        self._parent[root_y] = root_x
        self._cost[root_x] &= self._cost[root_y] & weight

    def cost(self, x: int) -> int:
        """Return the AND of all edge weights in the component of ``x``."""
        return self._cost[self.find(x)]


def minimum_cost(
    n: int,
    edges: Sequence[Sequence[int]],
    queries: Sequence[Sequence[int]],
) -> list[int]:
    """Answer each ``[u, v]`` query with the least AND-cost of a walk from u to v, or -1."""
    components = DisjointSet(n)
    for u, v, weight in edges:
        components.union(u, v, weight)
    return [
        components.cost(u) if components.find(u) == components.find(v) else -1
        for u, v in queries
    ]