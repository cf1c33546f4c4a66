"""Graph and grid algorithms."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence


def find_redundant_connection(edges: Iterable[Sequence[int]]) -> list[int]:
    """Return the first edge that joins two already connected nodes.

    Returns an empty list when no edge closes a cycle.
    """
    graph: dict[int, list[int]] = {}

    def connected(start: int, goal: int) -> bool:
        seen: set[int] = set()
        stack = [start]
        while stack:
            node = stack.pop()
            if node in seen:
                continue
            seen.add(node)
            if node == goal:
                return True
            stack.extend(graph.get(node, ()))
        return False

    for u, v in edges:
        if u in graph and v in graph and connected(u, v):
            return [u, v]
        graph.setdefault(u, []).append(v)
        graph.setdefault(v, []).append(u)
    return []


def check_if_prerequisite(
    num_courses: int,
    prerequisites: Iterable[Sequence[int]],
    queries: Iterable[Sequence[int]],
) -> list[bool]:
    """For each (a, b) query, whether course ``a`` is a prerequisite of ``b``.

    Prerequisites are transitive.
    """

    def check(course: int) -> int:
        if not 0 <= course < num_courses:
            raise ValueError(f"course {course} is out of range")
        return course

    reachable: list[set[int]] = [set() for _ in range(num_courses)]
    for before, after in prerequisites:
        reachable[check(after)].add(check(before))
    for middle in range(num_courses):
        for required in reachable:
            if middle in required:
                required |= reachable[middle]
    return [check(before) in reachable[check(after)] for before, after in queries]


def maximum_invitations(favorites: Sequence[int]) -> int:
    """Most people that fit round a table, each seated next to their favourite."""
    n = len(favorites)
    in_degree = [0] * n
    for favourite in favorites:
        in_degree[favourite] += 1

    chain = [0] * n
    visited = [False] * n
    queue = deque(person for person, degree in enumerate(in_degree) if degree == 0)
    while queue:
        person = queue.popleft()
        visited[person] = True
        favourite = favorites[person]
        chain[favourite] = max(chain[favourite], chain[person] + 1)
        in_degree[favourite] -= 1
        if in_degree[favourite] == 0:
            queue.append(favourite)

    largest_cycle = 0
    paired = 0
    for start in range(n):
        if visited[start]:
            continue
        length = 0
        person = start
        while not visited[person]:
            visited[person] = True
            person = favorites[person]
            length += 1
        if length == 2:
            paired += 2 + chain[start] + chain[favorites[start]]
        else:
            largest_cycle = max(largest_cycle, length)
    return max(largest_cycle, paired)


def _groups_in_component(adjacency: list[list[int]], component: list[int]) -> int:
    deepest = 0
    for start in component:
        depth = {start: 0}
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbour in adjacency[node]:
                if neighbour not in depth:
                    depth[neighbour] = depth[node] + 1
                    deepest = max(deepest, depth[neighbour])
                    queue.append(neighbour)
    return deepest + 1


def magnificent_sets(n: int, edges: Iterable[Sequence[int]]) -> int:
    """Most groups the nodes 1..n can be split into so every edge joins adjacent groups.

    Returns -1 when the graph is not bipartite.
    """
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[u - 1].append(v - 1)
        adjacency[v - 1].append(u - 1)

    colour = [-1] * n
    components: list[list[int]] = []
    for start in range(n):
        if colour[start] != -1:
            continue
        colour[start] = 0
        component = [start]
        stack = [start]
        while stack:
            node = stack.pop()
            for neighbour in adjacency[node]:
                if colour[neighbour] == colour[node]:
                    return -1
                if colour[neighbour] == -1:
                    colour[neighbour] = 1 - colour[node]
                    component.append(neighbour)
                    stack.append(neighbour)
        components.append(component)

    return sum(_groups_in_component(adjacency, component) for component in components)


def find_max_fish(grid: Sequence[Sequence[int]]) -> int:
    """Largest total of fish in one 4-connected region of positive cells.

    The grid is left unchanged.
    """
    seen: set[tuple[int, int]] = set()
    best = 0
    for r, row in enumerate(grid):
        for c, fish in enumerate(row):
            if fish <= 0 or (r, c) in seen:
                continue
            total = 0
            seen.add((r, c))
            stack = [(r, c)]
            while stack:
                x, y = stack.pop()
                total += grid[x][y]
                for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)):
                    if (
                        0 <= nx < len(grid)
                        and 0 <= ny < len(grid[nx])
                        and grid[nx][ny] > 0
                        and (nx, ny) not in seen
                    ):
                        seen.add((nx, ny))
                        stack.append((nx, ny))
            best = max(best, total)
    return best