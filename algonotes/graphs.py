"""Graph algorithms: components, spanning trees, shortest paths and grid islands."""

from collections import deque

__all__ = [
    "INF",
    "count_components",
    "DisjointSet",
    "minimum_spanning_weight",
    "floyd_warshall",
    "format_distances",
    "count_islands",
]

INF = 99999
"""Distance used for vertex pairs with no connecting edge."""

_HEADER = "The following matrix shows the shortest distances between every pair of vertices \n"


def count_components(n, edges):
    """Count connected components of an undirected graph on vertices ``0 .. n-1``."""
    adjacency = [[] for _ in range(n)]
    for a, b in edges:
        if not (0 <= a < n and 0 <= b < n):
            raise ValueError(f"edge ({a}, {b}) has a vertex outside 0..{n - 1}")
        adjacency[a].append(b)
        adjacency[b].append(a)
    seen = [False] * n
    components = 0
    for start in range(n):
        if seen[start]:
            continue
        components += 1
        seen[start] = True
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            for neighbour in adjacency[vertex]:
                if not seen[neighbour]:
                    seen[neighbour] = True
                    queue.append(neighbour)
    return components


class DisjointSet:
    """Union-find with union by size and path compression."""

    def __init__(self, elements):
        self._parent = {x: x for x in elements}
        self._size = {x: 1 for x in self._parent}

    def __contains__(self, x):
        return x in self._parent

    def find(self, x):
        """Return the representative of the set holding ``x``."""
        if x not in self._parent:
            raise KeyError(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, a, b):
        """Merge the sets of ``a`` and ``b``; return False if already merged."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self._size[ra] <= self._size[rb]:
            self._parent[ra] = rb
            self._size[rb] += self._size[ra]
        else:
            self._parent[rb] = ra
            self._size[ra] += self._size[rb]
        return True


def minimum_spanning_weight(vertex_count, edges):
    """Return the total weight of a minimum spanning forest (Kruskal).

    Vertices are numbered ``1 .. vertex_count``; edges are ``(u, v, w)``.
    """
    sets = DisjointSet(range(1, vertex_count + 1))
    total = 0
    for u, v, w in sorted(edges, key=lambda edge: edge[2]):
        if u not in sets or v not in sets:
            raise ValueError(f"edge ({u}, {v}) has a vertex outside 1..{vertex_count}")
        if sets.union(u, v):
            total += w
    return total


def floyd_warshall(graph):
    """Return all-pairs shortest distances for a square matrix using ``INF`` for no edge."""
    dist = [list(row) for row in graph]
    n = len(dist)
    if any(len(row) != n for row in dist):
        raise ValueError("graph must be a square matrix")
    for k in range(n):
        row_k = dist[k]
        for row in dist:
            via = row[k]
            for j in range(n):
                if via + row_k[j] < row[j]:
                    row[j] = via + row_k[j]
    return dist


def format_distances(dist):
    """Render a distance matrix as text, writing ``INF`` for unreachable pairs."""
    lines = [_HEADER]
    for row in dist:
        cells = "".join("INF\t " if d == INF else f"{d}\t " for d in row)
        lines.append(cells + "\n")
    return "".join(lines)


def count_islands(grid):
    """Count groups of truthy cells joined through any of their 8 neighbours."""
    rows = len(grid)
    visited = set()
    islands = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if not cell or (r, c) in visited:
                continue
            islands += 1
            visited.add((r, c))
            stack = [(r, c)]
            while stack:
                cr, cc = stack.pop()
                for dr in (-1, 0, 1):
                    for dc in (-1, 0, 1):
                        nr, nc = cr + dr, cc + dc
                        if (
                            (dr or dc)
                            and 0 <= nr < rows
                            and 0 <= nc < len(grid[nr])
                            and grid[nr][nc]
                            and (nr, nc) not in visited
                        ):
                            visited.add((nr, nc))
                            stack.append((nr, nc))
    return islands