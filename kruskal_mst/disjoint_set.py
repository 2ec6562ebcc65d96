import numpy as np

SUBSET_DTYPE = np.dtype([('parent', np.int64), ('rank', np.int64)])


class DisjointSetForest:
    """
    Union-find over the vertices 0..n-1, with path compression and union by rank.

    Subset records live in a single structured array indexed by vertex; each record
    holds the vertex's parent and its rank.
    """
    subsets: np.ndarray

    def __init__(self, n_vertices: int):
        if n_vertices < 0:
            raise ValueError(f'Number of vertices should be an integer >= 0, got {n_vertices}')
        self.subsets = np.zeros(n_vertices, dtype=SUBSET_DTYPE)
        self.subsets['parent'] = np.arange(n_vertices)

    def __len__(self) -> int:
        return len(self.subsets)

    def _check_vertex(self, v: int) -> None:
        if not 0 <= v < len(self.subsets):
            raise IndexError(f'Vertex {v} out of range for forest with {len(self.subsets)} vertices')

    def parent(self, v: int) -> int:
        self._check_vertex(v)
        return int(self.subsets[v]['parent'])

    def rank(self, v: int) -> int:
        self._check_vertex(v)
        return int(self.subsets[v]['rank'])

    def find_root(self, v: int) -> int:
        """
        Return the root of v's component, pointing every vertex on the path directly at the root.
        """
        self._check_vertex(v)
        parents = self.subsets['parent']

        root = v
        while parents[root] != root:
            root = int(parents[root])

        while parents[v] != root:
            next_vertex = int(parents[v])
            parents[v] = root
            v = next_vertex

        return root

    def union(self, x: int, y: int) -> bool:
        """
        Merge the components containing x and y. On equal rank, y's root is attached under x's root.
        :return: True if two distinct components were merged
        """
        x_root = self.find_root(x)
        y_root = self.find_root(y)
        if x_root == y_root:
            return False

        parents = self.subsets['parent']
        ranks = self.subsets['rank']
        if ranks[y_root] < ranks[x_root]:
            parents[y_root] = x_root
        elif ranks[x_root] < ranks[y_root]:
            parents[x_root] = y_root
        else:
            parents[y_root] = x_root
            ranks[x_root] += 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find_root(x) == self.find_root(y)

    def roots(self) -> set[int]:
        return {self.find_root(v) for v in range(len(self.subsets))}

    @property
    def n_components(self) -> int:
        return int(np.count_nonzero(self.subsets['parent'] == np.arange(len(self.subsets))))

    def components(self) -> dict[int, list[int]]:
        groups = {}
        for v in range(len(self.subsets)):
            groups.setdefault(self.find_root(v), []).append(v)
        return groups
