# graph.py

from edge import Edge
from typing import Dict, Hashable, Iterable, List, Optional, Set


class Graph:
    """
    Simple undirected graph over integer node ids.

    - _adjacency: node id -> set of neighbor ids (symmetric, no self-loops)
    - labels: optional node id -> structural label (the intersection key the
      node was built from); kept through copies for diagnostics only
    """

    def __init__(self, nodes: Iterable[int] = (), edges: Iterable = ()):
        self._adjacency: Dict[int, Set[int]] = {}
        self.labels: Dict[int, Hashable] = {}
        for n in nodes:
            self.addNode(n)
        for e in edges:
            u, v = e
            self.addEdge(u, v)

    # --------------------------
    # Base graph ops
    # --------------------------
    def clear(self):
        self._adjacency.clear()
        self.labels.clear()

    def addNode(self, node: int, label: Optional[Hashable] = None):
        self._adjacency.setdefault(node, set())
        if label is not None:
            self.labels[node] = label

    def addEdge(self, u: int, v: int) -> bool:
        """Add edge (u, v). Returns False if it already existed."""
        edge = Edge(u, v)  # rejects loops
        a, b = edge.key()
        if b in self._adjacency.get(a, set()):
            return False
        self._adjacency.setdefault(a, set()).add(b)
        self._adjacency.setdefault(b, set()).add(a)
        return True

    def removeEdge(self, u: int, v: int) -> bool:
        if v not in self._adjacency.get(u, set()):
            return False
        self._adjacency[u].discard(v)
        self._adjacency[v].discard(u)
        return True

    def removeNode(self, node: int):
        nbrs = self._adjacency.pop(node, None)
        if nbrs is None:
            raise KeyError(f"No node {node} in graph")
        for n in nbrs:
            self._adjacency[n].discard(node)
        self.labels.pop(node, None)

    def hasEdge(self, u: int, v: int) -> bool:
        return v in self._adjacency.get(u, set())

    def getDegree(self, node: int) -> int:
        return len(self._adjacency.get(node, set()))

    def getNeighbors(self, node: int) -> List[int]:
        return sorted(self._adjacency.get(node, set()))

    def getNodes(self) -> List[int]:
        return sorted(self._adjacency)

    def getEdges(self) -> List[Edge]:
        return sorted(Edge(u, v) for u, nbrs in self._adjacency.items() for v in nbrs if u < v)

    def nodeCount(self) -> int:
        return len(self._adjacency)

    def edgeCount(self) -> int:
        return sum(len(nbrs) for nbrs in self._adjacency.values()) // 2

    # --------------------------
    # Snapshots
    # --------------------------
    def copy(self) -> "Graph":
        g = Graph()
        g._adjacency = {n: set(nbrs) for n, nbrs in self._adjacency.items()}
        g.labels = dict(self.labels)
        return g

    def __eq__(self, other) -> bool:
        # Structural equality: same node ids, same edges
        return isinstance(other, Graph) and self._adjacency == other._adjacency

    def __repr__(self) -> str:
        return f"Graph(nodes={self.nodeCount()}, edges={self.edgeCount()})"

    # --------------------------
    # Validation and stats
    # --------------------------
    def get_stats(self):
        degrees = [len(n) for n in self._adjacency.values()]
        return {
            "nodes": len(degrees),
            "edges": self.edgeCount(),
            "min_degree": min(degrees) if degrees else 0,
            "max_degree": max(degrees) if degrees else 0,
        }

    def validate_invariants(self, verbose=False) -> bool:
        ok = True
        for u, nbrs in self._adjacency.items():
            if u in nbrs:
                ok = False
                if verbose: print(f"Self-loop at {u}")
            for v in nbrs:
                if v not in self._adjacency:
                    ok = False
                    if verbose: print(f"Invalid neighbor {v} for {u}")
                    continue
                if u not in self._adjacency[v]:
                    ok = False
                    if verbose: print(f"Asymmetry: {u} has {v}, but {v} missing {u}")
        return ok
