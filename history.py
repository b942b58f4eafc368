# history.py
from typing import List, Optional, Tuple

from graph import Graph

class GraphHistory:
    """
    Stack of whole-graph snapshots, one pushed before each contraction step.
    - _stack: snapshots in push order; later entries have fewer nodes
    Popping returns the graph as it was one contraction step earlier.
    """

    def __init__(self):
        self._stack: List[Graph] = []

    # -------- basic ops --------
    def clear(self):
        self._stack.clear()

    def push(self, graph: Graph):
        """Store a copy of graph; the caller keeps mutating its own instance."""
        if self._stack and graph.nodeCount() >= self._stack[-1].nodeCount():
            raise ValueError(
                f"History must shrink: pushing {graph.nodeCount()} nodes "
                f"over {self._stack[-1].nodeCount()}"
            )
        self._stack.append(graph.copy())

    def pop(self) -> Optional[Graph]:
        if not self._stack:
            return None
        return self._stack.pop()

    def peek(self) -> Optional[Graph]:
        return self._stack[-1] if self._stack else None

    def __len__(self) -> int:
        return len(self._stack)

    def __bool__(self) -> bool:
        return bool(self._stack)

    # -------- queries --------
    def getSizes(self) -> Tuple[int, ...]:
        """Node counts of the stored snapshots, oldest first."""
        return tuple(g.nodeCount() for g in self._stack)

    # -------- integrity check --------
    def validate(self) -> bool:
        """Node counts strictly decrease in push order."""
        sizes = self.getSizes()
        return all(a > b for a, b in zip(sizes, sizes[1:]))
