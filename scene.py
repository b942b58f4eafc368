# scene.py
"""
The drawing layer the puzzle drives.

`Scene` is the contract; the real renderer lives outside this package.
`MemoryScene` keeps everything in plain Python objects and is what the
headless runner and the tests use.
"""

from abc import ABC, abstractmethod
from PyQt5.QtCore import QPointF
from typing import List, Optional, Tuple

from vertex import Vertex


class Scene(ABC):
    @abstractmethod
    def create_node(self, position: QPointF):
        """Create a drawable node at `position` and return its handle."""

    @abstractmethod
    def hide(self, handle) -> None:
        ...

    @abstractmethod
    def show(self, handle) -> None:
        ...

    @abstractmethod
    def is_visible(self, handle) -> bool:
        ...

    @abstractmethod
    def position_of(self, handle) -> Optional[QPointF]:
        """Current position, or None for hidden or unknown handles."""

    @abstractmethod
    def set_position(self, handle, position: QPointF) -> None:
        ...

    @abstractmethod
    def create_edge(self, handle_a, handle_b) -> None:
        ...

    @abstractmethod
    def destroy_edges(self) -> None:
        ...

    @abstractmethod
    def clear(self) -> None:
        """Drop every node and edge (new level)."""


class MemoryScene(Scene):
    def __init__(self):
        self.vertices: List[Vertex] = []
        self.edges: List[Tuple[Vertex, Vertex]] = []

    def _owns(self, handle) -> bool:
        idx = handle.getIndex()
        return 0 <= idx < len(self.vertices) and self.vertices[idx] is handle

    def create_node(self, position: QPointF) -> Vertex:
        v = Vertex(len(self.vertices), position)
        self.vertices.append(v)
        return v

    def hide(self, handle: Vertex) -> None:
        handle.setVisible(False)

    def show(self, handle: Vertex) -> None:
        handle.setVisible(True)

    def is_visible(self, handle: Vertex) -> bool:
        return self._owns(handle) and handle.isVisible()

    def position_of(self, handle: Vertex) -> Optional[QPointF]:
        if not self.is_visible(handle):
            return None
        return handle.getPosition()

    def set_position(self, handle: Vertex, position: QPointF) -> None:
        handle.setPosition(position)

    def create_edge(self, handle_a: Vertex, handle_b: Vertex) -> None:
        self.edges.append((handle_a, handle_b))

    def destroy_edges(self) -> None:
        self.edges.clear()

    def clear(self) -> None:
        self.vertices.clear()
        self.edges.clear()

    # --- Stats (used by the CLI) ---
    def get_stats(self):
        shown = sum(1 for v in self.vertices if v.isVisible())
        return {
            "handles": len(self.vertices),
            "visible": shown,
            "hidden": len(self.vertices) - shown,
            "edges": len(self.edges),
        }
