# vertex.py

from PyQt5.QtCore import QPointF
from typing import Tuple

class Vertex:
    """Scene-side handle of one node: where it is drawn and whether it is shown."""
    __slots__ = ("_slot", "_at", "_shown")

    def __init__(self, slot: int, at: QPointF):
        self._slot = slot
        self._at = QPointF(at)
        self._shown = True

    def getIndex(self) -> int:
        """Slot in the owning scene's vertex list."""
        return self._slot

    def getPosition(self) -> QPointF:
        return QPointF(self._at)

    def setPosition(self, at: QPointF) -> None:
        self._at = QPointF(at)

    def pos_tuple(self) -> Tuple[float, float]:
        return self._at.x(), self._at.y()

    def isVisible(self) -> bool:
        return self._shown

    def setVisible(self, shown: bool) -> None:
        self._shown = shown

    def __repr__(self) -> str:
        state = "shown" if self._shown else "hidden"
        return f"V({self._slot}, {state})"
