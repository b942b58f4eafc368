import random

import pytest
from PyQt5.QtCore import QPointF

from graph import Graph


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def path_graph():
    """0-1-2-3-4"""
    return Graph(range(5), [(0, 1), (1, 2), (2, 3), (3, 4)])


def P(x, y):
    return QPointF(float(x), float(y))


def xy(p):
    return (p.x(), p.y())
