import os

os.environ.setdefault("MPLBACKEND", "Agg")

import numpy as np
import pytest

from polyclip.core.geometry import Point64, PointD


def make_path64(coords):
    return [Point64(x, y) for x, y in coords]


def make_pathd(coords):
    return [PointD(float(x), float(y)) for x, y in coords]


@pytest.fixture
def square():
    return make_path64([(0, 0), (10, 0), (10, 10), (0, 10)])


@pytest.fixture
def square_d():
    return make_pathd([(0, 0), (1, 0), (1, 1), (0, 1)])


@pytest.fixture
def overlapping_squares():
    a = make_path64([(0, 0), (10, 0), (10, 10), (0, 10)])
    b = make_path64([(5, 5), (15, 5), (15, 15), (5, 15)])
    return a, b


@pytest.fixture
def rng():
    return np.random.default_rng(20221)
