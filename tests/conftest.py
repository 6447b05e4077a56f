from __future__ import annotations

import random
from collections.abc import Iterator

import pytest

from mazestack.grid.layer import Layer
from mazestack.util import rng


@pytest.fixture(autouse=True)
def seeded_rng_streams() -> Iterator[None]:
    """Give every test the same freshly seeded generator streams."""
    rng.init(12345)
    yield
    rng.init(12345)


@pytest.fixture
def seeded() -> random.Random:
    return random.Random(20240601)


@pytest.fixture
def ring_layer() -> Layer:
    """5x5 layer: a ring of path cells around a central wall."""
    return Layer(
        [
            [1, 1, 1, 1, 1],
            [1, 0, 0, 0, 1],
            [1, 0, 1, 0, 1],
            [1, 0, 0, 0, 1],
            [1, 1, 1, 1, 1],
        ]
    )
