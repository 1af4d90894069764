import pytest

from tsp_heuristics import City, TSPInstance


@pytest.fixture
def five_cities():
    coords = [(0, 0), (1, 1), (2, 2), (3, 0), (4, 1)]
    return [City(id=i, x=float(x), y=float(y)) for i, (x, y) in enumerate(coords)]


@pytest.fixture
def two_cities():
    return [City(id=0, x=0.0, y=0.0), City(id=1, x=5.0, y=0.0)]


@pytest.fixture
def random_instance():
    return TSPInstance.random_euclidean(n=12, seed=2025)
