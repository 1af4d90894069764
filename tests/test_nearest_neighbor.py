import math

import pytest

from tsp_heuristics import City, GreedyHeuristic, NearestNeighbor, TSPInstance, tour_length
from tsp_heuristics.nearest_neighbor import nearest_neighbor_order


def test_five_city_regression(five_cities):
    # 0 -> 1 (sqrt 2), 1 -> 2 (sqrt 2), 2 -> 3 ties with 2 -> 4 (sqrt 5, lowest index wins),
    # 3 -> 4 (sqrt 2), 4 -> 0 (sqrt 17)
    res = NearestNeighbor(five_cities).run()
    assert res.tour == [0, 1, 2, 3, 4, 0]
    expected = 3 * math.sqrt(2) + math.sqrt(5) + math.sqrt(17)
    assert res.length == pytest.approx(expected)
    assert res.length == pytest.approx(tour_length(res.open_tour, five_cities))


def test_tie_goes_to_lowest_index():
    cities = [City(0, 0.0, 0.0), City(1, 0.0, 1.0), City(2, 1.0, 0.0), City(3, 0.0, -1.0)]
    order, _ = nearest_neighbor_order(cities)
    assert order[1] == 1


def test_two_cities(two_cities):
    res = NearestNeighbor(two_cities).run()
    assert res.tour == [0, 1, 0]
    assert res.length == 10.0


def test_degenerate_inputs():
    empty = NearestNeighbor([]).run()
    assert empty.tour == [] and empty.length == 0.0
    single = NearestNeighbor([City(0, 3.0, 4.0)]).run()
    assert single.tour == [0, 0] and single.length == 0.0


def test_deterministic(random_instance):
    a = NearestNeighbor(random_instance.cities).run()
    b = NearestNeighbor(random_instance.cities).run()
    assert a == b
    assert a.length == b.length


def test_coincident_cities_give_zero_length():
    cities = [City(i, 1.0, 1.0) for i in range(4)]
    res = NearestNeighbor(cities).run()
    assert res.tour == [0, 1, 2, 3, 0]
    assert res.length == 0.0


def test_nan_coordinates_still_visit_every_city():
    cities = [City(0, 0.0, 0.0), City(1, float("nan"), 1.0), City(2, 2.0, 2.0)]
    res = NearestNeighbor(cities).run()
    assert sorted(res.open_tour) == [0, 1, 2]
    assert math.isnan(res.length)


@pytest.mark.parametrize("seed", [1, 7, 42, 99])
def test_greedy_matches_nearest_neighbor(seed):
    inst = TSPInstance.random_euclidean(n=15, seed=seed)
    nn = NearestNeighbor(inst.cities).run()
    greedy = GreedyHeuristic(inst.cities).run()
    assert greedy.tour == nn.tour
    assert greedy.length == nn.length
