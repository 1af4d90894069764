import math

import pytest

from tsp_heuristics import NearestNeighbor, TSPInstance, TwoOpt, tour_length
from tsp_heuristics.two_opt import two_opt_swap


def test_two_opt_swap_reverses_inclusive_segment():
    assert two_opt_swap([0, 1, 2, 3, 4], 1, 3) == [0, 3, 2, 1, 4]
    assert two_opt_swap([0, 1, 2], 1, 2) == [0, 2, 1]


def test_square_stays_on_perimeter():
    inst = TSPInstance.from_coords([(0, 0), (1, 1), (1, 0), (0, 1)])
    res = TwoOpt(inst.cities).run()
    assert res.length == pytest.approx(4.0)
    assert res.tour[0] == res.tour[-1] == 0


@pytest.mark.parametrize("seed", [3, 11, 2024])
def test_never_worse_than_nearest_neighbor(seed):
    inst = TSPInstance.random_euclidean(n=14, seed=seed)
    nn = NearestNeighbor(inst.cities).run()
    res = TwoOpt(inst.cities).run()
    assert res.length <= nn.length
    assert res.history_best_lengths[0] == pytest.approx(nn.length)


def test_history_is_non_increasing(random_instance):
    solver = TwoOpt(random_instance.cities)
    res = solver.run()
    hist = res.history_best_lengths
    assert all(b <= a for a, b in zip(hist, hist[1:]))
    assert hist[-1] == res.length
    assert solver.history_best_tours[-1] == res.open_tour


def test_result_is_a_local_optimum(random_instance):
    res = TwoOpt(random_instance.cities).run()
    tour = res.open_tour
    n = len(tour)
    for i in range(1, n - 1):
        for j in range(i + 1, n):
            assert tour_length(two_opt_swap(tour, i, j), random_instance.cities) >= res.length


def test_permutation_and_reported_length(random_instance):
    res = TwoOpt(random_instance.cities).run()
    assert res.tour[0] == res.tour[-1] == 0
    assert sorted(res.open_tour) == list(range(random_instance.n_cities()))
    assert res.length == pytest.approx(tour_length(res.open_tour, random_instance.cities))


def test_small_inputs(two_cities):
    assert TwoOpt([]).run().tour == []
    res = TwoOpt(two_cities).run()
    assert res.tour == [0, 1, 0]
    assert res.length == 10.0


def test_five_city_regression(five_cities):
    # one accepted move in the first sweep (reverse positions 3..4), none in the second
    nn = NearestNeighbor(five_cities).run()
    res = TwoOpt(five_cities).run()
    assert res.tour == [0, 1, 2, 4, 3, 0]
    assert res.length == pytest.approx(3 * math.sqrt(2) + math.sqrt(5) + 3.0)
    assert res.length < nn.length
    assert len(res.history_best_lengths) == 3
