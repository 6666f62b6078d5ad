from unittest.mock import Mock

import pytest
from rand_ext.errors import DistributionError, InvalidParameter
from rand_ext.prng import RandomState
from rand_ext.samplers import ZipfianSampler, zipfian

SRAND48_STATE = [0x330E, 0xABCD, 0x1234]


def test_zipfian_known_value() -> None:
    state = RandomState(SRAND48_STATE)
    # the first candidate is rejected, the second accepted as rank 2
    assert zipfian(state, 1, 100, 2.0) == 2
    assert state == RandomState.from_seed(125702061908722)


def test_zipfian_offsets_rank_by_min() -> None:
    state = RandomState(SRAND48_STATE)
    assert zipfian(state, 1001, 1100, 2.0) == 1002


def test_zipfian_single_value_consumes_no_draws() -> None:
    state = RandomState(SRAND48_STATE)
    assert zipfian(state, 5, 5, 2.0) == 5
    assert state.xseed == SRAND48_STATE


@pytest.mark.parametrize("lb,ub,s", [(1, 1000, 1.5), (-50, 50, 2.0), (0, 1, 1.1), (1, 10, 1000.0)])
def test_zipfian_range_bound(lb: int, ub: int, s: float) -> None:
    state = RandomState.from_seed(0x5EED)
    for _ in range(10000):
        assert lb <= zipfian(state, lb, ub, s) <= ub


def test_zipfian_near_parameter_floor() -> None:
    state = RandomState.from_seed(0x5EED)
    for _ in range(200):
        assert 1 <= zipfian(state, 1, 100, 1.001) <= 100


def test_zipfian_largest_parameter_picks_min() -> None:
    state = RandomState.from_seed(3)
    assert all(zipfian(state, 10, 20, 1000.0) == 10 for _ in range(1000))


def test_zipfian_rank_frequencies() -> None:
    state = RandomState.from_seed(0xABCDEF)
    values = [zipfian(state, 1, 100, 2.0) for _ in range(20000)]
    counts = [values.count(rank) for rank in (1, 2, 3)]

    assert counts[0] > counts[1] > counts[2]
    # P(1) = 1 / sum(1 / k**2 for k in 1..100)
    assert counts[0] / len(values) == pytest.approx(0.6116, abs=0.015)
    # P(1) / P(2) = 2**s
    assert counts[0] / counts[1] == pytest.approx(4.0, rel=0.1)


@pytest.mark.parametrize("s", [0.5, 1.0, 1.0009, 1000.1, 1500.0, float("nan")])
def test_zipfian_invalid_parameter(s: float) -> None:
    state = RandomState(SRAND48_STATE)
    with pytest.raises(InvalidParameter, match=r"zipfian parameter must be in range \[1\.001, 1000\]|must be finite"):
        zipfian(state, 1, 100, s)
    assert state.xseed == SRAND48_STATE


def test_zipfian_parameter_bounds_inclusive() -> None:
    state = RandomState(SRAND48_STATE)
    assert 1 <= zipfian(state, 1, 100, 1000.0) <= 100
    assert 1 <= zipfian(state, 1, 100, 1.001) <= 100


def test_zipfian_invalid_parameter_checked_before_single_value_shortcut() -> None:
    with pytest.raises(InvalidParameter):
        zipfian(RandomState(SRAND48_STATE), 5, 5, 0.5)


def test_zipfian_zero_uniform_is_rejected() -> None:
    state = Mock(spec=RandomState)
    # u == 0.0 is an unbounded candidate; the next pair yields rank 1
    state.next.side_effect = [0.0, 0.5, 0.9, 0.0]
    assert ZipfianSampler().sample(state, 1, 10, 2.0) == 1
    assert state.next.call_count == 4


def test_zipfian_overflowing_candidate_is_rejected() -> None:
    state = Mock(spec=RandomState)
    # 0.01 ** -1000 overflows a double
    state.next.side_effect = [0.01, 0.5, 0.9999, 0.0]
    assert ZipfianSampler().sample(state, 1, 10, 1.001) == 1


def test_zipfian_iteration_cap() -> None:
    state = Mock(spec=RandomState)
    state.next.return_value = 0.0

    sampler = ZipfianSampler(max_iterations=25)
    with pytest.raises(DistributionError, match="zipfian sampler did not accept a candidate after 25 iterations"):
        sampler.sample(state, 1, 100, 2.0)
    assert state.next.call_count == 50
