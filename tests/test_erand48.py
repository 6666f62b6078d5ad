import pytest
from rand_ext.prng import RandomState, erand48

# srand48(0x1234ABCD) leaves the state at 0x1234ABCD330E
SRAND48_STATE = [0x330E, 0xABCD, 0x1234]
SRAND48_SEQUENCE = [0x657EB7255101, 0xD72A0C966378, 0x5A743C062A23]


def test_erand48_reproduces_drand48_sequence() -> None:
    xseed = list(SRAND48_STATE)
    for expected in SRAND48_SEQUENCE:
        assert erand48(xseed) == expected / 2**48


def test_first_draw_matches_known_value() -> None:
    state = RandomState(SRAND48_STATE)
    assert state.next() == pytest.approx(0.3964647737602753, abs=1e-15)


def test_next_updates_seed_words() -> None:
    state = RandomState(SRAND48_STATE)
    state.next()
    assert state.xseed == [0x5101, 0xB725, 0x657E]


def test_zero_state_advances() -> None:
    state = RandomState([0, 0, 0])
    assert state.next() == 0xB / 2**48
    assert state.xseed == [0xB, 0, 0]


def test_draws_stay_in_unit_interval() -> None:
    state = RandomState.from_seed(0xDEADBEEFCAFE)
    for _ in range(10000):
        value = state.next()
        assert 0.0 <= value < 1.0


def test_from_seed_keeps_low_48_bits() -> None:
    state = RandomState.from_seed(0xFFFF_1234_5678_9ABC)
    assert state.xseed == [0x9ABC, 0x5678, 0x1234]


def test_copy_is_independent() -> None:
    state = RandomState(SRAND48_STATE)
    clone = state.copy()
    state.next()
    assert clone.xseed == SRAND48_STATE
    assert clone != state


@pytest.mark.parametrize("words", [[1, 2], [1, 2, 3, 4], [0x10000, 0, 0], [0, -1, 0]])
def test_invalid_seed_words_rejected(words: list[int]) -> None:
    with pytest.raises(ValueError):
        RandomState(words)
