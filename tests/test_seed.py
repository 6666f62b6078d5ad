import pytest
from rand_ext.errors import EntropyUnavailable
from rand_ext.prng import seed


def test_seed_splits_entropy_into_words() -> None:
    raw = (0x1122334455667788).to_bytes(8, "little")
    state = seed(lambda n: raw[:n])
    assert state.xseed == [0x7788, 0x5566, 0x3344]


def test_seed_reads_eight_bytes() -> None:
    requested = []

    def entropy(n: int) -> bytes:
        requested.append(n)
        return bytes(n)

    seed(entropy)
    assert requested == [8]


@pytest.mark.parametrize("error", [OSError("no entropy"), NotImplementedError("no source")])
def test_seed_entropy_failure(error: Exception) -> None:
    def entropy(n: int) -> bytes:
        raise error

    with pytest.raises(EntropyUnavailable, match="could not generate random seed"):
        seed(entropy)


def test_seed_short_read() -> None:
    with pytest.raises(EntropyUnavailable, match="expected 8 bytes, got 4"):
        seed(lambda n: b"\x00" * 4)


def test_seeds_are_not_degenerate() -> None:
    seeds = {tuple(seed().xseed) for _ in range(1000)}
    assert len(seeds) > 1
