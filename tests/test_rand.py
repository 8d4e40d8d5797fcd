import threading
from collections import Counter

import pytest

from passgen.constants import DIGITS, UPPERCASE
from passgen.rand import RandomSource


class TestRandomIndex:
    def test_within_half_open_range(self) -> None:
        source = RandomSource(seed=1)
        values = {source.random_index(3, 7) for _ in range(500)}
        assert values == {3, 4, 5, 6}

    def test_single_value_range(self) -> None:
        source = RandomSource(seed=1)
        assert all(source.random_index(5, 6) == 5 for _ in range(20))

    @pytest.mark.parametrize("low,high", [(0, 0), (4, 2)])
    def test_empty_range_rejected(self, low: int, high: int) -> None:
        with pytest.raises(ValueError, match="empty range"):
            RandomSource(seed=1).random_index(low, high)

    def test_same_seed_same_draws(self) -> None:
        a = RandomSource(seed=42)
        b = RandomSource(seed=42)
        assert [a.random_index(0, 1000) for _ in range(10)] == [
            b.random_index(0, 1000) for _ in range(10)
        ]


class TestShuffle:
    def test_is_permutation(self) -> None:
        source = RandomSource(seed=7)
        seq = list("aabbcc0123!!")
        before = Counter(seq)
        source.shuffle(seq)
        assert Counter(seq) == before

    def test_empty_and_single(self) -> None:
        source = RandomSource(seed=7)
        empty: list[str] = []
        single = ["x"]
        source.shuffle(empty)
        source.shuffle(single)
        assert empty == []
        assert single == ["x"]

    def test_reaches_every_permutation(self) -> None:
        source = RandomSource(seed=3)
        seen = set()
        for _ in range(300):
            seq = list("abc")
            source.shuffle(seq)
            seen.add("".join(seq))
        assert len(seen) == 6


class TestCreateRandom:
    def test_length_and_pool(self) -> None:
        chars = RandomSource(seed=5).create_random(DIGITS, 25)
        assert len(chars) == 25
        assert set(chars) <= set(DIGITS)

    def test_zero_length(self) -> None:
        assert RandomSource(seed=5).create_random("", 0) == []
        assert RandomSource(seed=5).create_random(UPPERCASE, 0) == []

    def test_negative_length_rejected(self) -> None:
        with pytest.raises(ValueError, match="must not be negative"):
            RandomSource(seed=5).create_random(UPPERCASE, -1)

    def test_empty_pool_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least one character"):
            RandomSource(seed=5).create_random("", 3)

    def test_single_character_pool(self) -> None:
        assert RandomSource(seed=5).create_random("z", 4) == ["z"] * 4


def test_shared_between_threads() -> None:
    source = RandomSource(seed=11)
    results: list[list[str]] = []
    lock = threading.Lock()

    def worker() -> None:
        chars = source.create_random(UPPERCASE, 50)
        with lock:
            results.append(chars)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 8
    assert all(len(r) == 50 and set(r) <= set(UPPERCASE) for r in results)
