import threading

import pytest

from eggers.core.rng import RNG


def test_rng_determinism_same_seed() -> None:
    rng_a = RNG(12345)
    rng_b = RNG(12345)

    floats_a = [rng_a.random() for _ in range(5)]
    floats_b = [rng_b.random() for _ in range(5)]
    draws_a = [rng_a.uniform(0, 100) for _ in range(5)]
    draws_b = [rng_b.uniform(0, 100) for _ in range(5)]

    assert floats_a == floats_b
    assert draws_a == draws_b


def test_rng_different_seed() -> None:
    rng_a = RNG(11111)
    rng_b = RNG(22222)

    draws_a = [rng_a.uniform(0, 100) for _ in range(5)]
    draws_b = [rng_b.uniform(0, 100) for _ in range(5)]

    assert draws_a != draws_b


def test_uniform_stays_within_half_open_range() -> None:
    rng = RNG(7)
    draws = [rng.uniform(0, 100) for _ in range(2000)]
    assert all(0 <= value < 100 for value in draws)


def test_uniform_rejects_empty_range() -> None:
    with pytest.raises(ValueError):
        RNG(1).uniform(5, 5)


def test_shared_rng_survives_concurrent_draws() -> None:
    rng = RNG(99)
    results: list[float] = []
    lock = threading.Lock()

    def worker() -> None:
        local = [rng.uniform(0, 100) for _ in range(500)]
        with lock:
            results.extend(local)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 2000
    assert all(0 <= value < 100 for value in results)
