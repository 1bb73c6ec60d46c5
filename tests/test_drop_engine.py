import pytest

from eggers.core.rng import RNG
from eggers.services.drop_engine import (
    compute_drops,
    count_drops,
    iteration_count,
    trial_chances,
)
from tests.helpers.scripted_rng import ScriptedRNG


@pytest.mark.parametrize("chance", [0, -0.5, -100, -250])
def test_non_positive_chance_never_draws(chance: float) -> None:
    rng = ScriptedRNG([])
    assert compute_drops(chance, rng) == []
    assert rng.calls == []


def test_small_chance_uses_single_trial() -> None:
    rng = ScriptedRNG([29.9])
    drops = compute_drops(30, rng)
    assert len(drops) == 1
    assert rng.calls == [(0, 100)]

    rng = ScriptedRNG([30.0])
    assert compute_drops(30, rng) == []


def test_hundred_always_drops_once() -> None:
    rng = ScriptedRNG([99.999999])
    assert count_drops(100, rng) == 1
    assert rng.remaining == 0


def test_hundred_with_real_rng_is_deterministic() -> None:
    rng = RNG(5)
    assert all(count_drops(100, rng) == 1 for _ in range(500))


def test_one_fifty_uses_forty_nine_then_fifty() -> None:
    assert trial_chances(150) == [49, 50]

    rng = ScriptedRNG([48.9, 50.0])
    drops = compute_drops(150, rng)
    assert [drop.trial for drop in drops] == [0]
    assert len(rng.calls) == 2

    rng = ScriptedRNG([49.0, 49.9])
    drops = compute_drops(150, rng)
    assert [drop.trial for drop in drops] == [1]

    rng = ScriptedRNG([0.0, 0.0])
    assert count_drops(150, rng) == 2


def test_two_fifty_runs_three_trials() -> None:
    assert trial_chances(250) == [48, 49, 50]
    rng = ScriptedRNG([47.5, 48.5, 49.5])
    assert count_drops(250, rng) == 3
    assert len(rng.calls) == 3


def test_exact_multiples_of_hundred() -> None:
    assert trial_chances(200) == [99, 100]
    assert trial_chances(300) == [98, 99, 100]


@pytest.mark.parametrize(
    ("chance", "expected"),
    [(0, 0), (-3, 0), (0.1, 1), (100, 1), (100.5, 2), (200, 2), (250, 3), (301, 4)],
)
def test_iteration_count_matches_ceiling(chance: float, expected: int) -> None:
    assert iteration_count(chance) == expected
    assert len(trial_chances(chance)) == expected


@pytest.mark.parametrize("chance", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_chance_produces_nothing(chance: float) -> None:
    rng = ScriptedRNG([])
    assert compute_drops(chance, rng) == []
    assert iteration_count(chance) == 0


def test_drop_rate_tracks_chance() -> None:
    rng = RNG(2024)
    trials = 20000
    hits = sum(count_drops(25, rng) for _ in range(trials))
    assert 0.22 < hits / trials < 0.28


def test_count_never_exceeds_iterations() -> None:
    rng = RNG(3)
    for chance in (0.5, 50, 99, 100, 150, 275, 999):
        limit = iteration_count(chance)
        for _ in range(50):
            assert 0 <= count_drops(chance, rng) <= limit
