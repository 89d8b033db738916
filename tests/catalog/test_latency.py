"""Tests for latency profiles."""

import random

import pytest

from catalog_facade.catalog.latency import DEGRADED_LATENCY, NORMAL_LATENCY, LatencyProfile


def test_normal_profile_bounds() -> None:
    """Test normal latency spans 100-400 ms."""
    assert NORMAL_LATENCY.min_seconds == 0.1
    assert NORMAL_LATENCY.max_seconds == 0.4


def test_degraded_profile_bounds() -> None:
    """Test degraded latency spans 5-15 s."""
    assert DEGRADED_LATENCY.min_seconds == 5.0
    assert DEGRADED_LATENCY.max_seconds == 15.0


def test_sample_is_discrete() -> None:
    """Test samples only come from the enumerated set."""
    rng = random.Random(0)
    samples = {NORMAL_LATENCY.sample(rng) for _ in range(200)}
    assert samples == {0.1, 0.2, 0.3, 0.4}


def test_sample_is_reproducible() -> None:
    """Test the same seed yields the same sequence."""
    rng1 = random.Random(11)
    rng2 = random.Random(11)
    first = [DEGRADED_LATENCY.sample(rng1) for _ in range(10)]
    second = [DEGRADED_LATENCY.sample(rng2) for _ in range(10)]
    assert first == second


def test_empty_profile_rejected() -> None:
    with pytest.raises(ValueError):
        LatencyProfile(name="empty", delays_ms=())


def test_negative_delay_rejected() -> None:
    with pytest.raises(ValueError):
        LatencyProfile(name="bad", delays_ms=(100, -1))
