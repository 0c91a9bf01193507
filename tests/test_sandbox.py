import pytest

from minsql.execution.sandbox import QueryLimitExceeded, QueryLimits, Sandbox


def test_default_limits_match_engine_defaults():
    limits = QueryLimits()
    assert limits.max_cpu_time == 60
    assert limits.max_wall_time == 300
    assert limits.max_memory == 100 * 1024 * 1024


def test_sandbox_without_limits_uses_defaults():
    sandbox = Sandbox()
    assert sandbox.limits == QueryLimits()
    assert sandbox.memory_used == 0


def test_fresh_sandbox_passes_check():
    sandbox = Sandbox(QueryLimits(max_memory=10))
    sandbox.check()
    assert sandbox.memory_used == 0


def test_memory_at_limit_is_allowed():
    sandbox = Sandbox(QueryLimits(max_memory=10))
    sandbox.track_memory(10)
    sandbox.check()
    assert sandbox.memory_used == 10


def test_memory_over_limit_raises():
    sandbox = Sandbox(QueryLimits(max_memory=10))
    sandbox.track_memory(6)
    sandbox.track_memory(5)
    assert sandbox.memory_used == 11
    with pytest.raises(QueryLimitExceeded, match="memory"):
        sandbox.check()


def test_wall_time_over_limit_raises():
    sandbox = Sandbox(QueryLimits(max_wall_time=-1.0))
    with pytest.raises(QueryLimitExceeded, match="wall time"):
        sandbox.check()


def test_elapsed_is_monotonic():
    sandbox = Sandbox()
    first = sandbox.elapsed()
    second = sandbox.elapsed()
    assert 0 <= first <= second