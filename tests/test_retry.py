import pytest

from internmatch.retry import retry


def test_returns_after_transient_failures():
    calls = []
    delays = []

    @retry(max_attempts=3, base_delay=1.0, jitter=False, retryable=(OSError,), sleep=delays.append)
    def flaky():
        calls.append(1)
        if len(calls) < 3:
            raise OSError("boom")
        return "ok"

    assert flaky() == "ok"
    assert len(calls) == 3
    assert delays == [1.0, 2.0]


def test_reraises_after_last_attempt():
    @retry(max_attempts=2, jitter=False, retryable=(OSError,), sleep=lambda s: None)
    def broken():
        raise OSError("down")

    with pytest.raises(OSError, match="down"):
        broken()


def test_non_retryable_errors_propagate_immediately():
    calls = []

    @retry(max_attempts=5, retryable=(OSError,), sleep=lambda s: None)
    def bad():
        calls.append(1)
        raise ValueError("nope")

    with pytest.raises(ValueError):
        bad()
    assert calls == [1]


def test_delay_capped():
    delays = []

    @retry(max_attempts=4, base_delay=10.0, max_delay=15.0, jitter=False, sleep=delays.append)
    def broken():
        raise RuntimeError("x")

    with pytest.raises(RuntimeError):
        broken()
    assert delays == [10.0, 15.0, 15.0]


def test_rejects_zero_attempts():
    with pytest.raises(ValueError):
        retry(max_attempts=0)
