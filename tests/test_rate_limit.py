"""
Límite de intentos de login: ventana deslizante por IP sin crecer sin límite.
"""
import pytest

from app.core import rate_limit


@pytest.fixture(autouse=True)
def clean_bucket():
    rate_limit.reset()
    yield
    rate_limit.reset()


@pytest.fixture
def clock(monkeypatch):
    now = [1000.0]
    monkeypatch.setattr(rate_limit, "time", lambda: now[0])
    return now


class TestAllow:

    def test_blocks_after_limit(self, clock):
        assert rate_limit.allow("10.0.0.1", limit=2)
        assert rate_limit.allow("10.0.0.1", limit=2)
        assert not rate_limit.allow("10.0.0.1", limit=2)
        assert rate_limit.allow("10.0.0.2", limit=2)

    def test_window_slides(self, clock):
        assert rate_limit.allow("10.0.0.1", limit=1)
        assert not rate_limit.allow("10.0.0.1", limit=1)
        clock[0] += rate_limit.WINDOW_SECONDS
        assert rate_limit.allow("10.0.0.1", limit=1)

    def test_expired_entries_are_dropped(self, clock):
        for ip in ("10.0.0.1", "10.0.0.2", "10.0.0.3"):
            rate_limit.allow(ip, limit=5)
        assert len(rate_limit.BUCKET) == 3

        clock[0] += rate_limit.WINDOW_SECONDS + 1
        rate_limit.allow("10.0.0.9", limit=5)
        assert list(rate_limit.BUCKET) == ["10.0.0.9"]

    def test_rejected_attempts_do_not_extend_the_window(self, clock):
        assert rate_limit.allow("10.0.0.1", limit=1)
        clock[0] += 30
        assert not rate_limit.allow("10.0.0.1", limit=1)
        clock[0] += 30
        assert rate_limit.allow("10.0.0.1", limit=1)
