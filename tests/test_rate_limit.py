from content_review.utils.rate_limit import RateLimiter


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def _limiter(clock, **kwargs):
    opts = {"limit": 15, "window_seconds": 60, "clock": clock}
    opts.update(kwargs)
    return RateLimiter(**opts)


def test_fifteen_requests_admitted_sixteenth_rejected():
    clock = FakeClock()
    limiter = _limiter(clock)

    results = []
    for _ in range(16):
        results.append(limiter.is_allowed("203.0.113.7"))
        clock.advance(1)

    assert results[:15] == [True] * 15
    assert results[15] is False


def test_rejected_requests_are_not_recorded():
    clock = FakeClock()
    limiter = _limiter(clock, limit=2)

    assert limiter.is_allowed("a")
    assert limiter.is_allowed("a")
    for _ in range(5):
        assert not limiter.is_allowed("a")

    # Only the two admitted requests age out
    clock.advance(60)
    assert limiter.is_allowed("a")
    assert limiter.remaining("a") == 1


def test_window_resets_after_inactivity():
    clock = FakeClock()
    limiter = _limiter(clock)
    for _ in range(15):
        assert limiter.is_allowed("client")
    assert limiter.remaining("client") == 0

    clock.advance(60)
    assert limiter.remaining("client") == 15
    assert limiter.is_allowed("client")


def test_window_slides_per_timestamp():
    clock = FakeClock()
    limiter = _limiter(clock, limit=2)

    assert limiter.is_allowed("c")
    clock.advance(30)
    assert limiter.is_allowed("c")
    assert not limiter.is_allowed("c")

    # First request has left the window, the second hasn't
    clock.advance(30)
    assert limiter.is_allowed("c")
    assert not limiter.is_allowed("c")


def test_identifiers_are_independent():
    clock = FakeClock()
    limiter = _limiter(clock, limit=1)

    assert limiter.is_allowed("alice")
    assert not limiter.is_allowed("alice")
    assert limiter.is_allowed("bob")


def test_prune_drops_idle_identifiers():
    clock = FakeClock()
    limiter = _limiter(clock)
    limiter.is_allowed("old")
    clock.advance(45)
    limiter.is_allowed("recent")

    clock.advance(20)
    assert limiter.prune() == 1
    assert len(limiter) == 1
    assert limiter.remaining("recent") == 14


def test_prune_runs_periodically_on_admission():
    clock = FakeClock()
    limiter = _limiter(clock, prune_interval=120)
    for i in range(5):
        limiter.is_allowed(f"client-{i}")

    clock.advance(121)
    limiter.is_allowed("fresh")
    assert len(limiter) == 1


def test_ledger_is_bounded_by_evicting_least_recent():
    clock = FakeClock()
    limiter = _limiter(clock, limit=1, max_identifiers=3)
    for name in ("a", "b", "c"):
        assert limiter.is_allowed(name)
        clock.advance(1)

    assert limiter.is_allowed("d")
    assert len(limiter) == 3

    # "a" was evicted, so it is admitted again; "d" is still tracked
    assert limiter.is_allowed("a")
    assert not limiter.is_allowed("d")


def test_full_ledger_drops_expired_clients_before_active_ones():
    clock = FakeClock()
    limiter = _limiter(clock, limit=1, max_identifiers=2, prune_interval=10_000)
    assert limiter.is_allowed("expired")
    clock.advance(61)
    assert limiter.is_allowed("active")
    clock.advance(1)

    assert limiter.is_allowed("newcomer")
    assert len(limiter) == 2
    # "active" kept its window instead of being evicted
    assert not limiter.is_allowed("active")
