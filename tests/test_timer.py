from isoterra.timer import Timer


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


def test_not_elapsed_before_duration():
    clock = FakeClock(1000)
    timer = Timer(100, clock)
    clock.now = 1099
    assert timer.update() is False
    assert timer.time_log == 1000


def test_elapsed_at_exact_duration():
    clock = FakeClock(1000)
    timer = Timer(100, clock)
    clock.now = 1100
    assert timer.update() is True
    assert timer.time_log == 1100


def test_cycle_restarts_from_current_time():
    clock = FakeClock(0)
    timer = Timer(50, clock)
    clock.now = 70
    assert timer.update() is True
    clock.now = 110
    assert timer.update() is False
    clock.now = 120
    assert timer.update() is True
    assert timer.current_time == 120


def test_zero_duration_always_fires():
    clock = FakeClock(5)
    timer = Timer(0, clock)
    assert timer.update() is True
    assert timer.update() is True


def test_default_clock_starts_not_elapsed():
    timer = Timer(10_000_000)
    assert timer.update() is False
    assert timer.current_time >= timer.time_log