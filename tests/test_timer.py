import pytest

from pivk.timer import Timer


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def test_initial_state():
    timer = Timer(FakeClock())
    assert timer.fps == 30.0
    assert timer.time == 0.0
    assert timer.is_pause is False


def test_time_follows_clock():
    clock = FakeClock()
    timer = Timer(clock)
    clock.now = 0.5
    timer.update()
    assert timer.global_time == pytest.approx(0.5)
    assert timer.time == pytest.approx(0.5)
    assert timer.delta_time == timer.global_delta_time


def test_pause_stops_time():
    clock = FakeClock()
    timer = Timer(clock)
    clock.now = 1.0
    timer.update()
    timer.is_pause = True
    clock.now = 3.0
    timer.update()
    assert timer.delta_time == 0.0
    assert timer.time == pytest.approx(1.0)
    assert timer.global_time == pytest.approx(3.0)
    timer.is_pause = False
    clock.now = 4.0
    timer.update()
    assert timer.time == pytest.approx(2.0)
    assert timer.global_time - timer.time == pytest.approx(2.0)


def test_fps_not_measured_before_one_second():
    calls = []
    clock = FakeClock()
    timer = Timer(clock, on_fps=calls.append)
    clock.now = 1.0
    timer.update()
    assert timer.fps == 30.0
    assert calls == []


def test_fps_measured_after_one_second():
    calls = []
    clock = FakeClock()
    timer = Timer(clock, on_fps=calls.append)
    for now in (1.0, 2.0):
        clock.now = now
        timer.update()
    assert timer.fps == pytest.approx(1.0)
    assert calls == [timer.fps]


def test_delta_between_frames():
    clock = FakeClock()
    timer = Timer(clock)
    clock.now = 0.25
    timer.update()
    first = timer.global_time
    clock.now = 0.75
    timer.update()
    assert timer.global_delta_time == pytest.approx(timer.global_time - first)