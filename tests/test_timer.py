import pytest

from gamemath.timer import FrameTimer


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


def test_start_gives_zero_delta():
    clock = FakeClock(1000)
    timer = FrameTimer(clock)
    timer.start()
    assert timer.delta_time() == 0.0
    assert timer.current_ticks() == 1000 / 1000.0


def test_update_frame_ticks_measures_delta():
    clock = FakeClock(1000)
    timer = FrameTimer(clock)
    timer.start()
    clock.now = 1500
    timer.update_frame_ticks()
    assert timer.delta_time() == 0.5
    assert timer.current_ticks() == 1.5


def test_delta_uses_only_last_two_frames():
    clock = FakeClock(0)
    timer = FrameTimer(clock)
    timer.start()
    for now in (100, 250, 400):
        clock.now = now
        timer.update_frame_ticks()
    assert timer.delta_time() == (400 - 250) / 1000.0


def test_sleep_time_within_frame():
    clock = FakeClock(10)
    timer = FrameTimer(clock)
    assert timer.sleep_time(60) == 1000 // 60 - 10


def test_sleep_time_caps_at_frame_length():
    clock = FakeClock(100)
    timer = FrameTimer(clock)
    assert timer.sleep_time(60) == 1000 // 60


@pytest.mark.parametrize("now", [0, 5, 16, 17, 1000, 123456])
def test_sleep_time_never_exceeds_frame(now):
    timer = FrameTimer(FakeClock(now))
    assert 0 <= timer.sleep_time(60) <= 1000 // 60


def test_sleep_time_zero_when_fps_too_high():
    timer = FrameTimer(FakeClock(0))
    assert timer.sleep_time(2000) == 0


def test_sleep_time_rejects_nonpositive_fps():
    timer = FrameTimer(FakeClock(0))
    with pytest.raises(ValueError):
        timer.sleep_time(0)


def test_default_clock_delta_nonnegative():
    timer = FrameTimer()
    timer.start()
    timer.update_frame_ticks()
    assert timer.delta_time() >= 0.0
    assert timer.current_ticks() >= 0.0