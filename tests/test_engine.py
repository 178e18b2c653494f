import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from unittest import mock

import pygame
import pytest

from proto_engine.engine import Engine, EngineError


class FakeClock:
    def __init__(self):
        self.now = 100.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def engine(clock):
    eng = Engine(64, 48, "Test", clock=clock, sleep=clock.sleep)
    yield eng
    eng.close()


def test_initial_state(engine, capsys):
    assert engine.initialized
    assert engine.running
    assert engine.surface.get_size() == (64, 48)
    assert engine.delta_time == 60.0
    assert engine.fps == 0.0


def test_init_message(clock, capsys):
    with Engine(64, 48, "Test", clock=clock) as eng:
        assert eng.initialized
    out = capsys.readouterr().out
    assert "Engine initialized: 64x48" in out
    assert "Engine shut down" in out
    assert not eng.initialized


def test_window_failure_raises(clock):
    with mock.patch("pygame.display.set_mode", side_effect=pygame.error("no window")):
        with pytest.raises(EngineError):
            Engine(64, 48, "Test", clock=clock)


def test_draw_and_clear(engine):
    engine.draw_rect(10, 10, 20, 20)
    assert tuple(engine.surface.get_at((15, 15))) == (255, 255, 255, 255)
    assert tuple(engine.surface.get_at((5, 5))) == (0, 0, 0, 255)
    engine.clear()
    engine.present()
    assert tuple(engine.surface.get_at((15, 15))) == (0, 0, 0, 255)


def test_quit_event_stops_running(engine):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    engine.poll_events()
    assert engine.running is False


def test_poll_events_feeds_input(engine):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, scancode=44, key=32, mod=0, unicode=" "))
    engine.poll_events()
    assert engine.input.is_key_pressed(44)
    engine.poll_events()
    assert not engine.input.is_key_pressed(44)
    assert engine.input.is_key_down(44)


def test_set_target_fps_invalid_falls_back(engine, capsys):
    engine.set_target_fps(-5)
    assert engine.target_fps == 60.0
    assert "Invalid FPS" in capsys.readouterr().err
    engine.set_target_fps(30)
    assert engine.target_fps == 30


def test_delta_time_and_fps(engine, clock, capsys):
    for _ in range(4):
        clock.now += 0.25
        engine.update_delta_time()
        assert engine.delta_time == pytest.approx(0.25)
    assert engine.fps == pytest.approx(4.0)
    assert engine.fps_update_timer == 0.0
    assert "FPS = " in capsys.readouterr().out


def test_limit_frame_rate_sleeps(engine, clock):
    engine.set_target_fps(10)
    clock.now += 0.05
    engine.update_delta_time()
    engine.limit_frame_rate()
    assert clock.sleeps == [pytest.approx(0.05)]
    assert engine.delta_time == pytest.approx(clock.sleeps[0])


def test_limit_frame_rate_without_target_does_nothing(engine, clock):
    clock.now += 0.01
    engine.update_delta_time()
    engine.limit_frame_rate()
    assert clock.sleeps == []
    assert engine.delta_time == pytest.approx(0.01)


def test_slow_frame_does_not_sleep(engine, clock):
    engine.set_target_fps(10)
    clock.now += 0.5
    engine.update_delta_time()
    assert engine.delta_time == pytest.approx(0.5)
    engine.limit_frame_rate()
    assert clock.sleeps == []
    # No time passed since the last frame mark, so the recomputed delta is zero.
    assert engine.delta_time == pytest.approx(0.0)