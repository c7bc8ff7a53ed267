import os

# pygame sem janela nem placa de som
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pygame
import pytest

from flappy.bird import Bird
from flappy.obstacle import ObstacleStream
from flappy.session import GameSession


class FakeTimer:
    """Substitui pygame.time.set_timer: guarda quais timers estão ativos."""
    def __init__(self):
        self.calls = []
        self.active = {}

    def __call__(self, event, millis):
        ev_type = event if isinstance(event, int) else event.type
        self.calls.append((event, millis))
        if millis:
            self.active[ev_type] = event
        else:
            self.active.pop(ev_type, None)


class FakeSounds:
    def __init__(self):
        self.played = []

    def play(self, sound_id):
        self.played.append(sound_id)


class FakeClock:
    def __init__(self, ms=0):
        self.ms = ms

    def __call__(self):
        return self.ms


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def timer():
    return FakeTimer()


@pytest.fixture
def sounds():
    return FakeSounds()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session(timer, sounds, clock):
    return GameSession(
        bird=Bird(),
        obstacles=ObstacleStream(rng=random.Random(1234)),
        sounds=sounds,
        set_timer=timer,
        now=clock,
    )
