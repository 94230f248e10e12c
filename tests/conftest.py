import random

import pytest

import bonsai as bonsai_global
from bonsai.util.canvas import RecordingCanvas
from bonsai.util.config import Config


class FakeClock:
    """Clock that only moves when slept on."""

    def __init__(self, step_cost: float = 0.0):
        self.time = 0.0
        self.step_cost = step_cost
        self.sleeps: list[float] = []

    def now(self) -> float:
        return self.time

    def sleep(self, duration: float) -> None:
        self.sleeps.append(duration)
        self.time += duration + self.step_cost


class ScriptedInput:
    """Asks to quit on the given poll (1 based), never otherwise."""

    def __init__(self, quit_on: int):
        self.quit_on = quit_on
        self.polls = 0

    def poll_quit(self) -> bool:
        self.polls += 1
        return self.polls == self.quit_on


class MemorySaveFile:

    def __init__(self):
        self.saves: list[tuple[int, int]] = []

    def save(self, seed: int, branches: int) -> None:
        self.saves.append((seed, branches))


class CountingRandom(random.Random):
    """Random that counts how often randrange is called."""

    def __init__(self, seed=0):
        super().__init__(seed)
        self.calls = 0

    def randrange(self, *args, **kwargs):
        self.calls += 1
        return super().randrange(*args, **kwargs)


class FixedRandom:
    """Returns the queued values from randrange, in order."""

    def __init__(self, *values: int):
        self.values = list(values)

    def randrange(self, stop: int) -> int:
        value = self.values.pop(0)
        assert 0 <= value < stop
        return value


@pytest.fixture
def rng() -> random.Random:
    return random.Random(42)


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas(80, 24)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture(autouse=True)
def empty_config(tmp_path):
    bonsai_global.config = Config(tmp_path / 'config.toml')
    yield bonsai_global.config
    bonsai_global.config = None
