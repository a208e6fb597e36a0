import asyncio

import pytest

from kelime_bot.common.state import PuzzleRecord
from kelime_bot.scramble.scramble_manager import PuzzleSelector, StaticPuzzleProvider


class ScriptedRandom:
    """
    Deterministic stand-in for random.Random.
    Returns queued values from randint / randrange, in order.
    """

    def __init__(self, randint_values=(), randrange_values=()):
        self._randint = list(randint_values)
        self._randrange = list(randrange_values)
        self.randint_calls = 0
        self.randrange_calls = 0

    def randint(self, a, b):
        self.randint_calls += 1
        value = self._randint.pop(0)
        assert a <= value <= b, f"scripted randint {value} outside [{a}, {b}]"
        return value

    def randrange(self, stop):
        self.randrange_calls += 1
        value = self._randrange.pop(0)
        assert 0 <= value < stop, f"scripted randrange {value} outside [0, {stop})"
        return value


class FailingProvider:
    """Provider that can never produce a puzzle (e.g. remote generator down)."""

    def __init__(self, exc=None):
        self.exc = exc or ConnectionError("puzzle service unreachable")
        self.calls = 0

    async def generate_puzzle(self, difficulty=None):
        self.calls += 1
        raise self.exc


class EventRecorder:
    """Async session listener that records (event, generation) pairs."""

    def __init__(self):
        self.events = []

    async def __call__(self, event, session):
        self.events.append((event, session.state.generation))

    @property
    def names(self):
        return [name for name, _ in self.events]


async def wait_for(predicate, timeout=1.0, interval=0.005):
    """Poll until predicate() is true or fail after timeout seconds."""
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not met before timeout")
        await asyncio.sleep(interval)


@pytest.fixture
def kedi():
    return PuzzleRecord(word="KEDI", hint="Evcil hayvan", category="Hayvanlar")


@pytest.fixture
def elma():
    return PuzzleRecord(word="ELMA", hint="Newton'un başına düştüğü söylenir", category="Meyveler")


@pytest.fixture
def kedi_provider(kedi):
    """Word bank holding only KEDI: every pick returns it."""
    return StaticPuzzleProvider(PuzzleSelector([kedi]))


@pytest.fixture
def recorder():
    return EventRecorder()
