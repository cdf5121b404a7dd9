"""Shared fixtures for the simulation tests."""

import os
import sys

import pytest

sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from config.game_config import GameConfig
from game.events import EventBus
from game.interactions import InteractionEngine
from game.match_state import MatchState


class StubRandom:
    """
    Deterministic stand-in for numpy's Generator.

    random() returns the queued values in order and then keeps repeating the
    last one; `calls` counts the draws.
    """

    def __init__(self, *values):
        self.values = list(values) or [0.5]
        self.calls = 0

    def random(self):
        index = min(self.calls, len(self.values) - 1)
        self.calls += 1
        return self.values[index]


@pytest.fixture
def stub_random():
    return StubRandom


@pytest.fixture
def config():
    return GameConfig.create_default()


@pytest.fixture
def state(config):
    return MatchState.create(config)


@pytest.fixture
def recorded_events():
    """An EventBus plus the list every emitted event is appended to."""
    bus = EventBus()
    seen = []
    bus.subscribe_all(seen.append)
    return bus, seen


@pytest.fixture
def make_engine(config, recorded_events):
    bus, _ = recorded_events

    def factory(*values):
        return InteractionEngine(config, rng=StubRandom(*values), events=bus)

    return factory


def give_ball(state, side):
    """Put the ball in the hands of the agent on `side`."""
    agent = state.agent(side)
    state.ball.holder = side
    state.ball.last_touched_by = side
    agent.has_ball = True
    state.ball.update(0.0, agent)
    return agent


@pytest.fixture
def hand_ball():
    return give_ball
