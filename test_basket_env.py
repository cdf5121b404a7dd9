"""
Tests for the Gymnasium environment wrapper.
"""

import numpy as np
import pytest

from ai.basket_env import BasketEnv
from ai.observation_builder import ObservationBuilder
from common.side import Side


def test_reset_and_step_shapes():
    env = BasketEnv()
    obs, info = env.reset(seed=3)

    assert obs.shape == (ObservationBuilder.OBS_DIM,)
    assert obs.dtype == np.float32
    assert env.observation_space.contains(obs)
    assert info["scores"] == {"player": 0, "opponent": 0}

    obs, reward, terminated, truncated, info = env.step(env.action_space.sample())
    assert obs.shape == (ObservationBuilder.OBS_DIM,)
    assert isinstance(reward, float)
    assert not terminated and not truncated
    assert info["steps"] == 1


def test_step_requires_reset():
    with pytest.raises(RuntimeError):
        BasketEnv().step(0)


def test_same_seed_same_episode():
    actions = [2, 2, 5, 3, 0, 1, 6, 7, 4, 5] * 20
    runs = []
    for _ in range(2):
        env = BasketEnv()
        obs, _ = env.reset(seed=7)
        trace = [obs]
        for action in actions:
            obs, *_ = env.step(action)
            trace.append(obs)
        runs.append(np.stack(trace))
    np.testing.assert_array_equal(runs[0], runs[1])


def test_made_basket_is_rewarded():
    env = BasketEnv()
    env.reset(seed=1)
    ball = env.match.state.ball
    ball.last_touched_by = Side.PLAYER
    ball.x, ball.y = 840, 250
    ball.prev_x, ball.prev_y = 840, 250

    rewards = [env.step(0)[1] for _ in range(30)]

    assert 3.0 in rewards
    assert sum(rewards) == 3.0


def test_episode_terminates_when_clock_expires():
    env = BasketEnv()
    env.reset(seed=5)
    terminated = truncated = False
    steps = 0
    while not (terminated or truncated) and steps < 5000:
        _, _, terminated, truncated, _ = env.step(0)
        steps += 1

    assert terminated
    assert not truncated
    assert steps == env.max_steps == 1800
    assert env.match.state.time_remaining == 0


def test_step_limit_truncates():
    env = BasketEnv(max_steps=5)
    env.reset(seed=0)
    results = [env.step(0) for _ in range(5)]
    assert not any(r[3] for r in results[:4])
    assert results[4][3]
