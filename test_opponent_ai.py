"""
Tests for the scripted opponent's decisions in each possession state.
"""

import pytest

from ai.opponent_ai import OpponentAI, OpponentIntent, PossessionState, per_tick_chance
from common.side import Side

TICK = 1 / 60


def place(agent, x, y=442):
    agent.x, agent.y = x, y


def make_ai(config, stub_random, *values):
    return OpponentAI(config, stub_random(*values))


def test_possession_analysis(state, config, stub_random, hand_ball):
    ai = make_ai(config, stub_random)
    assert ai.analyze_possession(state) is PossessionState.CONTEST
    hand_ball(state, Side.OPPONENT)
    assert ai.analyze_possession(state) is PossessionState.ATTACK
    state.opponent.has_ball = False
    hand_ball(state, Side.PLAYER)
    assert ai.analyze_possession(state) is PossessionState.DEFENSE


def test_chases_loose_ball(state, config, stub_random):
    ai = make_ai(config, stub_random)
    intent = ai.decide(state, TICK)
    assert intent == OpponentIntent(left=True)


def test_requests_pickup_when_close(state, config, stub_random):
    ai = make_ai(config, stub_random)
    place(state.opponent, 480)
    state.ball.x, state.ball.y = 490, 420

    intent = ai.decide(state, TICK)
    assert intent.pickup
    assert intent.right


def test_ignores_scored_ball(state, config, stub_random):
    ai = make_ai(config, stub_random)
    state.ball.scored = True
    assert ai.decide(state, TICK) == OpponentIntent()


def test_drives_to_hoop_before_rolling(state, config, stub_random, hand_ball):
    ai = make_ai(config, stub_random, 0.0)
    hand_ball(state, Side.OPPONENT)

    intent = ai.decide(state, TICK)
    assert intent == OpponentIntent(left=True)
    assert ai.rng.calls == 0


def test_rises_and_shoots_near_hoop(state, config, stub_random, hand_ball):
    ai = make_ai(config, stub_random, 0.005, 0.5)
    place(state.opponent, 200)
    hand_ball(state, Side.OPPONENT)

    intent = ai.decide(state, TICK)
    assert not intent.left and not intent.right
    assert intent.jump
    assert not intent.shoot
    assert ai.rng.calls == 2


def test_no_jump_roll_in_the_air(state, config, stub_random, hand_ball):
    ai = make_ai(config, stub_random, 0.0)
    place(state.opponent, 200, 380)
    state.opponent.on_ground = False
    hand_ball(state, Side.OPPONENT)

    intent = ai.decide(state, TICK)
    assert not intent.jump
    assert intent.shoot
    assert ai.rng.calls == 1


def test_guards_without_reaching_when_far(state, config, stub_random, hand_ball):
    ai = make_ai(config, stub_random, 0.0)
    place(state.player, 300)
    place(state.opponent, 400)
    hand_ball(state, Side.PLAYER)

    intent = ai.decide(state, TICK)
    assert intent == OpponentIntent(left=True)
    assert ai.rng.calls == 0


def test_reads_pump_fake(state, config, stub_random, hand_ball):
    place(state.player, 300)
    place(state.opponent, 340)
    hand_ball(state, Side.PLAYER)

    assert not make_ai(config, stub_random, 0.3).decide(state, TICK).steal

    state.player.fake_timer = 0.3
    assert make_ai(config, stub_random, 0.3).decide(state, TICK).steal


def test_no_steal_roll_on_cooldown(state, config, stub_random, hand_ball):
    ai = make_ai(config, stub_random, 0.0)
    place(state.player, 300)
    place(state.opponent, 340)
    hand_ball(state, Side.PLAYER)
    state.opponent.steal_cooldown = 0.2

    assert not ai.decide(state, TICK).steal
    assert ai.rng.calls == 0


def test_per_tick_chance_is_frame_rate_independent():
    assert per_tick_chance(0.02, TICK, TICK) == pytest.approx(0.02)
    assert per_tick_chance(0.02, 0.0, TICK) == 0.0

    half = per_tick_chance(0.02, TICK / 2, TICK)
    assert 1 - (1 - half) ** 2 == pytest.approx(0.02)
