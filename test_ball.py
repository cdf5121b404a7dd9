"""
Tests for ball flight, bounces and the held-ball snap.
"""

import pytest

from common.side import Side
from game.events import GameEventType
from player.ball import Ball, DunkInfo

TICK = 1 / 60


def test_held_ball_snaps_to_hand(state):
    player = state.player
    player.x, player.y = 300, 442
    player.facing_right = True
    ball = state.ball
    ball.holder = Side.PLAYER
    ball.vx, ball.vy = 5.0, -3.0

    events = ball.update(TICK, player)

    assert (ball.x, ball.y) == (326, 434)
    assert ball.vx == 0 and ball.vy == 0
    assert events == []

    player.facing_right = False
    ball.update(TICK, player)
    assert ball.x == 274


def test_free_flight_one_reference_tick(config):
    ball = Ball(480, 310, config)
    ball.vx = 2.0

    ball.update(TICK)

    assert ball.vy == pytest.approx(0.45)
    assert ball.x == pytest.approx(482.0)
    assert ball.y == pytest.approx(310.45)
    assert ball.vx == pytest.approx(1.996)
    assert (ball.prev_x, ball.prev_y) == (480, 310)


def test_floor_bounce_loses_energy(config):
    ball = Ball(400, 455, config)
    ball.vx = 4.0
    ball.vy = 10.0

    events = ball.update(TICK)

    assert ball.y == 460
    assert ball.vy == pytest.approx(-10.45 * 0.45)
    assert ball.vx == pytest.approx(4.0 * 0.998 * 0.95)
    assert events == [GameEventType.BALL_BOUNCED]


def test_small_rebound_settles_on_floor(config):
    ball = Ball(400, 459, config)
    ball.vy = 1.5

    events = ball.update(TICK)

    assert ball.y == 460
    assert ball.vy == 0
    assert events == []


def test_side_wall_reflects_ball(config):
    ball = Ball(12, 300, config)
    ball.vx = -5.0

    events = ball.update(TICK)

    assert ball.x == 10
    assert ball.vx == pytest.approx(5.0 * 0.998 * 0.5)
    assert GameEventType.BALL_OUT_OF_BOUNDS in events

    ball = Ball(948, 300, config)
    ball.vx = 5.0
    ball.update(TICK)
    assert ball.x == 950
    assert ball.vx < 0


def test_dunk_tag_expires_after_its_timer(config):
    ball = Ball(480, 300, config)
    ball.dunk_info = DunkInfo(owner=Side.PLAYER, timer=0.5)

    ball.update(0.3)
    assert ball.dunk_info is not None
    assert ball.dunk_info.timer == pytest.approx(0.2)

    ball.update(0.3)
    assert ball.dunk_info is None


def test_half_ticks_cover_the_same_ground(config):
    whole = Ball(480, 200, config)
    halves = Ball(480, 200, config)
    whole.vx = halves.vx = 3.0

    whole.update(TICK)
    halves.update(TICK / 2)
    halves.update(TICK / 2)

    assert halves.x == pytest.approx(whole.x, abs=1e-2)
    assert halves.vy == pytest.approx(whole.vy)
