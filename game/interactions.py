"""
Interaction Engine - Possession, Shooting, Stealing and Scoring

This module resolves every interaction between the two agents and the ball.
Each operation is a state transition on the MatchState passed in; invalid
requests are rejected with a False (or 0) return and leave the state as it
was, so callers simply try again on a later tick.

**Operations**:
1. **try_pickup**: Grab a loose ball within reach of the hand point
2. **shoot_ball**: Release a jump shot or, close to the rim in the air, a dunk
3. **try_steal**: Probabilistic strip attempt gated by range and cooldown
4. **classify_shot**: 2 or 3 points from where the shooter's feet were
5. **check_score**: Detect a made basket and award it once
6. **reset_after_score**: Re-spot agents and ball, keeping score and clock

**Randomness**: All draws go through the injected generator (a
numpy.random.Generator in the game), so a seeded match is reproducible.
"""

import logging
import math
from typing import Optional

import numpy as np

from common.geometry import clamp, distance, random_range
from common.side import Side
from config.game_config import GameConfig
from game.events import EventBus, GameEvent, GameEventType
from game.match_state import MatchState
from player.agent import Agent
from player.ball import DunkInfo, ShotOrigin

logger = logging.getLogger(__name__)


class InteractionEngine:
    """
    Resolves pickups, shots, steals and baskets on a MatchState.

    **Usage**:
    ```python
    engine = InteractionEngine(config, rng=np.random.default_rng(7), events=bus)
    if engine.try_pickup(state, state.player):
        engine.shoot_ball(state, state.player)
    points = engine.check_score(state)
    ```
    """

    def __init__(self, config: GameConfig, rng=None, events: Optional[EventBus] = None):
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng()
        self.events = events if events is not None else EventBus()

    def _emit(self, state: MatchState, event_type: GameEventType,
              side: Optional[Side] = None, **data) -> None:
        self.events.emit(GameEvent(event_type, timestamp=state.elapsed, side=side, data=data))

    # === POSSESSION ===

    def try_pickup(self, state: MatchState, agent: Agent) -> bool:
        """
        Give the loose ball to agent if its hand point is within pickup radius.

        The radius test is strict: a ball exactly at the radius is out of reach.
        """
        ball = state.ball
        if ball.holder is not None or ball.scored:
            return False
        if agent.regrab_cooldown > 0:
            return False
        hand_x, hand_y = agent.hand_point()
        if distance(hand_x, hand_y, ball.x, ball.y) >= self.config.actions.PICKUP_RADIUS:
            return False

        ball.holder = agent.side
        ball.last_touched_by = agent.side
        ball.shot_origin = None
        ball.vx = ball.vy = 0.0
        agent.has_ball = True
        return True

    def shoot_ball(self, state: MatchState, agent: Agent) -> bool:
        """
        Release the ball toward the agent's target hoop.

        Returns:
            False if the agent was not holding the ball
        """
        ball = state.ball
        if not agent.has_ball or ball.holder is not agent.side:
            return False

        actions = self.config.actions
        hoop = state.court.target_hoop(agent.side)

        ball.holder = None
        agent.has_ball = False
        agent.fake_timer = 0.0
        agent.regrab_cooldown = actions.REGRAB_DELAY
        ball.last_touched_by = agent.side
        ball.shot_origin = ShotOrigin(side=agent.side, feet=agent.feet_pos(), y=agent.y)

        distance_to_hoop = hoop.distance_from(agent.x, agent.y)
        is_dunk = (not agent.on_ground
                   and abs(agent.y - hoop.y) < actions.DUNK_HEIGHT_WINDOW
                   and distance_to_hoop < actions.DUNK_DISTANCE)

        if is_dunk:
            ball.vx = (hoop.x - agent.x) * actions.DUNK_DRIFT
            ball.vy = -actions.DUNK_LIFT + random_range(self.rng, -actions.DUNK_LIFT_JITTER, 0)
            ball.dunk_info = DunkInfo(owner=agent.side, timer=actions.DUNK_TAG_DURATION)
        else:
            aim_y = hoop.y - random_range(self.rng, actions.AIM_JITTER_MIN, actions.AIM_JITTER_MAX)
            dx = hoop.x - agent.x
            dy = aim_y - agent.y
            power = clamp(math.hypot(dx, dy) / actions.SHOT_POWER_DIVISOR,
                          actions.MIN_SHOT_POWER, actions.MAX_SHOT_POWER)
            angle = math.atan2(dy, dx)
            ball.vx = math.cos(angle) * power
            ball.vy = math.sin(angle) * power

        self._emit(state, GameEventType.SHOT_RELEASED, agent.side, dunk=is_dunk)
        if is_dunk:
            self._emit(state, GameEventType.DUNK_PERFORMED, agent.side)
        return True

    def try_steal(self, state: MatchState, attacker: Agent, defender: Agent) -> bool:
        """
        Attempt to strip the ball from defender.

        Any attempt that reaches the dice roll (or hits a dodging defender)
        puts the attacker's steal on cooldown, whatever the outcome.
        """
        steal = self.config.steal
        ball = state.ball
        if attacker.steal_cooldown > 0:
            return False
        if not defender.has_ball:
            return False
        if distance(attacker.x, attacker.y, defender.x, defender.y) > steal.RANGE:
            return False

        attacker.steal_cooldown = steal.COOLDOWN
        if defender.is_dodging:
            return False

        chance = steal.FAKE_CHANCE if defender.is_faking else steal.BASE_CHANCE
        if attacker.is_dodging:
            chance += steal.DASH_BONUS

        if self.rng.random() < chance:
            defender.has_ball = False
            defender.fake_timer = 0.0
            defender.hit_stun = steal.HIT_STUN
            ball.holder = None
            ball.last_touched_by = attacker.side
            ball.shot_origin = None

            if attacker.x < defender.x:
                push = 1
            elif attacker.x > defender.x:
                push = -1
            else:
                push = 1 if defender.facing_right else -1
            ball.vx = push * random_range(self.rng, steal.PUSH_MIN, steal.PUSH_MAX)
            ball.vy = -steal.POP_MIN - random_range(self.rng, 0, steal.POP_JITTER)

            logger.debug("%s stripped %s", attacker.side.value, defender.side.value)
            self._emit(state, GameEventType.STEAL_SUCCEEDED, attacker.side)
            return True

        attacker.vx *= -steal.KNOCKBACK
        attacker.vy = -steal.KNOCKBACK_POP
        return False

    # === SCORING ===

    def classify_shot(self, state: MatchState, shooter: Optional[Agent], hoop_x: float) -> int:
        """
        Points for a made basket by shooter at the hoop at hoop_x.

        A live dunk tag owned by the shooter always counts 2. Otherwise the
        shot is a three only when both foot edges (as they were at release)
        lie beyond the three-point radius; a shooter straddling the arc gets 2.
        """
        if shooter is None:
            return 2
        ball = state.ball
        if ball.dunk_info is not None and ball.dunk_info.owner is shooter.side:
            return 2

        origin = ball.shot_origin
        if origin is not None and origin.side is shooter.side:
            feet, foot_y = origin.feet, origin.y
        else:
            feet, foot_y = shooter.feet_pos(), shooter.y

        radius = state.court.three_point_radius
        hoop_y = state.court.hoop_y
        if all(distance(foot_x, foot_y, hoop_x, hoop_y) > radius for foot_x in feet):
            return 3
        return 2

    def check_score(self, state: MatchState) -> int:
        """
        Award a made basket if the ball dropped through a rim this tick.

        Returns:
            Points awarded (0 when no basket was made)
        """
        ball = state.ball
        if ball.scored or ball.holder is not None:
            return 0

        for hoop in state.court.hoops():
            if not hoop.is_crossed_downward(ball.prev_x, ball.prev_y, ball.x, ball.y):
                continue

            scoring_side = hoop.attacking_side
            shooter = None
            if ball.last_touched_by is scoring_side:
                shooter = state.agent(scoring_side)
            points = self.classify_shot(state, shooter, hoop.x)

            state.scores[scoring_side] += points
            ball.scored = True
            state.pending_reset_in = self.config.match.SCORE_RESET_DELAY

            logger.debug("%s scored %d (%d-%d)", scoring_side.value, points,
                         state.scores[Side.PLAYER], state.scores[Side.OPPONENT])
            self._emit(state, GameEventType.SHOT_SWISHED, scoring_side, points=points)
            return points
        return 0

    def reset_after_score(self, state: MatchState) -> None:
        """Re-spot agents and a fresh ball; score and clock are kept."""
        for side, agent in state.agents.items():
            agent.reset(state.court.start_position(side))
        state.ball = MatchState.new_ball(self.config, state.court)
        state.pending_reset_in = None
        logger.debug("Positions reset after score")
