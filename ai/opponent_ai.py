"""
Scripted Opponent AI for 1v1 Basketball

This module provides the rule-based opponent. It reads the match state and
answers with the same kind of intents a human produces (move left/right,
jump, shoot, steal, pickup); the Match applies them through the same agent
and interaction code the human goes through.

**Behaviour by possession**:
1. **Loose ball**: Chase the ball horizontally and grab it once in reach
2. **Attack** (opponent has the ball): Drive to the left hoop, then rise and
   shoot on random draws, which turns into a dunk when airborne near the rim
3. **Defense** (human has the ball): Shadow the human; jump at a pump fake
   with a steal, occasionally reach in otherwise

**Randomness**: Each decision is an independent draw per tick. Rates are
tuned for a 1/60 s tick and rescaled to the actual tick length, so the
opponent behaves the same at any frame rate.

**Usage**:
```python
from ai.opponent_ai import OpponentAI

opponent = OpponentAI(config, rng)
intent = opponent.decide(state, dt)
```
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np

from common.geometry import distance
from config.game_config import GameConfig
from game.match_state import MatchState


class PossessionState(Enum):
    """Tactical situation from the opponent's point of view"""
    ATTACK = "attack"      # Opponent holds the ball
    DEFENSE = "defense"    # Human holds the ball
    CONTEST = "contest"    # Loose ball


@dataclass
class OpponentIntent:
    """Intents the opponent wants applied this tick"""
    left: bool = False
    right: bool = False
    jump: bool = False
    shoot: bool = False
    steal: bool = False
    pickup: bool = False


def per_tick_chance(rate: float, dt: float, reference_dt: float) -> float:
    """
    Probability for a tick of length dt given a per-reference-tick rate.

    Two half-length ticks together fire as often as one reference tick.
    """
    if dt <= 0:
        return 0.0
    return 1.0 - (1.0 - rate) ** (dt / reference_dt)


class OpponentAI:
    """
    Rule-based opponent policy.

    The opponent's speed cap (a band distinct from the human's) lives on its
    Agent, so this class only decides direction and actions.
    """

    def __init__(self, config: GameConfig, rng=None):
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng()

    def analyze_possession(self, state: MatchState) -> PossessionState:
        if state.ball.is_free:
            return PossessionState.CONTEST
        if state.ball.holder is state.opponent.side:
            return PossessionState.ATTACK
        return PossessionState.DEFENSE

    def decide(self, state: MatchState, dt: float) -> OpponentIntent:
        """Main decision method, called once per tick before agents move."""
        possession = self.analyze_possession(state)
        if possession is PossessionState.CONTEST:
            return self._chase_ball(state)
        if possession is PossessionState.ATTACK:
            return self._attack(state, dt)
        return self._defend(state, dt)

    def _roll(self, rate: float, dt: float) -> bool:
        chance = per_tick_chance(rate, dt, self.config.physics.REFERENCE_DT)
        return self.rng.random() < chance

    @staticmethod
    def _move_toward(intent: OpponentIntent, from_x: float, to_x: float, deadzone: float) -> None:
        if to_x < from_x - deadzone:
            intent.left = True
        elif to_x > from_x + deadzone:
            intent.right = True

    def _chase_ball(self, state: MatchState) -> OpponentIntent:
        opponent = state.opponent
        ball = state.ball
        policy = self.config.opponent
        intent = OpponentIntent()
        if ball.scored:
            return intent

        self._move_toward(intent, opponent.x, ball.x, policy.CHASE_DEADZONE)
        if distance(opponent.x, opponent.y, ball.x, ball.y) < policy.PICKUP_RANGE:
            intent.pickup = True
        return intent

    def _attack(self, state: MatchState, dt: float) -> OpponentIntent:
        opponent = state.opponent
        policy = self.config.opponent
        hoop = state.court.target_hoop(opponent.side)
        intent = OpponentIntent()

        gap = abs(opponent.x - hoop.x)
        if gap > policy.SHOOTING_BAND:
            self._move_toward(intent, opponent.x, hoop.x, 0)

        if gap < policy.JUMP_BAND and opponent.on_ground and self._roll(policy.JUMP_RATE, dt):
            intent.jump = True
        if gap < policy.SHOT_BAND and self._roll(policy.SHOT_RATE, dt):
            intent.shoot = True
        return intent

    def _defend(self, state: MatchState, dt: float) -> OpponentIntent:
        opponent = state.opponent
        player = state.player
        policy = self.config.opponent
        intent = OpponentIntent()

        self._move_toward(intent, opponent.x, player.x, policy.GUARD_DISTANCE)

        in_range = distance(opponent.x, opponent.y, player.x, player.y) <= self.config.steal.RANGE
        if not in_range or opponent.steal_cooldown > 0:
            return intent

        rate = policy.FAKE_READ_RATE if player.is_faking else policy.STEAL_RATE
        if self._roll(rate, dt):
            intent.steal = True
        return intent
