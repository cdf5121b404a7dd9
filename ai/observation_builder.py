"""
Observation Builder for the Basketball Environment

Converts a MatchState into the flat, normalised float vector a learning agent
sees. The learner controls the human side (Side.PLAYER); the scripted
opponent is part of the environment.

**Observation Structure** (19 dimensions):
- Self (7): x, y, vx, vy, on_ground, has_ball, faking
- Opponent (6): x relative to self, y, vx, on_ground, has_ball, faking
- Ball (4): x, y, vx, vy
- Match (2): fraction of game time remaining, score difference
"""

from typing import List

import numpy as np

from config.game_config import GameConfig
from game.match_state import MatchState

# Velocity normaliser: the fastest thing on court (max shot power)
VELOCITY_SCALE = 20.0
SCORE_SCALE = 10.0


class ObservationBuilder:
    OBS_DIM = 19

    def __init__(self, config: GameConfig):
        self.config = config
        self.court_width = float(config.court.WIDTH)
        self.court_height = float(config.court.HEIGHT)

    def build_observation(self, state: MatchState) -> np.ndarray:
        obs: List[float] = []
        obs.extend(self._build_self(state))
        obs.extend(self._build_opponent(state))
        obs.extend(self._build_ball(state))
        obs.extend(self._build_match_state(state))
        return np.array(obs, dtype=np.float32)

    def _build_self(self, state: MatchState) -> List[float]:
        agent = state.player
        return [
            agent.x / self.court_width,
            agent.y / self.court_height,
            agent.vx / VELOCITY_SCALE,
            agent.vy / VELOCITY_SCALE,
            float(agent.on_ground),
            float(agent.has_ball),
            float(agent.is_faking),
        ]

    def _build_opponent(self, state: MatchState) -> List[float]:
        opponent = state.opponent
        return [
            (opponent.x - state.player.x) / self.court_width,
            opponent.y / self.court_height,
            opponent.vx / VELOCITY_SCALE,
            float(opponent.on_ground),
            float(opponent.has_ball),
            float(opponent.is_faking),
        ]

    def _build_ball(self, state: MatchState) -> List[float]:
        ball = state.ball
        return [
            ball.x / self.court_width,
            ball.y / self.court_height,
            ball.vx / VELOCITY_SCALE,
            ball.vy / VELOCITY_SCALE,
        ]

    def _build_match_state(self, state: MatchState) -> List[float]:
        score_diff = state.scores[state.player.side] - state.scores[state.opponent.side]
        return [
            state.time_remaining / self.config.match.GAME_TIME,
            score_diff / SCORE_SCALE,
        ]
