"""
Basketball Environment for Reinforcement Learning

Gymnasium-compatible wrapper around the Match controller. The learning agent
plays the human side against the scripted OpponentAI, one reference tick
(1/60 s) per environment step.

**Action Space** (Discrete(8)):
0 = do nothing, 1 = move left, 2 = move right, 3 = jump, 4 = pump fake,
5 = action (shoot with the ball, steal without it), 6 = dodge left,
7 = dodge right

**Reward**: Points scored this step minus points conceded this step.

**Episode End**: terminated when the match clock runs out, truncated after
max_steps.
"""

from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
import pygame
from gymnasium import spaces

from ai.observation_builder import ObservationBuilder
from common.side import Side
from config.game_config import GameConfig
from game.input_edges import TickIntents
from game.match import Match
from game.match_state import MatchStatus

ACTION_INTENTS = {
    0: TickIntents(),
    1: TickIntents(left=True),
    2: TickIntents(right=True),
    3: TickIntents(jump_pressed=True),
    4: TickIntents(fake_pressed=True),
    5: TickIntents(action_pressed=True),
    6: TickIntents(dodge_left=True),
    7: TickIntents(dodge_right=True),
}


class BasketEnv(gym.Env):
    """
    Headless 1v1 basketball against the scripted opponent.

    **Core Responsibilities**:
    - Implement the Gymnasium interface (reset, step, render, close)
    - Seed the match's shared generator from reset(seed=...)
    - Translate discrete actions into tick intents for the human side
    """

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(self, render_mode=None, config: Optional[GameConfig] = None, max_steps: Optional[int] = None):
        """
        Args:
            render_mode: "human" for a pygame window, None for headless training
            config: Game configuration (training configuration if None)
            max_steps: Step limit per episode (one full match if None)
        """
        super().__init__()
        self.render_mode = render_mode
        self.config = config or GameConfig.create_training()
        self.dt = self.config.physics.REFERENCE_DT
        self.max_steps = max_steps or int(round(self.config.match.GAME_TIME / self.dt))

        self.observation_builder = ObservationBuilder(self.config)
        self.action_space = spaces.Discrete(len(ACTION_INTENTS))
        self.observation_space = spaces.Box(
            low=-np.inf, high=np.inf, shape=(ObservationBuilder.OBS_DIM,), dtype=np.float32
        )

        self.match: Optional[Match] = None
        self.steps = 0
        self.screen = None
        self.clock = None
        self.renderer = None

    def reset(self, seed=None, options=None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        self.match = Match(self.config, rng=self.np_random)
        self.match.start()
        self.steps = 0
        return self._get_observation(), self._get_info()

    def step(self, action) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        if self.match is None:
            raise RuntimeError("Call reset() before step()")

        scores_before = dict(self.match.state.scores)
        self.match.advance(self.dt, ACTION_INTENTS.get(int(action), ACTION_INTENTS[0]))
        scores_after = self.match.state.scores

        reward = float((scores_after[Side.PLAYER] - scores_before[Side.PLAYER])
                       - (scores_after[Side.OPPONENT] - scores_before[Side.OPPONENT]))

        self.steps += 1
        terminated = self.match.status is MatchStatus.ENDED
        truncated = not terminated and self.steps >= self.max_steps

        if self.render_mode == "human":
            self.render()
        return self._get_observation(), reward, terminated, truncated, self._get_info()

    def _get_observation(self) -> np.ndarray:
        return self.observation_builder.build_observation(self.match.state)

    def _get_info(self) -> Dict[str, Any]:
        state = self.match.state
        return {
            "scores": {side.value: points for side, points in state.scores.items()},
            "time_remaining": state.time_remaining,
            "steps": self.steps,
        }

    def render(self):
        if self.render_mode != "human":
            return
        if self.screen is None:
            from drawing.drawing import Renderer

            pygame.init()
            self.screen = pygame.display.set_mode((self.config.court.WIDTH, self.config.court.HEIGHT))
            pygame.display.set_caption("Basket Rivals Training")
            self.clock = pygame.time.Clock()
            self.renderer = Renderer(self.config)
        self.renderer.draw(self.screen, self.match.snapshot())
        pygame.display.flip()
        self.clock.tick(self.metadata["render_fps"])

    def close(self):
        if self.screen is not None:
            pygame.quit()
            self.screen = None
