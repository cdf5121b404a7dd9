"""
Match State

The single mutable record of a match: both agents, the ball, the score, the
clock and the post-score countdown. The Match controller owns it and passes
it explicitly into the interaction engine and the opponent policy.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional

from common.side import Side
from config.game_config import GameConfig
from court.court import Court
from player.agent import Agent
from player.ball import Ball


class MatchStatus(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    ENDED = "ended"


class Outcome(Enum):
    """Result from the human player's perspective"""
    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"


@dataclass
class MatchState:
    config: GameConfig
    court: Court
    agents: Dict[Side, Agent]
    ball: Ball
    scores: Dict[Side, int] = field(default_factory=lambda: {Side.PLAYER: 0, Side.OPPONENT: 0})
    time_remaining: float = 0.0
    elapsed: float = 0.0
    status: MatchStatus = MatchStatus.NOT_STARTED
    pending_reset_in: Optional[float] = None

    @classmethod
    def create(cls, config: GameConfig) -> "MatchState":
        """Fresh match: agents at their start spots, ball at centre court."""
        court = Court(config)
        agents = {
            Side.PLAYER: Agent(Side.PLAYER, court.start_position(Side.PLAYER), config),
            Side.OPPONENT: Agent(Side.OPPONENT, court.start_position(Side.OPPONENT), config,
                                 max_speed=config.opponent.MAX_SPEED),
        }
        return cls(
            config=config,
            court=court,
            agents=agents,
            ball=cls.new_ball(config, court),
            time_remaining=config.match.GAME_TIME,
        )

    @staticmethod
    def new_ball(config: GameConfig, court: Court) -> Ball:
        start = court.ball_start_position()
        return Ball(start.x, start.y, config)

    @property
    def player(self) -> Agent:
        return self.agents[Side.PLAYER]

    @property
    def opponent(self) -> Agent:
        return self.agents[Side.OPPONENT]

    def agent(self, side: Side) -> Agent:
        return self.agents[side]

    def holder(self) -> Optional[Agent]:
        """Agent currently holding the ball, if any."""
        if self.ball.holder is None:
            return None
        return self.agents[self.ball.holder]

    def outcome(self) -> Optional[Outcome]:
        if self.status is not MatchStatus.ENDED:
            return None
        player_score = self.scores[Side.PLAYER]
        opponent_score = self.scores[Side.OPPONENT]
        if player_score > opponent_score:
            return Outcome.WIN
        if player_score < opponent_score:
            return Outcome.LOSE
        return Outcome.DRAW
