"""
Match Controller - Tick Pipeline, Clock and Match Lifecycle

This module runs the match. It owns the MatchState and is the only code that
mutates it; presentation reads snapshots and subscribes to events.

**Key Features**:
- NOT_STARTED -> RUNNING -> ENDED lifecycle with explicit start/restart
- One tick per host frame with a sanitised, clamped dt
- Fixed per-tick order: input -> agents -> possession -> ball -> scoring -> timers
- Post-score reset as a countdown on the state, never a wall-clock timer
- Game clock counting down from 90 seconds, latching ENDED at zero

**Usage**:
```python
match = Match(seed=7)
match.start()
while match.status is MatchStatus.RUNNING:
    snapshot = match.tick(dt, RawInput(right=True))
```
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from ai.opponent_ai import OpponentAI, OpponentIntent
from common.side import Side
from config.game_config import GameConfig
from game.events import EventBus, GameEvent, GameEventType
from game.input_edges import InputEdgeDetector, TickIntents
from game.interactions import InteractionEngine
from game.match_state import MatchState, MatchStatus, Outcome
from player.agent import Agent, AgentInput

logger = logging.getLogger(__name__)

# Float dt sums leave picoseconds on the clock
CLOCK_EPSILON = 1e-9


@dataclass(frozen=True)
class AgentView:
    side: Side
    x: float
    y: float
    vx: float
    vy: float
    facing_right: bool
    on_ground: bool
    has_ball: bool
    faking: bool
    dodging: bool
    dodge_cooldown: float
    stunned: bool

    @classmethod
    def of(cls, agent: Agent) -> "AgentView":
        return cls(
            side=agent.side, x=agent.x, y=agent.y, vx=agent.vx, vy=agent.vy,
            facing_right=agent.facing_right, on_ground=agent.on_ground,
            has_ball=agent.has_ball, faking=agent.is_faking, dodging=agent.is_dodging,
            dodge_cooldown=agent.dodge_cooldown, stunned=agent.is_stunned,
        )


@dataclass(frozen=True)
class BallView:
    x: float
    y: float
    vx: float
    vy: float
    radius: float
    holder: Optional[Side]
    scored: bool


@dataclass(frozen=True)
class MatchSnapshot:
    """Read-only view of the match for presentation"""
    status: MatchStatus
    scores: Dict[Side, int]
    time_remaining: float
    time_str: str
    player: AgentView
    opponent: AgentView
    ball: BallView
    outcome: Optional[Outcome]


def format_clock(seconds: float) -> str:
    """Format remaining seconds as mm:ss, rounding up partial seconds."""
    whole = int(math.ceil(max(0.0, seconds)))
    return f"{whole // 60:02d}:{whole % 60:02d}"


class Match:
    """
    Central match controller.

    **Responsibilities**:
    1. **Lifecycle**: start, restart and the time-expiry transition to ENDED
    2. **Tick Pipeline**: Apply intents, move agents, resolve possession,
       fly the ball, detect baskets and run the clocks, in that order
    3. **Deferred Reset**: Count down the post-score delay and re-spot
    4. **Presentation Interface**: Snapshots, clock string, events
    """

    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None,
                 use_opponent_ai: bool = True, rng=None):
        """
        Args:
            config: Game configuration (default configuration if None)
            seed: Seed for the shared random generator
            use_opponent_ai: Drive the opponent with OpponentAI (idle if False)
            rng: Explicit generator, overrides seed
        """
        self.config = config or GameConfig.create_default()
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.events = EventBus()
        self.engine = InteractionEngine(self.config, self.rng, self.events)
        self.opponent_ai = OpponentAI(self.config, self.rng) if use_opponent_ai else None
        self.input_edges = InputEdgeDetector(self.config.match.DOUBLE_TAP_WINDOW)
        self.state = MatchState.create(self.config)

    # === LIFECYCLE ===

    @property
    def status(self) -> MatchStatus:
        return self.state.status

    @property
    def outcome(self) -> Optional[Outcome]:
        return self.state.outcome()

    def start(self) -> bool:
        """Begin play from NOT_STARTED. Returns False in any other state."""
        if self.state.status is not MatchStatus.NOT_STARTED:
            return False
        self._begin()
        return True

    def restart(self) -> None:
        """Throw the current match away and start a fresh one immediately."""
        logger.info("Match restarted")
        self._begin()

    def reset(self) -> None:
        """Back to NOT_STARTED with fresh entities, score and clock."""
        self.state = MatchState.create(self.config)
        self.input_edges.reset()

    def _begin(self) -> None:
        self.reset()
        self.state.status = MatchStatus.RUNNING
        logger.info("Match started (%.0f s)", self.state.time_remaining)
        self._emit(GameEventType.PERIOD_START_WHISTLE)

    def _emit(self, event_type: GameEventType, side: Optional[Side] = None, **data) -> None:
        self.events.emit(GameEvent(event_type, timestamp=self.state.elapsed, side=side, data=data))

    # === TICK PIPELINE ===

    def sanitize_dt(self, dt) -> float:
        """Non-finite, negative or non-numeric dt becomes 0; large dt is clamped."""
        try:
            dt = float(dt)
        except (TypeError, ValueError):
            return 0.0
        if not math.isfinite(dt) or dt < 0:
            return 0.0
        return min(dt, self.config.match.MAX_DT)

    def tick(self, dt, raw_input=None) -> MatchSnapshot:
        """
        Advance one frame using raw key state for the human player.

        Args:
            dt: Seconds since the previous tick
            raw_input: RawInput, mapping of intent names, or None
        """
        if self.state.status is not MatchStatus.RUNNING:
            return self.snapshot()
        dt = self.sanitize_dt(dt)
        intents = self.input_edges.update(raw_input, self.state.elapsed + dt)
        return self.advance(dt, intents)

    def advance(self, dt, intents: Optional[TickIntents] = None) -> MatchSnapshot:
        """Advance one frame with already-resolved intents for the human player."""
        state = self.state
        if state.status is not MatchStatus.RUNNING:
            return self.snapshot()
        dt = self.sanitize_dt(dt)
        intents = intents or TickIntents()
        state.elapsed += dt

        # 1. input resolution
        opponent_intent = self.opponent_ai.decide(state, dt) if self.opponent_ai else OpponentIntent()
        self._apply_player_intents(intents)
        self._apply_opponent_intent(opponent_intent)

        # 2. agents
        state.player.update(AgentInput(intents.left, intents.right), dt)
        state.opponent.update(AgentInput(opponent_intent.left, opponent_intent.right), dt)

        # 3. possession
        if not state.player.is_stunned:
            self.engine.try_pickup(state, state.player)
        if opponent_intent.pickup and not state.opponent.is_stunned:
            self.engine.try_pickup(state, state.opponent)

        # 4. ball
        for event_type in state.ball.update(dt, state.holder()):
            self._emit(event_type)

        # 5. scoring
        self.engine.check_score(state)

        # 6. timers
        self._advance_timers(dt)
        return self.snapshot()

    def _apply_player_intents(self, intents: TickIntents) -> None:
        state = self.state
        player = state.player
        if intents.dodge_left:
            player.try_dodge("left")
        elif intents.dodge_right:
            player.try_dodge("right")
        if intents.jump_pressed:
            player.try_jump()
        if intents.fake_pressed:
            player.try_fake()
        if intents.action_pressed:
            if player.has_ball:
                self.engine.shoot_ball(state, player)
            else:
                self.engine.try_steal(state, player, state.opponent)

    def _apply_opponent_intent(self, intent: OpponentIntent) -> None:
        state = self.state
        opponent = state.opponent
        if intent.jump:
            opponent.try_jump()
        if intent.shoot:
            self.engine.shoot_ball(state, opponent)
        if intent.steal:
            self.engine.try_steal(state, opponent, state.player)

    def _advance_timers(self, dt: float) -> None:
        state = self.state
        if state.pending_reset_in is not None:
            state.pending_reset_in -= dt
            if state.pending_reset_in <= 0:
                self.engine.reset_after_score(state)

        state.time_remaining = max(0.0, state.time_remaining - dt)
        if state.time_remaining <= CLOCK_EPSILON:
            state.time_remaining = 0.0
            state.status = MatchStatus.ENDED
            logger.info("Match ended %d-%d (%s)", state.scores[Side.PLAYER],
                        state.scores[Side.OPPONENT], state.outcome().value)
            self._emit(GameEventType.PERIOD_END_BUZZER)

    # === PRESENTATION INTERFACE ===

    def get_time_str(self) -> str:
        return format_clock(self.state.time_remaining)

    def snapshot(self) -> MatchSnapshot:
        state = self.state
        ball = state.ball
        return MatchSnapshot(
            status=state.status,
            scores=dict(state.scores),
            time_remaining=state.time_remaining,
            time_str=self.get_time_str(),
            player=AgentView.of(state.player),
            opponent=AgentView.of(state.opponent),
            ball=BallView(x=ball.x, y=ball.y, vx=ball.vx, vy=ball.vy, radius=ball.radius,
                          holder=ball.holder, scored=ball.scored),
            outcome=state.outcome(),
        )
