"""
Agent Entity (human player and scripted opponent)

This module holds the body both agents share: position, velocity, facing,
ground contact, possession flag and the countdown timers that gate abilities.

**Responsibility**: Per-tick movement integration and ability triggers
**Dependencies**: GameConfig, geometry helpers

**Timers** (seconds, decremented every tick, never below zero):
- jump_cooldown: time until the next jump is allowed
- dodge_cooldown: time until the next dodge is allowed
- dodge_timer: remaining dash time of an active dodge
- fake_timer: remaining time of an active pump fake
- steal_cooldown: time until the next steal attempt is allowed
- hit_stun: remaining stun after being stripped of the ball
- regrab_cooldown: time until a shooter may catch its own release again
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from common.geometry import Vector, clamp
from common.side import Side
from config.game_config import GameConfig

TIMER_NAMES = (
    "jump_cooldown",
    "dodge_cooldown",
    "dodge_timer",
    "fake_timer",
    "steal_cooldown",
    "hit_stun",
    "regrab_cooldown",
)


@dataclass
class AgentInput:
    """Level-sensitive movement intent for one tick"""
    left: bool = False
    right: bool = False

    @property
    def move(self) -> int:
        return int(bool(self.right)) - int(bool(self.left))


class Agent:
    """
    One of the two bodies on the court.

    **Usage**:
    ```python
    agent = Agent(Side.PLAYER, court.start_position(Side.PLAYER), config)
    agent.try_jump()
    agent.update(AgentInput(right=True), dt)
    x1, x2 = agent.feet_pos()
    ```
    """

    def __init__(self, side: Side, position: Vector, config: GameConfig,
                 max_speed: Optional[float] = None):
        self.side = side
        self.config = config
        self.width = config.agent.WIDTH
        self.height = config.agent.HEIGHT
        self.max_speed = max_speed
        self.reset(position)
        self.jump_cooldown = 0.0
        self.dodge_cooldown = 0.0
        self.steal_cooldown = 0.0

    def reset(self, position: Vector) -> None:
        """Put the agent at position, standing still without the ball."""
        self.x = position.x
        self.y = position.y
        self.vx = 0.0
        self.vy = 0.0
        self.facing_right = position.x < self.config.court.WIDTH / 2
        self.on_ground = True
        self.has_ball = False
        self.dodge_timer = 0.0
        self.fake_timer = 0.0
        self.hit_stun = 0.0
        self.regrab_cooldown = 0.0

    @property
    def is_dodging(self) -> bool:
        return self.dodge_timer > 0

    @property
    def is_faking(self) -> bool:
        return self.fake_timer > 0

    @property
    def is_stunned(self) -> bool:
        return self.hit_stun > 0

    def feet_pos(self) -> Tuple[float, float]:
        """X coordinates of the two foot edges, inset from the bounding box."""
        inset = self.config.agent.FOOT_INSET
        return (self.x - self.width / 2 + inset, self.x + self.width / 2 - inset)

    def hand_point(self) -> Tuple[float, float]:
        """Point above the body centre used for ball pickup range."""
        return (self.x, self.y - self.config.agent.HAND_HEIGHT)

    def update(self, agent_input: AgentInput, dt: float) -> None:
        """
        Advance timers, movement, gravity and ground contact by dt seconds.

        Args:
            agent_input: Movement intent (ignored while stunned or dodging)
            dt: Elapsed seconds for this tick
        """
        for name in TIMER_NAMES:
            setattr(self, name, max(0.0, getattr(self, name) - dt))

        agent = self.config.agent
        step = dt / self.config.physics.REFERENCE_DT
        move = 0 if self.is_stunned else agent_input.move

        if self.is_dodging:
            self.vx = (1 if self.facing_right else -1) * agent.DODGE_SPEED
        else:
            self.vx += move * agent.MOVE_GAIN * step
            self.vx *= agent.FRICTION ** step
            if self.max_speed is not None:
                self.vx = clamp(self.vx, -self.max_speed, self.max_speed)

        self.x += self.vx * step

        if self.vx > agent.FACING_DEADZONE:
            self.facing_right = True
        elif self.vx < -agent.FACING_DEADZONE:
            self.facing_right = False

        gravity_scale = agent.GROUND_GRAVITY_SCALE if self.on_ground else 1.0
        self.vy += self.config.physics.GRAVITY * gravity_scale * step
        self.y += self.vy * step

        floor_y = self.config.court.FLOOR_Y
        self.on_ground = self.y + self.height / 2 >= floor_y
        if self.on_ground:
            self.y = floor_y - self.height / 2
            self.vy = 0.0

        margin = self.config.court.SIDE_MARGIN
        self.x = clamp(self.x, margin, self.config.court.WIDTH - margin)

    def try_jump(self) -> bool:
        if self.is_stunned or self.jump_cooldown > 0 or not self.on_ground:
            return False
        self.vy = -self.config.agent.JUMP_SPEED
        self.on_ground = False
        self.jump_cooldown = self.config.actions.JUMP_COOLDOWN
        return True

    def try_dodge(self, direction: str) -> bool:
        """
        Start a dash in direction ("left" or "right").

        Returns:
            True if the dodge started, False while on cooldown or stunned
        """
        if self.is_stunned or self.dodge_cooldown > 0:
            return False
        self.dodge_timer = self.config.actions.DODGE_DURATION
        self.dodge_cooldown = self.config.actions.DODGE_COOLDOWN
        self.facing_right = direction == "right"
        return True

    def try_fake(self) -> bool:
        """Pump fake: only with the ball and not already mid-fake."""
        if self.is_stunned or not self.has_ball or self.is_faking:
            return False
        self.fake_timer = self.config.actions.FAKE_DURATION
        return True

    def __repr__(self) -> str:
        return f"Agent({self.side.value}, x={self.x:.1f}, y={self.y:.1f})"
