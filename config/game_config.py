"""
Game Configuration Constants

This module centralizes all tuning constants of the basketball simulation.
Velocities and accelerations are expressed in court units per reference tick
(1/60 s); durations and cooldowns are in seconds.

**Categories**:
1. **Court**: Dimensions, floor line, hoops, three-point radius
2. **Physics**: Gravity, ball restitution and damping
3. **Agent**: Body size, movement gain, friction, jump/dodge speeds
4. **Actions**: Cooldowns and durations, pickup radius, shot/dunk tuning
5. **Steal**: Range, chances, knockback and stun
6. **Opponent**: Policy bands, speed cap and per-tick rates
7. **Match**: Game length, tick clamp, post-score delay, double-tap window
8. **Visual**: Colors and fonts for the debug renderer
"""

from dataclasses import dataclass, replace
from typing import Tuple


@dataclass(frozen=True)
class CourtConfig:
    """Court dimensions and hoop placement"""
    WIDTH: int = 960
    HEIGHT: int = 540
    FLOOR_MARGIN: float = 70.0      # Floor line sits this far above the bottom edge
    HOOP_HEIGHT: float = 200.0      # Rim height above the floor line
    HOOP_INSET: float = 120.0       # Hoop centre distance from each side edge
    RIM_RADIUS: float = 36.0
    THREE_POINT_RADIUS: float = 220.0
    AGENT_START_INSET: float = 180.0
    BALL_DROP_HEIGHT: float = 160.0  # Ball start height above the floor line
    SIDE_MARGIN: float = 20.0       # Agents stay this far from the side edges

    @property
    def FLOOR_Y(self) -> float:
        return self.HEIGHT - self.FLOOR_MARGIN

    @property
    def HOOP_Y(self) -> float:
        return self.FLOOR_Y - self.HOOP_HEIGHT


@dataclass(frozen=True)
class PhysicsConfig:
    """Physics constants shared by the ball and agents"""
    GRAVITY: float = 0.9
    REFERENCE_DT: float = 1.0 / 60.0
    BALL_RADIUS: float = 10.0
    BALL_GRAVITY_SCALE: float = 0.5
    BALL_AIR_DAMPING: float = 0.998
    BALL_FLOOR_RESTITUTION: float = 0.45
    BALL_FLOOR_FRICTION: float = 0.95
    BALL_REST_THRESHOLD: float = 1.0
    BALL_WALL_RESTITUTION: float = 0.5
    HAND_OFFSET_X: float = 26.0
    HAND_OFFSET_Y: float = 8.0


@dataclass(frozen=True)
class AgentConfig:
    """Agent body and movement constants"""
    WIDTH: float = 40.0
    HEIGHT: float = 56.0
    FOOT_INSET: float = 6.0
    HAND_HEIGHT: float = 12.0
    MOVE_GAIN: float = 0.9
    FRICTION: float = 0.85
    FACING_DEADZONE: float = 0.6
    GROUND_GRAVITY_SCALE: float = 0.8
    JUMP_SPEED: float = 14.5
    DODGE_SPEED: float = 8.0


@dataclass(frozen=True)
class ActionConfig:
    """Ability cooldowns, durations and shot tuning"""
    JUMP_COOLDOWN: float = 1.7
    DODGE_COOLDOWN: float = 2.5
    DODGE_DURATION: float = 0.22
    FAKE_DURATION: float = 0.42
    PICKUP_RADIUS: float = 38.0
    REGRAB_DELAY: float = 0.3

    # Shooting
    SHOT_POWER_DIVISOR: float = 10.0
    MIN_SHOT_POWER: float = 7.5
    MAX_SHOT_POWER: float = 20.0
    AIM_JITTER_MIN: float = 10.0
    AIM_JITTER_MAX: float = 60.0

    # Dunking
    DUNK_HEIGHT_WINDOW: float = 140.0
    DUNK_DISTANCE: float = 80.0
    DUNK_DRIFT: float = 0.08
    DUNK_LIFT: float = 8.0
    DUNK_LIFT_JITTER: float = 2.0
    DUNK_TAG_DURATION: float = 0.5


@dataclass(frozen=True)
class StealConfig:
    """Steal resolution constants"""
    RANGE: float = 56.0
    COOLDOWN: float = 0.6
    BASE_CHANCE: float = 0.5
    FAKE_CHANCE: float = 0.75
    DASH_BONUS: float = 0.15
    PUSH_MIN: float = 6.0
    PUSH_MAX: float = 10.0
    POP_MIN: float = 6.0
    POP_JITTER: float = 3.0
    HIT_STUN: float = 0.5
    KNOCKBACK: float = 0.6
    KNOCKBACK_POP: float = 3.0


@dataclass(frozen=True)
class OpponentConfig:
    """Scripted opponent policy constants (rates are per 1/60 s tick)"""
    MAX_SPEED: float = 4.2
    CHASE_DEADZONE: float = 8.0
    PICKUP_RANGE: float = 40.0
    SHOOTING_BAND: float = 80.0
    JUMP_BAND: float = 160.0
    SHOT_BAND: float = 220.0
    GUARD_DISTANCE: float = 30.0
    JUMP_RATE: float = 0.01
    SHOT_RATE: float = 0.03
    FAKE_READ_RATE: float = 0.35
    STEAL_RATE: float = 0.02


@dataclass(frozen=True)
class MatchConfig:
    """Match flow constants"""
    GAME_TIME: float = 90.0
    MAX_DT: float = 0.05
    SCORE_RESET_DELAY: float = 0.7
    DOUBLE_TAP_WINDOW: float = 0.28


@dataclass(frozen=True)
class VisualConfig:
    """Debug renderer constants"""
    FPS: int = 60
    FONT_SIZE: int = 24
    BACKGROUND_COLOR: Tuple[int, int, int] = (24, 28, 44)
    FLOOR_COLOR: Tuple[int, int, int] = (196, 140, 84)
    LINE_COLOR: Tuple[int, int, int] = (255, 255, 255)
    RIM_COLOR: Tuple[int, int, int] = (230, 80, 40)
    BALL_COLOR: Tuple[int, int, int] = (255, 140, 42)
    PLAYER_COLOR: Tuple[int, int, int] = (255, 184, 77)
    OPPONENT_COLOR: Tuple[int, int, int] = (101, 214, 255)
    TEXT_COLOR: Tuple[int, int, int] = (255, 255, 255)


class GameConfig:
    """
    Central game configuration container.

    **Usage**:
    ```python
    from config.game_config import GameConfig

    config = GameConfig()
    floor_y = config.court.FLOOR_Y
    steal_cooldown = config.steal.COOLDOWN
    ```
    """

    def __init__(self):
        self.court = CourtConfig()
        self.physics = PhysicsConfig()
        self.agent = AgentConfig()
        self.actions = ActionConfig()
        self.steal = StealConfig()
        self.opponent = OpponentConfig()
        self.match = MatchConfig()
        self.visual = VisualConfig()

    @classmethod
    def create_default(cls) -> 'GameConfig':
        """Create default game configuration"""
        return cls()

    @classmethod
    def create_fast_paced(cls) -> 'GameConfig':
        """Create configuration for fast-paced gameplay"""
        config = cls()
        config.agent = replace(config.agent, MOVE_GAIN=1.2, DODGE_SPEED=10.0)
        config.actions = replace(config.actions, JUMP_COOLDOWN=1.2, DODGE_COOLDOWN=1.8)
        config.opponent = replace(config.opponent, MAX_SPEED=5.5)
        return config

    @classmethod
    def create_training(cls) -> 'GameConfig':
        """Create configuration for headless training episodes"""
        config = cls()
        config.match = replace(config.match, GAME_TIME=30.0)
        return config
