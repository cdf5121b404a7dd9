"""
Input Edge Detection

Turns the raw, level-sensitive key state of each tick into the intents the
simulation acts on:
- movement stays level-sensitive (held = moving)
- jump, fake and action fire once per press (rising edge only)
- a dodge fires when the same direction is pressed twice within the
  double-tap window, measured in match time

Anything that is not a recognised intent name is ignored, and values that
cannot be read as booleans count as released.
"""

from dataclasses import dataclass, fields
from typing import Mapping, Optional

RAW_INTENTS = ("left", "right", "jump", "fake", "action")


@dataclass
class RawInput:
    """Key state sampled this tick"""
    left: bool = False
    right: bool = False
    jump: bool = False
    fake: bool = False
    action: bool = False

    @classmethod
    def from_mapping(cls, mapping: Mapping) -> "RawInput":
        """Build from a name -> pressed mapping, ignoring unknown names."""
        values = {}
        for name in RAW_INTENTS:
            try:
                values[name] = _as_flag(mapping.get(name, False))
            except (AttributeError, TypeError):
                values[name] = False
        return cls(**values)


@dataclass
class TickIntents:
    """Intents resolved for one tick"""
    left: bool = False
    right: bool = False
    jump_pressed: bool = False
    fake_pressed: bool = False
    action_pressed: bool = False
    dodge_left: bool = False
    dodge_right: bool = False


def _as_flag(value) -> bool:
    try:
        return bool(value)
    except (TypeError, ValueError):
        return False


def coerce_raw_input(raw) -> RawInput:
    """Accept a RawInput, a mapping or None; anything else reads as no input."""
    if isinstance(raw, RawInput):
        return RawInput(**{f.name: _as_flag(getattr(raw, f.name)) for f in fields(RawInput)})
    if isinstance(raw, Mapping):
        return RawInput.from_mapping(raw)
    return RawInput()


class InputEdgeDetector:
    """
    Diffs the previous tick's raw input against the current one.

    **Usage**:
    ```python
    detector = InputEdgeDetector(double_tap_window=0.28)
    intents = detector.update(RawInput(jump=True), now=state.elapsed)
    assert intents.jump_pressed
    intents = detector.update(RawInput(jump=True), now=state.elapsed + dt)
    assert not intents.jump_pressed   # still held, no repeat fire
    ```
    """

    def __init__(self, double_tap_window: float = 0.28):
        self.double_tap_window = double_tap_window
        self.reset()

    def reset(self) -> None:
        """Forget held keys and pending double taps."""
        self._previous = RawInput()
        self._last_tap: dict = {"left": None, "right": None}

    def update(self, raw, now: float) -> TickIntents:
        """
        Resolve this tick's intents.

        Args:
            raw: RawInput, mapping of intent names, or None
            now: Current match time in seconds
        """
        current = coerce_raw_input(raw)
        previous = self._previous
        self._previous = current

        def pressed(name: str) -> bool:
            return getattr(current, name) and not getattr(previous, name)

        return TickIntents(
            left=current.left,
            right=current.right,
            jump_pressed=pressed("jump"),
            fake_pressed=pressed("fake"),
            action_pressed=pressed("action"),
            dodge_left=pressed("left") and self._double_tap("left", now),
            dodge_right=pressed("right") and self._double_tap("right", now),
        )

    def _double_tap(self, direction: str, now: float) -> bool:
        last: Optional[float] = self._last_tap[direction]
        if last is not None and now - last < self.double_tap_window:
            self._last_tap[direction] = None
            return True
        self._last_tap[direction] = now
        return False
