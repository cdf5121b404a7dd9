"""
Keyboard Input Source

This module translates the pygame keyboard state into the raw intents the
match consumes. It only samples keys; edge detection and double taps are
handled inside the match by the InputEdgeDetector.

**Responsibility**: Key state -> RawInput
**Dependencies**: pygame (key constants)
"""

from abc import ABC, abstractmethod
from typing import Dict

import pygame

from game.input_edges import RAW_INTENTS, RawInput


DEFAULT_KEY_MAPPINGS: Dict[int, str] = {
    pygame.K_LEFT: "left",
    pygame.K_a: "left",
    pygame.K_RIGHT: "right",
    pygame.K_d: "right",
    pygame.K_UP: "jump",
    pygame.K_w: "jump",
    pygame.K_f: "fake",
    pygame.K_SPACE: "action",
}


class InputSource(ABC):
    """Abstract base class for raw input sources"""

    @abstractmethod
    def get_raw_input(self, keys) -> RawInput:
        pass


class KeyboardInputSource(InputSource):
    """
    Maps keys to intent names.

    Several keys may map to the same intent; the intent is held when any of
    them is held.
    """

    def __init__(self, key_mappings: Dict[int, str] = None):
        self.key_mappings = dict(key_mappings or DEFAULT_KEY_MAPPINGS)

    def get_raw_input(self, keys) -> RawInput:
        """
        Args:
            keys: pygame.key.get_pressed() result, or a dict of key -> bool

        Returns:
            RawInput for this frame
        """
        held = {name: False for name in RAW_INTENTS}
        for key, intent in self.key_mappings.items():
            if intent in held and _is_pressed(keys, key):
                held[intent] = True
        return RawInput(**held)

    def customize_key_mapping(self, key: int, intent: str) -> None:
        if intent not in RAW_INTENTS:
            raise ValueError(f"Unknown intent: {intent}")
        self.key_mappings[key] = intent


def _is_pressed(keys, key: int) -> bool:
    try:
        return bool(keys[key])
    except (IndexError, KeyError):
        return False
