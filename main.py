"""
Main game file for Basket Rivals - 1v1 arcade basketball

This is the entry point for the game that features:
- Human-controlled player (left side, attacking the right hoop) via keyboard
- Scripted opponent (right side, attacking the left hoop)
- 90 second match clock, 2 and 3 point shots, dunks, pump fakes, dodges, steals

The simulation itself lives in game/, player/, court/ and ai/; this file is
only the host: it samples the keyboard, drives one match tick per frame with
the measured frame time and draws the resulting snapshot.

Controls:
- Left/Right or A/D: move (double tap to dodge)
- Up or W: jump
- F: pump fake (with the ball)
- Space: shoot with the ball, steal without it
- Enter: start, R: restart, Esc: quit
"""

import argparse
import logging
import sys

import pygame

from config.game_config import GameConfig
from drawing.drawing import Renderer
from game.events import GameEvent, GameEventType
from game.match import Match
from game.match_state import MatchStatus
from player.player_controller import KeyboardInputSource

# === COMMAND LINE ARGUMENTS ===
parser = argparse.ArgumentParser(description="Basket Rivals - 1v1 arcade basketball")
parser.add_argument("--opponent", choices=["opponent_ai", "none"], default="opponent_ai",
                    help="Opponent control: opponent_ai=scripted opponent, none=stands still")
parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible matches")
parser.add_argument("--fast", action="store_true", help="Use the fast-paced configuration")
parser.add_argument("--verbose", action="store_true", help="Log simulation details")
args = parser.parse_args()

logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                    format="%(asctime)s %(name)s %(levelname)s %(message)s")

# === GAME OBJECTS CREATION ===
config = GameConfig.create_fast_paced() if args.fast else GameConfig.create_default()
match = Match(config, seed=args.seed, use_opponent_ai=args.opponent == "opponent_ai")
keyboard = KeyboardInputSource()

if args.opponent == "opponent_ai":
    print("Opponent controlled by scripted OpponentAI")
else:
    print("Opponent has no control (stationary)")


def announce(event: GameEvent) -> None:
    """Console stand-in for sound effects."""
    if event.event_type is GameEventType.SHOT_SWISHED:
        print(f"{event.side.value} scores {event.data.get('points')}! {match.get_time_str()}")
    elif event.event_type is GameEventType.DUNK_PERFORMED:
        print(f"{event.side.value} throws it down!")
    elif event.event_type is GameEventType.STEAL_SUCCEEDED:
        print(f"Steal by {event.side.value}")
    elif event.event_type is GameEventType.PERIOD_END_BUZZER:
        print(f"Final buzzer: {match.outcome.value}")


match.events.subscribe_all(announce)

# === PYGAME WINDOW SETUP ===
pygame.init()
screen = pygame.display.set_mode((config.court.WIDTH, config.court.HEIGHT))
pygame.display.set_caption("Basket Rivals")
renderer = Renderer(config)
clock = pygame.time.Clock()

# === MAIN GAME LOOP ===
while True:
    for event in pygame.event.get():
        if event.type == pygame.QUIT or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE):
            pygame.quit()
            sys.exit()
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_RETURN and match.status is MatchStatus.NOT_STARTED:
                match.start()
            elif event.key == pygame.K_r:
                match.restart()

    # Frame time in seconds; the match clamps long stalls itself
    dt = clock.tick(config.visual.FPS) / 1000.0
    keys = pygame.key.get_pressed()
    snapshot = match.tick(dt, keyboard.get_raw_input(keys))

    renderer.draw(screen, snapshot)
    pygame.display.flip()
