"""Play a maze in the terminal."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Callable, Iterable, List, Optional

from .config import GameConfig, add_config_arguments
from .game.state import Direction, GameState, MoveResult
from .maze.render import render_text
from .reveal import RevealSequence

COMMANDS = {
    "w": Direction.UP,
    "up": Direction.UP,
    "s": Direction.DOWN,
    "down": Direction.DOWN,
    "a": Direction.LEFT,
    "left": Direction.LEFT,
    "d": Direction.RIGHT,
    "right": Direction.RIGHT,
}
REGENERATE_COMMANDS = {"r", "regenerate"}
QUIT_COMMANDS = {"q", "quit", "exit"}

HELP = "Commands: w/a/s/d (or up/left/down/right), r to regenerate, q to quit"


def _show(state: GameState, write: Callable[[str], None]) -> None:
    x, y = state.player_position
    write(render_text(state.maze, player=state.player_position))
    write(f"Player Position: ({x}, {y})")
    if state.message:
        write(state.message)


def _animate_reveal(
    state: GameState,
    write: Callable[[str], None],
    delay: float,
    sleep: Callable[[float], None],
) -> None:
    sequence = RevealSequence(state.maze, state.generation)
    for _ in sequence.replay():
        sleep(delay)
        write(render_text(state.maze, hidden=sequence.hidden))


def run(
    state: GameState,
    commands: Iterable[str],
    *,
    write: Callable[[str], None] = print,
    animate: bool = False,
    sleep: Callable[[float], None] = time.sleep,
) -> GameState:
    """Drive ``state`` with text commands until they run out or one quits."""

    delay = state.config.reveal_delay
    if animate:
        _animate_reveal(state, write, delay, sleep)
    _show(state, write)
    for raw in commands:
        command = raw.strip().lower()
        if not command:
            continue
        if command in QUIT_COMMANDS:
            break
        if command in REGENERATE_COMMANDS:
            state.regenerate()
            if animate:
                _animate_reveal(state, write, delay, sleep)
        elif command in COMMANDS:
            result = state.move(COMMANDS[command])
            if result is MoveResult.REACHED_EXIT:
                write("You reached the exit!")
        else:
            write(HELP)
            continue
        _show(state, write)
    return state


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Navigate a randomly generated maze")
    add_config_arguments(parser)
    parser.add_argument("--animate", action="store_true", help="Replay the carve order before playing")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())
    config = GameConfig.from_namespace(args)
    state = GameState(config)
    print(HELP)
    run(state, sys.stdin, animate=args.animate)


if __name__ == "__main__":
    main()
