#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--width W] [--height H] [--mines N] [--seed S]
    python main.py simulate [--games N] [--seed S]
"""
import argparse
import random

import numpy as np

from src.minesweeper import (
    BoardConfig,
    GameEngine,
    InvalidConfiguration,
    MinesweeperEnv,
    OutOfBounds,
    render_board,
    status_line,
)

COMMANDS = {
    "r": "reveal",
    "f": "toggle_flag",
    "c": "reveal_neighbors",
}

HELP = "Commands: r ROW COL (reveal), f ROW COL (flag), c ROW COL (chord), n (new game), q (quit)"


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Create a board configuration from command-line options."""
    return BoardConfig(width=args.width, height=args.height, mine_count=args.mines)


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    config = build_config(args)
    rng = random.Random(args.seed)
    engine = GameEngine(config, randint=rng.randrange)

    print(HELP)
    while True:
        print()
        print(render_board(engine))
        print(status_line(engine))
        if engine.is_won:
            print("*** WIN! *** (n for a new game, q to quit)")
        elif engine.is_lost:
            print("*** LOST (hit mine) *** (n for a new game, q to quit)")

        try:
            line = input("> ").strip().lower()
        except EOFError:
            break

        parts = line.split()
        if not parts:
            continue
        if parts[0] == "q":
            break
        if parts[0] == "n":
            engine.reset()
            continue
        if parts[0] not in COMMANDS or len(parts) != 3:
            print(HELP)
            continue

        try:
            row, col = int(parts[1]), int(parts[2])
        except ValueError:
            print("Row and column must be integers")
            continue

        try:
            getattr(engine, COMMANDS[parts[0]])(row, col)
        except OutOfBounds as exc:
            print(exc)


def simulate(args: argparse.Namespace) -> None:
    """Play games with uniformly random reveals and report results."""
    config = build_config(args)
    env = MinesweeperEnv(config=config)
    rng = np.random.default_rng(args.seed)

    wins = 0
    total_revealed = 0

    for game in range(args.games):
        seed = args.seed + game if args.seed is not None else None
        obs, info = env.reset(seed=seed)
        done = False

        while not done:
            valid_actions = np.flatnonzero(env.get_action_mask())
            action = int(rng.choice(valid_actions))
            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated

        if info["game_state"] == "WON":
            wins += 1
        total_revealed += info["revealed"]

    print(f"Random play over {args.games} games on "
          f"{config.width}x{config.height} with {config.mine_count} mines:")
    print(f"  Win rate: {wins / args.games:.1%}")
    print(f"  Avg opened: {total_revealed / args.games:.1f} cells")


def add_board_options(parser: argparse.ArgumentParser) -> None:
    """Attach board size options to a subcommand parser."""
    parser.add_argument("--width", type=int, default=30, help="Board width")
    parser.add_argument("--height", type=int, default=16, help="Board height")
    parser.add_argument("--mines", type=int, default=99, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - play or simulate games"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_options(play_parser)

    # Simulate command
    simulate_parser = subparsers.add_parser(
        "simulate", help="Play random games and report statistics"
    )
    add_board_options(simulate_parser)
    simulate_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )

    args = parser.parse_args()

    try:
        if args.command == "play":
            play(args)
        elif args.command == "simulate":
            simulate(args)
        else:
            parser.print_help()
    except InvalidConfiguration as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
