"""
Main entry point for playing or replaying a word-grid session.

Usage:
    python -m src.main
    python -m src.main config.yaml
    python -m src.main config.yaml --output results/run1.json --verbose
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

import yaml

from .session import Replay, SessionConfig, parse_command, describe
from .wordgrid import render_grid


def load_config(config_path: str) -> SessionConfig:
    """Load session configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return SessionConfig(**data)


def show(replay: Replay) -> None:
    session = replay.session
    print(render_grid(session.grid, session.selector.positions))
    print(f"Word: {session.current_word}  Score: {session.score}")
    if session.history:
        print(f"Words: {', '.join(session.history)}")


def interactive(replay: Replay, stream=None) -> None:
    """Read commands line by line until EOF or 'quit'."""
    stream = stream or sys.stdin
    print("Commands: select ROW COL | submit | reset | custom LETTERS | toggle | show | quit")
    show(replay)

    for line in stream:
        line = line.strip()
        if not line:
            continue
        if line.lower() in ("quit", "exit"):
            break
        if line.lower() == "show":
            show(replay)
            continue

        try:
            event = parse_command(line)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            continue

        result = replay.apply(event)
        print(describe(result.outcome))
        show(replay)


def main(argv: Optional[list] = None):
    parser = argparse.ArgumentParser(
        description="Play a word-grid session",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  size: 4
  seed: 42
  dictionary: words.txt
  letters: CATSDOGSBEARMICE
  events:
    - {type: select, row: 0, col: 0}
    - {type: select, row: 0, col: 1}
    - {type: select, row: 0, col: 2}
    - {type: submit}
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults to a random 4x4 grid)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save results JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress and debug logging"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        config = load_config(args.config) if args.config else SessionConfig()
        replay = Replay.create(config=config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if config.events:
        result = replay.run(verbose=args.verbose)
    else:
        try:
            interactive(replay)
        except KeyboardInterrupt:
            print("\nSession interrupted by user")
        result = replay.get_result()

    if args.output:
        replay.save_result(args.output)
        print(f"Results saved to: {args.output}")

    final = result.final_state
    print()
    print("=== Session Summary ===")
    print(f"Events: {len(result.events)}")
    print(f"Score: {final.score}")
    print(f"Words: {', '.join(final.history) if final.history else '(none)'}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
