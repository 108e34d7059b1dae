"""
Console launcher for the non-transitive dice game.
Usage: python UI/cli.py 2,2,4,4,9,9 6,8,1,1,8,6 7,5,3,7,5,3
"""
import argparse
import logging
import sys

from nontransitive_dice.agents import AGENT_MAP
from nontransitive_dice.channels.console import ConsoleChannel, format_probability_table
from nontransitive_dice.core.config import GameConfig
from nontransitive_dice.core.dice import DiceConfigError, parse_dice
from nontransitive_dice.core.engine import GameEngine

EXAMPLE_USAGE = "Example usage: python UI/cli.py 2,2,4,4,9,9 6,8,1,1,8,6 7,5,3,7,5,3"


def build_parser():
    parser = argparse.ArgumentParser(description="Play non-transitive dice against the computer with provably fair throws.")
    parser.add_argument("dice", nargs="*", help="One die per argument, faces separated by commas")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the computer's die picking")
    parser.add_argument("--house", default="random", choices=sorted(AGENT_MAP), help="Agent that picks the computer's die")
    parser.add_argument("--table", action="store_true", help="Print the win probability table and exit")
    parser.add_argument("--verbose", action="store_true", help="Log engine transitions")
    return parser


def main(argv=None):
    """
    Parse the dice, then play one game on the console.
    Returns:
        int: Process exit code (0 also when the player exits early).
    """
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    cfg = GameConfig(house_agent=args.house, rng_seed=args.seed)
    try:
        dice = parse_dice(args.dice, cfg)
    except DiceConfigError as e:
        print(f"Error: {e}")
        print(EXAMPLE_USAGE)
        return 1

    if args.table:
        for line in format_probability_table(dice):
            print(line)
        return 0

    print("\nWelcome to the Non-Transitive Dice Game!")
    engine = GameEngine(dice, ConsoleChannel(dice), config=cfg)
    try:
        outcome = engine.play()
    except KeyboardInterrupt:
        print("\nExiting.")
        return 0
    if outcome.is_aborted:
        print("Goodbye")
    return 0


if __name__ == "__main__":
    sys.exit(main())
