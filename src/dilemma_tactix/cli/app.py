"""Dilemma Tactix command line game.

Plays a single round: shows the payoff table, asks player 1 for a choice,
gets player 2's choice (from a second human or a random pick), and prints
the outcome.

Usage:
    tactix
    tactix --mode seeded --seed 2024 --random-labels
    tactix --mode customized --opponent human
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from collections.abc import Callable

from dilemma_tactix.config import LOG_LEVELS
from dilemma_tactix.errors import BuilderError
from dilemma_tactix.logging_setup import configure_logging
from dilemma_tactix.models import (
    DEFAULT_REGISTRY,
    BuilderMode,
    Choice,
    ConfigurationBuilder,
    GameTable,
)

logger = logging.getLogger(__name__)

# Exit status for invalid option combinations, same as argparse usage errors
USAGE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tactix",
        description="Play one round of a two-choice dilemma game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in BuilderMode],
        default=BuilderMode.RANDOMIZED.value,
        help="How payoffs are produced (default: randomized)",
    )
    parser.add_argument("--min-value", type=int, default=None, help="Lowest payoff (default: 1)")
    parser.add_argument("--max-value", type=int, default=None, help="Highest payoff (default: 10)")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible payoffs, labels and opponent (seeded mode only)",
    )
    parser.add_argument("--label-a", default=None, help="Label of the first strategy")
    parser.add_argument("--label-b", default=None, help="Label of the second strategy")
    parser.add_argument(
        "--random-labels",
        action="store_true",
        help="Pick the strategy labels from the built-in catalog",
    )
    parser.add_argument(
        "--opponent",
        choices=["random", "human"],
        default="random",
        help="Who picks player 2's choice (default: random)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: $TACTIX_LOG_LEVEL or WARNING)",
    )
    return parser


def build_table(args: argparse.Namespace) -> GameTable:
    """Build the game table described by the parsed arguments.

    Raises:
        BuilderError: If an option is not allowed in the chosen mode or has
            an invalid value.
    """
    builder = ConfigurationBuilder(BuilderMode(args.mode))

    if args.seed is not None:
        builder = builder.seed(args.seed)

    if args.random_labels:
        if args.seed is not None:
            pair = DEFAULT_REGISTRY.random_pair_seeded(args.seed)
        else:
            pair = DEFAULT_REGISTRY.random_pair()
        builder = builder.choice_labels(*pair)
    if args.label_a is not None:
        builder = builder.choice_label_a(args.label_a)
    if args.label_b is not None:
        builder = builder.choice_label_b(args.label_b)

    if args.min_value is not None and args.max_value is not None:
        builder = builder.payoff_range(args.min_value, args.max_value)
    elif args.min_value is not None:
        builder = builder.min_value(args.min_value)
    elif args.max_value is not None:
        builder = builder.max_value(args.max_value)

    return GameTable(builder.build())


def read_choice(prompt: str, input_fn: Callable[[str], str] = input) -> Choice:
    """Ask for "A" or "B"; anything else falls back to the first choice."""
    try:
        answer = input_fn(prompt)
    except EOFError:
        answer = ""
    try:
        return Choice.from_key(answer)
    except ValueError:
        print("Invalid choice, defaulting to A")
        logger.info("Unrecognized choice %r, using %s", answer, Choice.FIRST)
        return Choice.FIRST


def play_round(
    table: GameTable,
    opponent: str = "random",
    rng: random.Random | None = None,
    input_fn: Callable[[str], str] = input,
) -> tuple[Choice, Choice]:
    """Show the table, collect both choices and print the outcome."""
    table.print()
    print("The choices available to you are: ")
    print(f"A: {table.label_a}")
    print(f"B: {table.label_b}")

    choice_1 = read_choice("Enter your choice (A or B): ", input_fn)
    if opponent == "human":
        choice_2 = read_choice("Enter opponent's choice (A or B): ", input_fn)
    else:
        choice_2 = Choice.random(rng)
        print(f"Opponent chose {table.label_for(choice_2)}")

    print(table.describe(choice_1, choice_2))
    return choice_1, choice_2


def main(argv: list[str] | None = None, input_fn: Callable[[str], str] = input) -> int:
    """Entry point for the command line game."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        table = build_table(args)
    except BuilderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return USAGE_ERROR

    rng = random.Random(args.seed) if args.seed is not None else None
    play_round(table, opponent=args.opponent, rng=rng, input_fn=input_fn)
    return 0


if __name__ == "__main__":
    sys.exit(main())
