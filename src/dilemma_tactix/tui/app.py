"""Dilemma Tactix terminal dashboard.

A Textual interface showing the payoff table. Press A or B to pick player 1's
choice; the opponent picks at random and the outcome is shown below the table.

Usage:
    tactix-tui
    tactix-tui --mode seeded --seed 7
"""

from __future__ import annotations

import logging
import random
import sys
from dataclasses import dataclass

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical
from textual.widgets import Footer, Header, Static

from dilemma_tactix.cli.app import USAGE_ERROR, build_parser, build_table
from dilemma_tactix.errors import BuilderError
from dilemma_tactix.logging_setup import configure_logging
from dilemma_tactix.models import Choice, GameTable, PayoffPair

logger = logging.getLogger(__name__)

CSS = """
#board {
    align: center middle;
}

.board-container {
    width: auto;
    height: auto;
    border: round $primary;
    padding: 1 2;
}

#grid {
    width: auto;
}

#status {
    margin-top: 1;
    width: auto;
}
"""


@dataclass(frozen=True)
class RoundResult:
    """Both choices of a finished round and the payoff they produced."""

    choice_1: Choice
    choice_2: Choice
    payoff: PayoffPair


class TactixApp(App):
    """Dashboard for one game table."""

    TITLE = "Tactix"
    CSS = CSS

    BINDINGS = [
        Binding("a", "choose('A')", "Pick A"),
        Binding("b", "choose('B')", "Pick B"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, table: GameTable | None = None, rng: random.Random | None = None) -> None:
        super().__init__()
        self.table = table if table is not None else GameTable.default()
        self.rng = rng
        self.last_round: RoundResult | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="board"):
            with Vertical(classes="board-container"):
                yield Static(self.table.render(), id="grid", markup=False)
                yield Static(self._prompt_text(), id="status", markup=False)
        yield Footer()

    def action_choose(self, key: str) -> None:
        """Play a round with player 1's choice given by key."""
        choice_1 = Choice.from_key(key)
        choice_2 = Choice.random(self.rng)
        self.last_round = RoundResult(choice_1, choice_2, self.table.lookup(choice_1, choice_2))
        logger.debug("Round played: %s vs %s -> %s", choice_1, choice_2, self.last_round.payoff)
        self.query_one("#status", Static).update(self.table.describe(choice_1, choice_2))

    def _prompt_text(self) -> str:
        return f"A: {self.table.label_a}    B: {self.table.label_b}"


def main(argv: list[str] | None = None) -> int:
    """Entry point for the dashboard."""
    parser = build_parser()
    parser.prog = "tactix-tui"
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        table = build_table(args)
    except BuilderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return USAGE_ERROR

    rng = random.Random(args.seed) if args.seed is not None else None
    TactixApp(table, rng=rng).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
