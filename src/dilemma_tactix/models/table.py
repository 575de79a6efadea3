"""Game table: payoff lookup and text rendering over a GameConfiguration."""

import sys
from typing import TextIO

from dilemma_tactix.models.choice import Choice
from dilemma_tactix.models.configuration import GameConfiguration
from dilemma_tactix.models.payoff import PayoffPair

CORNER_HEADER = "Player 1 \\ Player 2"


class GameTable:
    """Query and display wrapper used during play.

    Lookup is keyed by Choice members, so two configurations that happen to
    share a label can never be confused.
    """

    def __init__(self, configuration: GameConfiguration) -> None:
        self._configuration = configuration
        self._outcomes = configuration.outcomes()

    @classmethod
    def default(cls) -> "GameTable":
        return cls(GameConfiguration.default())

    @property
    def configuration(self) -> GameConfiguration:
        return self._configuration

    @property
    def label_a(self) -> str:
        return self._configuration.choice_label_a

    @property
    def label_b(self) -> str:
        return self._configuration.choice_label_b

    @property
    def min_value(self) -> int | None:
        return self._configuration.min_value

    @property
    def max_value(self) -> int | None:
        return self._configuration.max_value

    @property
    def outcome_aa(self) -> PayoffPair:
        return self._configuration.outcome_aa

    @property
    def outcome_ab(self) -> PayoffPair:
        return self._configuration.outcome_ab

    @property
    def outcome_ba(self) -> PayoffPair:
        return self._configuration.outcome_ba

    @property
    def outcome_bb(self) -> PayoffPair:
        return self._configuration.outcome_bb

    def label_for(self, choice: Choice) -> str:
        """Display label of a choice in this configuration."""
        return self.label_a if choice == Choice.FIRST else self.label_b

    def lookup(self, choice_1: Choice, choice_2: Choice) -> PayoffPair:
        """Payoff for player 1 picking choice_1 and player 2 picking choice_2."""
        return self._outcomes[(choice_1, choice_2)]

    def describe(self, choice_1: Choice, choice_2: Choice) -> str:
        """One-line summary of a round, as shown after both players pick."""
        payoff = self.lookup(choice_1, choice_2)
        if choice_1 == choice_2:
            picked = f"Both players chose {self.label_for(choice_1)}."
        else:
            picked = f"Player 1 chose {self.label_for(choice_1)}, Player 2 chose {self.label_for(choice_2)}."
        return f"{picked} Player 1 scored {payoff.first}, Player 2 scored {payoff.second}"

    def rows(self) -> list[list[str]]:
        """The 3x3 display grid: a header row, then one row per player 1 choice."""
        return [
            [CORNER_HEADER, self.label_a, self.label_b],
            [self.label_a, str(self.outcome_aa), str(self.outcome_ab)],
            [self.label_b, str(self.outcome_ba), str(self.outcome_bb)],
        ]

    def render(self) -> str:
        """Render the grid as a bordered text table."""
        grid = self.rows()
        widths = [max(len(row[col]) for row in grid) for col in range(3)]
        border = "+" + "+".join("-" * (width + 2) for width in widths) + "+"

        def line(cells: list[str]) -> str:
            return "| " + " | ".join(cell.ljust(width) for cell, width in zip(cells, widths)) + " |"

        lines = [border, line(grid[0]), border]
        lines.extend(line(row) for row in grid[1:])
        lines.append(border)
        return "\n".join(lines)

    def print(self, file: TextIO | None = None) -> None:
        print(self.render(), file=file if file is not None else sys.stdout)

    def __str__(self) -> str:
        return f"Game Table with Following Options:\n{self._configuration}\n"
