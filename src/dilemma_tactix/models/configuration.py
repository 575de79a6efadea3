"""Validated description of one 2x2 game.

A GameConfiguration holds the two strategy labels and the four payoff cells.
It is normally produced by ConfigurationBuilder.build(); constructing one
directly is allowed, but goes through the same validation.

Outcome cells are named by (player 1 choice, player 2 choice):
- outcome_aa: both pick the first strategy
- outcome_ab: player 1 first, player 2 second
- outcome_ba: player 1 second, player 2 first
- outcome_bb: both pick the second strategy
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from dilemma_tactix.config import DEFAULT_MAX_VALUE, DEFAULT_MIN_VALUE
from dilemma_tactix.models.choice import Choice
from dilemma_tactix.models.payoff import PayoffPair


class BuilderMode(Enum):
    """How a configuration's payoff cells are produced."""

    RANDOMIZED = "randomized"  # fresh random draw per cell
    SEEDED = "seeded"  # reproducible draw per cell from one seed
    CUSTOMIZED = "customized"  # caller supplies every cell


class GameConfiguration(BaseModel):
    """Complete payoff matrix plus the two strategy labels.

    Constraints:
    - Labels are non-empty
    - min_value/max_value are None for customized configurations, otherwise
      0 <= min_value < max_value
    - seed is set only for seeded configurations
    """

    model_config = ConfigDict(frozen=True)

    mode: BuilderMode
    min_value: int | None = None
    max_value: int | None = None
    seed: int | None = None
    choice_label_a: str
    choice_label_b: str
    outcome_aa: PayoffPair
    outcome_ab: PayoffPair
    outcome_ba: PayoffPair
    outcome_bb: PayoffPair

    @field_validator("choice_label_a", "choice_label_b")
    @classmethod
    def validate_label(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("choice labels cannot be empty")
        return v

    @model_validator(mode="after")
    def validate_range(self) -> "GameConfiguration":
        if self.mode == BuilderMode.CUSTOMIZED:
            if self.min_value is not None or self.max_value is not None:
                raise ValueError("customized configurations do not carry a payoff range")
        else:
            if self.min_value is None or self.max_value is None:
                raise ValueError(f"{self.mode.value} configurations require min_value and max_value")
            if not 0 <= self.min_value < self.max_value:
                raise ValueError(
                    f"Range must satisfy 0 <= min_value < max_value, "
                    f"got min_value={self.min_value}, max_value={self.max_value}"
                )
        if self.seed is not None and self.mode != BuilderMode.SEEDED:
            raise ValueError("only seeded configurations carry a seed")
        return self

    @classmethod
    def from_range(cls, min_value: int, max_value: int) -> "GameConfiguration":
        """Randomized configuration with default labels over [min_value, max_value].

        Raises:
            InvalidOptionValueSpecified: If the range is empty or negative.
        """
        from dilemma_tactix.models.builder import ConfigurationBuilder

        return ConfigurationBuilder(BuilderMode.RANDOMIZED).payoff_range(min_value, max_value).build()

    @classmethod
    def default(cls) -> "GameConfiguration":
        return cls.from_range(DEFAULT_MIN_VALUE, DEFAULT_MAX_VALUE)

    def outcomes(self) -> dict[tuple[Choice, Choice], PayoffPair]:
        """Map every (player 1, player 2) choice combination to its cell."""
        return {
            (Choice.FIRST, Choice.FIRST): self.outcome_aa,
            (Choice.FIRST, Choice.SECOND): self.outcome_ab,
            (Choice.SECOND, Choice.FIRST): self.outcome_ba,
            (Choice.SECOND, Choice.SECOND): self.outcome_bb,
        }

    def __str__(self) -> str:
        return (
            f"mode: {self.mode.value}, min_value: {self.min_value}, max_value: {self.max_value}, "
            f"choice_a: {self.choice_label_a}, choice_b: {self.choice_label_b}"
        )
