"""Payoff pairs for a single outcome cell of the game table."""

import random
from dataclasses import dataclass

from dilemma_tactix.errors import InvalidRangeError


@dataclass(frozen=True)
class PayoffPair:
    """Rewards paid to player 1 and player 2 for one joint outcome.

    Either value may exceed the other; both must be non-negative integers.
    """

    first: int
    second: int

    def __post_init__(self) -> None:
        """Validate that both payoffs are non-negative integers."""
        for name, value in (("first", self.first), ("second", self.second)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def __str__(self) -> str:
        return f"({self.first}, {self.second})"

    def as_tuple(self) -> tuple[int, int]:
        return (self.first, self.second)

    @classmethod
    def random(cls, min_value: int, max_value: int) -> "PayoffPair":
        """Draw both payoffs independently from [min_value, max_value].

        Raises:
            InvalidRangeError: If the bounds are not integers, min_value is
                negative, or min_value >= max_value.
        """
        _check_range(min_value, max_value)
        return cls._draw(random.Random(), min_value, max_value)

    @classmethod
    def random_seeded(cls, min_value: int, max_value: int, seed: int) -> "PayoffPair":
        """Like random(), but reproducible for a given (min, max, seed)."""
        _check_range(min_value, max_value)
        return cls._draw(random.Random(seed), min_value, max_value)

    @classmethod
    def _draw(cls, rng: "random.Random", min_value: int, max_value: int) -> "PayoffPair":
        # randint is inclusive on both ends
        return cls(rng.randint(min_value, max_value), rng.randint(min_value, max_value))


def _check_range(min_value: int, max_value: int) -> None:
    for value in (min_value, max_value):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidRangeError(min_value, max_value, "bounds must be integers")
    if min_value < 0:
        raise InvalidRangeError(min_value, max_value, "min_value must be non-negative")
    if not min_value < max_value:
        raise InvalidRangeError(min_value, max_value)
