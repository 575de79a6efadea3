"""The two strategies a player can pick in one round."""

import random
from enum import Enum


class Choice(Enum):
    """Which of the two available strategies a player picked.

    Values are the names used in the original game; the configured labels
    (e.g. "cooperate"/"defect") are looked up separately so the tag never
    depends on display text.
    """

    FIRST = "atlantis"
    SECOND = "olympus"

    def __str__(self) -> str:
        return self.value.capitalize()

    @classmethod
    def random(cls, rng: random.Random | None = None) -> "Choice":
        """Pick one of the two choices uniformly at random."""
        if rng is None:
            rng = random.Random()
        return rng.choice([cls.FIRST, cls.SECOND])

    @classmethod
    def from_key(cls, key: str) -> "Choice":
        """Parse the "A"/"B" keys used by the front ends."""
        normalized = key.strip().upper()
        if normalized == "A":
            return cls.FIRST
        if normalized == "B":
            return cls.SECOND
        raise ValueError(f"Choice key must be 'A' or 'B', got {key!r}")
