"""Catalog of thematic label pairs for the two strategies.

Each pair names the first and second strategy of a configuration, e.g.
("swerve", "straight") for a game of Chicken. Labels are distinct within a
pair but may repeat across pairs ("accept" appears twice).
"""

import random
from collections.abc import Iterator

CHOICE_LABEL_PAIRS: tuple[tuple[str, str], ...] = (
    ("cooperate", "defect"),
    ("swerve", "straight"),
    ("macro", "micro"),
    ("fight", "back_down"),
    ("bet", "fold"),
    ("raise_price", "lower_price"),
    ("opera", "football"),
    ("go", "stay"),
    ("heads", "tails"),
    ("particle", "wave"),
    ("discrete", "continuous"),
    ("peace", "war"),
    ("search", "evaluate"),
    ("lead", "follow"),
    ("accept", "reject"),
    ("accept", "deny"),
    ("attack", "decay"),
)


class ChoiceLabelRegistry:
    """Read-only access to a catalog of label pairs.

    The default instance wraps CHOICE_LABEL_PAIRS; tests may pass their own
    catalog.
    """

    def __init__(self, pairs: tuple[tuple[str, str], ...] = CHOICE_LABEL_PAIRS) -> None:
        if not pairs:
            raise ValueError("label catalog must contain at least one pair")
        self._pairs = tuple(pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._pairs)

    def pair_at(self, index: int) -> tuple[str, str]:
        """Return the label pair at index.

        Raises:
            IndexError: If index is outside [0, len(self)). Negative indices
                are rejected rather than counted from the end.
        """
        if not 0 <= index < len(self._pairs):
            raise IndexError(f"label pair index must be in [0, {len(self._pairs)}), got {index}")
        return self._pairs[index]

    def random_pair(self, rng: random.Random | None = None) -> tuple[str, str]:
        """Pick a label pair uniformly at random.

        Uses a fresh, entropy-seeded generator unless one is passed in.
        """
        if rng is None:
            rng = random.Random()
        return self.pair_at(rng.randrange(len(self._pairs)))

    def random_pair_seeded(self, seed: int) -> tuple[str, str]:
        """Pick a label pair reproducibly: the same seed gives the same pair."""
        return self.random_pair(random.Random(seed))


DEFAULT_REGISTRY = ChoiceLabelRegistry()
