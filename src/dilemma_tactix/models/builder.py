"""Builder for GameConfiguration.

The builder is created in one of three modes and keeps that mode for its
lifetime. The mode decides which fields may be set:

- RANDOMIZED: payoff range and labels; every cell is drawn at build time
- SEEDED: as RANDOMIZED plus a seed; the draws are reproducible
- CUSTOMIZED: labels and the four cells; no randomness

Setters never modify the builder they are called on. They return a new builder
carrying the applied field, or raise InvalidOptionSpecified (field not allowed
in this mode) / InvalidOptionValueSpecified (bad value). build() never raises:
every unset field has a default.

Example:
    >>> config = (
    ...     ConfigurationBuilder(BuilderMode.CUSTOMIZED)
    ...     .choice_label_a("A")
    ...     .choice_label_b("B")
    ...     .outcome_aa(PayoffPair(1, 1))
    ...     .build()
    ... )
"""

import logging
import random
from typing import Any

from dilemma_tactix.config import (
    DEFAULT_CUSTOM_OUTCOMES,
    DEFAULT_LABELS,
    DEFAULT_MAX_VALUE,
    DEFAULT_MIN_VALUE,
    DEFAULT_SEED,
)
from dilemma_tactix.errors import InvalidOptionSpecified, InvalidOptionValueSpecified
from dilemma_tactix.models.configuration import BuilderMode, GameConfiguration
from dilemma_tactix.models.payoff import PayoffPair

logger = logging.getLogger(__name__)

OUTCOME_FIELDS = ("outcome_aa", "outcome_ab", "outcome_ba", "outcome_bb")
LABEL_FIELDS = ("choice_label_a", "choice_label_b")
RANGE_FIELDS = ("min_value", "max_value")

ALL_FIELDS = RANGE_FIELDS + LABEL_FIELDS + OUTCOME_FIELDS + ("seed",)

ALLOWED_FIELDS: dict[BuilderMode, frozenset[str]] = {
    BuilderMode.RANDOMIZED: frozenset(RANGE_FIELDS + LABEL_FIELDS),
    BuilderMode.SEEDED: frozenset(RANGE_FIELDS + LABEL_FIELDS + ("seed",)),
    BuilderMode.CUSTOMIZED: frozenset(LABEL_FIELDS + OUTCOME_FIELDS),
}


def derive_sub_seeds(seed: int, count: int = 4) -> tuple[int, ...]:
    """Split one seed into count distinct 64-bit seeds, one per payoff cell.

    Reusing a single seed for every cell would give every cell the same pair.
    """
    rng = random.Random(seed)
    sub_seeds: list[int] = []
    while len(sub_seeds) < count:
        candidate = rng.getrandbits(64)
        if candidate not in sub_seeds:
            sub_seeds.append(candidate)
    return tuple(sub_seeds)


class ConfigurationBuilder:
    """Assembles a GameConfiguration field by field under a fixed mode."""

    def __init__(self, mode: BuilderMode | str = BuilderMode.RANDOMIZED) -> None:
        self._mode = BuilderMode(mode)
        self._values: dict[str, Any] = {}

    @classmethod
    def randomized(cls) -> "ConfigurationBuilder":
        return cls(BuilderMode.RANDOMIZED)

    @classmethod
    def seeded(cls, seed: int | None = None) -> "ConfigurationBuilder":
        builder = cls(BuilderMode.SEEDED)
        if seed is not None:
            builder = builder.seed(seed)
        return builder

    @classmethod
    def customized(cls) -> "ConfigurationBuilder":
        return cls(BuilderMode.CUSTOMIZED)

    @property
    def mode(self) -> BuilderMode:
        return self._mode

    def get(self, field: str) -> Any:
        """Return the explicitly set value of field, or None if unset."""
        if field not in ALL_FIELDS:
            raise KeyError(field)
        return self._values.get(field)

    def is_allowed(self, field: str) -> bool:
        return field in ALLOWED_FIELDS[self._mode]

    def __repr__(self) -> str:
        return f"ConfigurationBuilder(mode={self._mode.value}, values={self._values!r})"

    # Setters

    def min_value(self, min_value: int) -> "ConfigurationBuilder":
        self._require_allowed("min_value")
        _check_bound("min_value", min_value)
        upper = self._values.get("max_value", DEFAULT_MAX_VALUE)
        if min_value >= upper:
            raise InvalidOptionValueSpecified(
                "min_value", f"min_value must be less than max_value ({upper}), got {min_value}"
            )
        return self._with(min_value=min_value)

    def max_value(self, max_value: int) -> "ConfigurationBuilder":
        self._require_allowed("max_value")
        _check_bound("max_value", max_value)
        lower = self._values.get("min_value", DEFAULT_MIN_VALUE)
        if max_value <= lower:
            raise InvalidOptionValueSpecified(
                "max_value", f"max_value must be greater than min_value ({lower}), got {max_value}"
            )
        return self._with(max_value=max_value)

    def payoff_range(self, min_value: int, max_value: int) -> "ConfigurationBuilder":
        """Set both bounds at once, checked against each other only."""
        self._require_allowed("min_value")
        self._require_allowed("max_value")
        _check_bound("min_value", min_value)
        _check_bound("max_value", max_value)
        if min_value >= max_value:
            raise InvalidOptionValueSpecified(
                "min_value",
                f"min_value must be less than max_value, got min_value={min_value}, max_value={max_value}",
            )
        return self._with(min_value=min_value, max_value=max_value)

    def seed(self, seed: int) -> "ConfigurationBuilder":
        self._require_allowed("seed")
        if isinstance(seed, bool) or not isinstance(seed, int) or seed < 0:
            raise InvalidOptionValueSpecified("seed", f"seed must be a non-negative integer, got {seed!r}")
        return self._with(seed=seed)

    def choice_label_a(self, label: str) -> "ConfigurationBuilder":
        return self._set_label("choice_label_a", label)

    def choice_label_b(self, label: str) -> "ConfigurationBuilder":
        return self._set_label("choice_label_b", label)

    def choice_labels(self, label_a: str, label_b: str) -> "ConfigurationBuilder":
        return self.choice_label_a(label_a).choice_label_b(label_b)

    def outcome_aa(self, payoff: PayoffPair) -> "ConfigurationBuilder":
        return self._set_outcome("outcome_aa", payoff)

    def outcome_ab(self, payoff: PayoffPair) -> "ConfigurationBuilder":
        return self._set_outcome("outcome_ab", payoff)

    def outcome_ba(self, payoff: PayoffPair) -> "ConfigurationBuilder":
        return self._set_outcome("outcome_ba", payoff)

    def outcome_bb(self, payoff: PayoffPair) -> "ConfigurationBuilder":
        return self._set_outcome("outcome_bb", payoff)

    # Build

    def build(self) -> GameConfiguration:
        """Produce the configuration, filling every unset field with its default."""
        label_a = self._values.get("choice_label_a", DEFAULT_LABELS[0])
        label_b = self._values.get("choice_label_b", DEFAULT_LABELS[1])

        if self._mode == BuilderMode.CUSTOMIZED:
            outcomes = {
                name: self._values.get(name, PayoffPair(*default))
                for name, default in zip(OUTCOME_FIELDS, DEFAULT_CUSTOM_OUTCOMES)
            }
            config = GameConfiguration(
                mode=self._mode,
                choice_label_a=label_a,
                choice_label_b=label_b,
                **outcomes,
            )
        else:
            min_value = self._values.get("min_value", DEFAULT_MIN_VALUE)
            max_value = self._values.get("max_value", DEFAULT_MAX_VALUE)
            seed = None
            if self._mode == BuilderMode.SEEDED:
                seed = self._values.get("seed", DEFAULT_SEED)
                outcomes = {
                    name: PayoffPair.random_seeded(min_value, max_value, sub_seed)
                    for name, sub_seed in zip(OUTCOME_FIELDS, derive_sub_seeds(seed))
                }
            else:
                outcomes = {name: PayoffPair.random(min_value, max_value) for name in OUTCOME_FIELDS}
            config = GameConfiguration(
                mode=self._mode,
                min_value=min_value,
                max_value=max_value,
                seed=seed,
                choice_label_a=label_a,
                choice_label_b=label_b,
                **outcomes,
            )

        logger.debug(
            "Built %s configuration: aa=%s ab=%s ba=%s bb=%s",
            self._mode.value,
            config.outcome_aa,
            config.outcome_ab,
            config.outcome_ba,
            config.outcome_bb,
        )
        return config

    # Internals

    def _require_allowed(self, field: str) -> None:
        if not self.is_allowed(field):
            raise InvalidOptionSpecified(field, f"{field} cannot be set on a {self._mode.value} builder")

    def _with(self, **values: Any) -> "ConfigurationBuilder":
        clone = ConfigurationBuilder(self._mode)
        clone._values = {**self._values, **values}
        return clone

    def _set_label(self, field: str, label: str) -> "ConfigurationBuilder":
        self._require_allowed(field)
        if not isinstance(label, str) or not label.strip():
            raise InvalidOptionValueSpecified(field, f"{field} cannot be empty")
        return self._with(**{field: label})

    def _set_outcome(self, field: str, payoff: PayoffPair) -> "ConfigurationBuilder":
        self._require_allowed(field)
        if not isinstance(payoff, PayoffPair):
            raise InvalidOptionValueSpecified(field, f"{field} must be a PayoffPair, got {payoff!r}")
        return self._with(**{field: payoff})


def _check_bound(field: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidOptionValueSpecified(field, f"{field} must be a non-negative integer, got {value!r}")
