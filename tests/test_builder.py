"""Unit tests for builder.py.

Tests cover:
1. Mode restriction - every forbidden (mode, field) pair raises
2. Value validation - labels, bounds, seeds, outcome cells
3. Immutability - setters return new builders
4. build() defaults for each mode
5. Seeded builds - reproducibility and per-cell sub-seeds
"""

import logging

import pytest

from dilemma_tactix.config import DEFAULT_SEED
from dilemma_tactix.errors import (
    BuilderError,
    InvalidOptionSpecified,
    InvalidOptionValueSpecified,
)
from dilemma_tactix.models.builder import (
    ALL_FIELDS,
    ALLOWED_FIELDS,
    OUTCOME_FIELDS,
    ConfigurationBuilder,
    derive_sub_seeds,
)
from dilemma_tactix.models.configuration import BuilderMode
from dilemma_tactix.models.payoff import PayoffPair

VALID_VALUES = {
    "min_value": 2,
    "max_value": 8,
    "seed": 5,
    "choice_label_a": "left",
    "choice_label_b": "right",
    "outcome_aa": PayoffPair(1, 1),
    "outcome_ab": PayoffPair(2, 0),
    "outcome_ba": PayoffPair(0, 2),
    "outcome_bb": PayoffPair(1, 0),
}

FORBIDDEN = [
    (mode, field) for mode in BuilderMode for field in ALL_FIELDS if field not in ALLOWED_FIELDS[mode]
]
PERMITTED = [(mode, field) for mode in BuilderMode for field in sorted(ALLOWED_FIELDS[mode])]


def _set(builder: ConfigurationBuilder, field: str) -> ConfigurationBuilder:
    return getattr(builder, field)(VALID_VALUES[field])


# =============================================================================
# Mode Restriction Tests
# =============================================================================


class TestModeRestriction:
    """Tests for which fields each mode accepts."""

    def test_allowed_fields_per_mode(self) -> None:
        assert ALLOWED_FIELDS[BuilderMode.RANDOMIZED] == {
            "min_value",
            "max_value",
            "choice_label_a",
            "choice_label_b",
        }
        assert ALLOWED_FIELDS[BuilderMode.SEEDED] == {
            "min_value",
            "max_value",
            "choice_label_a",
            "choice_label_b",
            "seed",
        }
        assert ALLOWED_FIELDS[BuilderMode.CUSTOMIZED] == {
            "choice_label_a",
            "choice_label_b",
            *OUTCOME_FIELDS,
        }

    @pytest.mark.parametrize(
        "mode,field", FORBIDDEN, ids=[f"{mode.value}-{field}" for mode, field in FORBIDDEN]
    )
    def test_forbidden_field_raises(self, mode: BuilderMode, field: str) -> None:
        builder = ConfigurationBuilder(mode)
        with pytest.raises(InvalidOptionSpecified) as exc_info:
            _set(builder, field)
        assert exc_info.value.field == field
        assert builder.get(field) is None

    @pytest.mark.parametrize(
        "mode,field", PERMITTED, ids=[f"{mode.value}-{field}" for mode, field in PERMITTED]
    )
    def test_permitted_field_applied(self, mode: BuilderMode, field: str) -> None:
        builder = ConfigurationBuilder(mode)
        updated = _set(builder, field)
        assert updated.get(field) == VALID_VALUES[field]
        assert updated.mode == mode

    def test_forbidden_checked_before_value(self) -> None:
        """A bad value for a forbidden field still reports the mode problem."""
        with pytest.raises(InvalidOptionSpecified):
            ConfigurationBuilder.customized().min_value(-1)

    def test_payoff_range_forbidden_in_customized(self) -> None:
        with pytest.raises(InvalidOptionSpecified):
            ConfigurationBuilder.customized().payoff_range(1, 5)

    def test_error_message_format(self) -> None:
        with pytest.raises(InvalidOptionSpecified) as exc_info:
            ConfigurationBuilder.randomized().seed(1)
        assert str(exc_info.value) == "Invalid option specified: seed cannot be set on a randomized builder"

    def test_errors_are_value_errors(self) -> None:
        assert issubclass(InvalidOptionSpecified, BuilderError)
        assert issubclass(InvalidOptionValueSpecified, BuilderError)
        assert issubclass(BuilderError, ValueError)


# =============================================================================
# Value Validation Tests
# =============================================================================


class TestValueValidation:
    """Tests for InvalidOptionValueSpecified."""

    @pytest.mark.parametrize("mode", list(BuilderMode))
    @pytest.mark.parametrize("field", ["choice_label_a", "choice_label_b"])
    @pytest.mark.parametrize("label", ["", "   "])
    def test_empty_label_rejected(self, mode: BuilderMode, field: str, label: str) -> None:
        with pytest.raises(InvalidOptionValueSpecified) as exc_info:
            getattr(ConfigurationBuilder(mode), field)(label)
        assert exc_info.value.field == field
        assert "cannot be empty" in str(exc_info.value)

    def test_non_string_label_rejected(self) -> None:
        with pytest.raises(InvalidOptionValueSpecified):
            ConfigurationBuilder().choice_label_a(None)  # type: ignore[arg-type]

    def test_choice_labels_sets_both(self) -> None:
        builder = ConfigurationBuilder().choice_labels("go", "stay")
        assert builder.get("choice_label_a") == "go"
        assert builder.get("choice_label_b") == "stay"

    @pytest.mark.parametrize("value", [-1, 2.5, True, "3"])
    def test_invalid_bound_rejected(self, value) -> None:
        with pytest.raises(InvalidOptionValueSpecified):
            ConfigurationBuilder().min_value(value)
        with pytest.raises(InvalidOptionValueSpecified):
            ConfigurationBuilder().max_value(value)

    def test_min_not_below_explicit_max(self) -> None:
        builder = ConfigurationBuilder().max_value(5)
        with pytest.raises(InvalidOptionValueSpecified, match="less than max_value"):
            builder.min_value(5)

    def test_min_not_below_default_max(self) -> None:
        with pytest.raises(InvalidOptionValueSpecified):
            ConfigurationBuilder().min_value(10)

    def test_max_not_above_explicit_min(self) -> None:
        builder = ConfigurationBuilder().min_value(4)
        with pytest.raises(InvalidOptionValueSpecified, match="greater than min_value"):
            builder.max_value(3)

    def test_max_not_above_default_min(self) -> None:
        with pytest.raises(InvalidOptionValueSpecified):
            ConfigurationBuilder().max_value(1)

    def test_raise_range_by_setting_max_first(self) -> None:
        builder = ConfigurationBuilder().max_value(30).min_value(20)
        assert (builder.get("min_value"), builder.get("max_value")) == (20, 30)

    def test_payoff_range_checked_against_itself(self) -> None:
        builder = ConfigurationBuilder().payoff_range(20, 30)
        assert (builder.get("min_value"), builder.get("max_value")) == (20, 30)
        builder = ConfigurationBuilder().payoff_range(0, 1)
        assert (builder.get("min_value"), builder.get("max_value")) == (0, 1)

    def test_payoff_range_empty_rejected(self) -> None:
        with pytest.raises(InvalidOptionValueSpecified):
            ConfigurationBuilder().payoff_range(7, 7)

    @pytest.mark.parametrize("seed", [-1, 1.0, False, "7"])
    def test_invalid_seed_rejected(self, seed) -> None:
        with pytest.raises(InvalidOptionValueSpecified, match="seed"):
            ConfigurationBuilder.seeded().seed(seed)

    def test_outcome_must_be_payoff_pair(self) -> None:
        with pytest.raises(InvalidOptionValueSpecified, match="PayoffPair"):
            ConfigurationBuilder.customized().outcome_aa((1, 1))  # type: ignore[arg-type]

    def test_unknown_mode_rejected(self) -> None:
        with pytest.raises(ValueError):
            ConfigurationBuilder("tournament")

    def test_mode_from_string(self) -> None:
        assert ConfigurationBuilder("seeded").mode == BuilderMode.SEEDED

    def test_get_unknown_field(self) -> None:
        with pytest.raises(KeyError):
            ConfigurationBuilder().get("score")


# =============================================================================
# Immutability Tests
# =============================================================================


class TestBuilderImmutability:
    """Setters never modify the builder they are called on."""

    def test_setter_returns_new_builder(self) -> None:
        original = ConfigurationBuilder()
        updated = original.choice_label_a("north")
        assert updated is not original
        assert original.get("choice_label_a") is None
        assert updated.get("choice_label_a") == "north"

    def test_failed_setter_leaves_builder_usable(self) -> None:
        builder = ConfigurationBuilder().choice_label_a("north")
        with pytest.raises(InvalidOptionSpecified):
            builder.outcome_aa(PayoffPair(1, 1))
        assert builder.get("choice_label_a") == "north"
        assert builder.build().choice_label_a == "north"

    def test_chained_values_accumulate(self) -> None:
        builder = ConfigurationBuilder.seeded().seed(3).payoff_range(2, 6).choice_labels("x", "y")
        assert builder.get("seed") == 3
        assert builder.get("min_value") == 2
        assert builder.get("max_value") == 6
        assert builder.get("choice_label_b") == "y"


# =============================================================================
# Build Tests
# =============================================================================


class TestRandomizedBuild:
    """Tests for building in randomized mode."""

    def test_default_build(self) -> None:
        config = ConfigurationBuilder.randomized().build()
        assert config.mode == BuilderMode.RANDOMIZED
        assert config.min_value == 1
        assert config.max_value == 10
        assert config.seed is None
        assert config.choice_label_a == "cooperate"
        assert config.choice_label_b == "defect"
        for payoff in config.outcomes().values():
            assert 1 <= payoff.first <= 10
            assert 1 <= payoff.second <= 10

    def test_custom_range_and_labels(self) -> None:
        config = ConfigurationBuilder().payoff_range(20, 25).choice_labels("hawk", "dove").build()
        assert (config.min_value, config.max_value) == (20, 25)
        assert (config.choice_label_a, config.choice_label_b) == ("hawk", "dove")
        for payoff in config.outcomes().values():
            assert 20 <= payoff.first <= 25
            assert 20 <= payoff.second <= 25

    def test_build_never_raises_for_any_valid_builder(self) -> None:
        for upper in range(1, 30):
            config = ConfigurationBuilder().payoff_range(0, upper).build()
            assert config.max_value == upper


class TestCustomizedBuild:
    """Tests for building in customized mode."""

    def test_default_build_is_canonical_matrix(self) -> None:
        config = ConfigurationBuilder.customized().build()
        assert config.mode == BuilderMode.CUSTOMIZED
        assert config.outcome_aa == PayoffPair(4, 4)
        assert config.outcome_ab == PayoffPair(5, 0)
        assert config.outcome_ba == PayoffPair(0, 5)
        assert config.outcome_bb == PayoffPair(3, 3)
        assert config.choice_label_a == "cooperate"
        assert config.choice_label_b == "defect"

    def test_customized_has_no_range_or_seed(self) -> None:
        config = ConfigurationBuilder.customized().build()
        assert config.min_value is None
        assert config.max_value is None
        assert config.seed is None

    def test_round_trip(self) -> None:
        config = (
            ConfigurationBuilder.customized()
            .choice_label_a("A")
            .choice_label_b("B")
            .outcome_aa(PayoffPair(1, 1))
            .outcome_ab(PayoffPair(1, 1))
            .outcome_ba(PayoffPair(1, 1))
            .outcome_bb(PayoffPair(1, 1))
            .build()
        )
        assert config.choice_label_a == "A"
        assert config.choice_label_b == "B"
        assert config.outcome_aa == PayoffPair(1, 1)
        assert config.outcome_ab == PayoffPair(1, 1)
        assert config.outcome_ba == PayoffPair(1, 1)
        assert config.outcome_bb == PayoffPair(1, 1)

    def test_partial_outcomes_use_defaults(self) -> None:
        config = ConfigurationBuilder.customized().outcome_ab(PayoffPair(7, 1)).build()
        assert config.outcome_aa == PayoffPair(4, 4)
        assert config.outcome_ab == PayoffPair(7, 1)
        assert config.outcome_ba == PayoffPair(0, 5)
        assert config.outcome_bb == PayoffPair(3, 3)


class TestSeededBuild:
    """Tests for building in seeded mode."""

    def test_same_seed_same_configuration(self) -> None:
        first = ConfigurationBuilder.seeded(2024).build()
        second = ConfigurationBuilder.seeded(2024).build()
        assert first == second

    def test_defaults(self) -> None:
        config = ConfigurationBuilder.seeded().build()
        assert config.mode == BuilderMode.SEEDED
        assert config.seed == DEFAULT_SEED
        assert (config.min_value, config.max_value) == (1, 10)
        assert (config.choice_label_a, config.choice_label_b) == ("cooperate", "defect")

    def test_unset_seed_matches_default_seed(self) -> None:
        assert ConfigurationBuilder.seeded().build() == ConfigurationBuilder.seeded(DEFAULT_SEED).build()

    def test_cells_drawn_from_sub_seeds(self) -> None:
        config = ConfigurationBuilder.seeded(11).payoff_range(0, 50).build()
        sub_seeds = derive_sub_seeds(11)
        cells = [config.outcome_aa, config.outcome_ab, config.outcome_ba, config.outcome_bb]
        for cell, sub_seed in zip(cells, sub_seeds):
            assert cell == PayoffPair.random_seeded(0, 50, sub_seed)

    def test_range_containment(self) -> None:
        for seed in range(50):
            config = ConfigurationBuilder.seeded(seed).payoff_range(3, 6).build()
            for payoff in config.outcomes().values():
                assert 3 <= payoff.first <= 6
                assert 3 <= payoff.second <= 6

    def test_different_seeds_give_different_tables(self) -> None:
        tables = {
            tuple(p.as_tuple() for p in ConfigurationBuilder.seeded(seed).build().outcomes().values())
            for seed in range(10)
        }
        assert len(tables) > 1


class TestDeriveSubSeeds:
    """Tests for splitting one seed into per-cell seeds."""

    @pytest.mark.parametrize("seed", [0, 1, 2024, 2**63])
    def test_four_distinct_sub_seeds(self, seed: int) -> None:
        sub_seeds = derive_sub_seeds(seed)
        assert len(sub_seeds) == 4
        assert len(set(sub_seeds)) == 4

    def test_reproducible(self) -> None:
        assert derive_sub_seeds(99) == derive_sub_seeds(99)

    def test_count(self) -> None:
        assert len(derive_sub_seeds(5, count=9)) == 9


class TestBuildLogging:
    """build() reports the configuration at DEBUG level."""

    def test_build_logs_mode(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="dilemma_tactix.models.builder")
        ConfigurationBuilder.customized().build()
        assert "Built customized configuration" in caplog.text
        assert "aa=(4, 4)" in caplog.text
