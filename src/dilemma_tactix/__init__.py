"""Dilemma Tactix: configurable two-choice simultaneous games."""

from dilemma_tactix.errors import (
    BuilderError,
    InvalidOptionSpecified,
    InvalidOptionValueSpecified,
    InvalidRangeError,
)
from dilemma_tactix.models import (
    CHOICE_LABEL_PAIRS,
    BuilderMode,
    Choice,
    ChoiceLabelRegistry,
    ConfigurationBuilder,
    GameConfiguration,
    GameTable,
    PayoffPair,
)

__all__ = [
    "BuilderError",
    "BuilderMode",
    "CHOICE_LABEL_PAIRS",
    "Choice",
    "ChoiceLabelRegistry",
    "ConfigurationBuilder",
    "GameConfiguration",
    "GameTable",
    "InvalidOptionSpecified",
    "InvalidOptionValueSpecified",
    "InvalidRangeError",
    "PayoffPair",
]
