"""Dilemma Tactix game models.

This module exports the core data structures for the game.
"""

from .builder import (
    ALLOWED_FIELDS,
    ConfigurationBuilder,
    derive_sub_seeds,
)
from .choice import Choice
from .choice_labels import (
    CHOICE_LABEL_PAIRS,
    DEFAULT_REGISTRY,
    ChoiceLabelRegistry,
)
from .configuration import BuilderMode, GameConfiguration
from .payoff import PayoffPair
from .table import GameTable

__all__ = [
    # Enums
    "BuilderMode",
    "Choice",
    # Models
    "ChoiceLabelRegistry",
    "ConfigurationBuilder",
    "GameConfiguration",
    "GameTable",
    "PayoffPair",
    # Functions
    "derive_sub_seeds",
    # Constants
    "ALLOWED_FIELDS",
    "CHOICE_LABEL_PAIRS",
    "DEFAULT_REGISTRY",
]
