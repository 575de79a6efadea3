"""Configuration defaults for Dilemma Tactix.

Game defaults live here as module constants. The only setting read from the
environment is the log level used by the front ends; game randomness is never
configured through the environment, only through explicit seeds.
"""

import os

# Payoff range used when a randomized configuration does not set one
DEFAULT_MIN_VALUE = 1
DEFAULT_MAX_VALUE = 10

# Seed used by a seeded builder that was never given one
DEFAULT_SEED = 0

DEFAULT_LABELS = ("cooperate", "defect")

# Canonical Prisoner's Dilemma cells used by customized builds:
# (first, first), (first, second), (second, first), (second, second)
DEFAULT_CUSTOM_OUTCOMES = ((4, 4), (5, 0), (0, 5), (3, 3))

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_ENV_VAR = "TACTIX_LOG_LEVEL"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_log_level() -> str:
    """Get the configured log level from the environment.

    Unknown values fall back to DEFAULT_LOG_LEVEL.
    """
    level = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    if level not in LOG_LEVELS:
        return DEFAULT_LOG_LEVEL
    return level
