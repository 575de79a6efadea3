"""Dilemma Tactix CLI module.

Provides the single-round console game.

Usage:
    tactix

Or directly:
    python -m dilemma_tactix.cli.app
"""

from dilemma_tactix.cli.app import build_parser, build_table, main, play_round

__all__ = ["build_parser", "build_table", "main", "play_round"]
