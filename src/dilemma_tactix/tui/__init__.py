"""Dilemma Tactix terminal dashboard.

Usage:
    tactix-tui
"""

from dilemma_tactix.tui.app import RoundResult, TactixApp, main

__all__ = ["RoundResult", "TactixApp", "main"]
