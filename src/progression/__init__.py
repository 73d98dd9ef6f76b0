"""Gamified progression engine: achievements, skill constellation, streaks, XP and rank."""

__version__ = "0.1.0"
