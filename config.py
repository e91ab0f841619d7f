"""
config.py
=========
Central configuration module for Mansion Mystery.

All tunable constants (hash-table parameters, game rules, console command
keys) live here so they can be adjusted without touching the data
structures or the game loop.

Usage:
    from config import HASH_CONFIG, GAME_CONFIG, CONSOLE_CONFIG
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Hash table parameters
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class HashConfig:
    """
    Parameters of the clue → suspect hash table.

    The hash is djb2: start at ``seed`` and fold every UTF-8 byte of the clue
    in as ``h = h * multiplier + byte``, keeping 64 bits, then reduce modulo
    ``bucket_count`` once at the end. Insert and lookup share this config, so
    identical clue strings always land in the same bucket.

    Attributes:
        bucket_count: Number of buckets (a small prime).
        seed:         Initial hash value.
        multiplier:   Rolling multiplier applied before each byte is added.
    """
    bucket_count: int = 101
    seed:         int = 5381
    multiplier:   int = 33


# ---------------------------------------------------------------------------
# Game rules
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GameConfig:
    """
    Fixed game rules.

    Attributes:
        start_room:           Name of the room where exploration begins.
        accusation_threshold: Minimum number of corroborating clues for an
                              accusation to count as supported.
    """
    start_room:           str = "Hall"
    accusation_threshold: int = 2


@dataclass(frozen=True)
class ConsoleConfig:
    """
    Single-character navigation commands (matched case-insensitively on the
    first non-whitespace character of the input line).
    """
    left_key:  str = "e"
    right_key: str = "d"
    stop_key:  str = "s"


# ---------------------------------------------------------------------------
# Singleton instances (import-ready)
# ---------------------------------------------------------------------------

HASH_CONFIG    = HashConfig()
GAME_CONFIG    = GameConfig()
CONSOLE_CONFIG = ConsoleConfig()


# ---------------------------------------------------------------------------
# Environment overrides
# ---------------------------------------------------------------------------

LOG_LEVEL_ENV_VAR = "MANSION_LOG_LEVEL"


def log_level_from_env(default: int = logging.WARNING) -> int:
    """
    Resolve the log level from ``MANSION_LOG_LEVEL``.

    Accepts level names ("DEBUG", "info", ...) or numeric strings. Unknown
    values fall back to ``default``.
    """
    raw = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default
