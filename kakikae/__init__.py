"""
Kakikae: romaji, hiragana and katakana conversion
with longest-match tokenization and incremental (IME) input.
"""

import time
from typing import Tuple

from kakikae.characters import (
    is_hiragana, is_japanese, is_kana, is_kanji, is_katakana, is_mixed, is_romaji,
    split_runs,
)
from kakikae.config import Configuration, ConfigurationError, ImeMode, resolve_config
from kakikae.converter import Converter, tokenize
from kakikae.deromanize import split_into_kana, to_hiragana, to_kana, to_katakana
from kakikae.incremental import (
    ImeSession, ImeState, TokenStatus, classify_tokens, convert_incremental,
)
from kakikae.romanize import split_into_romaji, to_romaji
from kakikae.tokenizer import Token
from kakikae.tree import Direction, TreeCache

__version__ = "0.1.0"

__all__ = [
    'Configuration', 'ConfigurationError', 'Converter', 'Direction', 'ImeMode',
    'ImeSession', 'ImeState', 'Token', 'TokenStatus', 'TreeCache',
    'classify_tokens', 'convert_incremental', 'resolve_config', 'split_into_kana',
    'split_into_romaji', 'split_runs', 'to_hiragana', 'to_kana', 'to_katakana',
    'to_romaji', 'tokenize', 'warm_up',
    'is_hiragana', 'is_japanese', 'is_kana', 'is_kanji', 'is_katakana', 'is_mixed',
    'is_romaji',
]


def warm_up(verbose: bool = False) -> Tuple[float, dict]:
    """
    Pre-build the default match trees.

    Call this once at application startup to avoid building the trees on
    the first conversion. Builds, in the shared default cache:
    - romaji -> kana tree (with and without obsolete kana)
    - kana -> romaji trees (Hepburn and Kunrei-shiki)

    Args:
        verbose: If True, print timing information.

    Returns:
        Tuple of (total_time_seconds, timing_details_dict)

    Example:
        >>> import kakikae
        >>> elapsed, details = kakikae.warm_up(verbose=True)
        Warming up kakikae trees...
          Romaji -> kana:     1.9ms
          Obsolete kana:      1.7ms
          Hepburn:            0.6ms
          Kunrei:             0.5ms
        Total warm-up:        4.7ms
    """
    from kakikae.tree import get_default_cache, get_tree

    cache = get_default_cache()
    steps = [
        ('kana', 'Romaji -> kana:', Direction.KANA, Configuration()),
        ('obsolete', 'Obsolete kana:', Direction.KANA, Configuration(use_obsolete_kana=True)),
        ('hepburn', 'Hepburn:', Direction.ROMAJI, Configuration()),
        ('kunrei', 'Kunrei:', Direction.ROMAJI, Configuration(romanization='kunrei')),
    ]

    timings = {}
    total_start = time.perf_counter()

    if verbose:
        print("Warming up kakikae trees...")

    for key, label, direction, config in steps:
        t0 = time.perf_counter()
        get_tree(direction, config, cache)
        timings[key] = (time.perf_counter() - t0) * 1000
        if verbose:
            print(f"  {label:<18}{timings[key]:>5.1f}ms")

    total_time = time.perf_counter() - total_start
    timings['total'] = total_time * 1000

    if verbose:
        print(f"Total warm-up:      {timings['total']:>5.1f}ms")

    return total_time, timings
