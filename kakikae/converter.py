"""
Converter: the conversion engine as an object.

A Converter owns its tree cache and a base configuration, so independent
engines (tests, servers with per-tenant mappings) never share built trees.
The module-level functions elsewhere in the package use a shared default
cache instead.
"""

import logging
import time
from typing import Dict, List, Optional, Sequence, Tuple, Union

from kakikae.config import Configuration, resolve_config
from kakikae.deromanize import split_into_kana, to_hiragana, to_kana, to_katakana
from kakikae.incremental import (
    ImeSession, ImeState, TokenStatus, classify_tokens, convert_incremental,
)
from kakikae.romanize import split_into_romaji, to_romaji
from kakikae.tokenizer import Token
from kakikae.tree import Direction, TreeCache, get_tree

logger = logging.getLogger(__name__)


def tokenize(text: str, config: Optional[Configuration] = None,
             direction: Union[Direction, str] = Direction.KANA,
             cache: Optional[TreeCache] = None, **options) -> List[Token]:
    """
    Tokenize text for one conversion direction.

    Args:
        text: Input text.
        config: Configuration or mapping of options.
        direction: Direction.KANA (romaji in, kana out) or Direction.ROMAJI
            (kana in, romaji out). Plain strings 'kana'/'romaji' work too.
        cache: Tree cache.
        **options: Option overrides.

    Returns:
        Contiguous tokens covering the whole input.
    """
    direction = Direction(direction)
    if direction is Direction.KANA:
        return split_into_kana(text, config, cache, **options)
    return split_into_romaji(text, config, cache, **options)


class Converter:
    """
    Romaji/kana conversion engine with its own tree cache.

    Keyword options passed to a method are layered over the converter's
    base configuration for that call only.

    Example:
        >>> converter = Converter(use_obsolete_kana=True)
        >>> converter.to_kana("wi")
        'ゐ'
        >>> converter.to_romaji("ゐ", romanization="kunrei")
        'i'
    """

    def __init__(self, config: Optional[Configuration] = None,
                 cache: Optional[TreeCache] = None, **options):
        self.config = resolve_config(config, **options)
        self.cache = cache if cache is not None else TreeCache(name='converter')

    def __repr__(self) -> str:
        return f"Converter({self.config!r})"

    def _resolve(self, options: dict) -> Configuration:
        return resolve_config(self.config, **options) if options else self.config

    def tokenize(self, text: str, direction: Union[Direction, str] = Direction.KANA,
                 **options) -> List[Token]:
        return tokenize(text, self._resolve(options), direction, self.cache)

    def split_into_kana(self, text: str, **options) -> List[Token]:
        return split_into_kana(text, self._resolve(options), self.cache)

    def split_into_romaji(self, text: str, **options) -> List[Token]:
        return split_into_romaji(text, self._resolve(options), self.cache)

    def to_kana(self, text: str, **options) -> str:
        return to_kana(text, self._resolve(options), self.cache)

    def to_hiragana(self, text: str, **options) -> str:
        return to_hiragana(text, self._resolve(options), self.cache)

    def to_katakana(self, text: str, **options) -> str:
        return to_katakana(text, self._resolve(options), self.cache)

    def to_romaji(self, text: str, **options) -> str:
        return to_romaji(text, self._resolve(options), self.cache)

    def convert_incremental(self, state: Optional[ImeState], appended: str,
                            **options) -> Tuple[ImeState, str]:
        return convert_incremental(state, appended, self._resolve(options), self.cache)

    def classify_tokens(self, tokens: Sequence[Token], text: str,
                        **options) -> List[TokenStatus]:
        return classify_tokens(tokens, text, self._resolve(options), self.cache)

    def session(self, **options) -> ImeSession:
        """Start an incremental session that shares this converter's cache."""
        return ImeSession(self._resolve(options), self.cache)

    def warm_up(self) -> Dict[str, float]:
        """
        Build both trees for the base configuration ahead of the first call.

        Returns:
            Milliseconds spent per direction.
        """
        timings = {}
        for direction in Direction:
            t0 = time.perf_counter()
            get_tree(direction, self.config, self.cache)
            timings[direction.value] = (time.perf_counter() - t0) * 1000
        logger.debug(f"Converter warm-up: {timings}")
        return timings
