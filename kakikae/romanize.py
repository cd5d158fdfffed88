"""
Romanization module for Kakikae.

Converts hiragana and katakana to romaji with the Hepburn (default) or
Kunrei-shiki method. Katakana is folded to hiragana first, long vowel
marks included, so both scripts share one match tree.
"""

from typing import List, Optional

from kakikae.characters import is_katakana
from kakikae.config import Configuration, resolve_config
from kakikae.rules import KANA_RULES, katakana_to_hiragana
from kakikae.tokenizer import Token, tokenize_with
from kakikae.tree import Direction, TreeCache, get_tree


def split_into_romaji(text: str, config: Optional[Configuration] = None,
                      cache: Optional[TreeCache] = None, **options) -> List[Token]:
    """
    Tokenize kana for conversion to romaji.

    Args:
        text: Input text.
        config: Configuration or mapping of options.
        cache: Tree cache. Defaults to the shared default cache.
        **options: Option overrides.

    Returns:
        Tokens covering text; offsets refer to text itself.
    """
    config = resolve_config(config, **options)
    root = get_tree(Direction.ROMAJI, config, cache)
    folded = katakana_to_hiragana(text, destination_romaji=True)
    return tokenize_with(folded, root, KANA_RULES, config, source=text)


def to_romaji(text: str, config: Optional[Configuration] = None,
              cache: Optional[TreeCache] = None, **options) -> str:
    """
    Convert kana to romaji.

    Args:
        text: Input text.
        config: Configuration or mapping of options. With upcase_katakana,
            romaji that came from katakana is uppercased.
        cache: Tree cache.
        **options: Option overrides.

    Returns:
        Romanized text. Characters with no romanization are kept.

    Examples:
        >>> to_romaji("ひらがな　カタカナ")
        'hiragana katakana'
        >>> to_romaji("げーむ　ゲーム")
        'ge-mu geemu'
        >>> to_romaji("ひらがな　カタカナ", upcase_katakana=True)
        'hiragana KATAKANA'
    """
    config = resolve_config(config, **options)
    parts = []
    for start, end, output in split_into_romaji(text, config, cache):
        if output is None:
            output = text[start:end]
        if config.upcase_katakana and is_katakana(text[start:end]):
            output = output.upper()
        parts.append(output)
    return ''.join(parts)
