"""
Deromanize module for Kakikae.

Converts romanized Japanese (romaji) to kana, and kana of one script to
the other. Lowercase romaji gives hiragana and uppercase gives katakana,
unless the configuration says otherwise.
"""

from typing import List, Optional

from kakikae.characters import (
    as_katakana, is_char_upper_case, is_english_punctuation, is_mixed, is_romaji,
    split_runs,
)
from kakikae.config import Configuration, ImeMode, resolve_config
from kakikae.rules import ROMAJI_RULES, katakana_to_hiragana
from kakikae.tokenizer import Token, lower_ascii, tokenize_with
from kakikae.tree import Direction, TreeCache, get_tree


# ============================================================================
# Romaji -> Kana
# ============================================================================

def split_into_kana(text: str, config: Optional[Configuration] = None,
                    cache: Optional[TreeCache] = None, **options) -> List[Token]:
    """
    Tokenize romaji for conversion to kana.

    Args:
        text: Input text. Matching is case-insensitive; kana, kanji and
            anything else the tree does not know pass through unchanged.
        config: Configuration or mapping of options.
        cache: Tree cache. Defaults to the shared default cache.
        **options: Option overrides.

    Returns:
        Tokens covering text. Outputs are hiragana; see to_kana for the
        script selection.

    Examples:
        >>> split_into_kana("kinyou")
        [Token(start=0, end=2, output='き'), Token(start=2, end=5, output='にょ'),
         Token(start=5, end=6, output='う')]
    """
    config = resolve_config(config, **options)
    root = get_tree(Direction.KANA, config, cache)
    return tokenize_with(lower_ascii(text), root, ROMAJI_RULES, config, source=text)


def render_kana(tokens: List[Token], source: str, config: Configuration) -> str:
    """
    Join kana tokens, choosing hiragana or katakana per token.

    A withheld token is written as the raw text it spans.
    """
    parts = []
    for start, end, output in tokens:
        if output is None:
            parts.append(source[start:end])
        elif config.ime_mode is ImeMode.KATAKANA:
            parts.append(as_katakana(output))
        elif config.ime_mode is ImeMode.HIRAGANA:
            parts.append(output)
        elif not config.ignore_case and is_char_upper_case(source[start]):
            parts.append(as_katakana(output))
        else:
            parts.append(output)
    return ''.join(parts)


def to_kana(text: str, config: Optional[Configuration] = None,
            cache: Optional[TreeCache] = None, **options) -> str:
    """
    Convert romaji to kana. Lowercase gives hiragana, uppercase katakana.

    Args:
        text: Input text.
        config: Configuration or mapping of options.
        cache: Tree cache.
        **options: Option overrides.

    Returns:
        Converted text.

    Examples:
        >>> to_kana("onaji BUTTSUUJI")
        'おなじ ブッツウジ'
        >>> to_kana("座禅‘zazen’スタイル")
        '座禅「ざぜん」スタイル'
    """
    config = resolve_config(config, **options)
    return render_kana(split_into_kana(text, config, cache), text, config)


# ============================================================================
# Kana Script Conversion
# ============================================================================

def _convert_runs(text: str, script: str, convert) -> str:
    return ''.join(convert(chunk) if kind == script else chunk
                   for kind, chunk in split_runs(text))


def to_hiragana(text: str, config: Optional[Configuration] = None,
                cache: Optional[TreeCache] = None, **options) -> str:
    """
    Convert romaji and katakana to hiragana.

    Case does not matter here. With pass_romaji only katakana is converted.

    Examples:
        >>> to_hiragana("バツゴー")
        'ばつごう'
        >>> to_hiragana("only カナ", pass_romaji=True)
        'only かな'
    """
    config = resolve_config(config, **options)
    if config.pass_romaji:
        return _convert_runs(text, 'katakana', katakana_to_hiragana)
    if is_mixed(text):
        return to_kana(lower_ascii(katakana_to_hiragana(text)), config, cache)
    if is_romaji(text) or is_english_punctuation(text):
        return to_kana(lower_ascii(text), config, cache)
    return katakana_to_hiragana(text)


def to_katakana(text: str, config: Optional[Configuration] = None,
                cache: Optional[TreeCache] = None, **options) -> str:
    """
    Convert romaji and hiragana to katakana.

    Case does not matter here. With pass_romaji only hiragana is converted.

    Examples:
        >>> to_katakana("ばつゲーム")
        'バツゲーム'
    """
    config = resolve_config(config, **options)
    if config.pass_romaji:
        return _convert_runs(text, 'hiragana', as_katakana)
    if is_mixed(text) or is_romaji(text) or is_english_punctuation(text):
        return as_katakana(to_kana(lower_ascii(text), config, cache))
    return as_katakana(text)
