"""
Character handling and script classification for Kakikae.

Provides character classification (hiragana, katakana, kanji, romaji,
punctuation), plain kana shifting between the two syllabaries, full-width
normalization and splitting of text into runs of a single script.
"""

import re
from typing import List, Optional, Tuple

# ============================================================================
# Character Ranges
# ============================================================================

HIRAGANA_START = 0x3041
HIRAGANA_END = 0x3096
KATAKANA_START = 0x30A1
KATAKANA_END = 0x30FC
KANJI_START = 0x4E00
KANJI_END = 0x9FAF

PROLONGED_SOUND_MARK = "ー"
KANA_SLASH_DOT = "・"

# Katakana that are used as counters/symbols rather than syllables
KANA_AS_SYMBOL = "ヶヵ"

SMART_QUOTES = "‘’“”"

HEPBURN_MACRON_RANGES = [
    (0x0100, 0x0101),  # Ā ā
    (0x0112, 0x0113),  # Ē ē
    (0x012A, 0x012B),  # Ī ī
    (0x014C, 0x014D),  # Ō ō
    (0x016A, 0x016B),  # Ū ū
]

SMART_QUOTE_RANGES = [
    (0x2018, 0x2019),  # ‘ ’
    (0x201C, 0x201D),  # “ ”
]

ROMAJI_RANGES = [(0x0000, 0x007F)] + HEPBURN_MACRON_RANGES + SMART_QUOTE_RANGES

EN_PUNCTUATION_RANGES = [
    (0x21, 0x2F),
    (0x3A, 0x3F),
    (0x5B, 0x60),
    (0x7B, 0x7E),
] + SMART_QUOTE_RANGES

JA_PUNCTUATION_RANGES = [
    (0x3000, 0x303F),  # CJK symbols and punctuation
    (0xFF61, 0xFF65),  # halfwidth kana punctuation
    (0x30FB, 0x30FC),  # katakana punctuation
    (0xFF01, 0xFF0F),  # zenkaku punctuation
    (0xFF1A, 0xFF1F),
    (0xFF3B, 0xFF3F),
    (0xFF5B, 0xFF60),
    (0xFFE0, 0xFFEE),  # zenkaku symbols and currency
]

KANA_RANGES = [
    (0x3040, 0x309F),  # hiragana block
    (0x30A0, 0x30FF),  # katakana block
    (0xFF61, 0xFF65),
    (0xFF66, 0xFF9F),  # hankaku katakana
]

JAPANESE_RANGES = KANA_RANGES + JA_PUNCTUATION_RANGES + [
    (0x0030, 0x0039),  # latin numbers
    (0xFF10, 0xFF19),  # zenkaku numbers
    (0xFF21, 0xFF3A),  # zenkaku latin
    (0xFF41, 0xFF5A),
    (0x4E00, 0x9FFF),  # common CJK
    (0x3400, 0x4DBF),  # rare CJK
]

# ============================================================================
# Regular Expressions
# ============================================================================

KANJI_REGEX = r"[々〆一-龯]"
_KANJI_PATTERN = re.compile(rf"^{KANJI_REGEX}+$")


# ============================================================================
# Single Character Tests
# ============================================================================

def _in_ranges(char: str, ranges: List[Tuple[int, int]]) -> bool:
    code = ord(char)
    return any(start <= code <= end for start, end in ranges)


def is_char_long_dash(char: str) -> bool:
    return char == PROLONGED_SOUND_MARK


def is_char_slash_dot(char: str) -> bool:
    return char == KANA_SLASH_DOT


def is_char_hiragana(char: str) -> bool:
    """Check if a character is hiragana. The long dash counts as hiragana."""
    if is_char_long_dash(char):
        return True
    return HIRAGANA_START <= ord(char) <= HIRAGANA_END


def is_char_katakana(char: str) -> bool:
    """Check if a character is katakana (the long dash included)."""
    return KATAKANA_START <= ord(char) <= KATAKANA_END


def is_char_kana(char: str) -> bool:
    return is_char_hiragana(char) or is_char_katakana(char)


def is_char_kanji(char: str) -> bool:
    return KANJI_START <= ord(char) <= KANJI_END


def is_char_romaji(char: str) -> bool:
    return _in_ranges(char, ROMAJI_RANGES)


def is_char_japanese(char: str) -> bool:
    return _in_ranges(char, JAPANESE_RANGES)


def is_char_english_punctuation(char: str) -> bool:
    return _in_ranges(char, EN_PUNCTUATION_RANGES)


def is_char_upper_case(char: str) -> bool:
    """Check for an ASCII uppercase letter."""
    return "A" <= char <= "Z"


# ============================================================================
# Whole String Tests
# ============================================================================

def test_word(word: str, char_class: str) -> bool:
    """
    Test if a word consists entirely of a specific character class.

    Args:
        word: The word to test.
        char_class: One of 'hiragana', 'katakana', 'kana', 'kanji', 'romaji',
            'japanese', 'english_punctuation'.

    Returns:
        True if every character matches the class. False for an empty word
        or an unknown class.
    """
    if not word:
        return False

    predicates = {
        'hiragana': is_char_hiragana,
        'katakana': is_char_katakana,
        'kana': is_char_kana,
        'romaji': is_char_romaji,
        'japanese': is_char_japanese,
        'english_punctuation': is_char_english_punctuation,
    }

    if char_class == 'kanji':
        return bool(_KANJI_PATTERN.match(word))

    predicate = predicates.get(char_class)
    if predicate:
        return all(predicate(char) for char in word)
    return False


def is_hiragana(word: str) -> bool:
    """Check if word consists entirely of hiragana."""
    return test_word(word, 'hiragana')


def is_katakana(word: str) -> bool:
    """Check if word consists entirely of katakana."""
    return test_word(word, 'katakana')


def is_kana(word: str) -> bool:
    """Check if word consists entirely of kana (hiragana or katakana)."""
    return test_word(word, 'kana')


def is_kanji(word: str) -> bool:
    """Check if word consists entirely of kanji."""
    return test_word(word, 'kanji')


def is_romaji(word: str) -> bool:
    """Check if word is made of romaji characters (ASCII, macrons, smart quotes)."""
    return test_word(word, 'romaji')


def is_japanese(word: str) -> bool:
    """Check if word is made of Japanese characters, Japanese punctuation and numbers."""
    return test_word(word, 'japanese')


def is_english_punctuation(word: str) -> bool:
    return test_word(word, 'english_punctuation')


def is_mixed(word: str, pass_kanji: bool = True) -> bool:
    """
    Check if a word mixes kana with romaji.

    Args:
        word: The word to test.
        pass_kanji: When False, any kanji in the word makes it not mixed.

    Returns:
        True if the word has both kana and romaji characters.
    """
    if not word:
        return False
    has_kanji = False
    if not pass_kanji:
        has_kanji = any(is_char_kanji(char) for char in word)
    has_kana = any(is_char_hiragana(char) or is_char_katakana(char) for char in word)
    has_romaji = any(is_char_romaji(char) for char in word)
    return has_kana and has_romaji and not has_kanji


# ============================================================================
# Kana Shifting
# ============================================================================

_KANA_OFFSET = KATAKANA_START - HIRAGANA_START

# ヶ; everything above it has no hiragana counterpart
_LAST_SHIFTABLE_KATAKANA = 0x30F6


def as_hiragana(text: str) -> str:
    """
    Shift katakana to hiragana, character by character.

    The long dash, the slash dot and the symbol katakana (ヶ, ヵ) are kept.
    No long-vowel folding happens here; see rules.katakana_to_hiragana.
    """
    result = []
    for char in text:
        if KATAKANA_START <= ord(char) <= _LAST_SHIFTABLE_KATAKANA and char not in KANA_AS_SYMBOL:
            result.append(chr(ord(char) - _KANA_OFFSET))
        else:
            result.append(char)
    return ''.join(result)


def as_katakana(text: str) -> str:
    """
    Shift hiragana to katakana, character by character.

    Args:
        text: Text to convert.

    Returns:
        Text with hiragana converted to katakana.
    """
    result = []
    for char in text:
        if is_char_long_dash(char) or is_char_slash_dot(char):
            result.append(char)
        elif is_char_hiragana(char):
            result.append(chr(ord(char) + _KANA_OFFSET))
        else:
            result.append(char)
    return ''.join(result)


# ============================================================================
# Character Width Normalization
# ============================================================================

# Full-width alphanumerics to half-width
ABNORMAL_CHARS = (
    "０１２３４５６７８９ａｂｃｄｅｆｇｈｉｊｋｌｍｎｏｐｑｒｓｔｕｖｗｘｙｚ"
    "ＡＢＣＤＥＦＧＨＩＪＫＬＭＮＯＰＱＲＳＴＵＶＷＸＹＺ＇"
)

NORMAL_CHARS = (
    "0123456789abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ'"
)

_CHAR_NORM_MAP = dict(zip(ABNORMAL_CHARS, NORMAL_CHARS))


def to_ascii_width(text: str) -> str:
    """Convert full-width latin letters, digits and apostrophes to ASCII."""
    return ''.join(_CHAR_NORM_MAP.get(char, char) for char in text)


# ============================================================================
# Script Runs
# ============================================================================

# Characters whose script is decided by their neighbours
SHARED_CHARACTERS = SMART_QUOTES + "'\"-" + PROLONGED_SOUND_MARK


def char_script(char: str) -> Optional[str]:
    """
    Classify a character by script.

    Returns:
        'hiragana', 'katakana', 'kanji', 'latin' or 'other', or None for
        shared characters (quotes, dashes, whitespace) that belong to
        whichever neighbouring run dominates.
    """
    if char in SHARED_CHARACTERS or char.isspace():
        return None
    if is_char_hiragana(char):
        return 'hiragana'
    if is_char_katakana(char):
        return 'katakana'
    if is_char_kanji(char):
        return 'kanji'
    if is_char_romaji(char):
        return 'latin'
    return 'other'


def split_runs(text: str) -> List[Tuple[str, str]]:
    """
    Split text into maximal runs of a single script.

    Shared characters are given to the longer neighbouring run; on a tie
    the preceding run wins. Text made only of shared characters is 'other'.

    Args:
        text: Text to split.

    Returns:
        List of (script, text) tuples covering the input in order.

    Examples:
        >>> split_runs("座禅‘zazen’スタイル")
        [('kanji', '座禅'), ('latin', '‘zazen’'), ('katakana', 'スタイル')]
    """
    if not text:
        return []

    raw: List[List] = []
    for char in text:
        script = char_script(char)
        if raw and raw[-1][0] == script:
            raw[-1][1] += char
        else:
            raw.append([script, char])

    for index, run in enumerate(raw):
        if run[0] is not None:
            continue
        before = next((r for r in reversed(raw[:index]) if r[0] is not None), None)
        after = next((r for r in raw[index + 1:] if r[0] is not None), None)
        if before and after:
            run[0] = before[0] if len(before[1]) >= len(after[1]) else after[0]
        elif before or after:
            run[0] = (before or after)[0]
        else:
            run[0] = 'other'

    runs: List[Tuple[str, str]] = []
    for script, chunk in raw:
        if runs and runs[-1][0] == script:
            runs[-1] = (script, runs[-1][1] + chunk)
        else:
            runs.append((script, chunk))
    return runs
