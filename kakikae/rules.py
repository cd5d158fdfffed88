"""
Disambiguation rules for Kakikae.

The tokenizer asks each rule, at every position, whether it wants to force
an interpretation there. A rule returns a Decision (how many characters to
consume and what to emit) or None to leave the position to the plain
longest match. Rules are pure functions of their arguments.

Romaji input:
    - doubled consonants (kk, tt, tch, ...) become っ
    - the moraic nasal n, and its interaction with na/nya/n'/nn

Kana input:
    - っ doubles the consonant of the following syllable
    - ん before a vowel or y syllable is written n'

Also provides katakana -> hiragana folding of the long vowel mark.
"""

from typing import Callable, NamedTuple, Optional, Tuple

from kakikae import syllables
from kakikae.characters import (
    KANA_AS_SYMBOL, as_hiragana, is_char_kana, is_char_kanji, is_char_katakana,
    is_char_long_dash, is_char_slash_dot,
)
from kakikae.config import Configuration
from kakikae.tree import Node, walk


class Decision(NamedTuple):
    """A forced interpretation: consume length characters, emit output."""
    length: int
    output: Optional[str]  # None: withhold, the span needs more input


Rule = Callable[[str, int, Node, Configuration], Optional[Decision]]


def at_buffer_end(text: str, index: int, incremental: bool = False) -> bool:
    """
    Check if index is where the typed input ends.

    In incremental mode a position followed by kana or kanji also counts:
    the text after the cursor has already been converted.
    """
    if index >= len(text):
        return True
    if not incremental:
        return False
    char = text[index]
    return is_char_kana(char) or is_char_kanji(char)


# ============================================================================
# Romaji Rules
# ============================================================================

# Consonants that double into っ. Never vowels, never n.
GEMINATE_CONSONANTS = frozenset('kstmhrgzdbpvqfcywj')

NASAL = 'n'
NASAL_SEPARATOR = "'"
# Characters that close a nasal while typing: nn -> ん, "n " -> ん
IME_NASAL_CLOSERS = frozenset('n ')


def romaji_geminate(text: str, position: int, root: Node,
                    config: Configuration) -> Optional[Decision]:
    """
    Doubled consonant: 'kka' -> っ + か, 'tcha' -> っ + ちゃ.

    Fires only when the walk from the second consonant reaches a syllable,
    so 'kk' alone is left to pass through.
    """
    char = text[position]
    if char not in GEMINATE_CONSONANTS:
        return None
    following = position + 1
    doubled = text[following:following + 1] == char
    if not doubled and not (char == 't' and text.startswith('ch', following)):
        return None

    match = walk(root, text, following)
    end = following + match.depth
    if config.incremental and match.node.children and at_buffer_end(text, end, True):
        return Decision(end - position, None)
    if match.payload is None:
        return None
    return Decision(1, 'っ')


def romaji_nasal(text: str, position: int, root: Node,
                 config: Configuration) -> Optional[Decision]:
    """
    Moraic nasal resolution.

    n + a syllable continuation (vowel, y) is left to the tree, n' consumes
    the apostrophe, any other follower makes a standalone ん. While typing,
    nn and "n " both close into a single ん, and a trailing n is withheld.
    """
    if text[position] != NASAL:
        return None
    nasal_node = root.children.get(NASAL)
    if nasal_node is None or nasal_node.payload is None:
        return None
    nasal = nasal_node.payload

    following = position + 1
    if at_buffer_end(text, following, config.incremental):
        return Decision(1, None) if config.incremental else Decision(1, nasal)

    char = text[following]
    if char == NASAL_SEPARATOR:
        return Decision(2, nasal)
    if char in nasal_node.children:
        return None
    if config.incremental and char in IME_NASAL_CLOSERS:
        return Decision(2, nasal)
    return Decision(1, nasal)


ROMAJI_RULES: Tuple[Rule, ...] = (romaji_geminate, romaji_nasal)


# ============================================================================
# Kana Rules
# ============================================================================

SOKUON = 'っ'
HATSUON = 'ん'

# Romaji initials that may be doubled after っ; c is written t (っち -> tchi)
SOKUON_WHITELIST = frozenset('bcdfghjkmpqrstvwxz')
SOKUON_SUBSTITUTES = {'c': 't'}

NASAL_APOSTROPHE_INITIALS = frozenset('aeiouy')


def kana_geminate(text: str, position: int, root: Node,
                  config: Configuration) -> Optional[Decision]:
    """っ before a consonant syllable doubles that consonant: かっぱ -> kappa."""
    if text[position] != SOKUON:
        return None
    match = walk(root, text, position + 1)
    if not match.payload:
        return None
    initial = match.payload[0]
    if initial not in SOKUON_WHITELIST:
        return None
    return Decision(1, SOKUON_SUBSTITUTES.get(initial, initial))


def kana_nasal(text: str, position: int, root: Node,
               config: Configuration) -> Optional[Decision]:
    """ん before a vowel or y syllable gets an apostrophe: おんよみ -> on'yomi."""
    if text[position] != HATSUON:
        return None
    nasal_node = root.children.get(HATSUON)
    if nasal_node is None or nasal_node.payload is None:
        return None
    match = walk(root, text, position + 1)
    if match.payload and match.payload[0] in NASAL_APOSTROPHE_INITIALS:
        return Decision(1, nasal_node.payload + NASAL_SEPARATOR)
    return None


KANA_RULES: Tuple[Rule, ...] = (kana_geminate, kana_nasal)


# ============================================================================
# Long Vowel Folding
# ============================================================================

LONG_VOWELS = {
    'a': 'あ',
    'i': 'い',
    'u': 'う',
    'e': 'え',
    'o': 'う',
}


def _vowel_of(kana: str) -> str:
    return syllables.HEPBURN.get(kana, '')[-1:]


def katakana_to_hiragana(text: str, destination_romaji: bool = False) -> str:
    """
    Convert katakana to hiragana, folding ー into the vowel it lengthens.

    ゴー becomes ごう; a ー at the start, after hiragana or after anything
    that is not kana is kept, as are ・, ヵ and ヶ.

    Args:
        text: Text to convert.
        destination_romaji: The result is about to be romanized. A katakana
            o-row syllable then lengthens with お (ローマ -> rooma).

    Returns:
        Converted text, the same length as the input.
    """
    result = []
    previous_kana = ''
    for index, char in enumerate(text):
        if is_char_slash_dot(char) or char in KANA_AS_SYMBOL or (
                index == 0 and is_char_long_dash(char)):
            result.append(char)
        elif previous_kana and is_char_long_dash(char):
            vowel = _vowel_of(previous_kana)
            if destination_romaji and vowel == 'o' and is_char_katakana(text[index - 1]):
                result.append('お')
            else:
                result.append(LONG_VOWELS.get(vowel, char))
        elif is_char_katakana(char) and not is_char_long_dash(char):
            previous_kana = as_hiragana(char)
            result.append(previous_kana)
        else:
            previous_kana = ''
            result.append(char)
    return ''.join(result)
