"""
Syllable tables for Kakikae.

Flat mappings between romanized syllables and kana, used to build the
match trees. The romaji side is generated from a compact Kunrei-shiki core
plus the spellings people actually type (Hepburn aliases, small letters,
punctuation). The kana side holds one table per romanization method.
"""

import logging
from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, Optional, Tuple

logger = logging.getLogger(__name__)


class SyllableTable(Mapping):
    """
    Read-only mapping from a syllable to its output.

    Insertion order is kept, so two tables built from the same data produce
    identical trees.
    """

    def __init__(self, entries: Optional[Iterable[Tuple[str, str]]] = None, name: str = ''):
        self._entries: Dict[str, str] = dict(entries or ())
        self.name = name

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SyllableTable({self.name!r}, {len(self)} entries)"

    def merged(self, overrides: Iterable[Tuple[str, str]],
               name: Optional[str] = None) -> 'SyllableTable':
        """
        Return a new table with overrides applied last.

        Args:
            overrides: (syllable, output) pairs. They replace built-in entries
                with the same key and add new ones.
            name: Name of the new table. Defaults to this table's name.

        Returns:
            A new SyllableTable; this one is left untouched.
        """
        entries = dict(self._entries)
        entries.update(overrides)
        return SyllableTable(entries.items(), name=self.name if name is None else name)


# ============================================================================
# Romaji -> Kana
# ============================================================================

BASIC_KUNREI = {
    'a': 'あ',   'i': 'い',   'u': 'う',   'e': 'え',   'o': 'お',
    'ka': 'か',  'ki': 'き',  'ku': 'く',  'ke': 'け',  'ko': 'こ',
    'sa': 'さ',  'si': 'し',  'su': 'す',  'se': 'せ',  'so': 'そ',
    'ta': 'た',  'ti': 'ち',  'tu': 'つ',  'te': 'て',  'to': 'と',
    'na': 'な',  'ni': 'に',  'nu': 'ぬ',  'ne': 'ね',  'no': 'の',
    'ha': 'は',  'hi': 'ひ',  'hu': 'ふ',  'he': 'へ',  'ho': 'ほ',
    'ma': 'ま',  'mi': 'み',  'mu': 'む',  'me': 'め',  'mo': 'も',
    'ya': 'や',               'yu': 'ゆ',               'yo': 'よ',
    'ra': 'ら',  'ri': 'り',  'ru': 'る',  're': 'れ',  'ro': 'ろ',
    'wa': 'わ',  'wi': 'ゐ',               'we': 'ゑ',  'wo': 'を',
    'ga': 'が',  'gi': 'ぎ',  'gu': 'ぐ',  'ge': 'げ',  'go': 'ご',
    'za': 'ざ',  'zi': 'じ',  'zu': 'ず',  'ze': 'ぜ',  'zo': 'ぞ',
    'da': 'だ',  'di': 'ぢ',  'du': 'づ',  'de': 'で',  'do': 'ど',
    'ba': 'ば',  'bi': 'び',  'bu': 'ぶ',  'be': 'べ',  'bo': 'ぼ',
    'pa': 'ぱ',  'pi': 'ぴ',  'pu': 'ぷ',  'pe': 'ぺ',  'po': 'ぽ',
    'va': 'ゔぁ', 'vi': 'ゔぃ', 'vu': 'ゔ', 've': 'ゔぇ', 'vo': 'ゔぉ',
}

SPECIAL_SYMBOLS = {
    '.': '。', ',': '、', ':': '：', '/': '・', '!': '！', '?': '？',
    '~': '〜', '-': 'ー', '‘': '「', '’': '」', '“': '『', '”': '』',
    '[': '［', ']': '］', '(': '（', ')': '）', '{': '｛', '}': '｝',
}

# Consonants that combine with a small y-kana, and the i-row kana they use
CONSONANTS = {
    'k': 'き', 's': 'し', 't': 'ち', 'n': 'に', 'h': 'ひ', 'm': 'み',
    'r': 'り', 'g': 'ぎ', 'z': 'じ', 'd': 'ぢ', 'b': 'び', 'p': 'ぴ',
    'v': 'ゔ', 'q': 'く', 'f': 'ふ',
}

SMALL_Y = {'ya': 'ゃ', 'yi': 'ぃ', 'yu': 'ゅ', 'ye': 'ぇ', 'yo': 'ょ'}
SMALL_VOWELS = {'a': 'ぁ', 'i': 'ぃ', 'u': 'ぅ', 'e': 'ぇ', 'o': 'ぉ'}

# Prefixes that take a small vowel: kwa -> くぁ, tsa -> つぁ, ...
AIUEO_CONSTRUCTIONS = {
    'wh': 'う', 'kw': 'く', 'qw': 'く', 'q': 'く', 'gw': 'ぐ', 'sw': 'す',
    'ts': 'つ', 'th': 'て', 'tw': 'と', 'dh': 'で', 'dw': 'ど', 'fw': 'ふ',
    'f': 'ふ',
}

NASAL_SPELLINGS = ('n', "n'", 'xn')

# Hepburn and common spellings, as copies of a Kunrei prefix. Order matters:
# later aliases overwrite what earlier ones created.
ALIASES = (
    ('sh', 'sy'),
    ('ch', 'ty'),
    ('cy', 'ty'),
    ('chy', 'ty'),
    ('shy', 'sy'),
    ('j', 'zy'),
    ('jy', 'zy'),
    ('shi', 'si'),
    ('chi', 'ti'),
    ('tsu', 'tu'),
    ('ji', 'zi'),
    ('fu', 'hu'),
)

SMALL_LETTERS = dict(
    {'tu': 'っ', 'wa': 'ゎ', 'ka': 'ヵ', 'ke': 'ヶ'},
    **SMALL_VOWELS,
    **SMALL_Y,
)

SMALL_LETTER_PREFIXES = ('x', 'l')

SPECIAL_CASES = {
    'yi': 'い', 'wu': 'う', 'ye': 'いぇ', 'wi': 'うぃ', 'we': 'うぇ',
    'kwa': 'くぁ', 'whu': 'う',
    # てゃ is spelled tha, not thya
    'tha': 'てゃ', 'thu': 'てゅ', 'tho': 'てょ',
    'dha': 'でゃ', 'dhu': 'でゅ', 'dho': 'でょ',
}

OBSOLETE_KANA = {'wi': 'ゐ', 'we': 'ゑ'}


def _copy_prefix(entries: Dict[str, str], prefix: str, source: str):
    """Replace every entry under prefix with a copy of the entries under source."""
    for key in [k for k in entries if k.startswith(prefix)]:
        del entries[key]
    for key, value in list(entries.items()):
        if key.startswith(source):
            entries[prefix + key[len(source):]] = value


def _alternative_spellings(kunrei: str) -> Tuple[str, ...]:
    """Other spellings of a Kunrei syllable produced by the aliases (tu -> tsu)."""
    result = []
    for alias, original in ALIASES + (('c', 'k'),):
        if kunrei.startswith(original):
            result.append(alias + kunrei[len(original):])
    return tuple(result)


def build_romaji_to_kana() -> Dict[str, str]:
    """
    Build the flat romaji -> kana table.

    Returns:
        Ordered dict of every typeable syllable.
    """
    entries = dict(BASIC_KUNREI)

    for consonant, y_kana in CONSONANTS.items():
        for roma, kana in SMALL_Y.items():
            entries[consonant + roma] = y_kana + kana

    entries.update(SPECIAL_SYMBOLS)

    for prefix, kana in AIUEO_CONSTRUCTIONS.items():
        for vowel, small in SMALL_VOWELS.items():
            entries[prefix + vowel] = kana + small

    for spelling in NASAL_SPELLINGS:
        entries[spelling] = 'ん'

    # c behaves as k, except where an alias below says otherwise
    _copy_prefix(entries, 'c', 'k')

    for alias, original in ALIASES:
        _copy_prefix(entries, alias, original)

    for kunrei, kana in SMALL_LETTERS.items():
        for spelling in (kunrei,) + _alternative_spellings(kunrei):
            for prefix in SMALL_LETTER_PREFIXES:
                entries[prefix + spelling] = kana

    entries.update(SPECIAL_CASES)
    return entries


ROMAJI_TO_KANA = SyllableTable(build_romaji_to_kana().items(), name='romaji')
ROMAJI_TO_KANA_OBSOLETE = ROMAJI_TO_KANA.merged(OBSOLETE_KANA.items())


def get_romaji_table(use_obsolete_kana: bool = False) -> SyllableTable:
    """Get the romaji -> kana table, with ゐ and ゑ when asked for."""
    return ROMAJI_TO_KANA_OBSOLETE if use_obsolete_kana else ROMAJI_TO_KANA


# ============================================================================
# Kana -> Romaji
# ============================================================================

KANA_PUNCTUATION = {
    '　': ' ', '！': '!', '？': '?', '。': '.', '：': ':', '・': '/',
    '、': ',', '〜': '~', 'ー': '-', '「': '‘', '」': '’', '『': '“',
    '』': '”', '［': '[', '］': ']', '（': '(', '）': ')', '｛': '{',
    '｝': '}',
}

HEPBURN_TABLE = {
    'あ': 'a',    'い': 'i',    'う': 'u',    'え': 'e',    'お': 'o',
    'ゔぁ': 'va', 'ゔぃ': 'vi', 'ゔ': 'vu',   'ゔぇ': 've', 'ゔぉ': 'vo',
    'か': 'ka',   'き': 'ki',   'く': 'ku',   'け': 'ke',   'こ': 'ko',
    'きゃ': 'kya', 'きぃ': 'kyi', 'きゅ': 'kyu', 'きぇ': 'kye', 'きょ': 'kyo',
    'が': 'ga',   'ぎ': 'gi',   'ぐ': 'gu',   'げ': 'ge',   'ご': 'go',
    'ぎゃ': 'gya', 'ぎぃ': 'gyi', 'ぎゅ': 'gyu', 'ぎぇ': 'gye', 'ぎょ': 'gyo',
    'さ': 'sa',   'し': 'shi',  'す': 'su',   'せ': 'se',   'そ': 'so',
    'しゃ': 'sha', 'しぃ': 'syi', 'しゅ': 'shu', 'しぇ': 'she', 'しょ': 'sho',
    'ざ': 'za',   'じ': 'ji',   'ず': 'zu',   'ぜ': 'ze',   'ぞ': 'zo',
    'じゃ': 'ja', 'じぃ': 'jyi', 'じゅ': 'ju', 'じぇ': 'jye', 'じょ': 'jo',
    'た': 'ta',   'ち': 'chi',  'つ': 'tsu',  'て': 'te',   'と': 'to',
    'ちゃ': 'cha', 'ちぃ': 'cyi', 'ちゅ': 'chu', 'ちぇ': 'che', 'ちょ': 'cho',
    'だ': 'da',   'ぢ': 'di',   'づ': 'du',   'で': 'de',   'ど': 'do',
    'な': 'na',   'に': 'ni',   'ぬ': 'nu',   'ね': 'ne',   'の': 'no',
    'にゃ': 'nya', 'にぃ': 'nyi', 'にゅ': 'nyu', 'にぇ': 'nye', 'にょ': 'nyo',
    'は': 'ha',   'ひ': 'hi',   'ふ': 'fu',   'へ': 'he',   'ほ': 'ho',
    'ひゃ': 'hya', 'ひぃ': 'hyi', 'ひゅ': 'hyu', 'ひぇ': 'hye', 'ひょ': 'hyo',
    'ふぁ': 'fa', 'ふぃ': 'fi', 'ふぅ': 'fwu', 'ふぇ': 'fe', 'ふぉ': 'fo',
    'ふゃ': 'fya', 'ふゅ': 'fyu', 'ふょ': 'fyo',
    'ば': 'ba',   'び': 'bi',   'ぶ': 'bu',   'べ': 'be',   'ぼ': 'bo',
    'びゃ': 'bya', 'びぃ': 'byi', 'びゅ': 'byu', 'びぇ': 'bye', 'びょ': 'byo',
    'ぱ': 'pa',   'ぴ': 'pi',   'ぷ': 'pu',   'ぺ': 'pe',   'ぽ': 'po',
    'ぴゃ': 'pya', 'ぴぃ': 'pyi', 'ぴゅ': 'pyu', 'ぴぇ': 'pye', 'ぴょ': 'pyo',
    'ま': 'ma',   'み': 'mi',   'む': 'mu',   'め': 'me',   'も': 'mo',
    'みゃ': 'mya', 'みぃ': 'myi', 'みゅ': 'myu', 'みぇ': 'mye', 'みょ': 'myo',
    'や': 'ya',                 'ゆ': 'yu',                 'よ': 'yo',
    'ら': 'ra',   'り': 'ri',   'る': 'ru',   'れ': 're',   'ろ': 'ro',
    'りゃ': 'rya', 'りぃ': 'ryi', 'りゅ': 'ryu', 'りぇ': 'rye', 'りょ': 'ryo',
    'わ': 'wa',   'ゐ': 'wi',                 'ゑ': 'we',   'を': 'wo',
    'ん': 'n',

    # Uncommon combinations
    'いぇ': 'ye',
    'うぁ': 'wha', 'うぃ': 'wi', 'うぇ': 'we', 'うぉ': 'who',
    'ゔゃ': 'vya', 'ゔゅ': 'vyu', 'ゔょ': 'vyo',
    'すぁ': 'swa', 'すぃ': 'swi', 'すぅ': 'swu', 'すぇ': 'swe', 'すぉ': 'swo',
    'くゃ': 'qya', 'くゅ': 'qyu', 'くょ': 'qyo',
    'くぁ': 'qwa', 'くぃ': 'qwi', 'くぅ': 'qwu', 'くぇ': 'qwe', 'くぉ': 'qwo',
    'ぐぁ': 'gwa', 'ぐぃ': 'gwi', 'ぐぅ': 'gwu', 'ぐぇ': 'gwe', 'ぐぉ': 'gwo',
    'つぁ': 'tsa', 'つぃ': 'tsi', 'つぇ': 'tse', 'つぉ': 'tso',
    'てゃ': 'tha', 'てぃ': 'thi', 'てゅ': 'thu', 'てぇ': 'the', 'てょ': 'tho',
    'とぁ': 'twa', 'とぃ': 'twi', 'とぅ': 'twu', 'とぇ': 'twe', 'とぉ': 'two',
    'ぢゃ': 'dya', 'ぢぃ': 'dyi', 'ぢゅ': 'dyu', 'ぢぇ': 'dye', 'ぢょ': 'dyo',
    'でゃ': 'dha', 'でぃ': 'dhi', 'でゅ': 'dhu', 'でぇ': 'dhe', 'でょ': 'dho',
    'どぁ': 'dwa', 'どぃ': 'dwi', 'どぅ': 'dwu', 'どぇ': 'dwe', 'どぉ': 'dwo',

    # Small kana on their own
    'ぁ': 'a',    'ぃ': 'i',    'ぅ': 'u',    'ぇ': 'e',    'ぉ': 'o',
    'ゃ': 'ya',                 'ゅ': 'yu',                 'ょ': 'yo',
    'っ': '',     'ゕ': 'ka',   'ゖ': 'ka',   'ゎ': 'wa',
}

KUNREI_OVERRIDES = {
    'し': 'si',   'ち': 'ti',   'つ': 'tu',   'ふ': 'hu',   'じ': 'zi',
    'ぢ': 'zi',   'づ': 'zu',
    'しゃ': 'sya', 'しゅ': 'syu', 'しょ': 'syo', 'しぇ': 'sye',
    'ちゃ': 'tya', 'ちゅ': 'tyu', 'ちょ': 'tyo', 'ちぇ': 'tye',
    'じゃ': 'zya', 'じゅ': 'zyu', 'じょ': 'zyo', 'じぇ': 'zye',
    'ぢゃ': 'zya', 'ぢゅ': 'zyu', 'ぢょ': 'zyo',
    'を': 'o',    'ゐ': 'i',    'ゑ': 'e',
}

HEPBURN = SyllableTable(
    list(KANA_PUNCTUATION.items()) + list(HEPBURN_TABLE.items()),
    name='hepburn',
)
KUNREI = HEPBURN.merged(KUNREI_OVERRIDES.items(), name='kunrei')

ROMANIZATION_METHODS = {
    'hepburn': HEPBURN,
    'kunrei': KUNREI,
}

EMPTY_TABLE = SyllableTable(name='empty')


def get_kana_table(romanization: str) -> SyllableTable:
    """
    Get the kana -> romaji table for a romanization method.

    Args:
        romanization: Method name, case-insensitive ('hepburn', 'kunrei').

    Returns:
        The method's table, or an empty table for an unknown name, so that
        text is left as it is rather than converted wrongly.
    """
    table = ROMANIZATION_METHODS.get(romanization.lower())
    if table is None:
        logger.warning(f"Unknown romanization '{romanization}', text will not be romanized")
        return EMPTY_TABLE
    return table
