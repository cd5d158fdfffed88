"""
Tests for characters.py - script predicates, kana shifting and run splitting.
"""

import pytest

from kakikae.characters import (
    as_hiragana, as_katakana, char_script, is_char_upper_case, is_english_punctuation,
    is_hiragana, is_japanese, is_kana, is_kanji, is_katakana, is_mixed, is_romaji,
    split_runs, to_ascii_width,
)


class TestEmptyInput:
    """Every predicate is False for the empty string."""

    @pytest.mark.parametrize("predicate", [
        is_hiragana, is_katakana, is_kana, is_kanji, is_romaji, is_japanese, is_mixed,
    ])
    def test_empty_is_false(self, predicate):
        assert predicate('') is False

    def test_empty_runs(self):
        assert split_runs('') == []


class TestScriptPredicates:
    """Tests for whole-string script predicates."""

    def test_hiragana(self):
        """Hiragana, with the long dash counting as hiragana."""
        assert is_hiragana('あ')
        assert is_hiragana('ああ')
        assert is_hiragana('げーむ')
        assert not is_hiragana('ア')
        assert not is_hiragana('A')
        assert not is_hiragana('あア')

    def test_katakana(self):
        """Katakana, with the long dash counting as katakana."""
        assert is_katakana('アア')
        assert is_katakana('ゲーム')
        assert not is_katakana('あ')
        assert not is_katakana('A')
        assert not is_katakana('あア')

    def test_kana(self):
        assert is_kana('あア')
        assert is_kana('アーあ')
        assert not is_kana('A')
        assert not is_kana('あAア')

    def test_kanji(self):
        assert is_kanji('切腹')
        assert is_kanji('刀')
        assert not is_kanji('🐸')
        assert not is_kanji('あア')
        assert not is_kanji('１２隻')
        assert not is_kanji('12隻')
        assert not is_kanji('隻。')

    def test_japanese(self):
        """Japanese includes zenkaku punctuation, numbers and latin letters."""
        assert is_japanese('泣き虫')
        assert is_japanese('　')
        assert is_japanese('泣き虫。＃！〜〈〉《》〔〕［］【】（）｛｝〝〟')
        assert is_japanese('０１２３４５６７８９')
        assert is_japanese('0123456789')
        assert is_japanese('ＭｅＴｏｏ')
        assert is_japanese('２０１１年')
        assert is_japanese('ﾊﾝｶｸｶﾀｶﾅ')
        assert not is_japanese('A泣き虫')
        assert not is_japanese(' ')
        assert not is_japanese('泣き虫.!~')

    def test_romaji(self):
        """Romaji is ASCII plus Hepburn macrons."""
        assert is_romaji('xYz')
        assert is_romaji('Tōkyō and Ōsaka')
        assert is_romaji('a*b&c-d')
        assert is_romaji('0123456789')
        assert not is_romaji('あアA')
        assert not is_romaji('熟成')
        assert not is_romaji('a！b&cーd')
        assert not is_romaji('ｈｅｌｌｏ')

    def test_mixed(self):
        assert is_mixed('Aア')
        assert is_mixed('Aあア')
        assert is_mixed('お腹A')
        assert not is_mixed('お腹A', pass_kanji=False)
        assert not is_mixed('２あア')
        assert not is_mixed('お腹')
        assert not is_mixed('A')
        assert not is_mixed('ア')

    def test_english_punctuation(self):
        assert is_english_punctuation('!?‘’')
        assert not is_english_punctuation('a!')

    def test_upper_case_is_ascii_only(self):
        assert is_char_upper_case('K')
        assert not is_char_upper_case('k')
        assert not is_char_upper_case('Ｋ')


class TestKanaShifting:
    """Tests for as_hiragana / as_katakana."""

    def test_round_trip(self):
        assert as_katakana('ばける') == 'バケル'
        assert as_hiragana('バケル') == 'ばける'

    def test_marks_are_not_shifted(self):
        """The long dash and slash dot stay as they are."""
        assert as_hiragana('ゲーム・バツ') == 'げーむ・ばつ'
        assert as_katakana('げーむ・ばつ') == 'ゲーム・バツ'

    def test_symbol_katakana_kept(self):
        assert as_hiragana('ヶヵ') == 'ヶヵ'

    def test_non_kana_untouched(self):
        assert as_katakana('漢字 abc') == '漢字 abc'


class TestAsciiWidth:
    """Tests for to_ascii_width."""

    def test_fullwidth_latin(self):
        assert to_ascii_width('ｈｉｒｏｉ') == 'hiroi'
        assert to_ascii_width('ＫＵＲＯ１２') == 'KURO12'

    def test_other_characters_untouched(self):
        assert to_ascii_width('かｔ！') == 'かt！'


class TestSplitRuns:
    """Tests for split_runs."""

    def test_char_script(self):
        assert char_script('あ') == 'hiragana'
        assert char_script('ア') == 'katakana'
        assert char_script('漢') == 'kanji'
        assert char_script('a') == 'latin'
        assert char_script('🐸') == 'other'
        assert char_script('ー') is None
        assert char_script(' ') is None

    def test_quotes_join_the_longer_neighbour(self):
        """Smart quotes around romaji go with the romaji."""
        assert split_runs('座禅‘zazen’スタイル') == [
            ('kanji', '座禅'),
            ('latin', '‘zazen’'),
            ('katakana', 'スタイル'),
        ]

    def test_long_dash_inside_katakana(self):
        assert split_runs('ばつゲーム') == [('hiragana', 'ばつ'), ('katakana', 'ゲーム')]

    def test_tie_goes_left(self):
        assert split_runs('ab cd') == [('latin', 'ab cd')]
        assert split_runs('ab-あい') == [('latin', 'ab-'), ('hiragana', 'あい')]

    def test_only_shared(self):
        assert split_runs(' - ') == [('other', ' - ')]

    def test_runs_cover_input(self):
        text = 'what the...私は「悲しい」。'
        assert ''.join(chunk for _, chunk in split_runs(text)) == text
