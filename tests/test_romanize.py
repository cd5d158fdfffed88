"""
Tests for romanize.py - kana to romaji.
"""

import pytest

from kakikae.romanize import to_romaji


class TestToRomaji:
    """Tests for to_romaji with the default (Hepburn) method."""

    @pytest.mark.parametrize("text,expected", [
        ('ワニカニ　ガ　スゴイ　ダ', 'wanikani ga sugoi da'),
        ('ひらがな　カタカナ', 'hiragana katakana'),
        ('げーむ　ゲーム', 'ge-mu geemu'),
        ('罰ゲーム・ばつげーむ', '罰geemu/batsuge-mu'),
        ('ローマじ', 'roomaji'),
        ('すうぱあ', 'suupaa'),
        ('きゃきゅきょ', 'kyakyukyo'),
        ('じゃじゅじょ', 'jajujo'),
        ('ちゃちゅちょ', 'chachucho'),
    ])
    def test_conversion(self, text, expected):
        assert to_romaji(text) == expected

    def test_empty(self):
        assert to_romaji('') == ''

    def test_punctuation(self):
        assert to_romaji('！？。：・、〜ー「」『』［］（）｛｝') == '!?.:/,~-‘’“”[](){}'

    def test_upcase_katakana(self):
        assert to_romaji('ワニカニ　が　すごい　だ', upcase_katakana=True) == 'WANIKANI ga sugoi da'
        assert to_romaji('ワニカニ　が　すごい　だ') == 'wanikani ga sugoi da'

    def test_unknown_characters_kept(self):
        assert to_romaji('漢字とABC') == '漢字toABC'


class TestGeminate:
    """Tests for っ."""

    @pytest.mark.parametrize("text,expected", [
        ('がっこう', 'gakkou'),
        ('かっぱ', 'kappa'),
        ('まっちゃ', 'matcha'),
        ('ざっし', 'zasshi'),
        ('ぶっつうじ', 'buttsuuji'),
        ('ゲット', 'getto'),
    ])
    def test_doubled_consonant(self, text, expected):
        assert to_romaji(text) == expected

    def test_before_vowel_is_silent(self):
        assert to_romaji('っあ') == 'a'

    def test_small_kana(self):
        assert to_romaji('ぁぃぅぇぉ') == 'aiueo'
        assert to_romaji('ゃゅょ') == 'yayuyo'


class TestNasal:
    """Tests for ん."""

    @pytest.mark.parametrize("text,expected", [
        ('おんよみ', "on'yomi"),
        ('んよ んあ んゆ', "n'yo n'a n'yu"),
        ('かんぱい', 'kanpai'),
        ('ほん', 'hon'),
        ('きんえん', "kin'en"),
    ])
    def test_nasal(self, text, expected):
        assert to_romaji(text) == expected


class TestRomanizationMethods:
    """Tests for romanization methods and custom mappings."""

    def test_kunrei(self):
        assert to_romaji('しつじ', romanization='kunrei') == 'situzi'
        assert to_romaji('ちゃを', romanization='kunrei') == 'tyao'

    def test_method_name_case_insensitive(self):
        assert to_romaji('ふじ', romanization='Kunrei') == 'huzi'

    def test_unknown_method_leaves_text(self):
        assert to_romaji('つじぎり', romanization='wibble') == 'つじぎり'

    def test_custom_mapping(self):
        mapping = {'じ': 'zi', 'つ': 'tu', 'り': 'li'}
        assert to_romaji('つじぎり', custom_romaji_mapping=mapping) == 'tuzigili'

    def test_custom_mapping_longer_spelling(self):
        assert to_romaji('いろは', custom_romaji_mapping={'いろは': 'iroha!'}) == 'iroha!'
