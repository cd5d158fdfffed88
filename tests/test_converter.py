"""
Tests for converter.py and the package-level API.
"""

import kakikae
from kakikae.converter import Converter
from kakikae.tokenizer import Token
from kakikae.tree import Direction, TreeCache


class TestConverter:
    """Tests for the Converter engine."""

    def test_conversions(self, converter):
        assert converter.to_kana('wanakana') == 'わなかな'
        assert converter.to_hiragana('ワナカナ') == 'わなかな'
        assert converter.to_katakana('wanakana') == 'ワナカナ'
        assert converter.to_romaji('わなかな') == 'wanakana'

    def test_base_options(self, cache):
        converter = Converter(use_obsolete_kana=True, cache=cache)
        assert converter.to_kana('wi') == 'ゐ'
        assert converter.to_romaji('ゐ', romanization='kunrei') == 'i'

    def test_call_options_do_not_stick(self, converter):
        assert converter.to_kana('wi', use_obsolete_kana=True) == 'ゐ'
        assert converter.to_kana('wi') == 'うぃ'
        assert not converter.config.use_obsolete_kana

    def test_tokenize(self, converter):
        assert converter.tokenize('ka') == [Token(0, 2, 'か')]
        assert converter.tokenize('か', Direction.ROMAJI) == [Token(0, 1, 'ka')]
        assert converter.split_into_kana('ka') == [Token(0, 2, 'か')]
        assert converter.split_into_romaji('か') == [Token(0, 1, 'ka')]

    def test_uses_own_cache(self, converter, cache):
        converter.to_kana('ka')
        converter.to_romaji('か')
        assert len(cache) == 2

    def test_default_cache_per_converter(self):
        first = Converter()
        second = Converter()
        assert isinstance(first.cache, TreeCache)
        assert first.cache is not second.cache

    def test_incremental(self, converter):
        state, committed = converter.convert_incremental(None, 'kan')
        assert (committed, state.last_buffer) == ('か', 'かn')
        assert converter.classify_tokens(state.last_tokens, state.last_buffer)[0].value == 'final'

    def test_session(self, converter, cache):
        session = converter.session(ime_mode='katakana')
        assert session.type('kana') == 'カナ'
        assert session.cache is cache

    def test_warm_up(self, converter, cache):
        timings = converter.warm_up()
        assert set(timings) == {'kana', 'romaji'}
        assert len(cache) == 2


class TestPackageApi:
    """Tests for names exported by the package."""

    def test_module_functions(self):
        assert kakikae.to_kana('kana') == 'かな'
        assert kakikae.to_romaji('カナ') == 'kana'
        assert kakikae.is_hiragana('かな')
        assert kakikae.tokenize('ka') == [Token(0, 2, 'か')]

    def test_version(self):
        assert kakikae.__version__ == '0.1.0'

    def test_warm_up(self, capsys):
        elapsed, timings = kakikae.warm_up(verbose=True)
        assert elapsed >= 0
        assert {'kana', 'obsolete', 'hepburn', 'kunrei', 'total'} <= set(timings)
        assert 'Warming up' in capsys.readouterr().out
