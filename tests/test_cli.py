"""
Tests for cli.py - Command line interface.
"""

import json

import pytest

from kakikae.cli import main, parse_mapping, resolve_target


class TestCLIBasics:
    """Tests for basic CLI functionality."""

    def test_version(self, capsys):
        """Test version flag."""
        result = main(['--version'])
        assert result == 0
        captured = capsys.readouterr()
        assert 'kakikae' in captured.out
        assert '0.1.0' in captured.out

    def test_help(self, capsys):
        """Test help flag."""
        with pytest.raises(SystemExit) as exc_info:
            main(['--help'])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert 'Kakikae' in captured.out

    def test_no_args(self, capsys):
        """Test running with no arguments."""
        result = main([])
        assert result == 1
        assert 'no text' in capsys.readouterr().err


class TestCLIConversion:
    """Tests for converting text."""

    def test_romaji_to_kana(self, capsys):
        assert main(['konnichiha']) == 0
        assert capsys.readouterr().out.strip() == 'こんにちは'

    def test_kana_to_romaji(self, capsys):
        assert main(['カタカナ']) == 0
        assert capsys.readouterr().out.strip() == 'katakana'

    def test_words_joined(self, capsys):
        assert main(['onaji', 'BUTTSUUJI']) == 0
        assert capsys.readouterr().out.strip() == 'おなじ ブッツウジ'

    def test_target(self, capsys):
        assert main(['-t', 'katakana', 'kana']) == 0
        assert capsys.readouterr().out.strip() == 'カナ'

    def test_romanization(self, capsys):
        assert main(['--romanization', 'kunrei', 'しつじ']) == 0
        assert capsys.readouterr().out.strip() == 'situzi'

    def test_obsolete(self, capsys):
        assert main(['--obsolete', 'wi']) == 0
        assert capsys.readouterr().out.strip() == 'ゐ'

    def test_custom_mapping(self, capsys):
        assert main(['-m', 'ka=Bana', 'kana']) == 0
        assert capsys.readouterr().out.strip() == 'Banaな'

    def test_bad_mapping(self, capsys):
        assert main(['-m', 'ka', 'kana']) == 1
        assert 'Error' in capsys.readouterr().err


class TestCLISplit:
    """Tests for --split output."""

    def test_split_kana(self, capsys):
        assert main(['-s', "kin'ya"]) == 0
        tokens = json.loads(capsys.readouterr().out)
        assert tokens == [[0, 2, 'き'], [2, 4, 'ん'], [4, 6, 'や']]

    def test_split_romaji(self, capsys):
        assert main(['-s', 'がっこう']) == 0
        tokens = json.loads(capsys.readouterr().out)
        assert tokens == [[0, 1, 'ga'], [1, 2, 'k'], [2, 3, 'ko'], [3, 4, 'u']]


class TestCLIIme:
    """Tests for --ime."""

    def test_ime(self, capsys):
        assert main(['--ime', 'kanpai']) == 0
        assert capsys.readouterr().out.strip() == 'かんぱい'

    def test_ime_pending(self, capsys):
        assert main(['--ime', 'kan']) == 0
        assert capsys.readouterr().out.strip() == 'かn'

    def test_ime_katakana(self, capsys):
        assert main(['--ime', '-t', 'katakana', 'kana']) == 0
        assert capsys.readouterr().out.strip() == 'カナ'

    def test_ime_romaji_rejected(self, capsys):
        assert main(['--ime', '-t', 'romaji', 'かな']) == 1
        assert 'Error' in capsys.readouterr().err


class TestHelpers:
    """Tests for CLI helper functions."""

    def test_parse_mapping(self):
        assert parse_mapping(['a=b', 'c=d=e']) == (('a', 'b'), ('c', 'd=e'))
        assert parse_mapping(None) == ()

    def test_parse_mapping_error(self):
        with pytest.raises(ValueError):
            parse_mapping(['nope'])

    def test_resolve_target(self):
        assert resolve_target('auto', 'kana') == 'kana'
        assert resolve_target('auto', 'かな') == 'romaji'
        assert resolve_target('katakana', 'かな') == 'katakana'
