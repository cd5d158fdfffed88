"""
Tests for config.py - option resolution and custom mapping validation.
"""

import pytest
from pydantic import ValidationError

from kakikae.config import Configuration, ConfigurationError, ImeMode, resolve_config


class TestDefaults:
    """Tests for the default configuration."""

    def test_defaults(self):
        """Test every option's default."""
        config = resolve_config()
        assert config.use_obsolete_kana is False
        assert config.pass_romaji is False
        assert config.upcase_katakana is False
        assert config.ignore_case is False
        assert config.ime_mode is ImeMode.OFF
        assert config.romanization == 'hepburn'
        assert config.custom_kana_mapping == ()
        assert config.custom_romaji_mapping == ()
        assert not config.incremental

    def test_frozen(self):
        """Test a resolved configuration cannot be changed."""
        config = resolve_config()
        with pytest.raises(ValidationError):
            config.pass_romaji = True

    def test_existing_config_returned_as_is(self):
        config = resolve_config(use_obsolete_kana=True)
        assert resolve_config(config) is config

    def test_overrides_layer_on_config(self):
        base = resolve_config(use_obsolete_kana=True)
        derived = resolve_config(base, pass_romaji=True)
        assert derived.use_obsolete_kana and derived.pass_romaji
        assert not base.pass_romaji

    def test_mapping_as_config(self):
        config = resolve_config({'romanization': 'kunrei'}, upcase_katakana=True)
        assert config.romanization == 'kunrei'
        assert config.upcase_katakana


class TestImeMode:
    """Tests for ime_mode coercion."""

    @pytest.mark.parametrize("value,expected", [
        (False, ImeMode.OFF),
        (None, ImeMode.OFF),
        (True, ImeMode.ON),
        ('on', ImeMode.ON),
        ('toHiragana', ImeMode.HIRAGANA),
        ('tokatakana', ImeMode.KATAKANA),
        ('KATAKANA', ImeMode.KATAKANA),
        (ImeMode.HIRAGANA, ImeMode.HIRAGANA),
    ])
    def test_coercion(self, value, expected):
        assert resolve_config(ime_mode=value).ime_mode is expected

    def test_incremental(self):
        assert resolve_config(ime_mode='hiragana').incremental

    def test_unknown_mode(self):
        with pytest.raises(ConfigurationError, match='ime_mode'):
            resolve_config(ime_mode='sideways')


class TestCustomMappings:
    """Tests for custom mapping normalization and validation."""

    def test_dict_becomes_pairs(self):
        config = resolve_config(custom_kana_mapping={'na': 'に', 'ka': 'Bana'})
        assert config.custom_kana_mapping == (('na', 'に'), ('ka', 'Bana'))

    def test_pairs_accepted(self):
        config = resolve_config(custom_romaji_mapping=[['じ', 'zi'], ('つ', 'tu')])
        assert config.custom_romaji_mapping == (('じ', 'zi'), ('つ', 'tu'))

    def test_equal_mappings_are_equal(self):
        """Test mappings given differently resolve to equal, hashable configurations."""
        first = resolve_config(custom_kana_mapping={'ka': 'Bana'})
        second = resolve_config(custom_kana_mapping=[('ka', 'Bana')])
        assert first == second
        assert hash(first.custom_kana_mapping) == hash(second.custom_kana_mapping)

    def test_not_a_mapping(self):
        with pytest.raises(ConfigurationError, match='custom_kana_mapping'):
            resolve_config(custom_kana_mapping='na=に')

    def test_bad_pair(self):
        with pytest.raises(ConfigurationError):
            resolve_config(custom_kana_mapping=[('na', 'に', 'extra')])

    def test_non_string_output(self):
        with pytest.raises(ConfigurationError, match='must be a string'):
            resolve_config(custom_romaji_mapping={'じ': 3})

    def test_empty_key(self):
        with pytest.raises(ConfigurationError, match='non-empty'):
            resolve_config(custom_kana_mapping={'': 'x'})

    def test_is_value_error(self):
        """Test ConfigurationError can be caught as ValueError."""
        with pytest.raises(ValueError):
            resolve_config(custom_kana_mapping=42)


class TestUnknownOptions:
    """Tests for option names and config types."""

    def test_unknown_option(self):
        with pytest.raises(ConfigurationError, match='IMEMode'):
            resolve_config(IMEMode=True)

    def test_bad_config_type(self):
        with pytest.raises(ConfigurationError):
            resolve_config(['use_obsolete_kana'])

    def test_model_directly(self):
        assert Configuration(ime_mode='tohiragana').ime_mode is ImeMode.HIRAGANA
