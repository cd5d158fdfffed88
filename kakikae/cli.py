"""
Command line interface for kakikae.

Usage:
    python -m kakikae.cli "konnichiha"            # -> こんにちは
    python -m kakikae.cli "カタカナ"               # -> katakana
    python -m kakikae.cli -t katakana "kana"      # -> カナ
    python -m kakikae.cli -s "kin'ya"             # token list as JSON
    python -m kakikae.cli --ime "kanpai"          # type it like a keyboard
"""

import argparse
import json
import logging
import sys
from typing import List, Optional, Tuple

from kakikae import __version__, settings
from kakikae.characters import is_char_kana
from kakikae.config import ConfigurationError, ImeMode, resolve_config
from kakikae.converter import Converter
from kakikae.tree import Direction

TARGETS = ('auto', 'kana', 'hiragana', 'katakana', 'romaji')


def parse_mapping(pairs: Optional[List[str]]) -> Tuple[Tuple[str, str], ...]:
    """
    Parse repeated KEY=VALUE arguments into mapping pairs.

    Raises:
        ValueError: If an argument has no '='.
    """
    result = []
    for pair in pairs or ():
        key, sep, value = pair.partition('=')
        if not sep:
            raise ValueError(f"expected KEY=VALUE, got {pair!r}")
        result.append((key, value))
    return tuple(result)


def resolve_target(target: str, text: str) -> str:
    """Pick a target for 'auto': romaji if the text has kana, kana otherwise."""
    if target != 'auto':
        return target
    return 'romaji' if any(is_char_kana(char) for char in text) else 'kana'


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description='Command line interface for Kakikae (romaji / hiragana / katakana conversion)',
        prog='kakikae',
    )

    parser.add_argument(
        'text',
        nargs='*',
        help='Text to convert',
    )

    parser.add_argument(
        '-t', '--to',
        choices=TARGETS,
        default='auto',
        help='Target script (default: romaji for kana input, kana otherwise)',
    )

    parser.add_argument(
        '-s', '--split',
        action='store_true',
        help='Print the token list as JSON instead of the converted text',
    )

    parser.add_argument(
        '--obsolete',
        action='store_true',
        help='Use obsolete kana (wi -> ゐ, we -> ゑ)',
    )

    parser.add_argument(
        '--pass-romaji',
        action='store_true',
        help='Leave romaji untouched when converting to hiragana/katakana',
    )

    parser.add_argument(
        '--upcase-katakana',
        action='store_true',
        help='Uppercase romaji that came from katakana',
    )

    parser.add_argument(
        '--ignore-case',
        action='store_true',
        help='Do not use uppercase romaji to select katakana',
    )

    parser.add_argument(
        '--romanization',
        type=str,
        default=settings.DEFAULT_ROMANIZATION,
        metavar='NAME',
        help=f'Romanization method: hepburn or kunrei (default: {settings.DEFAULT_ROMANIZATION})',
    )

    parser.add_argument(
        '-m', '--map',
        action='append',
        metavar='KEY=VALUE',
        help='Custom syllable mapping for the chosen direction (repeatable)',
    )

    parser.add_argument(
        '--ime',
        action='store_true',
        help='Type the text one character at a time and print the final buffer',
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )

    parsed = parser.parse_args(args)

    if parsed.version:
        print(f'kakikae {__version__}')
        return 0

    logging.basicConfig(
        level=logging.DEBUG if parsed.debug else settings.log_level(),
        format='%(levelname)s %(name)s: %(message)s',
    )

    text = ' '.join(parsed.text) if parsed.text else ''
    if not text:
        print('Error: no text given', file=sys.stderr)
        return 1

    target = resolve_target(parsed.to, text)

    try:
        mapping = parse_mapping(parsed.map)
        options = dict(
            use_obsolete_kana=parsed.obsolete,
            pass_romaji=parsed.pass_romaji,
            upcase_katakana=parsed.upcase_katakana,
            ignore_case=parsed.ignore_case,
            romanization=parsed.romanization,
        )
        if target == 'romaji':
            options['custom_romaji_mapping'] = mapping
        else:
            options['custom_kana_mapping'] = mapping
        if parsed.ime:
            options['ime_mode'] = {
                'hiragana': ImeMode.HIRAGANA,
                'katakana': ImeMode.KATAKANA,
            }.get(target, ImeMode.ON)
        converter = Converter(resolve_config(**options))
    except (ConfigurationError, ValueError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    if parsed.ime:
        if target == 'romaji':
            print('Error: --ime types romaji into kana; it cannot target romaji', file=sys.stderr)
            return 1
        session = converter.session()
        print(session.type(text))
        return 0

    if parsed.split:
        direction = Direction.ROMAJI if target == 'romaji' else Direction.KANA
        tokens = converter.tokenize(text, direction)
        print(json.dumps([list(token) for token in tokens], ensure_ascii=False))
        return 0

    convert = {
        'kana': converter.to_kana,
        'hiragana': converter.to_hiragana,
        'katakana': converter.to_katakana,
        'romaji': converter.to_romaji,
    }[target]
    print(convert(text))
    return 0


if __name__ == '__main__':
    sys.exit(main())
