"""
Longest-match tokenizer for Kakikae.

Walks text against a match tree and returns (start, end, output) tokens
that cover the input exactly once, in order. Unknown characters come out
as one-character pass-through tokens, so tokenizing never fails.
"""

from typing import List, NamedTuple, Optional, Sequence

from kakikae.config import Configuration
from kakikae.rules import Rule, at_buffer_end
from kakikae.tree import Node, walk


class Token(NamedTuple):
    """
    A span of the input and what it converts to.

    output is None for a trailing span held back in incremental mode
    because more input could still change it.
    """
    start: int
    end: int
    output: Optional[str]


_ASCII_LOWER = {code: code + 32 for code in range(ord('A'), ord('Z') + 1)}


def lower_ascii(text: str) -> str:
    """Lowercase A-Z only, so offsets into the text never shift."""
    return text.translate(_ASCII_LOWER)


def longest_match(text: str, position: int, root: Node, config: Configuration,
                  source: Optional[str] = None) -> Token:
    """
    Match the longest syllable starting at position.

    Args:
        text: Text being matched (case-normalized).
        position: Start index.
        root: Match tree.
        config: Resolved configuration; only incremental mode matters here.
        source: Text that pass-through tokens copy from. Defaults to text.

    Returns:
        The syllable token, a withheld token for an extendable span at the
        end of the buffer (incremental mode), or a one-character pass-through.
    """
    if source is None:
        source = text
    match = walk(root, text, position)
    if match.depth == 0:
        return Token(position, position + 1, source[position])

    end = position + match.depth
    if config.incremental and match.node.children and at_buffer_end(text, end, True):
        return Token(position, end, None)
    if match.payload is not None:
        return Token(position, position + match.payload_depth, match.payload)
    return Token(position, position + 1, source[position])


def tokenize_with(text: str, root: Node, rules: Sequence[Rule], config: Configuration,
                  source: Optional[str] = None, offset: int = 0) -> List[Token]:
    """
    Tokenize text with a tree and a set of disambiguation rules.

    At each position the rules are asked first, in order; the first one
    with an opinion decides the token. Otherwise the longest match does.

    Args:
        text: Text to tokenize (case-normalized).
        root: Match tree.
        rules: Disambiguation rules for the tree's direction.
        config: Resolved configuration.
        source: Original text for pass-through tokens. Defaults to text.
        offset: Added to every token's offsets.

    Returns:
        Contiguous tokens covering text.
    """
    if source is None:
        source = text
    tokens = []
    position = 0
    length = len(text)
    while position < length:
        token = None
        for rule in rules:
            decision = rule(text, position, root, config)
            if decision is not None:
                token = Token(position, position + decision.length, decision.output)
                break
        if token is None:
            token = longest_match(text, position, root, config, source)
        tokens.append(Token(token.start + offset, token.end + offset, token.output))
        position = token.end
    return tokens
