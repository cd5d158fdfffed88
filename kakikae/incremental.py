"""
Incremental (IME) conversion for Kakikae.

Text is fed as it is typed. Each call re-tokenizes only the pending tail of
the buffer together with the new input, commits every token that can no
longer change, and keeps the rest as raw text for the next call.

The state is an explicit value owned by the caller: one ImeState (or one
ImeSession) per input field. Never share a session between threads.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from kakikae.characters import to_ascii_width
from kakikae.config import Configuration, ImeMode, resolve_config
from kakikae.deromanize import render_kana, split_into_kana
from kakikae.tokenizer import Token, lower_ascii
from kakikae.tree import Direction, TreeCache, find_node, get_tree


class TokenStatus(str, Enum):
    """How settled a token is while the user is still typing."""
    FINAL = 'final'              # cannot change whatever comes next
    PROVISIONAL = 'provisional'  # already spells a syllable but may grow (n)
    UNRESOLVED = 'unresolved'    # not a syllable yet (k, ky, tt)


@dataclass(frozen=True)
class ImeState:
    """
    What the buffer looks like after the last call.

    Attributes:
        last_buffer: Displayed text: committed kana followed by pending raw input.
        last_tokens: Tokens over last_buffer. Committed tokens carry their kana,
            pending ones have output None and span their raw text.
    """
    last_buffer: str = ''
    last_tokens: Tuple[Token, ...] = ()

    @property
    def pending_start(self) -> int:
        """Index in last_buffer where the uncommitted tail begins."""
        for token in self.last_tokens:
            if token.output is None:
                return token.start
        return len(self.last_buffer)

    @property
    def pending(self) -> str:
        return self.last_buffer[self.pending_start:]

    @property
    def committed(self) -> str:
        return self.last_buffer[:self.pending_start]


def _ime_config(config: Optional[Configuration], options: dict) -> Configuration:
    config = resolve_config(config, **options)
    if not config.incremental:
        config = resolve_config(config, ime_mode=ImeMode.ON)
    return config


def convert_incremental(state: Optional[ImeState], appended: str,
                        config: Optional[Configuration] = None,
                        cache: Optional[TreeCache] = None,
                        **options) -> Tuple[ImeState, str]:
    """
    Feed newly typed text into the buffer.

    Only the pending tail is re-read: committed text before it is never
    rewritten. Full-width latin input is narrowed to ASCII first.

    Args:
        state: State from the previous call, or None to start a buffer.
        appended: Text typed since the previous call.
        config: Configuration or mapping of options. Incremental mode is
            switched on if it is off.
        cache: Tree cache.
        **options: Option overrides.

    Returns:
        (new_state, committed_text), where committed_text is the kana that
        became final during this call.

    Examples:
        >>> state, committed = convert_incremental(None, "n")
        >>> committed, state.last_buffer
        ('', 'n')
        >>> state, committed = convert_incremental(state, "i")
        >>> committed, state.last_buffer
        ('に', 'に')
    """
    config = _ime_config(config, options)
    if state is None:
        state = ImeState()

    resume = state.pending_start
    kept = tuple(token for token in state.last_tokens if token.end <= resume)
    tail = state.last_buffer[resume:] + to_ascii_width(appended)

    tokens = split_into_kana(tail, config, cache)

    new_tokens = list(kept)
    display = [state.last_buffer[:resume]]
    committed = []
    position = resume
    pending = False
    for token in tokens:
        if token.output is None:
            text = tail[token.start:token.end]
            new_tokens.append(Token(position, position + len(text), None))
            pending = True
        else:
            text = render_kana([token], tail, config)
            new_tokens.append(Token(position, position + len(text), text))
            if not pending:
                committed.append(text)
        display.append(text)
        position += len(text)

    new_state = ImeState(''.join(display), tuple(new_tokens))
    return new_state, ''.join(committed)


def classify_tokens(tokens: Sequence[Token], text: str,
                    config: Optional[Configuration] = None,
                    cache: Optional[TreeCache] = None, **options) -> List[TokenStatus]:
    """
    Classify romaji -> kana tokens as final, provisional or unresolved.

    Args:
        tokens: Tokens from split_into_kana (or ImeState.last_tokens).
        text: The text the tokens index into.
        config: Configuration or mapping of options.
        cache: Tree cache.
        **options: Option overrides.

    Returns:
        One TokenStatus per token.
    """
    config = resolve_config(config, **options)
    root = get_tree(Direction.KANA, config, cache)
    statuses = []
    for token in tokens:
        if token.output is not None:
            statuses.append(TokenStatus.FINAL)
            continue
        node = find_node(root, lower_ascii(text[token.start:token.end]))
        if node is not None and node.payload is not None:
            statuses.append(TokenStatus.PROVISIONAL)
        else:
            statuses.append(TokenStatus.UNRESOLVED)
    return statuses


class ImeSession:
    """
    One input field's worth of incremental conversion.

    Usage:
        session = ImeSession()
        for char in "kanpai":
            session.feed(char)
        session.text  # 'かんぱい'
    """

    def __init__(self, config: Optional[Configuration] = None,
                 cache: Optional[TreeCache] = None, **options):
        self.config = _ime_config(config, options)
        self.cache = cache
        self.state = ImeState()

    def feed(self, text: str) -> str:
        """Append typed text; return the kana committed by it."""
        self.state, committed = convert_incremental(self.state, text, self.config, self.cache)
        return committed

    def type(self, text: str) -> str:
        """Feed text one character at a time, as a keyboard would; return the buffer."""
        for char in text:
            self.feed(char)
        return self.text

    @property
    def text(self) -> str:
        return self.state.last_buffer

    @property
    def pending(self) -> str:
        return self.state.pending

    def statuses(self) -> List[TokenStatus]:
        return classify_tokens(self.state.last_tokens, self.state.last_buffer,
                               self.config, self.cache)

    def reset(self):
        self.state = ImeState()
