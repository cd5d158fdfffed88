"""
Match trees for Kakikae.

A match tree is a prefix tree built from a syllable table: one edge per
input character, with the syllable's output stored at the node where its
spelling ends. Trees are built once per (direction, configuration) and kept
in a TreeCache; after construction they are only read.
"""

import logging
import threading
from collections import OrderedDict
from collections.abc import Mapping
from enum import Enum
from typing import Callable, Dict, Hashable, NamedTuple, Optional, Tuple

from kakikae import syllables
from kakikae.config import Configuration
from kakikae.settings import TREE_CACHE_MAXSIZE

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    """Which way a tree converts."""
    KANA = 'kana'      # romaji -> kana
    ROMAJI = 'romaji'  # kana -> romaji


# ============================================================================
# Nodes
# ============================================================================

class Node:
    """A match tree node: child edges keyed by character, optional payload."""

    __slots__ = ('children', 'payload')

    def __init__(self, payload: Optional[str] = None):
        self.children: Dict[str, 'Node'] = {}
        self.payload = payload

    def __eq__(self, other) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.payload == other.payload and self.children == other.children

    def __repr__(self) -> str:
        return f"Node(payload={self.payload!r}, children={''.join(self.children)!r})"

    def count(self) -> int:
        """Number of nodes in this subtree, itself included."""
        return 1 + sum(child.count() for child in self.children.values())


def build_tree(table: Mapping) -> Node:
    """
    Build a prefix tree from a syllable table.

    A syllable that is a prefix of a longer one keeps its own payload at its
    own depth. Later entries with the same spelling replace earlier ones.

    Args:
        table: Mapping of syllable -> output.

    Returns:
        The root node (empty prefix, never carries a payload).
    """
    root = Node()
    for syllable, output in table.items():
        if not syllable:
            continue
        node = root
        for char in syllable:
            child = node.children.get(char)
            if child is None:
                child = node.children[char] = Node()
            node = child
        node.payload = output
    return root


def find_node(root: Node, spelling: str) -> Optional[Node]:
    """Follow spelling from root; None if the tree has no such path."""
    node = root
    for char in spelling:
        node = node.children.get(char)
        if node is None:
            return None
    return node


class Match(NamedTuple):
    """Result of walking the tree from one position."""
    depth: int                # characters consumed before the walk stopped
    payload_depth: int        # characters in the longest syllable found, 0 if none
    payload: Optional[str]    # that syllable's output
    node: Node                # node where the walk stopped


def walk(root: Node, text: str, start: int = 0) -> Match:
    """
    Walk the tree as far as text allows, remembering the deepest payload.

    The walk does not stop at the first payload: it goes on while the tree
    has an edge for the next character, so a longer syllable wins.

    Args:
        root: Tree root.
        text: Text to match (already lowercased where that matters).
        start: Index in text to start from.

    Returns:
        A Match describing both the deepest node and the best syllable.
    """
    node = root
    depth = 0
    payload_depth = 0
    payload = None
    index = start
    length = len(text)
    while index < length:
        child = node.children.get(text[index])
        if child is None:
            break
        node = child
        depth += 1
        index += 1
        if node.payload is not None:
            payload_depth = depth
            payload = node.payload
    return Match(depth, payload_depth, payload, node)


# ============================================================================
# Tree Cache
# ============================================================================

class TreeCache:
    """
    Thread-safe LRU cache of built trees.

    Lookups and builds happen under one lock, so concurrent callers with the
    same key get the same tree object and never see a half-built one.
    """

    def __init__(self, maxsize: Optional[int] = None, name: str = 'trees'):
        """
        Create a new cache.

        Args:
            maxsize: Trees kept before the least recently used one is evicted.
                Defaults to settings.TREE_CACHE_MAXSIZE.
            name: Label used in log messages.
        """
        self.name = name
        self.maxsize = max(1, TREE_CACHE_MAXSIZE if maxsize is None else maxsize)
        self.hits = 0
        self.misses = 0
        self._trees: 'OrderedDict[Hashable, Node]' = OrderedDict()
        self._cache_lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._trees)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._trees

    def get(self, key: Hashable, builder: Callable[[], Node]) -> Node:
        """
        Get the tree for key, building it with builder on a miss.

        Args:
            key: Hashable cache key.
            builder: Zero-argument function returning the tree.

        Returns:
            The cached tree.
        """
        with self._cache_lock:
            tree = self._trees.get(key)
            if tree is not None:
                self._trees.move_to_end(key)
                self.hits += 1
                return tree

            self.misses += 1
            tree = builder()
            self._trees[key] = tree
            logger.debug(f"{self.name}: built tree for {key!r} ({tree.count()} nodes)")

            while len(self._trees) > self.maxsize:
                evicted, _ = self._trees.popitem(last=False)
                logger.debug(f"{self.name}: evicted tree for {evicted!r}")
            return tree

    def clear(self):
        """Drop every cached tree."""
        with self._cache_lock:
            self._trees.clear()
            self.hits = 0
            self.misses = 0

    def stats(self) -> Dict[str, int]:
        return {'size': len(self._trees), 'hits': self.hits, 'misses': self.misses}


_default_cache: Optional[TreeCache] = None
_default_lock = threading.Lock()


def get_default_cache() -> TreeCache:
    """Get the cache shared by the module-level conversion functions."""
    global _default_cache
    if _default_cache is not None:
        return _default_cache
    with _default_lock:
        if _default_cache is None:
            _default_cache = TreeCache(name='default')
        return _default_cache


# ============================================================================
# Trees per Configuration
# ============================================================================

def tree_key(direction: Direction, config: Configuration) -> Tuple:
    """Cache key holding only the options that change the tree's contents."""
    if direction is Direction.KANA:
        return (direction.value, config.use_obsolete_kana, config.custom_kana_mapping)
    return (direction.value, config.romanization.lower(), config.custom_romaji_mapping)


def _builder(direction: Direction, config: Configuration) -> Callable[[], Node]:
    def build() -> Node:
        if direction is Direction.KANA:
            table = syllables.get_romaji_table(config.use_obsolete_kana)
            overrides = config.custom_kana_mapping
        else:
            table = syllables.get_kana_table(config.romanization)
            # An unknown romanization stays empty: nothing to override
            overrides = config.custom_romaji_mapping if len(table) else ()
        if overrides:
            table = table.merged(overrides)
        return build_tree(table)
    return build


def get_tree(direction: Direction, config: Configuration,
             cache: Optional[TreeCache] = None) -> Node:
    """
    Get the (cached) match tree for a direction and configuration.

    Args:
        direction: Direction.KANA for romaji input, Direction.ROMAJI for kana.
        config: Resolved configuration.
        cache: Cache to use. Defaults to the shared default cache.

    Returns:
        Root of the tree.
    """
    if cache is None:
        cache = get_default_cache()
    return cache.get(tree_key(direction, config), _builder(direction, config))
