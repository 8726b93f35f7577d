"""
prefix_autocompleter.core

The core engine:
 - Trie / TrieNode: sorted-children prefix tree with insertion counts
 - AutoCompleter: facade owning a Trie plus config, logging and metrics
"""

from .trie import Trie, TrieNode
from .autocompleter import AutoCompleter

__all__ = ["Trie", "TrieNode", "AutoCompleter"]
