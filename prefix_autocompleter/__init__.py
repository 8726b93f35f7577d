"""In-memory prefix index with frequency-ranked autocompletion."""

from .core import AutoCompleter, Trie, TrieNode

__all__ = ["AutoCompleter", "Trie", "TrieNode"]

__version__ = "0.1.0"
