# tests/test_trie.py
# unit tests for the sorted-children Trie

import io
import random

import pytest

from prefix_autocompleter.core.trie import Trie, TrieNode


def _nodes(node):
    stack = [node]
    while stack:
        cur = stack.pop()
        yield cur
        stack.extend(cur.children)


def test_new_trie_is_empty():
    t = Trie()
    assert t.root.key is None
    assert t.root.value is None
    assert t.root.count == 0
    assert t.root.children == []
    assert len(t) == 0
    assert t.search("") == []
    assert t.display() == ""


def test_reference_scenario(sample_trie):
    t = sample_trie
    assert t.exists("test")
    assert t.exists("to")
    assert t.exists("tea")
    assert not t.exists("airplane")

    assert t.search("te") == ["tea", "test"]
    assert t.search("a") == ["a", "an", "apples"]

    t.insert("test")
    t.insert("test")
    assert t.search("te") == ["test", "tea"]


def test_prefix_is_not_an_entry(sample_trie):
    # 'app' and 'te' are only paths towards stored entries
    assert not sample_trie.exists("app")
    assert not sample_trie.exists("te")
    assert not sample_trie.exists("t")
    assert sample_trie.count("app") == 0


def test_repeat_insert_bumps_count_without_new_nodes():
    t = Trie()
    t.insert("tea")
    before = sum(1 for _ in _nodes(t.root))
    t.insert("tea")
    after = sum(1 for _ in _nodes(t.root))
    assert before == after == 4
    assert t.count("tea") == 2
    assert len(t) == 1


def test_children_sorted_and_unique():
    t = Trie()
    words = ["zeta", "alpha", "mu", "beta", "m", "alphabet", "Zulu", "ärger", "0x"]
    for w in words:
        t.insert(w)
    for node in _nodes(t.root):
        keys = [c.key for c in node.children]
        assert keys == sorted(set(keys))


def test_terminal_nodes_hold_their_path():
    t = Trie()
    for w in ["car", "cart", "care", "cat"]:
        t.insert(w)

    def walk(node, path):
        if node.count > 0:
            assert node.value == path
        for c in node.children:
            walk(c, path + c.key)

    walk(t.root, "")


def test_search_empty_prefix_returns_everything_ranked(sample_trie):
    assert sample_trie.search("") == ["tea", "a", "an", "apples", "test", "to"]


def test_search_unknown_prefix_is_empty(sample_trie):
    assert sample_trie.search("x") == []
    assert sample_trie.search("tex") == []


def test_search_includes_exact_prefix_entry(sample_trie):
    assert sample_trie.search("tea") == ["tea"]
    assert sample_trie.search("an") == ["an"]


def test_search_ties_use_codepoint_order():
    t = Trie()
    for w in ["b", "B", "a", "A", "é"]:
        t.insert(w)
    assert t.search("") == ["A", "B", "a", "b", "é"]


def test_search_with_counts(sample_trie):
    assert sample_trie.search_with_counts("t") == [("tea", 2), ("test", 1), ("to", 1)]


@pytest.mark.parametrize("limit, expected", [
    (0, []),
    (1, ["tea"]),
    (2, ["tea", "a"]),
    (None, ["tea", "a", "an", "apples", "test", "to"]),
    (100, ["tea", "a", "an", "apples", "test", "to"]),
])
def test_search_limit(sample_trie, limit, expected):
    assert sample_trie.search("", limit=limit) == expected


def test_search_negative_limit():
    with pytest.raises(ValueError):
        Trie().search("", limit=-1)


def test_ranking_law_against_brute_force():
    rng = random.Random(3)
    inserted = [
        "".join(rng.choice("abc") for _ in range(rng.randint(1, 4)))
        for _ in range(300)
    ]
    t = Trie()
    for w in inserted:
        t.insert(w)

    counts = {}
    for w in inserted:
        counts[w] = counts.get(w, 0) + 1

    for prefix in ["", "a", "ab", "cab", "ccc", "abca"]:
        expected = sorted(
            (w for w in counts if w.startswith(prefix)),
            key=lambda w: (-counts[w], w),
        )
        assert t.search(prefix) == expected
    assert len(t) == len(counts)


def test_empty_string_entry():
    t = Trie()
    assert not t.exists("")
    t.insert("")
    assert t.exists("")
    assert t.root.value == ""
    assert t.root.count == 1
    t.insert("a")
    t.insert("a")
    assert t.search("") == ["a", ""]


def test_unicode_codepoints():
    t = Trie()
    t.insert("日本")
    t.insert("日本語")
    t.insert("🙂ok")
    assert t.exists("日本語")
    assert not t.exists("日")
    assert t.search("日") == ["日本", "日本語"]
    assert t.search("🙂") == ["🙂ok"]


def test_dunder_helpers(sample_trie):
    assert "tea" in sample_trie
    assert "te" not in sample_trie
    assert 42 not in sample_trie
    assert len(sample_trie) == 6
    assert list(sample_trie) == sample_trie.search("")


def test_display_levels(sample_trie):
    assert sample_trie.levels() == [
        ["a", "t"],
        ["n", "p", "e", "o"],
        ["p", "a", "s"],
        ["l", "t"],
        ["e"],
        ["s"],
    ]
    assert sample_trie.display() == "a t\nn p e o\np a s\nl t\ne\ns"
    assert str(sample_trie) == sample_trie.display()


def test_display_is_deterministic_for_same_history():
    words = ["b", "ab", "abc", "b"]
    a, b = Trie(), Trie()
    for w in words:
        a.insert(w)
        b.insert(w)
    assert a.display() == b.display() == "a b\nb\nc"


def test_display_writes_to_stream(sample_trie):
    buf = io.StringIO()
    text = sample_trie.display(buf)
    assert buf.getvalue() == text


def test_display_propagates_stream_errors(sample_trie):
    class Broken(io.StringIO):
        def write(self, s):
            raise OSError("disk full")

    with pytest.raises(OSError, match="disk full"):
        sample_trie.display(Broken())


def test_node_find():
    n = TrieNode()
    for ch in "dbca":
        n.find_or_add(ch)
    assert [c.key for c in n.children] == ["a", "b", "c", "d"]
    assert n.find("c").key == "c"
    assert n.find("e") is None
    assert n.find_or_add("b") is n.find("b")
    assert len(n.children) == 4
