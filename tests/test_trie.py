import sys

import pytest

from wordpredictor import InvalidArgument, TrieNode, WordPrediction, WordPredictor, WordTrie


def build(*words: str) -> WordTrie:
    trie = WordTrie()
    trie.insert_all(words)
    return trie


def test_shared_prefix_words_and_next_chars():
    trie = build("car", "cart", "carbon", "dog")
    prediction = trie.predict("car")
    assert set(prediction.words()) == {"car", "cart", "carbon"}
    assert prediction.next_chars() == {"t", "b"}


def test_mixed_case_input_is_folded():
    trie = build("Apple", "APPLY", "apricot")
    prediction = trie.predict("ap")
    assert set(prediction.words()) == {"apple", "apply", "apricot"}
    assert prediction.next_chars() == {"p", "r"}


def test_uppercase_prefix_matches_lowercase_words():
    trie = build("Apple", "APPLY", "apricot")
    assert set(trie.predict("APP").words()) == {"apple", "apply"}


def test_absent_prefix_is_empty():
    trie = build("hello")
    prediction = trie.predict("world")
    assert prediction.words() == ()
    assert prediction.next_chars() == frozenset()
    assert not prediction


def test_prefix_longer_than_stored_word():
    trie = build("car")
    prediction = trie.predict("carbon")
    assert prediction.words() == ()
    assert prediction.next_chars() == frozenset()


def test_nested_words():
    trie = build("a", "ab", "abc")

    p = trie.predict("a")
    assert set(p.words()) == {"a", "ab", "abc"}
    assert p.next_chars() == {"b"}

    p = trie.predict("ab")
    assert set(p.words()) == {"ab", "abc"}
    assert p.next_chars() == {"c"}

    p = trie.predict("abc")
    assert set(p.words()) == {"abc"}
    assert p.next_chars() == frozenset()


def test_empty_trie_empty_prefix():
    trie = WordTrie()
    prediction = trie.predict("")
    assert prediction.words() == ()
    assert prediction.next_chars() == frozenset()
    assert trie.is_empty


def test_repeated_insert_reports_word_once():
    trie = build("test", "test", "test")
    prediction = trie.predict("t")
    assert list(prediction.words()) == ["test"]
    assert prediction.next_chars() == {"e"}


def test_empty_prefix_returns_everything():
    trie = build("car", "cart", "dog")
    prediction = trie.predict("")
    assert sorted(prediction.words()) == ["car", "cart", "dog"]
    assert prediction.next_chars() == {"c", "d"}


def test_empty_word_is_a_no_op():
    trie = WordTrie()
    trie.insert("")
    assert trie.is_empty
    assert not trie.root.is_terminal
    assert "" not in trie.predict("").words()

    trie.insert("go")
    trie.insert("")
    assert list(trie.predict("").words()) == ["go"]


def test_is_empty_tracks_first_insert():
    trie = WordTrie()
    assert trie.is_empty
    trie.insert("x")
    assert not trie.is_empty


def test_terminal_node_can_have_children():
    trie = build("art", "arts")
    node = trie.root.children["a"].children["r"].children["t"]
    assert node.is_terminal
    assert set(node.children) == {"s"}


def test_parent_links_are_consistent():
    trie = build("carbon", "cart", "dog", "Do")
    stack = list(trie.root.children.values())
    while stack:
        node = stack.pop()
        assert node.parent.children[node.character] is node
        assert node.character == node.character.lower()
        stack.extend(node.children.values())
    assert trie.root.parent is None
    assert trie.root.character is None


def test_every_leaf_is_terminal():
    trie = build("carbon", "cart", "car", "dog")
    stack = [trie.root]
    while stack:
        node = stack.pop()
        if not node.children and node is not trie.root:
            assert node.is_terminal
        stack.extend(node.children.values())


def test_spelled_matches_collected_words():
    trie = build("carbon", "cart", "car", "dog", "do")
    terminal: list[TrieNode] = []
    stack = [trie.root]
    while stack:
        node = stack.pop()
        if node.is_terminal:
            terminal.append(node)
        stack.extend(node.children.values())
    assert {n.spelled() for n in terminal} == set(trie.predict("").words())
    assert trie.root.spelled() == ""


def test_is_word_and_is_prefix():
    trie = build("Car", "cart")
    assert trie.is_word("car")
    assert trie.is_word("CART")
    assert not trie.is_word("ca")
    assert not trie.is_word("")
    assert trie.is_prefix("ca")
    assert trie.is_prefix("")
    assert not trie.is_prefix("cb")
    assert "CAR" in trie
    assert "ca" not in trie
    assert 42 not in trie


def test_insert_all_accepts_generators():
    trie = WordTrie()
    trie.insert_all(w for w in ("one", "two"))
    assert set(trie.predict("").words()) == {"one", "two"}


def test_none_word_raises():
    trie = WordTrie()
    with pytest.raises(InvalidArgument):
        trie.insert(None)
    assert trie.is_empty


def test_none_prefix_raises():
    with pytest.raises(InvalidArgument):
        WordTrie().predict(None)


def test_non_string_raises():
    trie = WordTrie()
    with pytest.raises(InvalidArgument):
        trie.insert(b"bytes")
    with pytest.raises(InvalidArgument):
        trie.predict(7)


def test_invalid_argument_is_a_type_error():
    with pytest.raises(TypeError):
        WordTrie().insert(None)


def test_insert_all_none_raises():
    with pytest.raises(InvalidArgument):
        WordTrie().insert_all(None)


def test_insert_all_keeps_words_before_bad_element():
    trie = WordTrie()
    with pytest.raises(InvalidArgument):
        trie.insert_all(["kept", None, "lost"])
    assert trie.is_word("kept")
    assert not trie.is_word("lost")


def test_very_long_word_does_not_recurse():
    word = "z" * (sys.getrecursionlimit() * 2)
    trie = build(word)
    assert list(trie.predict("zzz").words()) == [word]


def test_unicode_lowercasing():
    trie = build("ÉCOLE", "Straße")
    assert list(trie.predict("éc").words()) == ["école"]
    assert list(trie.predict("STRA").words()) == ["straße"]


def test_predictions_are_fresh_values():
    trie = build("car")
    first = trie.predict("c")
    trie.insert("cat")
    assert set(first.words()) == {"car"}
    assert set(trie.predict("c").words()) == {"car", "cat"}


def test_word_trie_is_a_predictor():
    assert isinstance(WordTrie(), WordPredictor)
    assert isinstance(WordTrie().predict("x"), WordPrediction)


def test_predictor_is_abstract():
    with pytest.raises(TypeError):
        WordPredictor()


def test_collect_restores_buffer_between_branches():
    trie = build("ab", "abc", "abd", "abdx", "b", "bca", "bcb")
    assert sorted(trie.predict("").words()) == ["ab", "abc", "abd", "abdx", "b", "bca", "bcb"]
    assert sorted(trie.predict("ab").words()) == ["ab", "abc", "abd", "abdx"]
    assert sorted(trie.predict("bc").words()) == ["bca", "bcb"]
