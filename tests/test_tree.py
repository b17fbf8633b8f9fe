import pytest

from permissive_search.lookalikes import all_lookalikes, qwerty_misclicks
from permissive_search.tree import SearchTree, Searcher


def exact(ch):
    return []


@pytest.fixture
def animals():
    words = ["cat", "car", "dog", "do", "cow"]
    return words, SearchTree.from_items(enumerate(words))


def test_get_follows_path(animals):
    words, tree = animals
    node = tree.get("c")
    assert node is not None
    assert sorted(node.indices()) == sorted(i for i, w in enumerate(words) if w.startswith("c"))
    assert tree.get("z") is None
    assert tree.get("c").get("x") is None


def test_indices_order_node_first_then_sorted_children():
    tree = SearchTree.from_items([(0, "b"), (1, "a"), (2, "")])
    assert list(tree.indices()) == [2, 1, 0]


def test_push_same_key_overwrites():
    tree = SearchTree()
    tree.push("a", 0)
    tree.push("a", 1)
    assert list(tree.indices()) == [1]


def test_prefix_index_comes_before_longer(animals):
    words, tree = animals
    assert list(tree.get("d").indices()) == [words.index("do"), words.index("dog")]


def test_empty_tree_has_no_indices():
    assert list(SearchTree().indices()) == []


def test_searcher_starts_with_everything(animals):
    words, tree = animals
    searcher = Searcher(tree, exact)
    assert searcher.input == ""
    assert searcher.root is tree
    assert sorted(searcher.candidates()) == list(range(len(words)))


def test_exact_search(animals):
    words, tree = animals
    searcher = Searcher(tree, exact)
    searcher.extend("ca")
    assert searcher.input == "ca"
    assert sorted(words[i] for i in searcher.candidates()) == ["car", "cat"]


def test_unmatched_char_keeps_previous_candidates(animals):
    words, tree = animals
    searcher = Searcher(tree, exact)
    searcher.extend("do")
    before = list(searcher.candidates())
    searcher.push("z")
    assert searcher.input == "doz"
    assert list(searcher.candidates()) == before


def test_pop_restores_state(animals):
    words, tree = animals
    searcher = Searcher(tree, exact)
    searcher.push("c")
    after_c = list(searcher.candidates())
    searcher.push("o")
    assert [words[i] for i in searcher.candidates()] == ["cow"]
    searcher.pop()
    assert searcher.input == "c"
    assert list(searcher.candidates()) == after_c


def test_pop_on_empty_is_noop(animals):
    words, tree = animals
    searcher = Searcher(tree, exact)
    searcher.pop()
    assert searcher.input == ""
    assert sorted(searcher.candidates()) == list(range(len(words)))


def test_misclick_tolerance(animals):
    words, tree = animals
    searcher = Searcher(tree, qwerty_misclicks)
    searcher.extend("xat")
    assert [words[i] for i in searcher.candidates()] == ["cat"]


def test_variant_tolerance():
    words = ["café", "cafe"]
    tree = SearchTree.from_items(enumerate(words))
    searcher = Searcher(tree, all_lookalikes)
    searcher.extend("cafe")
    assert sorted(words[i] for i in searcher.candidates()) == sorted(words)


def test_push_rejects_multiple_chars(animals):
    _, tree = animals
    searcher = Searcher(tree, exact)
    with pytest.raises(ValueError):
        searcher.push("ab")
    assert searcher.input == ""