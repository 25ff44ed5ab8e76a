import pytest

from dsakit.trees import BinarySearchTree, Trie

KEYS = [8, 3, 1, 6, 7, 10, 14, 4]


def test_inorder_is_sorted():
    tree = BinarySearchTree(KEYS)
    assert tree.inorder() == sorted(KEYS)
    assert len(tree) == len(KEYS)


def test_delete_node_with_two_children():
    tree = BinarySearchTree(KEYS)
    assert tree.delete(3) is True
    assert tree.inorder() == sorted(k for k in KEYS if k != 3)


def test_delete_node_with_one_child():
    tree = BinarySearchTree(KEYS)
    assert tree.delete(10) is True
    assert tree.inorder() == sorted(k for k in KEYS if k != 10)
    assert 10 not in tree


def test_delete_root_and_leaf():
    tree = BinarySearchTree(KEYS)
    tree.delete(8)
    tree.delete(4)
    assert tree.inorder() == sorted(k for k in KEYS if k not in (8, 4))
    assert len(tree) == len(KEYS) - 2


def test_delete_missing_key():
    tree = BinarySearchTree(KEYS)
    assert tree.delete(99) is False
    assert tree.inorder() == sorted(KEYS)


def test_duplicates_are_kept():
    tree = BinarySearchTree([5, 5, 2, 5])
    assert tree.inorder() == [2, 5, 5, 5]
    tree.delete(5)
    assert tree.inorder() == [2, 5, 5]


def test_min_and_contains():
    tree = BinarySearchTree(KEYS)
    assert tree.min() == min(KEYS)
    assert all(key in tree for key in KEYS)
    assert 2 not in tree


def test_min_of_empty_tree_raises():
    with pytest.raises(ValueError):
        BinarySearchTree().min()


def test_delete_everything_empties_tree():
    tree = BinarySearchTree(KEYS)
    for key in KEYS:
        assert tree.delete(key) is True
    assert tree.inorder() == []
    assert len(tree) == 0


def test_trie_search_and_prefix():
    trie = Trie()
    trie.insert("apple")
    assert trie.search("apple") is True
    assert trie.search("app") is False
    assert trie.starts_with("app") is True
    trie.insert("app")
    assert trie.search("app") is True


def test_trie_missing_words():
    trie = Trie()
    trie.insert("banana")
    assert trie.search("band") is False
    assert trie.starts_with("bad") is False
    assert trie.starts_with("banana") is True


def test_trie_empty_string():
    trie = Trie()
    assert trie.starts_with("") is True
    assert trie.search("") is False
    trie.insert("")
    assert trie.search("") is True