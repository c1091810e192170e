import pytest

from dsakit.binary_tree import TreeNode, postorder, preorder
from dsakit.traversal_convert import postorder_to_preorder, preorder_to_postorder


def bst(keys):
    root = None
    for key in keys:
        if root is None:
            root = TreeNode(key)
            continue
        node = root
        while True:
            side = "left" if key < node.data else "right"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, TreeNode(key))
                break
            node = child
    return root


KEY_SETS = [
    [50, 30, 70, 20, 40, 60, 80],
    [10, 5, 1, 7, 40, 50],
    [8, 3, 10, 1, 6, 14, 4, 7, 13],
    [5, 4, 3, 2, 1],
    [1, 2, 3, 4, 5],
]


@pytest.mark.parametrize("keys", KEY_SETS)
def test_preorder_to_postorder_matches_tree(keys):
    root = bst(keys)
    assert preorder_to_postorder(preorder(root)) == postorder(root)


@pytest.mark.parametrize("keys", KEY_SETS)
def test_postorder_to_preorder_matches_tree(keys):
    root = bst(keys)
    assert postorder_to_preorder(postorder(root)) == preorder(root)


@pytest.mark.parametrize("keys", KEY_SETS)
def test_round_trip(keys):
    pre = preorder(bst(keys))
    assert postorder_to_preorder(preorder_to_postorder(pre)) == pre


def test_empty():
    assert preorder_to_postorder([]) == []
    assert postorder_to_preorder([]) == []


def test_single_item():
    assert preorder_to_postorder([42]) == [42]
    assert postorder_to_preorder([42]) == [42]


def test_ascending_preorder_is_a_right_chain():
    pre = list(range(1, 21))
    assert preorder_to_postorder(pre) == list(reversed(pre))


def test_input_is_left_untouched():
    pre = preorder(bst(KEY_SETS[2]))
    copy = list(pre)
    preorder_to_postorder(pre)
    assert pre == copy


def test_accepts_any_iterable():
    pre = preorder(bst(KEY_SETS[0]))
    assert preorder_to_postorder(iter(pre)) == preorder_to_postorder(pre)