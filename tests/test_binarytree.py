import pytest

from dsakit.binarytree import (
    TreeNode,
    breadth_first,
    build_from_inorder_preorder,
    children_sum_property,
    count_complete_nodes,
    deserialize,
    diameter,
    height,
    inorder,
    is_balanced,
    iterative_inorder,
    iterative_postorder,
    iterative_preorder,
    left_view,
    level_order,
    lowest_common_ancestor,
    maximum,
    maximum_width,
    nodes_at_distance,
    postorder,
    preorder,
    serialize,
    size,
    spiral_order,
)


def sample_tree():
    root = TreeNode(10)
    root.left = TreeNode(20)
    root.right = TreeNode(30)
    root.left.left = TreeNode(40)
    root.left.right = TreeNode(50)
    root.left.left.left = TreeNode(60)
    root.left.left.left.left = TreeNode(70)
    return root


def small_tree():
    root = TreeNode(10)
    root.left = TreeNode(20)
    root.right = TreeNode(30)
    root.right.left = TreeNode(40)
    root.right.right = TreeNode(50)
    return root


def complete_tree(keys):
    nodes = [TreeNode(k) for k in keys]
    for i, node in enumerate(nodes):
        if 2 * i + 1 < len(nodes):
            node.left = nodes[2 * i + 1]
        if 2 * i + 2 < len(nodes):
            node.right = nodes[2 * i + 2]
    return nodes[0] if nodes else None


def path_tree(n):
    root = TreeNode(0)
    node = root
    for k in range(1, n):
        node.right = TreeNode(k)
        node = node.right
    return root


def test_build_from_traversals_round_trips():
    in_keys = [20, 10, 40, 30, 50]
    pre_keys = [10, 20, 30, 40, 50]
    root = build_from_inorder_preorder(in_keys, pre_keys)
    assert inorder(root) == in_keys
    assert preorder(root) == pre_keys


def test_build_rejects_mismatched_traversals():
    with pytest.raises(ValueError):
        build_from_inorder_preorder([1, 2], [1, 2, 3])
    with pytest.raises(ValueError):
        build_from_inorder_preorder([1, 2, 3], [1, 2, 4])


def test_iterative_traversals_match_recursive():
    for root in (sample_tree(), small_tree(), complete_tree(range(11))):
        assert iterative_inorder(root) == inorder(root)
        assert iterative_preorder(root) == preorder(root)
        assert iterative_postorder(root) == postorder(root)


def test_empty_tree_traversals():
    assert inorder(None) == []
    assert iterative_postorder(None) == []
    assert level_order(None) == []
    assert size(None) == 0
    assert height(None) == 0


def test_level_invariants():
    root = sample_tree()
    levels = level_order(root)
    assert height(root) == len(levels)
    assert breadth_first(root) == [k for level in levels for k in level]
    assert left_view(root) == [level[0] for level in levels]
    assert maximum_width(root) == max(len(level) for level in levels)
    for depth, level in enumerate(levels):
        assert nodes_at_distance(root, depth) == level
    assert nodes_at_distance(root, len(levels)) == []


def test_spiral_order_reverses_odd_levels():
    root = complete_tree(range(15))
    levels = level_order(root)
    spiral = spiral_order(root)
    assert spiral[0::2] == levels[0::2]
    assert spiral[1::2] == [level[::-1] for level in levels[1::2]]


def test_size_and_maximum():
    root = sample_tree()
    keys = inorder(root)
    assert size(root) == len(keys)
    assert maximum(root) == max(keys)


def test_maximum_of_empty_tree_raises():
    with pytest.raises(ValueError):
        maximum(None)


def test_children_sum_property():
    root = TreeNode(20, TreeNode(8), TreeNode(12, TreeNode(3), TreeNode(9)))
    assert children_sum_property(root) is True
    assert children_sum_property(sample_tree()) is False


def test_is_balanced():
    assert is_balanced(sample_tree()) is False
    assert is_balanced(complete_tree(range(12))) is True
    assert is_balanced(None) is True


def test_diameter_of_path_counts_every_node():
    assert diameter(path_tree(9)) == 9
    root = sample_tree()
    assert diameter(root) >= height(root)


def test_lowest_common_ancestor():
    root = small_tree()
    assert lowest_common_ancestor(root, 20, 50).key == 10
    assert lowest_common_ancestor(root, 40, 40).key == 40
    assert lowest_common_ancestor(root, 20, 999) is None


def test_count_complete_nodes_matches_size():
    for n in range(1, 20):
        root = complete_tree(range(n))
        assert count_complete_nodes(root) == size(root)


def test_serialize_round_trip():
    root = sample_tree()
    data = serialize(root)
    rebuilt = deserialize(data)
    assert preorder(rebuilt) == preorder(root)
    assert inorder(rebuilt) == inorder(root)
    assert serialize(rebuilt) == data
    assert data.count(None) == size(root) + 1


def test_deserialize_empty():
    assert deserialize([]) is None
    assert serialize(None) == [None]