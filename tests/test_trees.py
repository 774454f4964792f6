import pytest

from algopuzzles.trees import (
    TreeNode,
    build_tree,
    has_path_sum,
    invert_tree,
    is_balanced,
    is_same_tree,
    is_symmetric,
    max_depth,
    min_depth,
)

SHAPES = [
    [],
    [1],
    [3, 9, 20, None, None, 15, 7],
    [1, 2, 2, 3, 4, 4, 3],
    [1, 2, 2, None, 3, None, 3],
    [1, 2, None, 3, None, 4],
    list(range(15)),
]


def test_build_tree_empty_and_none_root():
    assert build_tree([]) is None
    assert build_tree([None]) is None


def test_build_tree_places_values_in_level_order():
    root = build_tree([3, 9, 20, None, None, 15, 7])
    assert root.val == 3
    assert root.left.val == 9
    assert root.left.left is None and root.left.right is None
    assert root.right.val == 20
    assert root.right.left.val == 15
    assert root.right.right.val == 7


def test_tree_node_defaults():
    node = TreeNode()
    assert node.val == 0
    assert node.left is None and node.right is None


@pytest.mark.parametrize("levels", [1, 2, 3, 4, 5])
def test_perfect_tree_depths_equal_levels(levels):
    root = build_tree(list(range(2**levels - 1)))
    assert max_depth(root) == levels
    assert min_depth(root) == levels
    assert is_balanced(root)


def test_depths_of_empty_tree_agree():
    assert max_depth(None) == min_depth(None) == len([])


def test_left_chain_depth_is_node_count():
    values = [1, 2, None, 3, None, 4]
    root = build_tree(values)
    assert max_depth(root) == sum(v is not None for v in values)
    assert min_depth(root) == max_depth(root)


def test_min_depth_ignores_missing_child():
    root = TreeNode(1, None, TreeNode(2, None, TreeNode(3)))
    assert min_depth(root) == max_depth(root)


@pytest.mark.parametrize("values", SHAPES)
def test_min_depth_never_exceeds_max_depth(values):
    root = build_tree(values)
    assert min_depth(root) <= max_depth(root)


def test_is_balanced_cases():
    assert is_balanced(None)
    assert is_balanced(build_tree([3, 9, 20, None, None, 15, 7]))
    assert not is_balanced(build_tree([1, 2, None, 3]))
    assert not is_balanced(build_tree([1, 2, 2, 3, 3, None, None, 4, 4]))


def test_invert_returns_same_root_and_swaps_children():
    root = build_tree([4, 2, 7, 1, 3, 6, 9])
    left, right = root.left, root.right
    assert invert_tree(root) is root
    assert root.left is right and root.right is left
    assert root.left.left.val == 9
    assert root.right.right.val == 1


def test_invert_none():
    assert invert_tree(None) is None


@pytest.mark.parametrize("values", SHAPES)
def test_invert_twice_restores_tree(values):
    root = build_tree(values)
    invert_tree(invert_tree(root))
    assert is_same_tree(root, build_tree(values))


@pytest.mark.parametrize("values", SHAPES)
def test_symmetric_iff_equal_to_mirror(values):
    mirror = invert_tree(build_tree(values))
    assert is_symmetric(build_tree(values)) == is_same_tree(build_tree(values), mirror)


def test_is_symmetric_cases():
    assert is_symmetric(None)
    assert is_symmetric(build_tree([1, 2, 2, 3, 4, 4, 3]))
    assert not is_symmetric(build_tree([1, 2, 2, None, 3, None, 3]))


def test_is_same_tree_cases():
    assert is_same_tree(None, None)
    assert is_same_tree(build_tree([1, 2, 3]), build_tree([1, 2, 3]))
    assert not is_same_tree(build_tree([1, 2]), build_tree([1, None, 2]))
    assert not is_same_tree(build_tree([1, 2, 1]), build_tree([1, 1, 2]))
    assert not is_same_tree(build_tree([1]), None)


def test_has_path_sum_example():
    root = build_tree([5, 4, 8, 11, None, 13, 4, 7, 2, None, None, None, 1])
    assert has_path_sum(root, 22)
    assert not has_path_sum(root, 5)


def test_has_path_sum_requires_a_leaf():
    root = TreeNode(1, TreeNode(2))
    assert not has_path_sum(root, 1)
    assert has_path_sum(root, 1 + 2)


def test_has_path_sum_empty_tree():
    assert not has_path_sum(None, 0)


def test_has_path_sum_negative_values():
    root = build_tree([-2, None, -3])
    assert has_path_sum(root, -2 + -3)