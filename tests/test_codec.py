import pytest

from dsakit.codec import deserialize, serialize
from dsakit.tree import TreeNode


def shape(node):
    """Return the tree as nested (val, left, right) tuples."""
    if node is None:
        return None
    return (node.val, shape(node.left), shape(node.right))


def sample():
    return TreeNode(
        1,
        TreeNode(2, None, TreeNode(-4)),
        TreeNode(3, TreeNode(5, TreeNode(60)), None),
    )


SAMPLE_SHAPE = (
    1,
    (2, None, (-4, None, None)),
    (3, (5, (60, None, None), None), None),
)


def test_empty_tree_encoding():
    assert serialize(None) == "#,"
    assert deserialize(serialize(None)) is None


def test_single_node_encoding():
    assert serialize(TreeNode(1)) == "1,#,#,"


def test_round_trip_structure():
    decoded = deserialize(serialize(sample()))
    assert shape(decoded) == SAMPLE_SHAPE


def test_serialize_is_stable():
    text = serialize(sample())
    assert serialize(deserialize(text)) == text


def test_values_preserved_in_order():
    root = sample()
    tokens = [t for t in serialize(root).split(",") if t and t != "#"]
    assert [int(t) for t in tokens] == [1, 2, 3, -4, 5, 60]


def test_missing_trailing_comma_accepted():
    expected = (1, (2, None, None), (3, None, None))
    assert shape(deserialize("1,2,3")) == expected
    assert shape(deserialize("1,2,3,")) == expected


def test_empty_string_is_empty_tree():
    assert deserialize("") is None


def test_bad_value_raises():
    with pytest.raises(ValueError):
        deserialize("1,x,#,")


def test_too_many_entries_raises():
    with pytest.raises(ValueError):
        deserialize("1,#,#,#,")