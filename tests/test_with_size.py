import operator

from rangekit.with_size import WithSize


def test_zero_has_empty_size():
    z = WithSize.zero("a")
    assert z.value == "a"
    assert z.size == 0


def test_merge_adds_sizes():
    a = WithSize(2, 3)
    b = WithSize(5, 4)
    merged = a.merge(b, operator.add)
    assert merged.size == a.size + b.size
    assert merged.value == a.value + b.value


def test_merge_keeps_operand_order():
    a = WithSize("ab", 1)
    b = WithSize("cd", 2)
    assert a.merge(b, lambda x, y: x).value == "ab"
    assert a.merge(b, lambda x, y: y).value == "cd"
    assert a.merge(b, operator.add).value == a.value + b.value


def test_merge_with_zero_preserves_size():
    a = WithSize(10, 6)
    merged = a.merge(WithSize.zero(0), operator.add)
    assert merged == a


def test_equality():
    assert WithSize(1, 2) == WithSize(1, 2)
    assert (WithSize(1, 2) == WithSize(1, 3)) is False