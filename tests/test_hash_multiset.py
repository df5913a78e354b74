import pytest

from multisets.errors import InvalidCountError
from multisets.hash_multiset import HashMultiset


def test_multiset_initialization():
    multiset = HashMultiset([1, 2, 2, 3])
    assert multiset.to_dict() == {1: 1, 2: 2, 3: 1}
    assert len(multiset) == 3
    assert multiset.size == 3
    assert multiset.total_count == 4


def test_multiset_initialization_keeps_frequencies():
    source = HashMultiset("aab")
    multiset = HashMultiset(source)
    assert multiset.to_dict() == {"a": 2, "b": 1}
    assert multiset.counter is not source.counter


def test_multiset_add():
    multiset = HashMultiset([1, 2])
    multiset.add(2)
    multiset.add(3, 2)
    assert multiset.to_dict() == {1: 1, 2: 2, 3: 2}
    assert multiset.total_count == 5


def test_multiset_add_negative_removes():
    multiset = HashMultiset([1, 1, 1])
    multiset.add(1, -5)
    assert multiset.count(1) == 0
    assert 1 not in multiset
    assert list(multiset) == []
    assert multiset.total_count == 0


def test_multiset_add_negative_partially():
    multiset = HashMultiset([1, 1, 1])
    multiset.add(1, -2)
    assert multiset.count(1) == 1
    assert multiset.total_count == 1


def test_multiset_add_negative_to_absent_element():
    multiset = HashMultiset([1])
    multiset.add(2, -1)
    multiset.add(3, 0)
    assert multiset.to_dict() == {1: 1}


def test_multiset_remove():
    multiset = HashMultiset([1, 2, 2, 3])
    assert multiset.remove(2)
    assert multiset.remove(3)
    assert multiset.to_dict() == {1: 1, 2: 1}
    assert multiset.total_count == 2


def test_multiset_remove_item_not_present():
    multiset = HashMultiset([1, 2])
    # Removing an item that isn't there shouldn't throw an error
    assert not multiset.remove(3)
    multiset.discard(3)
    assert multiset.to_dict() == {1: 1, 2: 1}


def test_multiset_count():
    multiset = HashMultiset([1, 2, 2, 3])
    assert multiset.count(2) == 2
    assert multiset.count(3) == 1
    assert multiset.count(4) == 0
    assert multiset.get(2) == 2
    assert multiset[2] == 2
    assert multiset["missing"] == 0


def test_multiset_put():
    multiset = HashMultiset[str]()
    multiset.put("x", 3)
    assert multiset.count("x") == 3
    assert multiset.total_count == 3


def test_multiset_put_existing_is_noop():
    multiset = HashMultiset(["x", "x"])
    multiset.put("x", 10)
    assert multiset.count("x") == 2
    assert multiset.total_count == 2


@pytest.mark.parametrize("present", [True, False])
def test_multiset_put_negative(present: bool):
    multiset = HashMultiset(["x"] if present else [])
    with pytest.raises(InvalidCountError):
        multiset.put("x", -1)
    assert multiset.count("x") == (1 if present else 0)


def test_multiset_put_zero_is_elided():
    multiset = HashMultiset[str]()
    multiset.put("x", 0)
    assert "x" not in multiset
    assert len(multiset) == 0
    assert list(multiset.value_iterator()) == []


def test_multiset_set_count():
    multiset = HashMultiset(["x", "y"])
    multiset.set_count("x", 5)
    multiset.set("y", 2)
    multiset["z"] = 1
    assert multiset.to_dict() == {"x": 5, "y": 2, "z": 1}
    assert multiset.total_count == 8


def test_multiset_set_count_zero_removes():
    multiset = HashMultiset(["x", "x", "y"])
    multiset.set_count("x", 0)
    assert "x" not in multiset
    assert multiset.to_dict() == {"y": 1}
    assert multiset.total_count == 1


def test_multiset_set_count_negative():
    multiset = HashMultiset(["x"])
    with pytest.raises(InvalidCountError) as excinfo:
        multiset.set_count("x", -1)
    assert excinfo.value.element == "x"
    assert excinfo.value.count == -1
    assert isinstance(excinfo.value, ValueError)
    assert multiset.count("x") == 1


def test_multiset_count_must_be_integer():
    multiset = HashMultiset[str]()
    with pytest.raises(TypeError):
        multiset.add("x", 1.5)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        multiset.set_count("x", "2")  # type: ignore[arg-type]


def test_multiset_clear_element():
    multiset = HashMultiset(["x"] * 4 + ["y"])
    assert multiset.clear_element("x") == 4
    assert multiset.count("x") == 0
    assert multiset.total_count == 1
    assert multiset.clear_element("x") == 0
    assert multiset.clear_element("absent") == 0


def test_multiset_delitem():
    multiset = HashMultiset(["x", "x", "y"])
    del multiset["x"]
    assert multiset.to_dict() == {"y": 1}


def test_multiset_clear():
    multiset = HashMultiset([1, 2, 2])
    multiset.clear()
    assert len(multiset) == 0
    assert multiset.total_count == 0
    assert multiset.is_empty()


def test_multiset_update():
    multiset = HashMultiset([1])
    multiset.update([1, 2, 2])
    multiset.update(HashMultiset([3, 3, 3]))
    assert multiset.to_dict() == {1: 2, 2: 2, 3: 3}
    assert multiset.total_count == 7


def test_multiset_remove_all():
    multiset = HashMultiset([1, 1, 2, 3])
    assert multiset.remove_all([1, 4])
    assert multiset.to_dict() == {2: 1, 3: 1}
    assert not multiset.remove_all([4])


def test_multiset_retain_all():
    multiset = HashMultiset([1, 1, 2, 3])
    assert multiset.retain_all(iter([1, 3]))
    assert multiset.to_dict() == {1: 2, 3: 1}
    assert not multiset.retain_all([1, 3])


def test_multiset_inplace_operators():
    multiset = HashMultiset([1, 2])
    alias = multiset
    multiset += HashMultiset([2, 3])
    assert multiset is alias
    assert multiset.to_dict() == {1: 1, 2: 2, 3: 1}
    multiset -= HashMultiset([2, 2, 2, 3])
    assert multiset is alias
    assert multiset.to_dict() == {1: 1}


def test_multiset_subtract_itself():
    multiset = HashMultiset([1, 2, 2])
    multiset -= multiset
    assert multiset.is_empty()
    assert multiset.total_count == 0


def test_multiset_iteration_is_distinct():
    multiset = HashMultiset(["a", "a", "b", "c", "c", "c"])
    assert sorted(multiset) == ["a", "b", "c"]
    assert sorted(multiset.value_iterator()) == [("a", 2), ("b", 1), ("c", 3)]
    assert sorted(multiset.elements()) == ["a", "a", "b", "c", "c", "c"]


def test_multiset_copy():
    multiset = HashMultiset([1, 1])
    copy = multiset.copy()
    copy.add(1)
    assert multiset.count(1) == 2
    assert copy.count(1) == 3


def test_multiset_repr():
    assert repr(HashMultiset([1, 1])) == "HashMultiset({1: 2})"
