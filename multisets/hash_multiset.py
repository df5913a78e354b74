from collections import Counter
from collections.abc import Iterable, Iterator
from operator import index

from multisets.errors import InvalidCountError
from multisets.multiset import E, MutableMultiset


class HashMultiset(MutableMultiset[E]):
    """
    MutableMultiset backed by a hash map of element to frequency.

    count(), put(), add(), set_count() and clear_element() take average O(1),
    total_count is tracked on every mutation and takes O(1) as well.
    """

    def __init__(self, iterable: Iterable[E] | None = None):
        """Initialize the multiset with an optional iterable"""
        self.counter: Counter[E] = Counter()
        self._total_count = 0
        if iterable is not None:
            self.update(iterable)

    def __len__(self) -> int:
        return len(self.counter)

    def __iter__(self) -> Iterator[E]:
        return iter(self.counter)

    @property
    def total_count(self) -> int:
        return self._total_count

    def count(self, element: E) -> int:
        """Return the count of an element in the multiset"""
        return self.counter.get(element, 0)

    def value_iterator(self) -> Iterator[tuple[E, int]]:
        return iter(self.counter.items())

    def put(self, element: E, initial_count: int) -> None:
        initial_count = index(initial_count)
        if initial_count < 0:
            raise InvalidCountError(element, initial_count)
        if element in self.counter or initial_count == 0:
            return
        self.counter[element] = initial_count
        self._total_count += initial_count

    def add(self, element: E, amount: int = 1) -> None:
        """Add an element to the multiset with a specified count (default is 1)"""
        amount = index(amount)
        self._store(element, self.count(element) + amount)

    def set_count(self, element: E, count: int) -> None:
        count = index(count)
        if count < 0:
            raise InvalidCountError(element, count)
        self._store(element, count)

    def clear_element(self, element: E) -> int:
        previous = self.counter.pop(element, 0)
        self._total_count -= previous
        return previous

    def clear(self) -> None:
        self.counter.clear()
        self._total_count = 0

    def copy(self) -> "HashMultiset[E]":
        return HashMultiset(self)

    def _store(self, element: E, count: int) -> None:
        # elements with a non-positive count are removed, never stored
        if count <= 0:
            self.clear_element(element)
            return
        self._total_count += count - self.count(element)
        self.counter[element] = count

    def __repr__(self):
        """String representation of the multiset"""
        return f"HashMultiset({dict(self.counter)})"
