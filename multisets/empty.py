from collections.abc import Iterable, Iterator
from functools import cache
from typing import Any, NoReturn

from multisets.errors import NoSuchElementError
from multisets.multiset import E, Multiset


class EmptyIterator(Iterator[Any]):
    """
    List iterator that doesn't iterate over anything.
    It has no state, so a single instance (EMPTY_ITERATOR) is shared.
    """

    __slots__ = ()

    def __iter__(self) -> "EmptyIterator":
        return self

    def __next__(self) -> NoReturn:
        raise StopIteration

    def has_next(self) -> bool:
        return False

    def has_previous(self) -> bool:
        return False

    def next_index(self) -> int:
        return 0

    def previous_index(self) -> int:
        return -1

    def next(self) -> NoReturn:
        raise NoSuchElementError()

    def previous(self) -> NoReturn:
        raise NoSuchElementError()

    def __repr__(self):
        return "EmptyIterator()"


EMPTY_ITERATOR = EmptyIterator()


class EmptyMultiset(Multiset[E]):
    """
    An immutable multiset without any elements.

    This is a Multiset and never a MutableMultiset, so there is no way to add
    elements to it. All instances are the same object.
    """

    __slots__ = ()

    _instance: "EmptyMultiset[Any] | None" = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __len__(self) -> int:
        return 0

    def __iter__(self) -> Iterator[E]:
        return EMPTY_ITERATOR

    @property
    def total_count(self) -> int:
        return 0

    def count(self, element: E) -> int:
        return 0

    def value_iterator(self) -> Iterator[tuple[E, int]]:
        return EMPTY_ITERATOR

    def __contains__(self, element: object) -> bool:
        return False

    def contains_all(self, elements: Iterable[E]) -> bool:
        return not any(True for _ in elements)

    def is_empty(self) -> bool:
        return True

    def __hash__(self) -> int:
        return hash(frozenset())

    def __repr__(self):
        return "EmptyMultiset()"


@cache
def empty_multiset() -> Multiset[Any]:
    """Returns the shared, read-only empty multiset"""
    return EmptyMultiset()
