from abc import ABC, abstractmethod
from collections.abc import Collection, Iterable, Iterator
from itertools import repeat
from typing import TYPE_CHECKING, Generic, TypeVar, cast

if TYPE_CHECKING:
    from multisets.hash_multiset import HashMultiset

E = TypeVar("E")


class Multiset(Collection[E], Generic[E], ABC):
    """
    In mathematics, a multiset (or bag, or mset) is a modification of the concept of a
    set that, unlike a set, allows for multiple instances for each of its elements.
    The number of instances given for each element is called the multiplicity (or
    frequency) of that element in the multiset.

    This class only offers read access, see MutableMultiset for the mutators.

    A multiset iterates over the distinct elements it contains, each of them
    exactly once and in no particular order. A multiset [2*x, 16*y, z] iterates
    over [x, y, z]. Use value_iterator() to get the frequencies along with the
    elements, or elements() to get every instance.

    len() and size give the number of distinct elements, total_count the sum of
    all frequencies.
    """

    __slots__ = ()

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError()

    @abstractmethod
    def __iter__(self) -> Iterator[E]:
        raise NotImplementedError()

    @property
    @abstractmethod
    def total_count(self) -> int:
        """
        The total amount of elements in the multiset, taking frequencies into account.
        E.g. a multiset [1*A, 2*B, 3*C] has a total_count of 6 and a size of 3.
        """
        raise NotImplementedError()

    @abstractmethod
    def count(self, element: E) -> int:
        """
        Get the amount of times the given element is contained in the multiset.

        Args:
            element (E): The element to get the frequency of.

        Returns:
            int: The frequency of the element, 0 when it is not present.
            Never negative.
        """
        raise NotImplementedError()

    @abstractmethod
    def value_iterator(self) -> Iterator[tuple[E, int]]:
        """
        Iterate over (element, frequency) pairs, one for each distinct element.
        All frequencies are strictly positive.
        """
        raise NotImplementedError()

    @property
    def size(self) -> int:
        """The number of distinct elements"""
        return len(self)

    def get(self, element: E) -> int:
        """See count()"""
        return self.count(element)

    def __getitem__(self, element: E) -> int:
        return self.count(element)

    def __contains__(self, element: object) -> bool:
        return self.count(cast(E, element)) > 0

    def contains_all(self, elements: Iterable[E]) -> bool:
        return all(element in self for element in elements)

    def is_empty(self) -> bool:
        return len(self) == 0

    def to_mutable_multiset(self) -> "HashMultiset[E]":
        """
        Returns a new mutable copy of this multiset.
        The copy never shares state with this multiset, even if this multiset
        is mutable itself.
        """
        from multisets.hash_multiset import HashMultiset

        return HashMultiset(self)

    def to_dict(self) -> dict[E, int]:
        return dict(self.value_iterator())

    def elements(self) -> Iterator[E]:
        """Iterate over every instance, repeating each element by its frequency"""
        for element, frequency in self.value_iterator():
            yield from repeat(element, frequency)

    def plus(self, other: "Multiset[E]") -> "Multiset[E]":
        """
        Return a new multiset that contains the elements of both multisets,
        summing their frequencies.
        """
        result = self.to_mutable_multiset()
        for element, amount in other.value_iterator():
            result.add(element, amount)
        return result

    def minus(self, other: "Multiset[E]") -> "Multiset[E]":
        """
        Return a new multiset with the frequencies of other subtracted from this one.
        Elements that end up with a frequency of 0 or less are not part of the result.
        """
        result = self.to_mutable_multiset()
        for element, amount in other.value_iterator():
            result.add(element, -amount)
        return result

    def union(self, other: "Multiset[E]") -> "Multiset[E]":
        """See plus()"""
        return self.plus(other)

    def difference(self, other: "Multiset[E]") -> "Multiset[E]":
        """See minus()"""
        return self.minus(other)

    def intersection(self, other: "Multiset[E]") -> "Multiset[E]":
        """Return a new multiset holding the minimum frequency of each element"""
        from multisets.hash_multiset import HashMultiset

        result = HashMultiset[E]()
        for element, amount in self.value_iterator():
            result.add(element, min(amount, other.count(element)))
        return result

    def is_subset(self, other: "Multiset[E]") -> bool:
        """Check if this multiset is a subset of another multiset"""
        for element, amount in self.value_iterator():
            if other.count(element) < amount:
                return False
        return True

    def __add__(self, other: object) -> "Multiset[E]":
        if not isinstance(other, Multiset):
            return NotImplemented
        return self.plus(cast(Multiset[E], other))

    def __sub__(self, other: object) -> "Multiset[E]":
        if not isinstance(other, Multiset):
            return NotImplemented
        return self.minus(cast(Multiset[E], other))

    def __and__(self, other: object) -> "Multiset[E]":
        if not isinstance(other, Multiset):
            return NotImplemented
        return self.intersection(cast(Multiset[E], other))

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Multiset):
            return NotImplemented
        return self.is_subset(cast(Multiset[E], other))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Multiset):
            return NotImplemented
        other = cast(Multiset[E], other)
        if len(self) != len(other) or self.total_count != other.total_count:
            return False
        return all(other.count(element) == amount for element, amount in self.value_iterator())

    __hash__ = None  # type: ignore[assignment]


class MutableMultiset(Multiset[E], ABC):
    """
    A multiset that supports adding and removing elements.

    No element is ever stored with a frequency of 0 or less, every mutator
    removes the element instead.
    """

    @abstractmethod
    def put(self, element: E, initial_count: int) -> None:
        """
        Adds the given element to the multiset with an initial count.
        Does nothing when the element is already present.

        Args:
            element (E): The element to add.
            initial_count (int): The initial frequency of the element. Must be
                non-negative. A count of 0 leaves the element absent.

        Raises:
            InvalidCountError: If initial_count is negative, also when the
                element is already present.
        """
        raise NotImplementedError()

    @abstractmethod
    def add(self, element: E, amount: int = 1) -> None:
        """
        Adds amount instances of the element to the multiset.

        A negative amount removes instances instead. When the frequency drops
        to 0 or below, the element is removed, removing more instances than
        present is not an error.
        """
        raise NotImplementedError()

    @abstractmethod
    def set_count(self, element: E, count: int) -> None:
        """
        Set the frequency of the given element. A count of 0 removes the element.

        Raises:
            InvalidCountError: If count is negative.
        """
        raise NotImplementedError()

    @abstractmethod
    def clear_element(self, element: E) -> int:
        """
        Removes all instances of the given element.

        Returns:
            int: The frequency the element had before removal, 0 if it was absent.
        """
        raise NotImplementedError()

    @abstractmethod
    def clear(self) -> None:
        raise NotImplementedError()

    def set(self, element: E, count: int) -> None:
        """See set_count()"""
        self.set_count(element, count)

    def __setitem__(self, element: E, count: int) -> None:
        self.set_count(element, count)

    def __delitem__(self, element: E) -> None:
        self.clear_element(element)

    def remove(self, element: E) -> bool:
        """
        Removes a single instance of the element.
        Returns whether the multiset changed.
        """
        if element not in self:
            return False
        self.add(element, -1)
        return True

    def discard(self, element: E) -> None:
        self.remove(element)

    def update(self, elements: Iterable[E]) -> None:
        """
        Adds all given elements. Frequencies are kept when elements is a multiset
        itself, any other iterable adds one instance per occurrence.
        """
        if isinstance(elements, Multiset):
            for element, amount in list(cast(Multiset[E], elements).value_iterator()):
                self.add(element, amount)
        else:
            for element in elements:
                self.add(element)

    def remove_all(self, elements: Iterable[E]) -> bool:
        """Removes every instance of each given element"""
        changed = False
        for element in elements:
            if self.clear_element(element) > 0:
                changed = True
        return changed

    def retain_all(self, elements: Iterable[E]) -> bool:
        """Removes every element that is not contained in elements"""
        keep = elements if isinstance(elements, Collection) else list(elements)
        dropped = [element for element in self if element not in keep]
        for element in dropped:
            self.clear_element(element)
        return len(dropped) > 0

    def __iadd__(self, other: object):
        if not isinstance(other, Multiset):
            return NotImplemented
        self.update(cast(Multiset[E], other))
        return self

    def __isub__(self, other: object):
        if not isinstance(other, Multiset):
            return NotImplemented
        # snapshot first, other may be self
        for element, amount in list(cast(Multiset[E], other).value_iterator()):
            self.add(element, -amount)
        return self
