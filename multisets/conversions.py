import warnings
from array import array
from collections.abc import Iterable, Mapping
from functools import singledispatch
from math import isnan
from typing import Any, TypeVar

import numpy as np

from multisets.empty import empty_multiset
from multisets.hash_multiset import HashMultiset
from multisets.multiset import Multiset

T = TypeVar("T")


def multiset_of(*elements: T) -> Multiset[T]:
    """
    Returns a new read-only multiset with the given elements.
    Without elements, the shared empty multiset is returned.
    """
    if not elements:
        return empty_multiset()
    return HashMultiset(elements)


def mutable_multiset_of(*elements: T) -> HashMultiset[T]:
    """Returns a new mutable multiset with the given elements."""
    return HashMultiset(elements)


def to_multiset(source: Iterable[T] | Mapping[T, int]) -> Multiset[T]:
    """
    Returns a read-only multiset of all elements in source, see
    to_mutable_multiset() for the accepted sources.
    An empty result is returned as the shared empty multiset.
    """
    result = to_mutable_multiset(source)
    if result.is_empty():
        return empty_multiset()
    return result


@singledispatch
def to_mutable_multiset(source: Iterable[T]) -> HashMultiset[T]:
    """
    Returns a new mutable multiset of all elements in source.

    Every occurrence of an element adds one to its frequency. Multisets keep
    their frequencies and mappings are read as element to frequency. Text
    contributes its characters, bytes their integer values and primitive
    arrays (array.array, numpy.ndarray) their items as plain Python scalars.

    Raises:
        InvalidCountError: If source is a mapping with a negative value.
    """
    return HashMultiset(source)


@to_mutable_multiset.register
def _(source: Multiset) -> HashMultiset[Any]:
    result = HashMultiset[Any]()
    for element, count in source.value_iterator():
        result.put(element, count)
    return result


@to_mutable_multiset.register
def _(source: Mapping) -> HashMultiset[Any]:
    # put() rejects negative counts and leaves zero counts out
    result = HashMultiset[Any]()
    for element, count in source.items():
        result.put(element, count)
    return result


@to_mutable_multiset.register
def _(source: array) -> HashMultiset[Any]:
    items = source.tolist()
    if source.typecode in "fd" and any(isnan(item) for item in items):
        _warn_nan()
    return HashMultiset(items)


@to_mutable_multiset.register
def _(source: np.ndarray) -> HashMultiset[Any]:
    if source.dtype.kind in "fc" and np.isnan(source).any():
        _warn_nan()
    return HashMultiset(source.ravel().tolist())


def _warn_nan() -> None:
    warnings.warn(
        "NaN never compares equal to itself, every NaN is counted as a separate element",
        RuntimeWarning,
        stacklevel=4,
    )
