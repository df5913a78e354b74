from multisets.conversions import (
    multiset_of,
    mutable_multiset_of,
    to_multiset,
    to_mutable_multiset,
)
from multisets.empty import EMPTY_ITERATOR, EmptyIterator, EmptyMultiset, empty_multiset
from multisets.errors import InvalidCountError, NoSuchElementError
from multisets.hash_multiset import HashMultiset
from multisets.multiset import Multiset, MutableMultiset

__all__ = [
    "EMPTY_ITERATOR",
    "EmptyIterator",
    "EmptyMultiset",
    "HashMultiset",
    "InvalidCountError",
    "Multiset",
    "MutableMultiset",
    "NoSuchElementError",
    "empty_multiset",
    "multiset_of",
    "mutable_multiset_of",
    "to_multiset",
    "to_mutable_multiset",
]
