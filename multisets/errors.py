class InvalidCountError(ValueError):
    """
    An InvalidCountError is raised when a frequency that must be
    non-negative is given a negative value, e.g. when putting an element
    with a negative initial count or converting a mapping with negative
    values.
    """

    def __init__(self, element: object, count: int):
        super().__init__(f"count of {element!r} must be non-negative, got {count}")
        self.element = element
        self.count = count


class NoSuchElementError(LookupError):
    """
    A NoSuchElementError is raised when next() or previous() is called on an
    iterator that has no element left to give.

    The iterator protocol (__next__) still signals exhaustion with a plain
    StopIteration, so for-loops over an exhausted iterator simply end.
    """

    pass
