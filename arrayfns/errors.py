from __future__ import annotations


class ArrayFnsError(Exception):
    pass


class NonFiniteRangeError(ArrayFnsError, ValueError):
    def __init__(self, message: str = "Requested array is of infinite size."):
        super().__init__(message)


class InvalidCountError(ArrayFnsError, ValueError):
    def __init__(self, count: object):
        super().__init__(f"Count must be a non-negative integer, got {count!r}")
        self.count = count


class EmptyCollectionError(ArrayFnsError, ValueError):
    pass


class ElementNotFoundError(ArrayFnsError, LookupError):
    def __init__(self, message: str = "Element not found matching criteria"):
        super().__init__(message)
