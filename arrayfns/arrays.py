from __future__ import annotations
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, Sequence, Tuple, TypeVar

from .errors import ElementNotFoundError

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)

# Predicates, mappings and key selectors receive (item, index); sort selectors get the item only.


def of_iterable(source: Iterable[T]) -> List[T]:
    return list(source)


def map(source: Sequence[T], mapping: Callable[[T, int], U]) -> List[U]:
    return [mapping(x, i) for i, x in enumerate(source)]


def filter(source: Sequence[T], predicate: Callable[[T, int], bool]) -> List[T]:
    return [x for i, x in enumerate(source) if predicate(x, i)]


def choose(source: Sequence[T], chooser: Callable[[T, int], Optional[U]]) -> List[U]:
    """Map with ``chooser`` and keep only the results that are not ``None``."""
    out: List[U] = []
    for i, x in enumerate(source):
        chosen = chooser(x, i)
        if chosen is not None:
            out.append(chosen)
    return out


def collect(source: Sequence[T], mapping: Callable[[T, int], Iterable[U]]) -> List[U]:
    """Map each item to an iterable and flatten the results into one list."""
    out: List[U] = []
    for i, x in enumerate(source):
        out.extend(mapping(x, i))
    return out


def append(first: Sequence[T], second: Sequence[T]) -> List[T]:
    return [*first, *second]


def concat(sources: Iterable[Sequence[T]]) -> List[T]:
    out: List[T] = []
    for s in sources:
        out.extend(s)
    return out


def _key(k: Hashable) -> Tuple[bool, Hashable]:
    # True/False must not merge with 1/0
    return (isinstance(k, bool), k)


def distinct(source: Sequence[T]) -> List[T]:
    """First occurrence of each value, in source order. Items must be hashable."""
    seen: Dict[Tuple[bool, Hashable], T] = {}
    for x in source:
        seen.setdefault(_key(x), x)
    return list(seen.values())


def distinct_by(source: Sequence[T], selector: Callable[[T, int], Hashable]) -> List[T]:
    seen: Dict[Tuple[bool, Hashable], T] = {}
    for i, x in enumerate(source):
        seen.setdefault(_key(selector(x, i)), x)
    return list(seen.values())


def exists(source: Sequence[T], predicate: Callable[[T, int], bool]) -> bool:
    return any(predicate(x, i) for i, x in enumerate(source))


def every(source: Sequence[T], predicate: Callable[[T, int], bool]) -> bool:
    return all(predicate(x, i) for i, x in enumerate(source))


def get(source: Sequence[T], predicate: Callable[[T, int], bool]) -> T:
    """Return the first item matching ``predicate``.

    Raises:
        ElementNotFoundError: no item matches.
    """
    for i, x in enumerate(source):
        if predicate(x, i):
            return x
    raise ElementNotFoundError()


def find(source: Sequence[T], predicate: Callable[[T, int], bool]) -> Optional[T]:
    for i, x in enumerate(source):
        if predicate(x, i):
            return x
    return None


def group_by(source: Sequence[T], selector: Callable[[T, int], K]) -> List[Tuple[K, List[T]]]:
    """Group items by key, keeping keys in first-seen order and items in source order."""
    groups: Dict[Tuple[bool, Hashable], Tuple[K, List[T]]] = {}
    for i, x in enumerate(source):
        k = selector(x, i)
        groups.setdefault(_key(k), (k, []))[1].append(x)
    return list(groups.values())


def length(source: Sequence[Any]) -> int:
    return len(source)


def count(source: Sequence[Any]) -> int:
    return len(source)


def sort(source: Sequence[T], selector: Optional[Callable[[T], Any]] = None) -> List[T]:
    return sorted(source, key=selector)


def sort_descending(source: Sequence[T], selector: Optional[Callable[[T], Any]] = None) -> List[T]:
    return sorted(source, key=selector, reverse=True)


def sort_by(source: Sequence[T], selector: Callable[[T], Any]) -> List[T]:
    return sorted(source, key=selector)


def sort_by_descending(source: Sequence[T], selector: Callable[[T], Any]) -> List[T]:
    return sorted(source, key=selector, reverse=True)


def reverse(source: Sequence[T]) -> List[T]:
    return list(reversed(source))


def pairwise(source: Sequence[T]) -> List[Tuple[T, T]]:
    return [(source[i - 1], source[i]) for i in range(1, len(source))]
