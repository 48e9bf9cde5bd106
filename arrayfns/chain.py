from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar

from . import aggregates as _agg
from . import arrays as _arr
from .progression import InitSpec, init

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)


@dataclass(frozen=True)
class ChainableArray(Generic[T]):
    """Immutable wrapper that lets the helpers in ``arrays`` be chained.

    Each sequence-returning method builds a new ``ChainableArray``; scalar
    methods (``count``, ``get``, ``sum_by``...) end the chain.

    Example:
        ```python
        primes = (init_chain({"from": 1, "to": 100})
                  .filter(lambda x, _: init_chain({"from": 1, "to": x})
                          .filter(lambda y, _: x % y == 0).count() == 2)
                  .to_array())
        ```
    """
    _items: Tuple[T, ...]

    @staticmethod
    def of(*items: T) -> "ChainableArray[T]":
        return ChainableArray(tuple(items))

    @staticmethod
    def from_iterable(items: Iterable[T]) -> "ChainableArray[T]":
        return ChainableArray(tuple(items))

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def to_array(self) -> List[T]:
        return list(self._items)

    def map(self, mapping: Callable[[T, int], U]) -> "ChainableArray[U]":
        return ChainableArray(tuple(_arr.map(self._items, mapping)))

    def filter(self, predicate: Callable[[T, int], bool]) -> "ChainableArray[T]":
        return ChainableArray(tuple(_arr.filter(self._items, predicate)))

    def choose(self, chooser: Callable[[T, int], Optional[U]]) -> "ChainableArray[U]":
        return ChainableArray(tuple(_arr.choose(self._items, chooser)))

    def collect(self, mapping: Callable[[T, int], Iterable[U]]) -> "ChainableArray[U]":
        return ChainableArray(tuple(_arr.collect(self._items, mapping)))

    def append(self, second: Sequence[T]) -> "ChainableArray[T]":
        return ChainableArray(self._items + tuple(second))

    def distinct(self) -> "ChainableArray[T]":
        return ChainableArray(tuple(_arr.distinct(self._items)))

    def distinct_by(self, selector: Callable[[T, int], Hashable]) -> "ChainableArray[T]":
        return ChainableArray(tuple(_arr.distinct_by(self._items, selector)))

    def exists(self, predicate: Callable[[T, int], bool]) -> bool:
        return _arr.exists(self._items, predicate)

    def every(self, predicate: Callable[[T, int], bool]) -> bool:
        return _arr.every(self._items, predicate)

    def get(self, predicate: Callable[[T, int], bool]) -> T:
        return _arr.get(self._items, predicate)

    def find(self, predicate: Callable[[T, int], bool]) -> Optional[T]:
        return _arr.find(self._items, predicate)

    def group_by(self, selector: Callable[[T, int], K]) -> "ChainableArray[Tuple[K, List[T]]]":
        return ChainableArray(tuple(_arr.group_by(self._items, selector)))

    def length(self) -> int:
        return len(self._items)

    def count(self) -> int:
        return len(self._items)

    def sort(self, selector: Optional[Callable[[T], Any]] = None) -> "ChainableArray[T]":
        return ChainableArray(tuple(_arr.sort(self._items, selector)))

    def sort_descending(self, selector: Optional[Callable[[T], Any]] = None) -> "ChainableArray[T]":
        return ChainableArray(tuple(_arr.sort_descending(self._items, selector)))

    def sort_by(self, selector: Callable[[T], Any]) -> "ChainableArray[T]":
        return ChainableArray(tuple(_arr.sort_by(self._items, selector)))

    def sort_by_descending(self, selector: Callable[[T], Any]) -> "ChainableArray[T]":
        return ChainableArray(tuple(_arr.sort_by_descending(self._items, selector)))

    def reverse(self) -> "ChainableArray[T]":
        return ChainableArray(self._items[::-1])

    def pairwise(self) -> "ChainableArray[Tuple[T, T]]":
        return ChainableArray(tuple(_arr.pairwise(self._items)))

    def sum_by(self, selector: Callable[[T], float]) -> float:
        return _agg.sum_by(self._items, selector)

    def max_by(self, selector: Callable[[T], float]) -> float:
        return _agg.max_by(self._items, selector)

    def min_by(self, selector: Callable[[T], float]) -> float:
        return _agg.min_by(self._items, selector)

    def mean_by(self, selector: Callable[[T], float]) -> float:
        return _agg.mean_by(self._items, selector)


def chain(source: Iterable[T]) -> ChainableArray[T]:
    return ChainableArray.from_iterable(source)


def init_chain(spec: InitSpec, transform: Optional[Callable[[Any], T]] = None) -> ChainableArray[Any]:
    return ChainableArray(tuple(init(spec, transform)))
