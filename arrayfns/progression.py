from __future__ import annotations
from dataclasses import dataclass
import math
from numbers import Integral, Real
from collections.abc import Mapping
from typing import Any, Callable, List, Optional, TypeVar, Union, overload

from .errors import InvalidCountError, NonFiniteRangeError
from .logger import get_logger

T = TypeVar("T")


@dataclass(frozen=True)
class InitRange:
    """Inclusive bounds with an optional step: ``InitRange(1, 2, 0.5)`` -> 1, 1.5, 2."""
    from_: float
    to: float
    increment: Optional[float] = None


@dataclass(frozen=True)
class InitCount:
    """Explicit length with optional start and step: ``InitCount(5, start=3)`` -> 3..7."""
    count: int
    start: float = 0
    increment: float = 1


@dataclass(frozen=True)
class Progression:
    start: float
    count: int
    increment: float


InitSpec = Union[int, InitRange, InitCount, Mapping[str, Any]]

_RANGE_KEYS = {"from", "to", "increment"}
_COUNT_KEYS = {"start", "count", "increment"}


def _check_count(count: Any) -> int:
    if isinstance(count, bool) or not isinstance(count, Integral) or count < 0:
        get_logger().debug("init rejected count", count=count)
        raise InvalidCountError(count)
    return int(count)


def _from_mapping(options: Mapping[str, Any]) -> Union[InitRange, InitCount]:
    keys = set(options)
    if "from" in options:
        if not keys <= _RANGE_KEYS or "to" not in options:
            raise TypeError(f"Range spec needs 'from' and 'to' and accepts only {sorted(_RANGE_KEYS)}, got {sorted(keys)}")
        return InitRange(options["from"], options["to"], options.get("increment"))
    if not keys <= _COUNT_KEYS or "count" not in options:
        raise TypeError(f"Count spec needs 'count' and accepts only {sorted(_COUNT_KEYS)}, got {sorted(keys)}")
    return InitCount(options["count"], options.get("start", 0), options.get("increment", 1))


def _normalize_range(spec: InitRange) -> Progression:
    log = get_logger()
    bounds = (spec.from_, spec.to) if spec.increment is None else (spec.from_, spec.to, spec.increment)
    if not all(math.isfinite(b) for b in bounds):
        log.debug("init rejected non-finite bound", from_=spec.from_, to=spec.to, increment=spec.increment)
        raise NonFiniteRangeError()
    sign = -1 if spec.to < spec.from_ else 1
    if spec.increment is not None and (spec.increment == 0 or spec.increment / sign < 0):
        log.debug("init rejected unbounded range", from_=spec.from_, to=spec.to, increment=spec.increment)
        raise NonFiniteRangeError()
    increment = spec.increment if spec.increment is not None else sign
    steps = (spec.to - spec.from_) / increment
    if not math.isfinite(steps):
        log.debug("init rejected range with too many steps", from_=spec.from_, to=spec.to, increment=increment)
        raise NonFiniteRangeError()
    count = math.floor(steps + 1)
    return Progression(start=spec.from_, count=count, increment=increment)


def normalize(spec: InitSpec) -> Progression:
    """Resolve any accepted spec shape to a start, a finite count and an increment.

    Raises:
        NonFiniteRangeError: a range spec whose increment never reaches ``to``.
        InvalidCountError: a count that is negative or not an integer.
        TypeError: anything that is not a count, a range or a count spec.
    """
    if isinstance(spec, Mapping):
        spec = _from_mapping(spec)
    if isinstance(spec, InitRange):
        p = _normalize_range(spec)
    elif isinstance(spec, InitCount):
        p = Progression(start=spec.start, count=_check_count(spec.count), increment=spec.increment)
    elif isinstance(spec, (Integral, Real)):
        p = Progression(start=0, count=_check_count(spec), increment=1)
    else:
        raise TypeError(f"Unsupported init spec: {spec!r}")
    get_logger().debug("init normalized", start=p.start, count=p.count, increment=p.increment)
    return p


@overload
def init(spec: InitSpec) -> List[float]: ...
@overload
def init(spec: InitSpec, transform: Callable[[Any], T]) -> List[T]: ...


def init(spec: InitSpec, transform: Optional[Callable[[Any], Any]] = None) -> List[Any]:
    """Build a list from an arithmetic progression.

    The spec is either a bare count, an ``InitCount``, an ``InitRange`` or an
    equivalent mapping (``{"from": 1, "to": 3}``, ``{"count": 5, "start": 3}``).
    The whole length is worked out before any element is produced, so an
    invalid range fails without partial output.

    Args:
        spec: Description of the progression.
        transform: Applied to each generated value. For a bare count the
            generated value is the index itself.

    Returns:
        A new list with ``count`` elements.

    Example:
        ```python
        init(5)                                 # [0, 1, 2, 3, 4]
        init(5, lambda i: i * i)                # [0, 1, 4, 9, 16]
        init(InitRange(1, -1))                  # [1, 0, -1]
        init({"from": 1, "to": 2, "increment": 0.5})  # [1, 1.5, 2]
        init(InitCount(5, increment=3))         # [0, 3, 6, 9, 12]
        ```
    """
    p = normalize(spec)
    f = transform if transform is not None else (lambda x: x)
    out: List[Any] = []
    current = p.start
    for _ in range(p.count):
        out.append(f(current))
        current += p.increment
    return out
