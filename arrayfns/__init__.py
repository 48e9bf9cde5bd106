from .progression import InitRange, InitCount, Progression, normalize, init
from .arrays import (
    of_iterable,
    map,
    filter,
    choose,
    collect,
    append,
    concat,
    distinct,
    distinct_by,
    exists,
    every,
    get,
    find,
    group_by,
    length,
    count,
    sort,
    sort_descending,
    sort_by,
    sort_by_descending,
    reverse,
    pairwise,
)
from .aggregates import sum, sum_by, max, max_by, min, min_by, mean, mean_by
from .chain import ChainableArray, chain, init_chain
from .errors import (
    ArrayFnsError,
    NonFiniteRangeError,
    InvalidCountError,
    EmptyCollectionError,
    ElementNotFoundError,
)
from .logger import ConsoleLogger, get_logger, configure_logging
