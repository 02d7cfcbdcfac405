"""Small helpers over collections and mappings."""

from collections.abc import Callable, Collection, Hashable, Iterable, Mapping
from itertools import islice
from typing import TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
C = TypeVar("C")


def _iterate(initial: T, step: Callable[[T], T]) -> Iterable[T]:
    value = initial
    while True:
        yield value
        value = step(value)


def generate(
    initial: T,
    step: Callable[[T], T],
    count: int,
    collect: Callable[[Iterable[T]], C] = list,  # type: ignore[assignment]
) -> C:
    """Collect `initial`, `step(initial)`, `step(step(initial))`, ...

    Stops after `count` values and gathers them with `collect`.

    Example:
        >>> generate(date(2024, 1, 1), lambda d: d + timedelta(weeks=1), 3)
        [datetime.date(2024, 1, 1), datetime.date(2024, 1, 8), datetime.date(2024, 1, 15)]
        >>> generate(0, lambda v: 0, 97, collect=tuple)
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    return collect(islice(_iterate(initial, step), count))


def sub_map(keys: Collection[K], mapping: Mapping[K, V]) -> dict[K, V]:
    """Entries of `mapping` whose key is one of `keys`."""
    return {key: value for key, value in mapping.items() if key in keys}


def have_common_element(first: Iterable[Hashable], second: Iterable[Hashable]) -> bool:
    return not set(first).isdisjoint(second)
