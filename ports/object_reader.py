"""DIP Port – ObjectReader.

A pull-based record source. Exhaustion (StopIteration) ends a publish run.
"""
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class ObjectReader(Generic[T]):
    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:  # pragma: no cover - interface only
        raise NotImplementedError
