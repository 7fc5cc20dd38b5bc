from __future__ import annotations
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from .option import NONE, Option, filter_value, from_value

T = TypeVar("T")
U = TypeVar("U")


class OptionSeq(Generic[T]):
    """Lazy sequence built from an iterator factory.

    Transformations wrap the factory and never pull from the source until the
    result is iterated. Every ``iter()`` starts again from the source, so a
    sequence over a list can be walked any number of times while one over a
    generator is consumed once.
    """

    def __init__(self, factory: Callable[[], Iterator[T]]):
        self._factory = factory

    @staticmethod
    def of(*items: T) -> "OptionSeq[T]":
        return OptionSeq.from_iterable(items)

    @staticmethod
    def from_iterable(items: Iterable[T]) -> "OptionSeq[T]":
        if isinstance(items, OptionSeq):
            return items
        return OptionSeq(lambda: iter(items))

    def __iter__(self) -> Iterator[T]:
        return self._factory()

    def _then(self, step: Callable[[Iterator[T]], Iterator[U]]) -> "OptionSeq[U]":
        return OptionSeq(lambda: step(iter(self)))

    # -- over sequences of Option --

    def map(self: "OptionSeq[Option[T]]", f: Optional[Callable[[T], U]] = None) -> "OptionSeq[Option[U]]":
        fn = f if f is not None else (lambda v: v)
        return self._then(lambda it: (opt.map(fn) for opt in it))

    def flat_map(self: "OptionSeq[Option[T]]", f: Optional[Callable[[T], Option[U]]] = None) -> "OptionSeq[Option[U]]":
        def step(it: Iterator[Option[T]]) -> Iterator[Option[U]]:
            for opt in it:
                if opt.is_none():
                    continue
                yield opt if f is None else opt.flat_map(f)
        return self._then(step)

    def filter(self: "OptionSeq[Option[T]]", p: Callable[[T], bool]) -> "OptionSeq[Option[T]]":
        return self._then(lambda it: (opt.filter(p) for opt in it))

    def for_each(self: "OptionSeq[Option[T]]", action: Callable[[T], Any]) -> None:
        for v in self.values():
            action(v)

    def values(self: "OptionSeq[Option[T]]") -> "OptionSeq[T]":
        return self._then(lambda it: (v for opt in it for v in opt))

    def to_list(self: "OptionSeq[Option[T]]") -> List[T]:
        return list(self.values())

    def contains(self: "OptionSeq[Option[T]]", p: Callable[[T], bool]) -> bool:
        return any(p(v) for v in self.values())

    # -- over sequences of raw values --

    def filter_values(self, p: Callable[[T], bool]) -> "OptionSeq[Option[T]]":
        return self._then(lambda it: (filter_value(v, p) for v in it))

    def first_or_none(self, p: Optional[Callable[[T], bool]] = None) -> Option[T]:
        for v in self:
            if p is None or p(v):
                return from_value(v)
        return NONE

    def count(self) -> int:
        return sum(1 for _ in self)


def map_each(options: Iterable[Option[T]], f: Optional[Callable[[T], U]] = None) -> OptionSeq[Option[U]]:
    return OptionSeq.from_iterable(options).map(f)


def flat_map(options: Iterable[Option[T]], f: Optional[Callable[[T], Option[U]]] = None) -> OptionSeq[Option[U]]:
    """Drop every NONE; with ``f``, bind each present value through it.

    Unlike ``filter_each`` the result can be shorter than the input.
    """
    return OptionSeq.from_iterable(options).flat_map(f)


def filter_each(options: Iterable[Option[T]], p: Callable[[T], bool]) -> OptionSeq[Option[T]]:
    return OptionSeq.from_iterable(options).filter(p)


def filter_values(values: Iterable[T], p: Callable[[T], bool]) -> OptionSeq[Option[T]]:
    return OptionSeq.from_iterable(values).filter_values(p)


def first_or_none(values: Iterable[T], p: Optional[Callable[[T], bool]] = None) -> Option[T]:
    return OptionSeq.from_iterable(values).first_or_none(p)


def for_each(options: Iterable[Option[T]], action: Callable[[T], Any]) -> None:
    OptionSeq.from_iterable(options).for_each(action)


def to_list(options: Iterable[Option[T]]) -> List[T]:
    return OptionSeq.from_iterable(options).to_list()


def to_iterable(options: Iterable[Option[T]]) -> OptionSeq[T]:
    return OptionSeq.from_iterable(options).values()


def contains(options: Iterable[Option[T]], p: Callable[[T], bool]) -> bool:
    return OptionSeq.from_iterable(options).contains(p)
