from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar

from .errors import ErrorLike, to_exception
from .logger import ConsoleLogger, current_logger

T = TypeVar("T")
U = TypeVar("U")


class Option(Generic[T]):
    """Zero-or-one value container. ``Some(v)`` holds a value, ``NONE`` holds nothing."""

    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()

    def __iter__(self) -> Iterator[T]:
        if self.is_some():
            yield self.value  # type: ignore[attr-defined]

    def match(self, on_some: Callable[[T], U], on_none: Callable[[], U]) -> U:
        if self.is_some():
            return on_some(self.value)  # type: ignore[attr-defined]
        return on_none()

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        # An Option-returning f gives Option[Option[U]]; use flat_map to bind
        return self.match(lambda v: from_value(f(v)), none)

    def flat_map(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self.is_none():
            return NONE
        out = f(self.value)  # type: ignore[attr-defined]
        if not isinstance(out, Option):
            raise TypeError(f"flat_map function must return an Option, got {type(out).__name__}")
        return out

    def filter(self, p: Callable[[T], bool]) -> "Option[T]":
        return self if self.is_some() and p(self.value) else NONE  # type: ignore[attr-defined]

    def contains(self, p: Callable[[T], bool]) -> bool:
        return self.is_some() and bool(p(self.value))  # type: ignore[attr-defined]

    def get_or_else(self, default: Optional[U] = None) -> T | Optional[U]:
        return self.value if self.is_some() else default  # type: ignore[attr-defined]

    def get_or_else_lazy(self, factory: Callable[[], U]) -> T | U:
        return self.value if self.is_some() else factory()  # type: ignore[attr-defined]

    def get_or_throw(self, error: ErrorLike = None) -> T:
        if self.is_some():
            return self.value  # type: ignore[attr-defined]
        exc = to_exception(error)
        current_logger().debug("get_or_throw on None", raising=type(exc).__name__)
        raise exc

    def or_else(self, alternative: "Option[T]") -> "Option[T]":
        return self if self.is_some() else alternative

    def for_each(self, action: Callable[[T], Any]) -> None:
        if self.is_some():
            action(self.value)  # type: ignore[attr-defined]

    def tap(self, action: Callable[["Option[T]"], Any]) -> "Option[T]":
        action(self)
        return self

    def log(self, label: str, logger: Optional[ConsoleLogger] = None) -> "Option[T]":
        def emit(opt: "Option[T]") -> None:
            (logger or current_logger()).debug(f"{label}: {opt}", present=opt.is_some())
        return self.tap(emit)

    def to_list(self) -> List[T]:
        return list(self)

    def to_iterable(self) -> Iterator[T]:
        return iter(self)


@dataclass(frozen=True)
class Some(Option[T]):
    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise ValueError("Some cannot hold None; use from_value() or NONE")

    def is_some(self) -> bool: return True
    def __str__(self) -> str: return f"Some({self.value})"


class _None(Option[Any]):
    __slots__ = ()
    def __repr__(self) -> str: return "None"
    def is_some(self) -> bool: return False
    # copy and pickle resolve back to the module-level instance
    def __reduce__(self) -> str: return "NONE"


NONE: Option[Any] = _None()


def some(v: T) -> Option[T]:
    return Some(v)


def none() -> Option[Any]:
    return NONE


def from_value(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else NONE


from_nullable = from_value


def filter_value(v: Optional[T], p: Callable[[T], bool]) -> Option[T]:
    """Treat a raw value as present and keep it only if ``p`` holds."""
    if v is None:
        return NONE
    return Some(v) if p(v) else NONE
