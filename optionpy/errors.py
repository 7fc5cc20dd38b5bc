from __future__ import annotations
from typing import Any, Callable, Generic, Optional, TypeVar, Union

E = TypeVar("E")


class ValueAbsent(Exception, Generic[E]):
    """Raised when a value is demanded from an empty Option.

    ``error`` carries whatever the caller supplied (``None`` if nothing was).
    """

    def __init__(self, error: Optional[E] = None):
        super().__init__("value absent" if error is None else repr(error))
        self.error = error


ErrorLike = Union[BaseException, Callable[[], Any], Any]


def to_exception(error: ErrorLike = None) -> BaseException:
    if isinstance(error, BaseException):
        return error
    if callable(error):
        produced = error()
        return produced if isinstance(produced, BaseException) else ValueAbsent(produced)
    return ValueAbsent(error)
