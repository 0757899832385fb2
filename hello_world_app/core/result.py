from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def and_then(self, fn: "Callable[[T], Result[U, E]]") -> "Result[U, E]":
        return fn(self.value)


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    @property
    def is_ok(self) -> bool:
        return False

    def and_then(self, fn) -> "Err[E]":
        # short-circuit: the first failure is carried through untouched
        return self


Result = Union[Ok[T], Err[E]]


def capture(fn: Callable[[], T], wrap: Callable[[Exception], E]) -> "Result[T, E]":
    """Run `fn` and turn a raised exception into `Err(wrap(exc))`.

    The wrapped error keeps the original exception as its `__cause__`.
    """
    try:
        return Ok(fn())
    except Exception as e:
        error = wrap(e)
        error.__cause__ = e
        return Err(error)
