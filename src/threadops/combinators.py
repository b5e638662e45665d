"""The combinator suite as plain two-argument functions.

Every function here is pure plumbing: it routes a value into a caller-supplied
function or container and returns a new value. Absence (`Nothing`) is
absorbing under `fmap`, `ap`, `bind` and `compose_kleisli`; `or_else` is the
only way to recover from it. Exceptions raised by caller functions propagate
unchanged.

Example:
    ```python
    from threadops import Nothing, Some, bind, fmap, or_else

    half = lambda x: Some(x // 2) if x % 2 == 0 else Nothing
    bind(Some(8), half)                # Some(value=4)
    fmap(str, [1, 2])                  # ['1', '2']
    or_else(Nothing, lambda: Some(0))  # Some(value=0)
    ```
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

from threadops.option import Nothing, NothingType, Some
from threadops.typeclass import no_instance, typeclass

__all__ = [
    'ap',
    'bind',
    'bind_flip',
    'compose',
    'compose_kleisli',
    'field',
    'fmap',
    'identity',
    'or_else',
    'thread',
    'thread_as',
    'thread_first',
    'thread_last',
    'thread_last_curried',
]

type _OptionFn[A, B] = Callable[[A], Some[B] | NothingType]


# ---------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------


def thread_first[T, U](value: T, f: Callable[[T], U] | str) -> U:
    """Apply f to value: `thread_first(x, f) == f(x)`.

    A `str` in place of f names an attribute to read, the same as passing
    `field(name)`.

    Example:
        ```python
        thread_first(person, 'name')          # person.name
        thread_first(thread_first(3, inc), str)  # '4'
        ```
    """
    if isinstance(f, str):
        return getattr(value, f)
    return f(value)


def field(name: str) -> Callable[[Any], Any]:
    """Return an accessor reading attribute `name` (dotted paths allowed)."""
    return operator.attrgetter(name)


def thread_last(value: Any, f: Callable[..., Any], *, curried: bool = False) -> Any:
    """Apply f to value, or bind value as the last argument of a curried f.

    With `curried=False` this is `f(value)`. With `curried=True`, f has the
    shape `arg1 -> (value -> out)` and the result is a function `g` with
    `g(arg1) == f(arg1)(value)`.

    Example:
        ```python
        add = lambda n: lambda xs: [x + n for x in xs]
        thread_last([1, 2], add, curried=True)(10)  # [11, 12]
        ```
    """
    if not curried:
        return f(value)

    def bound(arg1: Any) -> Any:
        return f(arg1)(value)

    return bound


def thread_last_curried(value: Any, f: Callable[[Any], Callable[[Any], Any]]) -> Callable[[Any], Any]:
    """Two-argument form of `thread_last(value, f, curried=True)`."""
    return thread_last(value, f, curried=True)


def thread_as[T, U](value: T, transform: Callable[[T], U]) -> U:
    """Apply transform to value; the same as thread_first, named for readability."""
    return transform(value)


def thread(value: Any, *fns: Callable[[Any], Any]) -> Any:
    """Thread value through fns left to right: `thread(x, f, g) == g(f(x))`."""
    for fn in fns:
        value = fn(value)
    return value


def identity[T](value: T) -> T:
    return value


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose functions left to right: `compose(f, g)(x) == g(f(x))`."""

    def composed(value: Any) -> Any:
        return thread(value, *fns)

    return composed


# ---------------------------------------------------------------------
# Functor
# ---------------------------------------------------------------------


@typeclass(dispatch_on=1)
def fmap(f: Any, container: Any) -> Any:
    """Map f over a container, dispatching on the container's type.

    - `Some(x)` gives `Some(f(x))`; `Nothing` gives `Nothing` without calling f.
    - A list or tuple gives a container of the same type, length and order.
    - When the second argument is any other callable, it is treated as a
      wrapping constructor and `fmap(value, wrap) == wrap(value)`.

    Raises:
        NoInstanceError: If the second argument is neither a registered
            container nor callable.
    """
    if callable(container):
        return container(f)
    raise no_instance('fmap', type(container))


@fmap.instance(Some)
def _fmap_some(f: Callable[[Any], Any], container: Some[Any]) -> Some[Any]:
    return Some(f(container.value))


@fmap.instance(NothingType)
def _fmap_nothing(f: Callable[[Any], Any], container: NothingType) -> NothingType:
    return container


@fmap.instance(list)
def _fmap_list(f: Callable[[Any], Any], container: list[Any]) -> list[Any]:
    return [f(x) for x in container]


@fmap.instance(tuple)
def _fmap_tuple(f: Callable[[Any], Any], container: tuple[Any, ...]) -> tuple[Any, ...]:
    return tuple(f(x) for x in container)


# ---------------------------------------------------------------------
# Applicative
# ---------------------------------------------------------------------


@typeclass
def ap(ff: Any, fa: Any) -> Any:
    """Apply wrapped functions to wrapped values.

    - Options: `Some(f(a))` when both sides are present, else `Nothing`.
    - Sequences: every function applied to every value, functions outermost,
      so the result has `len(ff) * len(fa)` items. The result type follows ff.

    Raises:
        NoInstanceError: If ff is not an Option, list or tuple.
        TypeError: If ff and fa are different container kinds.
    """


def _mismatch(ff: Any, fa: Any) -> TypeError:
    return TypeError(f'ap() cannot apply {type(ff).__name__} to {type(fa).__name__}')


@ap.instance(Some)
def _ap_some(ff: Some[Callable[[Any], Any]], fa: Any) -> Some[Any] | NothingType:
    if isinstance(fa, Some):
        return Some(ff.value(fa.value))
    if isinstance(fa, NothingType):
        return Nothing
    raise _mismatch(ff, fa)


@ap.instance(NothingType)
def _ap_nothing(ff: NothingType, fa: Any) -> NothingType:
    if not isinstance(fa, Some | NothingType):
        raise _mismatch(ff, fa)
    return Nothing


@ap.instance(list, tuple)
def _ap_sequence(ff: list[Any] | tuple[Any, ...], fa: Any) -> list[Any] | tuple[Any, ...]:
    if not isinstance(fa, list | tuple):
        raise _mismatch(ff, fa)
    applied = [f(a) for f in ff for a in fa]
    if isinstance(ff, tuple):
        return tuple(applied)
    return applied


# ---------------------------------------------------------------------
# Monad
# ---------------------------------------------------------------------


@typeclass
def bind(a: Any, f: Any) -> Any:
    """Feed a present value into an Option-returning function.

    `bind(Nothing, f)` is `Nothing` and f is not called;
    `bind(Some(x), f)` is `f(x)`.

    Raises:
        NoInstanceError: If a is not an Option.
    """


@bind.instance(Some)
def _bind_some[A, B](a: Some[A], f: _OptionFn[A, B]) -> Some[B] | NothingType:
    return f(a.value)


@bind.instance(NothingType)
def _bind_nothing(a: NothingType, f: Any) -> NothingType:
    return a


def bind_flip[A, B](f: _OptionFn[A, B], a: Some[A] | NothingType) -> Some[B] | NothingType:
    """`bind` with its arguments swapped, for right-to-left chains."""
    return bind(a, f)


def compose_kleisli[A, B, C](f: _OptionFn[A, B], g: _OptionFn[B, C]) -> _OptionFn[A, C]:
    """Compose two Option-returning functions: `h(a) == bind(f(a), g)`.

    g is not called when f returns Nothing.
    """

    def composed(a: A) -> Some[C] | NothingType:
        return bind(f(a), g)

    return composed


# ---------------------------------------------------------------------
# Alternative
# ---------------------------------------------------------------------


def or_else[T](lhs: Some[T] | NothingType, rhs: Callable[[], Some[T] | NothingType]) -> Some[T] | NothingType:
    """Return lhs if present, otherwise the result of calling rhs.

    rhs must be a zero-argument callable. It is not called at all when lhs
    is present, and called exactly once when lhs is `Nothing`.

    Raises:
        TypeError: If rhs is not callable.
        NoInstanceError: If lhs is not an Option.
    """
    if not callable(rhs):
        raise TypeError(f'or_else() fallback must be a zero-argument callable, got {type(rhs).__name__}')
    if isinstance(lhs, Some):
        return lhs
    if isinstance(lhs, NothingType):
        return rhs()
    raise no_instance('or_else', type(lhs))
