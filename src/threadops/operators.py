"""Infix spellings of the combinators.

Python has no user-defined operators, so each combinator is wrapped in an
`Infix` object that sits between two operands of an existing operator. The
operator chosen fixes the precedence tier:

- Application tier, `>>op>>`: thread_first, thread_last, thread_last_curried,
  thread_as, fmap, ap, kleisli and alt.
- Bind tier, `|op|`: bind and bind_flip.

`>>` binds tighter than `|` and both are left associative, so application
operators group first and bind operators afterwards:

    ```python
    from threadops.operators import alt, bind, fmap, tf

    '42' >>tf>> parse_id |bind| find_user          # bind(parse_id('42'), find_user)
    str.upper >>fmap>> Some('a')                   # Some(value='A')
    Nothing >>alt>> (lambda: Nothing) >>alt>> (lambda: Some(5))  # Some(value=5)
    ```

`alt` sits in the application tier, so it binds tighter than `bind`: in
`a |bind| f >>alt>> thunk` the fallback attaches to `f`, not to the bind
result, and `or_else` rejects the function with `NoInstanceError`. Recovering
from a failed bind parenthesizes the bind:

    ```python
    (a |bind| f) >>alt>> (lambda: Some(0))
    Nothing >>alt>> (lambda: Some(3)) |bind| inc   # bind(or_else(...), inc)
    ```

`f |bind_flip| g |bind_flip| a` groups as `(f |bind_flip| g) |bind_flip| a`;
a right-to-left chain parenthesizes its inner step:
`f |bind_flip| (g |bind_flip| a)`. Lambdas used as operands need parentheses.

Each operator is also callable as the plain two-argument function.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from threadops import combinators

__all__ = [
    'BindInfix',
    'Infix',
    'alt',
    'ap',
    'bind',
    'bind_flip',
    'fmap',
    'kleisli',
    'ta',
    'tf',
    'thread_as',
    'thread_first',
    'thread_last',
    'thread_last_curried',
    'tl',
]


class _LeftBound:
    """An operator with its left operand supplied, awaiting the right one."""

    __slots__ = ('_left', '_op')

    def __init__(self, op: Infix, left: Any) -> None:
        self._op = op
        self._left = left

    def __rshift__(self, right: Any) -> Any:
        if isinstance(self._op, BindInfix):
            return NotImplemented
        return self._op(self._left, right)

    def __or__(self, right: Any) -> Any:
        if not isinstance(self._op, BindInfix):
            return NotImplemented
        return self._op(self._left, right)

    def __repr__(self) -> str:
        return f'<{self._op.name} awaiting right operand, left={self._left!r}>'


class Infix:
    """A two-argument function usable as `left >>op>> right`.

    Attributes:
        name: Display name used in reprs.
    """

    __slots__ = ('_fn', 'name')

    def __init__(self, fn: Callable[[Any, Any], Any], name: str | None = None) -> None:
        self._fn = fn
        self.name = name or getattr(fn, '__name__', repr(fn))

    def __call__(self, left: Any, right: Any) -> Any:
        return self._fn(left, right)

    def __rrshift__(self, left: Any) -> _LeftBound:
        return _LeftBound(self, left)

    def __repr__(self) -> str:
        return f'<infix {self.name} (>>{self.name}>>)>'


class BindInfix(Infix):
    """An Infix in the looser bind tier, used as `left |op| right`."""

    __slots__ = ()

    def __rrshift__(self, left: Any) -> Any:
        return NotImplemented

    def __ror__(self, left: Any) -> _LeftBound:
        return _LeftBound(self, left)

    def __repr__(self) -> str:
        return f'<infix {self.name} (|{self.name}|)>'


thread_first = tf = Infix(combinators.thread_first)
thread_last = tl = Infix(combinators.thread_last)
thread_last_curried = Infix(combinators.thread_last_curried)
thread_as = ta = Infix(combinators.thread_as)
fmap = Infix(combinators.fmap, 'fmap')
ap = Infix(combinators.ap, 'ap')
kleisli = Infix(combinators.compose_kleisli, 'kleisli')
alt = Infix(combinators.or_else, 'alt')

bind = BindInfix(combinators.bind, 'bind')
bind_flip = BindInfix(combinators.bind_flip)
