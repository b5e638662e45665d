"""@typeclass decorator: runtime dispatch on the kind of container an argument holds.

`fmap` dispatches on its second argument, `ap` and `bind` on their first, so
the dispatch position is configurable per typeclass.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar, overload

import wrapt

from threadops._logging import get_logger

__all__ = ['NoInstanceError', 'TypeClass', 'no_instance', 'typeclass']

F = TypeVar('F', bound=Callable[..., Any])

logger = get_logger(__name__)


class NoInstanceError(TypeError):
    """Raised when no typeclass instance is registered for a type."""

    def __init__(self, typeclass_name: str, value_type: type) -> None:
        self.typeclass_name = typeclass_name
        self.value_type = value_type
        super().__init__(f"No instance of '{typeclass_name}' for type '{value_type.__name__}'")


def no_instance(typeclass_name: str, value_type: type) -> NoInstanceError:
    """Log a dispatch miss and build the error to raise for it.

    Every NoInstanceError raised by threadops goes through here, so each miss
    produces one `typeclass.no_instance` debug event.
    """
    logger.debug('typeclass.no_instance', typeclass=typeclass_name, value_type=value_type.__name__)
    return NoInstanceError(typeclass_name, value_type)


class TypeClass(wrapt.ObjectProxy, Generic[F]):
    """A polymorphic function with per-type instances.

    Calls are routed by the type of the argument at position `dispatch_on`:
    exact type first, then the MRO of that type. With no match the decorated
    function runs as the default if it has a body, otherwise
    `NoInstanceError` is raised.

    Attributes:
        _self_name: The name of the typeclass function.
        _self_dispatch_on: Positional index of the argument dispatched on.
        _self_default: The fallback implementation, or None for a stub.
        _self_instances: Mapping of types to their implementations.

    Example:
        ```python
        @typeclass(dispatch_on=1)
        def size(f, container) -> int: ...

        @size.instance(list)
        def _size_list(f, container: list) -> int:
            return len(container)
        ```
    """

    def __init__(self, default_fn: F, dispatch_on: int = 0) -> None:
        super().__init__(default_fn)
        self._self_name = default_fn.__name__
        self._self_dispatch_on = dispatch_on
        self._self_default: F | None = default_fn if _has_implementation(default_fn) else None
        self._self_instances: dict[type, Callable[..., Any]] = {}

    def instance(self, *types: type) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register one implementation for one or more types.

        Example:
            ```python
            @fmap.instance(list, tuple)
            def _fmap_sequence(f, container): ...
            ```
        """

        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            for type_ in types:
                self._self_instances[type_] = fn
            return fn

        return decorator

    def _find_instance(self, value: Any) -> Callable[..., Any] | None:
        value_type = type(value)

        if value_type in self._self_instances:
            return self._self_instances[value_type]

        for base in value_type.__mro__[1:]:
            if base in self._self_instances:
                return self._self_instances[base]

        return None

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if len(args) <= self._self_dispatch_on:
            raise TypeError(
                f'{self._self_name}() requires at least {self._self_dispatch_on + 1} positional arguments'
            )

        subject = args[self._self_dispatch_on]
        instance_fn = self._find_instance(subject)

        if instance_fn is not None:
            return instance_fn(*args, **kwargs)

        if self._self_default is not None:
            return self._self_default(*args, **kwargs)

        raise no_instance(self._self_name, type(subject))

    def __repr__(self) -> str:
        return f'<typeclass {self._self_name} with {len(self._self_instances)} instances>'


def _stub() -> None: ...


def _documented_stub() -> None:
    """Stub."""


# Bytecode of `...`, `pass` and docstring-only bodies on the running interpreter.
_STUB_BYTECODE = frozenset({_stub.__code__.co_code, _documented_stub.__code__.co_code})


def _has_implementation(fn: Callable[..., Any]) -> bool:
    """Return True unless fn is a stub whose body is just `...`, `pass` or a docstring."""
    code = getattr(fn, '__code__', None)
    if code is None:
        return True
    return code.co_code not in _STUB_BYTECODE


@overload
def typeclass(fn: F, /) -> TypeClass[F]: ...
@overload
def typeclass(*, dispatch_on: int = 0) -> Callable[[F], TypeClass[F]]: ...


def typeclass(fn: F | None = None, /, *, dispatch_on: int = 0) -> Any:
    """Turn a function signature into a dispatching typeclass.

    Usable bare (`@typeclass`, dispatching on the first argument) or with a
    dispatch position (`@typeclass(dispatch_on=1)`).

    Args:
        fn: The function defining the typeclass signature and optional default.
        dispatch_on: Positional index of the argument whose type selects the instance.

    Returns:
        A TypeClass, or a decorator producing one.
    """
    if fn is not None:
        return TypeClass(fn, dispatch_on)

    def decorator(inner: F) -> TypeClass[F]:
        return TypeClass(inner, dispatch_on)

    return decorator
