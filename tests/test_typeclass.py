"""Tests for typeclass decorator and dispatch."""

import pytest
from threadops.typeclass import NoInstanceError, TypeClass, typeclass


class TestTypeclassBasic:
    """Tests for basic typeclass functionality."""

    def test_typeclass_decorator(self):
        """@typeclass creates a TypeClass instance."""

        @typeclass
        def show(value) -> str: ...

        assert isinstance(show, TypeClass)

    def test_typeclass_with_dispatch_position(self):
        """@typeclass(dispatch_on=...) creates a TypeClass instance."""

        @typeclass(dispatch_on=1)
        def size(f, container) -> int: ...

        assert isinstance(size, TypeClass)

    def test_typeclass_preserves_name_and_doc(self):
        """The wrapped function's metadata shows through the proxy."""

        @typeclass
        def show(value) -> str:
            """Convert to string."""

        assert show.__name__ == 'show'
        assert show.__doc__ == 'Convert to string.'

    def test_typeclass_repr(self):
        @typeclass
        def show(value) -> str: ...

        assert repr(show) == '<typeclass show with 0 instances>'


class TestTypeclassDispatch:
    """Tests for registering and dispatching instances."""

    def test_dispatch_on_first_argument(self):
        @typeclass
        def show(value) -> str: ...

        @show.instance(int)
        def _show_int(value: int) -> str:
            return f'Int({value})'

        @show.instance(str)
        def _show_str(value: str) -> str:
            return f'Str({value!r})'

        assert show(42) == 'Int(42)'
        assert show('hi') == "Str('hi')"

    def test_dispatch_on_second_argument(self):
        """Dispatch uses the argument at dispatch_on."""

        @typeclass(dispatch_on=1)
        def size(label, container) -> str: ...

        @size.instance(list)
        def _size_list(label, container: list) -> str:
            return f'{label}:{len(container)}'

        assert size('xs', [1, 2, 3]) == 'xs:3'

    def test_one_implementation_for_many_types(self):
        @typeclass
        def kind(value) -> str: ...

        @kind.instance(list, tuple)
        def _kind_seq(value) -> str:
            return 'sequence'

        assert kind([1]) == 'sequence'
        assert kind((1,)) == 'sequence'
        assert repr(kind) == '<typeclass kind with 2 instances>'

    def test_subclass_uses_base_instance(self):
        """Dispatch falls back along the MRO."""

        class MyList(list):
            pass

        @typeclass
        def kind(value) -> str: ...

        @kind.instance(list)
        def _kind_list(value) -> str:
            return 'list'

        assert kind(MyList([1])) == 'list'

    def test_exact_type_wins_over_base(self):
        @typeclass
        def kind(value) -> str: ...

        @kind.instance(int)
        def _kind_int(value) -> str:
            return 'int'

        @kind.instance(bool)
        def _kind_bool(value) -> str:
            return 'bool'

        assert kind(True) == 'bool'
        assert kind(1) == 'int'

    def test_instance_receives_all_arguments(self):
        @typeclass
        def scale(value, factor=1) -> int: ...

        @scale.instance(int)
        def _scale_int(value: int, factor: int = 1) -> int:
            return value * factor

        assert scale(3, factor=4) == 12


class TestTypeclassFallback:
    """Tests for default implementations and missing instances."""

    def test_default_implementation_used(self):
        @typeclass
        def show(value) -> str:
            return f'Default({value})'

        assert show(1.5) == 'Default(1.5)'

    def test_stub_raises_no_instance(self):
        @typeclass
        def show(value) -> str: ...

        with pytest.raises(NoInstanceError, match="No instance of 'show' for type 'float'"):
            show(1.5)

    def test_documented_stub_raises_no_instance(self):
        """A docstring-only body counts as a stub."""

        @typeclass
        def show(value) -> str:
            """Show a value."""

        with pytest.raises(NoInstanceError):
            show(object())

    def test_no_instance_error_is_type_error(self):
        err = NoInstanceError('show', float)
        assert isinstance(err, TypeError)
        assert err.typeclass_name == 'show'
        assert err.value_type is float

    def test_missing_dispatch_argument(self):
        @typeclass(dispatch_on=1)
        def size(label, container) -> int: ...

        with pytest.raises(TypeError, match='requires at least 2 positional arguments'):
            size('only-label')
