"""Property-based tests for the functor, applicative, monad and alternative laws."""

from hypothesis import given
from hypothesis import strategies as st
from threadops import (
    Nothing,
    Some,
    ap,
    bind,
    bind_flip,
    compose,
    compose_kleisli,
    fmap,
    identity,
    or_else,
    thread_first,
)

from tests.strategies import int_functions, int_lists, integers, option_functions, options


class TestThreadLaws:
    """thread_first is plain application."""

    @given(integers, int_functions, int_functions)
    def test_chained_application(self, x, f, g):
        assert thread_first(thread_first(x, f), g) == g(f(x))


class TestFunctorLaws:
    """fmap preserves structure."""

    @given(options)
    def test_identity(self, opt):
        assert fmap(identity, opt) == opt

    @given(int_lists)
    def test_identity_list(self, xs):
        assert fmap(identity, xs) == xs

    @given(options, int_functions, int_functions)
    def test_composition(self, opt, f, g):
        assert fmap(compose(f, g), opt) == fmap(g, fmap(f, opt))

    @given(int_lists, int_functions)
    def test_length_and_order(self, xs, f):
        mapped = fmap(f, xs)
        assert len(mapped) == len(xs)
        assert mapped == [f(x) for x in xs]

    @given(int_functions)
    def test_nothing_absorbs(self, f):
        assert fmap(f, Nothing) is Nothing


class TestApplicativeLaws:
    """ap over Option and sequences."""

    @given(options)
    def test_identity(self, opt):
        assert ap(Some(identity), opt) == opt

    @given(integers, int_functions)
    def test_homomorphism(self, x, f):
        assert ap(Some(f), Some(x)) == Some(f(x))

    @given(st.lists(int_functions, max_size=5), int_lists)
    def test_sequence_outer_major(self, fs, xs):
        result = ap(fs, xs)
        assert len(result) == len(fs) * len(xs)
        assert result == [f(x) for f in fs for x in xs]


class TestMonadLaws:
    """bind over Option."""

    @given(integers, option_functions)
    def test_left_identity(self, x, f):
        assert bind(Some(x), f) == f(x)

    @given(options)
    def test_right_identity(self, opt):
        assert bind(opt, Some) == opt

    @given(options, option_functions, option_functions)
    def test_associativity(self, opt, f, g):
        assert bind(bind(opt, f), g) == bind(opt, lambda x: bind(f(x), g))

    @given(options, option_functions)
    def test_bind_flip_commutes_arguments(self, opt, f):
        assert bind_flip(f, opt) == bind(opt, f)

    @given(integers, option_functions, option_functions)
    def test_kleisli_matches_bind(self, x, f, g):
        assert compose_kleisli(f, g)(x) == bind(f(x), g)

    @given(option_functions)
    def test_nothing_absorbs(self, f):
        assert bind(Nothing, f) is Nothing


class TestAlternativeLaws:
    """or_else is left biased and lazy."""

    @given(integers, options)
    def test_present_wins(self, x, fallback):
        calls = []
        result = or_else(Some(x), lambda: calls.append(1) or fallback)
        assert result == Some(x)
        assert calls == []

    @given(options)
    def test_absent_yields_fallback(self, fallback):
        calls = []
        result = or_else(Nothing, lambda: calls.append(1) or fallback)
        assert result == fallback
        assert calls == [1]

    @given(options, options, options)
    def test_associativity(self, a, b, c):
        left = or_else(or_else(a, lambda: b), lambda: c)
        right = or_else(a, lambda: or_else(b, lambda: c))
        assert left == right
