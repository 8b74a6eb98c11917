"""Tests for Result type (Ok and Err)."""

import pytest
from fallible import ArgumentError, Err, Nothing, NotFoundError, Ok, Result, Some, err, ok
from fallible import result as res
from hypothesis import given

from tests.strategies import int_functions, integers, result_functions, results


class TestResultCreation:
    """Tests for Ok and Err instantiation."""

    def test_ok_holds_value(self):
        """Ok wraps a value."""
        assert ok(42).value == 42

    def test_err_holds_error(self):
        """Err wraps an error of any type."""
        assert err('bad').error == 'bad'
        assert err(ValueError('x')).is_err()

    def test_none_payloads_are_kept(self):
        """Neither variant coalesces None."""
        assert Ok(None).is_ok()
        assert Ok(None).get() is None
        assert Err(None).is_err()
        assert Err(None).get_error() is None

    def test_frozen(self):
        """Result instances are immutable."""
        with pytest.raises(AttributeError):
            Ok(1).value = 2  # type: ignore[misc]

    @pytest.mark.parametrize('variant', [Ok, Err])
    def test_cannot_subclass(self, variant):
        """Subclassing a variant raises TypeError."""
        with pytest.raises(TypeError):
            type('Extra', (variant,), {})


class TestResultEquality:
    """Tests for equality and hashing."""

    def test_equality(self):
        """Same variant and payload compare equal."""
        assert Ok(1) == Ok(1)
        assert Err('x') == Err('x')
        assert Ok(1) != Err(1)

    def test_hash(self):
        """Results are hashable."""
        assert len({Ok(1), Ok(1), Err(1)}) == 2


class TestResultExtraction:
    """Tests for get, get_error and the get_or_* family."""

    def test_ok_get(self):
        """Ok.get returns the value."""
        assert Ok(3).get() == 3

    def test_err_get_raises(self):
        """Err.get raises NotFoundError for the value branch."""
        with pytest.raises(NotFoundError, match='This Result is an Err') as info:
            Err('x').get()
        assert info.value.branch == 'value'

    def test_ok_get_error_raises(self):
        """Ok.get_error raises NotFoundError for the error branch."""
        with pytest.raises(NotFoundError, match='This Result is Ok') as info:
            Ok(1).get_error()
        assert info.value.branch == 'error'

    def test_get_or_else(self):
        """get_or_else returns the value or the fallback."""
        assert Ok(1).get_or_else(0) == 1
        assert Err('x').get_or_else(0) == 0

    def test_get_or_else_compute_is_lazy(self):
        """The supplier only runs for Err."""
        assert Ok(1).get_or_else_compute(lambda: pytest.fail('called')) == 1
        assert Err('x').get_or_else_compute(lambda: 5) == 5

    def test_get_or_none(self):
        """get_or_none returns the value or None."""
        assert Ok(1).get_or_none() == 1
        assert Err('x').get_or_none() is None

    def test_get_or_throw(self):
        """get_or_throw raises the mapped error only for Err."""
        assert Ok(1).get_or_throw(lambda e: pytest.fail('called')) == 1
        with pytest.raises(KeyError, match='missing'):
            Err('missing').get_or_throw(KeyError)


class TestResultMap:
    """Tests for map, map_error and flat_map."""

    def test_map_ok(self):
        """map transforms the Ok value."""
        assert Ok(2).map(lambda x: x + 1) == Ok(3)

    def test_map_to_none_stays_ok(self):
        """A mapper returning None yields Ok(None), not a degraded value."""
        assert Ok(2).map(lambda _: None) == Ok(None)

    def test_map_err_is_identity(self):
        """map on Err returns the same instance."""
        failure = Err('x')
        assert failure.map(lambda _: pytest.fail('called')) is failure

    def test_map_error(self):
        """map_error transforms only the error."""
        assert Err('x').map_error(str.upper) == Err('X')
        value = Ok(1)
        assert value.map_error(lambda _: pytest.fail('called')) is value

    def test_flat_map(self):
        """flat_map chains Result-returning functions."""
        assert Ok(5).flat_map(lambda v: Ok(v * 2)) == Ok(10)
        assert Ok(5).flat_map(lambda v: Err('odd')) == Err('odd')

    def test_flat_map_err_skips_function(self):
        """flat_map on Err never calls the mapper."""
        failure = Err('first')
        assert failure.flat_map(lambda _: pytest.fail('called')) is failure

    def test_flat_map_rejects_none_and_foreign(self):
        """A mapper returning None or a non-Result is a caller error."""
        with pytest.raises(ArgumentError):
            Ok(1).flat_map(lambda _: None)
        with pytest.raises(ArgumentError, match='must be a Result'):
            Ok(1).flat_map(lambda x: Some(x))

    def test_mapper_exceptions_propagate(self):
        """Result operators do not capture exceptions."""
        with pytest.raises(ZeroDivisionError):
            Ok(0).map(lambda x: 1 / x)


class TestResultFilter:
    """Tests for filter and filter_or_else."""

    def test_filter_passes(self):
        """A passing predicate returns the same Ok."""
        value = Ok(4)
        assert value.filter(lambda x: x > 0, 'negative') is value

    def test_filter_fails(self):
        """A failing predicate yields Err of the given error."""
        assert Ok(-1).filter(lambda x: x > 0, 'negative') == Err('negative')

    def test_filter_or_else_computes_error(self):
        """filter_or_else builds the error from the value."""
        assert Ok(-1).filter_or_else(lambda x: x > 0, lambda x: f'bad {x}') == Err('bad -1')

    def test_filter_or_else_is_lazy(self):
        """The error function is not called when the predicate holds."""
        assert Ok(1).filter_or_else(lambda x: x > 0, lambda _: pytest.fail('called')) == Ok(1)

    def test_filter_on_err(self):
        """Err is returned unchanged by both filters."""
        failure = Err('x')
        assert failure.filter(lambda _: pytest.fail('called'), 'y') is failure
        assert failure.filter_or_else(lambda _: pytest.fail('called'), str) is failure


class TestResultSideEffects:
    """Tests for peek, peek_error, fold and match."""

    def test_peek(self):
        """peek and peek_error run only on their branch."""
        seen = []
        Ok(1).peek(seen.append).peek_error(seen.append)
        Err('e').peek(seen.append).peek_error(seen.append)
        assert seen == [1, 'e']

    def test_fold(self):
        """fold returns the active branch's result."""
        assert Ok(2).fold(lambda v: v * 2, len) == 4
        assert Err('abc').fold(lambda v: v * 2, len) == 3

    def test_match(self):
        """match calls exactly one handler."""
        seen = []
        Ok(1).match(seen.append, lambda e: seen.append(('err', e)))
        Err('x').match(seen.append, lambda e: seen.append(('err', e)))
        assert seen == [1, ('err', 'x')]


class TestResultConversion:
    """Tests for to_option, to_try and the module-level interop helpers."""

    def test_to_option(self):
        """Ok(v) becomes of_nullable(v); Err becomes Nothing."""
        assert Ok(1).to_option() == Some(1)
        assert Ok(None).to_option() is Nothing
        assert Err('x').to_option() is Nothing

    def test_to_try(self):
        """Err is mapped into a Failure cause."""
        assert Ok(1).to_try(lambda e: pytest.fail('called')).get() == 1
        failure = Err('bad').to_try(ValueError)
        assert isinstance(failure.get_cause(), ValueError)
        assert str(failure.get_cause()) == 'bad'

    def test_from_option(self):
        """from_option mirrors Option.to_result."""
        assert res.from_option(Some(1), 'missing') == Ok(1)
        assert res.from_option(Nothing, 'missing') == Err('missing')

    def test_from_option_rejects_none(self):
        """Passing None where an Option is required is a caller error."""
        with pytest.raises(ArgumentError):
            res.from_option(None, 'missing')


class TestResultRepr:
    """Tests for string representation."""

    def test_repr(self):
        """repr shows the variant and payload."""
        assert repr(Ok(1)) == 'Ok(1)'
        assert repr(Err('x')) == "Err('x')"


class TestResultPatternMatching:
    """Tests for structural pattern matching."""

    def test_match_statement(self):
        """Variants destructure with match/case."""

        def describe(value: Result[int, str]) -> str:
            match value:
                case Ok(v):
                    return f'ok {v}'
                case Err(e):
                    return f'err {e}'
            return 'unreachable'

        assert describe(Ok(1)) == 'ok 1'
        assert describe(Err('x')) == 'err x'


class TestResultFunctorLaws:
    """Property tests for the functor laws."""

    @given(results)
    def test_identity(self, value):
        """map(identity) is a no-op."""
        assert value.map(lambda x: x) == value

    @given(results, int_functions, int_functions)
    def test_composition(self, value, f, g):
        """map(f).map(g) == map(g . f)."""
        assert value.map(f).map(g) == value.map(lambda x: g(f(x)))


class TestResultMonadLaws:
    """Property tests for the monad laws."""

    @given(integers, result_functions)
    def test_left_identity(self, a, f):
        """ok(a).flat_map(f) == f(a)."""
        assert ok(a).flat_map(f) == f(a)

    @given(results)
    def test_right_identity(self, value):
        """m.flat_map(ok) == m."""
        assert value.flat_map(ok) == value

    @given(results, result_functions, result_functions)
    def test_associativity(self, value, f, g):
        """Chained flat_maps associate."""
        assert value.flat_map(f).flat_map(g) == value.flat_map(lambda x: f(x).flat_map(g))
