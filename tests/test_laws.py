"""Property tests for the algebraic laws of Outcome."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st
import pytest

from outcomes import Outcome, of_failure, of_success

pytestmark = pytest.mark.unit

_values = st.one_of(st.integers(), st.text(), st.booleans())
_errors = st.one_of(st.text(), st.integers().map(lambda n: ValueError(n)))
_outcomes = st.one_of(_values.map(of_success), _errors.map(of_failure))
_functions = st.sampled_from([repr, str, lambda v: (v, v), lambda v: [v]])


def _observe(outcome: Outcome) -> tuple:
    return outcome.fold(lambda v: ("success", v), lambda e: ("failure", e))


@given(value=_values)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_success_construction(value) -> None:
    outcome = of_success(value)
    assert outcome.is_success()
    assert outcome.get() == value


@given(error=_errors)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_failure_construction_and_get_raises(error) -> None:
    outcome = of_failure(error)
    assert outcome.is_failure()
    with pytest.raises(Exception) as exc:
        outcome.get()
    if isinstance(error, BaseException):
        assert exc.value is error
    else:
        assert str(exc.value) == str(error)


@given(outcome=_outcomes)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_fold_is_idempotent(outcome) -> None:
    assert _observe(outcome) == _observe(outcome)


@given(outcome=_outcomes)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_map_identity(outcome) -> None:
    assert _observe(outcome.map(lambda v: v)) == _observe(outcome)


@given(outcome=_outcomes, f=_functions, g=_functions)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_map_composition(outcome, f, g) -> None:
    chained = outcome.map(f).map(g)
    composed = outcome.map(lambda v: g(f(v)))
    assert _observe(chained) == _observe(composed)
    if outcome.is_failure():
        assert chained is outcome
        assert composed is outcome


@given(outcome=_outcomes, f=_functions)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_bind_left_identity_matches_map(outcome, f) -> None:
    assert _observe(outcome.bind(lambda v: of_success(f(v)))) == _observe(
        outcome.map(f)
    )


@given(value=_values, f=_functions)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_map_error_leaves_success_value(value, f) -> None:
    assert of_success(value).map_error(f).get() == value


@given(value=_values, error=_errors, fallback=_values)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_or_law(value, error, fallback) -> None:
    assert of_failure(error).or_(fallback).get() == fallback
    assert of_success(value).or_(fallback).get() == value
