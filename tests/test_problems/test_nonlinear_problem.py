"""Tests for NonlinearProblem."""

import numpy as np
import pytest

from sciproblem import (
    NULL_PARAMETERS,
    LinearProblem,
    NonlinearFunction,
    NonlinearProblem,
    WrapperConflictError,
)


def residual(u, p):
    return u**2 - p


def residual_inplace(du, u, p):
    du[:] = u**2 - p


def test_raw_function_is_wrapped():
    u0 = np.array([1.0, 1.0])
    prob = NonlinearProblem(residual, u0, 2.0)
    assert isinstance(prob.f, NonlinearFunction)
    assert prob.f.f is residual
    assert prob.inplace is False
    assert prob.u0 is u0
    assert prob.p == 2.0


def test_in_place_function():
    prob = NonlinearProblem(residual_inplace, np.ones(2))
    assert prob.inplace is True
    assert prob.p is NULL_PARAMETERS


def test_existing_wrapper_is_stored_as_is():
    fn = NonlinearFunction(residual_inplace)
    prob = NonlinearProblem(fn, np.ones(2))
    assert prob.f is fn
    assert prob.inplace is True


def test_explicit_flag_is_forwarded_to_wrapper():
    prob = NonlinearProblem(lambda u, p, t=0.0: u, 1.0, inplace=False)
    assert prob.inplace is False
    assert prob.f.inplace is False


def test_explicit_flag_conflicting_with_wrapper():
    fn = NonlinearFunction(residual)
    with pytest.raises(WrapperConflictError):
        NonlinearProblem(fn, 1.0, inplace=True)


def test_scalar_and_matrix_initial_guesses():
    assert NonlinearProblem(residual, 0.5).u0 == 0.5
    u0 = np.ones((2, 3))
    assert NonlinearProblem(residual, u0).u0.shape == (2, 3)


def test_stored_function_is_evaluable():
    prob = NonlinearProblem(residual, np.array([2.0]), 4.0)
    assert np.allclose(prob.f(prob.u0, prob.p), [0.0])


class TestFromProblem:
    """Rebuilding a problem shares the inner function and parameters."""

    def test_aliases_function_and_parameters(self):
        params = np.array([1.0, 2.0])
        original = NonlinearProblem(residual_inplace, np.ones(2), params)
        copy = NonlinearProblem.from_problem(original)
        assert copy is not original
        assert copy.f is original.f
        assert copy.p is original.p
        assert copy.u0 is original.u0
        assert copy.inplace is original.inplace

    def test_mutating_shared_parameters_is_visible(self):
        params = np.array([1.0])
        original = NonlinearProblem(residual, np.ones(1), params)
        copy = NonlinearProblem.from_problem(original)
        params[0] = 5.0
        assert copy.p[0] == 5.0

    def test_requires_function_fields(self):
        with pytest.raises(AttributeError):
            NonlinearProblem.from_problem(LinearProblem(np.eye(2), np.ones(2)))
