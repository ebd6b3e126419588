"""Tests for LinearProblem."""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest
import scipy.sparse
import torch

from sciproblem import (
    NULL_PARAMETERS,
    InPlaceInferenceError,
    LinearProblem,
    SolverOptions,
    UnknownOptionError,
)


def test_matrix_problem_defaults(matrix_2x2, vector_2):
    prob = LinearProblem(matrix_2x2, vector_2)
    assert prob.inplace is True
    assert prob.isinplace is True
    assert prob.u0 is None
    assert prob.p is NULL_PARAMETERS
    assert prob.A is matrix_2x2
    assert prob.b is vector_2
    assert prob.options == SolverOptions()


def test_scalar_problem_is_out_of_place():
    prob = LinearProblem(3.0, 6.0)
    assert prob.inplace is False


@pytest.mark.parametrize(
    "A",
    [
        torch.eye(3, dtype=torch.float64),
        scipy.sparse.identity(3, format="csr"),
        np.eye(3, dtype=np.complex128),
    ],
)
def test_array_types_are_in_place(A):
    assert LinearProblem(A, np.ones(3)).inplace is True


def test_fields_round_trip(rng):
    A = rng.standard_normal((3, 3))
    b = rng.standard_normal(3)
    u0 = np.zeros(3)
    p = {"shift": 0.5}
    prob = LinearProblem(A, b, p, u0=u0)
    assert prob.b is b
    assert prob.u0 is u0
    assert prob.p is p


def test_b_is_not_coerced():
    b = [1.0, 2.0]
    prob = LinearProblem(np.eye(2), b)
    assert prob.b is b
    assert isinstance(prob.b, list)


class TestOperators:
    """Matrix-free operators are classified by convention or signature."""

    def test_out_of_place_operator(self):
        def apply(u, p, t):
            return 2.0 * u

        assert LinearProblem(apply, np.ones(2)).inplace is False

    def test_in_place_operator(self):
        def apply(du, u, p, t):
            du[:] = 2.0 * u

        assert LinearProblem(apply, np.ones(2)).inplace is True

    def test_declared_operator(self):
        class ScaledIdentity:
            inplace = True

            def __init__(self, scale):
                self.scale = scale

            def __call__(self, *args):
                du, u = args[0], args[1]
                du[:] = self.scale * u

        op = ScaledIdentity(3.0)
        prob = LinearProblem(op, np.ones(2))
        assert prob.inplace is True
        assert prob.A is op

    def test_unclassifiable_operator(self):
        with pytest.raises(InPlaceInferenceError):
            LinearProblem(lambda u: u, np.ones(2))

    def test_explicit_flag_bypasses_inference(self):
        prob = LinearProblem(lambda u: u, np.ones(2), inplace=False)
        assert prob.inplace is False

    def test_explicit_flag_overrides_array_default(self):
        assert LinearProblem(np.eye(2), np.ones(2), inplace=False).inplace is False


def test_options_from_mapping():
    prob = LinearProblem(np.eye(2), np.ones(2), options={"abstol": 1e-10, "maxiters": 20})
    assert isinstance(prob.options, SolverOptions)
    assert prob.solver_kwargs() == {"abstol": 1e-10, "maxiters": 20}


def test_unknown_option_fails_at_construction():
    with pytest.raises(UnknownOptionError):
        LinearProblem(np.eye(2), np.ones(2), options={"alias_A": True})


def test_problem_is_frozen(matrix_2x2, vector_2):
    prob = LinearProblem(matrix_2x2, vector_2)
    with pytest.raises(FrozenInstanceError):
        prob.b = np.zeros(2)  # type: ignore


def test_u0_and_options_are_keyword_only():
    with pytest.raises(TypeError):
        LinearProblem(np.eye(2), np.ones(2), NULL_PARAMETERS, np.zeros(2))  # type: ignore[misc]


def test_nested_list_matrix_is_in_place():
    A = [[1.0, 0.0], [0.0, 1.0]]
    b = [1.0, 2.0]
    prob = LinearProblem(A, b)
    assert prob.inplace is True
    assert prob.A is A


def test_nested_tuple_matrix_is_in_place():
    assert LinearProblem(((2.0,),), (4.0,)).inplace is True
