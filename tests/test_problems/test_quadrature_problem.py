"""Tests for QuadratureProblem."""

import numpy as np
import pytest

from sciproblem import NULL_PARAMETERS, InPlaceInferenceError, QuadratureProblem


def integrand(x, p):
    return np.sin(x)


def integrand_inplace(dx, x, p):
    dx[:] = np.sin(x)


def test_defaults():
    prob = QuadratureProblem(integrand, 0, 1)
    assert prob.nout == 1
    assert prob.batch == 0
    assert prob.inplace is False
    assert prob.p is NULL_PARAMETERS
    assert prob.lb == 0
    assert prob.ub == 1


def test_in_place_integrand():
    assert QuadratureProblem(integrand_inplace, 0.0, np.pi).inplace is True


def test_fields_round_trip():
    lb = np.zeros(2)
    ub = np.ones(2)
    prob = QuadratureProblem(integrand_inplace, lb, ub, (1.0,), nout=3, batch=64)
    assert prob.lb is lb
    assert prob.ub is ub
    assert prob.nout == 3
    assert prob.batch == 64
    assert prob.p == (1.0,)


def test_explicit_flag():
    prob = QuadratureProblem(integrand, 0, 1, inplace=True)
    assert prob.inplace is True


def test_unclassifiable_integrand():
    with pytest.raises(InPlaceInferenceError):
        QuadratureProblem(lambda x: x, 0, 1)


@pytest.mark.parametrize("nout", [0, -1, 1.5, True])
def test_invalid_nout(nout):
    with pytest.raises(ValueError, match="nout"):
        QuadratureProblem(integrand, 0, 1, nout=nout)


@pytest.mark.parametrize("batch", [-1, 2.0, False])
def test_invalid_batch(batch):
    with pytest.raises(ValueError, match="batch"):
        QuadratureProblem(integrand, 0, 1, batch=batch)


def test_batch_is_only_a_hint():
    # Any non-negative batch is stored; it does not constrain the integrand.
    prob = QuadratureProblem(integrand, 0, 1, batch=7)
    assert prob.batch == 7
    assert prob.inplace is False


def test_numpy_integers_are_stored_unchanged():
    nout = np.int64(3)
    batch = np.int64(8)
    prob = QuadratureProblem(integrand_inplace, 0, 1, nout=nout, batch=batch)
    assert prob.nout is nout
    assert prob.batch is batch
