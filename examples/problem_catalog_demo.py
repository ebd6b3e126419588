"""
Example: Describing problems with sciproblem

Builds one problem of each kind and prints how it will be handed to a solver:
the in-place convention chosen at construction, the parameters, and the
solver options that were set.
"""

import numpy as np
import torch

from sciproblem import (
    LinearProblem,
    NonlinearProblem,
    OptimizationFunction,
    OptimizationProblem,
    QuadratureProblem,
    Sense,
)


def describe(title, prob):
    print("=" * 60)
    print(title)
    print("=" * 60)
    print(f"Type: {type(prob).__name__}")
    print(f"In place: {prob.inplace}")
    print(f"Parameters: {prob.p!r}")
    print(f"Solver options: {prob.solver_kwargs()}")
    print()


def example_linear():
    A = np.array([[4.0, 1.0], [1.0, 3.0]])
    b = np.array([1.0, 2.0])
    describe("Example 1: Dense linear system", LinearProblem(A, b))

    def laplacian(u, p, t):
        out = 2.0 * u
        out[1:] -= u[:-1]
        out[:-1] -= u[1:]
        return out

    prob = LinearProblem(laplacian, torch.ones(8), options={"reltol": 1e-10})
    describe("Example 2: Matrix-free linear system", prob)


def example_nonlinear():
    def residual(du, u, p):
        du[:] = u**3 - p

    prob = NonlinearProblem(residual, np.ones(3), np.array([1.0, 8.0, 27.0]))
    describe("Example 3: Nonlinear system", prob)


def example_quadrature():
    def integrand(x, p):
        return np.exp(-(x**2))

    prob = QuadratureProblem(integrand, -np.inf, np.inf, batch=128)
    describe("Example 4: Gaussian integral", prob)
    print(f"nout={prob.nout}, batch={prob.batch}")
    print()


def example_optimization():
    def rosenbrock(x, p):
        a, b = p
        return (a - x[0]) ** 2 + b * (x[1] - x[0] ** 2) ** 2

    def rosenbrock_grad(g, x, p):
        a, b = p
        g[0] = -2 * (a - x[0]) - 4 * b * x[0] * (x[1] - x[0] ** 2)
        g[1] = 2 * b * (x[1] - x[0] ** 2)

    fn = OptimizationFunction(rosenbrock, grad=rosenbrock_grad)
    prob = OptimizationProblem(
        fn,
        np.zeros(2),
        (1.0, 100.0),
        lb=np.array([-1.0, -1.0]),
        ub=np.array([2.0, 2.0]),
        sense=Sense.MIN,
        options={"maxiters": 500},
    )
    describe("Example 5: Bounded Rosenbrock", prob)
    print(f"Objective at u0: {prob.f(prob.u0, prob.p)}")
    print(f"Derivatives supplied: {prob.f.provided()}")


def main():
    example_linear()
    example_nonlinear()
    example_quadrature()
    example_optimization()
    print("All problems constructed")


if __name__ == "__main__":
    main()
