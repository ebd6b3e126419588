"""Pytest configuration and shared fixtures for sciproblem tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- Small matrices, vectors and callables reused across problem tests
- Isolation of the global debug-mode switch
"""

import os

import numpy as np
import pytest
import torch

from sciproblem.diagnostics import is_debug_enabled, set_debug_enabled


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function")
def torch_rng() -> torch.Generator:
    """Provide a deterministic CPU torch RNG for tests."""
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    generator = torch.Generator(device="cpu")
    generator.manual_seed(seed)
    return generator


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode():
    """Restore the global debug flag after every test."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)


@pytest.fixture
def matrix_2x2(rng: np.random.Generator) -> np.ndarray:
    return rng.standard_normal((2, 2)) + 2.0 * np.eye(2)


@pytest.fixture
def vector_2(rng: np.random.Generator) -> np.ndarray:
    return rng.standard_normal(2)



