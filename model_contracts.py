"""
Model contracts and validation helpers.

Shared by the network (weights, input shape) and the simulation config.
All raise ValueError with the offending name and value.
"""
from __future__ import annotations

import numpy as np


def assert_finite(arr, name: str = "array"):
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} contains non-finite values")


def assert_shape(arr, shape, name: str = "array"):
    if arr.shape != shape:
        raise ValueError(f"{name} has shape {arr.shape}, expected {shape}")


def assert_range(x, lo: float, hi: float, name: str = "value"):
    if x < lo or x > hi:
        raise ValueError(f"{name} out of range [{lo}, {hi}]: {x}")


def assert_positive(x, name: str = "value"):
    if not x > 0:
        raise ValueError(f"{name} must be positive, got {x}")


def assert_non_negative(x, name: str = "value"):
    if not x >= 0:
        raise ValueError(f"{name} must be non-negative, got {x}")
