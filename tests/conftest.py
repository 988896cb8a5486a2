"""Pytest configuration and fixtures for ballast tests."""

from __future__ import annotations

import numpy as np
import pytest

from ballast import Sphere


# =============================================================================
# TOLERANCE SETTINGS
# =============================================================================

# Closed-form results are compared at double precision
EXACT_TOLERANCE = 1e-9

# Monte-Carlo estimates: relative tolerance on volumes, absolute on centroids
MC_SAMPLES = 400_000
MC_VOLUME_RTOL = 0.03
MC_CENTROID_ATOL = 0.02

# JAX computes in float32 by default
BATCH_RTOL = 1e-5
BATCH_ATOL = 1e-5


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def sphere() -> Sphere:
    """Sphere of radius 2 with the default material."""
    return Sphere(2.0)


@pytest.fixture(scope="session")
def ball_samples() -> np.ndarray:
    """Uniform samples inside the unit ball."""
    rng = np.random.default_rng(42)
    points = rng.uniform(-1.0, 1.0, size=(MC_SAMPLES, 3))
    return points[np.linalg.norm(points, axis=1) <= 1.0]


# =============================================================================
# HELPERS
# =============================================================================


def estimate_below(
    samples: np.ndarray,
    radius: float,
    normal: np.ndarray,
    offset: float,
) -> tuple[float, np.ndarray | None]:
    """Monte-Carlo volume and centroid of the ball part with normal . x <= offset.

    Args:
        samples: (N, 3) uniform samples inside the unit ball
        radius: Ball radius to scale the samples to
        normal: (3,) unit plane normal
        offset: Plane offset from the ball center

    Returns:
        Estimated volume, and centroid (None if no samples are below)
    """
    points = samples * radius
    below = points @ normal <= offset
    full_volume = 4.0 / 3.0 * np.pi * radius**3
    volume = full_volume * below.sum() / len(points)
    if not below.any():
        return volume, None
    return volume, points[below].mean(axis=0)
