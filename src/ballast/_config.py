"""Configuration for sphere mass and plane-cut properties."""

from __future__ import annotations

import jax_dataclasses as jdc


@jdc.pytree_dataclass
class ToleranceParams:
    """Numerical tolerances used by the value types."""

    equality: float = 1e-6
    """Absolute tolerance for comparing densities, masses and moments."""

    mass_matrix: float = 10.0
    """Validity tolerance for mass matrices, in multiples of machine epsilon.

    Scaled by the largest principal moment, so a matrix with moments around
    1e3 tolerates roughly 10 * 2.2e-16 * 1e3 of negative eigenvalue.
    """


@jdc.pytree_dataclass
class MeshParams:
    """Parameters for mesh export."""

    subdivisions: int = 3
    """Icosphere subdivision level (3 gives 1280 faces)."""


@jdc.pytree_dataclass
class BallastConfig:
    """Unified configuration.

    Passed as ``config`` to equality, validity and mesh-export methods;
    ``None`` there means ``DEFAULT_CONFIG``.

    Usage:
        config = BallastConfig()
        config = jdc.replace(config, tolerance=jdc.replace(config.tolerance, equality=1e-9))
        Material.from_density(1.0).equals(Material.from_density(1.0 + 1e-8), config)
        Sphere(1.0).to_trimesh(config=config)
    """

    tolerance: ToleranceParams = jdc.field(default_factory=ToleranceParams)
    """Comparison and validity tolerances."""

    mesh: MeshParams = jdc.field(default_factory=MeshParams)
    """Mesh export parameters."""


DEFAULT_CONFIG = BallastConfig()
