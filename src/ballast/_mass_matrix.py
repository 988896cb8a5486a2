"""Mass and moment of inertia of a rigid body."""

from __future__ import annotations

import numpy as np
from loguru import logger

from ._config import BallastConfig, DEFAULT_CONFIG
from ._material import Material
from .utils._geometry import sphere_volume


class MassMatrix:
    """A scalar mass paired with a symmetric 3x3 inertia tensor.

    Moments are stored as diagonal ``(Ixx, Iyy, Izz)`` and off-diagonal
    ``(Ixy, Ixz, Iyz)`` terms about the body's center of mass.
    """

    def __init__(
        self,
        mass: float = 0.0,
        diagonal_moments: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0),
        off_diagonal_moments: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0),
    ):
        self._mass = float(mass)
        self._diagonal = _as_vector3(diagonal_moments, "diagonal_moments")
        self._off_diagonal = _as_vector3(off_diagonal_moments, "off_diagonal_moments")

    @property
    def mass(self) -> float:
        return self._mass

    @property
    def ixx(self) -> float:
        return float(self._diagonal[0])

    @property
    def iyy(self) -> float:
        return float(self._diagonal[1])

    @property
    def izz(self) -> float:
        return float(self._diagonal[2])

    @property
    def ixy(self) -> float:
        return float(self._off_diagonal[0])

    @property
    def ixz(self) -> float:
        return float(self._off_diagonal[1])

    @property
    def iyz(self) -> float:
        return float(self._off_diagonal[2])

    @property
    def diagonal_moments(self) -> np.ndarray:
        return self._diagonal.copy()

    @property
    def off_diagonal_moments(self) -> np.ndarray:
        return self._off_diagonal.copy()

    @property
    def moi(self) -> np.ndarray:
        """(3, 3) moment of inertia matrix."""
        ixx, iyy, izz = self._diagonal
        ixy, ixz, iyz = self._off_diagonal
        return np.array(
            [
                [ixx, ixy, ixz],
                [ixy, iyy, iyz],
                [ixz, iyz, izz],
            ]
        )

    def set_mass(self, mass: float) -> None:
        self._mass = float(mass)

    def set_inertia_matrix(
        self,
        ixx: float,
        iyy: float,
        izz: float,
        ixy: float,
        ixz: float,
        iyz: float,
    ) -> None:
        self._diagonal = np.array([ixx, iyy, izz], dtype=np.float64)
        self._off_diagonal = np.array([ixy, ixz, iyz], dtype=np.float64)

    def principal_moments(self) -> np.ndarray:
        """Eigenvalues of the inertia matrix in ascending order."""
        return np.linalg.eigvalsh(self.moi)

    def _epsilon(self, config: BallastConfig | None) -> float:
        """Validity tolerance scaled by machine epsilon and the largest moment."""
        tolerance = (config or DEFAULT_CONFIG).tolerance.mass_matrix
        max_moment = float(np.max(np.abs(self.principal_moments())))
        return tolerance * float(np.finfo(np.float64).eps) * max_moment

    def is_positive(self, config: BallastConfig | None = None) -> bool:
        """Mass and inertia matrix are strictly positive (definite)."""
        eps = self._epsilon(config)
        minors = _leading_minors(self.moi)
        return self._mass > 0 and all(m > eps for m in minors)

    def is_near_positive(self, config: BallastConfig | None = None) -> bool:
        """Mass and inertia matrix are non-negative (semi-definite) within tolerance."""
        eps = self._epsilon(config)
        minors = _leading_minors(self.moi)
        return self._mass >= 0 and all(m >= -eps for m in minors)

    def valid_moments(self, config: BallastConfig | None = None) -> bool:
        """Principal moments are non-negative and satisfy the triangle inequality."""
        eps = self._epsilon(config)
        a, b, c = self.principal_moments()
        return bool(
            a + eps >= 0
            and b + eps >= 0
            and c + eps >= 0
            and a + b + eps >= c
            and b + c + eps >= a
            and c + a + eps >= b
        )

    def is_valid(self, config: BallastConfig | None = None) -> bool:
        """Physically valid: near-positive with valid principal moments."""
        return self.is_near_positive(config) and self.valid_moments(config)

    def set_from_sphere(
        self,
        mass: float,
        radius: float,
        config: BallastConfig | None = None,
    ) -> bool:
        """Set to a uniform solid sphere of the given mass and radius.

        Returns False and leaves the matrix unchanged if ``mass <= 0`` or
        ``radius <= 0``, or if the result is not a valid mass matrix.
        """
        if mass <= 0 or radius <= 0:
            logger.debug(f"Rejected sphere mass matrix: mass={mass}, radius={radius}")
            return False

        moment = 0.4 * mass * radius * radius
        candidate = MassMatrix(mass, (moment, moment, moment), (0.0, 0.0, 0.0))
        if not candidate.is_valid(config):
            logger.debug(f"Sphere mass matrix is not valid: mass={mass}, radius={radius}")
            return False

        self._mass = candidate._mass
        self._diagonal = candidate._diagonal
        self._off_diagonal = candidate._off_diagonal
        return True

    def set_from_sphere_material(
        self,
        material: Material,
        radius: float,
        config: BallastConfig | None = None,
    ) -> bool:
        """Set to a uniform solid sphere of the given material and radius."""
        mass = material.density * sphere_volume(radius)
        return self.set_from_sphere(mass, radius, config)

    def copy(self) -> "MassMatrix":
        return MassMatrix(self._mass, self._diagonal, self._off_diagonal)

    def equals(self, other: "MassMatrix", config: BallastConfig | None = None) -> bool:
        """Mass and every moment within ``config.tolerance.equality``."""
        tol = (config or DEFAULT_CONFIG).tolerance.equality
        return (
            abs(self._mass - other._mass) <= tol
            and bool(np.all(np.abs(self._diagonal - other._diagonal) <= tol))
            and bool(np.all(np.abs(self._off_diagonal - other._off_diagonal) <= tol))
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MassMatrix):
            return NotImplemented
        return self.equals(other)

    def __repr__(self) -> str:
        return (
            f"MassMatrix(mass={self._mass}, "
            f"diagonal_moments={self._diagonal.tolist()}, "
            f"off_diagonal_moments={self._off_diagonal.tolist()})"
        )


def _as_vector3(value, name: str) -> np.ndarray:
    arr = np.asarray(value, dtype=np.float64)
    if arr.shape != (3,):
        raise ValueError(f"{name} must have shape (3,), got {arr.shape}")
    return arr.copy()


def _leading_minors(matrix: np.ndarray) -> list[float]:
    """Determinants of the upper-left 1x1, 2x2 and 3x3 submatrices."""
    return [float(np.linalg.det(matrix[:k, :k])) for k in (1, 2, 3)]
