"""Infinite plane with an optional bounded extent."""

from __future__ import annotations

from enum import Enum, auto

import numpy as np

from ._config import BallastConfig, DEFAULT_CONFIG
from .utils._safe_ops import normalize_with_norm


class PlaneSide(Enum):
    """Side of a plane a point lies on."""
    NEGATIVE_SIDE = auto()
    POSITIVE_SIDE = auto()
    NO_SIDE = auto()  # on the plane


class Plane:
    """The set of points ``x`` with ``normal . x == offset``.

    ``normal`` is expected to be unit length. ``size`` is a (2,) extent used
    by rendering and collision consumers; it does not affect any of the
    distance or volume computations.
    """

    def __init__(
        self,
        normal: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 1.0),
        offset: float = 0.0,
        size: np.ndarray | tuple[float, float] = (0.0, 0.0),
    ):
        normal = np.asarray(normal, dtype=np.float64)
        size = np.asarray(size, dtype=np.float64)
        if normal.shape != (3,):
            raise ValueError(f"Plane normal must have shape (3,), got {normal.shape}")
        if size.shape != (2,):
            raise ValueError(f"Plane size must have shape (2,), got {size.shape}")

        self._normal = normal.copy()
        self._offset = float(offset)
        self._size = size.copy()

    @classmethod
    def from_point_normal(
        cls,
        point: np.ndarray,
        normal: np.ndarray,
        size: np.ndarray | tuple[float, float] = (0.0, 0.0),
    ) -> "Plane":
        """Plane through ``point`` with ``normal`` rescaled to unit length.

        Raises:
            ValueError: If ``normal`` is the zero vector.
        """
        unit, norm = normalize_with_norm(normal)
        if float(norm) == 0.0:
            raise ValueError("Plane normal must be non-zero")
        point = np.asarray(point, dtype=np.float64)
        return cls(unit, float(unit @ point), size)

    @property
    def normal(self) -> np.ndarray:
        return self._normal.copy()

    @property
    def offset(self) -> float:
        return self._offset

    @property
    def size(self) -> np.ndarray:
        return self._size.copy()

    def distance(self, point: np.ndarray) -> float:
        """Signed distance from ``point``; negative below the plane."""
        return float(self._normal @ np.asarray(point, dtype=np.float64)) - self._offset

    def side(self, point: np.ndarray) -> PlaneSide:
        dist = self.distance(point)
        if dist < 0.0:
            return PlaneSide.NEGATIVE_SIDE
        if dist > 0.0:
            return PlaneSide.POSITIVE_SIDE
        return PlaneSide.NO_SIDE

    def flipped(self) -> "Plane":
        """Same set of points with the opposite below-region."""
        return Plane(-self._normal, -self._offset, self._size)

    def equals(self, other: "Plane", config: BallastConfig | None = None) -> bool:
        """Normal, offset and size within ``config.tolerance.equality``."""
        tol = (config or DEFAULT_CONFIG).tolerance.equality
        return (
            bool(np.allclose(self._normal, other._normal, rtol=0.0, atol=tol))
            and abs(self._offset - other._offset) <= tol
            and bool(np.allclose(self._size, other._size, rtol=0.0, atol=tol))
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Plane):
            return NotImplemented
        return self.equals(other)

    def __repr__(self) -> str:
        return (
            f"Plane(normal={self._normal.tolist()}, offset={self._offset}, "
            f"size={self._size.tolist()})"
        )
