"""Solid sphere with a material: volume, mass and plane-cut properties."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
import trimesh
from loguru import logger

from ._config import BallastConfig, DEFAULT_CONFIG
from ._mass_matrix import MassMatrix
from ._material import INVALID_DENSITY, Material
from ._plane import Plane
from .utils._geometry import sphere_volume


@dataclass(eq=False)
class Sphere:
    """A solid sphere centered at the origin of its own frame.

    Planes passed to the cut queries are expressed in that frame, so a
    plane's offset is its signed distance from the sphere's center.
    """

    radius: float = 0.0
    material: Material = field(default_factory=Material)

    def __post_init__(self):
        self.radius = float(self.radius)
        self.material = self.material.copy()

    def set_radius(self, radius: float) -> None:
        self.radius = float(radius)

    def set_material(self, material: Material) -> None:
        self.material = material.copy()

    def copy(self) -> "Sphere":
        return Sphere(self.radius, self.material)

    def volume(self) -> float:
        """(4/3) * pi * r^3."""
        return sphere_volume(self.radius)

    def density_from_mass(self, mass: float) -> float:
        """Density that gives this sphere the requested mass.

        Returns:
            ``mass / volume()``, or a negative value if the volume or the mass
            is not positive (a tiny radius can underflow to zero volume).
        """
        volume = self.volume()
        if volume <= 0 or mass <= 0:
            logger.debug(f"No valid density for mass={mass}, volume={volume}")
            return INVALID_DENSITY
        return mass / volume

    def set_density_from_mass(self, mass: float) -> bool:
        """Update the material density so the sphere has the given mass.

        The material is left untouched when no valid density exists.

        Returns:
            True if the density was updated.
        """
        density = self.density_from_mass(mass)
        if density <= 0:
            return False
        self.material.set_density(density)
        return True

    def fill_mass_matrix(
        self,
        mass_matrix: MassMatrix,
        config: BallastConfig | None = None,
    ) -> bool:
        """Write the mass and inertia of this sphere into ``mass_matrix``.

        The mass comes from the material density, and the inertia is that of
        a uniform solid sphere, ``0.4 * m * r^2`` on the diagonal.

        Args:
            mass_matrix: Matrix to overwrite
            config: Validity tolerances. If None, uses defaults.

        Returns:
            False, leaving ``mass_matrix`` unchanged, if the result is not a
            valid mass matrix (e.g. unset density or zero radius).
        """
        return mass_matrix.set_from_sphere_material(self.material, self.radius, config)

    def mass_matrix(self, config: BallastConfig | None = None) -> MassMatrix | None:
        """Mass matrix of this sphere, or None if it would be invalid."""
        result = MassMatrix()
        if not self.fill_mass_matrix(result, config):
            return None
        return result

    def volume_below(self, plane: Plane) -> float:
        """Volume of the part of the sphere with ``normal . x <= offset``."""
        r = self.radius
        dist = plane.offset

        if dist >= r:
            return self.volume()
        if dist <= -r:
            return 0.0

        # Height of the cap below the plane
        h = min(max(r + dist, 0.0), 2.0 * r)
        return np.pi * h * h * (3.0 * r - h) / 3.0

    def center_of_volume_below(self, plane: Plane) -> np.ndarray | None:
        """Centroid of the part of the sphere below ``plane``.

        The centroid is relative to the sphere's center and lies on the
        axis through the center along the plane normal.

        Returns:
            (3,) centroid, or None if no part of the sphere is below the plane.
        """
        r = self.radius
        dist = plane.offset

        if dist <= -r:
            return None
        if dist >= r:
            return np.zeros(3)

        h = min(max(r + dist, 0.0), 2.0 * r)
        # Distance from the center to the cap centroid, towards the -normal pole
        c = 3.0 * (2.0 * r - h) ** 2 / (4.0 * (3.0 * r - h))
        return -c * plane.normal

    def to_trimesh(
        self,
        subdivisions: int | None = None,
        config: BallastConfig | None = None,
    ) -> trimesh.Trimesh:
        """Icosphere approximation of this sphere, centered at the origin.

        Args:
            subdivisions: Icosphere subdivision level. If None, read from ``config``.
            config: Mesh parameters. If None, uses defaults.
        """
        c = config or DEFAULT_CONFIG
        if subdivisions is None:
            subdivisions = c.mesh.subdivisions
        if self.radius <= 0:
            return trimesh.Trimesh()
        return trimesh.creation.icosphere(subdivisions=subdivisions, radius=self.radius)

    def equals(self, other: "Sphere", config: BallastConfig | None = None) -> bool:
        """Same radius (exact) and materials equal within ``config`` tolerance."""
        return self.radius == other.radius and self.material.equals(other.material, config)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sphere):
            return NotImplemented
        return self.equals(other)
