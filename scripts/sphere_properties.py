"""Print mass, inertia and plane-cut properties of a solid sphere."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import tyro
from loguru import logger

from ballast import Material, Plane, Sphere


def main(
    radius: float = 1.0,
    material: str = "water",
    mass: float | None = None,
    normal: tuple[float, float, float] = (0.0, 0.0, 1.0),
    offset: float = 0.0,
    mesh_path: Path | None = None,
) -> None:
    """Compute sphere properties, including those below a cutting plane.

    Args:
        radius: Sphere radius.
        material: Predefined material name (e.g. pine, water, steel_alloy).
        mass: If given, overrides the material density so the sphere has this mass.
        normal: Cutting plane normal (rescaled to unit length).
        offset: Signed distance of the cutting plane from the sphere center.
        mesh_path: Optional path to export the sphere as a mesh (STL, OBJ, PLY, etc.).

    Examples:
        python scripts/sphere_properties.py --radius 2 --offset 0.5
        python scripts/sphere_properties.py --material pine --normal 0 1 0 --offset -0.8
        python scripts/sphere_properties.py --mass 2.0 --radius 0.1
    """
    sphere = Sphere(radius, Material.from_name(material))

    if mass is not None and not sphere.set_density_from_mass(mass):
        raise ValueError(f"Cannot set mass {mass} on a sphere of radius {radius}")

    logger.info(f"Radius: {sphere.radius}")
    logger.info(f"Density: {sphere.material.density}")
    logger.info(f"Volume: {sphere.volume():.6f}")

    mass_matrix = sphere.mass_matrix()
    if mass_matrix is None:
        logger.warning("No valid mass matrix (is the density set?)")
    else:
        logger.info(f"Mass: {mass_matrix.mass:.6f}")
        logger.info(f"Inertia diagonal: {mass_matrix.diagonal_moments}")

    # Normalize the normal (rejecting zero), then move the plane to the offset
    through_center = Plane.from_point_normal(np.zeros(3), np.asarray(normal))
    plane = Plane(through_center.normal, offset)
    below = sphere.volume_below(plane)
    center = sphere.center_of_volume_below(plane)
    logger.info(f"Volume below plane: {below:.6f} ({below / max(sphere.volume(), 1e-12):.1%})")
    if center is None:
        logger.info("Center of volume below plane: none (sphere is above the plane)")
    else:
        logger.info(f"Center of volume below plane: {center}")

    if mesh_path is not None:
        sphere.to_trimesh().export(mesh_path)
        logger.info(f"Saved mesh to {mesh_path}")


if __name__ == "__main__":
    tyro.cli(main)
