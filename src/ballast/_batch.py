"""Batched sphere properties in JAX.

Same closed forms as :class:`ballast.Sphere`, evaluated for arrays of radii
and planes so they can be jitted, vmapped and differentiated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import jax
import jax.numpy as jnp
import jax_dataclasses as jdc
from jaxtyping import Array, Bool, Float

from .utils._geometry import sphere_volume

if TYPE_CHECKING:
    from ._sphere import Sphere


def cap_volume(
    radius: Float[Array, "*batch"],
    distance: Float[Array, "*batch"],
) -> Float[Array, "*batch"]:
    """Volume of a sphere below a plane at signed ``distance`` from its center."""
    radius = jnp.asarray(radius)
    distance = jnp.asarray(distance)
    full = sphere_volume(radius)
    h = jnp.clip(radius + distance, 0.0, 2.0 * radius)
    cap = jnp.pi * h * h * (3.0 * radius - h) / 3.0
    return jnp.where(distance >= radius, full, jnp.where(distance <= -radius, 0.0, cap))


def cap_centroid(
    radius: Float[Array, "*batch"],
    distance: Float[Array, "*batch"],
) -> tuple[Float[Array, "*batch"], Bool[Array, "*batch"]]:
    """Distance from the center to the centroid of the volume below a plane.

    The centroid lies along the negative plane normal. Returns the distance
    and a mask that is False where nothing lies below the plane (the distance
    is 0 there and should be ignored).
    """
    radius = jnp.asarray(radius)
    distance = jnp.asarray(distance)
    valid = distance > -radius
    h = jnp.clip(radius + distance, 0.0, 2.0 * radius)
    # 3r - h is zero only where the cap is empty, masked below
    denom = jnp.where(valid, 4.0 * (3.0 * radius - h), 1.0)
    c = 3.0 * (2.0 * radius - h) ** 2 / denom
    c = jnp.where(distance >= radius, 0.0, c)
    return jnp.where(valid, c, 0.0), valid


@jdc.pytree_dataclass
class SphereBatch:
    """A batch of spheres, each centered at the origin of its own frame.

    radius: (N,) radii
    density: (N,) material densities (negative means unset)
    """

    radius: jnp.ndarray
    density: jnp.ndarray

    @staticmethod
    def from_spheres(spheres: list["Sphere"]) -> "SphereBatch":
        return SphereBatch(
            radius=jnp.array([s.radius for s in spheres]),
            density=jnp.array([s.material.density for s in spheres]),
        )

    def volume(self) -> jax.Array:
        return sphere_volume(self.radius)

    def mass(self) -> jax.Array:
        """Mass per sphere; NaN where the density is unset."""
        return jnp.where(self.density > 0, self.density * self.volume(), jnp.nan)

    def volume_below(
        self,
        offset: Float[Array, "*batch"],
    ) -> jax.Array:
        """Volume below planes at signed ``offset`` from each center."""
        return cap_volume(self.radius, offset)

    def center_of_volume_below(
        self,
        normal: Float[Array, "*batch 3"],
        offset: Float[Array, "*batch"],
    ) -> tuple[jax.Array, jax.Array]:
        """Centroids of the volumes below planes ``(normal, offset)``.

        Returns:
            (N, 3) centroids relative to each center, and an (N,) mask that
            is False where the volume below is empty.
        """
        c, valid = cap_centroid(self.radius, offset)
        return -c[..., None] * jnp.asarray(normal), valid

    def buoyancy(
        self,
        fluid_density: float,
        offset: Float[Array, "*batch"],
        gravity: float = 9.81,
    ) -> jax.Array:
        """Magnitude of the buoyant force for a fluid surface at ``offset``."""
        return fluid_density * gravity * self.volume_below(offset)
