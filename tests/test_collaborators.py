"""Tests for materials, mass matrices and planes."""

from __future__ import annotations

import jax_dataclasses as jdc
import numpy as np
import pytest

from ballast import (
    BallastConfig,
    MassMatrix,
    Material,
    MaterialType,
    MeshParams,
    Plane,
    PlaneSide,
    Sphere,
    ToleranceParams,
)


class TestMaterial:
    def test_default_density_is_unset(self):
        material = Material()
        assert material.type == MaterialType.UNKNOWN_MATERIAL
        assert material.name == ""
        assert material.density < 0

    @pytest.mark.parametrize(
        "material_type, density",
        [
            (MaterialType.STYROFOAM, 75.0),
            (MaterialType.PINE, 373.0),
            (MaterialType.WOOD, 700.0),
            (MaterialType.WATER, 1000.0),
            (MaterialType.TUNGSTEN, 19300.0),
        ],
    )
    def test_predefined_densities(self, material_type: MaterialType, density: float):
        material = Material.from_type(material_type)
        assert material.density == density
        assert material.name == material_type.value

    def test_from_name(self):
        assert Material.from_name("pine") == Material.from_type(MaterialType.PINE)

    def test_unknown_name_gives_default(self):
        assert Material.from_name("unobtainium") == Material()

    def test_unknown_type_gives_default(self):
        assert Material.from_type(MaterialType.UNKNOWN_MATERIAL) == Material()

    def test_from_density(self):
        material = Material.from_density(42.0)
        assert material.density == 42.0
        assert material.type == MaterialType.UNKNOWN_MATERIAL

    def test_predefined_excludes_unknown(self):
        predefined = Material.predefined()
        assert len(predefined) == len(MaterialType) - 1
        assert MaterialType.UNKNOWN_MATERIAL not in predefined

    def test_equality(self):
        assert Material.from_type(MaterialType.WOOD) == Material.from_type(MaterialType.WOOD)
        assert Material.from_type(MaterialType.WOOD) != Material.from_type(MaterialType.PINE)
        assert Material() != Material.from_type(MaterialType.WOOD)

    def test_density_equality_tolerance(self):
        a = Material.from_density(100.0)
        b = Material.from_density(100.0 + 1e-9)
        assert a == b
        b.set_density(100.1)
        assert a != b

    def test_mutators(self):
        material = Material()
        material.set_type(MaterialType.ICE)
        material.set_name("ice")
        material.set_density(916.0)
        assert material == Material.from_type(MaterialType.ICE)


class TestMassMatrix:
    def test_accessors(self):
        mass_matrix = MassMatrix(2.0, (1.0, 2.0, 3.0), (0.1, 0.2, 0.3))
        assert mass_matrix.mass == 2.0
        assert (mass_matrix.ixx, mass_matrix.iyy, mass_matrix.izz) == (1.0, 2.0, 3.0)
        assert (mass_matrix.ixy, mass_matrix.ixz, mass_matrix.iyz) == (0.1, 0.2, 0.3)
        np.testing.assert_array_equal(
            mass_matrix.moi,
            [[1.0, 0.1, 0.2], [0.1, 2.0, 0.3], [0.2, 0.3, 3.0]],
        )

    def test_wrong_shape_raises(self):
        with pytest.raises(ValueError):
            MassMatrix(1.0, (1.0, 1.0))

    def test_principal_moments(self):
        mass_matrix = MassMatrix(1.0, (3.0, 1.0, 2.0))
        np.testing.assert_allclose(mass_matrix.principal_moments(), [1.0, 2.0, 3.0])

    def test_isotropic_is_valid(self):
        mass_matrix = MassMatrix(1.0, (1.0, 1.0, 1.0))
        assert mass_matrix.is_positive()
        assert mass_matrix.is_valid()

    def test_triangle_inequality(self):
        mass_matrix = MassMatrix(1.0, (1.0, 1.0, 3.0))
        assert mass_matrix.is_positive()
        assert not mass_matrix.valid_moments()
        assert not mass_matrix.is_valid()

    def test_negative_mass_is_invalid(self):
        assert not MassMatrix(-1.0, (1.0, 1.0, 1.0)).is_valid()

    def test_zero_is_near_positive(self):
        mass_matrix = MassMatrix()
        assert mass_matrix.is_near_positive()
        assert not mass_matrix.is_positive()

    def test_set_from_sphere(self):
        mass_matrix = MassMatrix()
        assert mass_matrix.set_from_sphere(5.0, 2.0)
        assert mass_matrix.mass == 5.0
        np.testing.assert_allclose(mass_matrix.diagonal_moments, [8.0, 8.0, 8.0])
        np.testing.assert_allclose(mass_matrix.off_diagonal_moments, [0.0, 0.0, 0.0])

    @pytest.mark.parametrize("mass, radius", [(0.0, 1.0), (-1.0, 1.0), (1.0, 0.0)])
    def test_set_from_sphere_rejects(self, mass: float, radius: float):
        mass_matrix = MassMatrix(1.0, (1.0, 1.0, 1.0))
        assert not mass_matrix.set_from_sphere(mass, radius)
        assert mass_matrix == MassMatrix(1.0, (1.0, 1.0, 1.0))

    def test_set_from_sphere_material(self):
        mass_matrix = MassMatrix()
        assert mass_matrix.set_from_sphere_material(Material.from_density(3.0), 1.0)
        assert mass_matrix.mass == pytest.approx(4.0 * np.pi)

    def test_equality(self):
        a = MassMatrix(1.0, (1.0, 1.0, 1.0))
        b = a.copy()
        assert a == b
        b.set_mass(2.0)
        assert a != b


class TestPlane:
    def test_defaults(self):
        plane = Plane()
        np.testing.assert_array_equal(plane.normal, [0.0, 0.0, 1.0])
        assert plane.offset == 0.0
        np.testing.assert_array_equal(plane.size, [0.0, 0.0])

    @pytest.mark.parametrize(
        "normal, size",
        [((0.0, 1.0), (1.0, 1.0)), ((0.0, 0.0, 1.0), (1.0, 1.0, 1.0))],
    )
    def test_wrong_shape_raises(self, normal, size):
        with pytest.raises(ValueError):
            Plane(normal, 0.0, size)

    def test_distance_and_side(self):
        plane = Plane((0, 0, 1), 1.0)
        assert plane.distance((0, 0, 3)) == 2.0
        assert plane.distance((5, 5, 0)) == -1.0
        assert plane.side((0, 0, 3)) == PlaneSide.POSITIVE_SIDE
        assert plane.side((0, 0, 0)) == PlaneSide.NEGATIVE_SIDE
        assert plane.side((1, 2, 1)) == PlaneSide.NO_SIDE

    def test_from_point_normal(self):
        plane = Plane.from_point_normal(np.array([3.0, 1.0, 2.0]), np.array([0.0, 0.0, 5.0]))
        np.testing.assert_allclose(plane.normal, [0.0, 0.0, 1.0])
        assert plane.offset == pytest.approx(2.0)

    def test_from_point_zero_normal_raises(self):
        with pytest.raises(ValueError):
            Plane.from_point_normal(np.zeros(3), np.zeros(3))

    def test_flipped(self):
        plane = Plane((0, 1, 0), 0.5, size=(2, 3))
        flipped = plane.flipped()
        assert flipped == Plane((0, -1, 0), -0.5, size=(2, 3))
        point = np.array([0.3, 0.9, -1.0])
        assert flipped.distance(point) == pytest.approx(-plane.distance(point))

    def test_accessors_return_copies(self):
        plane = Plane((0, 0, 1), 0.0)
        normal = plane.normal
        normal[2] = 5.0
        np.testing.assert_array_equal(plane.normal, [0.0, 0.0, 1.0])


class TestConfig:
    """A replaced config changes comparisons, validity and mesh export."""

    def test_default_config_matches_plain_equality(self):
        a = Material.from_density(1.0)
        b = Material.from_density(1.0 + 1e-8)
        assert a == b
        assert a.equals(b, BallastConfig())

    def test_tight_equality_tolerance(self):
        config = BallastConfig(tolerance=ToleranceParams(equality=1e-9))
        a = Material.from_density(1.0)
        b = Material.from_density(1.0 + 1e-8)
        assert not a.equals(b, config)
        assert not Sphere(1.0, a).equals(Sphere(1.0, b), config)
        assert Sphere(1.0, a).equals(Sphere(1.0, b))

    def test_loose_equality_tolerance(self):
        config = jdc.replace(
            BallastConfig(),
            tolerance=jdc.replace(BallastConfig().tolerance, equality=0.5),
        )
        a = MassMatrix(1.0, (1.0, 1.0, 1.0))
        b = MassMatrix(1.2, (1.1, 1.1, 1.1))
        assert a != b
        assert a.equals(b, config)
        assert Plane((0, 0, 1), 0.0).equals(Plane((0, 0, 1), 0.3), config)
        assert Plane((0, 0, 1), 0.0) != Plane((0, 0, 1), 0.3)

    def test_mass_matrix_tolerance(self):
        """Triangle inequality violated by 1e-13 on moments of about 2."""
        mass_matrix = MassMatrix(1.0, (1.0, 1.0, 2.0 + 1e-13))
        assert not mass_matrix.is_valid()

        loose = BallastConfig(tolerance=ToleranceParams(mass_matrix=1e3))
        assert mass_matrix.is_valid(loose)

    def test_set_from_sphere_uses_config(self):
        strict = BallastConfig(tolerance=ToleranceParams(mass_matrix=0.0))
        mass_matrix = MassMatrix()
        assert mass_matrix.set_from_sphere(1.0, 1.0, strict)
        assert Sphere(1.0, Material.from_density(1.0)).mass_matrix(strict) is not None

    def test_mesh_subdivisions(self):
        config = BallastConfig(mesh=MeshParams(subdivisions=2))
        assert len(Sphere(1.0).to_trimesh(config=config).faces) == 320
        assert len(Sphere(1.0).to_trimesh(subdivisions=1, config=config).faces) == 80
