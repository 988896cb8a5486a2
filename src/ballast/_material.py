"""Material presets carrying a density."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from loguru import logger

from ._config import BallastConfig, DEFAULT_CONFIG


class MaterialType(Enum):
    """Predefined materials. Values are the lookup names."""

    STYROFOAM = "styrofoam"
    PINE = "pine"
    WOOD = "wood"
    OAK = "oak"
    ICE = "ice"
    WATER = "water"
    PLASTIC = "plastic"
    CONCRETE = "concrete"
    ALUMINUM = "aluminum"
    STEEL_ALLOY = "steel_alloy"
    STEEL_STAINLESS = "steel_stainless"
    IRON = "iron"
    BRASS = "brass"
    COPPER = "copper"
    TUNGSTEN = "tungsten"
    UNKNOWN_MATERIAL = "unknown"


# Densities in kg/m^3
_DENSITIES: dict[MaterialType, float] = {
    MaterialType.STYROFOAM: 75.0,
    MaterialType.PINE: 373.0,
    MaterialType.WOOD: 700.0,
    MaterialType.OAK: 760.0,
    MaterialType.ICE: 916.0,
    MaterialType.WATER: 1000.0,
    MaterialType.PLASTIC: 1175.0,
    MaterialType.CONCRETE: 2000.0,
    MaterialType.ALUMINUM: 2700.0,
    MaterialType.STEEL_ALLOY: 7600.0,
    MaterialType.STEEL_STAINLESS: 7800.0,
    MaterialType.IRON: 7870.0,
    MaterialType.BRASS: 8600.0,
    MaterialType.COPPER: 8940.0,
    MaterialType.TUNGSTEN: 19300.0,
}

# Negative densities mark a density as unset or invalid
INVALID_DENSITY = -1.0


@dataclass(eq=False)
class Material:
    """A material described by type, name and density.

    The default material is ``UNKNOWN_MATERIAL`` with a negative density,
    which marks the density as unset.
    """

    type: MaterialType = MaterialType.UNKNOWN_MATERIAL
    name: str = ""
    density: float = INVALID_DENSITY

    @classmethod
    def from_type(cls, material_type: MaterialType) -> "Material":
        """Create a predefined material. ``UNKNOWN_MATERIAL`` gives the default."""
        if material_type not in _DENSITIES:
            return cls()
        return cls(
            type=material_type,
            name=material_type.value,
            density=_DENSITIES[material_type],
        )

    @classmethod
    def from_name(cls, name: str) -> "Material":
        """Look up a predefined material by its name (e.g. ``"pine"``)."""
        try:
            material_type = MaterialType(name)
        except ValueError:
            logger.warning(f"Unknown material name '{name}', using default material")
            return cls()
        return cls.from_type(material_type)

    @classmethod
    def from_density(cls, density: float) -> "Material":
        """Create an unnamed material of the given density."""
        return cls(density=float(density))

    @staticmethod
    def predefined() -> dict[MaterialType, "Material"]:
        """All predefined materials keyed by type."""
        return {t: Material.from_type(t) for t in _DENSITIES}

    def set_density(self, density: float) -> None:
        self.density = float(density)

    def set_name(self, name: str) -> None:
        self.name = name

    def set_type(self, material_type: MaterialType) -> None:
        self.type = material_type

    def copy(self) -> "Material":
        return Material(type=self.type, name=self.name, density=self.density)

    def equals(self, other: "Material", config: BallastConfig | None = None) -> bool:
        """Same type and name, densities within ``config.tolerance.equality``."""
        tol = (config or DEFAULT_CONFIG).tolerance.equality
        return (
            self.type == other.type
            and self.name == other.name
            and abs(self.density - other.density) <= tol
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return self.equals(other)
