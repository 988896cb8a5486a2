"""Solid sphere mass, inertia and plane-cut properties."""

from ._batch import SphereBatch as SphereBatch
from ._batch import cap_centroid as cap_centroid
from ._batch import cap_volume as cap_volume
from ._config import BallastConfig as BallastConfig
from ._config import MeshParams as MeshParams
from ._config import ToleranceParams as ToleranceParams
from ._mass_matrix import MassMatrix as MassMatrix
from ._material import INVALID_DENSITY as INVALID_DENSITY
from ._material import Material as Material
from ._material import MaterialType as MaterialType
from ._plane import Plane as Plane
from ._plane import PlaneSide as PlaneSide
from ._sphere import Sphere as Sphere

__version__ = "0.0.0"
