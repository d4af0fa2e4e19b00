"""
mana: Lie groups, Lie algebras and manifolds for geometric state.
"""

from .algebra import AlgebraElement, GroupElement
from .angles import angle_diff, wrap_angle
from .constants import EPS, Constants
from .lie import LieAlgebraElement, LieGroupElement
from .manifold import ManifoldChart, ManifoldElement, ManifoldGeodesic
from .so2 import SO2, SO2Algebra

__all__ = [
    "AlgebraElement",
    "GroupElement",
    "ManifoldElement",
    "ManifoldChart",
    "ManifoldGeodesic",
    "LieAlgebraElement",
    "LieGroupElement",
    "SO2",
    "SO2Algebra",
    "Constants",
    "EPS",
    "wrap_angle",
    "angle_diff",
]
