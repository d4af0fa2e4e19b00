import logging
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

import numpy as np

from .constants import Constants

logger = logging.getLogger(__name__)

M = TypeVar("M", bound="ManifoldElement")


class ManifoldElement(ABC):
    """
    Element of a differentiable manifold embedded in a larger ambient space.

    Points are stored extrinsically as an embedding point, e.g. a 2x2 matrix for
    planar rotations. Elements are immutable values; every operation returns a
    new element.

    Subclasses must provide
        N: dimension of the manifold (length of a tangent vector)
        EMBEDDING_DIM: dimension of the ambient space
    and implement `from_point`, `project`, `is_valid`, `point`,
    `distance_to`, `interpolate`, `retract` and `local_coordinates`.
    """

    N: int
    EMBEDDING_DIM: int
    # Tangent vectors longer than this may not map back one-to-one.
    INJECTIVITY_RADIUS: float = np.inf

    @classmethod
    @abstractmethod
    def from_point(cls: type[M], point: np.ndarray) -> M:
        """
        Construct from a point in the embedding space.

        The point is assumed to lie on the manifold and is not checked. Use
        `project` first, or `is_valid`, when that is not already known.
        """

    @classmethod
    @abstractmethod
    def project(cls, point: np.ndarray) -> np.ndarray:
        """Map an arbitrary ambient point to the nearest point on the manifold."""

    @classmethod
    @abstractmethod
    def is_valid(cls, point: np.ndarray, tolerance: Optional[float] = None) -> bool:
        """
        Check whether `point` satisfies the manifold constraints within
        `tolerance` (defaults to the tolerance of the point's scalar type).
        """

    @property
    @abstractmethod
    def point(self) -> np.ndarray:
        pass

    @abstractmethod
    def distance_to(self: M, rhs: M) -> float:
        pass

    @abstractmethod
    def interpolate(self: M, rhs: M, fraction: float) -> M:
        """
        Move along the geodesic from this element towards `rhs`.

        A fraction of 0 gives this element and 1 gives `rhs`. Fractions outside
        [0, 1] extrapolate along the same geodesic.
        """

    @abstractmethod
    def retract(self: M, tangent: np.ndarray) -> M:
        """Map a tangent vector at this element onto the manifold."""

    @abstractmethod
    def local_coordinates(self: M, rhs: M) -> np.ndarray:
        """Tangent vector at this element pointing to `rhs`; inverse of `retract`."""

    @property
    def scalar(self) -> np.dtype:
        return self.point.dtype

    def default_tolerance(self) -> float:
        return Constants.epsilon(self.scalar)

    def geodesic_to(self: M, rhs: M) -> "ManifoldGeodesic[M]":
        return ManifoldGeodesic(self, rhs)

    def local_chart(self: M) -> "ManifoldChart[M]":
        return ManifoldChart(self)

    def tangent_space_basis(self) -> list[np.ndarray]:
        """Coordinate basis of the tangent space at this element."""
        return list(np.eye(self.N, dtype=self.scalar))

    def equal_to(self: M, rhs: M, tolerance: Optional[float] = None) -> bool:
        if tolerance is None:
            tolerance = self.default_tolerance()
        return self.distance_to(rhs) < tolerance

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.equal_to(other)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # tolerance equality is not transitive, so elements cannot be hashed
    __hash__ = None


class ManifoldChart(Generic[M]):
    """
    Local linear parameterization of a manifold around an origin element.

    The zero tangent vector maps to the origin. `to_tangent` and `to_manifold`
    are mutual inverses for tangent vectors within the manifold's injectivity
    radius.
    """

    __slots__ = ("_origin",)

    def __init__(self, origin: M):
        self._origin = origin

    @property
    def origin(self) -> M:
        return self._origin

    def to_tangent(self, element: M) -> np.ndarray:
        return self._origin.local_coordinates(element)

    def to_manifold(self, tangent: np.ndarray) -> M:
        radius = self._origin.INJECTIVITY_RADIUS
        if np.linalg.norm(tangent) > radius:
            logger.debug(
                "tangent vector %s exceeds the injectivity radius %g of %s; "
                "to_tangent will not recover it",
                tangent,
                radius,
                type(self._origin).__name__,
            )
        return self._origin.retract(tangent)

    def __repr__(self):
        return f"{type(self).__name__}(origin={self._origin!r})"


class ManifoldGeodesic(Generic[M]):
    """Geodesic curve from `begin` to `end`."""

    __slots__ = ("_begin", "_end")

    def __init__(self, begin: M, end: M):
        self._begin = begin
        self._end = end

    @property
    def begin(self) -> M:
        return self._begin

    @property
    def end(self) -> M:
        return self._end

    def interpolate(self, fraction: float) -> M:
        """
        Point at `fraction` along the geodesic. Values in [0, 1] interpolate,
        values outside that range extrapolate.
        """
        return self._begin.interpolate(self._end, fraction)

    def length(self) -> float:
        return self._begin.distance_to(self._end)

    def __repr__(self):
        return f"{type(self).__name__}(begin={self._begin!r}, end={self._end!r})"
