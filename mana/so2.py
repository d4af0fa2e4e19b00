import logging
from typing import Optional, Union

import numpy as np

from .angles import angle_diff, wrap_angle
from .constants import Constants
from .lie import LieAlgebraElement, LieGroupElement

logger = logging.getLogger(__name__)


class SO2Algebra(LieAlgebraElement):
    """so(2): a single rotation rate, with generator [[0, -w], [w, 0]]."""

    N: int = 1

    def hat(self) -> np.ndarray:
        w = self.vector
        return np.array([
            [   0, -w[0]],
            [w[0],     0],
        ], dtype=w.dtype)

    @classmethod
    def vee(cls, wx: np.ndarray) -> np.ndarray:
        w = np.array([wx[1, 0]])
        cls._check_vee_output(w)
        return w

    def bracket(self, rhs: "SO2Algebra") -> "SO2Algebra":
        # so(2) is abelian
        return type(self)(np.zeros_like(self.vector))


class SO2(LieGroupElement):
    """
    Planar rotations, stored as 2x2 rotation matrices.

    Tangent vectors are 1-vectors holding the rotation angle in radians.
    """

    N: int = 1
    EMBEDDING_DIM: int = 2
    INJECTIVITY_RADIUS: float = np.pi
    Algebra = SO2Algebra

    def __init__(self, R: np.ndarray):
        R = np.array(R)
        if not np.issubdtype(R.dtype, np.floating):
            R = R.astype(np.float64)
        R.flags.writeable = False
        object.__setattr__(self, "_R", R)

    def __setattr__(self, key, value):
        raise AttributeError("SO2 is immutable")

    def __repr__(self):
        return f"SO2(angle={self.angle!r})"

    # Construction

    @classmethod
    def from_angle(cls, theta: float, dtype=np.float64) -> "SO2":
        c, s = np.cos(theta), np.sin(theta)
        return cls(np.array([
            [c, -s],
            [s,  c],
        ], dtype=dtype))

    @classmethod
    def from_point(cls, point: np.ndarray) -> "SO2":
        return cls(point)

    @classmethod
    def identity(cls, dtype=np.float64) -> "SO2":
        return cls(np.eye(2, dtype=dtype))

    @classmethod
    def randu(cls) -> "SO2":
        return cls.from_angle(np.random.uniform(-np.pi, np.pi))

    # Manifold

    @classmethod
    def project(cls, point: np.ndarray) -> np.ndarray:
        """
        Orthonormalize a 2x2 matrix: normalize its first column and complete it
        with the perpendicular column.
        """
        point = np.asarray(point)
        dtype = point.dtype if np.issubdtype(point.dtype, np.floating) else np.float64
        c = point[:, 0].astype(dtype)
        # rescale first so tiny columns do not underflow
        scale = np.max(np.abs(c))
        if scale == 0 or not np.isfinite(scale):
            logger.debug("cannot orthonormalize %s; projecting to identity", point.tolist())
            return np.eye(2, dtype=dtype)
        c = c / scale
        c = c / np.linalg.norm(c)
        return np.array([
            [c[0], -c[1]],
            [c[1],  c[0]],
        ], dtype=dtype)

    @classmethod
    def is_valid(cls, point: np.ndarray, tolerance: Optional[float] = None) -> bool:
        point = np.asarray(point)
        if point.shape != (2, 2):
            return False
        if not np.issubdtype(point.dtype, np.floating):
            point = point.astype(np.float64)
        if tolerance is None:
            tolerance = Constants.epsilon(point.dtype)
        orthogonality = np.linalg.norm(point.T @ point - np.eye(2))
        return bool(orthogonality < tolerance and abs(np.linalg.det(point) - 1) < tolerance)

    @property
    def point(self) -> np.ndarray:
        return self._R

    @property
    def angle(self) -> float:
        """Rotation angle in (-pi, pi]."""
        return wrap_angle(np.arctan2(self._R[1, 0], self._R[0, 0]))

    def distance_to(self, rhs: "SO2") -> float:
        self._check_same_group(rhs)
        return abs(angle_diff(rhs.angle, self.angle))

    # Group

    def compose(self, rhs: "SO2") -> "SO2":
        self._check_same_group(rhs)
        return SO2.from_angle(self.angle + rhs.angle, dtype=self.scalar)

    def inverse(self) -> "SO2":
        return SO2.from_angle(-self.angle, dtype=self.scalar)

    def act(self, point: np.ndarray) -> np.ndarray:
        """Rotate a 2-vector, or each column of a 2xM array."""
        return self._R @ point

    # Lie group

    @classmethod
    def exp(cls, v: Union[np.ndarray, SO2Algebra]) -> "SO2":
        v = cls._tangent(v)
        return cls.from_angle(v[0], dtype=np.result_type(v.dtype, np.float32))

    def log(self) -> np.ndarray:
        return np.array([self.angle], dtype=self.scalar)

    def adjoint(self) -> np.ndarray:
        return np.eye(1, dtype=self.scalar)

    @classmethod
    def left_jacobian(cls, v: np.ndarray) -> np.ndarray:
        return np.eye(1)

    @classmethod
    def left_jacobian_inverse(cls, v: np.ndarray) -> np.ndarray:
        return np.eye(1)
