from abc import abstractmethod
from typing import Optional, TypeVar, Union

import numpy as np

from .algebra import AlgebraElement, GroupElement
from .constants import Constants
from .manifold import ManifoldElement

L = TypeVar("L", bound="LieAlgebraElement")
X = TypeVar("X", bound="LieGroupElement")


class LieAlgebraElement(AlgebraElement):
    """
    Element of the Lie algebra of a Lie group, i.e. the tangent space at the
    identity, stored as its coefficient vector of length `N`.

    `hat` maps the coefficients to the group's native generator (e.g. a skew
    symmetric matrix) and `vee` maps a generator back to coefficients.
    """

    N: int

    def __init__(self, vector):
        v = np.array(vector)
        if not np.issubdtype(v.dtype, np.floating):
            v = v.astype(np.float64)
        self._check_hat_input(v)
        v.flags.writeable = False
        object.__setattr__(self, "_vector", v)

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def _check_hat_input(cls, v: np.ndarray) -> None:
        assert isinstance(v, np.ndarray), f"hat input must be np.ndarray, got {type(v)}"
        assert v.shape == (cls.N,), f"hat expects shape ({cls.N},), got {v.shape}"

    @classmethod
    def _check_vee_output(cls, out: np.ndarray) -> None:
        assert isinstance(out, np.ndarray), f"vee output must be np.ndarray, got {type(out)}"
        assert out.shape == (cls.N,), f"vee must return shape ({cls.N},), got {out.shape}"

    @abstractmethod
    def hat(self) -> np.ndarray:
        pass

    @classmethod
    @abstractmethod
    def vee(cls, generator: np.ndarray) -> np.ndarray:
        pass

    @classmethod
    def from_generator(cls: type[L], generator: np.ndarray) -> L:
        return cls(cls.vee(generator))

    @classmethod
    def zero(cls: type[L], dtype=np.float64) -> L:
        return cls(np.zeros(cls.N, dtype=dtype))

    @property
    def vector(self) -> np.ndarray:
        return self._vector

    def add(self: L, rhs: L) -> L:
        return type(self)(self._vector + rhs.vector)

    def scale(self: L, scalar: float) -> L:
        return type(self)(self._vector * scalar)

    def negate(self: L) -> L:
        return type(self)(-self._vector)

    def bracket(self: L, rhs: L) -> L:
        # matrix commutator of the generators
        A = self.hat()
        B = rhs.hat()
        return type(self).from_generator(A @ B - B @ A)

    def is_close(self: L, rhs: L, tolerance: Optional[float] = None) -> bool:
        if tolerance is None:
            tolerance = Constants.epsilon(self._vector.dtype)
        return np.linalg.norm(self._vector - rhs.vector) < tolerance

    def __array__(self, dtype=None, copy=None):
        return np.asarray(self._vector, dtype=dtype)

    def __repr__(self):
        return f"{type(self).__name__}({self._vector.tolist()})"


class LieGroupElement(GroupElement, ManifoldElement):
    """
    Element of a Lie group: a group whose elements also form a manifold.

    The manifold tangent space at any element is identified with the Lie
    algebra through right translation, so charts, geodesics, interpolation
    and distances are all expressed with `exp` and `log`:

        oplus(v)     = self @ exp(v)
        ominus(rhs)  = log(self^-1 @ rhs)

    Subclasses set `Algebra` to their LieAlgebraElement type and implement
    `exp`, `log`, `left_jacobian` and `left_jacobian_inverse` on top of the
    group and manifold methods.
    """

    Algebra: type[LieAlgebraElement]

    @classmethod
    def _tangent(cls, v: Union[np.ndarray, LieAlgebraElement]) -> np.ndarray:
        if isinstance(v, LieAlgebraElement):
            assert isinstance(v, cls.Algebra), (
                f"{cls.__name__} expects {cls.Algebra.__name__}, got {type(v).__name__}"
            )
            return v.vector
        v = np.asarray(v)
        assert v.shape == (cls.N,), f"tangent vector must have shape ({cls.N},), got {v.shape}"
        return v

    @classmethod
    @abstractmethod
    def exp(cls: type[X], v: Union[np.ndarray, LieAlgebraElement]) -> X:
        """Exponential map from the Lie algebra to the group."""

    @abstractmethod
    def log(self) -> np.ndarray:
        """Logarithm map to the tangent vector at the identity."""

    @classmethod
    @abstractmethod
    def left_jacobian(cls, v: np.ndarray) -> np.ndarray:
        pass

    @classmethod
    @abstractmethod
    def left_jacobian_inverse(cls, v: np.ndarray) -> np.ndarray:
        pass

    @classmethod
    def right_jacobian(cls, v: np.ndarray) -> np.ndarray:
        return cls.left_jacobian(-np.asarray(v))

    @classmethod
    def right_jacobian_inverse(cls, v: np.ndarray) -> np.ndarray:
        return cls.left_jacobian_inverse(-np.asarray(v))

    def log_algebra(self) -> LieAlgebraElement:
        return self.Algebra(self.log())

    def adjoint(self) -> np.ndarray:
        """
        Matrix Ad such that self @ exp(v) == exp(Ad @ v) @ self.

        The default conjugates each algebra basis generator by the embedding
        matrix, which is correct for matrix Lie groups.
        """
        G = self.point
        G_inv = self.inverse().point
        columns = [
            self.Algebra.vee(G @ self.Algebra(e).hat() @ G_inv)
            for e in np.eye(self.N, dtype=self.scalar)
        ]
        return np.stack(columns, axis=1)

    def oplus(self: X, v: Union[np.ndarray, LieAlgebraElement]) -> X:
        return self.compose(type(self).exp(v))

    def ominus(self: X, rhs: X) -> np.ndarray:
        self._check_same_group(rhs)
        return self.inverse().compose(rhs).log()

    def retract(self: X, tangent: np.ndarray) -> X:
        return self.oplus(tangent)

    def local_coordinates(self: X, rhs: X) -> np.ndarray:
        return self.ominus(rhs)

    def distance_to(self: X, rhs: X) -> float:
        return float(np.linalg.norm(self.ominus(rhs)))

    def interpolate(self: X, rhs: X, fraction: float) -> X:
        return self.oplus(fraction * self.ominus(rhs))

    def normalized(self: X) -> X:
        """Re-project the stored point onto the manifold to remove drift."""
        return type(self).from_point(type(self).project(self.point))

    @classmethod
    def randn(cls: type[X], *, scale: float = 1.0, cov: Optional[np.ndarray] = None) -> X:
        if cov is not None:
            assert isinstance(cov, np.ndarray) and np.issubdtype(cov.dtype, np.floating)
            assert cov.shape == (cls.N, cls.N)
            v = np.random.multivariate_normal(np.zeros((cls.N,)), cov)
        else:
            v = np.random.randn(cls.N) * scale
        return cls.exp(v)

    @classmethod
    def randu(cls: type[X]) -> X:
        raise NotImplementedError(f"{cls.__name__} must override randu() if it supports uniform sampling.")
