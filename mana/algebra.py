from abc import ABC, abstractmethod
from typing import TypeVar

import numpy as np

A = TypeVar("A", bound="AlgebraElement")
G = TypeVar("G", bound="GroupElement")


class AlgebraElement(ABC):
    """
    Element of a vector space equipped with a bilinear, antisymmetric bracket.

    Subclasses implement `add`, `scale`, `negate` and `bracket`; the
    arithmetic operators are defined on top of them.
    """

    @abstractmethod
    def add(self: A, rhs: A) -> A:
        pass

    @abstractmethod
    def scale(self: A, scalar: float) -> A:
        pass

    @abstractmethod
    def negate(self: A) -> A:
        pass

    @abstractmethod
    def bracket(self: A, rhs: A) -> A:
        pass

    def __add__(self, rhs):
        if not isinstance(rhs, type(self)):
            return NotImplemented
        return self.add(rhs)

    def __sub__(self, rhs):
        if not isinstance(rhs, type(self)):
            return NotImplemented
        return self.add(rhs.negate())

    def __neg__(self):
        return self.negate()

    def __mul__(self, scalar):
        if not np.isscalar(scalar):
            return NotImplemented
        return self.scale(scalar)

    __rmul__ = __mul__


class GroupElement(ABC):
    """
    Element of a group acting on some external point type.

    `g @ h` composes two elements, `g @ x` applies `g` to a numpy array `x`.
    """

    @classmethod
    @abstractmethod
    def identity(cls: type[G]) -> G:
        pass

    @abstractmethod
    def compose(self: G, rhs: G) -> G:
        pass

    @abstractmethod
    def inverse(self: G) -> G:
        pass

    @abstractmethod
    def act(self, point: np.ndarray) -> np.ndarray:
        pass

    def _check_same_group(self, rhs) -> None:
        if type(rhs) is not type(self):
            raise TypeError(
                f"cannot combine {type(self).__name__} with {type(rhs).__name__}"
            )

    def __matmul__(self, other):
        if isinstance(other, np.ndarray):
            return self.act(other)
        if isinstance(other, GroupElement):
            return self.compose(other)
        return NotImplemented
