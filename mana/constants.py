import numpy as np


class Constants:
    """Default closeness thresholds, one per scalar type."""

    _EPSILON = {
        np.dtype(np.float32): 1e-5,
        np.dtype(np.float64): 1e-9,
    }

    @classmethod
    def epsilon(cls, scalar=np.float64) -> float:
        try:
            return cls._EPSILON[np.dtype(scalar)]
        except (KeyError, TypeError) as exc:
            raise TypeError(f"no default tolerance for scalar type {scalar!r}") from exc


EPS = Constants.epsilon(np.float64)
