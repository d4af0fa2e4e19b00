import numpy as np


def wrap_angle(theta):
    """
    Wrap an angle (or array of angles) into the principal range (-pi, pi].

    Angles already in range are returned unchanged.
    """
    theta = np.asarray(theta)
    outside = (theta > np.pi) | (theta <= -np.pi)
    wrapped = np.where(outside, np.mod(theta + np.pi, 2 * np.pi) - np.pi, theta)
    # np.mod lands on [-pi, pi); the -pi end belongs to +pi
    wrapped = np.where(wrapped <= -np.pi, wrapped + 2 * np.pi, wrapped)
    if wrapped.ndim == 0:
        return wrapped.item()
    return wrapped


def angle_diff(lhs, rhs):
    """Shortest signed angle taking `rhs` to `lhs`, in (-pi, pi]."""
    return wrap_angle(np.asarray(lhs) - np.asarray(rhs))
