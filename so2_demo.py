import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from mana import SO2

# --- Helper functions ---

def animate_SO2_geodesic(begin_angle=0.0, end_angle=np.pi / 4, extrapolate_to=3.0):
    """
    Sweep along the geodesic between two rotations, past its end point to
    show extrapolation.
    """
    begin = SO2.from_angle(begin_angle)
    end = SO2.from_angle(end_angle)
    geodesic = begin.geodesic_to(end)

    fig, ax = plt.subplots()
    ax.set_xlim(-1.5, 1.5)
    ax.set_ylim(-1.5, 1.5)
    ax.set_aspect('equal')
    ax.grid()
    circle = plt.Circle((0, 0), 1.0, color='k', fill=False)
    ax.add_artist(circle)

    x_axis = np.array([1.0, 0.0])
    for R, style in [(begin, 'g--'), (end, 'b--')]:
        tip = R @ x_axis
        ax.plot([0, tip[0]], [0, tip[1]], style, lw=1)
    arrow, = ax.plot([], [], 'r-', lw=3)
    label = ax.text(-1.4, 1.3, '')

    def init():
        arrow.set_data([], [])
        label.set_text('')
        return (arrow, label)

    def update(fraction):
        R = geodesic.interpolate(fraction)
        tip = R @ x_axis
        arrow.set_data([0, tip[0]], [0, tip[1]])
        mode = 'interpolate' if 0.0 <= fraction <= 1.0 else 'extrapolate'
        label.set_text(f"t = {fraction:.2f} ({mode}), angle = {R.angle:.2f}")
        return (arrow, label)

    frames = np.linspace(0.0, extrapolate_to, 120)
    ani = FuncAnimation(fig, update, frames=frames, init_func=init, blit=True, interval=30)
    plt.title(f"SO(2) geodesic, length {geodesic.length():.2f} rad")
    plt.show()
    return ani


def animate_SO2_chart(origin_angle=np.pi / 3):
    """Walk the chart at `origin_angle` out past its injectivity radius."""
    chart = SO2.from_angle(origin_angle).local_chart()

    fig, (ax_circle, ax_chart) = plt.subplots(1, 2, figsize=(10, 5))
    ax_circle.set_xlim(-1.5, 1.5)
    ax_circle.set_ylim(-1.5, 1.5)
    ax_circle.set_aspect('equal')
    ax_circle.grid()
    dot, = ax_circle.plot([], [], 'ro')

    ts = np.linspace(-2 * np.pi, 2 * np.pi, 200)
    recovered = [chart.to_tangent(chart.to_manifold(np.array([t])))[0] for t in ts]
    ax_chart.plot(ts, ts, 'k--', lw=1, label='tangent')
    ax_chart.plot(ts, recovered, 'b-', label='to_tangent(to_manifold(t))')
    ax_chart.axvspan(-np.pi, np.pi, color='g', alpha=0.1)
    ax_chart.legend()
    marker, = ax_chart.plot([], [], 'ro')

    def update(i):
        t = ts[i]
        R = chart.to_manifold(np.array([t]))
        tip = R @ np.array([1.0, 0.0])
        dot.set_data([tip[0]], [tip[1]])
        marker.set_data([t], [recovered[i]])
        return (dot, marker)

    ani = FuncAnimation(fig, update, frames=len(ts), blit=True, interval=30)
    fig.suptitle("SO(2) chart")
    plt.show()
    return ani


if __name__ == "__main__":
    animate_SO2_geodesic()
    animate_SO2_chart()
