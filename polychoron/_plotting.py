"""Wireframe plotting of projected polytopes with matplotlib."""
import colorsys

import numpy
from matplotlib import pyplot
from matplotlib.animation import FuncAnimation
from mpl_toolkits.mplot3d.art3d import Line3DCollection

from polychoron._projection import DEFAULT_PERSPECTIVE_DISTANCE
from polychoron._rotation import RotationAngles
from polychoron._scene import edge_segments, frame_angles

# Hue shift across the full depth range, as a fraction of the colour wheel
DEPTH_HUE_SPAN = 0.15
SATURATION = 0.7
LIGHTNESS = 0.6
BACKGROUND = '#0b0e14'


def edge_colors(depths, hue):
    """RGB colour per segment endpoint, shifting hue with depth.

    :param depths: array (E, 2) of depth scalars in [0, 1]
    :param hue: base hue in degrees
    :return: array (E, 2, 3) of RGB values in [0, 1]
    """
    depths = numpy.asarray(depths, dtype=float)
    h = (hue / 360.0 + depths * DEPTH_HUE_SPAN) % 1.0
    rgb = [colorsys.hls_to_rgb(hi, LIGHTNESS, SATURATION) for hi in h.ravel()]
    return numpy.array(rgb).reshape(depths.shape + (3,))


def _segment_collection(positions, depths, hue, linewidth):
    colors = edge_colors(depths, hue)
    # Line3DCollection takes one colour per segment; use the mean of the
    # two endpoints
    return Line3DCollection(positions, colors=colors.mean(axis=1),
                            linewidths=linewidth)


def _setup_axes(ax, extent):
    ax.set_xlim(-extent, extent)
    ax.set_ylim(-extent, extent)
    ax.set_zlim(-extent, extent)
    ax.set_facecolor(BACKGROUND)
    ax.set_axis_off()


def plot_polytope(polytope, angles=None, distance=DEFAULT_PERSPECTIVE_DISTANCE,
                  ax=None, hue=210, linewidth=1.5, extent=None):
    """
    Plot the projected wireframe of a polytope.

    :param polytope: Polytope to draw
    :param angles: RotationAngles (or mapping) applied before projection,
                   defaults to no rotation
    :param distance: perspective distance along w
    :param ax: existing 3D axes, a new figure is created if None
    :param hue: base hue in degrees
    :return: fig, ax
    """
    if angles is None:
        angles = RotationAngles()
    if ax is None:
        fig = pyplot.figure(facecolor=BACKGROUND)
        ax = fig.add_subplot(1, 1, 1, projection='3d')
    else:
        fig = ax.figure

    positions, depths = edge_segments(polytope, angles, distance)
    ax.add_collection3d(_segment_collection(positions, depths, hue, linewidth))

    if extent is None:
        extent = float(numpy.abs(positions).max()) if positions.size else 1.0
    _setup_axes(ax, extent)
    return fig, ax


def animate_polytope(scene, frames=200, interval=50, speed=1.0,
                     distance=DEFAULT_PERSPECTIVE_DISTANCE, linewidth=1.5,
                     figsize=None):
    """
    Animate a seeded scene rotating over time.

    Frame ``n`` shows the scene angles advanced by ``n * interval`` ms of
    rotation at ``speed``.

    :return: fig, ax, anim (matplotlib.animation.FuncAnimation)
    """
    fig = pyplot.figure(figsize=figsize, facecolor=BACKGROUND)
    ax = fig.add_subplot(1, 1, 1, projection='3d')

    # Vertex norm bounds every rotation; the projected extent at w = norm
    # bounds every frame unless w can reach the eye point
    radius = max((numpy.linalg.norm(v) for v in scene.polytope.vertices),
                 default=1.0)
    k = distance / (distance - radius) if distance > radius else 1.0
    _setup_axes(ax, radius * k)

    collection = _segment_collection(
        *edge_segments(scene.polytope, scene.angles, distance),
        scene.hue, linewidth)
    ax.add_collection3d(collection)

    def update(frame):
        angles = frame_angles(scene.angles, frame * interval / 1000.0, speed)
        positions, depths = edge_segments(scene.polytope, angles, distance)
        collection.set_segments(positions)
        collection.set_color(edge_colors(depths, scene.hue).mean(axis=1))
        return collection,

    anim = FuncAnimation(fig, update, frames=frames, interval=interval)
    return fig, ax, anim
