"""
Plot the four regular polytopes side by side.

The same rotation is applied to every shape so the wireframes can be
compared directly.
"""
import matplotlib.pyplot as plt

from polychoron import DISPLAY_SCALES, RotationAngles, Shape, generate
from polychoron import plot_polytope

angles = RotationAngles(xy=0.4, xw=0.6, yz=0.2, zw=0.3)

fig = plt.figure(figsize=(12, 3.5), facecolor='#0b0e14')
for k, shape in enumerate(Shape):
    ax = fig.add_subplot(1, 4, k + 1, projection='3d')
    P = generate(shape, DISPLAY_SCALES[shape])
    plot_polytope(P, angles, ax=ax, extent=2.2)
    ax.set_title(f"{shape.value}: V={len(P.vertices)} E={len(P.edges)}",
                 color='w')

plt.tight_layout()
plt.show()
