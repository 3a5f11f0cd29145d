"""
Animate a polytope from a randomness seed.

The seed (for example the hex randomness of a public beacon round)
fixes the starting rotation, the hue and, in auto mode, the shape.
"""
import matplotlib.pyplot as plt

from polychoron import animate_polytope, seed_scene

seed = "8f9e1a0b4c7d2e3f5061728394a5b6c7d8e9f00112233445566778899aabbccd"

scene = seed_scene(seed, shape="24-cell")
print(f"shape: {scene.shape.value}, hue: {scene.hue}")
print(f"base angles: {scene.angles}")

fig, ax, anim = animate_polytope(scene, frames=400, interval=30, speed=1.5,
                                 figsize=(7, 7))
plt.show()
