"""
Rotate a tesseract in the xw plane and print its projected vertices.

Each vertex is rotated in 4-space, then perspective-projected to 3-space
with the eye at w = 3. The depth scalar t shows how far along w each
vertex sits after rotation.
"""
import math

from polychoron import generate, project, rotate_all

P = generate("8-cell", size=1.0)
rotated = rotate_all(P.vertices, {"xw": math.pi / 6})

print(f"8-cell: {len(P.vertices)} vertices, {len(P.edges)} edges")
for v, r in zip(P.vertices, rotated):
    p = project(r, distance=3.0)
    print(f"{tuple(v)} -> ({p.x:+.3f}, {p.y:+.3f}, {p.z:+.3f})  t={p.t:.3f}")
