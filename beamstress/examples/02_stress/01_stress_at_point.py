"""
Example 01:
Stresses at a point of a rectangular section

A rectangle 50 mm × 100 mm carries an axial force, a bending moment, a
torque and a transverse shear force. The stresses are evaluated 25 mm above
the neutral axis:

    σ_N = N / A
    σ_M = M * y / I
    τ_T = T * |y| / J
    τ_V = V * Q(y) / (I * t)
"""

from beamstress.core.preprocessing import (
    LoadSet, RectangleDimensions, SectionVariant
)
from beamstress.core.postprocessing import (
    compute_first_moment, compute_section_properties, compute_stresses
)


# 1. Section and loads (SI units)
variant = SectionVariant.RECTANGLE
dims = RectangleDimensions(b=0.05, h=0.1)
loads = LoadSet(axial_force=1000, bending_moment=1000, torque=1000,
                shear_force=500)
y = 0.025

# 2. Pipeline step by step
props = compute_section_properties(variant, dims)
q = compute_first_moment(variant, dims, y)
stresses = compute_stresses(props, q, loads, y)

print("=== Stresses at y = 0.025 m ===")
print(f"Q at this point: {q:.6e} m³")
print(stresses.table())
