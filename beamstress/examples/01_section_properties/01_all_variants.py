"""
Example 01:
Section properties of all supported section variants

This example computes area, moment of inertia, polar moment of inertia,
outer radius and shear thickness for a rectangle, a solid circle, a circular
tube and an I-beam. All dimensions are given in m.
"""

from beamstress.core.preprocessing import (
    HollowCircleDimensions, IBeamDimensions, RectangleDimensions,
    SectionVariant, SolidCircleDimensions
)
from beamstress.core.postprocessing import compute_section_properties


# 1. Define the sections
sections = [
    (SectionVariant.RECTANGLE, RectangleDimensions(b=0.05, h=0.1)),
    (SectionVariant.SOLID_CIRCLE, SolidCircleDimensions(d=0.08)),
    (SectionVariant.HOLLOW_CIRCLE, HollowCircleDimensions(ro=0.04, ri=0.03)),
    (SectionVariant.I_BEAM, IBeamDimensions(h=0.2, bf=0.1, tf=0.02,
                                            tw=0.01)),
]

# 2. Compute and print the properties
for variant, dims in sections:
    props = compute_section_properties(variant, dims)
    print(f"=== {variant.value} ===")
    print(props.table())
    print(f"Recommended ordinate range: ±{props.outer_radius:.4f} m\n")
