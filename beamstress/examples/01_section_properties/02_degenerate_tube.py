"""
Example 02:
Degenerate circular tube

A tube whose inner radius is not smaller than its outer radius carries no
material. Instead of raising an error the section properties fall back to
zero and a warning is logged. Stresses computed from such a section are
non-finite, which is how the caller detects the invalid input.
"""

import math

from beamstress.core.preprocessing import HollowCircleDimensions, LoadSet
from beamstress.core.postprocessing import StressAnalysis


dims = HollowCircleDimensions(ro=0.04, ri=0.08)
analysis = StressAnalysis('hollow_circle', dims, LoadSet(1000, 0, 0, 500),
                          y=0.02, debug=True)

print("Degenerate:", analysis.properties.is_degenerate)
for name, value in analysis.stresses.as_dict().items():
    text = f"{value:.2f} Pa" if math.isfinite(value) else "N/A"
    print(f"{name:<18}: {text}")
