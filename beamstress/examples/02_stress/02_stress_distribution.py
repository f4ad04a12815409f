"""
Example 02:
Stress distribution over the depth of an I-beam

The four stress components are sampled at 20 intervals between the bottom
and the top fibre. The transverse shear follows the first moment of area and
vanishes at the outer fibres; the bending stress varies linearly.
"""

from beamstress.core.logger_mixin import table_distribution
from beamstress.core.preprocessing import IBeamDimensions, LoadSet
from beamstress.core.postprocessing import StressAnalysis


dims = IBeamDimensions(h=0.2, bf=0.1, tf=0.02, tw=0.01)
loads = LoadSet(axial_force=5000, bending_moment=2000, torque=100,
                shear_force=1500)

analysis = StressAnalysis('i_beam', dims, loads)
y_values, stresses = analysis.stress_disc(n_disc=20)

print("=== I-beam stress distribution ===")
print(table_distribution(y_values, stresses))
