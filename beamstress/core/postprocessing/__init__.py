
from beamstress.core.postprocessing.section_properties import (
    SectionGeometry, SectionProperties, compute_section_properties
)
from beamstress.core.postprocessing.first_moment import (
    FirstMomentEvaluator, compute_first_moment, first_moment_disc
)
from beamstress.core.postprocessing.stress import (
    StressEvaluator, StressResult, compute_stresses
)
from beamstress.core.postprocessing.analysis import StressAnalysis


__all__ = [
    'compute_first_moment',
    'compute_section_properties',
    'compute_stresses',
    'first_moment_disc',
    'FirstMomentEvaluator',
    'SectionGeometry',
    'SectionProperties',
    'StressAnalysis',
    'StressEvaluator',
    'StressResult',
]
