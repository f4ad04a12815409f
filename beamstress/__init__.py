from beamstress.core import (
    FirstMomentEvaluator, HollowCircleDimensions, IBeamDimensions, LoadSet,
    RectangleDimensions, SectionGeometry, SectionProperties, SectionVariant,
    SolidCircleDimensions, StressAnalysis, StressEvaluator, StressResult,
    compute_first_moment, compute_section_properties, compute_stresses,
    first_moment_disc
)

__all__ = [
    'compute_first_moment',
    'compute_section_properties',
    'compute_stresses',
    'first_moment_disc',
    'FirstMomentEvaluator',
    'HollowCircleDimensions',
    'IBeamDimensions',
    'LoadSet',
    'RectangleDimensions',
    'SectionGeometry',
    'SectionProperties',
    'SectionVariant',
    'SolidCircleDimensions',
    'StressAnalysis',
    'StressEvaluator',
    'StressResult',
]
