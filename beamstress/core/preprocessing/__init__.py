
from beamstress.core.preprocessing.loads import LoadSet
from beamstress.core.preprocessing.section import (
    Dimensions,
    HollowCircleDimensions,
    IBeamDimensions,
    RectangleDimensions,
    SectionVariant,
    SolidCircleDimensions,
    as_variant,
    check_dimensions,
    dimensions_for,
    invalid_dimensions,
)


__all__ = [
    'as_variant',
    'check_dimensions',
    'Dimensions',
    'dimensions_for',
    'HollowCircleDimensions',
    'IBeamDimensions',
    'invalid_dimensions',
    'LoadSet',
    'RectangleDimensions',
    'SectionVariant',
    'SolidCircleDimensions',
]
