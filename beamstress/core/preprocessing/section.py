from dataclasses import dataclass, fields
from enum import Enum
from typing import Union

from beamstress.core.utils import is_valid_dimension


class SectionVariant(Enum):
    """The section shapes known to the stress engine.

    Exactly one variant is active per evaluation. Each variant is paired with
    its own dimension class, see :py:func:`dimensions_for`.
    """

    RECTANGLE = 'rectangle'
    SOLID_CIRCLE = 'solid_circle'
    HOLLOW_CIRCLE = 'hollow_circle'
    I_BEAM = 'i_beam'


@dataclass(frozen=True)
class RectangleDimensions:
    r"""Dimensions of a solid rectangular section.

    Parameters
    ----------
    b : :any:`float`
        Width in m, perpendicular to the bending plane.
    h : :any:`float`
        Height in m, along the ordinate :math:`y`.
    """

    b: float
    h: float

    variant = SectionVariant.RECTANGLE


@dataclass(frozen=True)
class SolidCircleDimensions:
    """Dimensions of a solid circular section.

    Parameters
    ----------
    d : :any:`float`
        Diameter in m.
    """

    d: float

    variant = SectionVariant.SOLID_CIRCLE


@dataclass(frozen=True)
class HollowCircleDimensions:
    """Dimensions of a circular tube.

    Parameters
    ----------
    ro : :any:`float`
        Outer radius in m.
    ri : :any:`float`
        Inner radius in m.

    Notes
    -----
    :python:`ri >= ro` is not rejected. Such a tube has no material and the
    section properties fall back to zero, see
    :py:func:`compute_section_properties`.
    """

    ro: float
    ri: float

    variant = SectionVariant.HOLLOW_CIRCLE

    @property
    def degenerate(self) -> bool:
        return self.ri >= self.ro


@dataclass(frozen=True)
class IBeamDimensions:
    """Dimensions of a doubly symmetric I-beam.

    Parameters
    ----------
    h : :any:`float`
        Overall depth in m.
    bf : :any:`float`
        Flange width in m.
    tf : :any:`float`
        Flange thickness in m.
    tw : :any:`float`
        Web thickness in m.

    Notes
    -----
    A physically meaningful web requires :python:`2 * tf < h`. This is not
    enforced; :py:attr:`web_height` turns negative for such input and the
    formulas are evaluated regardless.
    """

    h: float
    bf: float
    tf: float
    tw: float

    variant = SectionVariant.I_BEAM

    @property
    def web_height(self) -> float:
        return self.h - 2 * self.tf


Dimensions = Union[
    RectangleDimensions, SolidCircleDimensions, HollowCircleDimensions,
    IBeamDimensions
]

_DIMENSIONS = {
    SectionVariant.RECTANGLE: RectangleDimensions,
    SectionVariant.SOLID_CIRCLE: SolidCircleDimensions,
    SectionVariant.HOLLOW_CIRCLE: HollowCircleDimensions,
    SectionVariant.I_BEAM: IBeamDimensions,
}


def dimensions_for(variant: Union[SectionVariant, str]) -> type:
    """Return the dimension class belonging to ``variant``.

    Examples
    --------
    >>> dimensions_for('rectangle')
    <class 'beamstress.core.preprocessing.section.RectangleDimensions'>
    """
    return _DIMENSIONS[as_variant(variant)]


def as_variant(variant: Union[SectionVariant, str]) -> SectionVariant:
    """Convert a variant tag or its string value to :py:class:`SectionVariant`.

    Raises
    ------
    ValueError
        If ``variant`` names no known section shape.
    """
    if isinstance(variant, SectionVariant):
        return variant
    try:
        return SectionVariant(variant)
    except ValueError:
        raise ValueError(
            f'Unknown section variant {variant!r}. Valid variants are '
            f'{[v.value for v in SectionVariant]}.'
        ) from None


def check_dimensions(variant: Union[SectionVariant, str],
                     dims: Dimensions) -> SectionVariant:
    """Make sure ``dims`` is the dimension set of ``variant``.

    Returns
    -------
    :py:class:`SectionVariant`
        The normalised variant tag.

    Raises
    ------
    ValueError
        If ``variant`` is unknown.
    TypeError
        If ``dims`` is not an instance of the variant's dimension class.
    """
    variant = as_variant(variant)
    expected = _DIMENSIONS[variant]
    if not isinstance(dims, expected):
        raise TypeError(
            f'Section variant {variant.value!r} requires '
            f'{expected.__name__}, got {type(dims).__name__}.'
        )
    return variant


def invalid_dimensions(dims: Dimensions) -> list[str]:
    """Names of the dimensions that are negative, ``nan`` or infinite.

    Such values are not rejected; the section formulas evaluate them and
    return degenerate or non-finite results.

    Examples
    --------
    >>> invalid_dimensions(HollowCircleDimensions(ro=0.04, ri=-0.01))
    ['ri']
    """
    return [
        f.name for f in fields(dims)
        if not is_valid_dimension(getattr(dims, f.name))
    ]
