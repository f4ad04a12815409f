import math
from dataclasses import asdict, dataclass
from typing import Union

from beamstress.core.logger_mixin import LoggerMixin, table_properties
from beamstress.core.preprocessing.section import (
    Dimensions, SectionVariant, check_dimensions, invalid_dimensions
)


PROPERTY_UNITS = {
    'area': 'm²',
    'inertia': 'm⁴',
    'polar_inertia': 'm⁴',
    'outer_radius': 'm',
    'shear_thickness': 'm',
}


@dataclass(frozen=True)
class SectionProperties:
    r"""Scalar properties of a cross-section, all SI.

    Parameters
    ----------
    area : :any:`float`
        Cross-sectional area :math:`A` in m².
    inertia : :any:`float`
        Second moment of area :math:`I` about the neutral axis in m⁴.
    polar_inertia : :any:`float`
        Polar moment of inertia :math:`J` in m⁴ used for torsion.
    outer_radius : :any:`float`
        Half the overall extent along the ordinate in m.
    shear_thickness : :any:`float`
        Effective thickness :math:`t` at the neutral axis in m, used in
        :math:`\tau = V Q / (I t)`.
    """

    area: float
    inertia: float
    polar_inertia: float
    outer_radius: float
    shear_thickness: float

    @property
    def is_degenerate(self) -> bool:
        """True if the section carries no material."""
        return self.area == 0

    def contains(self, y: float) -> bool:
        """Check whether the ordinate ``y`` lies within the section depth,
        boundaries included."""
        return abs(y) <= self.outer_radius

    def as_dict(self) -> dict:
        return asdict(self)

    def table(self, decimals: int = 6) -> str:
        return table_properties(self.as_dict(), PROPERTY_UNITS, decimals)


@dataclass(eq=False)
class SectionGeometry(LoggerMixin):
    r"""Closed-form section properties of the supported section variants.

    Parameters
    ----------
    variant : :py:class:`SectionVariant` or :any:`str`
        Shape of the section.
    dims : Dimensions
        Dimension set matching :py:attr:`variant`.
    debug : :any:`bool`, default=False
        Enables debug logging.

    Raises
    ------
    ValueError
        If :py:attr:`variant` is unknown.
    TypeError
        If :py:attr:`dims` does not belong to :py:attr:`variant`.

    Notes
    -----
    Some values are engineering approximations and are kept as such:

    * Rectangle: :math:`J = b h^3 / 3` instead of the torsion constant.
    * Solid circle: the diameter is used as shear thickness.
    * I-beam: :math:`J = I`. No torsion constant of the open thin-walled
      section is computed.

    Examples
    --------
    >>> from beamstress.core.preprocessing import RectangleDimensions
    >>> props = SectionGeometry(
    ...     'rectangle', RectangleDimensions(0.05, 0.1)).compute()
    >>> round(props.area, 9), round(props.inertia, 12), props.outer_radius
    (0.005, 4.166667e-06, 0.05)
    """

    variant: Union[SectionVariant, str]
    dims: Dimensions
    debug: bool = False

    def __post_init__(self):
        self.variant = check_dimensions(self.variant, self.dims)
        invalid = invalid_dimensions(self.dims)
        if invalid:
            self.logger.warning(
                f"Dimensions {invalid} of {self.dims} are negative or not "
                f"finite. Results are not physically meaningful."
            )

    def compute(self) -> SectionProperties:
        """Evaluate the section formulas of :py:attr:`variant`.

        Returns
        -------
        :py:class:`SectionProperties`
            Freshly computed properties.
        """
        self.logger.debug(
            f"Computing section properties for {self.variant.value} "
            f"with {self.dims}"
        )
        if self.variant is SectionVariant.RECTANGLE:
            props = self._rectangle()
        elif self.variant is SectionVariant.SOLID_CIRCLE:
            props = self._solid_circle()
        elif self.variant is SectionVariant.HOLLOW_CIRCLE:
            props = self._hollow_circle()
        else:
            props = self._i_beam()
        self.logger.debug(f"Section properties: \n{props.table()}")
        return props

    def _rectangle(self) -> SectionProperties:
        b, h = self.dims.b, self.dims.h
        return SectionProperties(
            area=b * h,
            inertia=b * h ** 3 / 12,
            # approximation, not the torsion constant of a rectangle
            polar_inertia=b * h ** 3 / 3,
            outer_radius=h / 2,
            shear_thickness=b,
        )

    def _solid_circle(self) -> SectionProperties:
        d = self.dims.d
        r = d / 2
        return SectionProperties(
            area=math.pi * r ** 2,
            inertia=math.pi * r ** 4 / 4,
            polar_inertia=math.pi * r ** 4 / 2,
            outer_radius=r,
            # diameter as thickness proxy
            shear_thickness=d,
        )

    def _hollow_circle(self) -> SectionProperties:
        ro, ri = self.dims.ro, self.dims.ri
        if ri >= ro:
            self.logger.warning(
                f"Inner radius ri={ri} is not smaller than outer radius "
                f"ro={ro}. Falling back to zero section properties."
            )
            return SectionProperties(
                area=0.0,
                inertia=0.0,
                polar_inertia=0.0,
                outer_radius=ro,
                shear_thickness=0.0,
            )
        return SectionProperties(
            area=math.pi * (ro ** 2 - ri ** 2),
            inertia=math.pi / 4 * (ro ** 4 - ri ** 4),
            polar_inertia=math.pi / 2 * (ro ** 4 - ri ** 4),
            outer_radius=ro,
            shear_thickness=ro - ri,
        )

    def _i_beam(self) -> SectionProperties:
        h, bf = self.dims.h, self.dims.bf
        tf, tw = self.dims.tf, self.dims.tw
        web = self.dims.web_height
        if web <= 0:
            self.logger.warning(
                f"Flanges (2 * tf = {2 * tf}) leave no web within the depth "
                f"h = {h}. Results are not physically meaningful."
            )
        # full rectangle minus the two cutouts beside the web
        inertia = (bf * h ** 3 - (bf - tw) * web ** 3) / 12
        return SectionProperties(
            area=2 * bf * tf + tw * web,
            inertia=inertia,
            # approximation for open sections, no torsion constant
            polar_inertia=inertia,
            outer_radius=h / 2,
            shear_thickness=tw,
        )


def compute_section_properties(variant: Union[SectionVariant, str],
                               dims: Dimensions,
                               debug: bool = False) -> SectionProperties:
    """Compute area, inertia, polar inertia, outer radius and shear
    thickness of a section.

    Shortcut for :python:`SectionGeometry(variant, dims, debug).compute()`.
    """
    return SectionGeometry(variant, dims, debug=debug).compute()
