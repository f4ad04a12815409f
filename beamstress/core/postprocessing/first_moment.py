from dataclasses import dataclass
from typing import Union

import numpy as np

from beamstress.core.logger_mixin import LoggerMixin
from beamstress.core.postprocessing.section_properties import SectionGeometry
from beamstress.core.preprocessing.section import (
    Dimensions, SectionVariant, check_dimensions
)
from beamstress.core.utils import half_cube_term


@dataclass(eq=False)
class FirstMomentEvaluator(LoggerMixin):
    r"""First moment of area :math:`Q(y)` of the supported section variants.

    :math:`Q(y)` is the first moment, about the neutral axis, of the part of
    the section lying beyond the ordinate :math:`y`. It is evaluated
    piecewise on :math:`|y|`, so :math:`Q(y) = Q(-y)`. Ordinates outside the
    section give :math:`Q = 0`. An ordinate exactly on a boundary
    (:math:`|y| = h/2`, :math:`r`, :math:`r_i` or :math:`r_o`) is treated as
    lying inside.

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

    Examples
    --------
    >>> from beamstress.core.preprocessing import RectangleDimensions
    >>> q = FirstMomentEvaluator('rectangle', RectangleDimensions(0.05, 0.1))
    >>> round(q.compute(0.0), 12)
    6.25e-05
    >>> q.compute(0.06)
    0.0
    """

    variant: Union[SectionVariant, str]
    dims: Dimensions
    debug: bool = False

    def __post_init__(self):
        self.variant = check_dimensions(self.variant, self.dims)

    def compute(self, y: float) -> float:
        """Evaluate :math:`Q` at the ordinate ``y`` in m³."""
        if self.variant is SectionVariant.RECTANGLE:
            q = self._rectangle(abs(y))
        elif self.variant is SectionVariant.SOLID_CIRCLE:
            q = self._solid_circle(abs(y))
        elif self.variant is SectionVariant.HOLLOW_CIRCLE:
            q = self._hollow_circle(abs(y))
        else:
            q = self._i_beam(abs(y))
        self.logger.debug(f"Q({y}) = {q} for {self.variant.value}")
        return q

    def _rectangle(self, y: float) -> float:
        a = self.dims.h / 2
        if y > a:
            return 0.0
        return self.dims.b / 2 * (a ** 2 - y ** 2)

    def _solid_circle(self, y: float) -> float:
        r = self.dims.d / 2
        if y > r:
            return 0.0
        return 2 / 3 * half_cube_term(r, y)

    def _hollow_circle(self, y: float) -> float:
        ro, ri = self.dims.ro, self.dims.ri
        if y > ro:
            return 0.0
        if y <= ri:
            # cut passes through the bore, subtract the missing segment
            return 2 / 3 * (half_cube_term(ro, y) - half_cube_term(ri, y))
        return 2 / 3 * half_cube_term(ro, y)

    def _i_beam(self, y: float) -> float:
        hd = self.dims.h / 2
        bf, tf, tw = self.dims.bf, self.dims.tf, self.dims.tw
        if y > hd:
            return 0.0
        if y <= hd - tf:
            web_area = tw * (hd - tf - y)
            web_centroid = (hd - tf + y) / 2
            return bf * tf + web_area * web_centroid
        flange_height_above = hd - y
        return bf * flange_height_above * (flange_height_above / 2)

    def disc(self, n_disc: int = 20):
        r"""Sample :math:`Q` over the full section depth.

        Parameters
        ----------
        n_disc : :any:`int`, default=20
            Number of intervals between :math:`-r_{out}` and :math:`r_{out}`.

        Returns
        -------
        tuple of :any:`numpy.ndarray`
            ``(y_values, q_values)``, each with ``n_disc + 1`` entries.

        Raises
        ------
        ValueError
            If ``n_disc`` is smaller than one.
        """
        if n_disc < 1:
            raise ValueError('n_disc has to be at least 1.')
        outer_radius = SectionGeometry(
            self.variant, self.dims, debug=self.debug
        ).compute().outer_radius
        y_values = np.linspace(-outer_radius, outer_radius, n_disc + 1)
        q_values = np.array([self.compute(y) for y in y_values])
        return y_values, q_values


def compute_first_moment(variant: Union[SectionVariant, str],
                         dims: Dimensions, y: float,
                         debug: bool = False) -> float:
    """First moment of area beyond the ordinate ``y`` in m³.

    Shortcut for :python:`FirstMomentEvaluator(variant, dims).compute(y)`.
    """
    return FirstMomentEvaluator(variant, dims, debug=debug).compute(y)


def first_moment_disc(variant: Union[SectionVariant, str], dims: Dimensions,
                      n_disc: int = 20, debug: bool = False):
    """Distribution of :math:`Q` over the section depth, see
    :py:meth:`FirstMomentEvaluator.disc`."""
    return FirstMomentEvaluator(variant, dims, debug=debug).disc(n_disc)
