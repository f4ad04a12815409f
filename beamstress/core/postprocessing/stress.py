import math
from dataclasses import asdict, dataclass

from beamstress.core.logger_mixin import LoggerMixin, table_properties
from beamstress.core.postprocessing.section_properties import (
    SectionProperties
)
from beamstress.core.preprocessing.loads import LoadSet
from beamstress.core.utils import divide


STRESS_UNITS = {
    'axial': 'Pa',
    'bending': 'Pa',
    'torsional_shear': 'Pa',
    'transverse_shear': 'Pa',
}


@dataclass(frozen=True)
class StressResult:
    """The four stress components at one ordinate, in Pa.

    The components are independent; they are not combined into an
    equivalent stress. A degenerate section shows up as ``inf`` or ``nan``
    components, which callers should check with :py:attr:`is_finite` before
    displaying them.
    """

    axial: float
    bending: float
    torsional_shear: float
    transverse_shear: float

    @property
    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in asdict(self).values())

    def as_dict(self) -> dict:
        return asdict(self)

    def table(self, decimals: int = 6) -> str:
        return table_properties(self.as_dict(), STRESS_UNITS, decimals)


@dataclass(eq=False)
class StressEvaluator(LoggerMixin):
    r"""Combine section properties, first moment and loads into stresses.

    Parameters
    ----------
    properties : :py:class:`SectionProperties`
        Properties of the section.
    debug : :any:`bool`, default=False
        Enables debug logging.

    Notes
    -----
    The components at the ordinate :math:`y` are

    .. math::
        \sigma_N = \frac{N}{A}, \quad
        \sigma_M = \frac{M y}{I}, \quad
        \tau_T = \frac{T |y|}{J}, \quad
        \tau_V = \frac{V Q}{I t}

    Nothing is clamped. A zero denominator gives a non-finite component
    instead of an exception.

    Examples
    --------
    >>> props = SectionProperties(0.005, 4e-6, 1.6e-5, 0.05, 0.05)
    >>> result = StressEvaluator(props).compute(
    ...     0.0, LoadSet(axial_force=1000), 0.0)
    >>> result.axial, result.bending
    (200000.0, 0.0)
    """

    properties: SectionProperties
    debug: bool = False

    def __post_init__(self):
        self.logger.debug(f"Stress evaluation for {self.properties}")

    def compute(self, q: float, loads: LoadSet, y: float) -> StressResult:
        """Evaluate the four stress components at the ordinate ``y``.

        Parameters
        ----------
        q : :any:`float`
            First moment of area at ``y`` in m³.
        loads : :py:class:`LoadSet`
            Internal forces.
        y : :any:`float`
            Signed distance from the neutral axis in m.

        Returns
        -------
        :py:class:`StressResult`
        """
        p = self.properties
        result = StressResult(
            axial=divide(loads.axial_force, p.area),
            bending=divide(loads.bending_moment * y, p.inertia),
            torsional_shear=divide(loads.torque * abs(y), p.polar_inertia),
            transverse_shear=divide(loads.shear_force * q,
                                    p.inertia * p.shear_thickness),
        )
        if not result.is_finite:
            self.logger.warning(
                f"Non-finite stresses at y={y}: {result}. The section is "
                f"degenerate."
            )
        self.logger.debug(f"Stresses at y={y}: \n{result.table()}")
        return result


def compute_stresses(properties: SectionProperties, q: float, loads: LoadSet,
                     y: float, debug: bool = False) -> StressResult:
    """Axial, bending, torsional shear and transverse shear stress in Pa.

    Shortcut for :python:`StressEvaluator(properties).compute(q, loads, y)`.
    """
    return StressEvaluator(properties, debug=debug).compute(q, loads, y)
