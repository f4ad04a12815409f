from dataclasses import dataclass, field
from functools import cached_property
from typing import Union

import numpy as np

from beamstress.core.logger_mixin import (LoggerMixin, table_distribution,
                                          table_properties)
from beamstress.core.postprocessing.first_moment import FirstMomentEvaluator
from beamstress.core.postprocessing.section_properties import (
    PROPERTY_UNITS, SectionGeometry, SectionProperties
)
from beamstress.core.postprocessing.stress import (
    STRESS_UNITS, StressEvaluator, StressResult
)
from beamstress.core.preprocessing.loads import LoadSet
from beamstress.core.preprocessing.section import (
    Dimensions, SectionVariant, check_dimensions
)


@dataclass(eq=False)
class StressAnalysis(LoggerMixin):
    """Stresses of one section under one load set at one ordinate.

    Runs the full pipeline: section properties, first moment of area at the
    ordinate, and the four stress components. Every result is computed once
    per instance. To evaluate changed inputs, create a new instance.

    Parameters
    ----------
    variant : :py:class:`SectionVariant` or :any:`str`
        Shape of the section.
    dims : Dimensions
        Dimension set matching :py:attr:`variant`.
    loads : :py:class:`LoadSet`, optional
        Internal forces. Defaults to no load.
    y : :any:`float`, default=0.0
        Signed distance of the analysis point from the neutral axis in m.
    debug : :any:`bool`, default=False
        Enables debug logging, including property and stress tables.

    Examples
    --------
    >>> from beamstress.core.preprocessing import (LoadSet,
    ...                                            RectangleDimensions)
    >>> analysis = StressAnalysis(
    ...     'rectangle', RectangleDimensions(0.05, 0.1),
    ...     LoadSet(1000, 1000, 1000, 500), y=0.025
    ... )
    >>> analysis.stresses.is_finite
    True
    >>> print(analysis.summary())  # doctest: +SKIP
    """

    variant: Union[SectionVariant, str]
    dims: Dimensions
    loads: LoadSet = field(default_factory=LoadSet)
    y: float = 0.0
    debug: bool = False

    def __post_init__(self):
        self.variant = check_dimensions(self.variant, self.dims)
        self.logger.debug(
            f"Stress analysis of {self.variant.value} {self.dims} under "
            f"{self.loads} at y={self.y}"
        )
        if not self.properties.contains(self.y):
            self.logger.warning(
                f"y={self.y} lies outside the section "
                f"(|y| <= {self.properties.outer_radius}). Q-dependent "
                f"stresses vanish, bending and torsion are still evaluated."
            )

    @cached_property
    def properties(self) -> SectionProperties:
        return SectionGeometry(
            self.variant, self.dims, debug=self.debug
        ).compute()

    @cached_property
    def _first_moment_evaluator(self) -> FirstMomentEvaluator:
        return FirstMomentEvaluator(self.variant, self.dims, debug=self.debug)

    @cached_property
    def _stress_evaluator(self) -> StressEvaluator:
        return StressEvaluator(self.properties, debug=self.debug)

    @cached_property
    def first_moment(self) -> float:
        """First moment of area at :py:attr:`y` in m³."""
        return self._first_moment_evaluator.compute(self.y)

    @cached_property
    def stresses(self) -> StressResult:
        """Stress components at :py:attr:`y` in Pa."""
        return self._stress_evaluator.compute(
            self.first_moment, self.loads, self.y
        )

    def stress_disc(self, n_disc: int = 20):
        """Stress distribution over the full section depth.

        Parameters
        ----------
        n_disc : :any:`int`, default=20
            Number of intervals between :math:`-r_{out}` and :math:`r_{out}`.

        Returns
        -------
        tuple
            ``(y_values, stresses)`` where ``y_values`` holds the
            ``n_disc + 1`` ordinates and ``stresses`` maps every
            :py:class:`StressResult` field name to an array of values at
            those ordinates.

        Raises
        ------
        ValueError
            If ``n_disc`` is smaller than one.
        """
        y_values, q_values = self._first_moment_evaluator.disc(n_disc)
        results = [
            self._stress_evaluator.compute(q, self.loads, y)
            for y, q in zip(y_values, q_values)
        ]
        stresses = {
            name: np.array([getattr(r, name) for r in results])
            for name in STRESS_UNITS
        }
        self.logger.debug(
            f"Stress distribution: \n"
            f"{table_distribution(y_values, stresses)}"
        )
        return y_values, stresses

    def summary(self, decimals: int = 6) -> str:
        """Grid table of section properties, :math:`Q` and stresses."""
        values = {
            **self.properties.as_dict(),
            'first_moment': self.first_moment,
            **self.stresses.as_dict(),
        }
        units = {**PROPERTY_UNITS, 'first_moment': 'm³', **STRESS_UNITS}
        return table_properties(values, units, decimals)
