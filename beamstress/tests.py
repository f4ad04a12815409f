import io
import logging
import math
from contextlib import redirect_stdout
from unittest import TestCase

import numpy as np
from numpy.testing import assert_allclose as numpy_allclose

from beamstress.__main__ import main
from beamstress.core.logger_mixin import table_distribution, table_properties
from beamstress.core.postprocessing.analysis import StressAnalysis
from beamstress.core.postprocessing.first_moment import (
    FirstMomentEvaluator, compute_first_moment, first_moment_disc
)
from beamstress.core.postprocessing.section_properties import (
    SectionGeometry, SectionProperties, compute_section_properties
)
from beamstress.core.postprocessing.stress import (
    StressResult, compute_stresses
)
from beamstress.core.preprocessing.loads import LoadSet
from beamstress.core.preprocessing.section import (
    HollowCircleDimensions, IBeamDimensions, RectangleDimensions,
    SectionVariant, SolidCircleDimensions, check_dimensions, dimensions_for,
    invalid_dimensions
)
from beamstress.core.utils import divide, is_valid_dimension


def assert_allclose(actual, desired, err_msg=''):
    numpy_allclose(actual, desired, err_msg=err_msg, atol=1e-10, rtol=1e-7)


RECTANGLE = (SectionVariant.RECTANGLE, RectangleDimensions(b=0.05, h=0.1))
SOLID_CIRCLE = (SectionVariant.SOLID_CIRCLE, SolidCircleDimensions(d=0.08))
HOLLOW_CIRCLE = (SectionVariant.HOLLOW_CIRCLE,
                 HollowCircleDimensions(ro=0.04, ri=0.03))
I_BEAM = (SectionVariant.I_BEAM,
          IBeamDimensions(h=0.2, bf=0.1, tf=0.02, tw=0.01))
SECTIONS = (RECTANGLE, SOLID_CIRCLE, HOLLOW_CIRCLE, I_BEAM)


class TestDivide(TestCase):

    def test_finite(self):
        self.assertEqual(divide(1000, 0.005), 200000.0)

    def test_zero_denominator(self):
        self.assertEqual(divide(1.0, 0.0), math.inf)
        self.assertEqual(divide(-1.0, 0.0), -math.inf)
        self.assertTrue(
            math.isnan(divide(0.0, 0.0)),
            'Zero divided by zero must give nan instead of raising.'
        )


class TestSectionDimensions(TestCase):

    def test_invalid_dimensions_are_accepted(self):
        dims = HollowCircleDimensions(ro=0.04, ri=-0.01)
        self.assertEqual(
            invalid_dimensions(dims), ['ri'],
            'Negative dimensions must be reported, not rejected.'
        )
        self.assertEqual(
            invalid_dimensions(
                IBeamDimensions(h=math.inf, bf=0.1, tf=0.02, tw=math.nan)
            ),
            ['h', 'tw']
        )
        self.assertEqual(invalid_dimensions(RectangleDimensions(0.0, 0.1)),
                         [])

    def test_is_valid_dimension(self):
        self.assertTrue(is_valid_dimension(0.0))
        self.assertTrue(is_valid_dimension(0.05))
        for value in (-0.01, math.nan, math.inf, -math.inf):
            self.assertFalse(is_valid_dimension(value), f'{value}')

    def test_degenerate_hollow_is_accepted(self):
        dims = HollowCircleDimensions(ro=0.04, ri=0.08)
        self.assertTrue(dims.degenerate)
        self.assertFalse(HOLLOW_CIRCLE[1].degenerate)

    def test_web_height(self):
        assert_allclose(I_BEAM[1].web_height, 0.16)

    def test_dimensions_for(self):
        self.assertIs(dimensions_for('rectangle'), RectangleDimensions)
        self.assertIs(dimensions_for(SectionVariant.I_BEAM), IBeamDimensions)

    def test_check_dimensions(self):
        self.assertIs(
            check_dimensions('solid_circle', SOLID_CIRCLE[1]),
            SectionVariant.SOLID_CIRCLE,
            'Variant strings must be converted to SectionVariant.'
        )
        with self.assertRaises(
            TypeError, msg='Dimensions of another variant must raise a '
            'TypeError.'
        ):
            check_dimensions(SectionVariant.RECTANGLE, SOLID_CIRCLE[1])
        with self.assertRaises(ValueError):
            check_dimensions('triangle', RECTANGLE[1])


class TestLoadSet(TestCase):

    def test_default(self):
        self.assertEqual(LoadSet(), LoadSet(0, 0, 0, 0))

    def test_add(self):
        self.assertEqual(
            LoadSet(1000, 50, 10, 0) + LoadSet(-200, 25, 0, 500),
            LoadSet(800, 75, 10, 500),
            'Load sets must add component-wise.'
        )


class TestSectionGeometry(TestCase):

    def test_rectangle(self):
        p = compute_section_properties(*RECTANGLE)
        assert_allclose(p.area, 0.005)
        assert_allclose(p.inertia, 4.1666666667e-6)
        assert_allclose(
            p.polar_inertia, 0.05 * 0.1 ** 3 / 3,
            err_msg='The polar inertia of a rectangle is approximated by '
            'b * h^3 / 3.'
        )
        assert_allclose(p.outer_radius, 0.05)
        assert_allclose(p.shear_thickness, 0.05)

    def test_solid_circle(self):
        p = compute_section_properties(*SOLID_CIRCLE)
        assert_allclose(p.area, 5.0265482457e-3)
        assert_allclose(p.inertia, 2.0106192983e-6)
        assert_allclose(p.polar_inertia, 4.0212385966e-6)
        assert_allclose(p.outer_radius, 0.04)
        assert_allclose(
            p.shear_thickness, 0.08,
            err_msg='The diameter is used as shear thickness of a solid '
            'circle.'
        )

    def test_hollow_circle(self):
        p = compute_section_properties(*HOLLOW_CIRCLE)
        assert_allclose(p.area, np.pi * 0.0007)
        assert_allclose(p.inertia, np.pi / 4 * 1.75e-6)
        assert_allclose(p.polar_inertia, np.pi / 2 * 1.75e-6)
        assert_allclose(p.outer_radius, 0.04)
        assert_allclose(p.shear_thickness, 0.01)

    def test_hollow_circle_degenerate(self):
        for ri in (0.08, 0.04):
            p = compute_section_properties(
                'hollow_circle', HollowCircleDimensions(ro=0.04, ri=ri)
            )
            self.assertEqual(
                p, SectionProperties(0.0, 0.0, 0.0, 0.04, 0.0),
                'A hollow circle with ri >= ro must give zero properties.'
            )
            self.assertTrue(p.is_degenerate)

    def test_hollow_circle_degenerate_warning(self):
        name = ('beamstress.core.postprocessing.section_properties.'
                'SectionGeometry')
        with self.assertLogs(name, level='WARNING'):
            compute_section_properties(
                SectionVariant.HOLLOW_CIRCLE,
                HollowCircleDimensions(ro=0.04, ri=0.08)
            )

    def test_invalid_dimensions_evaluated(self):
        name = ('beamstress.core.postprocessing.section_properties.'
                'SectionGeometry')
        with self.assertLogs(name, level='WARNING'):
            p = compute_section_properties(
                'hollow_circle', HollowCircleDimensions(ro=0.04, ri=-0.01)
            )
        assert_allclose(
            p.area, np.pi * (0.04 ** 2 - 0.01 ** 2),
            err_msg='Negative dimensions must flow through the formulas.'
        )
        assert_allclose(p.shear_thickness, 0.05)

        p = compute_section_properties('solid_circle',
                                       SolidCircleDimensions(d=math.nan))
        self.assertTrue(math.isnan(p.area))
        self.assertTrue(math.isnan(p.inertia))

    def test_i_beam_without_web(self):
        name = ('beamstress.core.postprocessing.section_properties.'
                'SectionGeometry')
        dims = IBeamDimensions(h=0.02, bf=0.1, tf=0.02, tw=0.01)
        with self.assertLogs(name, level='WARNING'):
            p = compute_section_properties('i_beam', dims)
        assert_allclose(
            p.area, 2 * 0.1 * 0.02 + 0.01 * (0.02 - 0.04),
            err_msg='An I-beam without web is evaluated as given.'
        )
        assert_allclose(p.inertia, (0.1 * 0.02 ** 3 + 0.09 * 0.02 ** 3) / 12)
        assert_allclose(p.outer_radius, 0.01)

    def test_i_beam(self):
        p = compute_section_properties(*I_BEAM)
        assert_allclose(p.area, 0.0056)
        assert_allclose(p.inertia, (0.1 * 0.2 ** 3 - 0.09 * 0.16 ** 3) / 12)
        assert_allclose(
            p.polar_inertia, p.inertia,
            err_msg='The polar inertia of an I-beam equals its inertia.'
        )
        assert_allclose(p.outer_radius, 0.1)
        assert_allclose(p.shear_thickness, 0.01)

    def test_non_negative(self):
        for variant, dims in SECTIONS:
            p = compute_section_properties(variant, dims)
            for value in (p.area, p.inertia, p.polar_inertia):
                self.assertGreaterEqual(value, 0, f'{variant} {p}')

    def test_deterministic(self):
        for variant, dims in SECTIONS:
            self.assertEqual(
                compute_section_properties(variant, dims),
                compute_section_properties(variant, dims)
            )

    def test_variant_as_string(self):
        self.assertEqual(
            compute_section_properties('i_beam', I_BEAM[1]),
            compute_section_properties(*I_BEAM)
        )

    def test_mismatched_dimensions(self):
        with self.assertRaises(TypeError):
            SectionGeometry(SectionVariant.I_BEAM, RECTANGLE[1])

    def test_debug_logger(self):
        geometry = SectionGeometry(*RECTANGLE, debug=True)
        self.assertEqual(geometry.logger.level, logging.DEBUG)
        geometry = SectionGeometry(*RECTANGLE)
        self.assertEqual(geometry.logger.level, logging.WARNING)


class TestSectionProperties(TestCase):

    def test_contains(self):
        p = compute_section_properties(*RECTANGLE)
        self.assertTrue(p.contains(0.05))
        self.assertTrue(p.contains(-0.05))
        self.assertFalse(p.contains(0.0501))

    def test_table(self):
        table = compute_section_properties(*RECTANGLE).table()
        for name in ('area', 'inertia', 'polar_inertia', 'outer_radius',
                     'shear_thickness'):
            self.assertIn(name, table)


class TestFirstMoment(TestCase):

    def test_rectangle(self):
        assert_allclose(compute_first_moment(*RECTANGLE, 0.0), 6.25e-5)
        assert_allclose(compute_first_moment(*RECTANGLE, 0.025), 4.6875e-5)
        self.assertEqual(compute_first_moment(*RECTANGLE, 0.06), 0.0)

    def test_solid_circle(self):
        assert_allclose(
            compute_first_moment(*SOLID_CIRCLE, 0.0), 2 / 3 * 0.04 ** 3
        )
        assert_allclose(
            compute_first_moment(*SOLID_CIRCLE, 0.02),
            2 / 3 * (0.04 ** 2 - 0.02 ** 2) ** 1.5
        )
        self.assertEqual(compute_first_moment(*SOLID_CIRCLE, -0.041), 0.0)

    def test_hollow_circle(self):
        assert_allclose(
            compute_first_moment(*HOLLOW_CIRCLE, 0.0),
            2 / 3 * (0.04 ** 3 - 0.03 ** 3),
            err_msg='Within the bore the hole segment must be subtracted.'
        )
        assert_allclose(
            compute_first_moment(*HOLLOW_CIRCLE, 0.035),
            2 / 3 * (0.04 ** 2 - 0.035 ** 2) ** 1.5,
            err_msg='Beyond the bore only the outer segment contributes.'
        )
        assert_allclose(
            compute_first_moment(*HOLLOW_CIRCLE, 0.03),
            2 / 3 * (0.04 ** 2 - 0.03 ** 2) ** 1.5,
            err_msg='Q must be continuous at the inner radius.'
        )
        self.assertEqual(compute_first_moment(*HOLLOW_CIRCLE, 0.05), 0.0)

    def test_i_beam(self):
        assert_allclose(
            compute_first_moment(*I_BEAM, 0.0), 0.1 * 0.02 + 0.0008 * 0.04
        )
        web = 0.01 * (0.08 - 0.05) * (0.08 + 0.05) / 2
        assert_allclose(
            compute_first_moment(*I_BEAM, -0.05), 0.1 * 0.02 + web
        )
        assert_allclose(
            compute_first_moment(*I_BEAM, 0.09), 0.1 * 0.01 * 0.005,
            err_msg='Within a flange only the strip above the cut counts.'
        )
        assert_allclose(
            compute_first_moment(*I_BEAM, 0.08), 0.1 * 0.02,
            err_msg='At the flange root the web branch applies.'
        )
        self.assertEqual(compute_first_moment(*I_BEAM, 0.11), 0.0)

    def test_i_beam_without_web(self):
        dims = IBeamDimensions(h=0.02, bf=0.1, tf=0.02, tw=0.01)
        assert_allclose(
            compute_first_moment('i_beam', dims, 0.0), 0.1 * 0.01 ** 2 / 2,
            err_msg='Without web every ordinate lies within a flange.'
        )
        self.assertEqual(compute_first_moment('i_beam', dims, 0.01), 0.0)

    def test_invalid_dimensions(self):
        self.assertTrue(math.isnan(compute_first_moment(
            'solid_circle', SolidCircleDimensions(d=math.nan), 0.0
        )))
        self.assertEqual(
            compute_first_moment('rectangle',
                                 RectangleDimensions(b=0.05, h=-0.1), 0.0),
            0.0,
            'A negative height leaves every ordinate outside the section.'
        )
        assert_allclose(
            compute_first_moment('hollow_circle',
                                 HollowCircleDimensions(ro=0.04, ri=-0.01),
                                 0.0),
            2 / 3 * 0.04 ** 3
        )

    def test_zero_at_outer_radius(self):
        for variant, dims in SECTIONS:
            r = compute_section_properties(variant, dims).outer_radius
            assert_allclose(
                compute_first_moment(variant, dims, r), 0.0,
                err_msg=f'Q of {variant} must vanish at the outer fibre.'
            )
            assert_allclose(compute_first_moment(variant, dims, -r), 0.0)

    def test_maximum_at_neutral_axis(self):
        for variant, dims in SECTIONS:
            q_max = compute_first_moment(variant, dims, 0.0)
            _, q_values = first_moment_disc(variant, dims, n_disc=40)
            assert_allclose(
                q_values.max(), q_max,
                err_msg=f'Q of {variant} must be maximal at y = 0.'
            )

    def test_even(self):
        for variant, dims in (RECTANGLE, SOLID_CIRCLE, HOLLOW_CIRCLE):
            for y in (0.005, 0.017, 0.031, 0.04):
                self.assertEqual(
                    compute_first_moment(variant, dims, y),
                    compute_first_moment(variant, dims, -y),
                    f'Q of {variant} must be an even function of y.'
                )

    def test_disc(self):
        y_values, q_values = FirstMomentEvaluator(*RECTANGLE).disc(4)
        assert_allclose(y_values, [-0.05, -0.025, 0.0, 0.025, 0.05])
        assert_allclose(q_values, [0.0, 4.6875e-5, 6.25e-5, 4.6875e-5, 0.0])
        with self.assertRaises(ValueError):
            FirstMomentEvaluator(*RECTANGLE).disc(0)


class TestStress(TestCase):

    def test_axial(self):
        props = SectionProperties(0.005, 4e-6, 1.6e-5, 0.05, 0.05)
        result = compute_stresses(props, 0.0, LoadSet(axial_force=1000), 0.0)
        self.assertEqual(result.axial, 200000.0)
        self.assertEqual(result, StressResult(200000.0, 0.0, 0.0, 0.0))

    def test_rectangle(self):
        props = compute_section_properties(*RECTANGLE)
        q = compute_first_moment(*RECTANGLE, 0.025)
        result = compute_stresses(
            props, q, LoadSet(1000, 1000, 1000, 500), 0.025
        )
        assert_allclose(result.axial, 2e5)
        assert_allclose(result.bending, 6e6)
        assert_allclose(result.torsional_shear, 1.5e6)
        assert_allclose(result.transverse_shear, 112500.0)
        self.assertTrue(result.is_finite)

    def test_sign_convention(self):
        props = compute_section_properties(*RECTANGLE)
        loads = LoadSet(bending_moment=1000, torque=1000)
        top = compute_stresses(props, 0.0, loads, 0.05)
        bottom = compute_stresses(props, 0.0, loads, -0.05)
        self.assertGreater(
            top.bending, 0,
            'A positive moment must give positive stress at positive y.'
        )
        assert_allclose(bottom.bending, -top.bending)
        assert_allclose(
            bottom.torsional_shear, top.torsional_shear,
            err_msg='Torsional shear depends on |y| only.'
        )

    def test_degenerate_section(self):
        dims = HollowCircleDimensions(ro=0.04, ri=0.08)
        props = compute_section_properties('hollow_circle', dims)
        q = compute_first_moment('hollow_circle', dims, 0.02)
        result = compute_stresses(
            props, q, LoadSet(1000, 1000, 1000, 500), 0.02
        )
        self.assertFalse(math.isfinite(result.transverse_shear))
        self.assertFalse(math.isfinite(result.axial))
        self.assertFalse(result.is_finite)

    def test_degenerate_section_warning(self):
        dims = HollowCircleDimensions(ro=0.04, ri=0.08)
        props = compute_section_properties('hollow_circle', dims)
        name = 'beamstress.core.postprocessing.stress.StressEvaluator'
        with self.assertLogs(name, level='WARNING'):
            compute_stresses(props, 0.0, LoadSet(axial_force=1000), 0.02)

    def test_i_beam_without_web(self):
        dims = IBeamDimensions(h=0.02, bf=0.1, tf=0.02, tw=0.01)
        props = compute_section_properties('i_beam', dims)
        q = compute_first_moment('i_beam', dims, 0.0)
        result = compute_stresses(props, q, LoadSet(1000, 10, 10, 500), 0.0)
        self.assertTrue(result.is_finite)
        assert_allclose(result.transverse_shear,
                        500 * 5e-6 / (props.inertia * 0.01))

    def test_invalid_dimensions(self):
        dims = SolidCircleDimensions(d=math.nan)
        props = compute_section_properties('solid_circle', dims)
        q = compute_first_moment('solid_circle', dims, 0.0)
        result = compute_stresses(props, q, LoadSet(1000, 10, 10, 500), 0.0)
        self.assertFalse(
            result.is_finite,
            'Non-finite dimensions must give non-finite stresses.'
        )

    def test_zero_shear_thickness(self):
        props = SectionProperties(0.005, 4e-6, 1.6e-5, 0.05, 0.0)
        result = compute_stresses(props, 6.25e-5, LoadSet(shear_force=500),
                                  0.0)
        self.assertEqual(result.transverse_shear, math.inf)

    def test_out_of_range_ordinate(self):
        props = compute_section_properties(*RECTANGLE)
        q = compute_first_moment(*RECTANGLE, 0.08)
        result = compute_stresses(
            props, q, LoadSet(0, 1000, 1000, 500), 0.08
        )
        self.assertEqual(result.transverse_shear, 0.0)
        self.assertNotEqual(result.bending, 0.0)
        self.assertNotEqual(result.torsional_shear, 0.0)

    def test_as_dict(self):
        result = StressResult(1.0, 2.0, 3.0, 4.0)
        self.assertEqual(result.as_dict(), {
            'axial': 1.0, 'bending': 2.0, 'torsional_shear': 3.0,
            'transverse_shear': 4.0
        })


class TestStressAnalysis(TestCase):

    def test_pipeline(self):
        loads = LoadSet(1000, 1000, 1000, 500)
        analysis = StressAnalysis(*RECTANGLE, loads, y=0.025)
        props = compute_section_properties(*RECTANGLE)
        q = compute_first_moment(*RECTANGLE, 0.025)
        self.assertEqual(analysis.properties, props)
        self.assertEqual(analysis.first_moment, q)
        self.assertEqual(
            analysis.stresses, compute_stresses(props, q, loads, 0.025),
            'The pipeline must equal the chained single operations.'
        )

    def test_default_loads(self):
        analysis = StressAnalysis(*SOLID_CIRCLE)
        self.assertEqual(analysis.stresses,
                         StressResult(0.0, 0.0, 0.0, 0.0))

    def test_out_of_range_warning(self):
        name = 'beamstress.core.postprocessing.analysis.StressAnalysis'
        with self.assertLogs(name, level='WARNING'):
            StressAnalysis(*RECTANGLE, LoadSet(bending_moment=10), y=0.2)

    def test_stress_disc(self):
        analysis = StressAnalysis(*RECTANGLE, LoadSet(1000, 1000, 1000, 500))
        y_values, stresses = analysis.stress_disc(n_disc=4)
        assert_allclose(y_values, [-0.05, -0.025, 0.0, 0.025, 0.05])
        self.assertEqual(
            set(stresses),
            {'axial', 'bending', 'torsional_shear', 'transverse_shear'}
        )
        assert_allclose(stresses['axial'], np.full(5, 2e5))
        assert_allclose(stresses['bending'], -stresses['bending'][::-1])
        assert_allclose(stresses['transverse_shear'][[0, -1]], [0.0, 0.0])
        assert_allclose(stresses['transverse_shear'][3], 112500.0)

    def test_summary(self):
        summary = StressAnalysis(*I_BEAM, LoadSet(1000), y=0.05).summary()
        for name in ('area', 'first_moment', 'axial', 'transverse_shear',
                     'm⁴', 'Pa'):
            self.assertIn(name, summary)


class TestTables(TestCase):

    def test_table_properties(self):
        table = table_properties({'area': 0.005}, {'area': 'm²'})
        self.assertIn('Quantity', table)
        self.assertIn('0.005', table)
        self.assertIn('m²', table)

    def test_table_distribution(self):
        table = table_distribution([0.0, 0.1], {'q': [1.0, 2.0]})
        self.assertIn('y (m)', table)
        self.assertIn('q', table)


class TestMain(TestCase):

    def test_demo(self):
        out = io.StringIO()
        with redirect_stdout(out):
            status = main(['demo'])
        self.assertEqual(status, 0)
        self.assertIn('transverse_shear', out.getvalue())
        self.assertIn('200000', out.getvalue())

    def test_unknown_command(self):
        out = io.StringIO()
        with redirect_stdout(out):
            status = main(['plot'])
        self.assertEqual(status, 2)
        self.assertIn('Usage', out.getvalue())
