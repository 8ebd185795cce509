#
# BuoyPlan - freediving buoyancy planning library.
#
# Copyright (C) 2013-2014 by Artur Wroblewski <wrobell@pld-linux.org>
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.
#

"""
Physical properties of a diver tests.
"""

from buoyplan.model import Equipment, Weight, DEFAULT_CONSTANTS
from buoyplan.physics import eq_bmi, eq_pressure, eq_boyle, body_density, \
    default_lung_capacity, lung_capacity, wetsuit_buoyancy, \
    wetsuit_compression, wetsuit_volume, ballast, physical_state

from .tools import _diver, _plan, _env

import unittest


class EquationTestCase(unittest.TestCase):
    """
    Physics equations tests.
    """
    def test_bmi(self):
        """
        Test body mass index calculation
        """
        self.assertAlmostEqual(24.0569, eq_bmi(72, 173), 4)


    def test_pressure(self):
        """
        Test absolute pressure at depth calculation
        """
        v = eq_pressure(10, 1025, DEFAULT_CONSTANTS)
        self.assertAlmostEqual(201877.5, v, 4)


    def test_pressure_surface(self):
        """
        Test absolute pressure at the surface
        """
        v = eq_pressure(0, 1025, DEFAULT_CONSTANTS)
        self.assertEqual(DEFAULT_CONSTANTS.surface_pressure, v)


    def test_boyle(self):
        """
        Test gas volume compression with Boyle's law
        """
        v = eq_boyle(6.0, 10, 1025, DEFAULT_CONSTANTS)
        self.assertAlmostEqual(3.011, v, 3)


    def test_boyle_surface(self):
        """
        Test gas volume at the surface with Boyle's law
        """
        v = eq_boyle(6.0, 0, 1025, DEFAULT_CONSTANTS)
        self.assertAlmostEqual(6.0, v)



class BodyDensityTestCase(unittest.TestCase):
    """
    Body density estimation tests.
    """
    def test_average(self):
        """
        Test body density of average male diver
        """
        self.assertEqual(1020, body_density(24, 'average', 'male'))


    def test_corrections(self):
        """
        Test body density with BMI and gender corrections
        """
        self.assertEqual(1075, body_density(17, 'lean', 'male'))
        self.assertEqual(1015, body_density(27, 'broad', 'male'))
        self.assertEqual(1025, body_density(32, 'muscular', 'female'))


    def test_limits(self):
        """
        Test body density limits
        """
        self.assertEqual(950, body_density(35, 'higher-fat', 'female'))
        self.assertEqual(1080, body_density(17, 'muscular', 'male'))



class LungCapacityTestCase(unittest.TestCase):
    """
    Lung capacity tests.
    """
    def test_default(self):
        """
        Test default lung capacity lookup
        """
        self.assertEqual(5.0, default_lung_capacity('female', 'broad'))
        self.assertEqual(5.8, default_lung_capacity('male', 'higher-fat'))


    def test_diver_default(self):
        """
        Test lung capacity of a diver without measured lung capacity
        """
        self.assertEqual(6.3, lung_capacity(_diver(body_type='muscular')))


    def test_diver_override(self):
        """
        Test lung capacity of a diver with measured lung capacity
        """
        self.assertEqual(7.2, lung_capacity(_diver(lung_capacity=7.2)))



class WetsuitTestCase(unittest.TestCase):
    """
    Wetsuit buoyancy and compression tests.
    """
    def test_buoyancy(self):
        """
        Test wetsuit buoyancy
        """
        self.assertEqual(3.0, wetsuit_buoyancy(3, 24, 'average'))


    def test_buoyancy_adjusted(self):
        """
        Test wetsuit buoyancy adjusted with BMI and body type
        """
        self.assertAlmostEqual(3.465, wetsuit_buoyancy(3, 26, 'broad'))
        self.assertAlmostEqual(4.275, wetsuit_buoyancy(5, 19, 'lean'))


    def test_compression(self):
        """
        Test wetsuit compression
        """
        self.assertAlmostEqual(0.1, wetsuit_compression(10, 3))
        self.assertAlmostEqual(0.0, wetsuit_compression(0, 3))


    def test_compression_limit(self):
        """
        Test wetsuit compression limit
        """
        self.assertAlmostEqual(0.7, wetsuit_compression(100, 3))


    def test_compression_thickness(self):
        """
        Test wetsuit compression of thick and thin wetsuits
        """
        self.assertAlmostEqual(0.09, wetsuit_compression(10, 5))
        self.assertAlmostEqual(0.11, wetsuit_compression(10, 1))


    def test_volume(self):
        """
        Test wetsuit volume at depth
        """
        self.assertAlmostEqual(0.8, wetsuit_volume(1.0, 20, 3))



class PhysicalStateTestCase(unittest.TestCase):
    """
    Physical state of a diver tests.
    """
    def test_ballast(self):
        """
        Test total ballast weight with mixed units
        """
        eq = Equipment(2, Weight(2), Weight(1, 'lbs'))
        self.assertAlmostEqual(2.45359237, ballast(eq))


    def test_state(self):
        """
        Test physical state of a diver
        """
        state = physical_state(_plan(), DEFAULT_CONSTANTS)

        self.assertAlmostEqual(24.0569, state.bmi, 4)
        self.assertEqual(1020, state.body_density)
        self.assertAlmostEqual(72 / 1020, state.body_volume)
        self.assertEqual(6.0, state.lung_capacity)
        self.assertAlmostEqual(0.006, state.lung_volume_surface)
        self.assertTrue(state.lung_volume_depth < state.lung_volume_surface)
        self.assertEqual(2.0, state.wetsuit_buoyancy)
        self.assertAlmostEqual(2 / 1025, state.wetsuit_volume_surface)
        self.assertAlmostEqual(0.2, state.compression)
        self.assertAlmostEqual(
            state.wetsuit_volume_surface * 0.8, state.wetsuit_volume_depth
        )
        self.assertEqual(1025, state.water_density)
        self.assertEqual(2, state.ballast)


    def test_state_freshwater(self):
        """
        Test physical state of a diver in freshwater
        """
        plan = _plan(env=_env('freshwater'))
        state = physical_state(plan, DEFAULT_CONSTANTS)
        self.assertEqual(1000, state.water_density)


    def test_state_constants(self):
        """
        Test physical state of a diver with custom constants
        """
        constants = DEFAULT_CONSTANTS._replace(saltwater_density=1030.0)
        state = physical_state(_plan(), constants)
        self.assertEqual(1030.0, state.water_density)
        self.assertAlmostEqual(2 / 1030, state.wetsuit_volume_surface)


# vim: sw=4:et:ai
