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
BuoyPlan buoyancy planning engine tests.
"""

from buoyplan.engine import Engine
from buoyplan.error import ConfigError
from buoyplan.model import DEFAULT_CONSTANTS, BuoyancyResult
import buoyplan

from .tools import _diver, _equipment, _env, _prefs

import unittest
from unittest import mock


class EngineConfigTestCase(unittest.TestCase):
    """
    Buoyancy planning engine configuration tests.
    """
    def test_gravity(self):
        """
        Test engine configuration validation with invalid gravity
        """
        engine = Engine(DEFAULT_CONSTANTS._replace(gravity=0))
        self.assertRaises(
            ConfigError, engine.calculate, _diver(), _equipment(), _env()
        )


    def test_surface_pressure(self):
        """
        Test engine configuration validation with invalid surface pressure
        """
        engine = Engine(DEFAULT_CONSTANTS._replace(surface_pressure=-1))
        self.assertRaises(ConfigError, engine._validate_config)


    def test_water_density(self):
        """
        Test engine configuration validation with invalid water density
        """
        engine = Engine(DEFAULT_CONSTANTS._replace(freshwater_density=0))
        self.assertRaises(ConfigError, engine._validate_config)


    def test_solver(self):
        """
        Test engine configuration validation with invalid solver parameters
        """
        engine = Engine()
        engine.solver.step = 0
        self.assertRaises(ConfigError, engine._validate_config)

        engine = Engine()
        engine.solver.max_depth = -10
        self.assertRaises(ConfigError, engine._validate_config)


    def test_create(self):
        """
        Test creating engine
        """
        engine = buoyplan.create()
        self.assertEqual(DEFAULT_CONSTANTS, engine.constants)
        self.assertEqual(DEFAULT_CONSTANTS, engine.estimator.constants)
        self.assertEqual(DEFAULT_CONSTANTS, engine.solver.constants)
        self.assertEqual(0.5, engine.solver.step)
        self.assertEqual(50.0, engine.solver.max_depth)


    def test_create_solver(self):
        """
        Test creating engine with solver parameters
        """
        engine = buoyplan.create(step=0.25, max_depth=40)
        self.assertEqual(0.25, engine.solver.step)
        self.assertEqual(40, engine.solver.max_depth)


    def test_create_coarse_step(self):
        """
        Test creating engine with coarse solver depth step
        """
        with self.assertLogs('buoyplan', level='WARNING'):
            engine = buoyplan.create(step=2)
        self.assertEqual(2, engine.solver.step)


    def test_create_invalid(self):
        """
        Test creating engine with invalid configuration
        """
        self.assertRaises(ConfigError, buoyplan.create, step=0)


    def test_replace_constants(self):
        """
        Test replacing engine physical constants
        """
        c = DEFAULT_CONSTANTS._replace(surface_pressure=50000, gravity=3.0)
        args = (_diver(), _equipment(3, 4), _env())

        engine = buoyplan.create()
        engine.constants = c
        self.assertEqual(c, engine.estimator.constants)
        self.assertEqual(c, engine.solver.constants)

        expected = buoyplan.create(constants=c).calculate(*args)
        result = engine.calculate(*args)
        self.assertEqual(
            expected.theoretical_neutral_depth,
            result.theoretical_neutral_depth
        )
        self.assertEqual(expected, result)


    def test_solver_constants(self):
        """
        Test engine configuration validation with solver constants
        different from engine constants
        """
        engine = buoyplan.create()
        engine.solver.constants = DEFAULT_CONSTANTS._replace(gravity=0.0)
        self.assertRaises(
            ConfigError, engine.calculate, _diver(), _equipment(), _env()
        )



class EngineTestCase(unittest.TestCase):
    """
    Buoyancy planning engine tests.
    """
    def setUp(self):
        self.engine = Engine()


    def test_result(self):
        """
        Test buoyancy calculation result
        """
        result = self.engine.calculate(_diver(), _equipment(), _env())

        self.assertIsInstance(result, BuoyancyResult)
        self.assertIsNone(result.adjustment)
        self.assertIsInstance(result.safety_warnings, tuple)
        self.assertIsInstance(result.equipment_tips, tuple)
        self.assertEqual(result.ballast.adjusted, result.recommended_weight)
        self.assertAlmostEqual(
            result.recommended_weight - result.state.ballast,
            result.weight_adjustment
        )


    def test_estimator(self):
        """
        Test empirical estimator is used for buoyancy state
        """
        estimator = mock.MagicMock()
        estimator.neutral_depth.return_value = 0.0
        estimator.base_depth.return_value = 11.0
        self.engine.estimator = estimator

        result = self.engine.calculate(_diver(), _equipment(), _env())

        self.assertTrue(estimator.neutral_depth.called)
        self.assertEqual(0.0, result.expected_neutral_depth)
        self.assertEqual('negative', result.surface_state)
        self.assertEqual(15, result.gauge.position)
        types = [w.type for w in result.safety_warnings]
        self.assertIn('Surface Safety', types)


    def test_solver(self):
        """
        Test theoretical solver is used for comparison only
        """
        solver = mock.MagicMock()
        solver.constants = DEFAULT_CONSTANTS
        solver.step = 0.5
        solver.max_depth = 50.0
        solver.neutral_depth.return_value = 3.0
        solver.net_force.return_value = 9.81
        self.engine.solver = solver

        result = self.engine.calculate(_diver(), _equipment(), _env())

        self.assertEqual(3.0, result.theoretical_neutral_depth)
        self.assertEqual(11.7, result.expected_neutral_depth)
        self.assertEqual('positive', result.surface_state)
        self.assertEqual(3.0, result.zones.lines[1].depth)
        self.assertEqual(9.81, result.physics.surface_force)
        self.assertAlmostEqual(1.0, result.physics.surface_buoyancy)
        self.assertEqual('neutral', result.physics.surface_state)
        self.assertEqual('negative', result.physics.depth_state)


    def test_advanced(self):
        """
        Test buoyancy calculation in advanced mode
        """
        prefs = _prefs(use_discipline=True)
        with mock.patch('buoyplan.advanced.adjust') as f:
            f.return_value = None
            self.engine.calculate(_diver(), _equipment(), _env(), prefs)

        plan = f.call_args[0][0]
        self.assertEqual(prefs, plan.preferences)
        self.assertAlmostEqual(11.6575, f.call_args[0][2], 4)


# vim: sw=4:et:ai
