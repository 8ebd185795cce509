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
Integration tests of buoyancy planning engine.
"""

from buoyplan.model import Equipment, Weight
from buoyplan.util import convert_weight
import buoyplan

from ..tools import _diver, _equipment, _env, _prefs, _plan, _state

import unittest


class ScenarioTestCase(unittest.TestCase):
    """
    Buoyancy calculation scenarios tests.
    """
    def setUp(self):
        self.engine = buoyplan.create()


    def test_average_diver(self):
        """
        Test average diver with 2mm wetsuit and 2kg weight belt in saltwater
        """
        result = self.engine.calculate(_diver(), _equipment(2, 2), _env())

        self.assertEqual(11.7, result.expected_neutral_depth)
        self.assertEqual(50.0, result.theoretical_neutral_depth)
        self.assertEqual('positive', result.surface_state)
        self.assertEqual('negative', result.depth_state)
        self.assertTrue(result.in_target_range)
        self.assertAlmostEqual(2.76, result.recommended_weight)
        self.assertAlmostEqual(0.76, result.weight_adjustment)
        self.assertEqual((), result.safety_warnings)
        self.assertEqual(75, result.gauge.position)
        self.assertEqual(55.0, result.zones.max_depth)

        physics = result.physics
        self.assertAlmostEqual(6.5 * 9.81, physics.surface_force, 0)
        self.assertAlmostEqual(6.5, physics.surface_buoyancy, 0)
        self.assertTrue(0 < physics.depth_force < physics.surface_force)
        self.assertEqual('positive', physics.surface_state)
        self.assertEqual('positive', physics.depth_state)


    def test_no_equipment(self):
        """
        Test diver without wetsuit and ballast
        """
        result = self.engine.calculate(_diver(), _equipment(0, 0), _env())

        self.assertTrue(result.expected_neutral_depth >= 25)
        self.assertEqual('positive', result.surface_state)
        self.assertFalse(result.in_target_range)
        types = [w.type for w in result.safety_warnings]
        self.assertIn('No Ballast', types)


    def test_minimal_ballast(self):
        """
        Test diver with 0.1kg of ballast is positive at the surface
        """
        for t in (0, 3, 7):
            result = self.engine.calculate(
                _diver(), _equipment(t, 0.1), _env()
            )
            self.assertEqual('positive', result.surface_state)


    def test_overweighted(self):
        """
        Test diver with ballast above 15% of body weight
        """
        result = self.engine.calculate(_diver(), _equipment(7, 11), _env())

        self.assertEqual(0.0, result.expected_neutral_depth)
        self.assertEqual('negative', result.surface_state)
        warnings = {w.type: w for w in result.safety_warnings}
        self.assertEqual('high', warnings['Overweighting Risk'].severity)
        self.assertEqual('high', warnings['Surface Safety'].severity)


    def test_custom_depth(self):
        """
        Test diver with custom neutral depth
        """
        prefs = _prefs(use_custom_depth=True, custom_depth=15)
        result = self.engine.calculate(_diver(), _equipment(), _env(), prefs)

        self.assertEqual(15.7, result.expected_neutral_depth)
        self.assertEqual((14, 16, 15), tuple(result.target_range))
        self.assertTrue(result.in_target_range)
        self.assertEqual('positive', result.surface_state)
        self.assertEqual(0.0, result.adjustment.preference)
        self.assertEqual(0.0, result.adjustment.discipline)
        self.assertAlmostEqual(2.874, result.recommended_weight)
        self.assertEqual((), result.safety_warnings)
        self.assertEqual(7, len(result.equipment_tips))


    def test_discipline(self):
        """
        Test diver with no limits discipline optimization
        """
        prefs = _prefs(use_discipline=True, discipline='no-limits')
        result = self.engine.calculate(
            _diver(), _equipment(), _env(target_depth=30), prefs
        )

        self.assertAlmostEqual(-1.2, result.adjustment.discipline)
        self.assertEqual(13.5, result.expected_neutral_depth)
        types = [w.type for w in result.safety_warnings]
        self.assertEqual(['High-Risk Discipline'], types)


    def test_theoretical_physics(self):
        """
        Test buoyancy calculated with force balance model
        """
        env = _env(target_depth=40)
        result = self.engine.calculate(_diver(), _equipment(2, 4), env)
        physics = result.physics

        self.assertTrue(19 < result.theoretical_neutral_depth < 22)
        self.assertTrue(physics.surface_force > 0)
        self.assertTrue(physics.depth_force < 0)
        self.assertAlmostEqual(
            physics.surface_force / 9.81, physics.surface_buoyancy
        )
        self.assertEqual('positive', physics.surface_state)
        self.assertEqual('negative', physics.depth_state)



class PropertyTestCase(unittest.TestCase):
    """
    Buoyancy calculation properties tests.
    """
    def setUp(self):
        self.engine = buoyplan.create()


    def test_purity(self):
        """
        Test buoyancy calculation gives the same result for the same input
        """
        args = (_diver(), _equipment(3, 4), _env(), _prefs(use_discipline=True))
        r1 = self.engine.calculate(*args)
        r2 = self.engine.calculate(*args)
        self.assertEqual(r1, r2)


    def test_recommended_weight(self):
        """
        Test recommended weight is never negative
        """
        body_types = ('lean', 'average', 'muscular', 'broad', 'higher-fat')
        for bt in body_types:
            for g in ('male', 'female'):
                for w in ('saltwater', 'freshwater'):
                    diver = _diver(50, 190, g, bt)
                    result = self.engine.calculate(
                        diver, _equipment(0, 0), _env(w)
                    )
                    self.assertTrue(result.recommended_weight >= 0)
                    self.assertTrue(result.ballast.range.min >= 0)


    def test_solver_net_force(self):
        """
        Test net force at theoretical neutral depth is close to zero
        """
        for belt in (3, 4, 5):
            equipment = _equipment(3, belt)
            result = self.engine.calculate(_diver(), equipment, _env())
            depth = result.theoretical_neutral_depth
            self.assertTrue(0 < depth < 50, depth)

            plan = _plan(equipment=equipment)
            force = self.engine.solver.net_force(plan, _state(plan), depth)
            self.assertTrue(abs(force) < 1.0, force)


    def test_wetsuit(self):
        """
        Test 1mm of wetsuit adds 0.3m to neutral depth
        """
        r1 = self.engine.calculate(_diver(), _equipment(3, 3), _env())
        r2 = self.engine.calculate(_diver(), _equipment(4, 4), _env())
        v = r2.expected_neutral_depth - r1.expected_neutral_depth
        self.assertAlmostEqual(0.3, v)


    def test_weight_units(self):
        """
        Test ballast weight in pounds gives the same result as in kilograms
        """
        lbs = convert_weight(2, 'kg', 'lbs')
        eq_kg = Equipment(2, Weight(2))
        eq_lbs = Equipment(2, Weight(lbs, 'lbs'))

        r1 = self.engine.calculate(_diver(), eq_kg, _env())
        r2 = self.engine.calculate(_diver(), eq_lbs, _env())

        self.assertAlmostEqual(r1.state.ballast, r2.state.ballast)
        self.assertEqual(r1.expected_neutral_depth, r2.expected_neutral_depth)
        self.assertEqual(r1.surface_state, r2.surface_state)


# vim: sw=4:et:ai
