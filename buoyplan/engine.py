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
BuoyPlan buoyancy planning engine.
"""

import logging

from .alt.force import ForceBalanceSolver
from .error import ConfigError
from .estimator import EmpiricalEstimator
from .model import Plan, BuoyancyResult, Physics, DEFAULT_CONSTANTS, \
    is_advanced, custom_depth
from .physics import physical_state
from . import advanced
from . import ballast
from . import safety
from . import state as bstate
from . import tips
from . import zone

logger = logging.getLogger(__name__)


class Engine(object):
    """
    BuoyPlan buoyancy planning engine.

    Use buoyancy planning engine to calculate neutral buoyancy depth,
    ballast weight recommendation and safety warnings for a diver.

    The engine holds configuration only, every calculation is performed
    from scratch.

    :var constants: Physical constants.
    :var estimator: Neutral depth estimator used for recommendations.
    :var solver: Neutral depth estimator used for comparison.
    """
    def __init__(self, constants=DEFAULT_CONSTANTS):
        super().__init__()
        self.estimator = EmpiricalEstimator(constants)
        self.solver = ForceBalanceSolver(constants)
        self.constants = constants


    @property
    def constants(self):
        """
        Physical constants.

        Setting physical constants sets them for the estimator and the
        solver as well.
        """
        return self._constants


    @constants.setter
    def constants(self, constants):
        self._constants = constants
        self.estimator.constants = constants
        self.solver.constants = constants


    def _validate_config(self):
        """
        Validate engine configuration.

        `ConfigError` is raised if any of the configuration rules are
        violated.

        The configuration rules are

        #. Gravity is greater than zero.
        #. Surface pressure is greater than zero.
        #. Saltwater and freshwater densities are greater than zero.
        #. Solver uses the same physical constants as the engine.
        #. Solver depth step is greater than zero.
        #. Solver maximum depth is greater than zero.
        """
        c = self.constants
        if c.gravity <= 0:
            raise ConfigError('Gravity has to be greater than zero')

        if c.surface_pressure <= 0:
            raise ConfigError('Surface pressure has to be greater than zero')

        if c.saltwater_density <= 0 or c.freshwater_density <= 0:
            raise ConfigError('Water density has to be greater than zero')

        if self.solver.constants != c:
            raise ConfigError(
                'Solver physical constants differ from engine constants'
            )

        if self.solver.step <= 0:
            raise ConfigError('Solver depth step has to be greater than zero')

        if self.solver.max_depth <= 0:
            raise ConfigError(
                'Solver maximum depth has to be greater than zero'
            )


    def _physics(self, plan, state, neutral_depth, depth, preference):
        """
        Calculate buoyancy of a diver with force balance model.

        :param plan: Buoyancy plan.
        :param state: Physical state of the diver.
        :param neutral_depth: Theoretical neutral depth [m].
        :param depth: Custom neutral depth [m] or null.
        :param preference: Buoyancy preference at custom depth.
        """
        env = plan.environment
        is_adv = is_advanced(plan.preferences)
        surface_force = self.solver.net_force(plan, state, 0)
        depth_force = self.solver.net_force(plan, state, env.target_depth)
        surface_state = bstate.classify(
            env.water_type, neutral_depth, 0, depth, preference, is_adv
        )
        depth_state = bstate.classify(
            env.water_type, neutral_depth, env.target_depth, depth,
            preference, is_adv
        )
        return Physics(
            surface_force, depth_force,
            surface_force / self.constants.gravity, surface_state,
            depth_state
        )


    def calculate(self, diver, equipment, environment, preferences=None):
        """
        Calculate buoyancy of a diver.

        `ConfigError` is raised if engine configuration is invalid.

        :param diver: Diver body profile.
        :param equipment: Diver equipment configuration.
        :param environment: Dive environment.
        :param preferences: Advanced preferences (optional).
        """
        self._validate_config()

        plan = Plan(diver, equipment, environment, preferences)
        water_type = environment.water_type
        is_adv = is_advanced(preferences)
        depth = custom_depth(preferences)
        pref = preferences.preference if depth is not None else None

        state = physical_state(plan, self.constants)
        neutral_depth = self.estimator.neutral_depth(plan, state)
        adjustment = advanced.adjust(
            plan, state, self.estimator.base_depth(plan, state)
        )
        theoretical_depth = self.solver.neutral_depth(plan, state)

        target_range = bstate.target_range(water_type, depth)
        surface_state = bstate.classify(
            water_type, neutral_depth, 0, depth, pref, is_adv
        )
        depth_state = bstate.classify(
            water_type, neutral_depth, environment.target_depth, depth, pref,
            is_adv
        )
        in_range = target_range.min <= neutral_depth <= target_range.max
        physics = self._physics(plan, state, theoretical_depth, depth, pref)

        rec = ballast.recommend(plan, state, adjustment)

        tolerance = bstate.surface_tolerance(water_type, depth, pref, is_adv)
        ctx = safety.Context(
            plan, state, neutral_depth, surface_state, depth_state,
            target_range, tolerance, is_adv
        )
        warnings = safety.safety_warnings(ctx)
        equipment_tips = tips.equipment_tips(plan, state, target_range, rec)

        chart = zone.zones(
            environment, neutral_depth, theoretical_depth, target_range,
            surface_state, depth_state
        )
        gauge = zone.gauge(
            surface_state, neutral_depth, target_range, is_adv, pref
        )

        if __debug__:
            logger.debug(
                'neutral depth: empirical {}m, theoretical {}m, surface {},'
                ' depth {}'.format(
                    neutral_depth, theoretical_depth, surface_state,
                    depth_state
                )
            )

        return BuoyancyResult(
            state, surface_state, depth_state, target_range, in_range,
            neutral_depth, theoretical_depth, rec.adjusted,
            rec.adjusted - state.ballast, rec, adjustment, warnings,
            equipment_tips, chart, gauge, physics
        )


# vim: sw=4:et:ai
