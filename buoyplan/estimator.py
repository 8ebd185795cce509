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
Neutral buoyancy depth estimators.

Two estimators of neutral buoyancy depth are implemented

empirical estimator
    Calibrated, linear factor model. It is the primary model used for all
    recommendations and buoyancy state classification.
theoretical solver
    Force balance model using physics only. It is used for comparison
    purposes only, see :py:class:`buoyplan.alt.force.ForceBalanceSolver`.

Empirical Model
---------------
The empirical model starts with baseline neutral depth of 11m for
saltwater and 6m for freshwater (or custom neutral depth in advanced
mode) and adds signed contribution of each factor

wetsuit
    0.3m per 1mm of wetsuit thickness.
density
    -3m per unit of fractional body density deviation from 1020kg/m^3.
lung
    2m per unit of fractional lung capacity deviation from gender average.
ballast
    -1.5m per 1kg of ballast above expected ballast (1kg per 1mm of
    wetsuit).
bmi
    1.5m per unit of fractional BMI deviation from 23.
height
    1m per unit of fractional height deviation from gender average.
body type
    Lean +0.5m, muscular -0.5m, higher fat +1m and broad +0.3m.
gender
    0.5m for female divers.
water
    Heavy divers (above 80kg) sink easier, light divers (below 60kg)
    float more, the effect is stronger in saltwater.

In discipline optimization mode, the discipline ballast adjustment is
converted to depth using ballast factor rate.

The neutral depth is constrained to plausible range. Two boundary cases
bypass the linear model

- no ballast (0.1kg or less) - diver never becomes neutral in practice,
  :py:data:`buoyplan.const.NO_NEUTRAL_DEPTH` is returned
- too much ballast (above 15% of body weight or 4kg above expected
  ballast; 18% and 5kg in advanced mode) - diver is negative at the
  surface, zero is returned
"""

import logging

from .advanced import discipline_adjustment
from .factor import Factor, reduce_factors, lookup
from .model import BodyType, Gender, WaterType, DEFAULT_CONSTANTS, \
    is_advanced, custom_depth
from .physics import AVG_LUNG_CAPACITY, AVG_HEIGHT
from . import const

logger = logging.getLogger(__name__)

BASELINE_DEPTH = {WaterType.SALTWATER: 11.0, WaterType.FRESHWATER: 6.0}
DEPTH_BOUNDS = {WaterType.SALTWATER: (8.0, 16.0), WaterType.FRESHWATER: (4.0, 10.0)}

# depth change per 1kg of ballast [m/kg]
BALLAST_RATE = 1.5

BODY_TYPE_DEPTH = {
    BodyType.LEAN: 0.5,
    BodyType.MUSCULAR: -0.5,
    BodyType.HIGHER_FAT: 1.0,
    BodyType.BROAD: 0.3,
}

_salt = lambda p: p.environment.water_type == WaterType.SALTWATER
_fresh = lambda p: p.environment.water_type == WaterType.FRESHWATER
_heavy = lambda p: p.diver.weight > 80
_light = lambda p: p.diver.weight < 60

# factor(plan, state)
DEPTH_FACTORS = (
    Factor('wetsuit', None, lambda p, s: p.equipment.wetsuit_thickness * 0.3),
    Factor(
        'density', None,
        lambda p, s: -3 * (s.body_density - const.AVG_BODY_DENSITY)
            / const.AVG_BODY_DENSITY
    ),
    Factor(
        'lung', None,
        lambda p, s: 2 * (s.lung_capacity - AVG_LUNG_CAPACITY[p.diver.gender])
            / AVG_LUNG_CAPACITY[p.diver.gender]
    ),
    Factor(
        'ballast', None,
        lambda p, s: -BALLAST_RATE * (s.ballast - expected_ballast(p))
    ),
    Factor('bmi', None, lambda p, s: 1.5 * (s.bmi - const.AVG_BMI) / const.AVG_BMI),
    Factor(
        'height', None,
        lambda p, s: (p.diver.height - AVG_HEIGHT[p.diver.gender])
            / AVG_HEIGHT[p.diver.gender]
    ),
    Factor(
        'body_type', None,
        lookup(BODY_TYPE_DEPTH, lambda p, s: p.diver.body_type)
    ),
    Factor('gender', lambda p, s: p.diver.gender == Gender.FEMALE, 0.5),
    Factor('water', lambda p, s: _salt(p) and _heavy(p), -0.3),
    Factor('water', lambda p, s: _salt(p) and _light(p), 0.3),
    Factor('water', lambda p, s: _fresh(p) and _heavy(p), -0.2),
    Factor('water', lambda p, s: _fresh(p) and _light(p), 0.2),
)


def expected_ballast(plan):
    """
    Calculate expected ballast weight [kg] - 1kg per 1mm of wetsuit.

    :param plan: Buoyancy plan.
    """
    return plan.equipment.wetsuit_thickness * const.BALLAST_PER_MM


class NeutralDepthEstimator(object):
    """
    Base class for neutral buoyancy depth estimators.

    :var constants: Physical constants.
    """
    def __init__(self, constants=DEFAULT_CONSTANTS):
        """
        Create neutral buoyancy depth estimator.

        :param constants: Physical constants.
        """
        super().__init__()
        self.constants = constants


    def neutral_depth(self, plan, state):
        """
        Estimate neutral buoyancy depth [m].

        Zero means the diver is negative at the surface.

        :param plan: Buoyancy plan.
        :param state: Physical state of the diver.
        """
        raise NotImplementedError()



class EmpiricalEstimator(NeutralDepthEstimator):
    """
    Empirical, calibrated neutral buoyancy depth estimator.

    The empirical model does not depend on physical constants, the
    constants are used by physical state calculation only.
    """
    def baseline(self, plan):
        """
        Get baseline neutral depth [m].

        :param plan: Buoyancy plan.
        """
        depth = custom_depth(plan.preferences)
        if depth is None:
            depth = BASELINE_DEPTH[plan.environment.water_type]
        return depth


    def bounds(self, plan):
        """
        Get plausible range of neutral depth [m].

        :param plan: Buoyancy plan.
        """
        depth = custom_depth(plan.preferences)
        if depth is None:
            return DEPTH_BOUNDS[plan.environment.water_type]
        return max(1.0, depth - 3), depth + 5


    def contributions(self, plan, state):
        """
        Calculate contribution [m] of each factor of the empirical model.

        :param plan: Buoyancy plan.
        :param state: Physical state of the diver.
        """
        return reduce_factors(DEPTH_FACTORS, plan, state)


    def base_depth(self, plan, state):
        """
        Calculate neutral depth [m] using the linear model only.

        The value is not constrained and it does not include diving
        discipline adjustment.

        :param plan: Buoyancy plan.
        :param state: Physical state of the diver.
        """
        values = self.contributions(plan, state).values()
        return self.baseline(plan) + sum(values)


    def neutral_depth(self, plan, state):
        """
        Estimate neutral buoyancy depth [m] with the empirical model.

        :param plan: Buoyancy plan.
        :param state: Physical state of the diver.
        """
        if state.ballast <= const.MIN_BALLAST:
            logger.debug('no ballast, diver never reaches neutral buoyancy')
            return const.NO_NEUTRAL_DEPTH

        advanced = is_advanced(plan.preferences)
        ratio, excess = (0.18, 5) if advanced else (0.15, 4)
        if state.ballast > plan.diver.weight * ratio \
                or state.ballast - expected_ballast(plan) > excess:
            logger.debug(
                'ballast {:.1f}kg too heavy, diver negative at the surface'
                .format(state.ballast)
            )
            return 0.0

        depth = self.base_depth(plan, state)
        adj = discipline_adjustment(plan, state, depth)
        depth -= BALLAST_RATE * adj

        lo, hi = self.bounds(plan)
        depth = max(lo, min(hi, depth))

        if __debug__:
            logger.debug(
                'empirical neutral depth {:.4f}m (discipline {:.2f}kg)'
                .format(depth, adj)
            )
        return round(depth, const.SCALE)


# vim: sw=4:et:ai
