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
Advanced buoyancy configuration.

Advanced configuration allows a diver to

- set custom neutral buoyancy depth and buoyancy preference at that depth
  (slightly positive, neutral or slightly negative)
- optimize ballast for a competitive freediving discipline

Both options result in ballast weight adjustment [kg]. The adjustments
are used by the empirical neutral depth estimator and by the ballast
recommendation.
"""

import logging

from .factor import Multiplier, reduce_multipliers
from .model import Preference, Discipline, BodyType, WaterType, \
    Adjustment, is_advanced

logger = logging.getLogger(__name__)

PREFERENCE_BASE = {
    Preference.NEUTRAL: 0.0,
    Preference.SLIGHTLY_POSITIVE: -0.5,
    Preference.SLIGHTLY_NEGATIVE: 0.5,
}

# multiplier(plan, state)
PREFERENCE_MULTIPLIERS = (
    Multiplier(lambda p, s: p.preferences.custom_depth > 15, 1.2),
    Multiplier(lambda p, s: p.preferences.custom_depth < 8, 0.8),
    Multiplier(
        lambda p, s: p.environment.water_type == WaterType.SALTWATER, 1.1
    ),
    Multiplier(lambda p, s: p.diver.body_type == BodyType.MUSCULAR, 1.15),
    Multiplier(lambda p, s: p.diver.body_type == BodyType.HIGHER_FAT, 0.85),
    Multiplier(lambda p, s: s.bmi > 25, 0.9),
    Multiplier(lambda p, s: s.bmi < 20, 1.1),
)

DISCIPLINE_BASE = {
    Discipline.CONSTANT_WEIGHT: 0.2,
    Discipline.FREE_IMMERSION: 0.3,
    Discipline.VARIABLE_WEIGHT: -0.5,
    Discipline.NO_LIMITS: -1.0,
}

# multiplier(plan, state, neutral_depth)
DISCIPLINE_MULTIPLIERS = (
    Multiplier(lambda p, s, nd: nd > p.environment.target_depth, 0.8),
    Multiplier(lambda p, s, nd: nd < 0.5 * p.environment.target_depth, 1.2),
    Multiplier(lambda p, s, nd: p.diver.body_type == BodyType.MUSCULAR, 1.1),
    Multiplier(
        lambda p, s, nd: p.diver.body_type == BodyType.HIGHER_FAT, 0.9
    ),
    Multiplier(lambda p, s, nd: p.diver.weight > 80, 1.1),
    Multiplier(lambda p, s, nd: p.diver.weight < 60, 0.9),
)


def preference_adjustment(plan, state):
    """
    Calculate ballast adjustment [kg] for buoyancy preference at custom
    neutral depth.

    Slightly positive buoyancy requires less ballast, slightly negative
    buoyancy requires more ballast. Zero is returned when custom neutral
    depth is not used.

    :param plan: Buoyancy plan.
    :param state: Physical state of the diver.
    """
    prefs = plan.preferences
    if prefs is None or not prefs.use_custom_depth:
        return 0.0
    base = PREFERENCE_BASE[prefs.preference]
    return reduce_multipliers(PREFERENCE_MULTIPLIERS, base, plan, state)


def discipline_adjustment(plan, state, neutral_depth):
    """
    Calculate ballast adjustment [kg] for diving discipline.

    The adjustment grows with target depth (up to 1.5 times at 45m) and
    depends on neutral depth of the diver relative to target depth. Zero
    is returned when discipline optimization is not used.

    :param plan: Buoyancy plan.
    :param state: Physical state of the diver.
    :param neutral_depth: Neutral buoyancy depth [m] without discipline
        adjustment.
    """
    prefs = plan.preferences
    if prefs is None or not prefs.use_discipline:
        return 0.0
    base = DISCIPLINE_BASE[prefs.discipline]
    base *= min(plan.environment.target_depth / 30, 1.5)
    return reduce_multipliers(
        DISCIPLINE_MULTIPLIERS, base, plan, state, neutral_depth
    )


def adjust(plan, state, neutral_depth):
    """
    Calculate ballast adjustments of advanced configuration.

    Null is returned if advanced configuration is not active.

    :param plan: Buoyancy plan.
    :param state: Physical state of the diver.
    :param neutral_depth: Neutral buoyancy depth [m] without discipline
        adjustment.
    """
    if not is_advanced(plan.preferences):
        return None
    adj = Adjustment(
        preference_adjustment(plan, state),
        discipline_adjustment(plan, state, neutral_depth),
    )
    if __debug__:
        logger.debug('advanced adjustment: {}'.format(adj))
    return adj


# vim: sw=4:et:ai
