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
Ballast weight recommendation.

The baseline ballast is 1kg per 1mm of wetsuit thickness. The baseline is
adjusted with individual factors of a diver

- body weight: 0.5kg more above 80kg, 0.5kg less below 60kg
- height: 0.2kg per 10cm of deviation from gender average height
- water type: 0.5kg more in saltwater, 0.5kg less in freshwater
- gender: 0.3kg more for male, 0.3kg less for female divers
- body type: lean -0.2kg, muscular +0.5kg, broad +0.3kg, higher fat -0.8kg
- BMI: 0.4kg less above 25, 0.4kg more below 20
- lung capacity: 0.2kg per 1L of deviation from gender average

In advanced mode, the sum of the factors is amplified by 15% and the
advanced configuration adjustments are added. The amplification and the
adjustments are reported as named factors as well, so the baseline and
all the factors always sum up to the recommended ballast (unless it is
negative, then it is zero).
"""

import logging

from .estimator import expected_ballast
from .factor import Factor, reduce_factors, lookup
from .model import Gender, BodyType, WaterType, BallastRecommendation, \
    WeightRange
from .physics import AVG_HEIGHT, AVG_LUNG_CAPACITY

logger = logging.getLogger(__name__)

AMPLIFICATION = 1.15

BODY_TYPE_BALLAST = {
    BodyType.LEAN: -0.2,
    BodyType.MUSCULAR: 0.5,
    BodyType.BROAD: 0.3,
    BodyType.HIGHER_FAT: -0.8,
}

# factor(plan, state)
BALLAST_FACTORS = (
    Factor('body_weight', lambda p, s: p.diver.weight > 80, 0.5),
    Factor('body_weight', lambda p, s: p.diver.weight < 60, -0.5),
    Factor(
        'height', None,
        lambda p, s: (p.diver.height - AVG_HEIGHT[p.diver.gender]) / 10 * 0.2
    ),
    Factor(
        'water_type',
        lambda p, s: p.environment.water_type == WaterType.SALTWATER, 0.5
    ),
    Factor(
        'water_type',
        lambda p, s: p.environment.water_type == WaterType.FRESHWATER, -0.5
    ),
    Factor('gender', lambda p, s: p.diver.gender == Gender.MALE, 0.3),
    Factor('gender', lambda p, s: p.diver.gender == Gender.FEMALE, -0.3),
    Factor(
        'body_type', None,
        lookup(BODY_TYPE_BALLAST, lambda p, s: p.diver.body_type)
    ),
    Factor('bmi', lambda p, s: s.bmi > 25, -0.4),
    Factor('bmi', lambda p, s: s.bmi < 20, 0.4),
    Factor(
        'lung_capacity', None,
        lambda p, s: (s.lung_capacity - AVG_LUNG_CAPACITY[p.diver.gender]) * 0.2
    ),
)


def recommend(plan, state, adjustment=None):
    """
    Calculate ballast weight recommendation.

    :param plan: Buoyancy plan.
    :param state: Physical state of the diver.
    :param adjustment: Advanced configuration adjustments, null if advanced
        mode is not active.
    """
    baseline = expected_ballast(plan)
    factors = reduce_factors(BALLAST_FACTORS, plan, state)

    margin = 1.0
    if adjustment is not None:
        total = sum(factors.values())
        factors['amplification'] = total * (AMPLIFICATION - 1)
        factors['preference'] = adjustment.preference
        factors['discipline'] = adjustment.discipline
        margin = 1.5

    adjusted = max(0.0, baseline + sum(factors.values()))
    rec = BallastRecommendation(
        baseline, adjusted, factors,
        WeightRange(max(0.0, adjusted - margin), adjusted + margin, adjusted)
    )
    if __debug__:
        logger.debug(
            'ballast: baseline {:.1f}kg, recommended {:.2f}kg, factors {}'
            .format(baseline, adjusted, dict(factors))
        )
    return rec


# vim: sw=4:et:ai
