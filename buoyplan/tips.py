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
Equipment tips.
"""

from .model import Gender, BodyType, WaterType, Preference, Discipline, \
    is_advanced

BODY_TYPE_TIPS = {
    BodyType.MUSCULAR: 'Muscular build: higher muscle density requires more'
        ' weight, consider 10-20% above baseline.',
    BodyType.LEAN: 'Lean build: lower body fat may require slightly more'
        ' weight for neutral buoyancy.',
    BodyType.HIGHER_FAT: 'Higher body fat: natural buoyancy may require'
        ' 20-30% less weight than baseline.',
    BodyType.BROAD: 'Broad build: larger frame may require more wetsuit'
        ' coverage and adjusted weight distribution.',
    BodyType.AVERAGE: 'Average build: baseline recommendations should work'
        ' well with minor adjustments.',
}

WATER_TYPE_TIPS = {
    WaterType.SALTWATER: 'Saltwater provides about 2.5% more buoyancy than'
        ' freshwater, additional 0.5kg may be needed.',
    WaterType.FRESHWATER: 'Freshwater provides less buoyancy, ensure'
        ' adequate weight for safety and depth control.',
}

PREFERENCE_TIPS = {
    Preference.NEUTRAL: 'Neutral at {}m: fine tune ballast in 0.5kg steps'
        ' to hit the custom depth.',
    Preference.SLIGHTLY_POSITIVE: 'Slightly positive at {}m: easier ascent'
        ' at the cost of more effort during descent.',
    Preference.SLIGHTLY_NEGATIVE: 'Slightly negative at {}m: easier descent,'
        ' keep ascent effort in mind.',
}

DISCIPLINE_TIPS = {
    Discipline.CONSTANT_WEIGHT: 'Constant weight: ballast stays with you for'
        ' the whole dive, avoid overweighting for the ascent.',
    Discipline.FREE_IMMERSION: 'Free immersion: pulling on the line allows'
        ' slightly more ballast than constant weight.',
    Discipline.VARIABLE_WEIGHT: 'Variable weight: the sled provides descent'
        ' weight, less personal ballast is needed.',
    Discipline.NO_LIMITS: 'No limits: sled descent and assisted ascent'
        ' require minimal personal ballast.',
}


def equipment_tips(plan, state, target_range, ballast):
    """
    Generate equipment tips for a buoyancy plan.

    :param plan: Buoyancy plan.
    :param state: Physical state of the diver.
    :param target_range: Target range of neutral buoyancy depth.
    :param ballast: Ballast weight recommendation.
    """
    diver = plan.diver
    thickness = plan.equipment.wetsuit_thickness
    water_type = plan.environment.water_type

    tips = [
        'Recommended ballast: {:.1f}kg (1kg per 1mm of wetsuit plus'
        ' individual factors).'.format(ballast.adjusted)
    ]

    if state.bmi > 25:
        tips.append(
            'Higher BMI: natural buoyancy from body fat may reduce weight'
            ' requirements.'
        )
    elif state.bmi < 20:
        tips.append(
            'Lower BMI: additional weight may be needed due to lower body'
            ' fat percentage.'
        )

    if diver.gender == Gender.FEMALE:
        tips.append(
            'Female divers typically need 0.5-1kg less weight than male'
            ' divers.'
        )
    else:
        tips.append(
            'Male divers typically need 0.5-1kg more weight than female'
            ' divers.'
        )

    if thickness > 0:
        tips.append(
            'Your {}mm wetsuit adds {:.1f}kg of buoyancy (adjusted for body'
            ' type).'.format(thickness, state.wetsuit_buoyancy)
        )
    else:
        tips.append(
            'No wetsuit: consider thermal protection and its buoyancy'
            ' effects.'
        )

    tips.append(
        'Target neutral buoyancy depth for {}: {}-{}m (optimal {}m).'.format(
            water_type, target_range.min, target_range.max,
            target_range.optimal
        )
    )
    tips.append(BODY_TYPE_TIPS[diver.body_type])
    tips.append(WATER_TYPE_TIPS[water_type])

    prefs = plan.preferences
    if is_advanced(prefs):
        if prefs.use_custom_depth:
            tips.append(
                PREFERENCE_TIPS[prefs.preference].format(prefs.custom_depth)
            )
        if prefs.use_discipline:
            tips.append(DISCIPLINE_TIPS[prefs.discipline])

    return tuple(tips)


# vim: sw=4:et:ai
