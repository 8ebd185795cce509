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
BuoyPlan various utilities.
"""

from .model import WeightUnit, WeightRange, Gender, BodyType, WaterType
from . import const

# typical ballast [kg] for body type and water type
BALLAST_GUIDE = {
    BodyType.LEAN: {
        WaterType.SALTWATER: WeightRange(2, 4, 3),
        WaterType.FRESHWATER: WeightRange(1, 3, 2),
    },
    BodyType.AVERAGE: {
        WaterType.SALTWATER: WeightRange(3, 6, 4.5),
        WaterType.FRESHWATER: WeightRange(2, 5, 3.5),
    },
    BodyType.MUSCULAR: {
        WaterType.SALTWATER: WeightRange(4, 8, 6),
        WaterType.FRESHWATER: WeightRange(3, 7, 5),
    },
    BodyType.BROAD: {
        WaterType.SALTWATER: WeightRange(4, 7, 5.5),
        WaterType.FRESHWATER: WeightRange(3, 6, 4.5),
    },
    BodyType.HIGHER_FAT: {
        WaterType.SALTWATER: WeightRange(5, 9, 7),
        WaterType.FRESHWATER: WeightRange(4, 8, 6),
    },
}

EXPERIENCE_ADJUSTMENT = {
    'beginner': 0.5,
    'intermediate': 0,
    'advanced': -0.5,
    'instructor': -1.0,
}


def convert_weight(value, from_unit, to_unit):
    """
    Convert weight between kilograms and pounds.

    :param value: Weight value.
    :param from_unit: Unit of the value.
    :param to_unit: Destination unit.
    """
    if from_unit == to_unit:
        return value
    elif from_unit == WeightUnit.KG and to_unit == WeightUnit.LBS:
        return value * const.KG_TO_LBS
    elif from_unit == WeightUnit.LBS and to_unit == WeightUnit.KG:
        return value * const.LBS_TO_KG
    return value


def to_kg(weight):
    """
    Convert ballast weight to kilograms.

    :param weight: Ballast weight.
    """
    return convert_weight(weight.value, weight.unit, WeightUnit.KG)


def bmi_category(bmi):
    """
    Get body mass index category.

    :param bmi: Body mass index.
    """
    if bmi < 18.5:
        return 'Underweight'
    elif bmi < 25:
        return 'Normal'
    elif bmi < 30:
        return 'Overweight'
    return 'Obese'


def suggested_ballast(gender, body_type, water_type, experience='intermediate'):
    """
    Get typical ballast weight range for a diver.

    The typical range for body type and water type is adjusted with gender
    and diver experience. Female divers need about 0.5kg less weight.
    Experienced divers relax better, so they need less weight.

    :param gender: Gender.
    :param body_type: Body type.
    :param water_type: Water type.
    :param experience: Experience, one of `beginner`, `intermediate`,
        `advanced` or `instructor`.
    """
    guide = BALLAST_GUIDE.get(body_type, BALLAST_GUIDE[BodyType.AVERAGE])
    r = guide[water_type]

    adj = -0.5 if gender == Gender.FEMALE else 0
    adj += EXPERIENCE_ADJUSTMENT.get(experience, 0)

    return WeightRange(max(0, r.min + adj), r.max + adj, r.optimal + adj)


# vim: sw=4:et:ai
