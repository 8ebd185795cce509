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
Physical properties of a diver.

Body Density
------------
Body density is estimated with body type lookup table and corrected with
body mass index (BMI) and gender. Denser body (i.e. muscular) sinks
easier. The value is constrained to 950-1080 kg/m^3 range.

Lung Compression
----------------
Lung volume at depth is calculated with Boyle's law

    .. math::

        V_{d} = V_{0} * P_{0} / P_{d}

where :math:`P_{d} = P_{0} + \\rho_{w} * g * d` is absolute pressure at
depth :math:`d`.

Wetsuit Compression
-------------------
Neoprene loses about 10% of its volume per 10m of depth, up to 70%. Thick
suits compress less, thin suits compress more.
"""

import logging

from .model import Gender, BodyType, PhysicalState
from .util import to_kg
from . import const

logger = logging.getLogger(__name__)

BODY_DENSITY = {
    BodyType.LEAN: 1060,
    BodyType.AVERAGE: 1020,
    BodyType.MUSCULAR: 1070,
    BodyType.BROAD: 1035,
    BodyType.HIGHER_FAT: 965,
}

LUNG_CAPACITY = {
    Gender.MALE: {
        BodyType.LEAN: 6.5,
        BodyType.AVERAGE: 6.0,
        BodyType.MUSCULAR: 6.3,
        BodyType.BROAD: 6.8,
        BodyType.HIGHER_FAT: 5.8,
    },
    Gender.FEMALE: {
        BodyType.LEAN: 5.0,
        BodyType.AVERAGE: 4.5,
        BodyType.MUSCULAR: 4.8,
        BodyType.BROAD: 5.0,
        BodyType.HIGHER_FAT: 4.2,
    },
}

# average values per gender
AVG_LUNG_CAPACITY = {Gender.MALE: 6.0, Gender.FEMALE: 4.5}   # L
AVG_HEIGHT = {Gender.MALE: 175, Gender.FEMALE: 165}          # cm


def eq_bmi(weight, height):
    """
    Calculate body mass index.

    :param weight: Body weight [kg].
    :param height: Height [cm].
    """
    h = height / 100
    return weight / (h * h)


def eq_pressure(depth, water_density, constants):
    """
    Calculate absolute pressure at depth [Pa].

    :param depth: Depth [m].
    :param water_density: Water density [kg/m^3].
    :param constants: Physical constants.
    """
    return constants.surface_pressure \
        + water_density * constants.gravity * depth


def eq_boyle(volume, depth, water_density, constants):
    """
    Calculate gas volume at depth using Boyle's law.

    :param volume: Gas volume at the surface.
    :param depth: Depth [m].
    :param water_density: Water density [kg/m^3].
    :param constants: Physical constants.
    """
    p = eq_pressure(depth, water_density, constants)
    return volume * constants.surface_pressure / p


def body_density(bmi, body_type, gender):
    """
    Estimate body density [kg/m^3].

    :param bmi: Body mass index.
    :param body_type: Body type.
    :param gender: Gender.
    """
    density = BODY_DENSITY[body_type]

    if bmi < 18.5:
        density += 15
    elif 25 < bmi <= 30:
        density -= 20
    elif bmi > 30:
        density -= 35

    if gender == Gender.FEMALE:
        density -= 10

    return max(const.MIN_BODY_DENSITY, min(const.MAX_BODY_DENSITY, density))


def default_lung_capacity(gender, body_type):
    """
    Get typical lung capacity [L] for gender and body type.

    :param gender: Gender.
    :param body_type: Body type.
    """
    return LUNG_CAPACITY[gender][body_type]


def lung_capacity(diver):
    """
    Get lung capacity [L] of a diver.

    Default lung capacity is used if diver's lung capacity is not known.

    :param diver: Diver body profile.
    """
    if diver.lung_capacity:
        return diver.lung_capacity
    return default_lung_capacity(diver.gender, diver.body_type)


def wetsuit_buoyancy(thickness, bmi, body_type):
    """
    Estimate wetsuit buoyancy [kg].

    Larger bodies need more neoprene, so the buoyancy is adjusted with
    BMI and body type.

    :param thickness: Wetsuit thickness [mm].
    :param bmi: Body mass index.
    :param body_type: Body type.
    """
    buoyancy = thickness * const.BALLAST_PER_MM

    if bmi > 25:
        buoyancy *= 1.1
    elif bmi < 20:
        buoyancy *= 0.9

    if body_type == BodyType.BROAD:
        buoyancy *= 1.05
    elif body_type == BodyType.LEAN:
        buoyancy *= 0.95

    return buoyancy


def wetsuit_compression(depth, thickness):
    """
    Calculate wetsuit compression fraction at depth.

    :param depth: Depth [m].
    :param thickness: Wetsuit thickness [mm].
    """
    fraction = min(0.1 * (depth / 10), const.MAX_COMPRESSION)
    if thickness >= 5:
        fraction *= 0.9
    elif thickness <= 1:
        fraction *= 1.1
    return fraction


def wetsuit_volume(volume, depth, thickness):
    """
    Calculate wetsuit volume at depth.

    :param volume: Wetsuit volume at the surface [m^3].
    :param depth: Depth [m].
    :param thickness: Wetsuit thickness [mm].
    """
    return volume * (1 - wetsuit_compression(depth, thickness))


def ballast(equipment):
    """
    Calculate total ballast weight [kg].

    :param equipment: Diver equipment configuration.
    """
    return to_kg(equipment.weight_belt) + to_kg(equipment.neck_weight)


def physical_state(plan, constants):
    """
    Calculate physical properties of a diver for a buoyancy plan.

    The depth dependant values are calculated for target depth of the
    plan.

    :param plan: Buoyancy plan.
    :param constants: Physical constants.
    """
    diver = plan.diver
    thickness = plan.equipment.wetsuit_thickness
    depth = plan.environment.target_depth
    w_density = constants.water_density(plan.environment.water_type)

    bmi = eq_bmi(diver.weight, diver.height)
    density = body_density(bmi, diver.body_type, diver.gender)

    capacity = lung_capacity(diver)
    lung_surface = capacity / 1000
    lung_depth = eq_boyle(lung_surface, depth, w_density, constants)

    w_buoyancy = wetsuit_buoyancy(thickness, bmi, diver.body_type)
    w_volume = w_buoyancy / w_density

    state = PhysicalState(
        bmi=bmi,
        body_density=density,
        body_volume=diver.weight / density,
        lung_capacity=capacity,
        lung_volume_surface=lung_surface,
        lung_volume_depth=lung_depth,
        wetsuit_buoyancy=w_buoyancy,
        wetsuit_volume_surface=w_volume,
        wetsuit_volume_depth=wetsuit_volume(w_volume, depth, thickness),
        compression=wetsuit_compression(depth, thickness),
        water_density=w_density,
        ballast=ballast(plan.equipment),
    )
    if __debug__:
        logger.debug('physical state: {}'.format(state))
    return state


# vim: sw=4:et:ai
