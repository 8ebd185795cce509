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
Buoyancy state classification.

Buoyancy state of a diver at a depth is one of positive, neutral or
negative.

At the surface, the state is determined by comparing neutral buoyancy
depth with target range of neutral depth

- diver, who never reaches neutral buoyancy, is positive
- diver with zero neutral depth is negative
- diver with neutral depth much shallower than the target range has
  marginal buoyancy at the surface and is classified as neutral
- otherwise, the diver is positive

Below the surface, the state is determined by comparing the depth with
neutral depth band, which is neutral depth with tolerance of 1m (1.5m in
advanced mode). Above the band diver is positive, below the band diver is
negative and within the band diver is neutral.
"""

import math

from .model import WaterType, Preference, BuoyancyState, TargetRange
from . import const

TARGET_RANGE = {
    WaterType.SALTWATER: TargetRange(10.0, 12.0, 11.0),
    WaterType.FRESHWATER: TargetRange(5.0, 7.0, 6.0),
}

SURFACE_TOLERANCE = {WaterType.SALTWATER: 1.0, WaterType.FRESHWATER: 1.5}


def target_range(water_type, custom_depth=None):
    """
    Get target range of neutral buoyancy depth.

    :param water_type: Water type.
    :param custom_depth: Custom neutral depth [m] or null.
    """
    if custom_depth is None:
        return TARGET_RANGE[water_type]
    return TargetRange(max(0.0, custom_depth - 1), custom_depth + 1, custom_depth)


def surface_tolerance(
        water_type, custom_depth=None, preference=None, advanced=False):
    """
    Get tolerance [m] of neutral depth around target range.

    :param water_type: Water type.
    :param custom_depth: Custom neutral depth [m] or null.
    :param preference: Buoyancy preference at custom depth.
    :param advanced: True if advanced mode is active.
    """
    if custom_depth is not None:
        neutral = preference in (None, Preference.NEUTRAL)
        return 2.0 if neutral else 2.5

    tolerance = SURFACE_TOLERANCE[water_type]
    if advanced:
        tolerance += 0.5
    return tolerance


def depth_tolerance(advanced=False):
    """
    Get tolerance [m] of neutral depth band.

    :param advanced: True if advanced mode is active.
    """
    return 1.5 if advanced else 1.0


def never_neutral(neutral_depth):
    """
    Check if neutral depth value means the diver never reaches neutral
    buoyancy.

    :param neutral_depth: Neutral depth [m].
    """
    return not math.isfinite(neutral_depth) \
        or neutral_depth >= const.NO_NEUTRAL_DEPTH


def classify(
        water_type, neutral_depth, depth, custom_depth=None,
        preference=None, advanced=False):
    """
    Classify buoyancy state of a diver at a depth.

    :param water_type: Water type.
    :param neutral_depth: Neutral buoyancy depth [m].
    :param depth: Depth [m], zero for the surface.
    :param custom_depth: Custom neutral depth [m] or null.
    :param preference: Buoyancy preference at custom depth.
    :param advanced: True if advanced mode is active.
    """
    if never_neutral(neutral_depth):
        return BuoyancyState.POSITIVE

    if depth <= 0:
        if neutral_depth <= 0:
            return BuoyancyState.NEGATIVE
        r = target_range(water_type, custom_depth)
        tol = surface_tolerance(water_type, custom_depth, preference, advanced)
        if neutral_depth < r.min - tol:
            return BuoyancyState.NEUTRAL
        return BuoyancyState.POSITIVE

    tol = depth_tolerance(advanced)
    if depth < neutral_depth - tol:
        return BuoyancyState.POSITIVE
    elif depth > neutral_depth + tol:
        return BuoyancyState.NEGATIVE
    return BuoyancyState.NEUTRAL


# vim: sw=4:et:ai
