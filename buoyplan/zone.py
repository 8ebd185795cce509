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
Buoyancy visualization data.

Buoyancy zones partition depth axis from the surface to maximum depth
into five contiguous bands

highly positive
    From the surface to 3m above the shallower of target range and
    neutral depth.
positive
    Up to the start of target range.
target
    Target range of neutral depth.
negative
    From the end of target range to 3m below the deeper of target range
    and neutral depth.
highly negative
    Down to the maximum depth.

The maximum depth is 5m below the deepest of target depth, both neutral
depths and the end of target range.

The surface gauge summarizes buoyancy of a diver at the surface with
a position in range 0 (negative) to 100 (positive).
"""

import logging

from .model import BuoyancyState, Preference, Zone, Position, DepthLine, \
    ZoneChart, Gauge
from .state import never_neutral

logger = logging.getLogger(__name__)

# name, color, buoyancy state
ZONES = (
    ('highly-positive', '#dc2626', BuoyancyState.POSITIVE),
    ('positive', '#f87171', BuoyancyState.POSITIVE),
    ('target', '#22c55e', BuoyancyState.NEUTRAL),
    ('negative', '#60a5fa', BuoyancyState.NEGATIVE),
    ('highly-negative', '#2563eb', BuoyancyState.NEGATIVE),
)

EMPIRICAL_COLOR = '#16a34a'
THEORETICAL_COLOR = '#9ca3af'

PREFERENCE_DESCRIPTION = {
    Preference.NEUTRAL: 'Optimal surface buoyancy for advanced freediving'
        ' configuration',
    Preference.SLIGHTLY_POSITIVE: 'Optimal positive buoyancy for custom'
        ' positive preference',
    Preference.SLIGHTLY_NEGATIVE: 'Calibrated for custom negative buoyancy'
        ' preference',
}


def zones(
        environment, neutral_depth, theoretical_depth, target_range,
        surface_state, depth_state):
    """
    Create buoyancy zones visualization data.

    :param environment: Dive environment.
    :param neutral_depth: Expected (empirical) neutral depth [m].
    :param theoretical_depth: Theoretical neutral depth [m].
    :param target_range: Target range of neutral depth.
    :param surface_state: Buoyancy state at the surface.
    :param depth_state: Buoyancy state at target depth.
    """
    target = environment.target_depth
    r = target_range
    n = neutral_depth

    max_depth = max(target, n, theoretical_depth, r.max) + 5

    b1 = max(0, min(r.min, n) - 3)
    b4 = max(r.max, n) + 3
    bounds = (0, b1, r.min, r.max, b4, max_depth)

    items = tuple(
        Zone(name, (bounds[k], bounds[k + 1]), color, state)
        for k, (name, color, state) in enumerate(ZONES)
    )
    positions = (
        Position('Surface', 0, surface_state),
        Position('Target depth', target, depth_state),
    )
    lines = (
        DepthLine('Empirical', n, EMPIRICAL_COLOR, True),
        DepthLine('Theoretical', theoretical_depth, THEORETICAL_COLOR, False),
    )

    if __debug__:
        logger.debug(
            'zones: bounds {}, max depth {}m'.format(bounds, max_depth)
        )
    return ZoneChart(items, positions, lines, max_depth, environment.water_type)


def gauge(
        surface_state, neutral_depth, target_range, advanced=False,
        preference=None):
    """
    Calculate surface buoyancy gauge.

    Neutral depth shallower than target range means the diver carries too
    much weight and is less positive at the surface. Neutral depth deeper
    than target range means the diver carries too little weight and is
    more positive at the surface.

    :param surface_state: Buoyancy state at the surface.
    :param neutral_depth: Expected (empirical) neutral depth [m].
    :param target_range: Target range of neutral depth.
    :param advanced: True if advanced mode is active.
    :param preference: Buoyancy preference at custom depth.
    """
    if surface_state == BuoyancyState.NEGATIVE:
        return Gauge(15, 'Surface negative - safety risk')
    if surface_state == BuoyancyState.NEUTRAL:
        return Gauge(50, 'Neutral at surface - rare condition')
    if neutral_depth <= 0:
        return Gauge(10, 'Too much weight - will sink at surface')
    if never_neutral(neutral_depth):
        return Gauge(95, 'No ballast - neutral buoyancy is unlikely')

    tol = 1.5 if advanced else 1.0
    if neutral_depth < target_range.min - tol:
        if advanced:
            return Gauge(
                62, 'Overweighted for advanced configuration - good for'
                ' deep diving profiles'
            )
        return Gauge(65, 'Slightly overweighted - good for deep diving')
    elif neutral_depth > target_range.max + tol:
        if advanced:
            return Gauge(
                88, 'Underweighted for advanced configuration - may'
                ' struggle to reach custom depth'
            )
        return Gauge(85, 'Slightly underweighted - may struggle to reach depth')

    if advanced:
        desc = PREFERENCE_DESCRIPTION.get(
            preference, PREFERENCE_DESCRIPTION[Preference.NEUTRAL]
        )
        return Gauge(78, desc)
    return Gauge(75, 'Optimal surface buoyancy for freediving')


# vim: sw=4:et:ai
