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
Force Balance Solver
--------------------
The force balance solver finds neutral buoyancy depth using physics only.

Net force acting on a diver at depth :math:`d` is

    .. math::

        F = \\rho_{w} * g * (V_{body} + V_{suit}(d) + V_{lung}(d)) - g * (m_{body} + m_{ballast})

where lung volume :math:`V_{lung}(d)` is compressed according to Boyle's
law and wetsuit volume :math:`V_{suit}(d)` is compressed according to
wetsuit compression model.

The net force decreases with depth. The solver samples the net force from
the surface to the maximum depth using constant depth step (0.5m by
default). When sign of the net force changes between two samples, the
neutral depth is found using linear interpolation of the two samples.

If the net force is never positive, then diver is negative at the surface
and zero is returned. If the net force is positive for all samples, then
maximum depth is returned.

The algorithm is implemented by
:py:class:`buoyplan.alt.force.ForceBalanceSolver` class.

The complexity of the algorithm is :math:`O(n)`, where :math:`n` is the
number of depth samples.
"""

from collections import namedtuple
import logging
import math

from ..estimator import NeutralDepthEstimator
from ..model import DEFAULT_CONSTANTS
from ..physics import eq_boyle, wetsuit_volume
from .. import const

logger = logging.getLogger(__name__)

ForceSample = namedtuple('ForceSample', 'depth force')
ForceSample.__doc__ = """
Net force acting on a diver at depth.

:var depth: Depth [m].
:var force: Net force [N], positive when the diver floats.
"""


class ForceBalanceSolver(NeutralDepthEstimator):
    """
    Neutral buoyancy depth solver using force balance.

    :var constants: Physical constants.
    :var step: Depth step [m].
    :var max_depth: Maximum depth of neutral depth search [m].
    """
    def __init__(
            self, constants=DEFAULT_CONSTANTS, step=const.SOLVER_STEP,
            max_depth=const.SOLVER_MAX_DEPTH):
        """
        Create force balance solver.

        :param constants: Physical constants.
        :param step: Depth step [m].
        :param max_depth: Maximum depth of neutral depth search [m].
        """
        super().__init__(constants)
        self.step = step
        self.max_depth = max_depth


    def net_force(self, plan, state, depth):
        """
        Calculate net force [N] acting on a diver at depth.

        :param plan: Buoyancy plan.
        :param state: Physical state of the diver.
        :param depth: Depth [m].
        """
        g = self.constants.gravity
        rho = state.water_density
        lung = eq_boyle(state.lung_volume_surface, depth, rho, self.constants)
        suit = wetsuit_volume(
            state.wetsuit_volume_surface, depth,
            plan.equipment.wetsuit_thickness
        )
        buoyant = rho * g * (state.body_volume + suit + lung)
        return buoyant - g * (plan.diver.weight + state.ballast)


    def limit_force(self, plan, state):
        """
        Calculate net force [N] at maximal compression.

        At maximal compression the lungs are empty and the wetsuit is
        compressed to its limit.

        :param plan: Buoyancy plan.
        :param state: Physical state of the diver.
        """
        g = self.constants.gravity
        rho = state.water_density
        # compression saturates at 70m
        suit = wetsuit_volume(
            state.wetsuit_volume_surface, const.MAX_COMPRESSION * 100,
            plan.equipment.wetsuit_thickness
        )
        buoyant = rho * g * (state.body_volume + suit)
        return buoyant - g * (plan.diver.weight + state.ballast)


    def samples(self, plan, state):
        """
        Generate net force samples from the surface to maximum depth.

        The last sample is at maximum depth, even if the depth step does
        not divide it.

        :param plan: Buoyancy plan.
        :param state: Physical state of the diver.
        """
        n = math.ceil(self.max_depth / self.step)
        for k in range(n + 1):
            depth = min(k * self.step, self.max_depth)
            yield ForceSample(depth, self.net_force(plan, state, depth))


    def neutral_depth(self, plan, state):
        """
        Find neutral buoyancy depth [m] using force balance.

        :param plan: Buoyancy plan.
        :param state: Physical state of the diver.
        """
        samples = self.samples(plan, state)
        prev = next(samples)
        if prev.force <= 0:
            logger.debug('force balance: negative at the surface')
            return 0.0

        for s in samples:
            if s.force <= 0:
                depth = prev.depth + (s.depth - prev.depth) * prev.force \
                    / (prev.force - s.force)
                if __debug__:
                    logger.debug(
                        'force balance: neutral at {:.4f}m between {} and {}'
                        .format(depth, prev, s)
                    )
                return round(depth, const.SCALE)
            prev = s

        if __debug__:
            f = self.limit_force(plan, state)
            if f > 0:
                logger.debug(
                    'force balance: never neutral, limit force {:.2f}N'
                    .format(f)
                )
            else:
                logger.debug(
                    'force balance: neutral below {}m, limit force {:.2f}N'
                    .format(self.max_depth, f)
                )
        return self.max_depth


# vim: sw=4:et:ai
