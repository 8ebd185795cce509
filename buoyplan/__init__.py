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
Basic Usage
-----------

The BuoyPlan freediving buoyancy planning library exports its main API via
``buoyplan`` module.

The buoyancy calculations are performed with :func:`~buoyplan.create`
function, which creates :class:`BuoyPlan engine <Engine>`. Having the
engine object, we need to describe a diver, the diver's equipment and
dive environment. The following example calculates buoyancy of a 72kg
diver wearing 2mm wetsuit and 2kg weight belt in saltwater::

    >>> import buoyplan
    >>> from buoyplan import Diver, Equipment, Environment, Weight
    >>> engine = buoyplan.create()
    >>> diver = Diver(72, 173, 'male', 'average')
    >>> equipment = Equipment(2, Weight(2))
    >>> environment = Environment('saltwater', 20)
    >>> result = engine.calculate(diver, equipment, environment)

The result contains expected neutral buoyancy depth calculated with
empirical model and buoyancy state of the diver at the surface and at
target depth::

    >>> result.expected_neutral_depth
    11.7
    >>> result.surface_state
    'positive'
    >>> result.depth_state
    'negative'
    >>> result.in_target_range
    True

The ballast weight recommendation is decomposed into named factors::

    >>> list(result.ballast.factors)    # doctest:+NORMALIZE_WHITESPACE
    ['body_weight', 'height', 'water_type', 'gender', 'body_type', 'bmi',
     'lung_capacity']

Theoretical neutral depth, calculated with force balance solver, is
provided for comparison purposes only. It is never used for
recommendations or safety warnings.

Advanced Configuration
----------------------
Custom neutral buoyancy depth and diving discipline optimization are
enabled with advanced preferences::

    >>> from buoyplan import Preferences
    >>> prefs = Preferences(use_custom_depth=True, custom_depth=15)
    >>> result = engine.calculate(diver, equipment, environment, prefs)
    >>> result.target_range
    TargetRange(min=14, max=16, optimal=15)
    >>> result.adjustment
    Adjustment(preference=0.0, discipline=0.0)

Configuring Physical Constants
------------------------------
The physical constants, i.e. water density, can be changed by creating
engine with custom constants::

    >>> from buoyplan import DEFAULT_CONSTANTS
    >>> constants = DEFAULT_CONSTANTS._replace(saltwater_density=1030.0)
    >>> engine = buoyplan.create(constants=constants)
    >>> engine.constants.saltwater_density
    1030.0

"""

import logging

from .engine import Engine
from .error import BuoyPlanError, ConfigError
from .model import Gender, BodyType, WaterType, WeightUnit, Preference, \
    Discipline, BuoyancyState, Severity, Constants, DEFAULT_CONSTANTS, \
    Weight, Diver, Equipment, Environment, Preferences

__version__ = '0.1.0'

logger = logging.getLogger(__name__)


def create(constants=None, step=None, max_depth=None):
    """
    Create buoyancy planning engine.

    Usage

    >>> import buoyplan
    >>> engine = buoyplan.create()
    >>> engine.solver.step
    0.5

    :param constants: Physical constants.
    :param step: Depth step [m] of force balance solver.
    :param max_depth: Maximum depth [m] of force balance solver search.
    """
    engine = Engine(DEFAULT_CONSTANTS if constants is None else constants)

    if step is not None:
        if step > 1:
            logger.warning(
                'solver depth step {}m is coarser than 1m'.format(step)
            )
        engine.solver.step = step
    if max_depth is not None:
        engine.solver.max_depth = max_depth

    engine._validate_config()
    return engine


__all__ = [
    'create', 'Engine', 'BuoyPlanError', 'ConfigError', 'Gender',
    'BodyType', 'WaterType', 'WeightUnit', 'Preference', 'Discipline',
    'BuoyancyState', 'Severity', 'Constants', 'DEFAULT_CONSTANTS', 'Weight',
    'Diver', 'Equipment', 'Environment', 'Preferences',
]

# vim: sw=4:et:ai
