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
BuoyPlan data model.

Input Data
----------
The buoyancy calculations are performed for a dive plan, which consists of

diver
    Body weight, height, gender, body type and optional lung capacity.
equipment
    Wetsuit thickness, weight belt and neck weight.
environment
    Water type and target depth.
preferences
    Optional, advanced preferences, i.e. custom neutral buoyancy depth or
    diving discipline.

All data records are immutable. Every calculation result is recalculated
from scratch, so the same plan always gives the same result.

Enumerations
------------
The enumerated values (gender, body type, water type, etc.) are plain
strings. The classes below define the valid values.
"""

from collections import namedtuple

from . import const


class Gender(object):
    """
    Diver gender enumeration.
    """
    MALE = 'male'
    FEMALE = 'female'


class BodyType(object):
    """
    Diver body type enumeration.
    """
    LEAN = 'lean'
    AVERAGE = 'average'
    MUSCULAR = 'muscular'
    BROAD = 'broad'
    HIGHER_FAT = 'higher-fat'


class WaterType(object):
    """
    Water type enumeration.
    """
    SALTWATER = 'saltwater'
    FRESHWATER = 'freshwater'


class WeightUnit(object):
    """
    Ballast weight unit enumeration.
    """
    KG = 'kg'
    LBS = 'lbs'


class Preference(object):
    """
    Buoyancy preference at custom neutral depth.

    NEUTRAL
        Neutral buoyancy exactly at custom depth.
    SLIGHTLY_POSITIVE
        Slightly positive buoyancy at custom depth (less ballast).
    SLIGHTLY_NEGATIVE
        Slightly negative buoyancy at custom depth (more ballast).
    """
    NEUTRAL = 'neutral'
    SLIGHTLY_POSITIVE = 'slightly-positive'
    SLIGHTLY_NEGATIVE = 'slightly-negative'


class Discipline(object):
    """
    Competitive freediving discipline enumeration.
    """
    CONSTANT_WEIGHT = 'constant-weight'
    FREE_IMMERSION = 'free-immersion'
    VARIABLE_WEIGHT = 'variable-weight'
    NO_LIMITS = 'no-limits'


class BuoyancyState(object):
    """
    Buoyancy state of a diver at a depth.
    """
    POSITIVE = 'positive'
    NEUTRAL = 'neutral'
    NEGATIVE = 'negative'


class Severity(object):
    """
    Safety warning severity.
    """
    LOW = 'low'
    MEDIUM = 'medium'
    HIGH = 'high'


Constants = namedtuple(
    'Constants',
    'gravity surface_pressure saltwater_density freshwater_density'
)
Constants.__doc__ = """
Physical constants used by buoyancy calculations.

:var gravity: Gravitational acceleration [m/s^2].
:var surface_pressure: Surface pressure [Pa].
:var saltwater_density: Saltwater density [kg/m^3].
:var freshwater_density: Freshwater density [kg/m^3].
"""

Constants.water_density = lambda c, water_type: {
    WaterType.SALTWATER: c.saltwater_density,
    WaterType.FRESHWATER: c.freshwater_density,
}[water_type]

DEFAULT_CONSTANTS = Constants(
    const.GRAVITY, const.SURFACE_PRESSURE,
    const.SALTWATER_DENSITY, const.FRESHWATER_DENSITY
)

Weight = namedtuple('Weight', 'value unit', defaults=(WeightUnit.KG,))
Weight.__doc__ = """
Ballast weight.

:var value: Weight value.
:var unit: Weight unit (kilograms by default).
"""

Diver = namedtuple(
    'Diver', 'weight height gender body_type lung_capacity',
    defaults=(None,)
)
Diver.__doc__ = """
Diver body profile.

:var weight: Body weight [kg].
:var height: Height [cm].
:var gender: Gender.
:var body_type: Body type.
:var lung_capacity: Lung capacity [L], calculated from gender and body
    type if null.
"""

Equipment = namedtuple(
    'Equipment', 'wetsuit_thickness weight_belt neck_weight',
    defaults=(Weight(0), Weight(0))
)
Equipment.__doc__ = """
Diver equipment configuration.

:var wetsuit_thickness: Wetsuit thickness [mm].
:var weight_belt: Weight belt.
:var neck_weight: Neck weight.
"""

Environment = namedtuple('Environment', 'water_type target_depth')
Environment.__doc__ = """
Dive environment.

:var water_type: Water type.
:var target_depth: Target depth of a dive [m].
"""

Preferences = namedtuple(
    'Preferences',
    'use_custom_depth custom_depth preference use_discipline discipline',
    defaults=(
        False, 15.0, Preference.NEUTRAL, False, Discipline.CONSTANT_WEIGHT
    )
)
Preferences.__doc__ = """
Advanced buoyancy preferences.

:var use_custom_depth: Use custom neutral buoyancy depth if true.
:var custom_depth: Custom neutral buoyancy depth [m].
:var preference: Buoyancy preference at custom depth.
:var use_discipline: Optimize for diving discipline if true.
:var discipline: Diving discipline.
"""

Plan = namedtuple(
    'Plan', 'diver equipment environment preferences', defaults=(None,)
)
Plan.__doc__ = """
Buoyancy plan - complete input of buoyancy calculations.

:var diver: Diver body profile.
:var equipment: Diver equipment configuration.
:var environment: Dive environment.
:var preferences: Advanced preferences (optional).
"""

PhysicalState = namedtuple(
    'PhysicalState',
    'bmi body_density body_volume lung_capacity lung_volume_surface'
    ' lung_volume_depth wetsuit_buoyancy wetsuit_volume_surface'
    ' wetsuit_volume_depth compression water_density ballast'
)
PhysicalState.__doc__ = """
Physical properties of a diver derived from a buoyancy plan.

The depth values are calculated for target depth of a dive.

:var bmi: Body mass index.
:var body_density: Body density [kg/m^3].
:var body_volume: Body volume [m^3].
:var lung_capacity: Lung capacity [L].
:var lung_volume_surface: Lung volume at the surface [m^3].
:var lung_volume_depth: Lung volume at target depth [m^3].
:var wetsuit_buoyancy: Wetsuit buoyancy [kg].
:var wetsuit_volume_surface: Wetsuit volume at the surface [m^3].
:var wetsuit_volume_depth: Wetsuit volume at target depth [m^3].
:var compression: Wetsuit compression fraction at target depth.
:var water_density: Water density [kg/m^3].
:var ballast: Total ballast weight [kg].
"""

TargetRange = namedtuple('TargetRange', 'min max optimal')
TargetRange.__doc__ = """
Target range of neutral buoyancy depth [m].
"""

WeightRange = namedtuple('WeightRange', 'min max optimal')
WeightRange.__doc__ = """
Recommended ballast weight range [kg].
"""

BallastRecommendation = namedtuple(
    'BallastRecommendation', 'baseline adjusted factors range'
)
BallastRecommendation.__doc__ = """
Ballast weight recommendation.

:var baseline: Baseline ballast weight [kg].
:var adjusted: Recommended ballast weight [kg].
:var factors: Named contributions of each factor [kg].
:var range: Recommended ballast weight range.
"""

Adjustment = namedtuple('Adjustment', 'preference discipline')
Adjustment.__doc__ = """
Ballast adjustments of advanced configuration [kg].

:var preference: Buoyancy preference adjustment.
:var discipline: Diving discipline adjustment.
"""

SafetyWarning = namedtuple('SafetyWarning', 'type message severity')
SafetyWarning.__doc__ = """
Safety warning.

:var type: Warning type, i.e. 'Overweighting Risk'.
:var message: Warning message.
:var severity: Warning severity.
"""

Zone = namedtuple('Zone', 'name range color state')
Zone.__doc__ = """
Buoyancy zone of a depth chart.

:var name: Zone name.
:var range: Tuple of zone start and end depth [m].
:var color: Zone color.
:var state: Buoyancy state of a diver in the zone.
"""

Position = namedtuple('Position', 'label depth state')
Position.__doc__ = """
Diver position marker of a depth chart.
"""

DepthLine = namedtuple('DepthLine', 'label depth color active')
DepthLine.__doc__ = """
Neutral depth reference line of a depth chart.

:var active: True for the neutral depth used for recommendations.
"""

ZoneChart = namedtuple(
    'ZoneChart', 'zones positions lines max_depth water_type'
)
ZoneChart.__doc__ = """
Buoyancy zones visualization data.
"""

Gauge = namedtuple('Gauge', 'position description')
Gauge.__doc__ = """
Surface buoyancy gauge.

:var position: Gauge needle position in range 0 (negative) to 100
    (positive).
:var description: Human readable description of surface buoyancy.
"""

Physics = namedtuple(
    'Physics',
    'surface_force depth_force surface_buoyancy surface_state depth_state'
)
Physics.__doc__ = """
Buoyancy of a diver calculated with force balance model.

The values are provided for comparison purposes only.

:var surface_force: Net force at the surface [N], positive when diver
    floats.
:var depth_force: Net force at target depth [N].
:var surface_buoyancy: Net force at the surface expressed as weight [kg].
:var surface_state: Buoyancy state at the surface classified with
    theoretical neutral depth.
:var depth_state: Buoyancy state at target depth classified with
    theoretical neutral depth.
"""

BuoyancyResult = namedtuple(
    'BuoyancyResult',
    'state surface_state depth_state target_range in_target_range'
    ' expected_neutral_depth theoretical_neutral_depth recommended_weight'
    ' weight_adjustment ballast adjustment safety_warnings equipment_tips'
    ' zones gauge physics'
)
BuoyancyResult.__doc__ = """
Result of buoyancy calculations.

:var state: Physical properties of a diver.
:var surface_state: Buoyancy state at the surface.
:var depth_state: Buoyancy state at target depth.
:var target_range: Target range of neutral buoyancy depth.
:var in_target_range: True if expected neutral depth is in target range.
:var expected_neutral_depth: Neutral depth of empirical model [m].
:var theoretical_neutral_depth: Neutral depth of force balance model [m].
:var recommended_weight: Recommended ballast weight [kg].
:var weight_adjustment: Change of current ballast weight to reach
    recommended ballast weight [kg].
:var ballast: Ballast weight recommendation with factors breakdown.
:var adjustment: Advanced configuration adjustments (null if advanced
    mode not active).
:var safety_warnings: Tuple of safety warnings.
:var equipment_tips: Tuple of equipment tips.
:var zones: Buoyancy zones visualization data.
:var gauge: Surface buoyancy gauge.
:var physics: Buoyancy calculated with force balance model.
"""


def is_advanced(preferences):
    """
    Check if advanced buoyancy configuration is active.

    :param preferences: Advanced preferences or null.
    """
    return preferences is not None \
        and (preferences.use_custom_depth or preferences.use_discipline)


def custom_depth(preferences):
    """
    Get custom neutral buoyancy depth or null if not used.

    :param preferences: Advanced preferences or null.
    """
    if preferences is not None and preferences.use_custom_depth:
        return preferences.custom_depth
    return None


# vim: sw=4:et:ai
