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
Safety warnings.

The safety warnings are generated by evaluating a table of rules. Each
rule is a function accepting rule context and returning a safety warning
or null. The rules are evaluated in order, so the order of the warnings is
stable.

The advanced rules are evaluated in advanced mode only.
"""

from collections import namedtuple
import logging

from .model import BodyType, WaterType, Preference, Discipline, \
    BuoyancyState, Severity, SafetyWarning
from .physics import AVG_LUNG_CAPACITY
from .state import never_neutral
from . import const

logger = logging.getLogger(__name__)

Context = namedtuple(
    'Context',
    'plan state neutral_depth surface_state depth_state target_range'
    ' tolerance advanced'
)
Context.__doc__ = """
Safety rules context.

:var plan: Buoyancy plan.
:var state: Physical state of the diver.
:var neutral_depth: Expected (empirical) neutral depth [m].
:var surface_state: Buoyancy state at the surface.
:var depth_state: Buoyancy state at target depth.
:var target_range: Target range of neutral depth.
:var tolerance: Tolerance [m] of neutral depth around target range.
:var advanced: True if advanced mode is active.
"""


def rule_target_depth(ctx):
    r = ctx.target_range
    depth = ctx.neutral_depth
    if never_neutral(depth):
        return None

    if depth < r.min - ctx.tolerance:
        msg = 'Neutral buoyancy at {:.1f}m is shallower than target range' \
            ' ({:.1f}-{:.1f}m). Consider reducing weight.'
    elif depth > r.max + ctx.tolerance:
        msg = 'Neutral buoyancy at {:.1f}m is deeper than target range' \
            ' ({:.1f}-{:.1f}m). Consider adding weight.'
    else:
        return None
    return SafetyWarning(
        'Target Depth Warning', msg.format(depth, r.min, r.max),
        Severity.MEDIUM
    )


def rule_overweighting(ctx):
    ratio = 0.18 if ctx.advanced else 0.15
    if ctx.state.ballast > ctx.plan.diver.weight * ratio:
        return SafetyWarning(
            'Overweighting Risk',
            'Total weight exceeds {:.0f}% of body weight. Consider reducing'
            ' weight.'.format(ratio * 100),
            Severity.HIGH
        )


def rule_no_ballast(ctx):
    if ctx.state.ballast <= const.MIN_BALLAST:
        return SafetyWarning(
            'No Ballast',
            'No ballast weight. Neutral buoyancy is unlikely to be reached'
            ' at typical freediving depths.',
            Severity.MEDIUM
        )


def rule_underweight_bmi(ctx):
    if ctx.state.bmi < 18.5:
        return SafetyWarning(
            'Underweight BMI',
            'BMI below 18.5 may require additional weight and instructor'
            ' consultation.',
            Severity.HIGH if ctx.advanced else Severity.MEDIUM
        )


def rule_high_bmi(ctx):
    if ctx.state.bmi > 30:
        return SafetyWarning(
            'High BMI',
            'BMI above 30 may require less weight and medical clearance for'
            ' freediving.',
            Severity.HIGH
        )


def rule_surface_negative(ctx):
    if ctx.surface_state == BuoyancyState.NEGATIVE:
        return SafetyWarning(
            'Surface Safety',
            'Negative buoyancy at surface poses serious safety risk. Reduce'
            ' weight immediately.',
            Severity.HIGH
        )


def rule_depth_control(ctx):
    if ctx.depth_state == BuoyancyState.POSITIVE \
            and ctx.plan.environment.target_depth > 15:
        return SafetyWarning(
            'Depth Control',
            'Still positive at target depth. May struggle to reach depth'
            ' efficiently.',
            Severity.HIGH if ctx.advanced else Severity.MEDIUM
        )


def rule_lung_capacity(ctx):
    gender = ctx.plan.diver.gender
    capacity = ctx.state.lung_capacity
    if abs(capacity - AVG_LUNG_CAPACITY[gender]) > 2:
        return SafetyWarning(
            'Unusual Lung Capacity',
            'Lung capacity of {}L is significantly different from average'
            ' for {}. Verify measurement and consider instructor'
            ' consultation.'.format(capacity, gender),
            Severity.MEDIUM
        )


def rule_muscular_build(ctx):
    thickness = ctx.plan.equipment.wetsuit_thickness
    if ctx.plan.diver.body_type == BodyType.MUSCULAR \
            and ctx.state.ballast < thickness * 1.2:
        return SafetyWarning(
            'Muscular Build',
            'Muscular build detected. May need 20% more weight than baseline'
            ' recommendation.',
            Severity.LOW
        )


def rule_freshwater(ctx):
    if ctx.plan.environment.water_type == WaterType.FRESHWATER \
            and ctx.state.ballast < 1:
        return SafetyWarning(
            'Freshwater Safety',
            'Freshwater diving with minimal weight. Ensure adequate ballast'
            ' for safety.',
            Severity.MEDIUM
        )


def rule_extreme_depth(ctx):
    prefs = ctx.plan.preferences
    if prefs.use_custom_depth and prefs.custom_depth > 25:
        return SafetyWarning(
            'Extreme Custom Depth',
            'Custom neutral depth of {}m is beyond recreational freediving'
            ' depths. Dive only with experienced supervision.'
            .format(prefs.custom_depth),
            Severity.HIGH
        )


def rule_deep_negative(ctx):
    prefs = ctx.plan.preferences
    if prefs.use_custom_depth and prefs.custom_depth > 15 \
            and prefs.preference == Preference.SLIGHTLY_NEGATIVE:
        return SafetyWarning(
            'Deep Negative Preference',
            'Slightly negative buoyancy at {}m increases effort of ascent.'
            ' Ensure proper safety diver support.'.format(prefs.custom_depth),
            Severity.HIGH
        )


def rule_discipline(ctx):
    prefs = ctx.plan.preferences
    risky = (Discipline.VARIABLE_WEIGHT, Discipline.NO_LIMITS)
    if prefs.use_discipline and prefs.discipline in risky:
        return SafetyWarning(
            'High-Risk Discipline',
            'The {} discipline requires advanced training, sled equipment'
            ' and experienced supervision.'.format(prefs.discipline),
            Severity.HIGH
        )


def rule_complexity(ctx):
    prefs = ctx.plan.preferences
    features = (
        prefs.use_custom_depth,
        prefs.use_custom_depth and prefs.preference != Preference.NEUTRAL,
        prefs.use_discipline,
    )
    if all(features):
        return SafetyWarning(
            'Configuration Complexity',
            'Multiple advanced options are combined. Verify the ballast'
            ' configuration in the water before deep dives.',
            Severity.MEDIUM
        )


SAFETY_RULES = (
    rule_target_depth,
    rule_overweighting,
    rule_no_ballast,
    rule_underweight_bmi,
    rule_high_bmi,
    rule_surface_negative,
    rule_depth_control,
    rule_lung_capacity,
    rule_muscular_build,
    rule_freshwater,
)

ADVANCED_RULES = (
    rule_extreme_depth,
    rule_deep_negative,
    rule_discipline,
    rule_complexity,
)


def safety_warnings(ctx):
    """
    Evaluate safety rules and return tuple of safety warnings.

    :param ctx: Safety rules context.
    """
    rules = SAFETY_RULES
    if ctx.advanced and ctx.plan.preferences is not None:
        rules += ADVANCED_RULES

    warnings = (r(ctx) for r in rules)
    warnings = tuple(w for w in warnings if w is not None)
    if __debug__:
        logger.debug(
            'safety warnings: {}'.format(', '.join(w.type for w in warnings))
        )
    return warnings


# vim: sw=4:et:ai
