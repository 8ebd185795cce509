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
Declarative coefficient tables.

The empirical buoyancy models depend on many small, conditional
corrections, i.e. "add 0.5kg if body weight is above 80kg". Such
corrections are defined as tables of factors

    >>> from buoyplan.factor import Factor, reduce_factors
    >>> table = (
    ...     Factor('weight', lambda w: w > 80, 0.5),
    ...     Factor('weight', lambda w: w < 60, -0.5),
    ...     Factor('scale', None, lambda w: w / 100),
    ... )
    >>> dict(reduce_factors(table, 85))
    {'weight': 0.5, 'scale': 0.85}

A factor contributes its weight when its predicate is true. Null predicate
is always true. The weight is a number or a function calculating the
value. The factors having the same name are summed.
"""

from collections import namedtuple, OrderedDict

Factor = namedtuple('Factor', 'name predicate weight')
Factor.__doc__ = """
Named factor of a coefficient table.

:var name: Factor name.
:var predicate: Function checking if the factor applies (null if always
    applies).
:var weight: Factor contribution value or function calculating the value.
"""

Multiplier = namedtuple('Multiplier', 'predicate value')
Multiplier.__doc__ = """
Conditional multiplier of a multiplier table.

:var predicate: Function checking if the multiplier applies.
:var value: Multiplier value.
"""


def _value(weight, *args):
    return weight(*args) if callable(weight) else weight


def reduce_factors(table, *args):
    """
    Calculate contribution of each named factor of a coefficient table.

    The names of all factors are present in the result even if a factor
    does not apply.

    :param table: Collection of factors.
    :param args: Arguments passed to factor predicates and weight functions.
    """
    result = OrderedDict()
    for f in table:
        v = result.get(f.name, 0.0)
        if f.predicate is None or f.predicate(*args):
            v += _value(f.weight, *args)
        result[f.name] = v
    return result


def reduce_multipliers(table, start, *args):
    """
    Apply all matching multipliers of a multiplier table to a value.

    :param table: Collection of multipliers.
    :param start: Value to multiply.
    :param args: Arguments passed to multiplier predicates.
    """
    v = start
    for m in table:
        if m.predicate(*args):
            v *= m.value
    return v


def lookup(table, key, default=0.0):
    """
    Create factor weight function, which looks up a value in a table.

    :param table: Dictionary of values.
    :param key: Function to calculate the key.
    :param default: Value used when key not in the table.
    """
    return lambda *args: table.get(key(*args), default)


# vim: sw=4:et:ai
