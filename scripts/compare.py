#!/usr/bin/env python3
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
Print table of empirical and theoretical neutral depths for wetsuit
thickness and ballast weight.
"""

from buoyplan import Diver, Equipment, Environment, Weight
import buoyplan

THICKNESS = (0, 1, 2, 3, 5, 7)
BALLAST = (0, 1, 2, 3, 4, 5, 6)


def print_tab(engine, diver, water_type):
    env = Environment(water_type, 20)

    print('# {}, {}kg, {}cm, {}'.format(
        water_type, diver.weight, diver.height, diver.body_type
    ))
    print('{:>6} {:>6} {:>10} {:>12}'.format(
        'suit', 'belt', 'empirical', 'theoretical'
    ))
    for t in THICKNESS:
        for b in BALLAST:
            r = engine.calculate(diver, Equipment(t, Weight(b)), env)
            print('{:>5}mm {:>4}kg {:>9.1f}m {:>11.1f}m'.format(
                t, b, r.expected_neutral_depth, r.theoretical_neutral_depth
            ))
    print()


engine = buoyplan.create()
print_tab(engine, Diver(72, 173, 'male', 'average'), 'saltwater')
print_tab(engine, Diver(60, 165, 'female', 'lean'), 'saltwater')
print_tab(engine, Diver(72, 173, 'male', 'average'), 'freshwater')

# vim: sw=4:et:ai
