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
The buoyancy recommendations of BuoyPlan are based on empirical,
calibrated model. The `buoyplan.alt` module provides alternative,
independent models, which can be used to cross-check the empirical model

- force balance solver - find neutral buoyancy depth by searching for
  depth, where buoyant force equals weight of a diver, using physics only

The alternative models are never used for recommendations or safety
warnings.
"""

# vim: sw=4:et:ai
