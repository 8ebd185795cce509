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
BuoyPlan constants.
"""

# physical constants
GRAVITY = 9.81                  # m/s^2
SALTWATER_DENSITY = 1025.0      # kg/m^3
FRESHWATER_DENSITY = 1000.0     # kg/m^3
SURFACE_PRESSURE = 101325.0     # Pa

# units
LBS_TO_KG = 0.45359237
KG_TO_LBS = 1 / LBS_TO_KG

# body density limits [kg/m^3]
MIN_BODY_DENSITY = 950
MAX_BODY_DENSITY = 1080
AVG_BODY_DENSITY = 1020

AVG_BMI = 23

# ballast per wetsuit thickness [kg/mm]
BALLAST_PER_MM = 1.0

# neutral depth of a diver, who never reaches neutral buoyancy [m]
NO_NEUTRAL_DEPTH = 50.0

# ballast below or equal to this value is no ballast [kg]
MIN_BALLAST = 0.1

# theoretical solver depth step and search bound [m]
SOLVER_STEP = 0.5
SOLVER_MAX_DEPTH = 50.0

# maximum wetsuit compression fraction
MAX_COMPRESSION = 0.7

# rounding of depth values
SCALE = 1

# vim: sw=4:et:ai
