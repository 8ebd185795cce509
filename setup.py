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

from setuptools import setup, find_packages

import buoyplan

setup(
    name='buoyplan',
    version=buoyplan.__version__,
    description='BuoyPlan - freediving buoyancy planning library',
    author='Artur Wroblewski',
    author_email='wrobell@pld-linux.org',
    packages=find_packages('.'),
    include_package_data=True,
    long_description=\
"""\
BuoyPlan is Python freediving buoyancy planning library. It estimates
neutral buoyancy depth of a freediver with calibrated, empirical model,
cross-checks it with physics only force balance solver and provides ballast
weight recommendation with safety warnings.
""",
    classifiers=[
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
    ],
    keywords='freediving diving buoyancy ballast',
    license='GPL',
    install_requires=[],
    extras_require={
        'test': ['pytest'],
        'doc': ['sphinx', 'sphinx_rtd_theme'],
    },
)

# vim: sw=4:et:ai
