#!/usr/bin/env python3
#
# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2013-2014, 2017-2018, 2026 zynqpack authors

from zynqpack.version import zynqpack_version

from setuptools import setup


setup(name='zynqpack',
      version=zynqpack_version,
      description='OBS contrib project creator for Xilinx ZynqMP boards',
      license='GPL-3.0-or-later',
      packages=['zynqpack',
                'zynqpack.commands',
                'zynqpack.makofiles',
                ],
      package_data={'zynqpack.makofiles': ['*.mako']},
      entry_points={
          'console_scripts': ['zynqpack = zynqpack.main:main'],
      },
      python_requires='>=3.9',
      install_requires=['lxml',
                        'Mako',
                        ],
      extras_require={
          'test': ['pytest',
                   'flake8',
                   ],
      },
      )
