# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2026 zynqpack authors

from zynqpack.cli import ArgumentParser
from zynqpack.distributions import default_distribution, distributions


def run_command(argv):
    aparser = ArgumentParser(prog='zynqpack distros')
    aparser.parse_args(argv)

    for key, distro in distributions.items():
        default = ' (default)' if key == default_distribution else ''
        print(f'{key:<12}{distro.name:<22}{distro.parent_project}{default}')
