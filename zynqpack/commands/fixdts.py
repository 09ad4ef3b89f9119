# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2026 zynqpack authors

import os
import sys

from zynqpack.cli import ArgumentParser, CliError
from zynqpack.devicetree import fixup_tree
from zynqpack.log import zynqpack_logging


def run_command(argv):
    aparser = ArgumentParser(prog='zynqpack fixdts',
                             description='Make a device tree generated by hsi usable '
                                         'with the upstream kernel.')
    aparser.add_argument('directory', help='directory containing the device tree sources')

    args = aparser.parse_args(argv)

    if not os.path.isdir(args.directory):
        raise CliError(1, f'{args.directory} is not a directory.')

    with zynqpack_logging(streams=sys.stderr):
        for fname in fixup_tree(args.directory):
            print(fname)
