# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2026 zynqpack authors

import logging
import os
import shutil

from zynqpack import firmware
from zynqpack.cli import (ArgumentParser, CliError, add_argument,
                          add_arguments_from_decorated_function)
from zynqpack.commands import logging_from_args
from zynqpack.config import (add_argument_keep_tmpdir, add_arguments_device_tree,
                             add_arguments_logging)
from zynqpack.filesystem import TmpdirFilesystem
from zynqpack.tools import check_tools, firmware_tools


@add_argument('-H', dest='hdf', required=True, metavar='<hdf file>',
              help='the hdf file describing your hardware')
@add_argument('-o', '--output', dest='outdir', default='.',
              help='directory to store fsbl.tar.xz, pmufw.tar.xz and dts.tar.xz in')
@add_arguments_device_tree
@add_argument_keep_tmpdir
@add_arguments_logging
def _firmware(args):
    if not os.path.isdir(args.outdir):
        raise CliError(1, f'Output directory {args.outdir} does not exist.')

    hdf = os.path.abspath(args.hdf)

    with logging_from_args(args):
        check_tools(only=firmware_tools)

        with TmpdirFilesystem(keep=args.keep_tmpdir) as tmpfs:
            tarballs = firmware.generate(hdf, tmpfs, args.dt_repo, args.dt_ref)

            for tarball in tarballs.values():
                shutil.copy(tarball, args.outdir)
                logging.info('Saved %s to %s', os.path.basename(tarball), args.outdir)


def run_command(argv):
    aparser = ArgumentParser(prog='zynqpack firmware',
                             description='Generate the ZynqMP firmware files from a hdf '
                                         'without touching OBS.')
    add_arguments_from_decorated_function(aparser, _firmware)

    args = aparser.parse_args(argv)

    _firmware(args)
