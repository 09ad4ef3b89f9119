# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2013-2017, 2026 zynqpack authors

import argparse
import importlib
import pkgutil
import sys

import zynqpack.commands
from zynqpack.cli import format_exception
from zynqpack.version import zynqpack_version


def get_cmdlist():
    return [x for _, x, _ in pkgutil.iter_modules(zynqpack.commands.__path__)]


def _import_cmd_module(cmd):
    return importlib.import_module('.' + cmd, zynqpack.commands.__name__)


def main(argv=sys.argv):
    parser = argparse.ArgumentParser(prog='zynqpack')
    parser.add_argument('--version', action='version', version=f'%(prog)s v{zynqpack_version}')
    parser.add_argument('--stacktrace-on-error', action='store_true', dest='stacktrace_on_error')

    subparsers = parser.add_subparsers(required=True, dest='cmd')

    for cmd in get_cmdlist():
        subparsers.add_parser(cmd, add_help=False)

    args, cmd_argv = parser.parse_known_args(argv[1:])

    cmdmod = _import_cmd_module(args.cmd)

    try:
        cmdmod.run_command(cmd_argv)
    except Exception as e:
        sys.exit(format_exception(e, output=sys.stderr,
                                  base_module=zynqpack,
                                  verbose=args.stacktrace_on_error))
