# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2026 zynqpack authors

import os
import sys
import textwrap

from zynqpack import firmware
from zynqpack.cli import ArgumentParser, add_argument, add_arguments_from_decorated_function
from zynqpack.commands import logging_from_args
from zynqpack.config import (add_argument_apiurl, add_argument_keep_tmpdir,
                             add_arguments_device_tree, add_arguments_logging)
from zynqpack.contrib import ContribProject, default_project
from zynqpack.distributions import default_distribution, distributions, get_distribution
from zynqpack.filesystem import TmpdirFilesystem
from zynqpack.osc import Osc
from zynqpack.tools import check_tools


def help_text(user):
    choices = '\n'.join(
        f'\t\t\t\t{key}{" (default)" if key == default_distribution else ""}'
        for key in distributions
    )

    return textwrap.dedent("""\
        \t\tXilinx Ultrascale+ MPSoC OpenSUSE/SLES image creator

        Usage: zynqpack mkcontrib -H <hdf file> -p <OBS project> [OPTION]
        Create or update an OBS project based on a hardware description file (hdf)
        coming from the Vivado tool suite.

        Mandatory parameters:

          -H <hdf file>\t\tThe hdf file describing your hardware

        Optional parameters:

          -d <distribution>\tChoose target distribution. Choices are:

        {choices}

          -f\t\t\tRegenerate all files, losing intermediate modifications
          -p <OBS project name>\tThe targeted OBS project name (e.g. home:{user}:ZCU102)
                                If nothing is specified, defaults to {default}
          -h\t\t\tShow this help text

          --apiurl <url>\tOBS API url passed to osc
          --device-tree-repo <url>
        \t\t\tgit repository of the device tree generator
          --device-tree-ref <ref>
        \t\t\tbranch or tag of the device tree generator
          --keep-tmpdir\t\tDo not remove the temporary working directory
          --logfile <file>\tAdditionally write the full log to <file>
          --verbose\t\tShow debug messages
        """).format(choices=choices, user=user, default=default_project(user))


@add_argument('-H', dest='hdf', metavar='<hdf file>')
@add_argument('-d', dest='distro', metavar='<distribution>', default=default_distribution)
@add_argument('-f', dest='force', action='store_true', default=False)
@add_argument('-p', dest='project', metavar='<OBS project>')
@add_argument('-h', dest='show_help', action='store_true', default=False)
@add_argument_apiurl
@add_arguments_device_tree
@add_argument_keep_tmpdir
@add_arguments_logging
def _mkcontrib(args):
    if not args.hdf:
        args.show_help = True

    osc = Osc(apiurl=args.apiurl)

    with logging_from_args(args):
        check_tools()

        osc.ensure_configured()
        user = osc.whois()

        if args.show_help:
            print(help_text(user))
            sys.exit(1)

        distro = get_distribution(args.distro)
        project = args.project or default_project(user)
        hdf = os.path.abspath(args.hdf)

        with TmpdirFilesystem(keep=args.keep_tmpdir) as tmpfs:
            tarballs = firmware.generate(hdf, tmpfs, args.dt_repo, args.dt_ref)

            contrib = ContribProject(osc, project, distro, user, force=args.force)
            contrib.update(tmpfs.path, tarballs, tmpfs.fname(firmware.hdf_name))


def run_command(argv):
    aparser = ArgumentParser(prog='zynqpack mkcontrib', add_help=False)
    add_arguments_from_decorated_function(aparser, _mkcontrib)

    args = aparser.parse_args(argv)

    _mkcontrib(args)
