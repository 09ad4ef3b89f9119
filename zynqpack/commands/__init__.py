# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2024, 2026 zynqpack authors

import sys

from zynqpack.log import zynqpack_logging


def logging_from_args(args):
    """
    Logging context for a command using the arguments of
    zynqpack.config.add_arguments_logging.
    """
    targets = {'streams': sys.stderr}
    if args.logfile:
        targets['files'] = args.logfile
    return zynqpack_logging(verbose=args.verbose, **targets)
