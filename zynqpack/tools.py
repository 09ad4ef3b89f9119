# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2026 zynqpack authors

import logging
import shutil

from zynqpack.cli import CliError


# (command, install hint, what to install)
required_tools = [
    ('osc', ' (zypper in osc)', 'the Open build Service Client'),
    ('unzip', ' (zypper in unzip)', 'Unzip'),
    ('pixz', ' (zypper in pixz)', 'Parallel XZip'),
    ('hsi', '', 'Vivado and put its bin directories into PATH'),
    ('git', ' (zypper in git)', 'Git'),
    ('tar', ' (zypper in tar)', 'Tar'),
]

firmware_tools = {'unzip', 'pixz', 'hsi', 'git', 'tar'}


def check_cmd(cmd, hint, name):
    path = shutil.which(cmd)
    if path is None:
        raise CliError(1, f'Please install {name}{hint}.')

    logging.debug('found %s at %s', cmd, path)
    return path


def check_tools(only=None):
    for cmd, hint, name in required_tools:
        if only is not None and cmd not in only:
            continue
        check_cmd(cmd, hint, name)
