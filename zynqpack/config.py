# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2016-2018, 2026 zynqpack authors

import os

from zynqpack.cli import add_argument


default_device_tree_repo = 'https://github.com/Xilinx/device-tree-xlnx.git'


def add_argument_apiurl(parser_or_func):
    return add_argument(
        '--apiurl',
        default=os.environ.get('ZYNQPACK_APIURL'),
        help='OBS API url handed to osc -A (default: osc configuration)',
    )(parser_or_func)


def add_arguments_device_tree(parser_or_func):
    parser_or_func = add_argument(
        '--device-tree-repo',
        dest='dt_repo',
        default=os.environ.get('ZYNQPACK_DT_REPO', default_device_tree_repo),
        help='git repository of the device tree generator',
    )(parser_or_func)

    parser_or_func = add_argument(
        '--device-tree-ref',
        dest='dt_ref',
        default=os.environ.get('ZYNQPACK_DT_REF'),
        help='branch or tag of the device tree generator to clone',
    )(parser_or_func)

    return parser_or_func


def add_arguments_logging(parser_or_func):
    parser_or_func = add_argument(
        '--logfile',
        help='additionally write the full log to this file',
    )(parser_or_func)

    parser_or_func = add_argument(
        '--verbose',
        action='store_true',
        default=False,
        help='show debug messages',
    )(parser_or_func)

    return parser_or_func


def add_argument_keep_tmpdir(parser_or_func):
    return add_argument(
        '--keep-tmpdir',
        action='store_true',
        dest='keep_tmpdir',
        default=False,
        help='do not remove the temporary working directory',
    )(parser_or_func)


def oscrc_paths():
    if 'OSC_CONFIG' in os.environ:
        return [os.environ['OSC_CONFIG']]

    config_home = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
    return [os.path.expanduser('~/.oscrc'), os.path.join(config_home, 'osc', 'oscrc')]
