# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2026 zynqpack authors

import collections

from zynqpack.cli import CliError


Distribution = collections.namedtuple('Distribution', ['key', 'parent_project', 'name'])


distributions = {
    'tumbleweed': Distribution('tumbleweed',
                               'devel:ARM:Factory:Contrib:Zynq',
                               'openSUSE Tumbleweed'),
    'leap15':     Distribution('leap15',
                               'devel:ARM:Leap:15.0:Contrib:Zynq',
                               'openSUSE Leap 15.0'),
    'sles15':     Distribution('sles15',
                               'devel:ARM:SLES:15.0:Contrib:Zynq',
                               'SLES 15'),
}

default_distribution = 'tumbleweed'


def get_distribution(key):
    try:
        return distributions[key]
    except KeyError:
        raise CliError(1, f'Unknown distribution: {key}') from None
