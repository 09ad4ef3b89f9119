# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2026 zynqpack authors

import collections
import os

from zynqpack.shellhelper import do
from zynqpack.templates import write_pack_template


App = collections.namedtuple('App', ['name', 'proc', 'app'])

apps = [
    App('pmufw', 'psu_pmu_0', 'zynqmp_pmufw'),
    App('fsbl', 'psu_cortexa53_0', 'zynqmp_fsbl'),
]

dt_name = 'dts'
dt_proc = 'psu_cortexa53_0'
dt_repo_dir = 'device-tree-xlnx'

# Every artifact hsi produces, in upload order.
artifacts = ['fsbl', 'pmufw', dt_name]


def clone_device_tree_repo(fwdir, repo, ref=None):
    cmd = ['git', 'clone', '--depth=1']
    if ref:
        cmd += ['--branch', ref]
    do([*cmd, repo, dt_repo_dir], cwd=fwdir)


def write_script(fname, hdf):
    write_pack_template(fname, 'hsi.tcl.mako', {
        'hdf': hdf,
        'apps': apps,
        'dt_repo_path': dt_repo_dir,
        'dt_proc': dt_proc,
        'dt_dir': dt_name,
    })


def run_hsi(fwdir, hdf):
    """
    Let hsi build the firmware and the device tree of `hdf` inside `fwdir`.

    The batch script is kept as `fwdir/hsi.tcl` and fed to hsi on stdin.
    """
    script = os.path.join(fwdir, 'hsi.tcl')
    write_script(script, os.path.relpath(hdf, fwdir))

    with open(script, 'rb') as f:
        do(['hsi'], stdin=f, cwd=fwdir)
