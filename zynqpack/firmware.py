# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2026 zynqpack authors

import logging
import os

from zynqpack.devicetree import fixup_tree
from zynqpack.hsi import artifacts, clone_device_tree_repo, dt_name, run_hsi
from zynqpack.packers import firmware_packer
from zynqpack.shellhelper import do


hdf_name = 'system.hdf'


def unpack_hdf(hdf, tmpfs):
    """
    Extract the HDF (a zip archive) below the scratch directory and keep a
    copy named system.hdf next to it.
    """
    tmpfs.mkdir('hdf')
    do(['unzip', hdf, '-d', tmpfs.fname('hdf')])

    tmpfs.copy(hdf, hdf_name)
    return tmpfs.fname(hdf_name)


def build_firmware(tmpfs, dt_repo, dt_ref=None):
    """
    Run hsi on the unpacked HDF and return a dict mapping each artifact name
    to its tarball.
    """
    tmpfs.mkdir('fw')
    fwdir = tmpfs.fname('fw')

    clone_device_tree_repo(fwdir, dt_repo, dt_ref)
    run_hsi(fwdir, tmpfs.fname(hdf_name))

    fixup_tree(os.path.join(fwdir, dt_name))

    tarballs = {}
    for name in artifacts:
        tarballs[name] = firmware_packer.pack_dir(fwdir, name)
        logging.info('packed %s', tarballs[name])

    return tarballs


def generate(hdf, tmpfs, dt_repo, dt_ref=None):
    logging.info('Unpacking %s', hdf)
    unpack_hdf(hdf, tmpfs)

    logging.info('Generating firmware files (%s)', ', '.join(artifacts))
    return build_firmware(tmpfs, dt_repo, dt_ref)
