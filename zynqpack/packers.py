# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2019, 2026 zynqpack authors

import abc
import os

from zynqpack.shellhelper import do


class Packer(abc.ABC):

    @abc.abstractmethod
    def pack_dir(self, builddir, dirname):
        ...

    @abc.abstractmethod
    def packed_filename(self, dirname):
        ...


class TarArchiver(Packer):
    """
    Archive `builddir/dirname` into `builddir/dirname<suffix>`.
    The archive members are rooted at `dirname`.
    """

    def __init__(self, flags, suffix):
        self.flags = flags
        self.suffix = suffix

    def pack_dir(self, builddir, dirname):
        archname = os.path.join(builddir, self.packed_filename(dirname))
        do([
            'tar', '--create', *self.flags,
            '--file', archname, '--directory', builddir, dirname,
        ])
        return archname

    def packed_filename(self, dirname):
        return dirname + self.suffix


packers = {'tarpixz': TarArchiver(['--use-compress-program=pixz'], '.tar.xz'),
           'targz': TarArchiver(['--gzip', '--owner=root', '--group=root'], '.tgz'),
           }

firmware_packer = packers['tarpixz']
hook_packer = packers['targz']
