# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2026 zynqpack authors

import logging
import os
import shutil

from zynqpack.filesystem import Filesystem
from zynqpack.firmware import hdf_name
from zynqpack.hsi import artifacts
from zynqpack.obsmeta import (add_repository, enable_package, has_repository,
                              project_meta, project_prjconf)
from zynqpack.osc import tracked_files
from zynqpack.packers import hook_packer


contrib_packages = [
    'zynqmp-bootbin',
    'zynqmp-fsbl',
    'zynqmp-hdf',
    'zynqmp-pmufw',
    'zynqmp-dts',
    'zynqmp-instsd',
]

image_package = 'JeOS-zynqmp'
arch = 'aarch64'

hook_dir = 'kiwi-hooks'
hook_file = 'contrib_repo'
hook_tarball = 'contrib-repo-zynqmp.tgz'


def default_project(user):
    return f'home:{user}:Zynq'


class ContribProject:
    """
    An OBS project carrying the board specific packages of one ZynqMP board,
    linked from the contrib project of a distribution.
    """

    def __init__(self, osc, project, distro, user, force=False):
        self.osc = osc
        self.project = project
        self.distro = distro
        self.user = user
        self.force = force

    def setup_project(self):
        if self.force or not self.osc.project_exists(self.project):
            logging.info('Creating project %s', self.project)
            self.osc.set_meta_prj(self.project,
                                  project_meta(self.project, self.distro, self.user))
            self.osc.set_meta_prjconf(self.project, project_prjconf())

        meta = self.osc.meta_prj(self.project)
        if has_repository(meta, 'standard'):
            return

        # The images repository builds against the standard one, so it
        # has to exist first.
        logging.info('Adding repositories to %s', self.project)
        meta = add_repository(meta, 'standard',
                              self.distro.parent_project, 'standard', arch)
        self.osc.set_meta_prj(self.project, meta)

        meta = self.osc.meta_prj(self.project)
        meta = add_repository(meta, 'images', self.project, 'standard', arch)
        self.osc.set_meta_prj(self.project, meta)

    def enable_package(self, package):
        meta = self.osc.meta_pkg(self.project, package)
        self.osc.set_meta_pkg(self.project, package, enable_package(meta))

    def link_package(self, package):
        self.osc.linkpac(self.distro.parent_project, package, self.project)
        self.enable_package(package)

    def link_packages(self):
        for package in contrib_packages:
            self.link_package(package)

    def _update_file(self, workdir, package, src, fname, message):
        pkgdir = self.osc.checkout(self.project, package, workdir)
        tracked = tracked_files(pkgdir)

        shutil.copyfile(src, os.path.join(pkgdir, fname))

        if fname not in tracked:
            self.osc.add(fname, cwd=pkgdir)

        self.osc.commit(message, cwd=pkgdir)

    def upload_firmware(self, workdir, tarballs):
        for name in artifacts:
            tarball = tarballs[name]
            self._update_file(workdir, f'zynqmp-{name}', tarball,
                              os.path.basename(tarball), f'Update {name} binary')

    def upload_hdf(self, workdir, hdf):
        self._update_file(workdir, 'zynqmp-hdf', hdf, hdf_name, 'Update hdf')

    def write_hook_tarball(self, pkgdir):
        fs = Filesystem(pkgdir)
        fs.rmtree('x')
        fs.rmtree('y')
        fs.write_file(os.path.join('x', hook_dir, hook_file), None, self.project + '\n')

        tarball = hook_packer.pack_dir(fs.fname('x'), hook_dir)
        shutil.move(tarball, fs.fname(hook_tarball))
        fs.rmtree('x')

    def link_image(self, workdir):
        self.link_package(image_package)

        pkgdir = self.osc.checkout(self.project, image_package, workdir)
        tracked = tracked_files(pkgdir)

        self.write_hook_tarball(pkgdir)

        if hook_tarball not in tracked:
            self.osc.add(hook_tarball, cwd=pkgdir)
        self.osc.commit('Update contrib repo link', cwd=pkgdir)

    def update(self, workdir, tarballs, hdf):
        self.setup_project()
        self.link_packages()
        self.upload_firmware(workdir, tarballs)
        self.upload_hdf(workdir, hdf)
        self.link_image(workdir)
