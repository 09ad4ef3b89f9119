# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2026 zynqpack authors

import logging
import os
import subprocess

from lxml.etree import parse

from zynqpack.config import oscrc_paths
from zynqpack.shellhelper import do, get_command_out, run


class Osc:
    """
    Wrapper around the osc command line client.

    Every call blocks until osc exits and raises
    subprocess.CalledProcessError when osc fails.
    """

    def __init__(self, apiurl=None, exe='osc'):
        self.apiurl = apiurl
        self.exe = exe

    def _cmd(self, *args):
        cmd = [self.exe]
        if self.apiurl:
            cmd += ['-A', self.apiurl]
        return cmd + list(args)

    def _out(self, *args, **kwargs):
        return get_command_out(self._cmd(*args), **kwargs)

    def _do(self, *args, **kwargs):
        do(self._cmd(*args), **kwargs)

    def is_configured(self):
        return any(os.path.exists(p) for p in oscrc_paths())

    def ensure_configured(self):
        # osc asks for the credentials and writes its configuration on
        # first use, so it needs the terminal.
        if not self.is_configured():
            logging.info('osc is not configured yet, running "osc whois" interactively')
            run(self._cmd('whois'))

    def whois(self):
        out = self._out('whois')
        return out.split(':', 1)[0].strip()

    def project_exists(self, project):
        ps = run(self._cmd('meta', 'prj', project), check=False,
                 stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        return ps.returncode == 0

    def meta_prj(self, project):
        return self._out('meta', 'prj', project)

    def set_meta_prj(self, project, meta):
        self._do('meta', 'prj', '-F', '-', project, input=meta.encode('utf-8'))

    def set_meta_prjconf(self, project, prjconf):
        self._do('meta', 'prjconf', '-F', '-', project, input=prjconf.encode('utf-8'))

    def meta_pkg(self, project, package):
        return self._out('meta', 'pkg', project, package)

    def set_meta_pkg(self, project, package, meta):
        self._do('meta', 'pkg', '-F', '-', project, package, input=meta.encode('utf-8'))

    def linkpac(self, source_project, package, target_project):
        self._do('linkpac', '-f', source_project, package, target_project)

    def checkout(self, project, package, cwd):
        """
        Check out `project/package` to `cwd/project/package` and return the
        path of the working copy.

        With -o the layout does not depend on checkout_no_colon in oscrc.
        """
        pkgdir = os.path.join(cwd, project, package)
        self._do('checkout', '-o', pkgdir, project, package, cwd=cwd)
        return pkgdir

    def add(self, fname, cwd):
        self._do('add', fname, cwd=cwd)

    def commit(self, message, cwd):
        self._do('commit', '-m', message, cwd=cwd)


def tracked_files(pkgdir):
    """
    Names of the files an osc working copy has under version control.
    """
    files = os.path.join(pkgdir, '.osc', '_files')
    if not os.path.exists(files):
        return set()

    return {entry.get('name') for entry in parse(files).getroot().iter('entry')}
