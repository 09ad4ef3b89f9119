# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2026 zynqpack authors

import os

import pytest


class FakeOsc:
    """
    Stand-in for zynqpack.osc.Osc recording every call.

    Project metadata is kept in memory so read-modify-write sequences can be
    followed, checkouts are plain directories below the given cwd.
    """

    def __init__(self, user='tux', projects=None, packages=None):
        self.user = user
        self.calls = []
        self.projects = dict(projects or {})
        self.packages = dict(packages or {})

    def whois(self):
        self.calls.append(('whois',))
        return self.user

    def ensure_configured(self):
        self.calls.append(('ensure_configured',))

    def project_exists(self, project):
        self.calls.append(('project_exists', project))
        return project in self.projects

    def meta_prj(self, project):
        self.calls.append(('meta_prj', project))
        return self.projects[project]

    def set_meta_prj(self, project, meta):
        self.calls.append(('set_meta_prj', project))
        self.projects[project] = meta

    def set_meta_prjconf(self, project, prjconf):
        self.calls.append(('set_meta_prjconf', project, prjconf))

    def meta_pkg(self, project, package):
        self.calls.append(('meta_pkg', project, package))
        return self.packages.get(
            (project, package),
            f'<package name="{package}" project="{project}">'
            '<build><disable/></build></package>')

    def set_meta_pkg(self, project, package, meta):
        self.calls.append(('set_meta_pkg', project, package))
        self.packages[(project, package)] = meta

    def linkpac(self, source_project, package, target_project):
        self.calls.append(('linkpac', source_project, package, target_project))

    def checkout(self, project, package, cwd):
        self.calls.append(('checkout', project, package))
        pkgdir = os.path.join(cwd, project, package)
        os.makedirs(pkgdir, exist_ok=True)
        return pkgdir

    def add(self, fname, cwd):
        self.calls.append(('add', os.path.basename(cwd), fname))

    def commit(self, message, cwd):
        self.calls.append(('commit', os.path.basename(cwd), message))

    def names(self):
        return [c[0] for c in self.calls]


@pytest.fixture
def fake_osc():
    return FakeOsc()


class _Recorder(list):
    def __init__(self):
        super().__init__()
        self.outputs = {}


@pytest.fixture
def recorded_commands(monkeypatch):
    """
    Replace the zynqpack.shellhelper entry points used by zynqpack.osc with
    recorders. The fixture value is the list of recorded (argv, kwargs), canned
    stdout of get_command_out is looked up in its `outputs` dict.
    """
    import zynqpack.osc

    commands = _Recorder()
    outputs = commands.outputs

    class _Completed:
        returncode = 0

    def _do(cmd, **kwargs):
        commands.append((cmd, kwargs))

    def _get_command_out(cmd, **kwargs):
        commands.append((cmd, kwargs))
        return outputs.get(tuple(cmd), '')

    def _run(cmd, **kwargs):
        commands.append((cmd, kwargs))
        return _Completed()

    monkeypatch.setattr(zynqpack.osc, 'do', _do)
    monkeypatch.setattr(zynqpack.osc, 'get_command_out', _get_command_out)
    monkeypatch.setattr(zynqpack.osc, 'run', _run)

    return commands
