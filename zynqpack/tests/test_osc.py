# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2026 zynqpack authors

import os
import subprocess

import pytest

from zynqpack.osc import Osc, tracked_files


def test_whois(recorded_commands):
    recorded_commands.outputs[('osc', 'whois')] = 'tux: "Tux Penguin" <tux@example.com>'

    assert Osc().whois() == 'tux'
    assert recorded_commands[0][0] == ['osc', 'whois']


def test_apiurl(recorded_commands):
    Osc(apiurl='https://api.example.com').linkpac(
        'devel:ARM:Factory:Contrib:Zynq', 'zynqmp-fsbl', 'home:tux:Zynq')

    assert recorded_commands[0][0] == [
        'osc', '-A', 'https://api.example.com',
        'linkpac', '-f', 'devel:ARM:Factory:Contrib:Zynq', 'zynqmp-fsbl', 'home:tux:Zynq',
    ]


def test_meta_writes_from_stdin(recorded_commands):
    osc = Osc()
    osc.set_meta_prj('home:tux:Zynq', '<project name="home:tux:Zynq"/>')
    osc.set_meta_prjconf('home:tux:Zynq', 'Type: kiwi\n')
    osc.set_meta_pkg('home:tux:Zynq', 'zynqmp-dts', '<package name="zynqmp-dts"/>')

    assert recorded_commands == [
        (['osc', 'meta', 'prj', '-F', '-', 'home:tux:Zynq'],
         {'input': b'<project name="home:tux:Zynq"/>'}),
        (['osc', 'meta', 'prjconf', '-F', '-', 'home:tux:Zynq'],
         {'input': b'Type: kiwi\n'}),
        (['osc', 'meta', 'pkg', '-F', '-', 'home:tux:Zynq', 'zynqmp-dts'],
         {'input': b'<package name="zynqmp-dts"/>'}),
    ]


def test_project_exists(recorded_commands):
    assert Osc().project_exists('home:tux:Zynq')

    cmd, kwargs = recorded_commands[0]
    assert cmd == ['osc', 'meta', 'prj', 'home:tux:Zynq']
    assert kwargs['check'] is False
    assert kwargs['stdout'] == subprocess.DEVNULL


def test_working_copy_commands(recorded_commands, tmp_path):
    osc = Osc()
    pkgdir = osc.checkout('home:tux:Zynq', 'zynqmp-hdf', str(tmp_path))
    osc.add('system.hdf', cwd=pkgdir)
    osc.commit('Update hdf', cwd=pkgdir)

    assert pkgdir == os.path.join(str(tmp_path), 'home:tux:Zynq', 'zynqmp-hdf')
    assert recorded_commands == [
        (['osc', 'checkout', '-o', pkgdir, 'home:tux:Zynq', 'zynqmp-hdf'],
         {'cwd': str(tmp_path)}),
        (['osc', 'add', 'system.hdf'], {'cwd': pkgdir}),
        (['osc', 'commit', '-m', 'Update hdf'], {'cwd': pkgdir}),
    ]


@pytest.mark.parametrize('configured', [True, False])
def test_ensure_configured(recorded_commands, tmp_path, monkeypatch, configured):
    oscrc = tmp_path / 'oscrc'
    if configured:
        oscrc.write_text('[general]\n')
    monkeypatch.setenv('OSC_CONFIG', str(oscrc))

    Osc().ensure_configured()

    if configured:
        assert recorded_commands == []
    else:
        assert recorded_commands == [(['osc', 'whois'], {})]


def test_tracked_files(tmp_path):
    assert tracked_files(str(tmp_path)) == set()

    (tmp_path / '.osc').mkdir()
    (tmp_path / '.osc' / '_files').write_text(
        '<directory name="zynqmp-fsbl" rev="3" srcmd5="0123">\n'
        '  <entry name="fsbl.tar.xz" md5="abc" size="1" mtime="1"/>\n'
        '  <entry name="zynqmp-fsbl.spec" md5="def" size="1" mtime="1"/>\n'
        '</directory>\n')

    assert tracked_files(str(tmp_path)) == {'fsbl.tar.xz', 'zynqmp-fsbl.spec'}
