# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2026 zynqpack authors

import pytest

import zynqpack.tools
from zynqpack.cli import CliError
from zynqpack.distributions import get_distribution


def _which(available):
    return lambda cmd: f'/usr/bin/{cmd}' if cmd in available else None


def test_check_tools_all_there(monkeypatch):
    monkeypatch.setattr(zynqpack.tools.shutil, 'which',
                        _which({'osc', 'unzip', 'pixz', 'hsi', 'git', 'tar'}))
    zynqpack.tools.check_tools()


@pytest.mark.parametrize('missing,message', [
    ('osc', 'Please install the Open build Service Client (zypper in osc).'),
    ('pixz', 'Please install Parallel XZip (zypper in pixz).'),
    ('hsi', 'Please install Vivado and put its bin directories into PATH.'),
])
def test_check_tools_missing(monkeypatch, missing, message):
    available = {'osc', 'unzip', 'pixz', 'hsi', 'git', 'tar'} - {missing}
    monkeypatch.setattr(zynqpack.tools.shutil, 'which', _which(available))

    with pytest.raises(CliError) as exc:
        zynqpack.tools.check_tools()

    assert str(exc.value) == message


def test_check_tools_only(monkeypatch):
    monkeypatch.setattr(zynqpack.tools.shutil, 'which',
                        _which(zynqpack.tools.firmware_tools))
    zynqpack.tools.check_tools(only=zynqpack.tools.firmware_tools)


def test_unknown_distribution():
    assert get_distribution('sles15').parent_project == 'devel:ARM:SLES:15.0:Contrib:Zynq'

    with pytest.raises(CliError) as exc:
        get_distribution('debian')

    assert str(exc.value) == 'Unknown distribution: debian'
