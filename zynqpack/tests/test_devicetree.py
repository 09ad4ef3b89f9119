# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2026 zynqpack authors

import textwrap

import zynqpack.devicetree
from zynqpack.commands import fixdts


ZYNQMP_CLK_DTSI = textwrap.dedent("""\
    / {
    \tzynqmp_clk: zynqmp_clk {
    \t\tcompatible = "xlnx,zynqmp-clk";
    \t\t#clock-cells = <1>;
    \t};
    \tusb0: usb0@ff9d0000 {
    \t\tpower-domains = <&zynqmp_firmware 22>;
    \t\tclocks = <&zynqmp_clk 32>;
    \t};
    };
    """)

EXPECTED_DTSI = textwrap.dedent("""\
    / {
    \tzynqmp_clk: zynqmp_clk {
    \t\tcompatible = "fixed-clock";
    \t\t#clock-cells = <1>;
    \t};
    \tusb0: usb0@ff9d0000 {
    \t\tclocks = <&zynqmp_clk 32>;
    \t};
    };
    """)


def test_fixup_tree(tmp_path):
    dts = tmp_path / 'dts'
    (dts / 'include').mkdir(parents=True)
    (dts / 'zynqmp-clk-ccf.dtsi').write_text(ZYNQMP_CLK_DTSI)
    (dts / 'include' / 'untouched.h').write_text('#define FOO 1\n')

    changed = zynqpack.devicetree.fixup_tree(dts)

    assert changed == [str(dts / 'zynqmp-clk-ccf.dtsi')]
    assert (dts / 'zynqmp-clk-ccf.dtsi').read_text() == EXPECTED_DTSI
    assert (dts / 'include' / 'untouched.h').read_text() == '#define FOO 1\n'


def test_fixup_keeps_crlf():
    assert zynqpack.devicetree.fixup_text('a\r\npower-domains = <1>;\r\nb') == 'a\r\nb'


def test_fixup_tree_skips_symlinks(tmp_path):
    target = tmp_path / 'outside.dtsi'
    target.write_text('power-domains = <1>;\n')
    (tmp_path / 'dts').mkdir()
    (tmp_path / 'dts' / 'link.dtsi').symlink_to(target)

    assert zynqpack.devicetree.fixup_tree(tmp_path / 'dts') == []
    assert target.read_text() == 'power-domains = <1>;\n'


def test_fixdts_command(tmp_path, capsys):
    (tmp_path / 'system-top.dts').write_text(ZYNQMP_CLK_DTSI)

    fixdts.run_command([str(tmp_path)])

    assert capsys.readouterr().out == f'{tmp_path / "system-top.dts"}\n'
    assert (tmp_path / 'system-top.dts').read_text() == EXPECTED_DTSI
