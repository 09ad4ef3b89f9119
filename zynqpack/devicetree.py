# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2026 zynqpack authors

"""
Turn the device tree generated by the Xilinx tooling into something the
upstream kernel accepts.

The upstream kernel has no driver for the zynqmp clock controller binding
and does not know the firmware power domains, so clocks are declared as fixed
clocks and every power-domains property is dropped.
"""

import io
import logging

from zynqpack.filesystem import Filesystem


def fixup_line(line):
    """
    Returns the patched line or None when the line is to be dropped.

    >>> fixup_line('compatible = "xlnx,zynqmp-clk";\\n')
    'compatible = "fixed-clock";\\n'

    Only the first occurrence is replaced:

    >>> fixup_line('"xlnx,zynqmp-clk", "xlnx,zynqmp-clk"')
    '"fixed-clock", "xlnx,zynqmp-clk"'

    >>> fixup_line('\\tpower-domains = <&pd_usb0>;\\n') is None
    True

    >>> fixup_line('\\tpower-domains= <&pd_usb0>;\\n')
    '\\tpower-domains= <&pd_usb0>;\\n'
    """
    line = line.replace('xlnx,zynqmp-clk', 'fixed-clock', 1)
    if 'power-domains =' in line:
        return None
    return line


def fixup_text(text):
    """
    >>> fixup_text('a {\\n\\tpower-domains = <&pd>;\\n\\tclocks = <&clk>;\\n};\\n')
    'a {\\n\\tclocks = <&clk>;\\n};\\n'

    >>> fixup_text('')
    ''
    """
    lines = (fixup_line(line) for line in io.StringIO(text, newline='\n'))
    return ''.join(line for line in lines if line is not None)


def fixup_file(fname):
    with open(fname, 'r', encoding='utf-8', errors='surrogateescape', newline='') as f:
        text = f.read()

    patched = fixup_text(text)

    with open(fname, 'w', encoding='utf-8', errors='surrogateescape', newline='') as f:
        f.write(patched)

    return patched != text


def fixup_tree(directory):
    """
    Patch every regular file below `directory` in place and return the list
    of files which were changed.
    """
    changed = []
    for fname in sorted(Filesystem(directory).walk_files()):
        if fixup_file(fname):
            logging.debug('patched device tree %s', fname)
            changed.append(fname)

    logging.info('%d of the device tree files below %s needed fixing', len(changed), directory)
    return changed
