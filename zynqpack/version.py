# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2018, 2026 zynqpack authors

import pathlib
import site
import sys


_filepath = pathlib.Path(__file__)
is_devel = (not _filepath.is_relative_to(sys.prefix)
            and not _filepath.is_relative_to(site.getusersitepackages()))
zynqpack_version = '1.0'
if is_devel:
    zynqpack_version += '.dev0'
