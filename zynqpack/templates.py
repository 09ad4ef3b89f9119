# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2014-2017, 2026 zynqpack authors

import importlib.resources
import logging

from mako import exceptions
from mako.template import Template

import zynqpack.makofiles


def template(fname, d):
    try:
        return Template(filename=fname).render(**d)
    except BaseException:
        logging.error(exceptions.text_error_template().render())
        raise


def pack_template(name, d):
    """
    Render one of the templates shipped in zynqpack/makofiles.
    """
    template_dir = importlib.resources.files(zynqpack.makofiles)

    with importlib.resources.as_file(template_dir / name) as fname:
        return template(str(fname), d)


def write_pack_template(outname, name, d):
    with open(outname, 'w') as outfile:
        outfile.write(pack_template(name, d))
