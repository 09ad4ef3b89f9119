# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2014-2017, 2026 zynqpack authors

import logging
import os
import shutil
from tempfile import mkdtemp


class Filesystem:

    def __init__(self, path, clean=False):
        """
        >>> os.path.isdir(this.path)
        True
        """

        self.path = os.path.abspath(path)

        if clean:
            shutil.rmtree(self.path, True)
            os.makedirs(self.path)

    def fname(self, path):
        """
        >>> expect = os.path.join(this.path, "fname")
        >>> this.fname("/fname") == expect == this.fname("fname")
        True
        """
        if path.startswith('/'):
            path = path[1:]
        return os.path.join(self.path, path)

    def isdir(self, path):
        """
        >>> this.isdir("isdir")
        False

        >>> os.makedirs(this.fname("isdir"))
        >>> this.isdir("isdir")
        True
        """
        return os.path.isdir(self.fname(path))

    def isfile(self, path):
        return os.path.isfile(self.fname(path))

    def exists(self, path):
        return os.path.exists(self.fname(path))

    def mkdir(self, path):
        os.makedirs(self.fname(path))

    def rmtree(self, path):
        """
        >>> this.mkdir("/rmtree/rmtree")
        >>> this.rmtree("/rmtree")
        >>> this.exists("/rmtree")
        False

        >>> this.rmtree("/rmtree")
        """
        shutil.rmtree(self.fname(path), ignore_errors=True)

    def copy(self, src, path):
        """
        Copy a file from outside into this filesystem.

        >>> this.write_file("copy-src", 0o644, "hdf")
        >>> this.copy(this.fname("copy-src"), "copy-dst")
        >>> this.read_file("copy-dst")
        'hdf'
        """
        shutil.copyfile(src, self.fname(path))

    def write_file(self, path, mode, cont):
        """
        >>> this.write_file("x/kiwi-hooks/contrib_repo", None, "home:zynq\\n")
        >>> this.read_file("x/kiwi-hooks/contrib_repo")
        'home:zynq\\n'
        """
        fname = self.fname(path)
        os.makedirs(os.path.dirname(fname), exist_ok=True)
        with open(fname, 'w') as f:
            f.write(cont)
        if mode is not None:
            os.chmod(fname, mode)

    def read_file(self, path):
        with open(self.fname(path), 'r') as f:
            return f.read()

    def walk_files(self, directory=''):
        """
        Yield the absolute path of every regular file below `directory`.

        >>> this.write_file("walk/a/b.dtsi", None, "")
        >>> this.write_file("walk/c.dts", None, "")
        >>> sorted(os.path.relpath(f, this.fname("walk")) for f in this.walk_files("walk"))
        ['a/b.dtsi', 'c.dts']
        """
        for dirpath, _, filenames in os.walk(self.fname(directory)):
            for f in filenames:
                realpath = os.path.join(dirpath, f)
                if os.path.isfile(realpath) and not os.path.islink(realpath):
                    yield realpath


class TmpdirFilesystem (Filesystem):
    """
    Scratch directory removed when the context is left, unless `keep` is set.
    """

    def __init__(self, keep=False):
        tmpdir = mkdtemp(prefix='zynqpack-')
        Filesystem.__init__(self, tmpdir)
        self.keep = keep

    def delete(self):
        shutil.rmtree(self.path, True)

    def __enter__(self):
        return self

    def __exit__(self, exec_type, exec_value, tb):
        if self.keep:
            logging.info('leaving temporary directory in "%s"', self.path)
        else:
            self.delete()
        return False
