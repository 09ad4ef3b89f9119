# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2014-2017, 2026 zynqpack authors

import contextlib
import logging
import os
import shlex
import subprocess

from zynqpack.log import async_logging_ctx


"""
Forward to zynqpack logging system.
"""
ZYNQPACK_LOGGING = object()


def _is_shell_cmd(cmd):
    return isinstance(cmd, str)


def _log_cmd(cmd):
    if _is_shell_cmd(cmd):
        return cmd
    else:
        return shlex.join(map(os.fspath, cmd))


def run(cmd, /, *, check=True, log_cmd=None, **kwargs):
    """
    Like subprocess.run() but
     * defaults to check=True
     * logs the executed command
     * accepts ZYNQPACK_LOGGING for stdout and stderr

    --

    Let's quiet the loggers

    >>> import os
    >>> import sys
    >>> from zynqpack.log import open_logging
    >>> cleanup = open_logging(streams=os.devnull)

    >>> run(['echo', 'ZYNQ'])
    CompletedProcess(args=['echo', 'ZYNQ'], returncode=0)

    >>> run(['echo', 'ZYNQ'], capture_output=True)
    CompletedProcess(args=['echo', 'ZYNQ'], returncode=0, stdout=b'ZYNQ\\n', stderr=b'')

    >>> run(['false']) # doctest: +ELLIPSIS
    Traceback (most recent call last):
    ...
    subprocess.CalledProcessError: ...

    >>> run('false', check=False).returncode
    1

    >>> run(['cat', '-'], input=b'ZYNQ', capture_output=True).stdout
    b'ZYNQ'

    >>> cleanup()
    """
    stdout = kwargs.pop('stdout', None)
    stderr = kwargs.pop('stderr', None)

    with contextlib.ExitStack() as stack:
        if stdout is ZYNQPACK_LOGGING or stderr is ZYNQPACK_LOGGING:
            log_fd = stack.enter_context(async_logging_ctx())
            if stdout is ZYNQPACK_LOGGING:
                stdout = log_fd
            if stderr is ZYNQPACK_LOGGING:
                stderr = log_fd

        logging.info(log_cmd or _log_cmd(cmd), extra={'context': '[CMD] '})

        return subprocess.run(cmd, stdout=stdout, stderr=stderr, check=check, **kwargs)


def do(cmd, /, **kwargs):
    """do() - Execute cmd and redirect outputs to logging.

    Throws a subprocess.CalledProcessError if cmd returns none-zero and check=True

    --

    Let's redirect the loggers to current stdout
    >>> import sys
    >>> from zynqpack.log import open_logging
    >>> cleanup = open_logging(streams=sys.stdout)

    >>> do("true")
    [CMD] true

    >>> do(["false"], check=False)
    [CMD] false

    >>> do("cat - && false", input=b"") # doctest: +ELLIPSIS
    Traceback (most recent call last):
    ...
    subprocess.CalledProcessError: ...

    >>> cleanup()
    """

    run(cmd, shell=_is_shell_cmd(cmd), stdout=ZYNQPACK_LOGGING,
        stderr=subprocess.STDOUT, **kwargs)


def get_command_out(cmd, /, **kwargs):
    """get_command_out() - Execute cmd and return its stdout as str.

    stderr goes to the log, trailing whitespace is stripped.

    --

    >>> import os
    >>> from zynqpack.log import open_logging
    >>> cleanup = open_logging(streams=os.devnull)

    >>> get_command_out(['echo', 'home:zynq'])
    'home:zynq'

    >>> get_command_out(['cat', '-'], input='<project/>\\n')
    '<project/>'

    >>> cleanup()
    """

    ps = run(cmd, shell=_is_shell_cmd(cmd), stdout=subprocess.PIPE,
             stderr=ZYNQPACK_LOGGING, encoding='utf-8', **kwargs)
    return ps.stdout.rstrip()
