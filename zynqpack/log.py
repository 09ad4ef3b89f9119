# ZYNQPACK - ZynqMP OBS contrib project builder
# SPDX-License-Identifier: GPL-3.0-or-later
# SPDX-FileCopyrightText: 2019, 2026 zynqpack authors


import logging
import os
import re
import threading
from contextlib import contextmanager


root = logging.getLogger()
context_fmt = logging.Formatter('%(context)s%(message)s')
log = logging.getLogger('log')
cmdout = logging.getLogger('cmdout')


class ContextFilter(logging.Filter):
    """
    Only pass records of the given loggers and make sure every record
    carries a context prefix.
    """

    def __init__(self, allowed, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.allowed = {a.name for a in allowed}

    def filter(self, record):
        retval = record.name in self.allowed
        if retval and not hasattr(record, 'context'):
            record.context = f'[{record.levelname}] '
        return retval


class _NullStream:
    def write(self, data):
        pass

    def flush(self):
        pass


def add_stream_handlers(streams, level=logging.INFO):

    for stream in streams:
        if stream == os.devnull:
            stream = _NullStream()

        out = logging.StreamHandler(stream)
        out.addFilter(ContextFilter([root, log, cmdout]))
        out.setFormatter(context_fmt)
        out.setLevel(level)
        yield out


def add_file_handlers(files):

    for fname in files:
        out = logging.FileHandler(fname)
        out.addFilter(ContextFilter([root, log, cmdout]))
        out.setFormatter(context_fmt)
        yield out


_logging_methods = {
    'streams': add_stream_handlers,
    'files': add_file_handlers,
}


@contextmanager
def zynqpack_logging(*args, **kwargs):
    cleanup = open_logging(*args, **kwargs)
    try:
        yield
    finally:
        cleanup()


def open_logging(*, verbose=False, **targets):
    """
    Attach handlers to the root logger.

    `streams` and `files` take a single destination or a list of them.
    Stream handlers show DEBUG records only when `verbose` is set, files
    always receive everything.
    """
    root.setLevel(logging.DEBUG)

    handlers = []

    for key, call in _logging_methods.items():
        if key in targets:
            destinations = targets[key]
            if not isinstance(destinations, list):
                destinations = [destinations]

            if key == 'streams':
                hs = call(destinations, logging.DEBUG if verbose else logging.INFO)
            else:
                hs = call(destinations)

            for h in hs:
                handlers.append(h)
                root.addHandler(h)

    def _cleanup():
        for h in handlers:
            root.removeHandler(h)
            h.close()

    return _cleanup


class AsyncLogging(threading.Thread):
    """
    Read the output of an external tool from a pipe and forward it line by
    line to the `cmdout` logger.
    """

    def __init__(self, atmost):
        super().__init__(daemon=True)
        self.atmost = atmost
        self.read_fd, self.write_fd = os.pipe()
        self.stream = logging.LoggerAdapter(cmdout, {'context': ''})

    def run(self):
        try:
            self.__run()
        finally:
            os.close(self.read_fd)

    def shutdown(self):
        os.close(self.write_fd)

    def __run(self):
        rest = ''

        while True:

            buf = os.read(self.read_fd, self.atmost).decode('utf-8', errors='replace')

            # Pipe broke
            if not buf:
                break

            lines = (rest + buf).split('\n')
            rest = lines.pop()

            if lines:
                logbuf = '\n'.join(lines)

                # hsi and osc like to draw progress bars
                logbuf = re.sub('\u001b\\[.*?[@-~]', '', logbuf)
                logbuf = logbuf.replace('\u0008', '').replace('\r', '')

                self.stream.info(logbuf)

        if rest:
            self.stream.info(rest)


def async_logging(atmost=4096):
    t = AsyncLogging(atmost)
    t.start()
    return t


@contextmanager
def async_logging_ctx(*args, **kwargs):
    t = async_logging(*args, **kwargs)
    try:
        yield t.write_fd
    finally:
        t.shutdown()
        t.join()
