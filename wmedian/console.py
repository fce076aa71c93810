# Licensed under a 3-clause BSD style license - see LICENSE.rst

"""
A small logging front end shared by the package.

Everything goes through the ``wmedian`` logger of the standard
`logging` module.  Nothing is printed until `Log.enable` installs a
handler, so importing the package has no side effects on the host
application's logging setup.
"""

import logging


def verbosity_to_level(verbosity):
    """Map a small verbosity integer to a logging level."""
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


class Log:
    def __init__(self, name="wmedian"):
        self._logger = logging.getLogger(name)
        self._handler = None

    def enable(self, verbose=False):
        """
        Attach a stream handler to the package logger.

        Parameters
        ----------
        verbose : bool or int
            ``True`` (or 2) shows debug output, 1 shows info output,
            ``False`` (or 0) shows warnings and errors only.
        """
        if self._handler is None:
            self._handler = logging.StreamHandler()
            self._handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
            self._logger.addHandler(self._handler)
        verbosity = 2 if verbose is True else int(verbose)
        self._logger.setLevel(verbosity_to_level(verbosity))

    def disable(self):
        if self._handler is not None:
            self._logger.removeHandler(self._handler)
            self._handler = None
        self._logger.setLevel(logging.NOTSET)

    def is_debug_enabled(self):
        return self._logger.isEnabledFor(logging.DEBUG)

    def debug(self, msg, *args):
        self._logger.debug(msg, *args)

    def info(self, msg, *args):
        self._logger.info(msg, *args)

    def warning(self, msg, *args):
        self._logger.warning(msg, *args)


log = Log()
