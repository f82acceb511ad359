# Copyright Contributors to the Probkit project.
# SPDX-License-Identifier: Apache-2.0

"""
The ``probkit`` logger. Applications that configure logging themselves (any
handler on the root logger) receive probkit records through propagation;
otherwise probkit prints INFO and above to stderr on its own.
"""

import logging

LOG_FORMAT = "%(levelname)s \t %(name)s: %(message)s"

log = logging.getLogger("probkit")
log.setLevel(logging.INFO)


def _add_stderr_handler(logger):
    handler = logging.StreamHandler()
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    # probkit records stop here and never reach the root logger
    logger.propagate = False
    return handler


if not logging.root.handlers:
    _add_stderr_handler(log)
