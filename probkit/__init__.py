# Copyright Contributors to the Probkit project.
# SPDX-License-Identifier: Apache-2.0

import probkit.distributions as distributions
from probkit.logger import log

from . import settings

version_prefix = "0.1.0"

# Get the __version__ string from the auto-generated _version.py file, if exists.
try:
    from probkit._version import __version__  # type: ignore
except ImportError:
    __version__ = version_prefix

__all__ = [
    "__version__",
    "distributions",
    "log",
    "settings",
]
