# Copyright Contributors to the Probkit project.
# SPDX-License-Identifier: Apache-2.0

import math

PI = math.pi
LOG_PI = math.log(math.pi)
NEG_LOG_PI = -LOG_PI
