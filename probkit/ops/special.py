# Copyright Contributors to the Probkit project.
# SPDX-License-Identifier: Apache-2.0

"""
Elementary functions that accept python numbers, numpy arrays and
:class:`torch.Tensor` s alike, dispatching to :mod:`math`, :mod:`numpy` or
:mod:`torch` respectively. Tensor inputs keep their autograd history.

All arguments of a single call are expected to share one representation;
see :func:`probkit.distributions.promotion.promote_args`.
"""

import math

import numpy as np
import torch


def _is_array(x):
    return isinstance(x, (np.ndarray, np.generic))


def log(x):
    if isinstance(x, torch.Tensor):
        return x.log()
    if _is_array(x):
        with np.errstate(divide="ignore", invalid="ignore"):
            return np.log(x)
    # log(0) == -inf and log(x < 0) == nan, as in numpy and torch
    if x > 0:
        return math.log(x)
    return -math.inf if x == 0 else math.nan


def log1p(x):
    """
    Computes ``log(1 + x)`` without the cancellation error of the naive
    formula when ``|x|`` is small.
    """
    if isinstance(x, torch.Tensor):
        return x.log1p()
    if _is_array(x):
        return np.log1p(x)
    return math.log1p(x)


def square(x):
    if isinstance(x, torch.Tensor):
        return x.square()
    if _is_array(x):
        return np.square(x)
    return x * x


def atan2(y, x):
    """
    Two-argument arctangent of ``y / x`` with the sign of both arguments
    selecting the quadrant, so that e.g. ``atan2(-0.0, 1.0) == -0.0`` and
    ``atan2(1.0, 0.0) == pi / 2``.
    """
    if isinstance(y, torch.Tensor) or isinstance(x, torch.Tensor):
        return torch.atan2(torch.as_tensor(y), torch.as_tensor(x))
    if _is_array(y) or _is_array(x):
        return np.arctan2(y, x)
    return math.atan2(y, x)
