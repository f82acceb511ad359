# Copyright Contributors to the Probkit project.
# SPDX-License-Identifier: Apache-2.0

"""
Argument checks shared by all evaluators.

Each check returns ``True`` if ``value`` satisfies its requirement. Otherwise
it hands a :class:`~probkit.distributions.policy.DomainError` to ``policy``,
which either raises it or returns, in which case the check returns ``False``
and the caller must return the policy's sentinel without computing anything
further. List, tuple, array and tensor arguments fail if any element fails,
and the first failing element is reported.
"""

import math
import numbers

import numpy as np
import torch

from probkit.distributions.policy import (
    NarrowingError,
    NonFiniteError,
    NonPositiveError,
    NotANumberError,
    default_policy,
)
from probkit.util import any_true, first_where, inf_mask, nan_mask, not_positive_mask


def _fail(error_type, function, value, name, mask, policy):
    if policy is None:
        policy = default_policy()
    policy.handle(error_type(function, name, first_where(value, mask)))
    return False


def check_not_nan(function, value, name, policy=None):
    """
    Checks that ``value`` is not nan.

    :param str function: Name of the calling function, used in diagnostics.
    :param value: A number, list, tuple, array or tensor.
    :param str name: Human readable label of the argument.
    :param policy: A :class:`~probkit.distributions.policy.Policy`; defaults
        to :func:`~probkit.distributions.policy.default_policy`.
    :returns: whether the caller may continue.
    :rtype: bool
    """
    mask = nan_mask(value)
    if not any_true(mask):
        return True
    return _fail(NotANumberError, function, value, name, mask, policy)


def check_finite(function, value, name, policy=None):
    """
    Checks that ``value`` is neither nan nor infinite. See
    :func:`check_not_nan` for arguments.
    """
    mask = nan_mask(value) | inf_mask(value)
    if not any_true(mask):
        return True
    return _fail(NonFiniteError, function, value, name, mask, policy)


def check_positive(function, value, name, policy=None):
    """
    Checks that ``value > 0``. Note nan fails this check. See
    :func:`check_not_nan` for arguments.
    """
    mask = not_positive_mask(value)
    if not any_true(mask):
        return True
    return _fail(NonPositiveError, function, value, name, mask, policy)


def check_positive_finite(function, value, name, policy=None):
    """
    Checks that ``value`` is finite, then that it is positive.
    """
    return check_finite(function, value, name, policy) and check_positive(
        function, value, name, policy
    )


def _is_python_scalar(value):
    return isinstance(value, numbers.Real) and not isinstance(value, (np.generic, torch.Tensor))


def check_representable(function, value, cast, name, policy=None):
    """
    Checks that casting ``value`` to ``cast`` kept it finite and nonzero where
    it was finite and nonzero. Only python scalars can lose range this way:
    array and tensor dtypes take part in promotion.

    :param value: The argument as passed by the caller.
    :param cast: The same argument after
        :meth:`~probkit.distributions.promotion.Promotion.cast`.
    """
    if not _is_python_scalar(value):
        return True
    converted = float(cast)
    # python ints are finite however large
    was_finite = isinstance(value, int) or math.isfinite(value)
    if (was_finite and not math.isfinite(converted)) or (value != 0 and converted == 0):
        return _fail(NarrowingError, function, value, name, True, policy)
    return True
