# Copyright Contributors to the Probkit project.
# SPDX-License-Identifier: Apache-2.0

import math
import numbers
from typing import Tuple, Union, overload

import numpy as np
import torch

Numeric = Union[numbers.Number, list, tuple, np.ndarray, np.generic, torch.Tensor]


def _as_array(x):
    # lists and tuples compare by identity, so evaluate them as arrays
    return np.asarray(x) if isinstance(x, (list, tuple)) else x


@overload
def nan_mask(x: numbers.Number) -> bool: ...
@overload
def nan_mask(x: Union[list, tuple, np.ndarray]) -> np.ndarray: ...
@overload
def nan_mask(x: torch.Tensor) -> torch.Tensor: ...
def nan_mask(x: Numeric) -> Union[bool, np.ndarray, torch.Tensor]:
    """
    Elementwise NaN test over numbers, lists, arrays and tensors.
    """
    x = _as_array(x)
    if isinstance(x, torch.Tensor):
        return torch.isnan(x)
    if isinstance(x, (np.ndarray, np.generic)):
        return np.isnan(x)
    return x != x


@overload
def inf_mask(x: numbers.Number) -> bool: ...
@overload
def inf_mask(x: Union[list, tuple, np.ndarray]) -> np.ndarray: ...
@overload
def inf_mask(x: torch.Tensor) -> torch.Tensor: ...
def inf_mask(x: Numeric) -> Union[bool, np.ndarray, torch.Tensor]:
    """
    Elementwise test for ``+inf`` or ``-inf`` over numbers, lists, arrays and
    tensors.
    """
    x = _as_array(x)
    if isinstance(x, torch.Tensor):
        return torch.isinf(x)
    if isinstance(x, (np.ndarray, np.generic)):
        return np.isinf(x)
    return x == math.inf or x == -math.inf


def not_positive_mask(x: Numeric) -> Union[bool, np.ndarray, torch.Tensor]:
    """
    Elementwise test for ``not x > 0``, which is true for nan.
    """
    x = _as_array(x)
    if isinstance(x, torch.Tensor):
        return ~(x > 0)
    if isinstance(x, (np.ndarray, np.generic)):
        return np.logical_not(x > 0)
    return not x > 0


def any_true(mask) -> bool:
    """
    Reduces a mask from :func:`nan_mask`, :func:`inf_mask` or
    :func:`not_positive_mask` to a python bool.
    """
    return bool(mask.any()) if hasattr(mask, "any") else bool(mask)


def first_where(x: Numeric, mask) -> numbers.Number:
    """
    Returns the first element of ``x`` (in row-major order) where ``mask`` is
    true, as a python number. Numbers are returned unchanged.
    """
    if isinstance(x, numbers.Number):
        return x
    if isinstance(x, torch.Tensor):
        return x.detach().reshape(-1)[mask.reshape(-1)][0].item()
    return np.asarray(x).reshape(-1)[np.asarray(mask).reshape(-1)][0].item()


def shape_of(x: Numeric) -> Tuple[int, ...]:
    if isinstance(x, torch.Tensor):
        return tuple(x.shape)
    return np.shape(x)


def broadcast_shape(*shapes):
    """
    Similar to ``np.broadcast()`` but for shapes.
    Equivalent to ``np.broadcast(*map(np.empty, shapes)).shape``.

    :param tuple shapes: shapes of tensors.
    :returns: broadcasted shape
    :rtype: tuple
    :raises: ValueError
    """
    reversed_shape = []
    for shape in shapes:
        for i, size in enumerate(reversed(shape)):
            if i >= len(reversed_shape):
                reversed_shape.append(size)
            elif reversed_shape[i] == 1:
                reversed_shape[i] = size
            elif reversed_shape[i] != size and size != 1:
                raise ValueError(
                    "shape mismatch: objects cannot be broadcast to a single shape: {}".format(
                        " vs ".join(map(str, shapes))
                    )
                )
    return tuple(reversed(reversed_shape))
