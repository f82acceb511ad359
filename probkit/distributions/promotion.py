# Copyright Contributors to the Probkit project.
# SPDX-License-Identifier: Apache-2.0

"""
Promotion of mixed numeric arguments to one common result type.

The rule is applied once on entry to an evaluator:

- if any argument is a :class:`torch.Tensor`, the result is a tensor whose
  dtype is :func:`torch.promote_types` over all tensor and numpy dtypes, or the
  default float dtype if that is not floating point;
- otherwise, if any argument is a numpy array or scalar, a list or a tuple, the
  result is a numpy array whose dtype is :func:`numpy.result_type` over the
  numpy dtypes, or ``float64`` if that is not floating point;
- otherwise all arguments are python ``bool``, ``int`` or ``float`` and the
  result is a python ``float``.

Python scalars never widen the dtype of an array or tensor argument, so a
``float32`` tensor stays ``float32`` when mixed with python floats. Tensors
dominate arrays, so a differentiable argument always yields a differentiable
result.
"""

import functools
import math
import numbers
from dataclasses import dataclass
from typing import Any, Optional, Tuple

import numpy as np
import torch


@dataclass(frozen=True)
class Promotion:
    """
    The result of :func:`promote_args`: a backend name, a dtype and, for
    tensors, a device.
    """

    backend: str
    dtype: Any = float
    device: Optional[torch.device] = None

    def cast(self, x):
        """
        Converts ``x`` to this promotion's representation. Tensors keep their
        autograd history.

        Python scalars may not be representable in the result dtype: values
        beyond its range become ``+-inf`` and tiny values become ``0``. This
        includes python ints too large for a ``float``, e.g. ``10**400``.
        Evaluators detect this with
        :func:`~probkit.distributions.checks.check_representable`.
        """
        if isinstance(x, int) and not isinstance(x, bool):
            x = _int_to_float(x)
        if self.backend == "torch":
            if isinstance(x, torch.Tensor):
                return x.to(device=self.device, dtype=self.dtype)
            return torch.as_tensor(x, dtype=self.dtype, device=self.device)
        if self.backend == "numpy":
            with np.errstate(over="ignore", under="ignore"):
                return np.asarray(x, dtype=self.dtype)
        return float(x)

    def zeros(self, shape: Tuple[int, ...] = ()):
        return self.full(shape, 0.0)

    def full(self, shape: Tuple[int, ...], value):
        if self.backend == "torch":
            return torch.full(shape, value, dtype=self.dtype, device=self.device)
        if self.backend == "numpy":
            return np.full(shape, value, dtype=self.dtype)
        assert shape == (), shape
        return float(value)


def _int_to_float(x):
    try:
        return float(x)
    except OverflowError:
        return math.inf if x > 0 else -math.inf


def _numpy_dtype(x):
    dtype = np.asarray(x).dtype
    if dtype.kind not in "biuf":
        raise TypeError("Unsupported argument of dtype {}: {!r}".format(dtype, x))
    return dtype


def _torch_dtype(dtype):
    # numpy -> torch dtype, e.g. np.float64 -> torch.float64
    return torch.from_numpy(np.empty(0, dtype=dtype)).dtype


def promote_args(*args) -> Promotion:
    """
    Computes the common result type of ``args``.

    :param args: python numbers, numpy arrays or scalars, lists or tuples of
        numbers, or :class:`torch.Tensor` s.
    :rtype: Promotion
    :raises TypeError: on any other argument, or on complex values.
    """
    tensors = []
    arrays = []
    for x in args:
        if isinstance(x, torch.Tensor):
            if x.is_complex():
                raise TypeError("Unsupported complex tensor argument of dtype {}".format(x.dtype))
            tensors.append(x)
        elif isinstance(x, (np.ndarray, np.generic, list, tuple)):
            arrays.append(_numpy_dtype(x))
        elif not isinstance(x, numbers.Real):
            raise TypeError("Unsupported argument of type {}: {!r}".format(type(x).__name__, x))

    if tensors:
        dtypes = [t.dtype for t in tensors] + [_torch_dtype(d) for d in arrays]
        dtype = functools.reduce(torch.promote_types, dtypes)
        if not dtype.is_floating_point:
            dtype = torch.get_default_dtype()
        return Promotion("torch", dtype, tensors[0].device)
    if arrays:
        dtype = np.result_type(*arrays)
        if dtype.kind != "f":
            dtype = np.dtype(np.float64)
        return Promotion("numpy", dtype)
    return Promotion("python")
