# Copyright Contributors to the Probkit project.
# SPDX-License-Identifier: Apache-2.0

import numbers

import numpy as np
import torch
from numpy.testing import assert_allclose
from pytest import approx

"""
Contains test utilities for assertions and approximate comparison of python
numbers, numpy arrays and tensors.
"""


def is_iterable(obj):
    try:
        iter(obj)
        return True
    except TypeError:
        return False


def assert_tensors_equal(a, b, prec=0.0, msg=""):
    assert a.size() == b.size(), msg
    assert a.dtype == b.dtype, "{} vs {}: {}".format(a.dtype, b.dtype, msg)
    if isinstance(prec, numbers.Number) and prec == 0:
        assert torch.equal(torch.isnan(a), torch.isnan(b)), msg
        assert (a[~torch.isnan(a)] == b[~torch.isnan(b)]).all(), msg
        return
    if a.numel() == 0 and b.numel() == 0:
        return
    a, b = a.detach(), b.detach()
    # check that NaNs are in the same locations
    nan_mask = a != a
    assert torch.equal(nan_mask, b != b), msg
    diff = a - b
    diff[a == b] = 0  # handle inf
    diff[nan_mask] = 0
    diff = diff.abs()
    if isinstance(prec, torch.Tensor):
        assert (diff <= prec).all(), msg
    else:
        max_err = diff.max().item()
        assert max_err <= prec, msg


def assert_close(actual, expected, atol=1e-7, rtol=0, msg=""):
    if not msg:
        msg = "{} vs {}".format(actual, expected)
    if isinstance(actual, numbers.Number) and isinstance(expected, numbers.Number):
        assert actual == approx(expected, abs=atol, rel=rtol, nan_ok=True), msg
    elif torch.is_tensor(actual) and torch.is_tensor(expected):
        prec = atol + rtol * abs(expected.detach()) if rtol > 0 else atol
        assert_tensors_equal(actual, expected, prec, msg)
    elif isinstance(actual, np.ndarray) and isinstance(expected, np.ndarray):
        assert actual.shape == expected.shape, msg
        assert_allclose(actual, expected, atol=atol, rtol=rtol, equal_nan=True, err_msg=msg)
    elif type(actual) != type(expected):
        raise AssertionError("cannot compare {} and {}".format(type(actual), type(expected)))
    elif isinstance(actual, dict):
        assert set(actual.keys()) == set(expected.keys())
        for key, x_val in actual.items():
            assert_close(
                x_val,
                expected[key],
                atol=atol,
                rtol=rtol,
                msg="At key{}: {} vs {}".format(key, x_val, expected[key]),
            )
    elif isinstance(actual, str):
        assert actual == expected, msg
    elif is_iterable(actual) and is_iterable(expected):
        assert len(actual) == len(expected), msg
        for xi, yi in zip(actual, expected):
            assert_close(xi, yi, atol=atol, rtol=rtol, msg="{} vs {}".format(xi, yi))
    else:
        assert actual == expected, msg


def assert_equal(actual, expected, prec=1e-5, msg=""):
    if prec > 0.0:
        return assert_close(actual, expected, atol=prec, msg=msg)
    if not msg:
        msg = "{} vs {}".format(actual, expected)
    if isinstance(actual, numbers.Number) and isinstance(expected, numbers.Number):
        assert actual == expected or (actual != actual and expected != expected), msg
    elif type(actual) != type(expected):
        raise AssertionError("cannot compare {} and {}".format(type(actual), type(expected)))
    elif torch.is_tensor(actual) and torch.is_tensor(expected):
        assert_tensors_equal(actual, expected, msg=msg)
    elif isinstance(actual, np.ndarray):
        np.testing.assert_array_equal(actual, expected, err_msg=msg)
    else:
        assert actual == expected, msg

