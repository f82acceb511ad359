# Copyright Contributors to the Probkit project.
# SPDX-License-Identifier: Apache-2.0

"""
Error policies decide what happens when an evaluator receives an argument
outside its domain, e.g. a negative scale parameter.

A :class:`Policy` either raises the :class:`DomainError` describing the bad
argument, or lets the evaluator return early with the policy's ``sentinel``
(``nan`` by default). Evaluators fall back to :func:`default_policy`, which
follows the ``domain_error`` and ``domain_error_sentinel`` settings::

    with probkit.settings.context(domain_error="ignore"):
        assert math.isnan(cauchy_cdf(0.0, 0.0, -1.0))
"""

import math
import numbers
import sys
import warnings
from dataclasses import dataclass
from typing import Callable, Union

from probkit import settings
from probkit.logger import log

DOMAIN_ERROR_MODES = ("raise", "warn", "log", "ignore")

DEFAULT_DOMAIN_ERROR = "raise"
DEFAULT_SENTINEL = math.nan


class DomainError(ValueError):
    """
    Raised when an argument violates a requirement of the function it was
    passed to.

    :param str function: Name of the function that rejected the argument.
    :param str name: Human readable label of the argument.
    :param value: The offending value; for arrays and tensors, the first
        offending element.
    """

    requirement = "valid"

    def __init__(self, function, name, value):
        self.function = function
        self.name = name
        self.value = value
        super().__init__(
            "{}: {} is {}, but must be {}".format(function, name, value, self.requirement)
        )

    def __reduce__(self):
        return type(self), (self.function, self.name, self.value)


class NotANumberError(DomainError):
    requirement = "not nan"


class NonFiniteError(DomainError):
    requirement = "finite"


class NonPositiveError(DomainError):
    requirement = "> 0"


class NarrowingError(DomainError):
    requirement = "representable in the promoted dtype"


class DomainWarning(UserWarning):
    pass


def _check_mode(mode):
    if not callable(mode) and mode not in DOMAIN_ERROR_MODES:
        raise ValueError(
            "Expected domain_error to be one of {} or a callable, but got {!r}".format(
                ", ".join(DOMAIN_ERROR_MODES), mode
            )
        )


def _check_sentinel(value):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValueError("Expected a real sentinel value, but got {!r}".format(value))


def _caller_stacklevel():
    # stacklevel, relative to the caller of this function, of the first frame
    # outside the probkit package
    frame = sys._getframe(1)
    level = 1
    while frame.f_back is not None and frame.f_globals.get("__name__", "").startswith("probkit."):
        frame = frame.f_back
        level += 1
    return level


@dataclass(frozen=True)
class Policy:
    """
    Strategy for handling :class:`DomainError` s.

    ``domain_error`` is one of

    - ``"raise"``: raise the error to the caller;
    - ``"warn"``: emit a :class:`DomainWarning` and return ``sentinel``;
    - ``"log"``: log a warning on the ``probkit`` logger and return
      ``sentinel``;
    - ``"ignore"``: silently return ``sentinel``;
    - a callable, which is called with the error and may raise; if it returns,
      the evaluator returns ``sentinel``.

    :param domain_error: How to handle domain errors.
    :param float sentinel: The value returned in place of a result when the
        error is not raised.
    """

    domain_error: Union[str, Callable[[DomainError], None]] = "raise"
    sentinel: float = math.nan

    def __post_init__(self):
        _check_mode(self.domain_error)
        _check_sentinel(self.sentinel)

    def handle(self, error: DomainError) -> None:
        """
        Disposes of ``error``. Returns normally only when the caller should
        return :attr:`sentinel`.
        """
        mode = self.domain_error
        if callable(mode):
            mode(error)
        elif mode == "raise":
            raise error
        elif mode == "warn":
            warnings.warn(str(error), DomainWarning, stacklevel=_caller_stacklevel())
        elif mode == "log":
            log.warning("%s; returning %s", error, self.sentinel)


def default_policy() -> Policy:
    """
    Returns the policy used when an evaluator is called without one, as
    configured by the ``domain_error`` and ``domain_error_sentinel`` settings.
    """
    return Policy(DEFAULT_DOMAIN_ERROR, DEFAULT_SENTINEL)


@settings.register("domain_error", __name__, "DEFAULT_DOMAIN_ERROR")
def _validate_domain_error(value):
    _check_mode(value)


@settings.register("domain_error_sentinel", __name__, "DEFAULT_SENTINEL")
def _validate_sentinel(value):
    _check_sentinel(value)
