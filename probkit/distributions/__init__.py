# Copyright Contributors to the Probkit project.
# SPDX-License-Identifier: Apache-2.0

from probkit.distributions.cauchy import (
    cauchy_ccdf,
    cauchy_cdf,
    cauchy_log_ccdf,
    cauchy_log_cdf,
    cauchy_log_prob,
)
from probkit.distributions.checks import (
    check_finite,
    check_not_nan,
    check_positive,
    check_positive_finite,
    check_representable,
)
from probkit.distributions.constants import LOG_PI, NEG_LOG_PI, PI
from probkit.distributions.policy import (
    DomainError,
    DomainWarning,
    NarrowingError,
    NonFiniteError,
    NonPositiveError,
    NotANumberError,
    Policy,
    default_policy,
)
from probkit.distributions.promotion import Promotion, promote_args
from probkit.distributions.util import include_summand, is_constant

__all__ = [
    "DomainError",
    "DomainWarning",
    "LOG_PI",
    "NEG_LOG_PI",
    "NarrowingError",
    "NonFiniteError",
    "NonPositiveError",
    "NotANumberError",
    "PI",
    "Policy",
    "Promotion",
    "cauchy_ccdf",
    "cauchy_cdf",
    "cauchy_log_ccdf",
    "cauchy_log_cdf",
    "cauchy_log_prob",
    "check_finite",
    "check_not_nan",
    "check_positive",
    "check_positive_finite",
    "check_representable",
    "default_policy",
    "include_summand",
    "is_constant",
    "promote_args",
]
