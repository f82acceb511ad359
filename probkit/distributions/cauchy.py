# Copyright Contributors to the Probkit project.
# SPDX-License-Identifier: Apache-2.0

r"""
Cauchy (a.k.a. Lorentz) distribution functions.

The Cauchy distribution with location :math:`\mu` and scale :math:`\sigma > 0`
has density

.. math::

    f(y \mid \mu, \sigma) = \frac{1}{\pi \sigma}
        \left(1 + \left(\frac{y - \mu}{\sigma}\right)^2\right)^{-1}

and distribution function

.. math::

    F(y \mid \mu, \sigma) = \frac{1}{\pi}
        \arctan\left(\frac{y - \mu}{\sigma}\right) + \frac{1}{2}.

Every function here accepts python numbers, numpy arrays (or lists) and
:class:`torch.Tensor` s, broadcasts them elementwise, and returns a result of
the type chosen by :func:`~probkit.distributions.promotion.promote_args`.
Arguments are validated in order: the variate must not be nan, the location
must be finite and the scale must be finite and positive. These checks see the
arguments as passed; python scalars that then overflow or underflow in the
promoted dtype are rejected with a
:class:`~probkit.distributions.policy.NarrowingError`. Invalid arguments are
handled by ``policy``, see :mod:`probkit.distributions.policy`.
"""

from probkit.distributions.checks import (
    check_finite,
    check_not_nan,
    check_positive,
    check_representable,
)
from probkit.distributions.constants import NEG_LOG_PI, PI
from probkit.distributions.policy import default_policy
from probkit.distributions.promotion import promote_args
from probkit.distributions.util import include_summand, resolve_active
from probkit.ops.special import atan2, log, log1p, square
from probkit.util import broadcast_shape, shape_of


def _prepare(function, y, loc, scale, policy):
    # Returns (promotion, shape, y, loc, scale, ok). Checks see the arguments
    # as passed, before any cast to the promoted dtype.
    promotion = promote_args(y, loc, scale)
    shape = broadcast_shape(shape_of(y), shape_of(loc), shape_of(scale))
    ok = (
        check_not_nan(function, y, "Random variate, y,", policy)
        and check_finite(function, loc, "Location parameter, loc,", policy)
        and check_finite(function, scale, "Scale parameter, scale,", policy)
        and check_positive(function, scale, "Scale parameter, scale,", policy)
    )
    if not ok:
        return promotion, shape, y, loc, scale, False
    cast = promotion.cast(y), promotion.cast(loc), promotion.cast(scale)
    ok = (
        check_representable(function, y, cast[0], "Random variate, y,", policy)
        and check_representable(function, loc, cast[1], "Location parameter, loc,", policy)
        and check_representable(function, scale, cast[2], "Scale parameter, scale,", policy)
    )
    return (promotion, shape) + cast + (ok,)


def cauchy_log_prob(y, loc, scale, propto=False, active=None, policy=None):
    """
    Log probability density of a Cauchy distribution.

    With ``propto=True`` the result is only correct up to an additive constant
    that does not depend on the active arguments: ``-log(pi)`` is dropped, and
    ``-log(scale)`` is dropped unless ``scale`` is active.

    :param y: The variate.
    :param loc: The location parameter.
    :param scale: The scale parameter, half width at half maximum.
    :param bool propto: Whether to drop terms that are constant in the active
        arguments.
    :param active: Names among ``"y"``, ``"loc"``, ``"scale"`` of the
        arguments that vary in the caller's comparison. Defaults to the
        arguments that are tensors requiring grad. Only used if ``propto``.
    :param policy: A :class:`~probkit.distributions.policy.Policy`; defaults
        to :func:`~probkit.distributions.policy.default_policy`.
    """
    if policy is None:
        policy = default_policy()
    y_active, loc_active, scale_active = resolve_active(active, y=y, loc=loc, scale=scale)
    promotion, shape, y, loc, scale, ok = _prepare(
        "probkit.cauchy_log_prob", y, loc, scale, policy
    )
    if not ok:
        return promotion.full(shape, policy.sentinel)

    lp = promotion.zeros(shape)
    if include_summand(propto):
        lp = lp + NEG_LOG_PI
    if include_summand(propto, scale_active):
        lp = lp - log(scale)
    if include_summand(propto, y_active, loc_active, scale_active):
        lp = lp - log1p(square((y - loc) / scale))
    return lp


def cauchy_cdf(y, loc, scale, policy=None):
    """
    Cumulative distribution function of a Cauchy distribution,
    ``atan2(y - loc, scale) / pi + 0.5``. This is exactly ``0.5`` at
    ``y == loc``.

    See :func:`cauchy_log_prob` for arguments.
    """
    if policy is None:
        policy = default_policy()
    promotion, shape, y, loc, scale, ok = _prepare("probkit.cauchy_cdf", y, loc, scale, policy)
    if not ok:
        return promotion.full(shape, policy.sentinel)
    return atan2(y - loc, scale) / PI + 0.5


def cauchy_ccdf(y, loc, scale, policy=None):
    """
    Complementary distribution function ``1 - cauchy_cdf(y, loc, scale)``,
    accurate in the upper tail.
    """
    if policy is None:
        policy = default_policy()
    promotion, shape, y, loc, scale, ok = _prepare("probkit.cauchy_ccdf", y, loc, scale, policy)
    if not ok:
        return promotion.full(shape, policy.sentinel)
    return atan2(scale, y - loc) / PI


def cauchy_log_cdf(y, loc, scale, policy=None):
    """
    Log of :func:`cauchy_cdf`, accurate in the lower tail.
    """
    if policy is None:
        policy = default_policy()
    promotion, shape, y, loc, scale, ok = _prepare(
        "probkit.cauchy_log_cdf", y, loc, scale, policy
    )
    if not ok:
        return promotion.full(shape, policy.sentinel)
    # atan2(scale, loc - y) == atan2(y - loc, scale) + pi / 2 for scale > 0
    return log(atan2(scale, loc - y) / PI)


def cauchy_log_ccdf(y, loc, scale, policy=None):
    """
    Log of :func:`cauchy_ccdf`.
    """
    if policy is None:
        policy = default_policy()
    promotion, shape, y, loc, scale, ok = _prepare(
        "probkit.cauchy_log_ccdf", y, loc, scale, policy
    )
    if not ok:
        return promotion.full(shape, policy.sentinel)
    return log(atan2(scale, y - loc) / PI)
