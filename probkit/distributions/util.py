# Copyright Contributors to the Probkit project.
# SPDX-License-Identifier: Apache-2.0

import torch


def is_constant(x):
    """
    Check if argument is held fixed with respect to differentiation. False for
    :class:`~torch.Tensor` s that require grad; true for everything else.
    """
    return not (isinstance(x, torch.Tensor) and x.requires_grad)


def include_summand(propto, *active):
    """
    Decides whether an additive term of a log density must be computed.

    With ``propto=False`` every term is included. With ``propto=True`` a term
    is included only if at least one argument it depends on is active, so
    constants (terms depending on no arguments) are always dropped.

    :param bool propto: Whether to compute the log density only up to an
        additive constant.
    :param bool active: One flag per argument the term depends on.
    :rtype: bool
    """
    return not propto or any(active)


def resolve_active(active, **args):
    """
    Returns one activity flag per keyword argument, in order.

    :param active: Either ``None``, in which case an argument is active iff it
        is not :func:`is_constant`, or an iterable of argument names that the
        caller holds active; all other arguments are held fixed.
    :param args: The named arguments of the evaluator.
    :rtype: tuple
    :raises ValueError: if ``active`` names an unknown argument.
    """
    if active is None:
        return tuple(not is_constant(value) for value in args.values())
    if isinstance(active, str):
        active = (active,)
    active = frozenset(active)
    unknown = active.difference(args)
    if unknown:
        raise ValueError(
            "Unknown active argument(s) {}, expected a subset of {}".format(
                sorted(unknown), list(args)
            )
        )
    return tuple(name in active for name in args)
