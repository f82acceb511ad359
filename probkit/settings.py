# Copyright Contributors to the Probkit project.
# SPDX-License-Identifier: Apache-2.0

"""
Global settings controlling the default behavior of probkit evaluators.

Example usage::

    # Read settings.
    print(probkit.settings.get())  # all settings as a dict
    print(probkit.settings.get("domain_error"))

    # Change settings for the rest of the process.
    probkit.settings.set(domain_error="warn", domain_error_sentinel=0.0)

    # Scope a change to a block, or to a function as a decorator.
    with probkit.settings.context(domain_error="ignore"):
        lp = cauchy_log_prob(y, loc, scale)

    @probkit.settings.context(domain_error="ignore")
    def fit(...):
        ...

Settings are declared next to the module constant they control::

    @settings.register("domain_error", __name__, "DEFAULT_DOMAIN_ERROR")
    def _validate_domain_error(value):
        ...

Default Settings
----------------

{defaults}

Settings Interface
------------------
"""

# This module must not import other probkit modules.
import functools
import logging
from contextlib import contextmanager
from importlib import import_module
from typing import Any, Callable, Dict, Iterator, NamedTuple, Optional

_doc_template = __doc__
_log = logging.getLogger("probkit")


class _Setting(NamedTuple):
    modulename: str
    deepname: str  # may contain dots, e.g. "SomeClass.attribute"
    validator: Optional[Callable[[Any], None]]


_REGISTRY: Dict[str, _Setting] = {}


def _owner(setting: _Setting):
    # Returns the object holding the setting's final attribute, and its name.
    obj = import_module(setting.modulename)
    *path, attr = setting.deepname.split(".")
    for name in path:
        obj = getattr(obj, name)
    return obj, attr


def get(alias: Optional[str] = None) -> Any:
    """
    Gets one or all global settings.

    :param str alias: The name of a registered setting. If omitted, a dict of
        all settings is returned.
    :returns: The currently set value.
    :raises KeyError: if ``alias`` is not registered.
    """
    if alias is None:
        return {a: get(a) for a in sorted(_REGISTRY)}
    obj, attr = _owner(_REGISTRY[alias])
    return getattr(obj, attr)


def set(**kwargs) -> None:
    r"""
    Sets one or more settings, running each setting's validator first.

    :param \*\*kwargs: alias=value pairs.
    """
    for alias, value in kwargs.items():
        setting = _REGISTRY[alias]
        if setting.validator is not None:
            setting.validator(value)
        obj, attr = _owner(setting)
        setattr(obj, attr, value)
        _log.debug("probkit setting %s = %r", alias, value)


@contextmanager
def context(**kwargs) -> Iterator[None]:
    r"""
    Temporarily overrides one or more settings. Also usable as a decorator.

    :param \*\*kwargs: alias=value pairs.
    """
    old = {alias: get(alias) for alias in kwargs}
    try:
        set(**kwargs)
        yield
    finally:
        set(**old)


def register(
    alias: str,
    modulename: str,
    deepname: str,
    validator: Optional[Callable[[Any], None]] = None,
) -> Callable:
    """
    Registers a global setting. Call this in the module defining the setting,
    either directly::

        settings.register("my_setting", __name__, "MY_SETTING")

    or as a decorator on a validator, which is checked against the current
    value immediately and against every later :func:`set`::

        @settings.register("my_setting", __name__, "MY_SETTING")
        def _validate_my_setting(value):
            if value <= 0:
                raise ValueError("my_setting must be positive")

    :param str alias: A python identifier, lower snake case preferred.
    :param str modulename: The module declaring the setting, usually
        ``__name__``.
    :param str deepname: A ``.``-separated attribute path inside that module.
    :param callable validator: Optional callable that raises on bad values.
    """
    global __doc__
    assert isinstance(alias, str) and alias.isidentifier()
    assert isinstance(modulename, str)
    assert isinstance(deepname, str)
    _REGISTRY[alias] = _Setting(modulename, deepname, validator)
    __doc__ = _doc_template.format(
        defaults="\n".join(f"- {a} = {get(a)!r}" for a in sorted(_REGISTRY))
    )

    if validator is None:
        # Allow use as a decorator factory; callers may ignore the result.
        return functools.partial(register, alias, modulename, deepname)
    validator(get(alias))
    return validator
