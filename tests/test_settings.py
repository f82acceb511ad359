# Copyright Contributors to the Probkit project.
# SPDX-License-Identifier: Apache-2.0

import math

import pytest

from probkit import settings
from probkit.distributions import cauchy_cdf, default_policy

_TEST_SETTING: float = 0.1

pytestmark = pytest.mark.stage("unit")


def test_settings():
    v0 = settings.get()
    assert isinstance(v0, dict)
    assert all(isinstance(alias, str) for alias in v0)
    assert settings.get("domain_error") == "raise"
    assert math.isnan(settings.get("domain_error_sentinel"))


def test_register():
    with pytest.raises(KeyError):
        settings.get("test_setting")

    @settings.register("test_setting", "tests.test_settings", "_TEST_SETTING")
    def _validate(value):
        assert isinstance(value, float)
        assert 0 < value

    # Test simple get and set.
    assert settings.get("test_setting") == 0.1
    settings.set(test_setting=0.2)
    assert settings.get("test_setting") == 0.2
    with pytest.raises(AssertionError):
        settings.set(test_setting=-0.1)
    assert settings.get("test_setting") == 0.2

    # Test context manager.
    with settings.context(test_setting=0.3):
        assert settings.get("test_setting") == 0.3
    assert settings.get("test_setting") == 0.2

    # Test decorator.
    @settings.context(test_setting=0.4)
    def fn():
        assert settings.get("test_setting") == 0.4

    fn()
    assert settings.get("test_setting") == 0.2


@pytest.mark.parametrize("value", ["bogus", None, 1])
def test_domain_error_setting_is_validated(value):
    with pytest.raises(ValueError):
        settings.set(domain_error=value)
    assert settings.get("domain_error") == "raise"


@pytest.mark.parametrize("value", ["nan", None, True])
def test_sentinel_setting_is_validated(value):
    with pytest.raises(ValueError):
        settings.set(domain_error_sentinel=value)


def test_context_changes_default_policy():
    with settings.context(domain_error="ignore", domain_error_sentinel=-1.0):
        policy = default_policy()
        assert policy.domain_error == "ignore"
        assert policy.sentinel == -1.0
        assert cauchy_cdf(0.0, 0.0, -1.0) == -1.0
    assert default_policy().domain_error == "raise"
