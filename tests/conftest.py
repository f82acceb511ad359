# Copyright Contributors to the Probkit project.
# SPDX-License-Identifier: Apache-2.0

import numpy as np
import pytest
import torch

from probkit import settings


def pytest_configure(config):
    config.addinivalue_line("markers", "init(rng_seed): initialize the RNG using the seed provided.")
    config.addinivalue_line("markers", "stage(NAME): mark test to run when testing stage matches NAME.")


def pytest_addoption(parser):
    parser.addoption(
        "--stage",
        action="append",
        metavar="NAME",
        default=[],
        help="Only run tests matching the stage NAME.",
    )


def pytest_runtest_setup(item):
    marker = item.get_closest_marker("init")
    if marker:
        rng_seed = marker.kwargs["rng_seed"]
        torch.manual_seed(rng_seed)
        np.random.seed(rng_seed)


def pytest_collection_modifyitems(config, items):
    stages = set(config.getoption("--stage"))
    if not stages or "all" in stages:
        return
    selected, deselected = [], []
    for item in items:
        # the closest marker is the most specific one: function, class, module
        marker = item.get_closest_marker("stage")
        if marker is not None and stages.isdisjoint(marker.args):
            deselected.append(item)
        else:
            selected.append(item)
    config.hook.pytest_deselected(items=deselected)
    items[:] = selected


@pytest.fixture(autouse=True)
def restore_settings():
    old = settings.get()
    yield
    settings.set(**old)
