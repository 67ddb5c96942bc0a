import locale
import random as rand
from collections.abc import Generator
from contextlib import nullcontext

import numpy as np
from pytest import RaisesExc, fixture, mark
from settings import COLLATE_LOCALE

from orderedcollection import OrderedCollection


@fixture(autouse=True)
def fix_randomness() -> None:
    rand.seed(0)
    np.random.seed(0)


@fixture(autouse=True)
def fix_collate_locale() -> Generator[None, None, None]:
    # Locale-aware sorting depends on the process-wide LC_COLLATE setting, so we pin it for each
    # test and restore whatever was there before.
    previous_locale = locale.setlocale(locale.LC_COLLATE)
    locale.setlocale(locale.LC_COLLATE, COLLATE_LOCALE)
    yield
    locale.setlocale(locale.LC_COLLATE, previous_locale)


def pytest_addoption(parser):
    parser.addoption("--runslow", action="store_true", default=False, help="run slow tests")


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    skip_slow = mark.skip(reason="Slow test. Use --runslow to run it.")

    for item in items:
        if "slow" in item.keywords and not config.getoption("--runslow"):
            item.add_marker(skip_slow)


def pytest_make_parametrize_id(config, val, argname):
    MAX_SIZE = 40
    optional_string = None  # Returning None means using pytest's way of making the string

    if isinstance(val, OrderedCollection):
        optional_string = "C" + str(val)  # C to indicate that it's a collection
    elif isinstance(val, (tuple, list, set)) and len(val) < 20:
        optional_string = str(val)
    elif isinstance(val, RaisesExc):
        optional_string = " or ".join([f"{exc.__name__}" for exc in val.expected_exceptions])
    elif isinstance(val, nullcontext):
        optional_string = "does_not_raise()"

    if isinstance(optional_string, str) and len(optional_string) > MAX_SIZE:
        optional_string = optional_string[: MAX_SIZE - 3] + "+++"  # Can't use dots with pytest

    return optional_string
