"""
Shared fixtures for launch analytics tests.

The ``launches`` fixture is a small 2017 catalog:
- 10 providers, 5 rockets, 11 launches, all to LEO
- the last launch repeats the values of the one before it
"""

from datetime import date

import pytest

from rockets.dataaccess import InMemoryRepository
from rockets.mining import RocketMiner
from tests.helpers import (
    COUNTRIES,
    F,
    S,
    build_repository,
    make_launch,
    make_provider,
    make_rocket,
)


@pytest.fixture
def providers():
    return [
        make_provider("ULA", 1990, "USA"),
        make_provider("SpaceX", 2002, "USA"),
        make_provider("ESA", 1975, "Europe "),
        make_provider("ULA", 1991, "USA"),
        make_provider("ULA", 1992, "USA"),
        make_provider("SpaceX", 2003, "USA"),
        make_provider("SpaceX", 2004, "USA"),
        make_provider("ESA", 1976, "Europe "),
        make_provider("ESA", 1977, "Europe "),
        make_provider("ESA", 1978, "Europe "),
    ]


@pytest.fixture
def rockets(providers):
    provider_index = [0, 0, 0, 1, 1]
    country_index = [1, 1, 2, 0, 4]
    return [
        make_rocket(
            f"rocket_{i}",
            COUNTRIES[country_index[i]],
            providers[provider_index[i]],
        )
        for i in range(5)
    ]


@pytest.fixture
def launches(providers, rockets):
    months = [1, 6, 4, 3, 4, 11, 6, 5, 12, 5]
    rocket_index = [0, 0, 0, 0, 1, 1, 1, 2, 2, 3]
    prices = [
        "10",
        "20000",
        "1000000",
        "10000",
        "15000",
        "100000",
        "1000.50",
        "5000000",
        "90000000",
        "10000.99",
    ]
    outcomes = [S, S, S, S, S, F, F, F, F, S]

    launches = [
        make_launch(
            f"launch-{i}",
            rockets[rocket_index[i]],
            providers[i],
            date(2017, months[i], 1),
            prices[i],
            outcomes[i],
        )
        for i in range(10)
    ]
    # Same values as the last launch, under a new id
    launches.append(
        make_launch(
            "launch-10",
            rockets[rocket_index[9]],
            providers[9],
            date(2017, months[9], 1),
            prices[9],
            outcomes[9],
        )
    )
    return launches


@pytest.fixture
def repository(providers, rockets, launches):
    return build_repository(providers, rockets, launches)


@pytest.fixture
def miner(repository):
    return RocketMiner(repository)


@pytest.fixture
def empty_miner():
    return RocketMiner(InMemoryRepository())
