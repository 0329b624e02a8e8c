"""Top-k rankings and aggregations over a launch catalog snapshot.

Every query loads a fresh snapshot from the repository, validates its
arguments against it, then filters, groups, sorts and truncates in memory.

Ordering of ties:
- occurrence and revenue rankings keep the order in which each group first
  appears in the snapshot
- date and price rankings keep snapshot order among equal keys
- ``dominant_country`` returns the first maximal country seen

All of these fall out of Python's stable sort (stable under ``reverse=True``
too) and insertion-ordered dicts.
"""

import logging
from collections import Counter
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Hashable, Iterable, TypeVar

from rockets.dataaccess import Repository
from rockets.mining.errors import InvalidArgumentError, NullArgumentError
from rockets.models import Launch, LaunchOutcome, LaunchServiceProvider, Rocket

logger = logging.getLogger(__name__)

R = TypeVar("R")
K = TypeVar("K", bound=Hashable)

RATE_PLACES = Decimal("0.01")


def _require(value, name: str) -> None:
    if value is None:
        raise NullArgumentError(f"{name} cannot be null")


def _check_count(k) -> None:
    _require(k, "k")
    # bool is an int subclass but never a meaningful count
    if isinstance(k, bool) or not isinstance(k, int) or k < 0:
        raise InvalidArgumentError("Input integer cannot be negative")


def _check_upper_bound(k: int, available: int, noun: str) -> None:
    if k > available:
        raise InvalidArgumentError(f"Input integer is higher than the number of {noun}")


def top_k_by_occurrence(
    records: Iterable[R], classify: Callable[[R], K], k: int, noun: str
) -> list[K]:
    """Return the ``k`` group keys with the most members, most frequent first.

    Args:
        records: Eligible records, already filtered
        classify: Maps a record to its group key
        k: Number of keys to return
        noun: Plural name of the group keys, used in the error message

    Raises:
        InvalidArgumentError: If ``k`` exceeds the number of distinct keys
    """
    _check_count(k)
    occurrence = Counter(classify(record) for record in records)
    _check_upper_bound(k, len(occurrence), noun)

    ranked = sorted(occurrence.items(), key=lambda item: item[1], reverse=True)
    return [key for key, _ in ranked[:k]]


def _in_year(launches: Iterable[Launch], year: int) -> list[Launch]:
    return [launch for launch in launches if launch.launch_date.year == year]


class RocketMiner:
    def __init__(self, repository: Repository) -> None:
        self.repository = repository

    def _launches(self) -> list[Launch]:
        launches = self.repository.load_all(Launch)
        logger.debug("Snapshot holds %d launches", len(launches))
        return launches

    def _successful_launches(self) -> list[Launch]:
        return [
            launch
            for launch in self._launches()
            if launch.outcome is LaunchOutcome.SUCCESSFUL
        ]

    def most_launched_rockets(self, k: int) -> list[Rocket]:
        """Top-k rockets by number of successful launches."""
        logger.info("Find %s most launched rockets", k)
        return top_k_by_occurrence(
            self._successful_launches(),
            lambda launch: launch.launch_vehicle,
            k,
            "rockets",
        )

    def most_reliable_launch_service_providers(
        self, k: int
    ) -> list[LaunchServiceProvider]:
        """Top-k providers by number of successful launches."""
        logger.info("Find %s most reliable launch service providers", k)
        return top_k_by_occurrence(
            self._successful_launches(),
            lambda launch: launch.launch_service_provider,
            k,
            "launch service providers",
        )

    def most_recent_launches(self, k: int) -> list[Launch]:
        logger.info("Find most recent %s launches", k)
        _check_count(k)
        launches = self._launches()
        _check_upper_bound(k, len(launches), "launches")
        ranked = sorted(launches, key=lambda launch: launch.launch_date, reverse=True)
        return ranked[:k]

    def most_expensive_launches(self, k: int) -> list[Launch]:
        logger.info("Find most expensive %s launches", k)
        _check_count(k)
        launches = self._launches()
        _check_upper_bound(k, len(launches), "launches")
        ranked = sorted(launches, key=lambda launch: launch.price, reverse=True)
        return ranked[:k]

    def dominant_country(self, orbit: str) -> str:
        """Return the country whose rockets were launched most often to ``orbit``.

        Each matching launch counts once, so a rocket flown three times to the
        orbit adds three to its country.
        """
        logger.info("Find dominant country in orbit %s", orbit)
        _require(orbit, "orbit")

        countries = [
            launch.launch_vehicle.country
            for launch in self._launches()
            if launch.orbit == orbit
        ]
        if not countries:
            raise InvalidArgumentError("There are no rockets in this orbit.")

        country, _ = Counter(countries).most_common(1)[0]
        return country

    def highest_revenue_launch_service_providers(
        self, k: int, year: int
    ) -> list[LaunchServiceProvider]:
        """Top-k providers by summed launch price within ``year``.

        Raises:
            InvalidArgumentError: If ``year`` is in the future, has no launches,
                or ``k`` exceeds the launches or providers in that year
        """
        logger.info("Find %s highest revenue launch service providers in %s", k, year)
        _check_count(k)
        _require(year, "year")
        if year > date.today().year:
            raise InvalidArgumentError(
                "Input integer year is beyond a valid year of launches"
            )

        launches = _in_year(self._launches(), year)
        if not launches:
            raise InvalidArgumentError(f"There are no launches in year {year}")
        _check_upper_bound(k, len(launches), "launches")

        revenue: dict[LaunchServiceProvider, Decimal] = {}
        for launch in launches:
            provider = launch.launch_service_provider
            revenue[provider] = revenue.get(provider, Decimal(0)) + launch.price
        _check_upper_bound(k, len(revenue), "launch service providers")

        ranked = sorted(revenue.items(), key=lambda item: item[1], reverse=True)
        return [provider for provider, _ in ranked[:k]]

    def launches_from_country(self, country: str) -> list[Launch]:
        logger.info("Find launches from country %s", country)
        _require(country, "country")

        launches = [
            launch
            for launch in self._launches()
            if launch.launch_vehicle.country == country
        ]
        if not launches:
            raise InvalidArgumentError("There are no launches from this country")
        return launches

    def successful_launch_rate_in_year(self, year: int) -> Decimal:
        """Share of launches in ``year`` that succeeded, rounded to 2 places."""
        logger.info("Find successful launch rate in %s", year)
        _require(year, "year")

        launches = _in_year(self._launches(), year)
        if not launches:
            raise InvalidArgumentError(f"There are no launches in year {year}")

        successful = sum(
            1 for launch in launches if launch.outcome is LaunchOutcome.SUCCESSFUL
        )
        rate = Decimal(successful) / Decimal(len(launches))
        return rate.quantize(RATE_PLACES, rounding=ROUND_HALF_UP)
