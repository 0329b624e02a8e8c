"""Builders for catalog records used across the test suite."""

from datetime import date
from decimal import Decimal

from rockets.dataaccess import InMemoryRepository
from rockets.models import Launch, LaunchOutcome, LaunchServiceProvider, Rocket

S = LaunchOutcome.SUCCESSFUL
F = LaunchOutcome.FAILED

COUNTRIES = ["USA", "Japan", "Australia", "NZ", "Ireland"]


def make_provider(name="SpaceX", year_founded=2002, country="USA", id=None):
    return LaunchServiceProvider(
        id=id or f"{name}-{year_founded}",
        name=name,
        year_founded=year_founded,
        country=country,
    )


def make_rocket(name="Falcon 9", country="USA", manufacturer=None, id=None):
    return Rocket(
        id=id or name,
        name=name,
        country=country,
        manufacturer=manufacturer or make_provider(),
    )


def make_launch(
    id,
    rocket,
    provider=None,
    launch_date=date(2017, 1, 1),
    price="0",
    outcome=S,
    orbit="LEO",
):
    return Launch(
        id=id,
        launch_date=launch_date,
        launch_vehicle=rocket,
        launch_service_provider=provider or rocket.manufacturer,
        orbit=orbit,
        launch_site="VAFB",
        price=Decimal(price),
        outcome=outcome,
    )


def build_repository(providers=(), rockets=(), launches=()) -> InMemoryRepository:
    repository = InMemoryRepository()
    repository.replace_all(LaunchServiceProvider, providers)
    repository.replace_all(Rocket, rockets)
    repository.replace_all(Launch, launches)
    return repository
