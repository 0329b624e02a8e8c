"""Flatten catalog records into DataFrames for display."""

import pandas as pd

from rockets.models import Launch, LaunchServiceProvider, Rocket

LAUNCH_COLUMNS = [
    "id",
    "launch_date",
    "rocket",
    "country",
    "provider",
    "orbit",
    "launch_site",
    "price",
    "outcome",
    "function",
]


def launches_frame(launches: list[Launch]) -> pd.DataFrame:
    rows = [
        {
            "id": launch.id,
            "launch_date": pd.Timestamp(launch.launch_date),
            "rocket": launch.launch_vehicle.name,
            "country": launch.launch_vehicle.country,
            "provider": launch.launch_service_provider.name,
            "orbit": launch.orbit,
            "launch_site": launch.launch_site,
            # Decimal kept as object dtype so sums stay exact
            "price": launch.price,
            "outcome": launch.outcome.value,
            "function": launch.function,
        }
        for launch in launches
    ]
    return pd.DataFrame(rows, columns=LAUNCH_COLUMNS)


def rockets_frame(rockets: list[Rocket]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "id": r.id,
                "name": r.name,
                "country": r.country,
                "manufacturer": r.manufacturer.name,
                "mass_to_leo": r.mass_to_leo,
                "mass_to_gto": r.mass_to_gto,
                "first_year_flight": r.first_year_flight,
                "latest_year_flight": r.latest_year_flight,
            }
            for r in rockets
        ]
    )


def providers_frame(providers: list[LaunchServiceProvider]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "id": p.id,
                "name": p.name,
                "year_founded": p.year_founded,
                "country": p.country,
                "headquarters": p.headquarters,
            }
            for p in providers
        ]
    )


def launches_per_country(launches: list[Launch]) -> pd.DataFrame:
    df = launches_frame(launches)
    return (
        df.groupby("country", sort=False)
        .size()
        .reset_index(name="launches")
        .sort_values("launches", ascending=False, kind="stable")
        .reset_index(drop=True)
    )
