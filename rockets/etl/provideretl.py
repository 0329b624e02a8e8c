from rockets.etl.baseetl import BaseETL, CatalogError, require_text
from rockets.models import LaunchServiceProvider


def parse_year_founded(raw: dict) -> int:
    value = raw.get("year_founded")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise CatalogError(f"{raw.get('id')}: year_founded {value!r} is not a year")


class ProviderETL(BaseETL[LaunchServiceProvider]):
    name = "Provider"
    kind = LaunchServiceProvider

    def transform(self, raw_data: list[dict]) -> list[LaunchServiceProvider]:
        return [
            LaunchServiceProvider(
                id=raw["id"],
                name=require_text(raw, "name"),
                year_founded=parse_year_founded(raw),
                country=require_text(raw, "country"),
                headquarters=raw.get("headquarters"),
            )
            for raw in raw_data
        ]
