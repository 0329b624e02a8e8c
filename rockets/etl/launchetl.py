from decimal import Decimal, InvalidOperation

from rockets.etl.baseetl import BaseETL, CatalogError
from rockets.models import Launch, LaunchOutcome, LaunchServiceProvider, Rocket
from rockets.utils.utils import parse_date


def parse_price(raw: dict) -> Decimal:
    value = raw.get("price")
    try:
        # str() first so float literals keep their printed digits
        price = Decimal(str(value))
    except InvalidOperation:
        raise CatalogError(f"{raw.get('id')}: price {value!r} is not a number")
    if not price.is_finite():
        raise CatalogError(f"{raw.get('id')}: price {value!r} is not finite")
    if price < 0:
        raise CatalogError(f"{raw.get('id')}: price cannot be negative")
    return price


def parse_outcome(raw: dict) -> LaunchOutcome:
    value = raw.get("outcome")
    if not isinstance(value, str):
        raise CatalogError(f"{raw.get('id')}: unknown launch outcome {value!r}")
    try:
        return LaunchOutcome(value.upper())
    except ValueError:
        raise CatalogError(f"{raw.get('id')}: unknown launch outcome {value!r}")


class LaunchETL(BaseETL[Launch]):
    name = "Launch"
    kind = Launch

    def transform(self, raw_data: list[dict]) -> list[Launch]:
        launches = []

        for raw in raw_data:
            try:
                launch_date = parse_date(raw.get("launch_date"))
            except (AttributeError, ValueError):
                raise CatalogError(
                    f"{raw.get('id')}: launch_date {raw.get('launch_date')!r} is not a date"
                )
            if launch_date is None:
                raise CatalogError(f"{raw.get('id')}: launch_date is required")

            launches.append(
                Launch(
                    # Identifiers
                    id=raw["id"],
                    # Timing
                    launch_date=launch_date,
                    # Hardware
                    launch_vehicle=self.resolve(
                        Rocket, raw.get("rocket_id"), raw, "rocket_id"
                    ),
                    launch_service_provider=self.resolve(
                        LaunchServiceProvider, raw.get("provider_id"), raw, "provider_id"
                    ),
                    # Mission
                    orbit=raw.get("orbit") or "",
                    launch_site=raw.get("launch_site") or "",
                    price=parse_price(raw),
                    outcome=parse_outcome(raw),
                    function=raw.get("function"),
                )
            )

        return launches
