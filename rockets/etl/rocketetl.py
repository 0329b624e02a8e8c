from rockets.etl.baseetl import BaseETL, require_text
from rockets.models import LaunchServiceProvider, Rocket


class RocketETL(BaseETL[Rocket]):
    name = "Rocket"
    kind = Rocket

    def transform(self, raw_data: list[dict]) -> list[Rocket]:
        rockets = []
        for raw in raw_data:
            manufacturer = self.resolve(
                LaunchServiceProvider, raw.get("manufacturer_id"), raw, "manufacturer_id"
            )
            rockets.append(
                Rocket(
                    # Identity
                    id=raw["id"],
                    name=require_text(raw, "name"),
                    country=require_text(raw, "country"),
                    manufacturer=manufacturer,
                    # Capacity
                    mass_to_leo=raw.get("mass_to_leo"),
                    mass_to_gto=raw.get("mass_to_gto"),
                    mass_to_other=raw.get("mass_to_other"),
                    # Service history
                    first_year_flight=raw.get("first_year_flight"),
                    latest_year_flight=raw.get("latest_year_flight"),
                )
            )

        return rockets
