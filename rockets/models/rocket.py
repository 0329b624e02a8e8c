from dataclasses import dataclass, field
from typing import Optional

from rockets.models.provider import LaunchServiceProvider


@dataclass(frozen=True)
class Rocket:
    # Identity
    id: str = field(compare=False)
    name: str
    country: str
    manufacturer: LaunchServiceProvider

    # Capacity
    mass_to_leo: Optional[str] = field(default=None, compare=False)
    mass_to_gto: Optional[str] = field(default=None, compare=False)
    mass_to_other: Optional[str] = field(default=None, compare=False)

    # Service history
    first_year_flight: Optional[int] = field(default=None, compare=False)
    latest_year_flight: Optional[int] = field(default=None, compare=False)
